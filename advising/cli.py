"""
Command-Line Interface for the Advising System.

This module provides the interactive menu. It handles user input and
hands everything else to AdvisingAssistant.

MENU:
-----
1. Load Data Structure  - load (or reload) the course file
2. Print Course List    - all courses in alphanumeric order
3. Print Course         - one course with its prerequisites
9. Exit

Run with:
    python -m advising [courses.csv] [--delimiter ","]
"""

import argparse

from .advisor import AdvisingAssistant
from .config import DEFAULT_DELIMITER, MENU_LOAD, MENU_LIST, MENU_COURSE, MENU_EXIT
from .ui import TerminalDisplay


def _prompt(text: str):
    """input() that returns None when the input stream is closed."""
    try:
        return input(text).strip()
    except (EOFError, KeyboardInterrupt):
        return None


def _parse_choice(text: str):
    """Menu choice as an int ("01" -> 1), or None if it is not a number."""
    try:
        return int(text)
    except ValueError:
        return None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="abcu-advising",
        description="Load a course file and browse courses and prerequisites.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="course file path or http(s) URL (prompted for if omitted)",
    )
    parser.add_argument(
        "--delimiter",
        default=DEFAULT_DELIMITER,
        help=f"field separator (default: {DEFAULT_DELIMITER!r})",
    )
    return parser


def main(argv=None) -> int:
    """
    Run the interactive advising menu.
    
    The file name is asked for once up front. If it was left blank, choosing
    option 1 asks again. Closing the input stream ends the session.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    if len(args.delimiter) != 1:
        parser.error(f"--delimiter must be a single character, got {args.delimiter!r}")
    assistant = AdvisingAssistant(delimiter=args.delimiter)
    
    TerminalDisplay.print_welcome()
    
    file_name = args.file
    if not file_name:
        file_name = _prompt("Enter the course data file name: ")
        if file_name is None:
            return 0
    
    while True:
        TerminalDisplay.print_menu()
        answer = _prompt("Enter your choice: ")
        if answer is None:
            break
        
        choice = _parse_choice(answer)
        if choice is None:
            TerminalDisplay.print_warning(
                f"Invalid input. Please enter {MENU_LOAD}, {MENU_LIST}, {MENU_COURSE}, or {MENU_EXIT}."
            )
            continue
        
        if choice == MENU_LOAD:
            if not file_name:
                file_name = _prompt("Enter the course data file name: ")
                if not file_name:
                    TerminalDisplay.print_warning("No file name given.")
                    continue
            assistant.load_catalog(file_name)
        
        elif choice == MENU_LIST:
            assistant.print_course_list()
        
        elif choice == MENU_COURSE:
            if not assistant.loaded:
                TerminalDisplay.print_warning("Please load data first (Option 1).")
                continue
            course_number = _prompt("Enter a course number (e.g., CSCI200): ")
            if course_number is None:
                break
            assistant.print_course(course_number)
        
        elif choice == MENU_EXIT:
            break
        
        else:
            TerminalDisplay.print_warning(
                f"Invalid option. Please enter {MENU_LOAD}, {MENU_LIST}, {MENU_COURSE}, or {MENU_EXIT}."
            )
    
    TerminalDisplay.print_message("Goodbye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
