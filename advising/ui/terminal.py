"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the advising package.

To create a different UI (web, JSON API, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..config import MISSING_PREREQUISITE_MARKER
from ..models import CourseNotFound, DiagnosticKind, LoadResult


class TerminalDisplay:
    """
    Console output for load results and course queries.
    
    Every method is a classmethod taking plain result objects, so the
    algorithm layer never needs to know how results are shown.
    """
    
    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"
    
    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 60
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
    
    @classmethod
    def print_welcome(cls):
        cls.print_header("ABCU ADVISING ASSISTANCE PROGRAM")
    
    @classmethod
    def print_menu(cls):
        print(f"\n{cls.BOLD}Menu:{cls.RESET}")
        print("  1. Load Data Structure")
        print("  2. Print Course List")
        print("  3. Print Course")
        print("  9. Exit")
    
    @classmethod
    def print_message(cls, message: str):
        print(f"  {message}")
    
    @classmethod
    def print_warning(cls, message: str):
        print(f"  {cls.YELLOW}{message}{cls.RESET}")
    
    @classmethod
    def print_load_result(cls, result: LoadResult):
        """
        Print diagnostics followed by a one-line load summary.
        
        Source-level failures are red, row-level problems yellow.
        """
        for diagnostic in result.diagnostics:
            color = cls.RED if diagnostic.kind == DiagnosticKind.SOURCE_UNREADABLE else cls.YELLOW
            print(f"  {color}ERROR:{cls.RESET} {diagnostic}")
        
        if result.course_count:
            print(f"  {cls.GREEN}Data loaded successfully ({result.course_count} courses).{cls.RESET}")
        else:
            print(f"  {cls.RED}No courses loaded. Check errors above and try again.{cls.RESET}")
    
    @classmethod
    def print_course_list(cls, courses: list):
        """Print (key, title) pairs, one per line."""
        if not courses:
            print("  No course data loaded.")
            return
        
        cls.print_header("COURSE LIST")
        for key, title in courses:
            print(f"  {cls.BOLD}{key}{cls.RESET}, {title}")
    
    @classmethod
    def print_course(cls, result):
        """Print a lookup result (CourseFound or CourseNotFound)."""
        if isinstance(result, CourseNotFound):
            print(f"  {cls.RED}Course not found: {result.key}{cls.RESET}")
            return
        
        print(f"\n  {cls.BOLD}{result.key}{cls.RESET}, {result.title}")
        if not result.prerequisites:
            print(f"  Prerequisites: {cls.DIM}None{cls.RESET}")
            return
        
        print("  Prerequisites:")
        for prereq in result.prerequisites:
            if prereq.resolved:
                print(f"    {prereq.key}, {prereq.title}")
            else:
                print(f"    {prereq.key} {cls.DIM}{MISSING_PREREQUISITE_MARKER}{cls.RESET}")
