"""
Advising Assistant - Main Orchestrator.

This module contains the AdvisingAssistant class that connects the
algorithm layer to the presentation layer.
"""

from .config import DEFAULT_DELIMITER
from .data import CatalogLoader
from .engines import list_sorted, lookup
from .models import Catalog, LoadResult
from .ui import TerminalDisplay


class AdvisingAssistant:
    """
    One advising session: a Catalog plus the display that shows it.
    
    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════
    
    The load and query functions hold no state of their own. This class is
    where the session's state lives:
    
    1. catalog - replaced wholesale by every load, never merged
    2. loaded  - True when the last load produced at least one course
    
    TO CHANGE THE UI:
    -----------------
    Pass a different display class with the same classmethods:
        assistant = AdvisingAssistant(display=WebDisplay)
    
    ═══════════════════════════════════════════════════════════════════════════
    
    USAGE:
        assistant = AdvisingAssistant()
        assistant.load_catalog("courses.csv")
        assistant.print_course_list()
        assistant.print_course("csci300")
    """
    
    def __init__(self, display=None, delimiter: str = DEFAULT_DELIMITER):
        self.loader = CatalogLoader(delimiter)
        self.display = display or TerminalDisplay
        self.catalog = Catalog()
        self.loaded = False
    
    def load_catalog(self, source) -> LoadResult:
        """
        Load a course source, replacing the current Catalog.
        
        Args:
            source: Path, URL, or iterable of lines
        
        Returns:
            The LoadResult (also displayed)
        """
        result = self.loader.load(source)
        self.catalog = result.catalog
        self.loaded = bool(result.catalog)
        self.display.print_load_result(result)
        return result
    
    def print_course_list(self) -> list:
        """Display all courses sorted by course number and return them."""
        if not self.loaded:
            self.display.print_warning("Please load data first (Option 1).")
            return []
        courses = list_sorted(self.catalog)
        self.display.print_course_list(courses)
        return courses
    
    def print_course(self, raw_key: str):
        """
        Display one course with its prerequisites.
        
        Returns:
            CourseFound / CourseNotFound, or None if nothing is loaded
        """
        if not self.loaded:
            self.display.print_warning("Please load data first (Option 1).")
            return None
        result = lookup(self.catalog, raw_key)
        self.display.print_course(result)
        return result
