"""
Data models for the advising system.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between the loader, the query layer and the UI.
"""

from .course import CourseCandidate, CourseRecord
from .catalog import Catalog
from .diagnostic import DiagnosticKind, Diagnostic, Rejection
from .results import LoadResult, PrerequisiteInfo, CourseFound, CourseNotFound

__all__ = [
    # Course models
    "CourseCandidate",
    "CourseRecord",
    "Catalog",
    # Diagnostics
    "DiagnosticKind",
    "Diagnostic",
    "Rejection",
    # Results
    "LoadResult",
    "PrerequisiteInfo",
    "CourseFound",
    "CourseNotFound",
]
