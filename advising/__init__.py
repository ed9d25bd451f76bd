"""
ABCU Advising Package
=====================

Loads a flat course file (course number, title, prerequisite course numbers),
checks that every prerequisite refers to a declared course, and answers two
questions: "what courses are there?" and "what does this course require?".

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                  │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌──────────────┐  ┌──────────────┐  ┌──────────────────────────────┐   │
│  │ read_lines   │  │ tokenize /   │  │ CatalogLoader                │   │
│  │ (file / URL) │  │ validate     │  │ (two-pass load)              │   │
│  └──────────────┘  └──────────────┘  └──────────────────────────────┘   │
│                                                                         │
│  ┌─────────────────────────────────────────────────────────────────┐   │
│  │            list_sorted / lookup  (query layer)                   │   │
│  └─────────────────────────────────────────────────────────────────┘   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│  TerminalDisplay - the only place that prints                           │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│  AdvisingAssistant (session state) + cli (interactive menu)             │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

advising/
├── __init__.py          # This file - main exports
├── config.py            # Configuration constants
├── advisor.py           # AdvisingAssistant orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Data classes and enums
│   ├── course.py        # CourseCandidate, CourseRecord
│   ├── catalog.py       # Catalog
│   ├── diagnostic.py    # DiagnosticKind, Diagnostic, Rejection
│   └── results.py       # LoadResult, PrerequisiteInfo, CourseFound, CourseNotFound
│
├── data/                # Reading and loading
│   ├── source.py        # read_lines, SourceUnreadable
│   ├── tokenizer.py     # tokenize, normalize_key
│   ├── validator.py     # validate
│   └── loader.py        # CatalogLoader, load
│
├── engines/
│   └── query.py         # list_sorted, lookup
│
└── ui/
    └── terminal.py      # TerminalDisplay

USAGE
-----

Programmatic use:

    from advising import load, list_sorted, lookup

    catalog, diagnostics = load("courses.csv")
    for key, title in list_sorted(catalog):
        print(key, title)

    result = lookup(catalog, "csci300")
    if result.found:
        for prereq in result.prerequisites:
            print(prereq.key, prereq.title)

Running from command line:

    python -m advising courses.csv

"""

# Version
__version__ = "1.0.0"

# Main exports
from .advisor import AdvisingAssistant
from .cli import main

# Model exports (for programmatic use)
from .models import (
    CourseCandidate,
    CourseRecord,
    Catalog,
    DiagnosticKind,
    Diagnostic,
    Rejection,
    LoadResult,
    PrerequisiteInfo,
    CourseFound,
    CourseNotFound,
)

# Data exports
from .data import (
    SourceUnreadable,
    read_lines,
    tokenize,
    normalize_key,
    validate,
    CatalogLoader,
    load,
)

# Query exports
from .engines import list_sorted, lookup

# UI exports
from .ui import TerminalDisplay

# Configuration exports
from .config import DEFAULT_DELIMITER, DEFAULT_ENCODING, MISSING_PREREQUISITE_MARKER

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "AdvisingAssistant",
    "main",
    # Models
    "CourseCandidate",
    "CourseRecord",
    "Catalog",
    "DiagnosticKind",
    "Diagnostic",
    "Rejection",
    "LoadResult",
    "PrerequisiteInfo",
    "CourseFound",
    "CourseNotFound",
    # Data
    "SourceUnreadable",
    "read_lines",
    "tokenize",
    "normalize_key",
    "validate",
    "CatalogLoader",
    "load",
    # Queries
    "list_sorted",
    "lookup",
    # UI
    "TerminalDisplay",
    # Config
    "DEFAULT_DELIMITER",
    "DEFAULT_ENCODING",
    "MISSING_PREREQUISITE_MARKER",
]
