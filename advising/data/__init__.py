"""
Data loading and parsing module.

This package handles all file I/O, line parsing and the two-pass catalog load.
"""

from .source import SourceUnreadable, read_lines
from .tokenizer import tokenize, normalize_key
from .validator import validate
from .loader import CatalogLoader, load

__all__ = [
    "SourceUnreadable",
    "read_lines",
    "tokenize",
    "normalize_key",
    "validate",
    "CatalogLoader",
    "load",
]
