"""
Query engines.

This package contains the read operations served from a loaded Catalog.
"""

from .query import list_sorted, lookup

__all__ = [
    "list_sorted",
    "lookup",
]
