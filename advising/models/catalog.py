"""
The Catalog: keyed collection of accepted course records.
"""

from typing import Optional

from .course import CourseRecord


class Catalog:
    """
    In-memory table of CourseRecord objects keyed by normalized course number.
    
    A Catalog is built by exactly one load and is never merged into: loading
    again produces a new Catalog. Insertion order carries no meaning, the
    query layer imposes its own ordering.
    
    Usage:
        catalog = Catalog()
        catalog.add(CourseRecord("CSCI100", "Introduction to Computer Science"))
        "CSCI100" in catalog   # True
        catalog.get("CSCI100").title
    """
    
    def __init__(self):
        self._records = {}
    
    def add(self, record: CourseRecord) -> bool:
        """
        Insert a record unless its key is already present.
        
        Returns:
            True if inserted, False if the key was taken (existing record kept)
        """
        if record.key in self._records:
            return False
        self._records[record.key] = record
        return True
    
    def get(self, key: str) -> Optional[CourseRecord]:
        """Return the record for an already-normalized key, or None."""
        return self._records.get(key)
    
    def keys(self) -> list:
        return list(self._records.keys())
    
    def records(self) -> list:
        return list(self._records.values())
    
    def __contains__(self, key) -> bool:
        return key in self._records
    
    def __len__(self) -> int:
        return len(self._records)
    
    def __iter__(self):
        return iter(self._records.values())
    
    def __bool__(self) -> bool:
        return bool(self._records)
    
    def __repr__(self) -> str:
        return f"Catalog({len(self._records)} courses)"
