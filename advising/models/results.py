"""
Result data models.

Contains the dataclasses returned by the load and query operations.
"""

from dataclasses import dataclass, field
from typing import Optional

from .catalog import Catalog


@dataclass
class LoadResult:
    """
    Outcome of one load.
    
    The loader never raises for bad data. Callers distinguish the two
    "nothing loaded" situations like this:
    - source_readable is False: the file/URL could not be read
    - source_readable is True and catalog is empty: read fine, no valid rows
    
    Unpacks as (catalog, diagnostics):
        catalog, diagnostics = load(lines)
    """
    catalog: Catalog
    diagnostics: list = field(default_factory=list)
    source_readable: bool = True

    @property
    def course_count(self) -> int:
        return len(self.catalog)

    def __iter__(self):
        yield self.catalog
        yield self.diagnostics


@dataclass
class PrerequisiteInfo:
    """A prerequisite resolved against the Catalog. title is None if unresolved."""
    key: str
    title: Optional[str]

    @property
    def resolved(self) -> bool:
        return self.title is not None


@dataclass
class CourseFound:
    """
    Detail view of one course.
    
    prerequisites has one entry per prerequisite key of the record, in the
    order they were declared.
    """
    key: str
    title: str
    prerequisites: list = field(default_factory=list)
    found: bool = field(default=True, init=False)


@dataclass
class CourseNotFound:
    """Lookup miss. key is the normalized course number that was searched."""
    key: str
    found: bool = field(default=False, init=False)
