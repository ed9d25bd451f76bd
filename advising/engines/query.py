"""
Catalog queries.

Read-only operations over a loaded Catalog: the sorted course listing and
the detail view of one course with its prerequisite titles.
"""

from typing import Union

from ..data.tokenizer import normalize_key
from ..models import Catalog, CourseFound, CourseNotFound, PrerequisiteInfo


def list_sorted(catalog: Catalog) -> list:
    """
    All courses as (key, title) pairs in ascending key order.
    
    Keys are already uppercase, so plain string comparison gives a stable
    alphanumeric order ("CSCI100" < "CSCI200" < "MATH201").
    """
    return [(record.key, record.title) for record in sorted(catalog, key=lambda r: r.key)]


def lookup(catalog: Catalog, raw_key: str) -> Union[CourseFound, CourseNotFound]:
    """
    Find one course and resolve its prerequisites.
    
    The search key is normalized exactly as at load time, so "csci200 "
    finds CSCI200. A miss is a normal result, not an error.
    
    PREREQUISITE RESOLUTION:
    ------------------------
    Loading guarantees every prerequisite exists in the Catalog. If a
    record somehow breaks that rule, the prerequisite is still listed with
    title=None rather than silently dropped.
    
    Returns:
        CourseFound with one PrerequisiteInfo per prerequisite key,
        or CourseNotFound carrying the normalized key
    """
    key = normalize_key(raw_key)
    record = catalog.get(key)
    if record is None:
        return CourseNotFound(key)
    
    prerequisites = []
    for prereq_key in record.prerequisite_keys:
        prereq = catalog.get(prereq_key)
        prerequisites.append(PrerequisiteInfo(prereq_key, prereq.title if prereq else None))
    
    return CourseFound(record.key, record.title, prerequisites)
