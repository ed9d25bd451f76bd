"""
Single-line record validation.

Turns the tokens of one line into a CourseCandidate or a Rejection. Only
checks that can be made by looking at the line itself happen here; the
loader owns the cross-record checks (duplicates, prerequisite existence)
because those need the full set of declared keys.
"""

from typing import Union

from ..config import MIN_FIELDS
from ..models import CourseCandidate, DiagnosticKind, Rejection
from .tokenizer import normalize_key


def validate(tokens: list) -> Union[CourseCandidate, Rejection]:
    """
    Validate the tokens of one non-blank line.
    
    RULES (applied in order):
    -------------------------
    1. Fewer than two tokens -> MALFORMED
    2. Blank key or blank title -> MISSING_FIELD
    3. Tokens from index 2 on are prerequisite keys. Blank ones are dropped
       (an empty slot means "no prerequisite"), the rest are normalized.
    
    Returns:
        CourseCandidate on success, Rejection otherwise
    """
    if len(tokens) < MIN_FIELDS:
        return Rejection(DiagnosticKind.MALFORMED, "missing course number or title")
    
    key = normalize_key(tokens[0])
    title = tokens[1].strip()
    if not key or not title:
        return Rejection(DiagnosticKind.MISSING_FIELD, "blank course number or title")
    
    prerequisite_keys = []
    for token in tokens[2:]:
        prereq = normalize_key(token)
        if prereq:
            prerequisite_keys.append(prereq)
    
    return CourseCandidate(key=key, title=title, prerequisite_keys=prerequisite_keys)
