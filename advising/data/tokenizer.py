"""
Line tokenizing.

Splits one raw line of a course file into trimmed fields. There is no
quoting or escaping: every delimiter character separates two fields.
"""

from ..config import DEFAULT_DELIMITER


def normalize_key(raw: str) -> str:
    """Canonical course number: trimmed and uppercased ("cs 200 " -> "CS 200")."""
    return raw.strip().upper()


def tokenize(line: str, delimiter: str = DEFAULT_DELIMITER) -> list:
    """
    Split a line into trimmed fields.
    
    A blank or whitespace-only line yields no tokens; callers skip it.
    A line ending in the delimiter keeps one trailing empty field, so
    "CSCI100,Intro," gives ["CSCI100", "Intro", ""].
    
    Args:
        line: Raw line, with or without its line terminator
        delimiter: Single separator character
    
    Returns:
        List of stripped field strings
    """
    if not line.strip():
        return []
    return [field.strip() for field in line.split(delimiter)]
