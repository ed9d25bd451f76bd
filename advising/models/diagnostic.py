"""
Load diagnostics.

Every line the loader drops produces one Diagnostic. Diagnostics are plain
data; the presentation layer decides how to show them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DiagnosticKind(Enum):
    """
    Why a line (or the whole source) was rejected.
    
    SOURCE_UNREADABLE: The source could not be opened or read at all
    MALFORMED: Fewer than two fields (no key/title pair)
    MISSING_FIELD: Key or title is blank
    DUPLICATE_KEY: Course number already declared on an earlier line
    INVALID_PREREQUISITE: A prerequisite names a course that is never declared
    """
    SOURCE_UNREADABLE = "source-unreadable"
    MALFORMED = "malformed"
    MISSING_FIELD = "missing-field"
    DUPLICATE_KEY = "duplicate-key"
    INVALID_PREREQUISITE = "invalid-prerequisite"


@dataclass
class Rejection:
    """Validator verdict for a line that cannot yield a course."""
    kind: DiagnosticKind
    reason: str


@dataclass
class Diagnostic:
    """
    One reported problem, tagged with its 1-based line number.
    
    Line number 0 is used for problems that concern the source as a whole.
    """
    line_number: int
    kind: DiagnosticKind
    message: str
    key: Optional[str] = None

    def __str__(self) -> str:
        return f"Line {self.line_number} [{self.kind.value}]: {self.message}"
