"""
Course data models.

Contains the CourseRecord stored in a Catalog and the CourseCandidate that
the validator produces from a single input line.
"""

from dataclasses import dataclass, field


@dataclass
class CourseCandidate:
    """
    A well-formed course declaration parsed from one line.
    
    A candidate has passed the single-line checks only. Whether its
    prerequisites exist, or whether its key was already declared, is decided
    by the loader once the whole file has been scanned.
    
    Attributes:
        key: Normalized course number (trimmed, uppercased), e.g. "CSCI200"
        title: Course title, trimmed
        prerequisite_keys: Normalized prerequisite course numbers in file order
    """
    key: str
    title: str
    prerequisite_keys: list = field(default_factory=list)


@dataclass
class CourseRecord:
    """
    An accepted course in a Catalog.
    
    Every entry in prerequisite_keys was declared by some well-formed line
    of the same source (pass 1). A declared course can still be rejected
    later, so a prerequisite is not guaranteed to be in the Catalog.
    Duplicates within one record are kept as they appeared in the file.
    """
    key: str
    title: str
    prerequisite_keys: list = field(default_factory=list)

    @classmethod
    def from_candidate(cls, candidate: CourseCandidate) -> "CourseRecord":
        return cls(
            key=candidate.key,
            title=candidate.title,
            prerequisite_keys=list(candidate.prerequisite_keys),
        )
