"""
Catalog loading.

This module builds a Catalog from the lines of a course file using a
two-pass scan, and reports every dropped line as a Diagnostic.
"""

from os import PathLike

from ..config import DEFAULT_DELIMITER
from ..models import (
    Catalog,
    CourseRecord,
    Diagnostic,
    DiagnosticKind,
    LoadResult,
    Rejection,
)
from .source import SourceUnreadable, read_lines
from .tokenizer import tokenize
from .validator import validate


def _materialize_lines(source) -> list:
    """Read an iterable of lines into memory once; both passes scan the list."""
    try:
        return list(source)
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnreadable(getattr(source, "name", "<line source>"), str(e)) from e


class CatalogLoader:
    """
    Validates and loads course lines into a Catalog.
    
    ═══════════════════════════════════════════════════════════════════════════
    WHY TWO PASSES
    ═══════════════════════════════════════════════════════════════════════════
    
    A prerequisite may name a course declared further down the file:
    
        CSCI300, Algorithms, CSCI200
        CSCI200, Data Structures
    
    A single forward pass cannot tell whether CSCI200 exists yet. Instead of
    building a dependency graph we scan twice:
    
    PASS 1 (key collection):
        Register the key of every line that validates. The first valid line
        for a key owns it; later lines with the same key are DUPLICATE_KEY.
    
    PASS 2 (reference check + materialization):
        For each owning line, every prerequisite must be a registered key.
        One unknown prerequisite rejects the whole course (INVALID_PREREQUISITE).
        Otherwise the course goes into the Catalog.
    
    ═══════════════════════════════════════════════════════════════════════════
    
    Nothing here raises for bad rows. Each dropped line is reported once and
    the scan moves on. Prerequisites are only checked for existence, cycles
    are not detected.
    
    Usage:
        loader = CatalogLoader()
        result = loader.load_lines(["CSCI100, Intro", "CSCI200, DS, CSCI100"])
        result.catalog        # Catalog(2 courses)
        result.diagnostics    # []
    """
    
    def __init__(self, delimiter: str = DEFAULT_DELIMITER):
        if not isinstance(delimiter, str) or len(delimiter) != 1:
            raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
        self.delimiter = delimiter
    
    def load(self, source) -> LoadResult:
        """
        Load from a path/URL or from an iterable of lines.
        
        Strings and Path objects are treated as locations. An unreadable
        location, or an iterable that fails while being read (e.g. an open
        file with undecodable bytes), gives an empty Catalog with
        source_readable=False.
        """
        try:
            if isinstance(source, (str, PathLike)):
                lines = read_lines(source)
            else:
                lines = _materialize_lines(source)
        except SourceUnreadable as e:
            diagnostic = Diagnostic(0, DiagnosticKind.SOURCE_UNREADABLE, str(e))
            return LoadResult(Catalog(), [diagnostic], source_readable=False)
        return self.load_lines(lines)
    
    def load_lines(self, lines: list) -> LoadResult:
        """
        Run both passes over lines already held in memory.
        
        Args:
            lines: Full content of the source, one entry per line
        
        Returns:
            LoadResult with the new Catalog and diagnostics in line order
            within each pass (pass 1 problems first)
        """
        diagnostics = []
        owners = self._collect_keys(lines, diagnostics)
        catalog = self._materialize(lines, owners, diagnostics)
        return LoadResult(catalog, diagnostics)
    
    def _collect_keys(self, lines: list, diagnostics: list) -> dict:
        """
        Pass 1: map each declared key to the line number that owns it.
        
        Format errors and duplicates are reported here, never in pass 2.
        """
        owners = {}
        for line_number, line in enumerate(lines, 1):
            tokens = tokenize(line, self.delimiter)
            if not tokens:
                continue
            
            verdict = validate(tokens)
            if isinstance(verdict, Rejection):
                diagnostics.append(Diagnostic(
                    line_number, verdict.kind, f"{verdict.reason} (skipping line)"
                ))
                continue
            
            if verdict.key in owners:
                diagnostics.append(Diagnostic(
                    line_number,
                    DiagnosticKind.DUPLICATE_KEY,
                    f"duplicate course number '{verdict.key}', first declared on "
                    f"line {owners[verdict.key]} (skipping line)",
                    key=verdict.key,
                ))
                continue
            
            owners[verdict.key] = line_number
        return owners
    
    def _materialize(self, lines: list, owners: dict, diagnostics: list) -> Catalog:
        """
        Pass 2: check prerequisites against the pass 1 keys and build records.
        
        Lines are re-tokenized and re-validated from scratch so the passes
        share nothing but the key map.
        """
        catalog = Catalog()
        for line_number, line in enumerate(lines, 1):
            tokens = tokenize(line, self.delimiter)
            if not tokens:
                continue
            
            candidate = validate(tokens)
            if isinstance(candidate, Rejection):
                continue  # reported in pass 1
            
            # Duplicates were reported in pass 1. Only the owning line may
            # produce a record, even if the owner gets rejected below.
            if owners.get(candidate.key) != line_number:
                continue
            
            unknown = [k for k in candidate.prerequisite_keys if k not in owners]
            if unknown:
                diagnostics.append(Diagnostic(
                    line_number,
                    DiagnosticKind.INVALID_PREREQUISITE,
                    f"invalid prerequisite {', '.join(repr(k) for k in unknown)} "
                    f"for course '{candidate.key}' (skipping course)",
                    key=candidate.key,
                ))
                continue
            
            catalog.add(CourseRecord.from_candidate(candidate))
        return catalog


def load(source, delimiter: str = DEFAULT_DELIMITER) -> LoadResult:
    """
    Build a fresh Catalog from a course source.
    
    Args:
        source: Path, URL, or iterable of lines
        delimiter: Field separator
    
    Returns:
        LoadResult, which also unpacks as (catalog, diagnostics)
    """
    return CatalogLoader(delimiter).load(source)
