"""
Data Models - Records flowing through the search pipeline.

An Occurrence is created by the scanner, handed through the dispatcher's
channel and given to the caller. It is never mutated after creation.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Occurrence:
    """
    One match of the query.
    
    ``line`` is 1-based. ``offset`` is the 0-based character index of the
    match start within that line (a ``str`` index, not a byte count).
    """
    file: Path
    line: int
    offset: int
    
    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.offset}"


@dataclass
class SearchStats:
    """Statistics from one search run."""
    files_scanned: int = 0
    files_failed: int = 0
    occurrences: int = 0
    duration_seconds: float = 0.0
    
    def __str__(self) -> str:
        return (
            f"Found {self.occurrences} occurrences "
            f"in {self.files_scanned} files "
            f"({self.files_failed} skipped) "
            f"in {self.duration_seconds:.2f}s"
        )
