"""
Scanner - Literal substring search within one file.

Matches are exact, case-sensitive and overlapping: after a match at
offset ``k`` the next search starts at ``k + 1``, so "aa" occurs twice
in "aaa".
"""

from pathlib import Path
from typing import List

from .models import Occurrence


def find_offsets(line: str, query: str) -> List[int]:
    """
    Return the start offset of every (possibly overlapping) match of
    ``query`` in ``line``, in ascending order.
    """
    offsets: List[int] = []
    start = line.find(query)
    while start != -1:
        offsets.append(start)
        start = line.find(query, start + 1)
    return offsets


def scan_file(path: Path, query: str, encoding: str = "utf-8") -> List[Occurrence]:
    """
    Find every occurrence of ``query`` in a text file.
    
    The file is read in universal-newline mode, so ``\\n``, ``\\r\\n`` and
    ``\\r`` all end a line. Offsets count characters, not bytes.
    
    Args:
        path: Regular file to read
        query: Non-empty literal text to look for
        encoding: Text encoding of the file
        
    Returns:
        Occurrences ordered by line, then by offset
        
    Raises:
        ValueError: If ``query`` is empty
        OSError: If the file cannot be opened or read
        UnicodeDecodeError: If the file is not valid text in ``encoding``
    """
    if not query:
        raise ValueError("query must not be empty")
    
    occurrences: List[Occurrence] = []
    
    with open(path, "r", encoding=encoding, newline=None) as f:
        for line_number, line in enumerate(f, start=1):
            for offset in find_offsets(line.rstrip("\n"), query):
                occurrences.append(Occurrence(file=path, line=line_number, offset=offset))
    
    return occurrences
