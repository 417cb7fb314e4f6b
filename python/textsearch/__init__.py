"""
Textsearch Package - Concurrent literal text search over a directory tree.

Modules:
    - config: Search settings (concurrency, channel size, encoding)
    - enumerator: Recursive listing of regular files
    - scanner: Overlapping substring search within one file
    - dispatcher: Bounded worker pool merged into one lazy stream
    - api: Main entry point (search, search_all)

Flow:
    Enumerate → Dispatch (N workers) → Scan (per file) → Merge → Caller

Usage:
    from textsearch import search
    
    async for occurrence in search("TODO", Path("src")):
        print(occurrence.file, occurrence.line, occurrence.offset)
"""

from .config import SearchConfig
from .models import Occurrence, SearchStats
from .api import search, search_all

__all__ = ["Occurrence", "SearchConfig", "SearchStats", "search", "search_all"]
