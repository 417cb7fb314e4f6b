"""
Enumerator - Recursive listing of regular files under a root.

Only paths are produced; no file content is read. Symlinks are never
followed, so a link cycle cannot cause endless recursion.
"""

import logging
import os
from pathlib import Path
from typing import Iterator, List

from .errors import handle_error


logger = logging.getLogger(__name__)


def iter_regular_files(root: Path) -> Iterator[Path]:
    """
    Yield every regular file reachable from ``root``.
    
    A root that is itself a regular file yields just that file. A root
    that does not exist or cannot be listed yields nothing. Unreadable
    subdirectories are logged and skipped.
    """
    root = Path(root)
    
    try:
        if root.is_file():
            yield root
            return
        if not root.is_dir():
            logger.debug(f"Search root not found: {root}")
            return
    except OSError as e:
        handle_error(e, root, "list_root")
        return
    
    # Work stack of directories still to be listed
    pending: List[Path] = [root]
    
    while pending:
        directory = pending.pop()
        
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            handle_error(e, directory, "scan_directory")
            continue
        
        for entry in entries:
            try:
                if entry.is_dir(follow_symlinks=False):
                    pending.append(Path(entry.path))
                elif entry.is_file(follow_symlinks=False):
                    yield Path(entry.path)
            except OSError as e:
                handle_error(e, Path(entry.path), "scan_entry")


def list_regular_files(root: Path) -> List[Path]:
    """
    List every regular file reachable from ``root``.
    
    Usage:
        for path in list_regular_files(Path("docs")):
            print(path)
    """
    return list(iter_regular_files(root))
