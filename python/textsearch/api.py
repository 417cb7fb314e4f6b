"""
Search - Public entry point for literal text search under a directory.

``search`` is a pure function of (query, root) and the current contents
of the filesystem; nothing is retained between calls.
"""

import asyncio
import logging
from pathlib import Path
from typing import AsyncGenerator, List

from .config import SearchConfig
from .dispatcher import Dispatcher
from .enumerator import list_regular_files
from .models import Occurrence


logger = logging.getLogger(__name__)


async def search(
    query: str,
    root: Path,
    config: SearchConfig | None = None,
) -> AsyncGenerator[Occurrence, None]:
    """
    Stream every occurrence of ``query`` in every regular file under ``root``.
    
    An empty query yields nothing without touching the filesystem. A
    missing root yields nothing. Files that cannot be read are logged and
    skipped.
    
    Usage:
        async for occurrence in search("TODO", Path("src")):
            print(occurrence)
    """
    if not query:
        return
    
    config = config or SearchConfig()
    loop = asyncio.get_running_loop()
    
    files = await loop.run_in_executor(None, list_regular_files, Path(root))
    logger.debug(f"Enumerated {len(files)} files under {root}")
    
    if not files:
        return
    
    dispatcher = Dispatcher(config)
    stream = dispatcher.dispatch(files, query)
    try:
        async for occurrence in stream:
            yield occurrence
    finally:
        await stream.aclose()


async def search_all(
    query: str,
    root: Path,
    config: SearchConfig | None = None,
) -> List[Occurrence]:
    """
    Convenience function to collect a whole search into a list.
    
    Usage:
        occurrences = await search_all("TODO", Path("src"))
        print(f"{len(occurrences)} matches")
    """
    return [occurrence async for occurrence in search(query, root, config)]
