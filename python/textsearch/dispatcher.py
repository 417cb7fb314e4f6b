"""
Dispatcher - Bounded concurrent scanning merged into one lazy stream.

N worker coroutines pull paths from a shared iterator and hand the
blocking file read to a thread pool of the same size, so at most N files
are being scanned at any instant. Each finished file's occurrence list is
put on a bounded channel as a single item; a worker whose batch does not
fit suspends until the consumer catches up.

Ordering: batches arrive in completion order, so there is no ordering
across files. A file's occurrences are always emitted together and in
scan order, and a file contributes all of its occurrences or none.
"""

import asyncio
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import AsyncGenerator, Iterable, Iterator, List, Optional, Union

from .config import SearchConfig
from .errors import ErrorAction, handle_error
from .models import Occurrence, SearchStats
from .scanner import scan_file


logger = logging.getLogger(__name__)


@dataclass
class _WorkerExit:
    """Posted by a worker once the shared file iterator is exhausted."""
    error: Optional[Exception] = None


_ChannelItem = Union[List[Occurrence], _WorkerExit]


class Dispatcher:
    """
    Fan files out to a bounded worker pool and fan occurrences back in.

    A Dispatcher serves a single ``dispatch`` call; ``stats`` describes
    that call once the stream has ended or been closed.
    """

    def __init__(self, config: SearchConfig | None = None):
        self.config = config or SearchConfig()
        self.stats = SearchStats()

    async def dispatch(
        self,
        files: Iterable[Path],
        query: str,
    ) -> AsyncGenerator[Occurrence, None]:
        """
        Scan ``files`` for ``query`` and stream every occurrence.

        Closing the stream early (``aclose()``, or cancelling the task
        that iterates it) stops dispatch of new files. Scans already
        running in the thread pool finish their current file and are
        discarded.

        Raises:
            ValueError: If ``query`` is empty
        """
        if not query:
            raise ValueError("query must not be empty")

        worker_count = self.config.concurrency
        channel: asyncio.Queue[_ChannelItem] = asyncio.Queue(
            maxsize=self.config.channel_capacity
        )
        pending = iter(files)
        executor = ThreadPoolExecutor(
            max_workers=worker_count,
            thread_name_prefix="scanner"
        )

        start_time = time.monotonic()
        workers = [
            asyncio.create_task(self._worker(pending, query, executor, channel))
            for _ in range(worker_count)
        ]
        active = len(workers)

        try:
            while active:
                item = await channel.get()

                if isinstance(item, _WorkerExit):
                    active -= 1
                    if item.error is not None:
                        raise item.error
                    continue

                self.stats.occurrences += len(item)
                for occurrence in item:
                    yield occurrence
        finally:
            for worker in workers:
                worker.cancel()
            await asyncio.gather(*workers, return_exceptions=True)
            executor.shutdown(wait=False, cancel_futures=True)

            self.stats.duration_seconds = time.monotonic() - start_time
            logger.info(f"Search complete: {self.stats}")

    async def _worker(
        self,
        pending: Iterator[Path],
        query: str,
        executor: ThreadPoolExecutor,
        channel: asyncio.Queue[_ChannelItem],
    ) -> None:
        """
        Scan files from the shared iterator until it runs dry.

        Per-file read failures are logged and skipped. Anything the error
        policies mark ABORT ends this worker and is passed to the consumer.
        """
        loop = asyncio.get_running_loop()

        try:
            for path in pending:
                try:
                    occurrences = await loop.run_in_executor(
                        executor,
                        scan_file,
                        path,
                        query,
                        self.config.encoding,
                    )
                except Exception as e:
                    if handle_error(e, path, "scan_file") is ErrorAction.ABORT:
                        raise
                    self.stats.files_failed += 1
                    continue

                self.stats.files_scanned += 1
                if occurrences:
                    await channel.put(occurrences)
        except Exception as e:
            await channel.put(_WorkerExit(error=e))
        else:
            await channel.put(_WorkerExit())
