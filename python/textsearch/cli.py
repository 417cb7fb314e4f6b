"""
Command-line entry point.

Prints one ``file:line:offset`` per occurrence as results arrive.
"""

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .config import SearchConfig
from .api import search


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textsearch",
        description="Find every occurrence of literal text under a directory",
    )
    parser.add_argument("query", help="Literal text to search for (case-sensitive)")
    parser.add_argument("root", nargs="?", default=".", help="Directory to search (default: .)")
    parser.add_argument("--concurrency", "-j", type=int, help="Files scanned in parallel")
    parser.add_argument("--encoding", help="Text encoding of the files (default: utf-8)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    return parser


def _silence_stdout() -> None:
    """Point stdout at devnull so the exit-time flush cannot fail again."""
    try:
        stdout_fd = sys.stdout.fileno()
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, stdout_fd)
        os.close(devnull)
    except (OSError, ValueError):
        pass


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    
    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s"
    )
    
    try:
        config = SearchConfig.from_env()
        if args.concurrency is not None:
            config.concurrency = args.concurrency
        if args.encoding:
            config.encoding = args.encoding
        config.__post_init__()
    except ValueError as e:
        parser.error(str(e))
    
    root = Path(args.root).expanduser()
    
    async def _main():
        async for occurrence in search(args.query, root, config):
            print(occurrence, flush=True)
    
    try:
        asyncio.run(_main())
    except KeyboardInterrupt:
        print("\nStopped.")
    except BrokenPipeError:
        # Reader closed the pipe (e.g. `| head`)
        _silence_stdout()
    
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
