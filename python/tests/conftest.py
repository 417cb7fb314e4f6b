"""
Test Configuration - Shared fixtures for search tests.

Uses pytest fixtures to create isolated directory trees.
"""

import shutil
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from textsearch.config import SearchConfig


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    tmp = tempfile.mkdtemp(prefix="textsearch_test_")
    # Resolve to handle macOS /var -> /private/var symlink
    resolved = Path(tmp).resolve()
    yield resolved
    shutil.rmtree(str(resolved), ignore_errors=True)


@pytest.fixture
def test_config() -> SearchConfig:
    """Create a small, deterministic configuration."""
    return SearchConfig(concurrency=4, channel_capacity=8)


@pytest.fixture
def sample_tree(temp_dir: Path) -> dict[str, Path]:
    """Create a small directory tree for testing."""
    files = {}
    
    top = temp_dir / "top.txt"
    top.write_text("alpha needle beta\nno match here\n")
    files["top"] = top
    
    readme = temp_dir / "readme.md"
    readme.write_text("# Readme\n\nneedle needle\n")
    files["readme"] = readme
    
    # Two levels deep
    nested_dir = temp_dir / "subdir" / "nested"
    nested_dir.mkdir(parents=True)
    nested = nested_dir / "deep.txt"
    nested.write_text("a deeply nested needle")
    files["nested"] = nested
    
    empty = temp_dir / "subdir" / "empty.txt"
    empty.write_text("")
    files["empty"] = empty
    
    (temp_dir / "empty_dir").mkdir()
    
    return files
