"""
Search Configuration - Settings for the search pipeline.

Uses environment variables with sensible defaults. There is no shared
default instance: each search takes its config explicitly or builds a
fresh one.
"""

import codecs
import os
from dataclasses import dataclass, field


def _default_concurrency() -> int:
    return os.cpu_count() or 1


@dataclass
class SearchConfig:
    """
    Configuration for one search.
    
    ``concurrency`` bounds how many files are scanned at once.
    ``channel_capacity`` bounds how many finished files may wait for the
    consumer before workers suspend.
    """
    
    # --- Concurrency Limits ---
    concurrency: int = field(default_factory=_default_concurrency)
    channel_capacity: int = 64
    
    # --- Decoding ---
    encoding: str = "utf-8"
    
    def __post_init__(self):
        """Reject limits that would stall the pipeline and unknown codecs."""
        if self.concurrency < 1:
            raise ValueError(f"concurrency must be at least 1, got {self.concurrency}")
        if self.channel_capacity < 1:
            raise ValueError(
                f"channel_capacity must be at least 1, got {self.channel_capacity}"
            )
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"unknown encoding: {self.encoding}") from None
    
    @classmethod
    def from_env(cls) -> "SearchConfig":
        """
        Create config from environment variables.
        
        Supported env vars:
            TEXTSEARCH_CONCURRENCY: Files scanned in parallel
            TEXTSEARCH_CHANNEL_CAPACITY: Finished files buffered for the consumer
            TEXTSEARCH_ENCODING: Text encoding used to read files
        """
        config = cls()
        
        if concurrency := os.environ.get("TEXTSEARCH_CONCURRENCY"):
            config.concurrency = int(concurrency)
        
        if capacity := os.environ.get("TEXTSEARCH_CHANNEL_CAPACITY"):
            config.channel_capacity = int(capacity)
        
        if encoding := os.environ.get("TEXTSEARCH_ENCODING"):
            config.encoding = encoding
        
        config.__post_init__()
        return config
