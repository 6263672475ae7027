"""I/O layer for filedatacache.

- **probe**: how the cache observes files (existence, mtime, text)
- **loaders**: ready-made loaders for JSON, plain text and line lists
- **cache**: the staleness cache itself
"""

from .cache import CacheEntry, FileDataCache, LoadFileDataFunc, LoadResult
from .loaders import json_loader, lines_loader, text_loader
from .probe import BaseProbe, OSFilesystemProbe

__all__ = [
    "FileDataCache",
    "CacheEntry",
    "LoadResult",
    "LoadFileDataFunc",
    "BaseProbe",
    "OSFilesystemProbe",
    "json_loader",
    "text_loader",
    "lines_loader",
]
