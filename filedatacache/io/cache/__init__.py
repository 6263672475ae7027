"""Staleness cache for file-derived values.

Examples
--------
>>> from filedatacache.io.cache import FileDataCache
>>> from filedatacache.io.loaders import json_loader
>>>
>>> cache = FileDataCache(json_loader, check_interval=10_000)
>>> manifest = cache.load_data("manifest.json")
>>> cache.get_entry("manifest.json").file_exists
True
"""

from ._manager import CacheEntry, FileDataCache, LoadFileDataFunc, LoadResult

__all__ = [
    "FileDataCache",
    "CacheEntry",
    "LoadResult",
    "LoadFileDataFunc",
]
