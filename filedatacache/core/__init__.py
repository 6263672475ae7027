"""Core building blocks: configuration and exceptions."""

from .config import DEFAULT_CHECK_INTERVAL, CacheConfig
from .exceptions import ConfigurationError, FileDataCacheError, LoaderError, ProbeError

__all__ = [
    "CacheConfig",
    "DEFAULT_CHECK_INTERVAL",
    "FileDataCacheError",
    "ConfigurationError",
    "LoaderError",
    "ProbeError",
]
