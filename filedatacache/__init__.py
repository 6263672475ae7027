"""filedatacache: keep values derived from files fresh without re-reading them.

filedatacache provides:
- A staleness cache that re-checks a file at most once per interval
- Modification-time based change detection with explicit load outcomes
- Pluggable filesystem probes and ready-made loaders
"""

__version__ = "1.0.0"

from . import core, io, utils
from .core import (
    DEFAULT_CHECK_INTERVAL,
    CacheConfig,
    ConfigurationError,
    FileDataCacheError,
    LoaderError,
    ProbeError,
)
from .io import (
    BaseProbe,
    CacheEntry,
    FileDataCache,
    LoadResult,
    OSFilesystemProbe,
    json_loader,
    lines_loader,
    text_loader,
)
from .utils import get_logger, set_log_level

__all__ = [
    # Version
    "__version__",
    # Cache
    "FileDataCache",
    "CacheEntry",
    "LoadResult",
    # Config / errors
    "CacheConfig",
    "DEFAULT_CHECK_INTERVAL",
    "FileDataCacheError",
    "ConfigurationError",
    "LoaderError",
    "ProbeError",
    # Probes and loaders
    "BaseProbe",
    "OSFilesystemProbe",
    "json_loader",
    "text_loader",
    "lines_loader",
    # Logging
    "get_logger",
    "set_log_level",
    # Modules
    "core",
    "io",
    "utils",
]
