"""Custom exceptions for filedatacache.

Only construction and configuration paths raise these. ``FileDataCache.load_data``
never lets an exception escape; loader failures are wrapped in
:class:`LoaderError` and handed back on the load outcome instead.
"""


class FileDataCacheError(Exception):
    """Base exception class for all filedatacache errors."""

    pass


class ConfigurationError(FileDataCacheError):
    """Raised when cache configuration is invalid.

    Examples
    --------
    >>> from filedatacache.core.exceptions import ConfigurationError
    >>> raise ConfigurationError("check_interval must be >= 0, got -1")
    """

    pass


class LoaderError(FileDataCacheError):
    """A loader failed to derive a value from a file.

    The original exception is available as ``__cause__`` and as ``original``.

    Parameters
    ----------
    path : str
        Path that was being loaded.
    original : BaseException
        Exception raised by the loader.
    """

    def __init__(self, path: str, original: BaseException):
        self.path = path
        self.original = original
        super().__init__(f"Failed to load {path}: {original!r}")


class ProbeError(FileDataCacheError):
    """Raised by filesystem probes that cannot answer a query.

    The cache treats it like any other unavailable signal.
    """

    pass
