"""Filesystem probes used by the cache to observe files.

A probe answers three questions about a path: does it exist, when was it
last modified, and what text does it hold. Failures to answer the last two
are reported as ``None`` so the cache can treat them as a missing signal.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod

from filedatacache.utils import get_logger

__all__ = ["BaseProbe", "OSFilesystemProbe"]

logger = get_logger()


class BaseProbe(ABC):
    """Abstract base class for filesystem probes.

    Implementations must not raise for ordinary failures: ``modified_time``
    and ``read_text`` return ``None`` when the information is unavailable.
    Subclasses used in tests typically count calls and serve canned answers.
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return whether ``path`` currently exists."""

    @abstractmethod
    def modified_time(self, path: str) -> int | float | None:
        """Return the modification timestamp of ``path``, or None.

        The cache only compares successive values for equality, so any unit
        works as long as a probe is consistent with itself.
        """

    @abstractmethod
    def read_text(self, path: str) -> str | None:
        """Return the text content of ``path``, or None if it cannot be read."""


class OSFilesystemProbe(BaseProbe):
    """Probe backed by the local filesystem.

    Parameters
    ----------
    encoding : str, default="utf-8"
        Encoding used by :meth:`read_text`.

    Examples
    --------
    >>> probe = OSFilesystemProbe()
    >>> probe.exists("/etc/hostname")
    True
    >>> probe.modified_time("/does/not/exist") is None
    True
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def modified_time(self, path: str) -> int | None:
        """Return ``st_mtime_ns``, kept as an integer for exact comparisons."""
        try:
            return os.stat(path).st_mtime_ns
        except OSError as e:
            logger.debug(f"stat failed for {path}: {e}")
            return None

    def read_text(self, path: str) -> str | None:
        try:
            with open(path, "r", encoding=self.encoding) as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"read failed for {path}: {e}")
            return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(encoding={self.encoding!r})"
