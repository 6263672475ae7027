"""Staleness cache mapping file paths to values derived from their content.

A value is recomputed only when the file's modification time moves, and the
filesystem is consulted at most once per ``check_interval`` milliseconds per
path. Between checks the cached value is returned as is.

Loading never raises: a missing file yields ``None`` and a failing loader
yields ``None`` plus a :class:`~filedatacache.core.exceptions.LoaderError`
on the :class:`LoadResult`.
"""

from __future__ import annotations

import os
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from filedatacache.core.config import DEFAULT_CHECK_INTERVAL, CacheConfig
from filedatacache.core.exceptions import ConfigurationError, LoaderError
from filedatacache.io.probe import BaseProbe, OSFilesystemProbe
from filedatacache.utils import get_logger

logger = get_logger()

__all__ = ["FileDataCache", "CacheEntry", "LoadResult", "LoadFileDataFunc"]

T = TypeVar("T")

LoadFileDataFunc = Callable[..., Any]
"""Loader signature: ``(path)`` or ``(path, content)`` when ``read_file`` is set."""


def _wall_clock_ms() -> float:
    return time.time() * 1000


class CacheEntry(Generic[T]):
    """State the cache keeps for one path."""

    def __init__(
        self,
        path: str,
        value: T | None = None,
        file_exists: bool = False,
        last_modified: float | None = 0,
        last_check_time: float = 0,
        last_check_changed: bool = False,
    ):
        self.path = path
        self.value = value
        self.file_exists = file_exists
        self.last_modified = last_modified
        self.last_check_time = last_check_time
        self.last_check_changed = last_check_changed

    def copy(self) -> CacheEntry[T]:
        """Return a detached snapshot of this entry."""
        return CacheEntry(
            path=self.path,
            value=self.value,
            file_exists=self.file_exists,
            last_modified=self.last_modified,
            last_check_time=self.last_check_time,
            last_check_changed=self.last_check_changed,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "path": self.path,
            "value": self.value,
            "file_exists": self.file_exists,
            "last_modified": self.last_modified,
            "last_check_time": self.last_check_time,
            "last_check_changed": self.last_check_changed,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CacheEntry):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return (
            f"CacheEntry(path={self.path!r}, file_exists={self.file_exists}, "
            f"last_modified={self.last_modified}, last_check_time={self.last_check_time}, "
            f"last_check_changed={self.last_check_changed})"
        )


@dataclass(frozen=True)
class LoadResult(Generic[T]):
    """Outcome of one :meth:`FileDataCache.load_data_with_status` call.

    Attributes
    ----------
    path : str
        Cache key the call resolved to.
    value : T or None
        Current cached value. ``None`` when the file is missing or the
        loader failed.
    has_changed : bool
        Whether this call observed a change (new load, file appeared or
        disappeared). Always False when served from cache.
    file_exists : bool
        Last observed existence of the file.
    from_cache : bool
        True when the call returned without touching the filesystem.
    error : LoaderError or None
        Loader failure from this call, if any.
    """

    path: str
    value: T | None
    has_changed: bool
    file_exists: bool
    from_cache: bool = False
    error: LoaderError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.value is not None


class FileDataCache(Generic[T]):
    """Lazily refreshing cache of values derived from files.

    Parameters
    ----------
    load_file_data : callable
        Loader turning a path into a value. Called as ``load_file_data(path)``,
        or ``load_file_data(path, content)`` when ``read_file`` is True.
    check_interval : int or float, default=20000
        Milliseconds during which a cached value is trusted without looking
        at the filesystem. ``0`` checks on every call.
    read_file : bool, default=False
        Read the file's text and pass it to the loader.
    verbose : bool, default=False
        Log every filesystem check at INFO instead of DEBUG.
    encoding : str, default="utf-8"
        Encoding for the default probe's text reads.
    probe : BaseProbe, optional
        Filesystem probe. Defaults to :class:`OSFilesystemProbe`.
    clock : callable, optional
        Zero-argument callable returning the current time in milliseconds.
        Defaults to the wall clock.

    Examples
    --------
    >>> from filedatacache.io.loaders import json_loader
    >>> cache = FileDataCache(json_loader, check_interval=5000)
    >>> settings = cache.load_data("settings.json")
    >>> result = cache.load_data_with_status("settings.json", bypass_cache=True)
    >>> if result.has_changed:
    ...     apply(result.value)
    """

    def __init__(
        self,
        load_file_data: LoadFileDataFunc,
        check_interval: int | float = DEFAULT_CHECK_INTERVAL,
        read_file: bool = False,
        verbose: bool = False,
        encoding: str = "utf-8",
        probe: BaseProbe | None = None,
        clock: Callable[[], float] | None = None,
    ):
        if not callable(load_file_data):
            raise ConfigurationError(
                f"load_file_data must be callable, got {type(load_file_data).__name__}"
            )

        self._config = CacheConfig(
            check_interval=check_interval,
            read_file=read_file,
            verbose=verbose,
            encoding=encoding,
        )
        self.load_file_data = load_file_data
        self.probe = probe if probe is not None else OSFilesystemProbe(encoding=encoding)
        self._clock = clock if clock is not None else _wall_clock_ms
        self._entries: dict[str, CacheEntry[T]] = {}

        logger.debug(
            f"Initialized file cache (check_interval={self.check_interval} ms, "
            f"read_file={self.read_file}, probe={self.probe!r})"
        )

    @classmethod
    def from_config(
        cls,
        load_file_data: LoadFileDataFunc,
        config: CacheConfig,
        probe: BaseProbe | None = None,
        clock: Callable[[], float] | None = None,
    ) -> FileDataCache[T]:
        """Build a cache from a :class:`CacheConfig`."""
        return cls(
            load_file_data,
            check_interval=config.check_interval,
            read_file=config.read_file,
            verbose=config.verbose,
            encoding=config.encoding,
            probe=probe,
            clock=clock,
        )

    @property
    def config(self) -> CacheConfig:
        """Copy of the options this cache was built with."""
        return CacheConfig.from_dict(self._config.to_dict())

    @property
    def check_interval(self) -> int | float:
        return self._config.check_interval

    @property
    def read_file(self) -> bool:
        return self._config.read_file

    @property
    def verbose(self) -> bool:
        return self._config.verbose

    @property
    def values(self) -> Mapping[str, CacheEntry[T]]:
        """Read-only view of path -> entry, in insertion order."""
        return MappingProxyType(self._entries)

    def load_data(self, path: str | os.PathLike, bypass_cache: bool = False) -> T | None:
        """Return the value derived from ``path``, refreshing it if stale.

        Parameters
        ----------
        path : str or PathLike
            File to load.
        bypass_cache : bool, default=False
            Check the filesystem even if the last check is recent.

        Returns
        -------
        T or None
            The derived value, or None if the file is missing or the loader
            failed on the latest check.
        """
        return self.load_data_with_status(path, bypass_cache=bypass_cache).value

    def load_data_with_status(
        self, path: str | os.PathLike, bypass_cache: bool = False
    ) -> LoadResult[T]:
        """Like :meth:`load_data`, but return the full :class:`LoadResult`."""
        key = os.fspath(path)
        now = self._clock()
        cached = self._entries.get(key)

        if (
            cached is not None
            and not bypass_cache
            and now - cached.last_check_time < self.check_interval
        ):
            return LoadResult(
                path=key,
                value=cached.value,
                has_changed=False,
                file_exists=cached.file_exists,
                from_cache=True,
            )

        error: LoaderError | None = None
        file_exists = self._exists(key)

        if not file_exists:
            value = None
            last_modified: float | None = 0
            has_changed = cached is not None and cached.file_exists
            logger.info(f"Path not found: {key}")
        else:
            last_modified = self._modified_time(key)
            # A failed stat never counts as "unchanged"
            if (
                cached is not None
                and cached.file_exists
                and last_modified is not None
                and last_modified == cached.last_modified
            ):
                self._trace(f"Unchanged since last check: {key}")
                value = cached.value
                has_changed = False
            else:
                self._trace(f"Loading {key} (last_modified={last_modified})")
                content = self._read_text(key) if self.read_file else None
                value, error = self._load(key, content)
                has_changed = True

        if cached is None:
            cached = CacheEntry(path=key)
            self._entries[key] = cached

        cached.value = value
        cached.file_exists = file_exists
        cached.last_modified = last_modified
        cached.last_check_time = max(now, cached.last_check_time)
        cached.last_check_changed = has_changed

        return LoadResult(
            path=key,
            value=value,
            has_changed=has_changed,
            file_exists=file_exists,
            error=error,
        )

    def get_paths(self) -> list[str]:
        """Return every path requested so far, in first-request order."""
        return list(self._entries)

    def get_values(self) -> list[T | None]:
        """Return the cached values, parallel to :meth:`get_paths`."""
        return [entry.value for entry in self._entries.values()]

    def get_entries(self) -> list[tuple[str, CacheEntry[T]]]:
        """Return ``(path, entry)`` snapshots, in first-request order."""
        return [(path, entry.copy()) for path, entry in self._entries.items()]

    def get_entry(self, path: str | os.PathLike) -> CacheEntry[T] | None:
        """Return a snapshot of the entry for ``path``, or None if never requested."""
        entry = self._entries.get(os.fspath(path))
        return entry.copy() if entry is not None else None

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, path: object) -> bool:
        try:
            return os.fspath(path) in self._entries
        except TypeError:
            return False

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(entries={len(self._entries)}, "
            f"check_interval={self.check_interval}, read_file={self.read_file})"
        )

    def _trace(self, message: str) -> None:
        if self.verbose:
            logger.info(message)
        else:
            logger.debug(message)

    def _exists(self, path: str) -> bool:
        try:
            return bool(self.probe.exists(path))
        except Exception as e:
            logger.debug(f"exists() failed for {path}: {e}")
            return False

    def _modified_time(self, path: str) -> float | None:
        try:
            return self.probe.modified_time(path)
        except Exception as e:
            logger.debug(f"modified_time() failed for {path}: {e}")
            return None

    def _read_text(self, path: str) -> str | None:
        try:
            return self.probe.read_text(path)
        except Exception as e:
            logger.debug(f"read_text() failed for {path}: {e}")
            return None

    def _load(self, path: str, content: str | None) -> tuple[T | None, LoaderError | None]:
        try:
            if self.read_file:
                return self.load_file_data(path, content), None
            return self.load_file_data(path), None
        except Exception as e:
            logger.warning(f"Failed to load file: {os.path.basename(path)}: {e!r}")
            error = LoaderError(path, e)
            error.__cause__ = e
            return None, error
