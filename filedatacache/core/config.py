"""Cache configuration record.

Provides serialization, validation, and environment overrides for the
options a :class:`~filedatacache.io.cache.FileDataCache` is built from.
"""

import inspect
import json
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from typing_extensions import Self

from .exceptions import ConfigurationError

__all__ = ["CacheConfig", "DEFAULT_CHECK_INTERVAL"]

DEFAULT_CHECK_INTERVAL = 20000

# Allowed basic types for config values
BASIC_TYPES = (int, float, str, bool, type(None))

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off", ""}


@dataclass(init=False)
class CacheConfig:
    """Options for a file data cache.

    Public attributes must be basic JSON types so the record can be
    written to and read back from disk.

    Parameters
    ----------
    check_interval : int or float, default=20000
        Minimum time in milliseconds between two filesystem checks of the
        same path. ``0`` checks on every call.
    read_file : bool, default=False
        Read the file's text and hand it to the loader as second argument.
    verbose : bool, default=False
        Log every filesystem check at INFO instead of DEBUG.
    encoding : str, default="utf-8"
        Encoding used when reading file content.

    Examples
    --------
    >>> config = CacheConfig(check_interval=5000, read_file=True)
    >>> config.save("cache.json")
    >>> CacheConfig.load("cache.json").check_interval
    5000
    """

    check_interval: int | float
    read_file: bool
    verbose: bool
    encoding: str

    def __init__(
        self,
        check_interval: int | float = DEFAULT_CHECK_INTERVAL,
        read_file: bool = False,
        verbose: bool = False,
        encoding: str = "utf-8",
    ):
        self.check_interval = check_interval
        self.read_file = bool(read_file)
        self.verbose = bool(verbose)
        self.encoding = encoding

    def __setattr__(self, name: str, value: Any) -> None:
        """Validate attribute types before setting.

        Private attributes (starting with '_') can be any type.
        """
        if name == "check_interval":
            value = self.validate_check_interval(value)
        elif not name.startswith("_"):
            self._validate_value(value, name)

        super().__setattr__(name, value)

    @staticmethod
    def validate_check_interval(value: Any) -> int | float:
        """Return ``value`` if it is a usable interval in milliseconds.

        Raises
        ------
        ConfigurationError
            If ``value`` is not a non-negative number.
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigurationError(
                f"check_interval must be a number of milliseconds, got {type(value).__name__}"
            )
        if math.isnan(value) or value < 0:
            raise ConfigurationError(f"check_interval must be >= 0, got {value}")
        return value

    @staticmethod
    def _validate_value(value: Any, name: str = "value") -> None:
        """Recursively validate that value is serializable.

        Raises
        ------
        TypeError
            If value contains non-serializable types.
        """
        if isinstance(value, BASIC_TYPES):
            return

        if isinstance(value, list):
            for i, item in enumerate(value):
                CacheConfig._validate_value(item, f"{name}[{i}]")
            return

        if isinstance(value, dict):
            for key, val in value.items():
                if not isinstance(key, str):
                    raise TypeError(
                        f"Dict keys must be strings, got {type(key).__name__} for key in {name}"
                    )
                CacheConfig._validate_value(val, f"{name}['{key}']")
            return

        raise TypeError(
            f"Attribute '{name}' has invalid type {type(value).__name__}. "
            f"Only basic types (int, float, str, bool, None) and nested "
            f"dict/list are allowed."
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary of its public attributes."""
        return {
            key: value
            for key, value in self.__dict__.items()
            if not key.startswith("_") and not callable(value)
        }

    def save(self, path: str | Path, update: bool = True) -> None:
        """Save config to a JSON file.

        Parameters
        ----------
        path : str or Path
            Path to save config file.
        update : bool, default=True
            If True and the file exists, keys already in the file that this
            config does not define are preserved.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        config_dict = self.to_dict()

        if update and path.exists():
            try:
                with open(path, "r", encoding="utf-8") as f:
                    existing_dict = json.load(f)
                existing_dict.update(config_dict)
                config_dict = existing_dict
            except (json.JSONDecodeError, OSError):
                # Corrupt or unreadable file is replaced
                pass

        with open(path, "w", encoding="utf-8") as f:
            json.dump(config_dict, f, indent=2, ensure_ascii=False)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any], strict: bool = True) -> Self:
        """Create config from a dictionary, filling missing keys with defaults.

        Parameters
        ----------
        config_dict : dict[str, Any]
            Configuration dictionary.
        strict : bool, default=True
            If True, unknown keys raise :class:`ConfigurationError`.
            If False, they are ignored.

        Returns
        -------
        Self
            Config instance.
        """
        sig = inspect.signature(cls.__init__)
        known = [name for name in sig.parameters if name != "self"]

        unknown = sorted(set(config_dict) - set(known))
        if strict and unknown:
            raise ConfigurationError(f"Unknown options for {cls.__name__}: {unknown}")

        init_kwargs = {name: config_dict[name] for name in known if name in config_dict}
        return cls(**init_kwargs)

    @classmethod
    def load(cls, path: str | Path, strict: bool = True) -> Self:
        """Load config from a JSON file.

        Raises
        ------
        ConfigurationError
            If the file cannot be read, is not a JSON object, or holds
            invalid options.
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                config_dict = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot read cache config {path}: {e}") from e

        if not isinstance(config_dict, dict):
            raise ConfigurationError(
                f"Cache config {path} must hold a JSON object, got {type(config_dict).__name__}"
            )

        return cls.from_dict(config_dict, strict=strict)

    @classmethod
    def from_env(cls, prefix: str = "FILEDATACACHE_") -> Self:
        """Build a config from environment variables.

        Reads ``{prefix}CHECK_INTERVAL``, ``{prefix}READ_FILE``,
        ``{prefix}VERBOSE`` and ``{prefix}ENCODING``. Unset variables keep
        their defaults.
        """
        config_dict: dict[str, Any] = {}

        raw = os.environ.get(f"{prefix}CHECK_INTERVAL")
        if raw is not None:
            config_dict["check_interval"] = _parse_number(raw, f"{prefix}CHECK_INTERVAL")

        for option in ("read_file", "verbose"):
            raw = os.environ.get(f"{prefix}{option.upper()}")
            if raw is not None:
                config_dict[option] = _parse_bool(raw, f"{prefix}{option.upper()}")

        raw = os.environ.get(f"{prefix}ENCODING")
        if raw:
            config_dict["encoding"] = raw

        return cls.from_dict(config_dict)


def _parse_bool(raw: str, name: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE_STRINGS:
        return True
    if lowered in _FALSE_STRINGS:
        return False
    raise ConfigurationError(f"{name} must be a boolean flag, got {raw!r}")


def _parse_number(raw: str, name: str) -> int | float:
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e
