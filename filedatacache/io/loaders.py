"""Ready-made loaders for common file formats.

Every loader follows the cache's loader signature ``(path, content=None)``:
when the cache was built with ``read_file=True`` the text arrives as
``content``, otherwise the loader reads the file itself.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

__all__ = ["json_loader", "text_loader", "lines_loader"]


def _read(path: str | Path, content: str | None, encoding: str = "utf-8") -> str:
    if content is not None:
        return content
    with open(path, "r", encoding=encoding) as f:
        return f.read()


def text_loader(path: str | Path, content: str | None = None) -> str:
    """Return the file's text unchanged."""
    return _read(path, content)


def json_loader(path: str | Path, content: str | None = None) -> Any:
    """Parse the file as JSON.

    Raises
    ------
    json.JSONDecodeError
        If the file is not valid JSON. The cache catches this and reports
        it as a loader failure.
    """
    return json.loads(_read(path, content))


def lines_loader(path: str | Path, content: str | None = None) -> set[str]:
    """Return the set of meaningful lines in the file.

    Blank lines and lines starting with ``#`` are skipped; surrounding
    whitespace is stripped. Suited to allow/deny lists.

    Examples
    --------
    >>> sorted(lines_loader("hosts.txt", "# blocked\\nexample.com\\n\\n  evil.org \\n"))
    ['evil.org', 'example.com']
    """
    text = _read(path, content)
    return {
        line.strip()
        for line in text.splitlines()
        if line.strip() and not line.lstrip().startswith("#")
    }
