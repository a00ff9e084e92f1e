"""Small string helpers: splitting, joining, path pieces and trimming."""

from __future__ import annotations

from typing import Iterable

_DIGITS = frozenset("0123456789")


def split_str_by_delimiter(s: str, delimiter: str) -> list[str]:
    """Split on ``delimiter``; empty inner fields are kept, a trailing empty one is not."""
    parts = s.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts


def join_by_delimiter(strs: Iterable[str], delimiter: str) -> str:
    return delimiter.join(strs)


def filename(path: str) -> str:
    """Return the last ``/``-separated component of ``path``."""
    parts = split_str_by_delimiter(path, "/")
    return parts[-1] if parts else ""


def base_dir(path: str) -> str:
    """Return every component but the last, each followed by ``/``."""
    parts = split_str_by_delimiter(path, "/")
    return "".join(part + "/" for part in parts[:-1])


def is_number(s: str) -> bool:
    """True if every character is an ASCII digit (the empty string counts)."""
    return all(c in _DIGITS for c in s)


def _is_graph(c: str) -> bool:
    return c.isprintable() and not c.isspace()


def ltrim(s: str) -> str:
    start = next((i for i, c in enumerate(s) if _is_graph(c)), len(s))
    return s[start:]


def rtrim(s: str) -> str:
    end = next((i for i in range(len(s), 0, -1) if _is_graph(s[i - 1])), 0)
    return s[:end]


def trim(s: str) -> str:
    return ltrim(rtrim(s))