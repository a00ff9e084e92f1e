"""File system helpers."""

from __future__ import annotations

import os
import stat


def file_exists(name: str | os.PathLike[str]) -> bool:
    """True if ``name`` can be stat'ed (symlinks are followed)."""
    try:
        os.stat(name)
    except (OSError, ValueError):
        return False
    return True


def is_dir(path: str | os.PathLike[str]) -> bool:
    """True if ``path`` is itself a directory; a symlink to one is not."""
    if not file_exists(path):
        return False
    return stat.S_ISDIR(os.lstat(path).st_mode)


def get_lines_from_file(fname: str | os.PathLike[str]) -> list[str]:
    """Return the file's lines without newlines.

    A trailing newline yields a final empty line, and an empty file yields ``[""]``.
    """
    if not file_exists(fname):
        raise FileNotFoundError(f"File: {fname} does not exist")
    if os.path.isdir(fname):
        return []
    with open(fname, encoding="utf-8", newline="") as handle:
        return handle.read().split("\n")