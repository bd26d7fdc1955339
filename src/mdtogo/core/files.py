"""Filesystem helpers used by the document loader and emitter."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List

__all__ = [
    "extension_of",
    "list_directory_files",
    "read_utf8",
]


def extension_of(name: str) -> str:
    """Return the suffix of ``name`` starting at its final dot.

    Unlike :attr:`pathlib.PurePath.suffix`, a leading-dot name such as
    ``.md`` is treated as all extension.
    """

    index = name.rfind(".")
    if index < 0:
        return ""
    return name[index:]


def list_directory_files(directory: Path) -> List[Path]:
    """List regular files directly under ``directory`` in listing order.

    Raises :class:`OSError` when the directory cannot be listed.
    """

    with os.scandir(directory) as entries:
        return [Path(entry.path) for entry in entries if entry.is_file()]


def read_utf8(path: Path) -> str:
    """Read ``path`` as strict UTF-8.

    :class:`OSError` signals an unreadable file and
    :class:`UnicodeDecodeError` undecodable content; callers map each to
    their own failure.
    """

    data = Path(path).read_bytes()
    return data.decode("utf-8")
