"""Discover and read the Markdown sources of a generation run."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from .core.files import extension_of, list_directory_files, read_utf8
from .errors import ScanError, SourceError

DEFAULT_EXTENSION = ".md"


@dataclass(frozen=True)
class SourceFile:
    """A documentation file and its decoded text."""

    path: Path
    content: str

    @property
    def name(self) -> str:
        return self.path.name


def discover_sources(
    source_dir: Path,
    *,
    extension: str = DEFAULT_EXTENSION,
    sort: bool = True,
) -> List[Path]:
    """Return files directly inside ``source_dir`` ending in ``extension``.

    With ``sort`` disabled the directory-listing order is kept as is.
    """

    try:
        entries = list_directory_files(source_dir)
    except OSError as exc:
        raise SourceError(
            f"Unable to list source directory {source_dir}: {exc}"
        ) from exc

    matches = [path for path in entries if extension_of(path.name) == extension]
    if sort:
        matches.sort(key=lambda path: path.name)
    return matches


def read_source(path: Path) -> SourceFile:
    try:
        content = read_utf8(path)
    except UnicodeDecodeError as exc:
        raise ScanError(f"Unable to decode {path} as UTF-8: {exc}") from exc
    except OSError as exc:
        raise SourceError(f"Unable to read {path}: {exc}") from exc
    return SourceFile(path=path, content=content)


def load_sources(
    source_dir: Path,
    *,
    extension: str = DEFAULT_EXTENSION,
    sort: bool = True,
) -> List[SourceFile]:
    """Read every documentation file in ``source_dir``, failing fast."""

    return [
        read_source(path)
        for path in discover_sources(source_dir, extension=extension, sort=sort)
    ]


__all__ = [
    "DEFAULT_EXTENSION",
    "SourceFile",
    "discover_sources",
    "load_sources",
    "read_source",
]
