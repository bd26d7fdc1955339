"""Filesystem helpers shared by tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Union

TreeValue = Union[str, bytes, "Tree", None]
Tree = Mapping[str, TreeValue]


def build_tree(base: Path, tree: Tree) -> None:
    """Create files/directories under ``base`` from a nested mapping.

    ``tree`` maps names to either strings/bytes (file content), ``None``
    (directories), or nested mappings for subdirectories.
    """

    for name, value in tree.items():
        path = base / name
        if isinstance(value, (str, bytes)):
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(value, bytes):
                path.write_bytes(value)
            else:
                path.write_bytes(value.encode("utf-8"))
            continue
        if isinstance(value, Mapping):
            path.mkdir(parents=True, exist_ok=True)
            build_tree(path, value)  # type: ignore[arg-type]
            continue
        if value is None:
            path.mkdir(parents=True, exist_ok=True)
            continue
        raise TypeError(f"Unsupported tree value for {path}: {type(value)!r}")


@dataclass
class DocsWorkspace:
    """A docs source directory and a Go package destination under tmp."""

    root: Path
    source: Path = field(init=False)
    dest: Path = field(init=False)

    def __post_init__(self) -> None:
        self.source = self.root / "docs"
        self.dest = self.root / "pkg" / "commands"
        self.source.mkdir(parents=True, exist_ok=True)

    def add_docs(self, tree: Tree) -> Path:
        build_tree(self.source, tree)
        return self.source

    def write(
        self, relative: Union[str, Path], content: Union[str, bytes]
    ) -> Path:
        path = self.root / Path(relative)
        build_tree(path.parent, {path.name: content})
        return path

    @property
    def output(self) -> Path:
        return self.dest / "docs.go"

    def generated(self) -> str:
        return self.output.read_bytes().decode("utf-8")
