"""Render parsed documents into a Go source file of string variables."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

from .errors import OutputError
from .parser import Document

DEFAULT_OUTPUT_NAME = "docs.go"
GENERATED_MARKER = '// Code generated by "mdtogo"; DO NOT EDIT.'


def render_declarations(document: Document) -> str:
    """Return one ``var`` line per non-empty field of ``document``."""

    fields = (
        ("Short", document.short),
        ("Long", document.long),
        ("Examples", document.examples),
    )
    parts = [
        f"var {document.name}{suffix}=`{value}`"
        for suffix, value in fields
        if value
    ]
    return "\n".join(parts) + "\n"


def render_source(
    license_text: str, package: str, documents: Iterable[Document]
) -> str:
    """Assemble the full generated file text."""

    header = f"\n{GENERATED_MARKER}\npackage {package}\n"
    out: List[str] = [license_text, header]
    out.extend(render_declarations(document) for document in documents)
    return "\n".join(out)


def package_name(dest_dir: Path) -> str:
    """Return the Go package name implied by ``dest_dir``."""

    return os.path.basename(os.path.normpath(os.fspath(dest_dir)))


def write_source(
    dest_dir: Path,
    text: str,
    *,
    output_name: str = DEFAULT_OUTPUT_NAME,
    mode: int = 0o600,
) -> Path:
    """Write ``text`` to ``dest_dir/output_name``, replacing any old file."""

    if not dest_dir.exists():
        try:
            dest_dir.mkdir(mode=0o700, parents=True)
        except OSError:
            # The write below reports the failure.
            pass

    target = dest_dir / output_name
    created = not target.exists()
    try:
        with target.open("w", encoding="utf-8", newline="") as handle:
            handle.write(text)
    except OSError as exc:
        raise OutputError(f"Unable to write {target}: {exc}") from exc
    if created:
        try:
            target.chmod(mode)
        except PermissionError:  # pragma: no cover - depends on filesystem
            pass
    return target


__all__ = [
    "DEFAULT_OUTPUT_NAME",
    "GENERATED_MARKER",
    "package_name",
    "render_declarations",
    "render_source",
    "write_source",
]
