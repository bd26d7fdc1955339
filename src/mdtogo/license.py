"""Resolve the license header placed at the top of generated files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .core.files import read_utf8
from .errors import LicenseError

DEFAULT_LICENSE = (
    "// Copyright 2019 The Kubernetes Authors.\n"
    "// SPDX-License-Identifier: Apache-2.0"
)
NO_LICENSE = "none"


@dataclass(frozen=True)
class LicenseHeader:
    """Header text plus where it came from, for logging."""

    text: str
    source: str


def resolve_license(override: Optional[str]) -> LicenseHeader:
    """Return the header for ``override``.

    ``None`` or an empty string selects :data:`DEFAULT_LICENSE`, the literal
    ``none`` suppresses the header and anything else is read as a file path.
    """

    if not override:
        return LicenseHeader(text=DEFAULT_LICENSE, source="default")
    if override == NO_LICENSE:
        return LicenseHeader(text="", source=NO_LICENSE)

    path = Path(override).expanduser()
    try:
        text = read_utf8(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise LicenseError(
            f"Unable to read license file {path}: {exc}"
        ) from exc
    return LicenseHeader(text=text, source=str(path))


__all__ = [
    "DEFAULT_LICENSE",
    "NO_LICENSE",
    "LicenseHeader",
    "resolve_license",
]
