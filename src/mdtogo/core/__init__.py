"""Shared helpers for the mdtogo generator."""

from __future__ import annotations

from .config import load_toml, merge_defaults
from .files import extension_of, list_directory_files, read_utf8
from .logging import JsonLogFormatter, configure_logger

__all__ = [
    "load_toml",
    "merge_defaults",
    "extension_of",
    "list_directory_files",
    "read_utf8",
    "JsonLogFormatter",
    "configure_logger",
]
