"""mdtogo: generate Go help-text variables from Markdown command docs."""

from __future__ import annotations

from .config import ConfigOverrides, GeneratorConfig, load_config
from .emitter import render_declarations, render_source, write_source
from .errors import (
    ConfigError,
    ErrorCategory,
    GenerationError,
    LicenseError,
    LogFileError,
    NameCollisionError,
    OutputError,
    ScanError,
    SourceError,
    UsageError,
)
from .license import LicenseHeader, resolve_license
from .loader import SourceFile, discover_sources, load_sources
from .parser import Document, derive_name, parse_document
from .runner import GenerationResult, GenerationStatus, run_generation

__all__ = [
    "ConfigOverrides",
    "GeneratorConfig",
    "load_config",
    "render_declarations",
    "render_source",
    "write_source",
    "ConfigError",
    "ErrorCategory",
    "GenerationError",
    "LicenseError",
    "LogFileError",
    "NameCollisionError",
    "OutputError",
    "ScanError",
    "SourceError",
    "UsageError",
    "LicenseHeader",
    "resolve_license",
    "SourceFile",
    "discover_sources",
    "load_sources",
    "Document",
    "derive_name",
    "parse_document",
    "GenerationResult",
    "GenerationStatus",
    "run_generation",
]
