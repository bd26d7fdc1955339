"""Failure taxonomy shared by every generation stage."""

from __future__ import annotations

from enum import Enum

__all__ = [
    "ErrorCategory",
    "GenerationError",
    "UsageError",
    "ConfigError",
    "SourceError",
    "LicenseError",
    "OutputError",
    "LogFileError",
    "ScanError",
    "NameCollisionError",
]


class ErrorCategory(Enum):
    """Broad classes of failure reported by the CLI."""

    USAGE = "usage"
    IO = "io"
    SCAN = "scan"
    COLLISION = "collision"


class GenerationError(RuntimeError):
    """Base class for failures that abort a generation run."""

    category: ErrorCategory = ErrorCategory.IO


class UsageError(GenerationError):
    """Raised when the invocation itself is unusable."""

    category = ErrorCategory.USAGE


class ConfigError(UsageError):
    """Raised when configuration parsing or validation fails."""


class SourceError(GenerationError):
    """Raised when the source directory or one of its files is unreadable."""


class LicenseError(GenerationError):
    """Raised when a custom license header file cannot be read."""


class OutputError(GenerationError):
    """Raised when the generated file cannot be written."""


class LogFileError(GenerationError):
    """Raised when the requested log file cannot be opened."""


class ScanError(GenerationError):
    """Raised when document text cannot be decoded or scanned."""

    category = ErrorCategory.SCAN


class NameCollisionError(GenerationError):
    """Raised in strict mode when two documents derive the same name."""

    category = ErrorCategory.COLLISION
