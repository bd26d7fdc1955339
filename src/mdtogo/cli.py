"""CLI entry point for mdtogo.

Usage: mdtogo SOURCE_DIR DEST_DIR [--full[=BOOL]] [--license=PATH|none]

Every ``*.md`` file directly inside SOURCE_DIR is parsed into Short, Long
and Examples help text, and a single ``DEST_DIR/docs.go`` is written with
one string variable per non-empty field. Variable names come from the file
names: ``my-cmd.md`` produces ``MyCmdShort``, ``MyCmdLong`` and
``MyCmdExamples``.

A bare ``--full`` takes an optional value, so it goes after DEST_DIR;
before the positionals spell it ``--full=true``.
"""

from __future__ import annotations

import argparse
import sys
from importlib import metadata
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console

from .config import ConfigOverrides, load_config, parse_bool
from .core.logging import configure_logger
from .errors import ConfigError, LogFileError
from .runner import GenerationResult, GenerationStatus, run_generation

LOGGER_NAME = "mdtogo"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdtogo",
        usage=(
            "%(prog)s SOURCE_DIR DEST_DIR [--full[=BOOL]] "
            "[--license=PATH|none] [options]"
        ),
        description=(
            "Generate Go string variables holding command help text from a "
            "directory of Markdown files."
        ),
        epilog=(
            "Without --full, each document is split into Short (first line "
            "after the '## ' heading), Long ('### Synopsis') and Examples "
            "('### Examples')."
        ),
    )
    parser.add_argument(
        "source_dir",
        metavar="SOURCE_DIR",
        type=Path,
        help="Directory containing the Markdown (*.md) documents.",
    )
    parser.add_argument(
        "dest_dir",
        metavar="DEST_DIR",
        type=Path,
        help=(
            "Directory receiving the generated file; its base name is used "
            "as the Go package name."
        ),
    )
    parser.add_argument(
        "--full",
        nargs="?",
        const=True,
        default=None,
        type=_bool_argument,
        metavar="BOOL",
        help=(
            "Put every section of each document into the Long variable "
            "instead of splitting by subsection. A bare --full must come "
            "after DEST_DIR; anywhere else write --full=true."
        ),
    )
    parser.add_argument(
        "--license",
        metavar="PATH",
        help=(
            "License header file to prepend, or 'none' to omit the header. "
            "Defaults to the built-in Apache-2.0 header."
        ),
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to an mdtogo.toml config file.",
    )
    parser.add_argument(
        "--no-sort",
        dest="sort",
        action="store_const",
        const=False,
        default=None,
        help="Process documents in directory-listing order, not by name.",
    )
    parser.add_argument(
        "--strict-names",
        action="store_const",
        const=True,
        default=None,
        help="Fail when two documents produce the same variable prefix.",
    )
    parser.add_argument(
        "--output-name",
        help="Name of the generated file (defaults to docs.go).",
    )
    parser.add_argument(
        "--log-level",
        help="Log level for the log file (defaults to INFO).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Write JSON log records to this file.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Echo log records to stderr.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {_package_version()}",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    overrides = ConfigOverrides(
        full=args.full,
        license=args.license,
        sort=args.sort,
        strict_names=args.strict_names,
        output_name=args.output_name,
        log_level=args.log_level,
        log_file=args.log_file,
    )

    try:
        config = load_config(
            args.source_dir,
            args.dest_dir,
            config_path=args.config,
            overrides=overrides,
        )
    except ConfigError as exc:
        parser.error(str(exc))

    try:
        logger = configure_logger(
            LOGGER_NAME,
            level=config.log_level,
            verbose=args.verbose,
            log_file=config.log_file,
        )
    except OSError as exc:
        error = LogFileError(
            f"Unable to open log file {config.log_file}: {exc}"
        )
        return _report(
            GenerationResult(status=GenerationStatus.FAILED, error=error)
        )
    logger.debug("mdtogo CLI invoked")

    return _report(run_generation(config, logger=logger))


def _report(result: GenerationResult) -> int:
    if result.error is not None:
        _stderr_console().print(f"Error: {result.error}")
        return result.exit_code

    _stdout_console().print(
        "Generated {0} document(s) -> {1}".format(
            len(result.documents), result.output_path
        )
    )
    return result.exit_code


def _bool_argument(value: str) -> bool:
    try:
        return parse_bool(value)
    except ConfigError as exc:
        raise argparse.ArgumentTypeError(
            f"{exc} A bare --full must follow DEST_DIR; "
            "elsewhere write --full=true."
        ) from exc


def _package_version() -> str:
    try:
        return metadata.version("mdtogo")
    except metadata.PackageNotFoundError:
        return "unknown"


def _stdout_console() -> Console:
    return Console(
        file=sys.stdout,
        highlight=False,
        markup=False,
        emoji=False,
        soft_wrap=True,
    )


def _stderr_console() -> Console:
    return Console(
        file=sys.stderr,
        highlight=False,
        markup=False,
        emoji=False,
        soft_wrap=True,
    )


if __name__ == "__main__":  # pragma: no cover - module CLI guard
    raise SystemExit(main())
