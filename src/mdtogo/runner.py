"""Sequential driver tying the generation stages together."""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from .config import GeneratorConfig
from .emitter import package_name, render_source, write_source
from .errors import GenerationError, NameCollisionError
from .license import resolve_license
from .loader import load_sources
from .parser import Document, parse_document


class GenerationStatus(Enum):
    """Outcome status for a generation run."""

    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class GenerationResult:
    """Result of a generation run, successful or not."""

    status: GenerationStatus
    documents: tuple[Document, ...] = ()
    output_path: Optional[Path] = None
    error: Optional[GenerationError] = None

    @property
    def exit_code(self) -> int:
        return 0 if self.status is GenerationStatus.SUCCESS else 1


def run_generation(
    config: GeneratorConfig,
    *,
    logger: logging.Logger,
) -> GenerationResult:
    """Generate the docs file described by ``config``.

    The first failure stops the run; it is logged and returned in the result
    rather than raised.
    """

    try:
        return _run_generation(config, logger)
    except GenerationError as exc:
        logger.error(
            "Generation failed",
            extra={"category": exc.category.value, "reason": str(exc)},
        )
        return GenerationResult(status=GenerationStatus.FAILED, error=exc)


def _run_generation(
    config: GeneratorConfig, logger: logging.Logger
) -> GenerationResult:
    logger.info(
        "Starting generation",
        extra={
            "source_dir": str(config.source_dir),
            "dest_dir": str(config.dest_dir),
            "full": config.full,
            "sort": config.sort,
        },
    )

    sources = load_sources(
        config.source_dir, extension=config.extension, sort=config.sort
    )
    logger.info(
        "Loaded documentation sources",
        extra={"source_count": len(sources)},
    )

    documents: List[Document] = []
    for source in sources:
        document = parse_document(
            source.name, source.content, full=config.full
        )
        logger.debug(
            "Parsed document",
            extra={
                "source": str(source.path),
                "document": document.name,
                "short": bool(document.short),
                "long": bool(document.long),
                "examples": bool(document.examples),
            },
        )
        documents.append(document)

    _check_collisions(
        documents,
        [source.name for source in sources],
        strict=config.strict_names,
        logger=logger,
    )

    header = resolve_license(config.license)
    logger.debug("Resolved license header", extra={"license": header.source})

    text = render_source(
        header.text, package_name(config.dest_dir), documents
    )
    output_path = write_source(
        config.dest_dir, text, output_name=config.output_name
    )
    logger.info(
        "Wrote generated source",
        extra={
            "output_path": str(output_path),
            "document_count": len(documents),
            "bytes": len(text.encode("utf-8")),
        },
    )

    return GenerationResult(
        status=GenerationStatus.SUCCESS,
        documents=tuple(documents),
        output_path=output_path,
    )


def find_collisions(
    documents: Sequence[Document], filenames: Sequence[str]
) -> Dict[str, List[str]]:
    """Map each name derived by more than one file to those file names."""

    by_name: Dict[str, List[str]] = defaultdict(list)
    for document, filename in zip(documents, filenames):
        by_name[document.name].append(filename)
    return {name: files for name, files in by_name.items() if len(files) > 1}


def _check_collisions(
    documents: Sequence[Document],
    filenames: Sequence[str],
    *,
    strict: bool,
    logger: logging.Logger,
) -> None:
    collisions = find_collisions(documents, filenames)
    if not collisions:
        return
    for name, files in collisions.items():
        logger.warning(
            "Multiple documents derive the same name",
            extra={"document": name, "files": files},
        )
    if strict:
        details = "; ".join(
            f"{name}: {', '.join(files)}" for name, files in collisions.items()
        )
        raise NameCollisionError(f"Duplicate document names: {details}")


__all__ = [
    "GenerationResult",
    "GenerationStatus",
    "find_collisions",
    "run_generation",
]
