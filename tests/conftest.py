from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterator

import pytest

TESTS_DIR = Path(__file__).resolve().parent
if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))

# Ensure src/ is importable when the package is not installed
ROOT = TESTS_DIR.parent
SRC = str(ROOT / "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from fixtures import DocsWorkspace  # noqa: E402

EDIT_DOC = """## edit

Edit a resource.

### Synopsis

Edit the named resource in place.

### Examples

kubectl edit pod/foo
"""


@pytest.fixture
def workspace(tmp_path: Path) -> DocsWorkspace:
    """Provide docs/ and pkg/commands/ directories under tmp_path."""

    return DocsWorkspace(tmp_path)


@pytest.fixture
def edit_doc() -> str:
    return EDIT_DOC


@pytest.fixture(autouse=True)
def _reset_mdtogo_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("mdtogo")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
