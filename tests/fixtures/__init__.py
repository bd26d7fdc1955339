"""Shared testing fixtures for the mdtogo test suite."""

from .workspace import DocsWorkspace, build_tree  # noqa: F401

__all__ = [
    "DocsWorkspace",
    "build_tree",
]
