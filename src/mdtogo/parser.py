"""Section parser turning a Markdown command doc into help-text fields.

A document is scanned once, line by line. The first ``## `` heading marks
the command; the first non-blank line after it becomes the short
description. In the default mode ``### Synopsis`` and ``### Examples``
select which field subsequent lines feed, and any other ``### `` heading
discards lines until the next recognised heading. In full mode every
remaining line goes to the long description.

Fenced code blocks are unwrapped: the fence lines are dropped and the
lines between them are indented with a tab. Blank lines at the start and end
of the long description and the examples are dropped.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterator, List, Tuple

from .core.files import extension_of

SHORT_HEADING = "## "
SYNOPSIS_HEADING = "### Synopsis"
EXAMPLES_HEADING = "### Examples"
SUBSECTION_HEADING = "### "
CODE_FENCE = "```"

# Closes the raw string, splices in a quoted backtick and reopens it.
BACKTICK_ESCAPE = '` + "`" + `'


class Section(Enum):
    """Which field, if any, collects the current line."""

    IDLE = "idle"
    LONG = "long"
    EXAMPLES = "examples"


@dataclass(frozen=True)
class ScanState:
    """Per-document scanner state."""

    section: Section = Section.IDLE
    in_code_block: bool = False


@dataclass(frozen=True)
class Document:
    """Help text extracted from one Markdown file."""

    name: str
    short: str = ""
    long: str = ""
    examples: str = ""


def derive_name(filename: str) -> str:
    """Return the identifier prefix for ``filename``.

    >>> derive_name("my-cmd-name.md")
    'MyCmdName'
    """

    extension = extension_of(filename)
    stem = filename.replace(extension, "") if extension else filename
    return _title_case(stem).replace("-", "")


def advance(
    state: ScanState, line: str, *, full: bool
) -> Tuple[ScanState, bool]:
    """Apply ``line`` to ``state``.

    Returns the next state and whether ``line`` was a control line
    (a subsection heading or code fence) that must not be collected.
    """

    if not full:
        if line.startswith(SYNOPSIS_HEADING):
            return replace(state, section=Section.LONG), True
        if line.startswith(EXAMPLES_HEADING):
            return replace(state, section=Section.EXAMPLES), True
        if line.startswith(SUBSECTION_HEADING):
            return replace(state, section=Section.IDLE), True

    if line.startswith(CODE_FENCE):
        return replace(state, in_code_block=not state.in_code_block), True

    return state, False


def escape_backticks(line: str) -> str:
    return line.replace("`", BACKTICK_ESCAPE)


def parse_document(
    filename: str, content: str, *, full: bool = False
) -> Document:
    """Parse ``content`` read from ``filename`` into a :class:`Document`."""

    short = ""
    long_lines: List[str] = []
    example_lines: List[str] = []
    state = ScanState()

    lines = iter_lines(content)
    for line in lines:
        if not short and line.startswith(SHORT_HEADING):
            short = escape_backticks(_next_non_blank(lines))
            continue

        state, consumed = advance(state, line, full=full)
        if consumed:
            continue

        text = escape_backticks(line)
        if state.in_code_block:
            text = "\t" + text

        if full or state.section is Section.LONG:
            long_lines.append(text)
        elif state.section is Section.EXAMPLES:
            example_lines.append(text)

    return Document(
        name=derive_name(filename),
        short=short,
        long=_join_trimmed(long_lines),
        examples=_join_trimmed(example_lines),
    )


def iter_lines(content: str) -> Iterator[str]:
    """Yield the lines of ``content`` without their terminators.

    Lines end at ``\\n`` with an optional preceding ``\\r``; a trailing
    line without a terminator is still yielded, an empty one is not.
    """

    if not content:
        return
    pieces = content.split("\n")
    if pieces[-1] == "":
        pieces.pop()
    for piece in pieces:
        yield piece[:-1] if piece.endswith("\r") else piece


def _next_non_blank(lines: Iterator[str]) -> str:
    for candidate in lines:
        if candidate.strip():
            return candidate
    return ""


def _join_trimmed(lines: List[str]) -> str:
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return "\n".join(lines[start:end])


def _title_case(text: str) -> str:
    chars: List[str] = []
    previous = " "
    for char in text:
        chars.append(char.upper() if _is_separator(previous) else char)
        previous = char
    return "".join(chars)


def _is_separator(char: str) -> bool:
    if char.isascii():
        return not (char.isalnum() or char == "_")
    if char.isalpha() or char.isdigit():
        return False
    return char.isspace()


__all__ = [
    "Document",
    "ScanState",
    "Section",
    "advance",
    "derive_name",
    "escape_backticks",
    "iter_lines",
    "parse_document",
]
