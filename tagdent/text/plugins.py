"""Pre-work and post-work plugins for indentation measurement.

Responsibilities:
- Drop blank boundary lines before a block is measured.
- Adjust measured indents before the shared excess is derived.

Indent policies take and return a `(lines, indents)` pair; plain tuples are
accepted so policies can be called directly on hand-built input.
"""

from __future__ import annotations

import sys
from typing import Callable, Sequence

from ..models.datatypes import MeasuredLines
from .indents import split_lines

MAXIMAL_INDENT = sys.maxsize


def strip_empty_first_and_last(text: str) -> str:
    """Remove the first and last lines when they contain only whitespace."""

    lines = split_lines(text)
    if lines and not lines[0].lstrip(" \t"):
        lines.pop(0)
    if lines and not lines[-1].lstrip(" \t"):
        lines.pop()
    return "\n".join(lines)


def keep_indents(measured: MeasuredLines) -> MeasuredLines:
    """Return measured lines unchanged."""

    return measured


def drop_lowest_indents(measured: MeasuredLines) -> MeasuredLines:
    """Discard the lowest indent level so the next-lowest becomes the excess.

    Indents collapse to their distinct values minus the minimum. When every
    line shares one indent the result is empty and nothing is stripped.
    """

    lines, indents = measured
    distinct = sorted(set(indents))
    return MeasuredLines(lines=tuple(lines), indents=tuple(distinct[1:]))


DropThreshold = Callable[[Sequence[int], int, int], bool]


def lowest_is_minority(indents: Sequence[int], lowest: int, occurrences: int) -> bool:
    """Return whether the lowest indent occurs on fewer than half the lines."""

    return occurrences < len(indents) / 2


def drop_lowest_minority_indents(
    measured: MeasuredLines,
    threshold: DropThreshold | None = None,
) -> MeasuredLines:
    """Discard every occurrence of the lowest indent when `threshold` allows it.

    `threshold` is called as `(indents, lowest, occurrences)` and defaults to
    `lowest_is_minority`.
    """

    lines, indents = measured
    if not indents:
        return MeasuredLines(lines=tuple(lines), indents=())

    test = threshold or lowest_is_minority
    lowest = min(indents)
    occurrences = sum(1 for indent in indents if indent == lowest)
    if test(tuple(indents), lowest, occurrences):
        indents = [indent for indent in indents if indent != lowest]
    return MeasuredLines(lines=tuple(lines), indents=tuple(indents))


def force_maximal_indents(measured: MeasuredLines) -> MeasuredLines:
    """Replace indents with a sentinel so every leading whitespace run is stripped."""

    lines, _ = measured
    return MeasuredLines(lines=tuple(lines), indents=(MAXIMAL_INDENT,))


def strip_line(line: str, index: int, lines: list[str]) -> str:
    """Trim leading and trailing whitespace from one line."""

    return line.strip(" \t")
