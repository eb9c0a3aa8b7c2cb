"""Line splitting and leading-whitespace measurement.

Responsibilities:
- Split text into lines on bare and carriage-return-prefixed breaks.
- Count leading whitespace per line with a configurable character class.
- Run the pre-work, per-line and post-work plugin hooks around measuring.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Sequence

from ..config import DEFAULT_WHITESPACE
from ..models.datatypes import MeasuredLines, PipelineConfig
from ..pipeline.apply import cautiously_apply, cautiously_apply_each

LINE_BREAK_RE = re.compile(r"\r?\n")


def _is_text(value: object) -> bool:
    return isinstance(value, str)


def _is_measured_pair(value: object) -> bool:
    return MeasuredLines.coerce(value) is not None


def split_lines(text: str) -> list[str]:
    """Split text on `\\n` and `\\r\\n` line breaks."""

    return LINE_BREAK_RE.split(text)


@lru_cache(maxsize=32)
def leading_whitespace_pattern(whitespace: str = DEFAULT_WHITESPACE) -> re.Pattern[str]:
    """Return a compiled pattern matching a run of leading whitespace."""

    return re.compile(f"(?:{whitespace})*")


@lru_cache(maxsize=32)
def whitespace_character_pattern(whitespace: str = DEFAULT_WHITESPACE) -> re.Pattern[str]:
    """Return a compiled pattern matching one whitespace character."""

    return re.compile(whitespace)


def strip_trailing_whitespace(line: str, whitespace: str = DEFAULT_WHITESPACE) -> str:
    """Remove the run of whitespace characters at the end of `line`."""

    if whitespace == DEFAULT_WHITESPACE:
        return line.rstrip(" \t")

    pattern = whitespace_character_pattern(whitespace)
    end = len(line)
    while end and pattern.fullmatch(line, end - 1, end):
        end -= 1
    return line[:end]


def count_leading_whitespace(line: str, whitespace: str = DEFAULT_WHITESPACE) -> int:
    """Return how many leading characters of `line` match the whitespace class."""

    return leading_whitespace_pattern(whitespace).match(line).end()


def measure_indents(
    text: str | Sequence[str],
    config: PipelineConfig | None = None,
    whitespace: str = DEFAULT_WHITESPACE,
    log: bool = True,
) -> MeasuredLines:
    """Split text into lines and measure the indentation of each.

    Args:
        text: A string, or a sequence of strings joined with `"\\n"`.
        config: Plugin hooks; every hook runs behind the cautious applicator,
            and a hook result of the wrong type keeps the previous value.
        whitespace: Regex character class counted as indentation.
        log: Whether suppressed hook failures are logged.

    Returns:
        The `(lines, indents)` pair after post-work.
    """

    config = config or PipelineConfig()
    if not isinstance(text, str):
        text = "\n".join(text)

    text = cautiously_apply(text, config.pre_work, log, stage="pre_work", accept=_is_text)
    lines = cautiously_apply_each(
        split_lines(text),
        config.per_line,
        log,
        stage="per_line",
        accept=_is_text,
    )
    measured = MeasuredLines(
        lines=tuple(lines),
        indents=tuple(count_leading_whitespace(line, whitespace) for line in lines),
    )

    result = cautiously_apply(
        measured,
        config.post_work,
        log,
        keep_old_on_falsy=True,
        stage="post_work",
        accept=_is_measured_pair,
    )
    return MeasuredLines.coerce(result) or measured
