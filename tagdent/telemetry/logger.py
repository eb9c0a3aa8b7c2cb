"""Structured logging utilities.

Responsibilities:
- Emit concise, deterministic log lines for suppressed transform failures.
- Keep handler setup explicit so importing the library never touches sinks.
"""

from __future__ import annotations

from typing import TextIO

from loguru import logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
        if context[key] is not None
    ]
    if not tokens:
        return ""
    return " " + " ".join(tokens)


def configure_logging(sink: TextIO, level: str = "WARNING") -> int:
    """Attach a plain-message loguru handler for tagdent records.

    Returns:
        The loguru handler id, suitable for `logger.remove(handler_id)`.
    """

    return logger.add(
        sink,
        format="{message}",
        level=level,
        colorize=False,
        filter="tagdent",
    )


def emit(level: str, event: str, stage: str, **context: object) -> str:
    """Emit one structured log line and return it."""

    line = f"[tagdent] level={level} stage={stage} event={event}{_format_context(context)}"
    logger.log(level, line)
    return line


def log_transform_failure(
    stage: str,
    transform: str,
    position: int,
    error: BaseException,
    item: int | None = None,
) -> str:
    """Emit a warning for a transform whose exception was suppressed."""

    return emit(
        "WARNING",
        "transform_failed",
        stage,
        transform=transform,
        position=position,
        item=item,
        error_type=type(error).__name__,
    )
