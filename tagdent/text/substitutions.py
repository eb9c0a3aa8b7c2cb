"""Interleave literal template fragments with substitution values."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from ..pipeline.apply import cautiously_apply


def handle_substitutions(
    fragments: str | Sequence[str],
    substitutions: Sequence[Any] | None = None,
    convert: Callable[[Any], str] = str,
    log: bool = True,
) -> str:
    """Join fragments with converted substitutions between them.

    `["a", "b", "c"]` with `[1, 2]` becomes `"a1b2c"`. Fragment and
    substitution counts are not validated: a missing tail fragment reads as
    `""` and surplus fragments are appended in order. A `convert` that raises
    falls back to `str(value)`.
    """

    if isinstance(fragments, str):
        fragments = [fragments]
    if not substitutions:
        return "".join(fragments)

    parts = [fragments[0] if fragments else ""]
    for index, value in enumerate(substitutions):
        converted = cautiously_apply(value, [convert], log, stage="substitution")
        parts.append(converted if isinstance(converted, str) else str(converted))
        following = index + 1
        parts.append(fragments[following] if following < len(fragments) else "")
    parts.extend(fragments[len(substitutions) + 1 :])
    return "".join(parts)
