"""Core datatypes shared across tagdent modules.

Responsibilities:
- Represent the transient records exchanged between measurement stages.
- Give transformation plugins an explicit shape instead of ad-hoc tuples.

Key types:
- `BoundTransform`, `Transform`, `PipelineConfig`, `MeasuredLines`,
  `TransformFailure`, and `ApplicationReport`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterator, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class BoundTransform:
    """A transformation invoked as a method of the value it transforms.

    Attributes:
        function: Callable whose first parameter receives the in-progress value
            as its invocation context.
        bind_context: Whether to bind the value as the invocation context.
    """

    function: Callable[..., Any]
    bind_context: bool = True

    @property
    def name(self) -> str:
        """Return a readable name for diagnostics."""

        return transform_name(self.function)


Transform = Union[Callable[..., Any], BoundTransform]


def transform_name(transform: Transform) -> str:
    """Return a readable name for a plain or bound transform."""

    if isinstance(transform, BoundTransform):
        return transform.name
    return getattr(transform, "__qualname__", None) or type(transform).__name__


@dataclass(frozen=True, slots=True)
class MeasuredLines:
    """Lines of a block paired with their leading-whitespace counts.

    Unpacks as a `(lines, indents)` pair.

    Attributes:
        lines: One string per line, in source order.
        indents: Leading whitespace count per line. Indent policies may
            replace this with a sequence that is no longer index-aligned.
    """

    lines: tuple[str, ...]
    indents: tuple[int, ...]

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        yield self.lines
        yield self.indents

    @classmethod
    def coerce(cls, value: object) -> MeasuredLines | None:
        """Build a `MeasuredLines` from itself or a 2-item `(lines, indents)` pair.

        Returns `None` unless every line is a `str` and every indent an `int`.
        """

        if isinstance(value, cls):
            lines, indents = value.lines, value.indents
        elif isinstance(value, (list, tuple)) and len(value) == 2:
            lines, indents = value
        else:
            return None

        try:
            lines, indents = tuple(lines), tuple(indents)
        except TypeError:
            return None
        if not all(isinstance(line, str) for line in lines):
            return None
        if not all(
            isinstance(indent, int) and not isinstance(indent, bool) for indent in indents
        ):
            return None
        if isinstance(value, cls):
            return value
        return cls(lines=lines, indents=indents)

    @property
    def excess(self) -> int:
        """Return the leading whitespace shared by every line, 0 when undefined."""

        if not self.indents:
            return 0
        return max(min(self.indents), 0)


@dataclass(frozen=True, slots=True)
class PipelineConfig:
    """Transformation lists governing one measurement pass.

    Attributes:
        pre_work: Applied once to the whole text before it is split.
        per_line: Applied to each line as `(line, index, lines)` before measuring.
        post_work: Applied once to the resulting `MeasuredLines`.
    """

    pre_work: tuple[Transform, ...] = ()
    per_line: tuple[Transform, ...] = ()
    post_work: tuple[Transform, ...] = ()


@dataclass(frozen=True, slots=True)
class TransformFailure:
    """One suppressed transform exception.

    Attributes:
        position: 0-based index of the transform in its list.
        transform: Readable transform name.
        error: The suppressed exception.
        item: 0-based element index for sequence application, else `None`.
    """

    position: int
    transform: str
    error: Exception
    item: int | None = None


@dataclass(frozen=True, slots=True)
class ApplicationReport(Generic[T]):
    """Result of a cautious application with its suppressed failures."""

    value: T
    failures: tuple[TransformFailure, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        """Return whether every transform completed without raising."""

        return not self.failures
