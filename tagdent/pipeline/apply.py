"""Fault-tolerant application of transformation lists.

Responsibilities:
- Apply ordered transforms to a value, or to each element of a sequence.
- Isolate failures: a raising transform leaves the value untouched and the
  remaining transforms still run.
- Report suppressed failures as structured records and optional log lines.

Key public functions:
- `cautiously_apply`, `cautiously_apply_each` and their `*_with_report`
  variants.
"""

from __future__ import annotations

from types import MethodType
from typing import Any, Callable, Sequence, TypeVar

from ..models.datatypes import (
    ApplicationReport,
    BoundTransform,
    Transform,
    TransformFailure,
    transform_name,
)
from ..telemetry.logger import log_transform_failure

T = TypeVar("T")


def _invoke(transform: Transform, value: Any, *context: Any) -> Any:
    """Call a plain or bound transform with the value and its positional context."""

    if isinstance(transform, BoundTransform):
        function = transform.function
        if transform.bind_context:
            function = MethodType(function, value)
        return function(value, *context)
    return transform(value, *context)


def _apply_chain(
    value: Any,
    transforms: Sequence[Transform],
    *,
    stage: str,
    log: bool,
    keep_old_on_falsy: bool,
    context: tuple[Any, ...] = (),
    item: int | None = None,
    accept: Callable[[Any], bool] | None = None,
) -> tuple[Any, list[TransformFailure]]:
    """Run one value through every transform, collecting suppressed failures.

    A result rejected by `accept` counts as a failure and keeps the previous value.
    """

    failures: list[TransformFailure] = []
    for position, transform in enumerate(transforms):
        try:
            result = _invoke(transform, value, *context)
            if keep_old_on_falsy and not result:
                continue
            if accept is not None and not accept(result):
                raise TypeError(f"rejected result of type `{type(result).__name__}`")
        except Exception as error:
            failure = TransformFailure(
                position=position,
                transform=transform_name(transform),
                error=error,
                item=item,
            )
            failures.append(failure)
            if log:
                log_transform_failure(
                    stage,
                    failure.transform,
                    position,
                    error,
                    item=item,
                )
            continue

        value = result
    return value, failures


def cautiously_apply_with_report(
    value: T,
    transforms: Sequence[Transform],
    log: bool = True,
    keep_old_on_falsy: bool = False,
    *,
    stage: str = "apply",
    accept: Callable[[Any], bool] | None = None,
) -> ApplicationReport[T]:
    """Apply transforms in order and report every suppressed failure.

    Args:
        value: Starting value.
        transforms: Transforms called as `transform(value)`.
        log: Whether suppressed failures are logged.
        keep_old_on_falsy: Whether a falsy result keeps the previous value.
        stage: Label used in log lines.
        accept: Optional check a result must pass to replace the value.
    """

    result, failures = _apply_chain(
        value,
        transforms,
        stage=stage,
        log=log,
        keep_old_on_falsy=keep_old_on_falsy,
        accept=accept,
    )
    return ApplicationReport(value=result, failures=tuple(failures))


def cautiously_apply(
    value: T,
    transforms: Sequence[Transform],
    log: bool = True,
    keep_old_on_falsy: bool = False,
    *,
    stage: str = "apply",
    accept: Callable[[Any], bool] | None = None,
) -> T:
    """Apply transforms in order, skipping any that raise."""

    return cautiously_apply_with_report(
        value,
        transforms,
        log,
        keep_old_on_falsy,
        stage=stage,
        accept=accept,
    ).value


def cautiously_apply_each_with_report(
    items: Sequence[T],
    transforms: Sequence[Transform],
    log: bool = True,
    keep_old_on_falsy: bool = False,
    *,
    stage: str = "apply",
    accept: Callable[[Any], bool] | None = None,
) -> ApplicationReport[list[T]]:
    """Apply transforms independently to each element and report failures.

    Each transform is called as `transform(item, index, items)`, where `items`
    is the original input sequence. The output keeps input length and order.
    """

    source = list(items)
    results: list[T] = []
    failures: list[TransformFailure] = []
    for index, item in enumerate(source):
        result, item_failures = _apply_chain(
            item,
            transforms,
            stage=stage,
            log=log,
            keep_old_on_falsy=keep_old_on_falsy,
            context=(index, source),
            item=index,
            accept=accept,
        )
        results.append(result)
        failures.extend(item_failures)
    return ApplicationReport(value=results, failures=tuple(failures))


def cautiously_apply_each(
    items: Sequence[T],
    transforms: Sequence[Transform],
    log: bool = True,
    keep_old_on_falsy: bool = False,
    *,
    stage: str = "apply",
    accept: Callable[[Any], bool] | None = None,
) -> list[T]:
    """Apply transforms to each element, skipping any that raise."""

    return cautiously_apply_each_with_report(
        items,
        transforms,
        log,
        keep_old_on_falsy,
        stage=stage,
        accept=accept,
    ).value
