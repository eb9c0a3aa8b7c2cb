"""Unit tests for fault-tolerant transform application."""

from __future__ import annotations

import io

import pytest

from tagdent import (
    BoundTransform,
    cautiously_apply,
    cautiously_apply_each,
    cautiously_apply_each_with_report,
    cautiously_apply_with_report,
)


def _fail(value: object, *context: object) -> object:
    raise RuntimeError("boom")


def test_cautiously_apply_modifies_a_number() -> None:
    """A single transform should replace the value with its result."""

    assert cautiously_apply(5, [lambda value: value * 2]) == 10


def test_cautiously_apply_chains_effects() -> None:
    """Transforms should run in order, each seeing the previous result."""

    assert cautiously_apply(5, [lambda value: value * 2, lambda value: value + 2]) == 12


def test_cautiously_apply_ignores_failing_transform() -> None:
    """A raising transform should leave the last good value in place."""

    assert cautiously_apply(5, [lambda value: value * 2, _fail], False) == 10


def test_cautiously_apply_continues_after_failure() -> None:
    """Transforms after a failure should still run from the last good value."""

    answer = cautiously_apply(
        5,
        [lambda value: value * 2, _fail, lambda value: value + 2],
        False,
    )

    assert answer == 12


def test_cautiously_apply_adopts_falsy_results_by_default() -> None:
    """Without keep-old-on-falsy a falsy result replaces the value."""

    assert cautiously_apply("text", [lambda value: ""]) == ""


def test_cautiously_apply_keeps_old_value_on_falsy_when_requested() -> None:
    """With keep-old-on-falsy a falsy result is ignored."""

    result = cautiously_apply(
        "text",
        [lambda value: None, lambda value: value.upper()],
        keep_old_on_falsy=True,
    )

    assert result == "TEXT"


def test_cautiously_apply_with_report_lists_suppressed_failures() -> None:
    """The report should carry the value and one record per failure."""

    report = cautiously_apply_with_report(3, [_fail, lambda value: value + 1], log=False)

    assert report.value == 4
    assert report.ok is False
    assert len(report.failures) == 1
    failure = report.failures[0]
    assert failure.position == 0
    assert failure.transform == "_fail"
    assert isinstance(failure.error, RuntimeError)
    assert failure.item is None


def test_cautiously_apply_logs_failures(log_sink: io.StringIO) -> None:
    """Failures should be logged as one structured warning line each."""

    cautiously_apply(1, [_fail])

    assert log_sink.getvalue().strip() == (
        "[tagdent] level=WARNING stage=apply event=transform_failed "
        "error_type=RuntimeError position=0 transform=_fail"
    )


def test_cautiously_apply_stays_silent_when_logging_disabled(
    log_sink: io.StringIO,
) -> None:
    """No line should be emitted when logging is turned off."""

    cautiously_apply(1, [_fail], log=False)

    assert log_sink.getvalue() == ""


def test_bound_transform_receives_value_as_context() -> None:
    """A bound transform should run as a method of the in-progress value."""

    def shout(self: str, value: str) -> str:
        assert self is value
        return self.upper() + "!"

    assert cautiously_apply("hey", [BoundTransform(shout)]) == "HEY!"


def test_unbound_transform_record_is_called_plainly() -> None:
    """A transform record with binding disabled should behave like a function."""

    transform = BoundTransform(lambda value: value * 3, bind_context=False)

    assert cautiously_apply(2, [transform]) == 6


STRINGS = ["he", "him", "his"]
FUNCTORS = [
    lambda item, index, items: "she" if item == "he" else item,
    lambda item, index, items: "her" if item == "him" else item,
    lambda item, index, items: "hers" if item == "his" else item,
]


def test_cautiously_apply_each_applies_every_transform_to_every_item() -> None:
    """Each element should go through the whole transform chain."""

    assert cautiously_apply_each(STRINGS, FUNCTORS) == ["she", "her", "hers"]


def test_cautiously_apply_each_continues_after_failure() -> None:
    """A failing transform should not stop the others for any element."""

    functors = list(FUNCTORS)
    functors.insert(1, _fail)

    assert cautiously_apply_each(STRINGS, functors, False) == ["she", "her", "hers"]


def test_cautiously_apply_each_passes_index_and_items() -> None:
    """Sequence transforms should receive the position and the full input."""

    seen: list[tuple[int, tuple[str, ...]]] = []

    def record(item: str, index: int, items: list[str]) -> str:
        seen.append((index, tuple(items)))
        return f"{index}:{item}"

    assert cautiously_apply_each(["a", "b"], [record]) == ["0:a", "1:b"]
    assert seen == [(0, ("a", "b")), (1, ("a", "b"))]


def test_cautiously_apply_each_with_report_records_item_index(
    log_sink: io.StringIO,
) -> None:
    """Sequence failures should record the element index and be logged per element."""

    def fail_on_b(item: str, index: int, items: list[str]) -> str:
        if item == "b":
            raise ValueError(item)
        return item.upper()

    report = cautiously_apply_each_with_report(["a", "b", "c"], [fail_on_b], stage="per_line")

    assert report.value == ["A", "b", "C"]
    assert [failure.item for failure in report.failures] == [1]
    assert "stage=per_line" in log_sink.getvalue()
    assert "item=1" in log_sink.getvalue()


@pytest.mark.parametrize("items", [[], ()])
def test_cautiously_apply_each_handles_empty_sequences(items: list[str]) -> None:
    """An empty input should produce an empty output."""

    assert cautiously_apply_each(items, FUNCTORS) == []


def test_cautiously_apply_rejects_results_failing_accept() -> None:
    """A rejected result should count as a failure and keep the previous value."""

    report = cautiously_apply_with_report(
        "text",
        [lambda value: 5, lambda value: value.upper()],
        log=False,
        accept=lambda result: isinstance(result, str),
    )

    assert report.value == "TEXT"
    assert len(report.failures) == 1
    assert report.failures[0].position == 0
    assert isinstance(report.failures[0].error, TypeError)


def test_cautiously_apply_each_rejects_results_failing_accept() -> None:
    """Sequence application should apply the same check to every element."""

    result = cautiously_apply_each(
        ["a", "b"],
        [lambda item, index, items: None if index else item * 2],
        log=False,
        accept=lambda value: isinstance(value, str),
    )

    assert result == ["aa", "b"]
