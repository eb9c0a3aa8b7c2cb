"""Unit tests for boundary trimming and indent policy plugins."""

from __future__ import annotations

import pytest

from tagdent import MeasuredLines
from tagdent.text.plugins import (
    MAXIMAL_INDENT,
    drop_lowest_indents,
    drop_lowest_minority_indents,
    force_maximal_indents,
    keep_indents,
    lowest_is_minority,
    strip_empty_first_and_last,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("\n  a\n  b\n  ", "  a\n  b"),
        ("  a\n  b\n\t", "  a\n  b"),
        ("   \n  a", "  a"),
        ("a\nb", "a\nb"),
        ("   ", ""),
        ("", ""),
        ("\n\n", ""),
    ],
)
def test_strip_empty_first_and_last(text: str, expected: str) -> None:
    """Blank boundary lines should go, content lines should stay."""

    assert strip_empty_first_and_last(text) == expected


def test_strip_empty_first_and_last_keeps_inner_blank_lines() -> None:
    """Only the first and last lines are eligible for removal."""

    assert strip_empty_first_and_last("\na\n\n\nb\n") == "a\n\n\nb"


def test_drop_lowest_indents_makes_next_lowest_the_minimum() -> None:
    """The lone lowest value should no longer decide the minimum."""

    _, indents = drop_lowest_indents(([], [2, 4, 4, 6]))

    assert min(indents) == 4


def test_drop_lowest_indents_keeps_lines() -> None:
    """Lines should pass through untouched."""

    measured = drop_lowest_indents(MeasuredLines(lines=("a", " b"), indents=(0, 1)))

    assert measured.lines == ("a", " b")
    assert measured.indents == (1,)


def test_drop_lowest_indents_empties_when_all_equal() -> None:
    """Equal indents leave nothing to strip."""

    measured = drop_lowest_indents(MeasuredLines(lines=("  a", "  b"), indents=(2, 2)))

    assert measured.indents == ()
    assert measured.excess == 0


def test_drop_lowest_minority_drops_only_a_minority_minimum() -> None:
    """The threshold variant should require the lowest level to be a minority."""

    minority = drop_lowest_minority_indents(([], [0, 4, 4, 6]))
    majority = drop_lowest_minority_indents(([], [0, 0, 4, 6]))

    assert minority.excess == 4
    assert majority.excess == 0


def test_drop_lowest_minority_handles_empty_indents() -> None:
    """Empty indents stay empty."""

    assert drop_lowest_minority_indents(((), ())).indents == ()


def test_force_maximal_indents_uses_sentinel() -> None:
    """The inline policy should replace indents with one maximal value."""

    measured = force_maximal_indents(MeasuredLines(lines=("a", "b"), indents=(0, 3)))

    assert measured.indents == (MAXIMAL_INDENT,)
    assert measured.lines == ("a", "b")


def test_keep_indents_is_identity() -> None:
    """The no-op policy should return its input."""

    measured = MeasuredLines(lines=("a",), indents=(0,))

    assert keep_indents(measured) is measured


def test_drop_lowest_minority_uses_custom_threshold() -> None:
    """A threshold callable should replace the fewer-than-half rule."""

    def majority_allowed(indents: tuple[int, ...], lowest: int, occurrences: int) -> bool:
        return occurrences <= len(indents)

    measured = drop_lowest_minority_indents(([], [0, 0, 4, 6]), threshold=majority_allowed)

    assert measured.indents == (4, 6)
    assert measured.excess == 4


def test_lowest_is_minority() -> None:
    """The default threshold should require strictly fewer than half."""

    assert lowest_is_minority([0, 4, 4, 4], 0, 1) is True
    assert lowest_is_minority([0, 0, 4, 4], 0, 2) is False
