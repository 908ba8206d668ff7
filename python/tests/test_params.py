"""Parameter validation and the menu form."""

from __future__ import annotations

import pytest

from backend.config import MAX_CAPACITY, MAX_TUBES, MIN_TUBES
from backend.models.params import InvalidParameters, PuzzleParams
from frontend.form import FIELDS, ParamForm


# -- PuzzleParams -------------------------------------------------------------


@pytest.mark.parametrize(
    "tubes, capacity, colors",
    [(2, 1, 1), (7, 4, 5), (21, 8, 19), (3, 100, 2)],
)
def test_valid_parameters(tubes: int, capacity: int, colors: int) -> None:
    PuzzleParams(tubes, capacity, colors).validate()


@pytest.mark.parametrize(
    "params, message",
    [
        (PuzzleParams(1, 4, 1), "Tube count must be at least 2, got 1."),
        (PuzzleParams(5, 0, 2), "Tube capacity must be at least 1, got 0."),
        (
            PuzzleParams(5, 4, 5),
            "Color count must be between 1 and 4 (fewer than the 5 tubes), got 5.",
        ),
        (
            PuzzleParams(5, 4, 0),
            "Color count must be between 1 and 4 (fewer than the 5 tubes), got 0.",
        ),
    ],
)
def test_invalid_parameters(params: PuzzleParams, message: str) -> None:
    with pytest.raises(InvalidParameters) as exc:
        params.validate()
    assert str(exc.value) == message
    assert isinstance(exc.value, ValueError)


def test_is_valid() -> None:
    assert PuzzleParams(3, 2, 2).is_valid()
    assert not PuzzleParams(3, 2, 3).is_valid()


# -- ParamForm ----------------------------------------------------------------


def test_focus_cycles_through_fields() -> None:
    form = ParamForm(PuzzleParams(7, 4, 5))
    seen = []
    for _ in FIELDS:
        seen.append(form.field)
        form.next_field()
    assert seen == list(FIELDS)
    assert form.field == FIELDS[0]
    form.prev_field()
    assert form.field == FIELDS[-1]


def test_adjust_focused_field() -> None:
    form = ParamForm(PuzzleParams(7, 4, 5))
    form.adjust(+2)
    assert form.params == PuzzleParams(9, 4, 5)


def test_adjust_named_field() -> None:
    form = ParamForm(PuzzleParams(7, 4, 5))
    form.adjust(-1, "capacity")
    assert form.value("capacity") == 3
    assert form.field == "tubes"


@pytest.mark.parametrize(
    "start, delta, name, expected",
    [
        (PuzzleParams(MIN_TUBES, 4, 1), -5, "tubes", MIN_TUBES),
        (PuzzleParams(MAX_TUBES, 4, 1), +5, "tubes", MAX_TUBES),
        (PuzzleParams(7, MAX_CAPACITY, 1), +1, "capacity", MAX_CAPACITY),
    ],
)
def test_adjust_is_clamped(start: PuzzleParams, delta: int, name: str, expected: int) -> None:
    form = ParamForm(start)
    form.adjust(delta, name)
    assert form.value(name) == expected


def test_error_reports_invalid_combination() -> None:
    form = ParamForm(PuzzleParams(3, 4, 2))
    assert form.error is None
    form.adjust(+1, "colors")
    assert form.error == (
        "Color count must be between 1 and 2 (fewer than the 3 tubes), got 3."
    )
    form.adjust(+1, "tubes")
    assert form.error is None
