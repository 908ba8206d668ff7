"""Tube model tests: queries, single-drop and run mutation, edge cases."""

from __future__ import annotations

import pytest

from backend.models.tube import EMPTY, Tube


# -- construction -------------------------------------------------------------


def test_new_tube_is_empty() -> None:
    tube = Tube(4)
    assert tube.slots == [0, 0, 0, 0]
    assert tube.is_empty()
    assert not tube.is_full()


def test_from_slots_infers_capacity() -> None:
    tube = Tube.from_slots([2, 1, 1, 0])
    assert tube.capacity == 4
    assert tube.snapshot() == [2, 1, 1, 0]


def test_from_slots_copies_input() -> None:
    raw = [1, 0]
    tube = Tube.from_slots(raw)
    tube.pour_in(3)
    assert raw == [1, 0]


@pytest.mark.parametrize("slots, capacity", [([1, 0], 3), ([1, 1, 1], 2)])
def test_from_slots_rejects_wrong_length(slots: list[int], capacity: int) -> None:
    with pytest.raises(ValueError, match="Expected"):
        Tube.from_slots(slots, capacity)


def test_constructor_rejects_wrong_length() -> None:
    with pytest.raises(ValueError):
        Tube(capacity=2, slots=[1, 1, 1])


def test_zero_capacity_tube_is_empty_and_full() -> None:
    tube = Tube(0)
    assert tube.slots == []
    assert tube.is_empty()
    assert tube.is_full()
    assert tube.top_index() == -1
    assert tube.first_empty_slot() == -1
    assert not tube.can_receive(1)
    assert not tube.pour_in(1)
    assert tube.pour_out() == EMPTY


# -- queries ------------------------------------------------------------------


@pytest.mark.parametrize(
    "slots, top_index, top_color, first_empty",
    [
        ([0, 0, 0], -1, EMPTY, 0),
        ([3, 0, 0], 0, 3, 1),
        ([3, 2, 0], 1, 2, 2),
        ([3, 2, 2], 2, 2, -1),
    ],
)
def test_top_and_first_empty(
    slots: list[int], top_index: int, top_color: int, first_empty: int
) -> None:
    tube = Tube.from_slots(slots)
    assert tube.top_index() == top_index
    assert tube.top_color() == top_color
    assert tube.first_empty_slot() == first_empty


@pytest.mark.parametrize(
    "slots, color, expected",
    [
        ([0, 0], 5, True),    # empty accepts anything
        ([5, 0], 5, True),    # matching top
        ([5, 0], 4, False),   # mismatching top
        ([5, 5], 5, False),   # full
    ],
)
def test_can_receive(slots: list[int], color: int, expected: bool) -> None:
    assert Tube.from_slots(slots).can_receive(color) is expected


@pytest.mark.parametrize(
    "slots, run",
    [
        ([0, 0, 0, 0], 0),
        ([2, 2, 0, 0], 2),
        ([1, 2, 2, 2], 3),
        ([3, 3, 3, 3], 4),
        ([1, 2, 1, 0], 1),
    ],
)
def test_count_top_run(slots: list[int], run: int) -> None:
    assert Tube.from_slots(slots).count_top_run() == run


@pytest.mark.parametrize(
    "slots, expected",
    [
        ([0, 0, 0], False),
        ([4, 4, 4], True),
        ([4, 4, 0], False),  # not every slot holds the color
        ([4, 3, 4], False),
        ([7], True),
    ],
)
def test_is_monochrome(slots: list[int], expected: bool) -> None:
    assert Tube.from_slots(slots).is_monochrome() is expected


@pytest.mark.parametrize(
    "slots, expected",
    [
        ([0, 0, 0], True),
        ([1, 2, 0], True),
        ([1, 0, 2], False),
        ([0, 1, 1, 1], False),
    ],
)
def test_is_settled(slots: list[int], expected: bool) -> None:
    assert Tube.from_slots(slots).is_settled() is expected


def test_snapshot_is_a_copy() -> None:
    tube = Tube.from_slots([1, 0])
    snap = tube.snapshot()
    snap[1] = 9
    assert tube.slots == [1, 0]


# -- single-drop mutation -----------------------------------------------------


def test_pour_in_fills_lowest_empty_slot() -> None:
    tube = Tube(3)
    assert tube.pour_in(2)
    assert tube.pour_in(5)
    assert tube.slots == [2, 5, 0]


def test_pour_in_on_full_tube_fails() -> None:
    tube = Tube.from_slots([1, 1])
    assert not tube.pour_in(1)
    assert tube.slots == [1, 1]


def test_pour_out_takes_top_drop() -> None:
    tube = Tube.from_slots([2, 5, 0])
    assert tube.pour_out() == 5
    assert tube.slots == [2, 0, 0]


def test_pour_out_on_empty_tube_returns_empty() -> None:
    tube = Tube(2)
    assert tube.pour_out() == EMPTY
    assert tube.slots == [0, 0]


# -- run mutation -------------------------------------------------------------


def test_pop_run_returns_colors_in_pop_order() -> None:
    tube = Tube.from_slots([1, 2, 3, 0])
    assert tube.pop_run(2) == [3, 2]
    assert tube.slots == [1, 0, 0, 0]


def test_pop_run_stops_when_empty() -> None:
    tube = Tube.from_slots([4, 0, 0])
    assert tube.pop_run(3) == [4]
    assert tube.is_empty()


def test_push_run_reports_how_many_fit() -> None:
    tube = Tube.from_slots([1, 0, 0])
    assert tube.push_run(6, 5) == 2
    assert tube.slots == [1, 6, 6]


def test_unsettled_tube_run_ops_work_from_the_top() -> None:
    # A hand-built tube with a hole at the bottom still pops from its top.
    tube = Tube.from_slots([0, 1, 1, 1])
    assert tube.count_top_run() == 3
    assert tube.pop_run(2) == [1, 1]
    assert tube.slots == [0, 1, 0, 0]
