"""Grid layout tests: index/position mapping and cursor stepping."""

from __future__ import annotations

import pytest

from backend.models.grid import Coordinate, Direction, GridLayout


# -- layout -------------------------------------------------------------------


@pytest.mark.parametrize(
    "tubes, width, rows",
    [(2, 2, 1), (7, 7, 1), (8, 7, 2), (14, 7, 2), (15, 7, 3), (21, 7, 3)],
)
def test_for_tubes(tubes: int, width: int, rows: int) -> None:
    grid = GridLayout.for_tubes(tubes)
    assert grid.row_width == width
    assert grid.row_count == rows


def test_custom_max_width() -> None:
    grid = GridLayout.for_tubes(10, max_width=4)
    assert (grid.row_width, grid.row_count) == (4, 3)
    assert [grid.row_length(r) for r in range(4)] == [4, 4, 2, 0]


# -- mapping ------------------------------------------------------------------


def test_index_to_grid() -> None:
    grid = GridLayout.for_tubes(10)
    assert grid.index_to_grid(0) == Coordinate(0, 0)
    assert grid.index_to_grid(6) == Coordinate(0, 6)
    assert grid.index_to_grid(7) == Coordinate(1, 0)
    assert grid.index_to_grid(9) == Coordinate(row=1, column=2)


@pytest.mark.parametrize("tubes", [2, 5, 7, 8, 13, 21])
def test_mapping_round_trips(tubes: int) -> None:
    grid = GridLayout.for_tubes(tubes)
    for k in range(tubes):
        row, col = grid.index_to_grid(k)
        assert grid.contains(row, col)
        assert grid.grid_to_index(row, col) == k


@pytest.mark.parametrize(
    "row, col, expected",
    [
        (0, 0, True),
        (1, 2, True),
        (1, 3, False),   # past the end of the short last row
        (2, 0, False),
        (-1, 0, False),
        (0, 7, False),
    ],
)
def test_contains(row: int, col: int, expected: bool) -> None:
    assert GridLayout.for_tubes(10).contains(row, col) is expected


# -- cursor stepping ----------------------------------------------------------


@pytest.mark.parametrize(
    "start, direction, expected",
    [
        (0, Direction.RIGHT, 1),
        (1, Direction.LEFT, 0),
        (0, Direction.LEFT, 0),     # left edge
        (6, Direction.RIGHT, 6),    # right edge
        (0, Direction.UP, 0),       # top edge
        (2, Direction.DOWN, 9),
        (9, Direction.UP, 2),
        (9, Direction.RIGHT, 9),    # end of the short row
        (5, Direction.DOWN, 9),     # clamps into the short row
        (9, Direction.DOWN, 9),     # bottom edge
    ],
)
def test_step(start: int, direction: Direction, expected: int) -> None:
    # 10 tubes: row 0 holds 0-6, row 1 holds 7-9
    assert GridLayout.for_tubes(10).step(start, direction) == expected
