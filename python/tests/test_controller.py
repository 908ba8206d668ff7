"""Select-then-pour controller tests."""

from __future__ import annotations

from backend.engine.gameplay import PuzzleEngine
from backend.models.grid import Direction
from backend.models.move import MoveRecord
from backend.models.tube import Tube
from frontend.controller import ClickResult, TubeSelector


def _selector(*tubes: list[int], colors: int = 1) -> TubeSelector:
    engine = PuzzleEngine.from_tubes([Tube.from_slots(s) for s in tubes], colors)
    return TubeSelector(engine)


# -- clicks -------------------------------------------------------------------


def test_first_click_selects() -> None:
    sel = _selector([1, 0], [0, 0])
    assert sel.click(0) is ClickResult.SELECTED
    assert sel.selected == 0


def test_second_click_pours_and_clears() -> None:
    sel = _selector([1, 0], [0, 0])
    sel.click(0)
    assert sel.click(1) is ClickResult.MOVED
    assert sel.selected is None
    assert sel.engine.get_state() == [[0, 0], [1, 0]]
    assert sel.engine.get_history() == [MoveRecord(0, 1, 1)]


def test_illegal_second_click_still_clears() -> None:
    sel = _selector([2, 0], [1, 0], [0, 0], colors=2)
    sel.click(0)
    assert sel.click(1) is ClickResult.REJECTED
    assert sel.selected is None
    assert sel.engine.get_history() == []


def test_clicking_selected_tube_again_deselects() -> None:
    sel = _selector([1, 0], [0, 0])
    sel.click(0)
    assert sel.click(0) is ClickResult.REJECTED
    assert sel.selected is None


def test_click_outside_clears_selection() -> None:
    sel = _selector([1, 0], [0, 0])
    sel.click(0)
    assert sel.click(None) is ClickResult.CLEARED
    assert sel.selected is None
    assert sel.click(5) is ClickResult.CLEARED


def test_selecting_an_empty_tube_is_allowed() -> None:
    sel = _selector([1, 0], [0, 0])
    assert sel.click(1) is ClickResult.SELECTED
    assert sel.click(0) is ClickResult.REJECTED


# -- grid clicks --------------------------------------------------------------


def test_click_grid_maps_to_index() -> None:
    tubes = [[0, 0]] * 9
    tubes[0] = [1, 1]
    sel = _selector(*tubes)
    assert sel.click_grid(0, 0) is ClickResult.SELECTED
    assert sel.click_grid(1, 1) is ClickResult.MOVED  # tube 8
    assert sel.engine.get_state()[8] == [1, 1]


def test_click_grid_outside_tubes_clears() -> None:
    sel = _selector(*([[0, 0]] * 8 + [[1, 1]]))
    sel.click_grid(1, 1)
    assert sel.click_grid(1, 5) is ClickResult.CLEARED
    assert sel.selected is None
    assert sel.click_grid(3, 0) is ClickResult.CLEARED


# -- keyboard cursor ----------------------------------------------------------


def test_cursor_press_pours() -> None:
    sel = _selector([1, 0], [0, 0], [0, 0])
    assert sel.press() is ClickResult.SELECTED
    sel.move_cursor(Direction.RIGHT)
    sel.move_cursor(Direction.RIGHT)
    assert sel.cursor == 2
    assert sel.press() is ClickResult.MOVED
    assert sel.engine.get_state() == [[0, 0], [0, 0], [1, 0]]


def test_cursor_stops_at_edges() -> None:
    sel = _selector([1, 0], [0, 0])
    sel.move_cursor(Direction.LEFT)
    sel.move_cursor(Direction.UP)
    assert sel.cursor == 0
    sel.move_cursor(Direction.RIGHT)
    sel.move_cursor(Direction.RIGHT)
    sel.move_cursor(Direction.DOWN)
    assert sel.cursor == 1


# -- undo ---------------------------------------------------------------------


def test_undo_clears_selection_and_reverts() -> None:
    sel = _selector([1, 0], [0, 0])
    sel.click(0)
    sel.click(1)
    sel.click(1)
    assert sel.undo()
    assert sel.selected is None
    assert sel.engine.get_state() == [[1, 0], [0, 0]]
    assert not sel.undo()
