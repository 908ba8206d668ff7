"""Select-then-pour input handling shared by every frontend.

The first click on a tube selects it; the second click tries to pour from
the selected tube into the clicked one and clears the selection whether
or not the pour was legal.  Keyboard frontends drive the same logic
through a cursor that walks the tube grid.
"""

from __future__ import annotations

import logging
from enum import StrEnum

from backend.engine.gameplay import PuzzleEngine
from backend.models.grid import Direction

logger = logging.getLogger(__name__)


class ClickResult(StrEnum):
    SELECTED = "selected"
    MOVED = "moved"
    REJECTED = "rejected"
    CLEARED = "cleared"


class TubeSelector:
    """Holds the UI-side selection and keyboard cursor for one engine."""

    def __init__(self, engine: PuzzleEngine) -> None:
        self.engine = engine
        self.selected: int | None = None
        self.cursor: int = 0

    # -- clicks ---------------------------------------------------------------

    def click(self, index: int | None) -> ClickResult:
        """Handle a click on tube *index* (``None`` = outside every tube)."""
        if index is None or not 0 <= index < self.engine.tube_count:
            self.selected = None
            return ClickResult.CLEARED

        if self.selected is None:
            self.selected = index
            return ClickResult.SELECTED

        source, self.selected = self.selected, None
        if self.engine.move(source, index):
            return ClickResult.MOVED
        logger.debug("Rejected pour %d -> %d", source, index)
        return ClickResult.REJECTED

    def click_grid(self, row: int, column: int) -> ClickResult:
        """Handle a click at a grid position."""
        grid = self.engine.grid
        if not grid.contains(row, column):
            return self.click(None)
        return self.click(grid.grid_to_index(row, column))

    # -- keyboard cursor ------------------------------------------------------

    def move_cursor(self, direction: Direction) -> None:
        self.cursor = self.engine.grid.step(self.cursor, direction)

    def press(self) -> ClickResult:
        """Click the tube under the cursor."""
        return self.click(self.cursor)

    # -- history --------------------------------------------------------------

    def undo(self) -> bool:
        """Undo the last move and drop any pending selection."""
        self.selected = None
        return self.engine.undo()
