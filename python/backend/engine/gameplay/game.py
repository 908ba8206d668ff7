"""Core gameplay logic: legal moves, pouring, undo and the win check."""

from __future__ import annotations

import logging
import random

from backend.engine.gamegenerator import LayoutGenerator
from backend.engine.gamestate import GameState
from backend.models.grid import GridLayout
from backend.models.move import MoveRecord
from backend.models.params import PuzzleParams
from backend.models.tube import Tube

logger = logging.getLogger(__name__)


class PuzzleEngine:
    """Orchestrates a single game session.

    Owns the tubes (through :class:`GameState`) and is the only way to
    change them.  Readers get copies via :meth:`get_state` and
    :meth:`get_history`.
    """

    def __init__(
        self,
        tube_count: int,
        capacity: int,
        color_count: int,
        rng: random.Random | None = None,
    ) -> None:
        self.params = PuzzleParams(tube_count, capacity, color_count)
        self.params.validate()
        self.state = GameState(LayoutGenerator.generate(self.params, rng))
        self.grid = GridLayout.for_tubes(tube_count)
        logger.info(
            "New game: %d tubes, capacity %d, %d colors",
            tube_count, capacity, color_count,
        )

    @classmethod
    def from_params(
        cls, params: PuzzleParams, rng: random.Random | None = None
    ) -> PuzzleEngine:
        return cls(params.tubes, params.capacity, params.colors, rng)

    @classmethod
    def from_tubes(cls, tubes: list[Tube], color_count: int) -> PuzzleEngine:
        """Create a session around an existing layout (e.g. a test scenario).

        All tubes must share one capacity.
        """
        capacities = {t.capacity for t in tubes}
        if len(capacities) != 1:
            raise ValueError(f"Tubes must share one capacity, got {sorted(capacities)}.")
        params = PuzzleParams(len(tubes), capacities.pop(), color_count)
        params.validate()
        obj = object.__new__(cls)
        obj.params = params
        obj.state = GameState(tubes)
        obj.grid = GridLayout.for_tubes(params.tubes)
        return obj

    # -- parameters -----------------------------------------------------------

    @property
    def tube_count(self) -> int:
        return self.params.tubes

    @property
    def capacity(self) -> int:
        return self.params.capacity

    @property
    def color_count(self) -> int:
        return self.params.colors

    @property
    def tubes(self) -> list[Tube]:
        return self.state.tubes

    # -- moves ----------------------------------------------------------------

    def can_move(self, source: int, target: int) -> bool:
        """True if at least one drop can be poured from *source* to *target*."""
        if not (self._valid_index(source) and self._valid_index(target)):
            return False
        if source == target:
            return False
        src = self.tubes[source]
        if src.is_empty():
            return False
        return self.tubes[target].can_receive(src.top_color())

    def move(self, source: int, target: int) -> bool:
        """Pour the whole top run of *source* into *target*, as far as it fits.

        Returns True if the move was legal and applied.
        """
        if not self.can_move(source, target):
            return False

        src = self.tubes[source]
        dst = self.tubes[target]
        run = src.count_top_run()
        color = src.top_color()

        # can_move guarantees dst is empty or topped with color
        moved = dst.push_run(color, run)
        src.pop_run(moved)

        self.state.record(MoveRecord(source, target, moved))
        logger.debug("Poured %d x color %d: %d -> %d", moved, color, source, target)
        if self.is_win():
            logger.info("Puzzle solved in %d moves", self.state.moves)
        return True

    def undo(self) -> bool:
        """Revert the last move.  Returns False if there is nothing to undo."""
        last = self.state.pop_record()
        if last is None:
            return False
        colors = self.tubes[last.target].pop_run(last.count)
        for color in colors:
            self.tubes[last.source].pour_in(color)
        logger.debug("Undid %d -> %d (%d drops)", last.source, last.target, last.count)
        return True

    # -- queries --------------------------------------------------------------

    def is_win(self) -> bool:
        """M tubes hold one color each and the other N-M are empty."""
        mono = 0
        empty = 0
        for tube in self.tubes:
            if tube.is_empty():
                empty += 1
            elif tube.is_monochrome():
                mono += 1
            else:
                return False
        return mono == self.color_count and empty == self.tube_count - self.color_count

    def get_history(self) -> list[MoveRecord]:
        return self.state.history

    def get_state(self) -> list[list[int]]:
        return self.state.snapshot()

    # -- helpers --------------------------------------------------------------

    def _valid_index(self, index: int) -> bool:
        return 0 <= index < self.tube_count
