"""Mapping between linear tube indices and (row, column) grid positions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum
from typing import NamedTuple

from backend.config import MAX_ROW_WIDTH


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Coordinate(NamedTuple):
    row: int
    column: int


@dataclass(frozen=True)
class GridLayout:
    """Lays *tube_count* tubes out in rows of at most *row_width*.

    Tube ``k`` sits at row ``k // row_width``, column ``k % row_width``;
    the last row may be shorter than the others.
    """

    tube_count: int
    row_width: int

    @classmethod
    def for_tubes(cls, tube_count: int, max_width: int = MAX_ROW_WIDTH) -> GridLayout:
        return cls(tube_count=tube_count, row_width=max(1, min(tube_count, max_width)))

    # -- queries --------------------------------------------------------------

    @property
    def row_count(self) -> int:
        return math.ceil(self.tube_count / self.row_width)

    def index_to_grid(self, index: int) -> Coordinate:
        return Coordinate(row=index // self.row_width, column=index % self.row_width)

    def grid_to_index(self, row: int, column: int) -> int:
        return row * self.row_width + column

    def contains(self, row: int, column: int) -> bool:
        """True if (row, column) holds a tube."""
        if not (0 <= row < self.row_count and 0 <= column < self.row_width):
            return False
        return self.grid_to_index(row, column) < self.tube_count

    def row_length(self, row: int) -> int:
        """Number of tubes actually placed in *row*."""
        remaining = self.tube_count - row * self.row_width
        return max(0, min(self.row_width, remaining))

    # -- cursor movement ------------------------------------------------------

    def step(self, index: int, direction: Direction) -> int:
        """Return the neighbour of *index* in *direction*.

        Stays put at the grid edge.  Moving down into a short last row
        lands on its final tube.
        """
        offsets = {
            Direction.UP: (-1, 0),
            Direction.DOWN: (1, 0),
            Direction.LEFT: (0, -1),
            Direction.RIGHT: (0, 1),
        }
        row, col = self.index_to_grid(index)
        dr, dc = offsets[direction]
        nr, nc = row + dr, col + dc

        if not (0 <= nr < self.row_count and 0 <= nc < self.row_width):
            return index
        if not self.contains(nr, nc):
            if dr == 0:
                return index
            nc = self.row_length(nr) - 1
        return self.grid_to_index(nr, nc)
