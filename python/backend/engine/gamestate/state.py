"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from collections import Counter

from backend.models.move import MoveRecord
from backend.models.tube import EMPTY, Tube


class GameState:
    """Holds the tubes and the history of executed moves."""

    def __init__(self, tubes: list[Tube]) -> None:
        self.tubes = tubes
        self._history: list[MoveRecord] = []

    # -- history --------------------------------------------------------------

    def record(self, move: MoveRecord) -> None:
        self._history.append(move)

    def pop_record(self) -> MoveRecord | None:
        return self._history.pop() if self._history else None

    @property
    def moves(self) -> int:
        return len(self._history)

    @property
    def history(self) -> list[MoveRecord]:
        return self._history[:]

    # -- snapshots ------------------------------------------------------------

    def snapshot(self) -> list[list[int]]:
        return [tube.snapshot() for tube in self.tubes]

    def color_counts(self) -> Counter[int]:
        """Number of drops of each color across all tubes."""
        counts: Counter[int] = Counter()
        for tube in self.tubes:
            counts.update(c for c in tube.slots if c != EMPTY)
        return counts

    def check_invariants(self, capacity: int, colors: int) -> None:
        """Raise ``ValueError`` if a tube is unsettled or drops went missing.

        Every color 1..*colors* must appear exactly *capacity* times.
        """
        for i, tube in enumerate(self.tubes):
            if not tube.is_settled():
                raise ValueError(f"Tube {i} has a gap under a drop: {tube.slots}")
        expected = {c: capacity for c in range(1, colors + 1)}
        counts = dict(self.color_counts())
        if counts != expected:
            raise ValueError(f"Drop counts {counts} differ from {expected}")
