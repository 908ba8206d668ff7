"""Human-readable move history for the end-of-game screens."""

from __future__ import annotations

from backend.models.move import MoveRecord

NO_MOVES = "No moves were needed: the puzzle started solved."


def _drops(count: int) -> str:
    return f"{count} drop" if count == 1 else f"{count} drops"


def format_move(number: int, move: MoveRecord) -> str:
    """``Move 1: tube 0 \u2192 tube 5 (3 drops)``"""
    return (
        f"Move {number}: tube {move.source} \u2192 tube {move.target} "
        f"({_drops(move.count)})"
    )


def format_history(history: list[MoveRecord]) -> list[str]:
    """One line per move in execution order, or a single NO_MOVES line."""
    if not history:
        return [NO_MOVES]
    return [format_move(i, m) for i, m in enumerate(history, 1)]


def total_drops(history: list[MoveRecord]) -> int:
    return sum(m.count for m in history)
