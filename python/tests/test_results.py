"""Move-list formatting and the display palette."""

from __future__ import annotations

import pytest

from backend.models.move import MoveRecord
from frontend.palette import PALETTE, hex_color, rgb_color
from frontend.results import NO_MOVES, format_history, format_move, total_drops


# -- results ------------------------------------------------------------------


def test_format_move() -> None:
    assert format_move(1, MoveRecord(0, 5, 3)) == "Move 1: tube 0 → tube 5 (3 drops)"
    assert format_move(12, MoveRecord(4, 2, 1)) == "Move 12: tube 4 → tube 2 (1 drop)"


def test_format_history_numbers_from_one() -> None:
    lines = format_history([MoveRecord(0, 1, 2), MoveRecord(1, 2, 1)])
    assert lines == [
        "Move 1: tube 0 → tube 1 (2 drops)",
        "Move 2: tube 1 → tube 2 (1 drop)",
    ]


def test_empty_history() -> None:
    assert format_history([]) == [NO_MOVES]
    assert total_drops([]) == 0


def test_total_drops() -> None:
    assert total_drops([MoveRecord(0, 1, 2), MoveRecord(1, 2, 3)]) == 5


# -- palette ------------------------------------------------------------------


def test_empty_slot_color() -> None:
    assert hex_color(0) == "#ffffff"
    assert rgb_color(0) == (255, 255, 255)


def test_first_color() -> None:
    assert hex_color(1) == "#f94144"
    assert rgb_color(1) == (0xF9, 0x41, 0x44)


@pytest.mark.parametrize("color", range(1, len(PALETTE)))
def test_palette_colors_are_distinct_from_empty(color: int) -> None:
    assert hex_color(color) != PALETTE[0]


def test_colors_wrap_past_palette_end() -> None:
    n = len(PALETTE) - 1
    assert hex_color(n + 1) == hex_color(1)
    assert hex_color(2 * n + 3) == hex_color(3)
