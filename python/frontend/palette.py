"""Display colors for drop color ids (index 0 is the empty slot)."""

from __future__ import annotations

PALETTE: list[str] = [
    "#ffffff",  # empty
    "#f94144", "#f3722c", "#f9c74f", "#90be6d",
    "#43aa8b", "#577590", "#277da1", "#9d4edd", "#ffadad",
    "#ffd6a5", "#caffbf", "#bdb2ff", "#8f81b7", "#ffb3c1",
    "#ffd166", "#06d6a0", "#118ab2", "#073b4c", "#9b5de5",
]


def hex_color(color: int) -> str:
    if color <= 0:
        return PALETTE[0]
    # Colors beyond the palette wrap around, skipping the empty entry.
    return PALETTE[(color - 1) % (len(PALETTE) - 1) + 1]


def rgb_color(color: int) -> tuple[int, int, int]:
    h = hex_color(color).lstrip("#")
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)
