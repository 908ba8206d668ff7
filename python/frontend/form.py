"""Parameter form shared by the menus: pick N, V and M within the UI limits."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from backend.config import (
    MAX_CAPACITY,
    MAX_COLORS,
    MAX_TUBES,
    MIN_CAPACITY,
    MIN_COLORS,
    MIN_TUBES,
)
from backend.models.params import InvalidParameters, PuzzleParams

FIELDS: tuple[str, ...] = ("tubes", "capacity", "colors")

LABELS: dict[str, str] = {
    "tubes": "Tubes (N)",
    "capacity": "Capacity (V)",
    "colors": "Colors (M)",
}

LIMITS: dict[str, tuple[int, int]] = {
    "tubes": (MIN_TUBES, MAX_TUBES),
    "capacity": (MIN_CAPACITY, MAX_CAPACITY),
    "colors": (MIN_COLORS, MAX_COLORS),
}


@dataclass
class ParamForm:
    """Editable (N, V, M) with a focused field."""

    params: PuzzleParams
    focus: int = 0

    @property
    def field(self) -> str:
        return FIELDS[self.focus]

    def value(self, name: str) -> int:
        return getattr(self.params, name)

    def next_field(self) -> None:
        self.focus = (self.focus + 1) % len(FIELDS)

    def prev_field(self) -> None:
        self.focus = (self.focus - 1) % len(FIELDS)

    def adjust(self, delta: int, name: str | None = None) -> None:
        """Change a field by *delta*, clamped to its UI limits."""
        name = name or self.field
        lo, hi = LIMITS[name]
        value = max(lo, min(hi, self.value(name) + delta))
        self.params = dataclasses.replace(self.params, **{name: value})

    @property
    def error(self) -> str | None:
        """Why the current values cannot start a game, or ``None``."""
        try:
            self.params.validate()
        except InvalidParameters as exc:
            return str(exc)
        return None
