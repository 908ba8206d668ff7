"""Puzzle construction parameters and their validation."""

from __future__ import annotations

from dataclasses import dataclass


class InvalidParameters(ValueError):
    """Raised when (tubes, capacity, colors) cannot describe a puzzle."""


@dataclass(frozen=True)
class PuzzleParams:
    """N tubes of capacity V, M of them initially filled with M colors."""

    tubes: int
    capacity: int
    colors: int

    def validate(self) -> None:
        """Raise ``InvalidParameters`` unless N >= 2, V >= 1 and 1 <= M < N."""
        if self.tubes < 2:
            raise InvalidParameters(
                f"Tube count must be at least 2, got {self.tubes}."
            )
        if self.capacity < 1:
            raise InvalidParameters(
                f"Tube capacity must be at least 1, got {self.capacity}."
            )
        if not 1 <= self.colors < self.tubes:
            raise InvalidParameters(
                f"Color count must be between 1 and {self.tubes - 1} "
                f"(fewer than the {self.tubes} tubes), got {self.colors}."
            )

    def is_valid(self) -> bool:
        try:
            self.validate()
        except InvalidParameters:
            return False
        return True
