"""Move history records."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MoveRecord:
    """One executed pour: *count* drops went from *source* to *target*."""

    source: int
    target: int
    count: int
