"""Generates the starting layout of a water sort puzzle."""

from __future__ import annotations

import logging
import random

from backend.models.params import PuzzleParams
from backend.models.tube import Tube

logger = logging.getLogger(__name__)


class LayoutGenerator:
    """Deals M*V color drops into the first M of N tubes.

    The drops are shuffled uniformly before dealing, so a colored tube
    usually holds a mix.  The result is *not* checked for solvability.
    """

    @staticmethod
    def color_labels(colors: int, capacity: int) -> list[int]:
        """V copies of color 1, then V of color 2, ... up to color M."""
        return [c for c in range(1, colors + 1) for _ in range(capacity)]

    @staticmethod
    def deal(labels: list[int], tubes: int, capacity: int) -> list[Tube]:
        """Fill tubes in index order, *capacity* labels each; the rest stay empty."""
        result: list[Tube] = []
        for t in range(tubes):
            tube = Tube(capacity)
            for color in labels[t * capacity : (t + 1) * capacity]:
                tube.pour_in(color)
            result.append(tube)
        return result

    @staticmethod
    def solved(params: PuzzleParams) -> list[Tube]:
        """Return the unshuffled layout: tube c-1 holds all of color c."""
        labels = LayoutGenerator.color_labels(params.colors, params.capacity)
        return LayoutGenerator.deal(labels, params.tubes, params.capacity)

    @staticmethod
    def generate(params: PuzzleParams, rng: random.Random | None = None) -> list[Tube]:
        """Return a freshly shuffled layout for *params*."""
        rng = rng or random.Random()
        labels = LayoutGenerator.color_labels(params.colors, params.capacity)
        # Fisher-Yates: every permutation of the labels is equally likely.
        rng.shuffle(labels)
        tubes = LayoutGenerator.deal(labels, params.tubes, params.capacity)
        logger.debug(
            "Dealt %d drops into %d of %d tubes",
            len(labels), params.colors, params.tubes,
        )
        return tubes
