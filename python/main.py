#!/usr/bin/env python3
"""Water Sort Puzzle.

Usage::

    python main.py                         # interactive menu
    python main.py -f rich -n 9 -m 7       # Rich terminal, 9 tubes, 7 colors
    python main.py -f pygame --seed 42     # Pygame GUI, reproducible deal
    python main.py -f vanilla --log-level debug --log-file water-sort.log
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import (  # noqa: E402
    DEFAULT_CAPACITY,
    DEFAULT_COLORS,
    DEFAULT_TUBES,
    MAX_CAPACITY,
    MAX_COLORS,
    MAX_TUBES,
    MIN_CAPACITY,
    MIN_COLORS,
    MIN_TUBES,
)
from backend.logging_config import setup_logging  # noqa: E402
from backend.models.params import InvalidParameters, PuzzleParams  # noqa: E402

logger = logging.getLogger("frontend.main")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"
    pygame = "pygame"
    pyqt = "pyqt"


class LogLevel(StrEnum):
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
    Frontend.pyqt: "frontend.gui.pyqt.app",
}

_CHOICES = {
    "1": Frontend.vanilla,
    "2": Frontend.rich,
    "3": Frontend.pygame,
    "4": Frontend.pyqt,
}


# -- helpers ------------------------------------------------------------------


def _launch(frontend: Frontend, params: PuzzleParams, seed: Optional[int]) -> None:
    logger.debug("Launching %s frontend with %s", frontend, params)
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(params=params, seed=seed)


def _ask_int(prompt: str, default: int, lo: int, hi: int) -> int:
    raw = input(f"  {prompt} ({lo}-{hi}, default {default}): ").strip()
    if not raw:
        return default
    try:
        value = int(raw)
        if not lo <= value <= hi:
            raise ValueError
    except ValueError:
        print(f"  Invalid value, using {default}.")
        value = default
    return value


def _ask_params(params: PuzzleParams) -> PuzzleParams:
    while True:
        candidate = PuzzleParams(
            tubes=_ask_int("Tubes", params.tubes, MIN_TUBES, MAX_TUBES),
            capacity=_ask_int("Capacity", params.capacity, MIN_CAPACITY, MAX_CAPACITY),
            colors=_ask_int("Colors", params.colors, MIN_COLORS, MAX_COLORS),
        )
        try:
            candidate.validate()
        except InvalidParameters as exc:
            print(f"  {exc}")
            continue
        return candidate


def _menu_loop(params: PuzzleParams, seed: Optional[int]) -> None:
    while True:
        print()
        print("  ====================================")
        print("         W A T E R   S O R T          ")
        print("  ====================================")
        print()
        print(f"  Puzzle: {params.tubes} tubes \u00d7 {params.capacity}, {params.colors} colors")
        print()
        print("  1.  Play  (Vanilla Terminal)")
        print("  2.  Play  (Rich Terminal)")
        print("  3.  Play  (Pygame GUI)")
        print("  4.  Play  (PyQt GUI)")
        print("  5.  Change puzzle")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice in _CHOICES:
            _launch(_CHOICES[choice], params, seed)

        elif choice == "5":
            params = _ask_params(params)

        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    tubes: int = typer.Option(
        DEFAULT_TUBES, "-n", "--tubes",
        min=MIN_TUBES, max=MAX_TUBES,
        help="Number of tubes (N).",
    ),
    capacity: int = typer.Option(
        DEFAULT_CAPACITY, "-v", "--capacity",
        min=MIN_CAPACITY, max=MAX_CAPACITY,
        help="Drops per tube (V).",
    ),
    colors: int = typer.Option(
        DEFAULT_COLORS, "-m", "--colors",
        min=MIN_COLORS, max=MAX_COLORS,
        help="Number of colors (M), fewer than the tubes.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for the shuffle, for reproducible deals.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        case_sensitive=False,
        help="Logging verbosity (written to stderr).",
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file",
        help="Also write log records to this file.",
    ),
) -> None:
    """Water Sort Puzzle."""
    setup_logging(getattr(logging, log_level.upper()), log_file)

    params = PuzzleParams(tubes=tubes, capacity=capacity, colors=colors)
    try:
        params.validate()
    except InvalidParameters as exc:
        raise typer.BadParameter(str(exc)) from exc

    if frontend is None:
        _menu_loop(params, seed)
        return

    _launch(frontend, params, seed)


if __name__ == "__main__":
    app()
