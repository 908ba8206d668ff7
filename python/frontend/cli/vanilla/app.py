"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
Includes a built-in menu for choosing the puzzle parameters.
"""

from __future__ import annotations

import logging
import random
import sys

from backend.engine.gameplay import PuzzleEngine
from backend.models.grid import Direction
from backend.models.params import PuzzleParams
from frontend.cli.input_handler import get_key
from frontend.controller import ClickResult, TubeSelector
from frontend.form import FIELDS, LABELS, ParamForm
from frontend.palette import rgb_color
from frontend.results import format_history, total_drops

logger = logging.getLogger(__name__)


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset
_BG_SEL = "\033[42;30m"  # green bg, black fg (cursor / focused field)

_CELL_W = 4

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def _drop(color: int) -> str:
    """A truecolor block showing the color id in black."""
    r, g, b = rgb_color(color)
    return f"\033[48;2;{r};{g};{b}m\033[30m{color:^{_CELL_W}}{_R}"


# -- tube rendering -----------------------------------------------------------


def _render_tubes(engine: PuzzleEngine, selector: TubeSelector | None) -> str:
    """Return an ANSI-coloured picture of every tube, laid out on the grid."""
    state = engine.get_state()
    grid = engine.grid
    selected = selector.selected if selector else None
    cursor = selector.cursor if selector else None

    lines: list[str] = []
    for row in range(grid.row_count):
        indices = [grid.grid_to_index(row, c) for c in range(grid.row_length(row))]

        marks = [
            f" {_G}{'vv':^{_CELL_W}}{_R} " if k == selected else " " * (_CELL_W + 2)
            for k in indices
        ]
        lines.append(" ".join(marks))

        for level in range(engine.capacity - 1, -1, -1):
            cells: list[str] = []
            for k in indices:
                color = state[k][level]
                fill = _drop(color) if color else " " * _CELL_W
                cells.append(f"|{fill}|")
            lines.append(" ".join(cells))

        lines.append(" ".join("+" + "-" * _CELL_W + "+" for _ in indices))

        labels: list[str] = []
        for k in indices:
            label = f"{k:^{_CELL_W}}"
            if k == cursor:
                label = f"{_BG_SEL}{label}{_R}"
            labels.append(f" {label} ")
        lines.append(" ".join(labels))
        lines.append("")
    return "\n".join(lines)


def _click_status(result: ClickResult, selector: TubeSelector) -> str:
    if result is ClickResult.SELECTED:
        return f"{_C}Selected tube {selector.selected}{_R}"
    if result is ClickResult.REJECTED:
        return f"{_Y}Can't pour there.{_R}"
    return ""


# -- menu screen --------------------------------------------------------------


def _show_menu(form: ParamForm) -> None:
    _clear()
    print()
    print(f"  {_BOLD}======================================{_R}")
    print(f"  {_BOLD}        W A T E R   S O R T          {_R}")
    print(f"  {_BOLD}======================================{_R}")
    print()

    for i, name in enumerate(FIELDS):
        value = f" {form.value(name):>2} "
        if i == form.focus:
            value = f"{_BG_SEL}{value}{_R}"
        print(f"    {LABELS[name]:<14} \u2190 {value} \u2192")
    print(f"    {_DIM}\u2191 \u2193 choose  \u2190 \u2192 change{_R}")
    print()

    error = form.error
    if error:
        print(f"    {_RED}{error}{_R}")
        print()

    print(f"    {_C}Enter{_R}  Play")
    print(f"    {_DIM}Q{_R}      Quit")
    print()


# -- game screens -------------------------------------------------------------


def _show_game(engine: PuzzleEngine, selector: TubeSelector, status: str = "") -> None:
    _clear()
    p = engine.params
    print(f"  {_C}=== Water Sort ({p.tubes} tubes \u00d7 {p.capacity}, {p.colors} colors) ==={_R}")
    print()
    print(_render_tubes(engine, selector))
    print(
        f"  {_C}WASD{_R}/{_C}Arrows{_R}: cursor  |  "
        f"{_C}Space{_R}/{_C}Enter{_R}: pick / pour  |  "
        f"{_C}U{_R}: undo  |  "
        f"{_C}R{_R}: restart  |  "
        f"{_C}Q{_R}: back"
    )
    if status:
        print(f"  {status}")
    print(f"\n  Moves: {_Y}{engine.state.moves}{_R}")


def _show_win(engine: PuzzleEngine) -> None:
    _clear()
    history = engine.get_history()
    print(f"  {_G}=== Water Sort ==={_R}")
    print()
    print(_render_tubes(engine, None))
    print(f"  {_G}\u2605 CONGRATULATIONS! You solved it! \u2605{_R}")
    print()
    print(
        f"  Moves: {_Y}{len(history)}{_R}  |  "
        f"Drops poured: {_Y}{total_drops(history)}{_R}"
    )
    print()
    for line in format_history(history):
        print(f"    {_DIM}{line}{_R}")


# -- game loop ----------------------------------------------------------------


def _play_game(params: PuzzleParams, rng: random.Random) -> None:
    while True:
        engine = PuzzleEngine.from_params(params, rng)
        selector = TubeSelector(engine)
        status = ""

        while not engine.is_win():
            _show_game(engine, selector, status)
            status = ""
            key = get_key()

            if key in _DIRECTIONS:
                selector.move_cursor(_DIRECTIONS[key])
            elif key in ("select", "enter"):
                status = _click_status(selector.press(), selector)
            elif key == "undo":
                if not selector.undo():
                    status = f"{_DIM}Nothing to undo.{_R}"
            elif key == "restart":
                engine = PuzzleEngine.from_params(params, rng)
                selector = TubeSelector(engine)
            elif key == "quit":
                return

        # -- win ---------------------------------------------------------------
        _show_win(engine)
        print(f"\n  Press {_C}R{_R} to play again, {_C}Q{_R} to go back.")

        while True:
            key = get_key()
            if key == "restart":
                break
            if key == "quit":
                return


# -- menu loop ----------------------------------------------------------------


def _menu_loop(params: PuzzleParams, rng: random.Random) -> None:
    form = ParamForm(params)

    while True:
        _show_menu(form)
        key = get_key()

        if key == "quit":
            _clear()
            print("  Goodbye!\n")
            return
        elif key == "up":
            form.prev_field()
        elif key == "down":
            form.next_field()
        elif key == "left":
            form.adjust(-1)
        elif key == "right":
            form.adjust(+1)
        elif key in ("enter", "select", "1") and form.error is None:
            logger.debug("Starting game with %s", form.params)
            _play_game(form.params, rng)


# -- public entry point -------------------------------------------------------


def run(params: PuzzleParams, seed: int | None = None) -> None:
    """Launch the vanilla CLI with interactive menu."""
    _menu_loop(params, random.Random(seed))
