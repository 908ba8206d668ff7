"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler, selection logic and backend as the vanilla CLI.
Includes a built-in menu for choosing the puzzle parameters.
"""

from __future__ import annotations

import logging
import random

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import PuzzleEngine
from backend.models.grid import Direction
from backend.models.params import PuzzleParams
from frontend.cli.input_handler import get_key
from frontend.controller import ClickResult, TubeSelector
from frontend.form import FIELDS, LABELS, ParamForm
from frontend.palette import hex_color
from frontend.results import format_history, total_drops

logger = logging.getLogger(__name__)

console = Console()

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


# -- tube rendering -----------------------------------------------------------


def _render_tube(slots: list[int], selected: bool) -> Table:
    """One tube as a single-column table, top slot first."""
    table = Table(
        show_header=False,
        show_edge=True,
        box=rich.box.HEAVY if selected else rich.box.SQUARE,
        border_style="bold green" if selected else "bright_blue",
        padding=(0, 1),
    )
    table.add_column(width=3, justify="center")
    for color in reversed(slots):
        if color:
            table.add_row(Text(f"{color:^3}", style=f"bold black on {hex_color(color)}"))
        else:
            table.add_row(Text("   "))
    return table


def _render_tubes(engine: PuzzleEngine, selector: TubeSelector | None) -> Group:
    """Return every tube laid out on the engine's grid."""
    state = engine.get_state()
    grid = engine.grid
    selected = selector.selected if selector else None
    cursor = selector.cursor if selector else None

    rows: list[Table] = []
    for row in range(grid.row_count):
        indices = [grid.grid_to_index(row, c) for c in range(grid.row_length(row))]
        layout = Table.grid(padding=(0, 1))
        for _ in indices:
            layout.add_column(justify="center")
        layout.add_row(*(_render_tube(state[k], k == selected) for k in indices))
        labels: list[Text] = []
        for k in indices:
            style = "bold black on green" if k == cursor else "dim"
            labels.append(Text(f" {k} ", style=style))
        layout.add_row(*labels)
        rows.append(layout)
    return Group(*(Align.center(r) for r in rows))


def _click_status(result: ClickResult, selector: TubeSelector) -> str:
    if result is ClickResult.SELECTED:
        return f"[cyan]Selected tube[/cyan] [bold]{selector.selected}[/bold]"
    if result is ClickResult.REJECTED:
        return "[yellow]Can't pour there.[/yellow]"
    return ""


# -- menu screen --------------------------------------------------------------


def _draw_menu(form: ParamForm) -> None:
    """Draw the parameter menu."""
    console.clear()

    fields = Table.grid(padding=(0, 2))
    fields.add_column(justify="right")
    fields.add_column(justify="center")
    for i, name in enumerate(FIELDS):
        value = Text()
        value.append("\u2190 ", style="dim")
        if i == form.focus:
            value.append(f" {form.value(name):>2} ", style="bold green on #313244")
        else:
            value.append(f" {form.value(name):>2} ")
        value.append(" \u2192", style="dim")
        fields.add_row(Text(LABELS[name], style="bold" if i == form.focus else "dim"), value)

    nav = Text("  \u2191 \u2193  choose    \u2190 \u2192  change", style="dim")

    opts = Text()
    opts.append("  Enter", style="bold cyan")
    opts.append("  Play    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    parts = [Text(""), Align.center(fields), Align.center(nav), Text("")]
    error = form.error
    if error:
        parts.append(Align.center(Text(error, style="bold red")))
        parts.append(Text(""))
    parts.append(Align.center(opts))

    panel = Panel(
        Group(*parts),
        title="[bold]W A T E R   S O R T[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )

    console.print()
    console.print(Align.center(panel))


# -- game screens -------------------------------------------------------------


def _draw_game(engine: PuzzleEngine, selector: TubeSelector, status: str = "") -> None:
    console.clear()
    p = engine.params

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(engine.state.moves), style="bold yellow")

    controls = Text()
    controls.append("  \u2191\u2193\u2190\u2192", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  cursor   ", style="dim")
    controls.append("Space", style="bold cyan")
    controls.append("  pick / pour   ", style="dim")
    controls.append("U", style="bold cyan")
    controls.append("  undo   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    panel = Panel(
        _render_tubes(engine, selector),
        title=(
            f"[bold cyan]Water Sort  {p.tubes} tubes \u00d7 {p.capacity}"
            f"  \u00b7  {p.colors} colors[/bold cyan]"
        ),
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _draw_win(engine: PuzzleEngine) -> None:
    console.clear()
    history = engine.get_history()

    congrats = Text()
    congrats.append("\n  \u2605 ", style="bold yellow")
    congrats.append("CONGRATULATIONS!", style="bold green")
    congrats.append("  You solved it!  ", style="green")
    congrats.append("\u2605\n", style="bold yellow")

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(len(history)), style="bold yellow")
    stats.append("    Drops poured: ", style="dim")
    stats.append(str(total_drops(history)), style="bold yellow")

    moves = Table(
        title="Moves",
        title_style="bold cyan",
        box=rich.box.ROUNDED,
        border_style="dim",
        show_header=False,
    )
    moves.add_column(style="dim")
    for line in format_history(history):
        moves.add_row(line)

    group = Group(
        _render_tubes(engine, None),
        Align.center(congrats),
        Align.center(stats),
        Text(""),
        Align.center(moves),
    )

    panel = Panel(
        group,
        title="[bold green]Water Sort[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))


# -- game loop ----------------------------------------------------------------


def _play_game(params: PuzzleParams, rng: random.Random) -> None:
    while True:
        engine = PuzzleEngine.from_params(params, rng)
        selector = TubeSelector(engine)
        status = ""

        while not engine.is_win():
            _draw_game(engine, selector, status)
            status = ""
            key = get_key()

            if key in _DIRECTIONS:
                selector.move_cursor(_DIRECTIONS[key])
            elif key in ("select", "enter"):
                status = _click_status(selector.press(), selector)
            elif key == "undo":
                if not selector.undo():
                    status = "[dim]Nothing to undo.[/dim]"
            elif key == "restart":
                engine = PuzzleEngine.from_params(params, rng)
                selector = TubeSelector(engine)
            elif key == "quit":
                return

        # -- win ---------------------------------------------------------------
        _draw_win(engine)
        console.print(
            Align.center(
                Text(
                    "\n  Press R to play again, Q to go back.\n",
                    style="dim",
                )
            )
        )

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
        _draw_menu(form)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(
                Align.center(Text("\nGoodbye!\n", style="bold cyan"))
            )
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
    """Launch the Rich CLI with interactive menu."""
    _menu_loop(params, random.Random(seed))
