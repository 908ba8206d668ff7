"""Pygame GUI frontend — fully self-contained.

Includes the parameter menu, gameplay, and a win screen listing every
move.  Tubes are picked with the mouse (click source, then target) or
with the keyboard cursor.
"""

from __future__ import annotations

import enum
import logging
import random

import pygame

from backend.config import DEFAULT_CAPACITY, DEFAULT_COLORS, DEFAULT_TUBES
from backend.engine.gameplay import PuzzleEngine
from backend.models.grid import Direction
from backend.models.params import PuzzleParams
from frontend.controller import ClickResult, TubeSelector
from frontend.form import FIELDS, LABELS, ParamForm
from frontend.palette import rgb_color
from frontend.results import format_history, total_drops

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_SURFACE0 = (49, 50, 68)
COL_SURFACE1 = (69, 71, 90)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_SUBTEXT = (166, 173, 200)
COL_BLUE = (137, 180, 250)
COL_LAVENDER = (180, 190, 254)
COL_GREEN = (166, 227, 161)
COL_PINK = (245, 194, 231)
COL_YELLOW = (249, 226, 175)
COL_RED = (243, 139, 168)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 760, 660
MARGIN = 20
BOARD_TOP = 76
BOARD_W = WIN_W - 2 * MARGIN
BOARD_H = 440
CELL_MAX_W = 100
CELL_MAX_H = 220
TUBE_PAD = 14
HISTORY_LINES = 12


# ---------------------------------------------------------------------------
# Screen enum
# ---------------------------------------------------------------------------
class _Screen(enum.Enum):
    MENU = "menu"
    PLAYING = "playing"
    WIN = "win"


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "radius", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
        *,
        bg: tuple = COL_SURFACE0,
        hover: tuple = COL_SURFACE1,
        fg: tuple = COL_TEXT,
        radius: int = 8,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.hover = hover
        self.fg = fg
        self.radius = radius
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        c = self.hover if self._hot else self.bg
        pygame.draw.rect(surf, c, self.rect, border_radius=self.radius)
        lbl = self.font.render(self.text, True, self.fg)
        surf.blit(
            lbl,
            (
                self.rect.centerx - lbl.get_width() // 2,
                self.rect.centery - lbl.get_height() // 2,
            ),
        )

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


# ---------------------------------------------------------------------------
# Centring helpers
# ---------------------------------------------------------------------------
def _cx(w: int) -> int:
    return (WIN_W - w) // 2


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, (_cx(rendered.get_width()), y))


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(self, params: PuzzleParams, rng: random.Random) -> None:
        self._form = ParamForm(params)
        self._rng = rng

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Water Sort")
        self._clock = pygame.time.Clock()

        # Fonts
        self._f_big = pygame.font.SysFont("Helvetica", 38, bold=True)
        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_body = pygame.font.SysFont("Helvetica", 16)
        self._f_btn = pygame.font.SysFont("Helvetica", 17, bold=True)
        self._f_btn_sm = pygame.font.SysFont("Helvetica", 14, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)

        self._screen = _Screen.MENU
        self._engine: PuzzleEngine | None = None
        self._selector: TubeSelector | None = None
        self._status_msg: str = ""

        # Pre-build buttons that don't move
        self._build_menu_btns()
        self._build_game_btns()
        self._build_win_btns()

    # ── menu buttons ────────────────────────────────────────────────────────

    def _build_menu_btns(self) -> None:
        self._field_btns: dict[str, tuple[_Btn, _Btn]] = {}
        for i, name in enumerate(FIELDS):
            y = 200 + i * 60
            minus = _Btn((_cx(260) + 150, y, 40, 40), "\u2212", self._f_btn)
            plus = _Btn((_cx(260) + 250, y, 40, 40), "+", self._f_btn)
            self._field_btns[name] = (minus, plus)

        bw_lg = 220
        self._play_btn = _Btn(
            (_cx(bw_lg), 430, bw_lg, 50),
            "P L A Y",
            self._f_btn,
            bg=COL_BLUE,
            hover=COL_LAVENDER,
            fg=COL_BASE,
        )
        self._quit_btn = _Btn(
            (_cx(bw_lg), 494, bw_lg, 42),
            "Q U I T",
            self._f_btn_sm,
            bg=COL_RED,
            hover=(255, 170, 185),
            fg=COL_BASE,
        )

        self._menu_all: list[_Btn] = [
            *(b for pair in self._field_btns.values() for b in pair),
            self._play_btn,
            self._quit_btn,
        ]

    def _build_game_btns(self) -> None:
        """Build in-game action buttons (placed below the board)."""
        bw, gap = 120, 10
        total = 3 * bw + 2 * gap
        sx = _cx(total)
        y = BOARD_TOP + BOARD_H + 16
        self._undo_btn = _Btn(
            (sx, y, bw, 36), "UNDO (U)", self._f_btn_sm,
            bg=COL_YELLOW, hover=(255, 240, 200), fg=COL_BASE,
        )
        self._restart_btn = _Btn(
            (sx + bw + gap, y, bw, 36), "RESTART (R)", self._f_btn_sm,
            bg=COL_PINK, hover=(245, 210, 227), fg=COL_BASE,
        )
        self._menu_btn = _Btn(
            (sx + 2 * (bw + gap), y, bw, 36), "MENU (M)", self._f_btn_sm,
        )
        self._game_action_btns = [self._undo_btn, self._restart_btn, self._menu_btn]

    def _build_win_btns(self) -> None:
        bw = 220
        self._win_again = _Btn(
            (_cx(bw), WIN_H - 124, bw, 50),
            "PLAY AGAIN",
            self._f_btn,
            bg=COL_GREEN,
            hover=(190, 240, 190),
            fg=COL_BASE,
        )
        self._win_menu = _Btn(
            (_cx(bw), WIN_H - 62, bw, 46), "M E N U", self._f_btn_sm
        )

    # ── helpers ─────────────────────────────────────────────────────────────

    def _cell_layout(self) -> tuple[int, int, int, int]:
        """Return (cell_w, cell_h, origin_x, origin_y) for the current game."""
        grid = self._engine.grid  # type: ignore[union-attr]
        cell_w = min(CELL_MAX_W, BOARD_W // grid.row_width)
        cell_h = min(CELL_MAX_H, BOARD_H // grid.row_count)
        ox = _cx(cell_w * grid.row_width)
        return cell_w, cell_h, ox, BOARD_TOP

    def _cell_rect(self, index: int) -> pygame.Rect:
        cw, ch, ox, oy = self._cell_layout()
        row, col = self._engine.grid.index_to_grid(index)  # type: ignore[union-attr]
        return pygame.Rect(ox + col * cw, oy + row * ch, cw, ch)

    def _pick(self, pos: tuple[int, int]) -> ClickResult:
        """Translate a board click into a grid position and forward it."""
        selector = self._selector
        assert selector is not None
        cw, ch, ox, oy = self._cell_layout()
        x, y = pos
        if x < ox or y < oy:
            return selector.click(None)
        return selector.click_grid((y - oy) // ch, (x - ox) // cw)

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw_menu(self) -> None:
        self._surf.fill(COL_BASE)

        _blit_center(
            self._surf,
            self._f_big.render("WATER  SORT", True, COL_TEXT),
            80,
        )
        _blit_center(
            self._surf,
            self._f_body.render("Choose the puzzle", True, COL_SUBTEXT),
            150,
        )

        for i, name in enumerate(FIELDS):
            y = 200 + i * 60
            lbl = self._f_body.render(LABELS[name], True, COL_SUBTEXT)
            self._surf.blit(lbl, (_cx(260) - 20, y + 10))
            val = self._f_title.render(str(self._form.value(name)), True, COL_TEXT)
            self._surf.blit(val, (_cx(260) + 220 - val.get_width() // 2, y + 8))
            for btn in self._field_btns[name]:
                btn.draw(self._surf)

        error = self._form.error
        if error:
            _blit_center(self._surf, self._f_small.render(error, True, COL_RED), 396)

        self._play_btn.bg = COL_SURFACE1 if error else COL_BLUE
        self._play_btn.draw(self._surf)
        self._quit_btn.draw(self._surf)

    def _draw_tube(self, index: int, slots: list[int], selected: bool, cursor: bool) -> None:
        cell = self._cell_rect(index)
        body = cell.inflate(-2 * TUBE_PAD, -2 * TUBE_PAD - 16)
        body.top = cell.top + TUBE_PAD

        # drops, bottom-up
        slot_h = body.height / max(1, len(slots))
        for level, color in enumerate(slots):
            if color == 0:
                continue
            top = body.bottom - (level + 1) * slot_h
            pygame.draw.rect(
                self._surf,
                rgb_color(color),
                pygame.Rect(body.left + 3, round(top) + 1, body.width - 6, round(slot_h) - 1),
                border_radius=4,
            )

        pygame.draw.rect(self._surf, COL_TEXT, body, width=2, border_radius=6)

        lbl = self._f_small.render(str(index), True, COL_YELLOW if cursor else COL_OVERLAY0)
        self._surf.blit(lbl, (cell.centerx - lbl.get_width() // 2, body.bottom + 4))

        if selected:
            pygame.draw.rect(self._surf, COL_GREEN, cell, width=3, border_radius=8)
        elif cursor:
            pygame.draw.rect(self._surf, COL_SURFACE1, cell, width=2, border_radius=8)

    def _draw_game(self) -> None:
        self._surf.fill(COL_BASE)
        engine = self._engine
        selector = self._selector
        assert engine is not None and selector is not None
        p = engine.params

        _blit_center(
            self._surf,
            self._f_title.render(
                f"Water Sort  {p.tubes} tubes \u00d7 {p.capacity}  \u00b7  {p.colors} colors",
                True,
                COL_TEXT,
            ),
            14,
        )
        _blit_center(
            self._surf,
            self._f_body.render(f"Moves: {engine.state.moves}", True, COL_PINK),
            44,
        )

        # board bg
        pygame.draw.rect(
            self._surf,
            COL_MANTLE,
            pygame.Rect(MARGIN, BOARD_TOP, BOARD_W, BOARD_H),
            border_radius=10,
        )

        for k, slots in enumerate(engine.get_state()):
            self._draw_tube(k, slots, k == selector.selected, k == selector.cursor)

        for btn in self._game_action_btns:
            btn.draw(self._surf)

        footer_y = self._undo_btn.rect.bottom + 10
        if self._status_msg:
            _blit_center(
                self._surf,
                self._f_small.render(self._status_msg, True, COL_YELLOW),
                footer_y,
            )
            footer_y += 20

        _blit_center(
            self._surf,
            self._f_small.render(
                "Click a tube, then where to pour     Arrows  cursor"
                "     Space  pick     Esc  menu",
                True,
                COL_OVERLAY0,
            ),
            footer_y,
        )

    def _draw_win(self) -> None:
        self._surf.fill(COL_BASE)
        engine = self._engine
        assert engine is not None
        history = engine.get_history()

        _blit_center(
            self._surf,
            self._f_big.render("\u2605  S O L V E D  \u2605", True, COL_GREEN),
            40,
        )
        _blit_center(
            self._surf,
            self._f_title.render(
                f"Moves: {len(history)}    Drops poured: {total_drops(history)}",
                True,
                COL_YELLOW,
            ),
            100,
        )

        lines = format_history(history)
        shown = lines[:HISTORY_LINES]
        if len(lines) > HISTORY_LINES:
            shown.append(f"\u2026 and {len(lines) - HISTORY_LINES} more")
        y = 150
        for line in shown:
            _blit_center(self._surf, self._f_body.render(line, True, COL_SUBTEXT), y)
            y += 24

        self._win_again.draw(self._surf)
        self._win_menu.draw(self._surf)

    # ── event handling ──────────────────────────────────────────────────────

    def _ev_menu(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            for b in self._menu_all:
                b.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            for name, (minus, plus) in self._field_btns.items():
                if minus.hit(ev.pos):
                    self._form.adjust(-1, name)
                    return True
                if plus.hit(ev.pos):
                    self._form.adjust(+1, name)
                    return True
            if self._play_btn.hit(ev.pos):
                self._start_game()
            elif self._quit_btn.hit(ev.pos):
                return False
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_RETURN:
                self._start_game()
            elif ev.key == pygame.K_UP:
                self._form.prev_field()
            elif ev.key == pygame.K_DOWN:
                self._form.next_field()
            elif ev.key == pygame.K_LEFT:
                self._form.adjust(-1)
            elif ev.key == pygame.K_RIGHT:
                self._form.adjust(+1)
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    def _ev_game(self, ev: pygame.event.Event) -> bool:
        selector = self._selector
        assert selector is not None
        if ev.type == pygame.MOUSEMOTION:
            for btn in self._game_action_btns:
                btn.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            # Check action buttons first
            if self._undo_btn.hit(ev.pos):
                self._do_undo()
            elif self._restart_btn.hit(ev.pos):
                self._start_game()
            elif self._menu_btn.hit(ev.pos):
                self._screen = _Screen.MENU
            else:
                self._after_click(self._pick(ev.pos))
        elif ev.type == pygame.KEYDOWN:
            _dirs = {
                pygame.K_UP: Direction.UP,
                pygame.K_w: Direction.UP,
                pygame.K_DOWN: Direction.DOWN,
                pygame.K_s: Direction.DOWN,
                pygame.K_LEFT: Direction.LEFT,
                pygame.K_a: Direction.LEFT,
                pygame.K_RIGHT: Direction.RIGHT,
                pygame.K_d: Direction.RIGHT,
            }
            if ev.key in _dirs:
                selector.move_cursor(_dirs[ev.key])
            elif ev.key in (pygame.K_SPACE, pygame.K_RETURN):
                self._after_click(selector.press())
            elif ev.key in (pygame.K_u, pygame.K_z):
                self._do_undo()
            elif ev.key == pygame.K_r:
                self._start_game()
            elif ev.key in (pygame.K_m, pygame.K_ESCAPE):
                self._screen = _Screen.MENU
        return True

    def _ev_win(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            self._win_again.motion(ev.pos)
            self._win_menu.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._win_again.hit(ev.pos):
                self._start_game()
            elif self._win_menu.hit(ev.pos):
                self._screen = _Screen.MENU
        elif ev.type == pygame.KEYDOWN:
            if ev.key in (pygame.K_r, pygame.K_RETURN):
                self._start_game()
            elif ev.key in (pygame.K_m, pygame.K_ESCAPE):
                self._screen = _Screen.MENU
        return True

    # ── game actions ────────────────────────────────────────────────────────

    def _after_click(self, result: ClickResult) -> None:
        selector = self._selector
        assert selector is not None
        if result is ClickResult.SELECTED:
            self._status_msg = f"Selected tube {selector.selected}"
        elif result is ClickResult.REJECTED:
            self._status_msg = "Can't pour there"
        else:
            self._status_msg = ""

    def _do_undo(self) -> None:
        selector = self._selector
        assert selector is not None
        self._status_msg = "" if selector.undo() else "Nothing to undo"

    def _start_game(self) -> None:
        if self._form.error is not None:
            return
        self._engine = PuzzleEngine.from_params(self._form.params, self._rng)
        self._selector = TubeSelector(self._engine)
        self._status_msg = ""
        self._screen = _Screen.PLAYING
        logger.debug("Started game with %s", self._form.params)

    def _check_win(self) -> None:
        engine = self._engine
        if engine is None or not engine.is_win():
            return
        self._screen = _Screen.WIN

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        _dispatch = {
            _Screen.MENU: self._ev_menu,
            _Screen.PLAYING: self._ev_game,
            _Screen.WIN: self._ev_win,
        }
        _draw = {
            _Screen.MENU: self._draw_menu,
            _Screen.PLAYING: self._draw_game,
            _Screen.WIN: self._draw_win,
        }

        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                    break
                handler = _dispatch.get(self._screen)
                if handler and not handler(ev):
                    running = False
                    break

            if self._screen == _Screen.PLAYING:
                self._check_win()

            drawer = _draw.get(self._screen)
            if drawer:
                drawer()
            pygame.display.flip()
            self._clock.tick(30)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(
    params: PuzzleParams = PuzzleParams(DEFAULT_TUBES, DEFAULT_CAPACITY, DEFAULT_COLORS),
    seed: int | None = None,
) -> None:
    """Launch the Pygame GUI (opens directly to the menu)."""
    app = PygameApp(params, random.Random(seed))
    app.run_loop()
