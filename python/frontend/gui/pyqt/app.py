"""PyQt6 GUI frontend — fully self-contained.

Includes the parameter menu, gameplay on a painted tube board, and a
win screen listing every move.  No terminal interaction required.
"""

from __future__ import annotations

import logging
import random
import sys

from PyQt6.QtCore import QRectF, Qt, QTimer
from PyQt6.QtGui import QColor, QFont, QKeyEvent, QMouseEvent, QPainter, QPaintEvent, QPen
from PyQt6.QtWidgets import (
    QApplication,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QScrollArea,
    QSpacerItem,
    QSpinBox,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from backend.config import DEFAULT_CAPACITY, DEFAULT_COLORS, DEFAULT_TUBES
from backend.engine.gameplay import PuzzleEngine
from backend.models.grid import Direction
from backend.models.params import PuzzleParams
from frontend.controller import ClickResult, TubeSelector
from frontend.form import FIELDS, LABELS, LIMITS, ParamForm
from frontend.palette import hex_color
from frontend.results import format_history, total_drops

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Catppuccin Mocha CSS colours
# ---------------------------------------------------------------------------
_BASE = "#1e1e2e"
_MANTLE = "#181825"
_SURFACE0 = "#313244"
_SURFACE1 = "#45475a"
_OVERLAY0 = "#6c7086"
_TEXT = "#cdd6f4"
_SUBTEXT = "#a6adc8"
_BLUE = "#89b4fa"
_GREEN = "#a6e3a1"
_GREEN_H = "#b8ecb4"
_PINK = "#f5c2e7"
_YELLOW = "#f9e2af"
_YELLOW_H = "#fbecc8"
_RED = "#f38ba8"
_RED_H = "#f5a0b8"
_LAVENDER = "#b4befe"

_GLOBAL_CSS = f"""
    QMainWindow, QWidget#page {{ background: {_BASE}; }}
    QLabel {{ color: {_TEXT}; }}
    QSpinBox {{
        background: {_SURFACE0}; color: {_TEXT};
        border: none; border-radius: 6px; padding: 4px 8px;
    }}
"""

_HINT = "Click a tube, then where to pour     Arrows  cursor     Space  pick" \
    "     U  undo     R  restart     M  menu"


def _styled_btn(
    text: str,
    *,
    bg: str = _SURFACE0,
    hover: str = _SURFACE1,
    fg: str = _TEXT,
    font_size: int = 14,
    bold: bool = True,
    min_w: int = 0,
    min_h: int = 44,
    radius: int = 8,
) -> QPushButton:
    btn = QPushButton(text)
    btn.setFont(QFont("Helvetica", font_size, QFont.Weight.Bold if bold else QFont.Weight.Normal))
    btn.setMinimumHeight(min_h)
    if min_w:
        btn.setMinimumWidth(min_w)
    btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    btn.setCursor(Qt.CursorShape.PointingHandCursor)
    btn.setStyleSheet(
        f"QPushButton {{ background:{bg}; color:{fg};"
        f" border:none; border-radius:{radius}px; padding:6px 18px; }}"
        f" QPushButton:hover {{ background:{hover}; }}"
        f" QPushButton:disabled {{ background:{_SURFACE1}; color:{_OVERLAY0}; }}"
    )
    return btn


# ═══════════════════════════════════════════════════════════════════════════
# Pages
# ═══════════════════════════════════════════════════════════════════════════


class _MenuPage(QWidget):
    """Parameter menu: one spin box per field, play and quit."""

    def __init__(self, params: PuzzleParams) -> None:
        super().__init__()
        self.setObjectName("page")
        self.form = ParamForm(params)

        root = QVBoxLayout(self)
        root.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.setSpacing(12)
        root.setContentsMargins(30, 30, 30, 30)

        # title
        title = QLabel("WATER  SORT")
        title.setFont(QFont("Helvetica", 34, QFont.Weight.Bold))
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(title)

        root.addSpacerItem(QSpacerItem(0, 24))

        sub = QLabel("Choose the puzzle")
        sub.setFont(QFont("Helvetica", 15))
        sub.setStyleSheet(f"color:{_SUBTEXT};")
        sub.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(sub)

        # fields
        fields = QFormLayout()
        fields.setSpacing(10)
        self._spins: dict[str, QSpinBox] = {}
        for name in FIELDS:
            spin = QSpinBox()
            lo, hi = LIMITS[name]
            spin.setRange(lo, hi)
            spin.setValue(self.form.value(name))
            spin.setFont(QFont("Helvetica", 14))
            spin.setMinimumWidth(90)
            spin.valueChanged.connect(lambda v, n=name: self._set_field(n, v))
            lbl = QLabel(LABELS[name])
            lbl.setFont(QFont("Helvetica", 14))
            fields.addRow(lbl, spin)
            self._spins[name] = spin
        holder = QWidget()
        holder.setLayout(fields)
        root.addWidget(holder, alignment=Qt.AlignmentFlag.AlignCenter)

        self._error = QLabel()
        self._error.setFont(QFont("Helvetica", 12))
        self._error.setStyleSheet(f"color:{_RED};")
        self._error.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._error.setWordWrap(True)
        root.addWidget(self._error)

        root.addSpacerItem(QSpacerItem(0, 12))

        # action buttons
        self.play_btn = _styled_btn(
            "P L A Y", bg=_BLUE, hover=_LAVENDER, fg=_BASE,
            font_size=16, min_w=240, min_h=52,
        )
        root.addWidget(self.play_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        root.addSpacerItem(QSpacerItem(0, 4))

        self.quit_btn = _styled_btn(
            "Q U I T", bg=_RED, hover=_RED_H, fg=_BASE, min_w=240, font_size=13
        )
        root.addWidget(self.quit_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        self._refresh_error()

    @property
    def params(self) -> PuzzleParams:
        return self.form.params

    @property
    def ready(self) -> bool:
        return self.form.params.is_valid()

    def _set_field(self, name: str, value: int) -> None:
        self.form.adjust(value - self.form.value(name), name)
        self._refresh_error()

    def _refresh_error(self) -> None:
        error = self.form.error
        self._error.setText(error or "")
        self.play_btn.setEnabled(error is None)


class _TubeBoard(QWidget):
    """Paints the tubes on their grid and forwards clicks to the selector."""

    CELL_MAX_W = 90
    CELL_MAX_H = 220
    PAD = 12

    def __init__(self, page: _GamePage) -> None:
        super().__init__()
        self._page = page
        self.setMinimumSize(420, 300)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

    def _layout(self) -> tuple[float, float, float, float]:
        grid = self._page.engine.grid
        cw = min(self.CELL_MAX_W, self.width() / grid.row_width)
        ch = min(self.CELL_MAX_H, self.height() / grid.row_count)
        ox = (self.width() - cw * grid.row_width) / 2
        oy = (self.height() - ch * grid.row_count) / 2
        return cw, ch, ox, oy

    def paintEvent(self, event: QPaintEvent | None) -> None:  # noqa: N802
        engine = self._page.engine
        selector = self._page.selector
        cw, ch, ox, oy = self._layout()

        p = QPainter(self)
        p.setRenderHint(QPainter.RenderHint.Antialiasing)
        p.fillRect(self.rect(), QColor(_MANTLE))

        for k, slots in enumerate(engine.get_state()):
            row, col = engine.grid.index_to_grid(k)
            cell = QRectF(ox + col * cw, oy + row * ch, cw, ch)
            body = cell.adjusted(self.PAD, self.PAD, -self.PAD, -self.PAD - 16)
            slot_h = body.height() / max(1, len(slots))

            # drops, bottom-up
            p.setPen(Qt.PenStyle.NoPen)
            for level, color in enumerate(slots):
                if color == 0:
                    continue
                p.setBrush(QColor(hex_color(color)))
                p.drawRoundedRect(
                    QRectF(
                        body.left() + 3,
                        body.bottom() - (level + 1) * slot_h + 1,
                        body.width() - 6,
                        slot_h - 2,
                    ),
                    4,
                    4,
                )

            p.setBrush(Qt.BrushStyle.NoBrush)
            p.setPen(QPen(QColor(_TEXT), 2))
            p.drawRoundedRect(body, 6, 6)

            label_rect = QRectF(cell.left(), body.bottom() + 2, cell.width(), 16)
            p.setPen(QColor(_YELLOW if k == selector.cursor else _OVERLAY0))
            p.setFont(QFont("Helvetica", 10))
            p.drawText(label_rect, Qt.AlignmentFlag.AlignCenter, str(k))

            if k == selector.selected:
                p.setPen(QPen(QColor(_GREEN), 3))
                p.drawRoundedRect(cell.adjusted(2, 2, -2, -2), 8, 8)

        p.end()

    def mousePressEvent(self, event: QMouseEvent | None) -> None:  # noqa: N802
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return
        cw, ch, ox, oy = self._layout()
        pos = event.position()
        if pos.x() < ox or pos.y() < oy:
            self._page.handle_click(self._page.selector.click(None))
            return
        row = int((pos.y() - oy) // ch)
        col = int((pos.x() - ox) // cw)
        self._page.handle_click(self._page.selector.click_grid(row, col))


class _GamePage(QWidget):
    """The tube board with live stats and action buttons."""

    def __init__(self, params: PuzzleParams, rng: random.Random) -> None:
        super().__init__()
        self.setObjectName("page")
        self._params = params
        self._rng = rng
        self.engine = PuzzleEngine.from_params(params, rng)
        self.selector = TubeSelector(self.engine)
        self.won = False

        root = QVBoxLayout(self)
        root.setSpacing(6)
        root.setContentsMargins(16, 10, 16, 10)

        # title
        t = QLabel(
            f"Water Sort  {params.tubes} tubes \u00d7 {params.capacity}"
            f"  \u00b7  {params.colors} colors"
        )
        t.setFont(QFont("Helvetica", 17, QFont.Weight.Bold))
        t.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(t)

        # stats
        self._stats = QLabel()
        self._stats.setFont(QFont("Helvetica", 13))
        self._stats.setStyleSheet(f"color:{_PINK};")
        self._stats.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._stats)

        # board
        self._board = _TubeBoard(self)
        root.addWidget(self._board, stretch=1)

        # status
        self._status = QLabel()
        self._status.setFont(QFont("Helvetica", 12))
        self._status.setStyleSheet(f"color:{_YELLOW};")
        self._status.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._status)

        # actions
        self.undo_btn = _styled_btn(
            "UNDO", bg=_YELLOW, hover=_YELLOW_H, fg=_BASE, font_size=13, min_w=120
        )
        self.undo_btn.clicked.connect(self.undo)
        self.restart_btn = _styled_btn(
            "RESTART", bg=_PINK, hover=_LAVENDER, fg=_BASE, font_size=13, min_w=120
        )
        self.restart_btn.clicked.connect(self.restart)
        self.menu_btn = _styled_btn("MENU", font_size=13, min_w=120)

        buttons = QWidget()
        hbox = QHBoxLayout(buttons)
        hbox.setAlignment(Qt.AlignmentFlag.AlignCenter)
        hbox.setSpacing(10)
        for b in (self.undo_btn, self.restart_btn, self.menu_btn):
            hbox.addWidget(b)
        root.addWidget(buttons)

        # hint
        hint = QLabel(_HINT)
        hint.setFont(QFont("Helvetica", 11))
        hint.setStyleSheet(f"color:{_OVERLAY0};")
        hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(hint)

        self._sync()

    # -- helpers --

    def _sync(self) -> None:
        self._stats.setText(f"Moves: {self.engine.state.moves}")
        self._board.update()

    def handle_click(self, result: ClickResult) -> None:
        if self.won:
            return
        if result is ClickResult.SELECTED:
            self._status.setText(f"Selected tube {self.selector.selected}")
        elif result is ClickResult.REJECTED:
            self._status.setText("Can't pour there")
        else:
            self._status.setText("")
        self._sync()
        self._check_win()

    def move_cursor(self, d: Direction) -> None:
        self.selector.move_cursor(d)
        self._board.update()

    def press(self) -> None:
        self.handle_click(self.selector.press())

    def undo(self) -> None:
        if self.won:
            return
        self._status.setText("" if self.selector.undo() else "Nothing to undo")
        self._sync()

    def restart(self) -> None:
        self.engine = PuzzleEngine.from_params(self._params, self._rng)
        self.selector = TubeSelector(self.engine)
        self.won = False
        self._status.setText("")
        self._sync()

    def _check_win(self) -> None:
        if self.won or not self.engine.is_win():
            return
        self.won = True
        self._status.setText("Solved!")
        # parent window listens via self.won flag


class _WinPage(QWidget):
    """Victory screen with the move list and navigation buttons."""

    def __init__(self, engine: PuzzleEngine) -> None:
        super().__init__()
        self.setObjectName("page")
        history = engine.get_history()

        root = QVBoxLayout(self)
        root.setSpacing(10)
        root.setContentsMargins(30, 24, 30, 24)

        star = QLabel("\u2605  S O L V E D  \u2605")
        star.setFont(QFont("Helvetica", 32, QFont.Weight.Bold))
        star.setStyleSheet(f"color:{_GREEN};")
        star.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(star)

        for txt, col in [
            (f"Moves:         {len(history)}", _YELLOW),
            (f"Drops poured:  {total_drops(history)}", _YELLOW),
        ]:
            lbl = QLabel(txt)
            lbl.setFont(QFont("Helvetica", 18, QFont.Weight.Bold))
            lbl.setStyleSheet(f"color:{col};")
            lbl.setAlignment(Qt.AlignmentFlag.AlignCenter)
            root.addWidget(lbl)

        # scrollable move list
        scroll_content = QWidget()
        scroll_content.setObjectName("page")
        vbox = QVBoxLayout(scroll_content)
        vbox.setSpacing(2)
        vbox.setContentsMargins(10, 10, 10, 10)
        for line in format_history(history):
            row = QLabel(line)
            row.setFont(QFont("Helvetica", 12))
            row.setStyleSheet(f"color:{_SUBTEXT};")
            vbox.addWidget(row)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(scroll_content)
        scroll.setStyleSheet(
            f"QScrollArea {{ border:none; background:{_BASE}; }}"
        )
        root.addWidget(scroll, stretch=1)

        self.again_btn = _styled_btn(
            "PLAY AGAIN", bg=_GREEN, hover=_GREEN_H, fg=_BASE,
            font_size=16, min_w=240, min_h=50,
        )
        root.addWidget(self.again_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        self.menu_btn = _styled_btn("M E N U", min_w=240, font_size=13)
        root.addWidget(self.menu_btn, alignment=Qt.AlignmentFlag.AlignCenter)


# ═══════════════════════════════════════════════════════════════════════════
# Main window
# ═══════════════════════════════════════════════════════════════════════════

_IDX_MENU = 0
_IDX_GAME = 1
_IDX_WIN = 2


class _MainWindow(QMainWindow):
    def __init__(self, params: PuzzleParams, rng: random.Random) -> None:
        super().__init__()
        self._rng = rng

        self.setWindowTitle("Water Sort")
        self.setStyleSheet(_GLOBAL_CSS)
        self.setMinimumSize(640, 620)

        self._stack = QStackedWidget()
        self.setCentralWidget(self._stack)

        # menu
        self._menu = _MenuPage(params)
        self._menu.play_btn.clicked.connect(self._on_play)
        self._menu.quit_btn.clicked.connect(self.close)
        self._stack.addWidget(self._menu)  # 0

        # placeholders (replaced dynamically)
        self._game_page: _GamePage | None = None
        self._stack.addWidget(QWidget())  # 1
        self._stack.addWidget(QWidget())  # 2

        self._stack.setCurrentIndex(_IDX_MENU)

    # -- navigation ---

    def _replace(self, idx: int, page: QWidget) -> None:
        old = self._stack.widget(idx)
        self._stack.removeWidget(old)
        old.deleteLater()
        self._stack.insertWidget(idx, page)
        self._stack.setCurrentIndex(idx)

    def _show_menu(self) -> None:
        self._stack.setCurrentIndex(_IDX_MENU)

    def _on_play(self) -> None:
        if not self._menu.ready:
            return
        logger.debug("Starting game with %s", self._menu.params)
        page = _GamePage(self._menu.params, self._rng)
        page.menu_btn.clicked.connect(self._show_menu)
        self._game_page = page
        self._replace(_IDX_GAME, page)

    def _show_win(self) -> None:
        gp = self._game_page
        assert gp is not None
        page = _WinPage(gp.engine)
        page.again_btn.clicked.connect(self._on_play)
        page.menu_btn.clicked.connect(self._show_menu)
        self._replace(_IDX_WIN, page)

    # -- keyboard ---

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        idx = self._stack.currentIndex()

        if idx == _IDX_MENU:
            if key == Qt.Key.Key_Return:
                self._on_play()
            elif key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
                self.close()

        elif idx == _IDX_GAME and self._game_page is not None:
            gp = self._game_page
            _dirs = {
                Qt.Key.Key_Up: Direction.UP,
                Qt.Key.Key_W: Direction.UP,
                Qt.Key.Key_Down: Direction.DOWN,
                Qt.Key.Key_S: Direction.DOWN,
                Qt.Key.Key_Left: Direction.LEFT,
                Qt.Key.Key_A: Direction.LEFT,
                Qt.Key.Key_Right: Direction.RIGHT,
                Qt.Key.Key_D: Direction.RIGHT,
            }
            if key in _dirs:
                gp.move_cursor(_dirs[key])
            elif key in (Qt.Key.Key_Space, Qt.Key.Key_Return):
                gp.press()
                if gp.won:
                    self._show_win()
            elif key in (Qt.Key.Key_U, Qt.Key.Key_Z):
                gp.undo()
            elif key == Qt.Key.Key_R:
                gp.restart()
            elif key in (Qt.Key.Key_M, Qt.Key.Key_Escape):
                self._show_menu()

        elif idx == _IDX_WIN:
            if key in (Qt.Key.Key_R, Qt.Key.Key_Return):
                self._on_play()
            elif key in (Qt.Key.Key_M, Qt.Key.Key_Escape):
                self._show_menu()

        else:
            super().keyPressEvent(event)

    # -- poll for win (mouse-based play) ---

    def _poll_win(self) -> None:
        gp = self._game_page
        if (
            gp is not None
            and gp.won
            and self._stack.currentIndex() == _IDX_GAME
        ):
            self._show_win()

    def showEvent(self, ev) -> None:  # noqa: N802
        super().showEvent(ev)
        # periodic check for mouse-click wins
        self._poll_timer = QTimer(self)
        self._poll_timer.timeout.connect(self._poll_win)
        self._poll_timer.start(200)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(
    params: PuzzleParams = PuzzleParams(DEFAULT_TUBES, DEFAULT_CAPACITY, DEFAULT_COLORS),
    seed: int | None = None,
) -> None:
    """Launch the PyQt6 GUI (opens directly to the menu)."""
    qapp = QApplication.instance() or QApplication(sys.argv)
    window = _MainWindow(params, random.Random(seed))
    window.show()
    qapp.exec()
