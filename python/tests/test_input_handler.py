"""Keypress normalisation for the terminal frontends."""

from __future__ import annotations

import pytest

from frontend.cli import input_handler


def _feed(monkeypatch: pytest.MonkeyPatch, chars: str) -> None:
    it = iter(chars)
    monkeypatch.setattr(input_handler, "_getch", lambda: next(it))


@pytest.mark.parametrize(
    "chars, action",
    [
        ("w", "up"),
        ("D", "right"),
        (" ", "select"),
        ("\r", "enter"),
        ("u", "undo"),
        ("Z", "undo"),
        ("r", "restart"),
        ("q", "quit"),
        ("\x03", "quit"),
        ("\x1b[A", "up"),
        ("\x1b[B", "down"),
        ("\x1b[C", "right"),
        ("\x1b[D", "left"),
        ("\x1bx", "quit"),
        ("1", "1"),
        ("\x07", ""),
    ],
)
def test_get_key(monkeypatch: pytest.MonkeyPatch, chars: str, action: str) -> None:
    _feed(monkeypatch, chars)
    assert input_handler.get_key() == action
