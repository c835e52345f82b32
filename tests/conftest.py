"""Pytest fixtures for simple-ui tests."""

from __future__ import annotations

from collections import deque
from contextlib import contextmanager

import pytest

from simple_ui.terminal import set_terminal
from simple_ui.themes import set_palette


class ScriptedTerminal:
    """Terminal driver that replays scripted input and records output.

    Args:
        lines: Lines returned by read_line(), in order.
        keys: Characters returned by read_raw_char(), in order.
    """

    def __init__(self, lines=(), keys=""):
        self.lines = deque(lines)
        self.keys = deque(keys)
        self.events: list[tuple[str, str, str | None]] = []
        self._pending: deque[str] = deque()

    def clear_screen(self):
        self.events.append(("clear", "", None))

    def write(self, text):
        self.events.append(("write", text, None))

    def write_colored(self, text, color):
        self.events.append(("write", text, color))

    @contextmanager
    def color_band(self, color):
        self.events.append(("band", "", color))
        try:
            yield
        finally:
            self.events.append(("band_end", "", color))

    def read_line(self):
        if not self.lines:
            raise EOFError
        return self.lines.popleft()

    def read_token(self):
        while not self._pending:
            self._pending.extend(self.read_line().split())
        return self._pending.popleft()

    def read_raw_char(self):
        if not self.keys:
            raise EOFError
        return self.keys.popleft()

    @property
    def output(self) -> str:
        """All written text, colors dropped."""
        return "".join(text for kind, text, _ in self.events if kind == "write")

    @property
    def clears(self) -> int:
        return sum(1 for kind, _, _ in self.events if kind == "clear")

    def screens(self) -> list[str]:
        """Written text split at every clear_screen() call."""
        screens = [""]
        for kind, text, _ in self.events:
            if kind == "clear":
                screens.append("")
            elif kind == "write":
                screens[-1] += text
        return screens

    def colored(self, color: str) -> list[str]:
        return [text for kind, text, c in self.events if kind == "write" and c == color]


@pytest.fixture(autouse=True)
def _reset_globals(monkeypatch, tmp_path):
    """Isolate palette, default terminal and config lookups per test."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("SIMPLE_UI_PALETTE", raising=False)
    monkeypatch.delenv("SIMPLE_UI_DEBUG", raising=False)
    yield
    set_palette(None)
    set_terminal(None)


@pytest.fixture
def scripted_terminal():
    """Factory for ScriptedTerminal instances."""

    def _create(lines=(), keys=""):
        return ScriptedTerminal(lines=lines, keys=keys)

    return _create
