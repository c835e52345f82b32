"""Terminal driver used by menus and prompts.

The core only talks to a TerminalDriver. ConsoleTerminal is the default
implementation on top of Rich (output, clearing, line input) and readchar
(single unechoed keystrokes with the terminal mode restored afterwards).
Tests can swap the default driver with set_terminal().
"""

from __future__ import annotations

import logging
import sys
from collections import deque
from contextlib import contextmanager
from typing import IO, Iterator, Protocol

import readchar
from rich.console import Console
from rich.style import Style

from .themes import current_palette

logger = logging.getLogger(__name__)


class TerminalDriver(Protocol):
    """Capabilities the menu core needs from a terminal.

    Allows swapping terminal backends (or a scripted one in tests).
    """

    def clear_screen(self) -> None:
        """Clear the visible screen."""
        ...

    def write(self, text: str) -> None:
        """Write text as-is, without a trailing newline."""
        ...

    def write_colored(self, text: str, color: str) -> None:
        """Write text in a Rich color/style."""
        ...

    def color_band(self, color: str):
        """Context manager coloring everything written inside it."""
        ...

    def read_line(self) -> str:
        """Read one line of buffered input (raises EOFError at end of input)."""
        ...

    def read_token(self) -> str:
        """Read the next whitespace-delimited token from buffered input."""
        ...

    def read_raw_char(self) -> str:
        """Read one unechoed keystroke without waiting for Enter."""
        ...


class ConsoleTerminal:
    """Rich + readchar terminal driver.

    Args:
        console: Rich Console for output (created if not provided).
        stream: Optional text stream to read input from instead of the
            keyboard. Keystrokes are then read one character at a time
            from the stream.
    """

    def __init__(self, console: Console | None = None, stream: IO[str] | None = None):
        self.console = console or Console(highlight=False)
        self.stream = stream
        self._pending: deque[str] = deque()
        self._raw_mode_failed = False

    def clear_screen(self) -> None:
        self.console.clear()

    def write(self, text: str) -> None:
        self.console.print(
            text, end="", markup=False, emoji=False, highlight=False, soft_wrap=True
        )

    def write_colored(self, text: str, color: str) -> None:
        self.console.print(
            text,
            end="",
            style=color,
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )

    @contextmanager
    def color_band(self, color: str) -> Iterator[None]:
        """Color all output written inside the block, including plain print()."""
        opening, closing = self._sgr_pair(color)
        self._write_raw(opening)
        try:
            yield
        finally:
            self._write_raw(closing)

    def _sgr_pair(self, color: str) -> tuple[str, str]:
        """Split a Rich style into its opening and reset escape sequences."""
        if self.console.color_system is None:
            return "", ""
        rendered = Style.parse(color).render("\0")
        opening, _, closing = rendered.partition("\0")
        return opening, closing

    def _write_raw(self, text: str) -> None:
        if text:
            self.console.file.write(text)
            self.console.file.flush()

    def read_line(self) -> str:
        if self.stream is None:
            return self.console.input()
        line = self.console.input(stream=self.stream)
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def read_token(self) -> str:
        # Blank lines are skipped; leftover tokens serve later reads.
        while not self._pending:
            self._pending.extend(self.read_line().split())
        return self._pending.popleft()

    def read_raw_char(self) -> str:
        if self.stream is not None or self._raw_mode_failed:
            return self._read_buffered_char()
        try:
            key = readchar.readchar()
        except Exception as e:
            self._raw_mode_failed = True
            logger.warning("Could not switch terminal to raw mode: %s", e)
            self.write_colored(
                f"Raw keyboard input unavailable ({e}); press Enter after each key.\n",
                current_palette().error,
            )
            return self._read_buffered_char()
        if not key:
            raise EOFError
        return key

    def _read_buffered_char(self) -> str:
        stream = self.stream or sys.stdin
        while True:
            key = stream.read(1)
            if not key:
                raise EOFError
            if key not in ("\r", "\n"):
                return key


# Terminal management for testability
# Tests can call set_terminal() to inject a scripted driver
_terminal_instance: TerminalDriver | None = None


def get_terminal() -> TerminalDriver:
    """Get the default terminal driver, creating one if needed."""
    global _terminal_instance
    if _terminal_instance is None:
        _terminal_instance = ConsoleTerminal()
    return _terminal_instance


def set_terminal(new_terminal: TerminalDriver | None) -> None:
    """Set the default terminal driver (for testing).

    Args:
        new_terminal: Driver to use, or None to reset to default.
    """
    global _terminal_instance
    _terminal_instance = new_terminal
