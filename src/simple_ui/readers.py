"""Input reader strategies.

LineReader reads whitespace-delimited tokens from buffered input.
KeystrokeReader reads single unechoed keystrokes. Both keep asking until
the value is a registered option index, so callers only ever see valid
indices.
"""

from __future__ import annotations

import logging

from .keys import digit_value, is_interrupt
from .terminal import TerminalDriver
from .themes import Palette

logger = logging.getLogger(__name__)

INVALID_OPTION = "Invalid option.\n"

# Keystrokes map to a single digit.
MAX_KEYSTROKE_OPTIONS = 10


def is_valid_index(value: int | None, count: int) -> bool:
    """Check that value selects one of count registered options."""
    return value is not None and 0 <= value < count


def _parse_index(token: str) -> int | None:
    try:
        return int(token)
    except ValueError:
        return None


class LineReader:
    """Line-buffered strategy: type a number, then Enter."""

    def __init__(self, terminal: TerminalDriver):
        self.terminal = terminal

    def read_option(self, count: int, palette: Palette) -> int:
        """Read tokens until one parses to an index in [0, count)."""
        option = _parse_index(self.terminal.read_token())
        while not is_valid_index(option, count):
            self.terminal.write_colored(INVALID_OPTION, palette.error)
            self.terminal.write(palette.input_marker)
            option = _parse_index(self.terminal.read_token())
        self.terminal.write("\n")
        return option

    def read_string(self) -> str:
        """Read one raw token, untouched."""
        token = self.terminal.read_token()
        self.terminal.write("\n")
        return token


class KeystrokeReader:
    """Direct-keystroke strategy: one digit key, no Enter, no echo."""

    def __init__(self, terminal: TerminalDriver):
        self.terminal = terminal
        self._warned_capacity = False

    def _read_key(self) -> int:
        key = self.terminal.read_raw_char()
        if is_interrupt(key):
            raise KeyboardInterrupt
        return digit_value(key)

    def read_option(self, count: int, palette: Palette) -> int:
        """Read keystrokes until one maps to an index in [0, count)."""
        if count > MAX_KEYSTROKE_OPTIONS and not self._warned_capacity:
            self._warned_capacity = True
            logger.warning(
                "Keystroke menu has %d options; only 0-%d are selectable",
                count,
                MAX_KEYSTROKE_OPTIONS - 1,
            )
        option = self._read_key()
        while not is_valid_index(option, count):
            self.terminal.write_colored(INVALID_OPTION, palette.error)
            option = self._read_key()
        self.terminal.write("\n")
        return option
