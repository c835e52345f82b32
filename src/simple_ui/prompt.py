"""String prompts with optional validation."""

from __future__ import annotations

from typing import Callable

from .readers import LineReader
from .render import MenuState, PromptRenderer
from .terminal import TerminalDriver, get_terminal
from .themes import Palette, current_palette

Validator = Callable[[str], bool]

INVALID_INPUT = "Invalid input.\n"


def _accept_all(_text: str) -> bool:
    return True


class Prompt:
    """Ask for one token of text until the validator accepts it.

    The validator sees the raw token exactly as typed; any length or
    format rule belongs to the validator.

    Args:
        prompt: Question printed above the input marker.
        validator: Predicate deciding whether a token is acceptable.
        terminal: Terminal driver (defaults to the shared one).
        palette: Color palette (follows the active palette when omitted).

    Example:
        name = Prompt("Name (max 16 chars)", max_length(16)).get()
    """

    def __init__(
        self,
        prompt: str,
        validator: Validator | None = None,
        *,
        terminal: TerminalDriver | None = None,
        palette: Palette | None = None,
    ):
        self.terminal = terminal or get_terminal()
        self._palette = palette
        self._is_valid = validator or _accept_all
        self._state = MenuState(title=prompt)
        self._renderer = PromptRenderer()
        self._reader = LineReader(self.terminal)

    @property
    def palette(self) -> Palette:
        return self._palette or current_palette()

    def header(self, header: Callable[[], None] | None) -> Prompt:
        self._state.header = header
        return self

    def title(self, prompt: str) -> Prompt:
        self._state.title = prompt
        return self

    def _read(self) -> str:
        self._renderer.render(self._state, self.terminal, self.palette)
        text = self._reader.read_string()
        self._state.last_string = text
        return text

    def get(self) -> str:
        """Return the first token the validator accepts."""
        self.terminal.clear_screen()
        text = self._read()
        while not self._is_valid(text):
            self.terminal.write_colored(INVALID_INPUT, self.palette.error)
            text = self._read()
        self.terminal.clear_screen()
        return text


def max_length(limit: int) -> Validator:
    """Accept tokens of at most limit characters."""

    def _check(text: str) -> bool:
        return len(text) <= limit

    return _check


def non_empty(text: str) -> bool:
    return bool(text)


def one_of(*choices: str, case_sensitive: bool = False) -> Validator:
    """Accept only the given tokens."""
    if case_sensitive:
        allowed = set(choices)
        return lambda text: text in allowed
    allowed = {choice.lower() for choice in choices}
    return lambda text: text.lower() in allowed
