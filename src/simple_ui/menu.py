"""Numbered terminal menus.

This module provides the menu engine and its four variants:
- Menu: top-level menu read with typed numbers (Enter to confirm)
- QuickMenu: top-level menu read with single keystrokes
- SubMenu / SubQuickMenu: "Back" menus entered only from a parent

Example:
    from simple_ui import Menu, SubMenu

    settings = SubMenu("Settings").option("Reset", reset)
    menu = (
        Menu("Main")
        .option("Say hi", lambda: print("hi"))
        .submenu("Settings", settings)
    )
    menu.run()
"""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from .readers import KeystrokeReader, LineReader
from .registry import ActionRegistry
from .render import MenuState, OptionListRenderer
from .terminal import TerminalDriver, get_terminal
from .themes import Palette, current_palette

logger = logging.getLogger(__name__)


class Runnable(Protocol):
    """A menu that can be run on its own."""

    def run(self) -> None: ...


class BaseMenu:
    """Shared menu engine: registration, rendering, reading and dispatch.

    Subclasses pick the reserved label and the input strategy. The run
    loop itself lives in _run(); only top-level variants expose it as
    run(), sub-variants are entered through a parent's submenu().

    Args:
        prompt: Title printed above the options (empty hides it).
        terminal: Terminal driver (defaults to the shared one).
        palette: Color palette (follows the active palette when omitted).
    """

    _reserved_label = "Exit"
    _reader_class: type[LineReader] | type[KeystrokeReader] = LineReader

    def __init__(
        self,
        prompt: str = "",
        *,
        terminal: TerminalDriver | None = None,
        palette: Palette | None = None,
    ):
        self.terminal = terminal or get_terminal()
        self._palette = palette
        self._state = MenuState(
            title=prompt,
            registry=ActionRegistry(self._reserved_label, self.terminal.clear_screen),
        )
        self._renderer = OptionListRenderer()
        self._reader = self._reader_class(self.terminal)

    @property
    def palette(self) -> Palette:
        """The palette given at construction, else the active one."""
        return self._palette or current_palette()

    @property
    def options(self) -> tuple[str, ...]:
        """Option labels in index order (index 0 is Exit/Back)."""
        return self._state.registry.labels

    def option(self, label: str, action: Callable[[], None]) -> BaseMenu:
        """Register an option at the next index. Returns self for chaining."""
        self._state.registry.add(label, action)
        return self

    def submenu(self, label: str, submenu: BaseMenu) -> BaseMenu:
        """Register an option that enters another menu's loop.

        The child's Back entry returns control to this menu's loop.
        """
        return self.option(label, submenu._run)

    def header(self, header: Callable[[], None] | None) -> BaseMenu:
        """Set the callback run on every render (replaces any previous one)."""
        self._state.header = header
        return self

    def title(self, prompt: str) -> BaseMenu:
        self._state.title = prompt
        return self

    def get_title(self, i: int) -> str:
        return self._state.registry.label(i)

    def get_option(self) -> int:
        """Read a valid option index from the user and remember it."""
        option = self._reader.read_option(len(self._state.registry), self.palette)
        self._state.last_option = option
        return option

    def recall_option(self) -> int:
        return self._state.last_option

    def get_string(self) -> str:
        """Render, then read one whitespace-delimited token and remember it."""
        self._render()
        text = LineReader(self.terminal).read_string()
        self._state.last_string = text
        return text

    def recall_string(self) -> str:
        return self._state.last_string

    def _render(self) -> None:
        self._renderer.render(self._state, self.terminal, self.palette)

    def _dispatch(self, option: int) -> None:
        self._state.registry.action(option)()

    def _run(self) -> None:
        self.terminal.clear_screen()
        self._render()
        option = -1
        while option != 0:
            option = self.get_option()
            logger.debug("%s: selected %d", type(self).__name__, option)
            self.terminal.clear_screen()
            self._dispatch(option)
            if option != 0:
                self._render()


class Menu(BaseMenu):
    """Top-level menu. Accepts typed numbers as input."""

    def run(self) -> None:
        """Show the menu and dispatch choices until Exit (0) is chosen."""
        self._run()


class SubMenu(BaseMenu):
    """Menu that must be run by a parent Menu or SubMenu."""

    _reserved_label = "Back"


class QuickMenu(BaseMenu):
    """Top-level menu that reads single keystrokes (options 0-9)."""

    _reader_class = KeystrokeReader

    def run(self) -> None:
        """Show the menu and dispatch keystrokes until Exit (0) is pressed."""
        self._run()


class SubQuickMenu(BaseMenu):
    """Keystroke menu that must be run by a parent menu."""

    _reserved_label = "Back"
    _reader_class = KeystrokeReader
