"""Numbered terminal menus and prompts.

A small toolkit for interactive console programs: numbered option lists
with a reserved Exit/Back entry, nested submenus, single-keystroke menus,
and validated text prompts.

Example:
    from simple_ui import Menu, Prompt, SubMenu, max_length

    names = []
    ask = Prompt("Name?", max_length(16))
    people = SubMenu("People").option("Add", lambda: names.append(ask.get()))
    Menu("Main").submenu("People", people).run()
"""

import logging

from .exceptions import ConfigurationError, MenuInvariantError, SimpleUIError
from .menu import BaseMenu, Menu, QuickMenu, Runnable, SubMenu, SubQuickMenu
from .prompt import Prompt, max_length, non_empty, one_of
from .terminal import ConsoleTerminal, TerminalDriver, get_terminal, set_terminal
from .themes import DEFAULT_PALETTE, PALETTES, Palette, current_palette, set_palette

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Menus
    "BaseMenu",
    "Menu",
    "SubMenu",
    "QuickMenu",
    "SubQuickMenu",
    "Runnable",
    # Prompts
    "Prompt",
    "max_length",
    "non_empty",
    "one_of",
    # Terminal
    "TerminalDriver",
    "ConsoleTerminal",
    "get_terminal",
    "set_terminal",
    # Theming
    "Palette",
    "PALETTES",
    "DEFAULT_PALETTE",
    "current_palette",
    "set_palette",
    # Errors
    "SimpleUIError",
    "MenuInvariantError",
    "ConfigurationError",
]
