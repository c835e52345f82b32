"""Renderers for menus and prompts.

Both share the heading (title line and optional header band) and differ
only in what follows it: a numbered option list or a bare input marker.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .registry import ActionRegistry
from .terminal import TerminalDriver
from .themes import Palette


@dataclass
class MenuState:
    """Mutable fields shared by a menu or prompt and its renderer.

    Attributes:
        title: Text printed above everything else (empty hides it).
        header: Optional callback run on every render for dynamic status.
        registry: Option labels and actions (None for prompts).
        last_option: Most recent valid option index (-1 before the first read).
        last_string: Most recent captured string token.
    """

    title: str = ""
    header: Callable[[], None] | None = None
    registry: ActionRegistry | None = None
    last_option: int = -1
    last_string: str = ""


class Renderer:
    """Base renderer: prints the title and the header band."""

    def render(self, state: MenuState, terminal: TerminalDriver, palette: Palette) -> None:
        self._render_heading(state, terminal, palette)
        self._render_body(state, terminal, palette)

    def _render_heading(
        self, state: MenuState, terminal: TerminalDriver, palette: Palette
    ) -> None:
        if state.title:
            terminal.write(f"{state.title}\n")
        if state.header is None:
            return
        if state.title:
            with terminal.color_band(palette.attention):
                state.header()
        else:
            state.header()
        terminal.write("\n")

    def _render_body(
        self, state: MenuState, terminal: TerminalDriver, palette: Palette
    ) -> None:
        raise NotImplementedError


class OptionListRenderer(Renderer):
    """Numbered option list with the reserved entry printed last."""

    def _render_body(
        self, state: MenuState, terminal: TerminalDriver, palette: Palette
    ) -> None:
        registry = state.registry
        if registry is None or len(registry) == 0:
            return
        for index, label in registry.numbered():
            color = palette.reserved if index == 0 else palette.primary
            terminal.write_colored(f"{index}. {label}\n", color)
        terminal.write(palette.input_marker)


class PromptRenderer(Renderer):
    """Heading followed by the input marker only."""

    def _render_body(
        self, state: MenuState, terminal: TerminalDriver, palette: Palette
    ) -> None:
        terminal.write(palette.input_marker)
