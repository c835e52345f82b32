"""Color palettes for simple_ui menus and prompts.

A Palette is a plain immutable table of Rich style strings. Menus read it
at render time, so swapping palettes never touches menu state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Palette:
    """Visual palette for menu rendering.

    All colors use Rich style format (e.g., "cyan", "bold magenta").

    Attributes:
        name: Palette identifier.
        primary: Color of the numbered option list.
        reserved: Color of the reserved Exit/Back entry.
        attention: Color band around the header when a title is shown.
        error: Color of "Invalid option." / "Invalid input." messages.
        input_marker: Text printed where the user types.
    """

    name: str
    primary: str = "cyan"
    reserved: str = "magenta"
    attention: str = "yellow"
    error: str = "red"
    input_marker: str = "> "


DEFAULT_PALETTE = Palette(name="classic")

PALETTES: MappingProxyType[str, Palette] = MappingProxyType(
    {
        "classic": DEFAULT_PALETTE,
        "ocean": Palette(
            name="ocean",
            primary="bright_cyan",
            reserved="blue",
            attention="bright_white",
            error="bright_red",
        ),
        "ember": Palette(
            name="ember",
            primary="yellow",
            reserved="red",
            attention="bright_yellow",
            error="bold red",
        ),
        "mono": Palette(
            name="mono",
            primary="default",
            reserved="bold",
            attention="italic",
            error="reverse",
        ),
    }
)

_current_palette: Palette = DEFAULT_PALETTE


def _normalize_palette_key(value: str) -> str:
    return value.strip().lower()


def get_palette(name: str | None) -> Palette:
    """Return the named palette, or the default one for unknown names."""
    if not name:
        return DEFAULT_PALETTE
    palette = PALETTES.get(_normalize_palette_key(name))
    if palette is None:
        logger.warning("Unknown palette %r, using %r", name, DEFAULT_PALETTE.name)
        return DEFAULT_PALETTE
    return palette


def set_palette(name: str | None) -> Palette:
    """Select the process-wide palette used by menus built without one."""
    global _current_palette
    _current_palette = get_palette(name)
    return _current_palette


def current_palette() -> Palette:
    return _current_palette
