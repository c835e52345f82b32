"""Keystroke helpers for the direct-keystroke input strategy."""

from __future__ import annotations

import readchar


def digit_value(key: str) -> int:
    """Map a keystroke to the option index it selects.

    The first character's code is offset by the code of "0", so "0".."9"
    map to 0..9 and every other key lands outside any valid range.
    """
    return ord(key[0]) - ord("0")


def is_interrupt(key: str) -> bool:
    """Check if key is Ctrl+C (raw mode delivers it as a character)."""
    return key == readchar.key.CTRL_C
