"""Ordered (label, action) storage behind every menu."""

from __future__ import annotations

from typing import Callable, Iterator

from .exceptions import MenuInvariantError

Action = Callable[[], None]


class ActionRegistry:
    """Index-aligned labels and zero-argument callbacks.

    Index 0 is the reserved Exit/Back entry, fixed at construction. Every
    later registration appends one label and one action, so the two lists
    always have the same length and indices never move.

    Args:
        reserved_label: Label of the index-0 entry ("Exit" or "Back").
        reserved_action: Callback run when index 0 is chosen.
    """

    def __init__(self, reserved_label: str, reserved_action: Action):
        self._labels: list[str] = [reserved_label]
        self._actions: list[Action] = [reserved_action]

    def __len__(self) -> int:
        return len(self._labels)

    def add(self, label: str, action: Action) -> int:
        """Append an entry and return its index."""
        self._labels.append(label)
        self._actions.append(action)
        return len(self._labels) - 1

    def label(self, index: int) -> str:
        if not 0 <= index < len(self._labels):
            raise IndexError(f"No option at index {index}")
        return self._labels[index]

    def action(self, index: int) -> Action:
        if not 0 <= index < len(self._actions):
            raise MenuInvariantError(index, len(self._actions))
        return self._actions[index]

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(self._labels)

    def numbered(self) -> Iterator[tuple[int, str]]:
        """Yield (index, label) in display order: 1..N-1, then 0."""
        for index in range(1, len(self._labels)):
            yield index, self._labels[index]
        yield 0, self._labels[0]
