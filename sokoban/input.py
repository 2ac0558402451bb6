"""Keyboard and mouse state with press/release edge detection."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any, Optional, Tuple, Union

import pygame

Snapshot = Union[Mapping[Any, bool], Sequence[bool]]


def _is_set(snapshot: Optional[Snapshot], key: Any) -> bool:
    """Return whether ``key`` is held in ``snapshot``; unknown keys count as released."""
    if snapshot is None:
        return False
    try:
        return bool(snapshot[key])
    except (KeyError, IndexError):
        return False


class _EdgeTracker:
    """Keeps the current and previous snapshot returned by a polling function."""

    def __init__(self, poll: Callable[[], Snapshot]) -> None:
        self._poll = poll
        self._current: Optional[Snapshot] = None
        self._previous: Optional[Snapshot] = None
        self._sample()

    def _sample(self) -> None:
        self._previous = self._current
        self._current = self._poll()

    def _states(self, key: Any) -> Tuple[bool, bool]:
        return _is_set(self._current, key), _is_set(self._previous, key)


class Keyboard(_EdgeTracker):
    """Keyboard state sampled once per update."""

    def __init__(self, poll: Optional[Callable[[], Snapshot]] = None) -> None:
        super().__init__(poll if poll is not None else pygame.key.get_pressed)

    def update(self) -> None:
        """Take a new snapshot; the old one becomes the previous state."""
        self._sample()

    def is_up(self, key: Any) -> bool:
        """Released now and in the previous update."""
        current, previous = self._states(key)
        return not current and not previous

    def is_pressed(self, key: Any) -> bool:
        """Went down during the last update."""
        current, previous = self._states(key)
        return current and not previous

    def is_down(self, key: Any) -> bool:
        """Held now and in the previous update."""
        current, previous = self._states(key)
        return current and previous

    def is_released(self, key: Any) -> bool:
        """Went up during the last update."""
        current, previous = self._states(key)
        return not current and previous


class Mouse(_EdgeTracker):
    """Mouse button state sampled once per update, plus the pointer position."""

    def __init__(
        self,
        poll_buttons: Optional[Callable[[], Snapshot]] = None,
        poll_position: Optional[Callable[[], Tuple[int, int]]] = None,
    ) -> None:
        self._poll_position = poll_position if poll_position is not None else pygame.mouse.get_pos
        if poll_buttons is None:
            poll_buttons = pygame.mouse.get_pressed
        super().__init__(poll_buttons)

    def update(self) -> None:
        """Take a new button snapshot; the old one becomes the previous state."""
        self._sample()

    def position(self) -> Tuple[int, int]:
        """Current pointer position in window coordinates."""
        x, y = self._poll_position()
        return x, y

    def is_up(self, button: Any) -> bool:
        """Released now and in the previous update."""
        current, previous = self._states(button)
        return not current and not previous

    def is_pressed(self, button: Any) -> bool:
        """Went down during the last update."""
        current, previous = self._states(button)
        return current and not previous

    def is_down(self, button: Any) -> bool:
        """Held now and in the previous update."""
        current, previous = self._states(button)
        return current and previous

    def is_released(self, button: Any) -> bool:
        """Went up during the last update."""
        current, previous = self._states(button)
        return not current and previous