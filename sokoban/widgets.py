"""Interface objects: a clickable button and full-screen fades."""

from __future__ import annotations

from typing import Callable, Tuple

import pygame

from sokoban.gameobject import GameObject
from sokoban.input import Mouse
from sokoban.room import Room

BUTTON_LEFT = 0
OVERLAY_DEPTH = 100
FADE_STEP = 5


class Button(GameObject):
    """Two-frame sprite that highlights under the pointer and fires on click."""

    def __init__(
        self,
        x: float,
        y: float,
        texture: pygame.Surface,
        callback: Callable[[], None],
        mouse: Mouse,
    ) -> None:
        super().__init__(x, y, texture, 2, 1)
        self.image_speed = 60.0
        self.callback = callback
        self.mouse = mouse

    def step(self) -> None:
        mouse_x, mouse_y = self.mouse.position()
        self.image_index = 0
        if self.contains_point(mouse_x, mouse_y):
            self.image_index = 1
            if self.mouse.is_pressed(BUTTON_LEFT):
                self.callback()


def _with_alpha(color: Tuple[int, ...], alpha: int) -> Tuple[int, ...]:
    rgb = tuple(color[:3]) + (255,) * (3 - len(color[:3]))
    return rgb + (alpha,)


class _Overlay(GameObject):
    def __init__(self, texture: pygame.Surface, resolution: Tuple[int, int]) -> None:
        super().__init__(0, 0, texture, 1, 1)
        width, height = resolution
        self.scale = (float(width), float(height))
        self.depth = OVERLAY_DEPTH

    @property
    def alpha(self) -> int:
        return self.color[3] if len(self.color) > 3 else 255

    @alpha.setter
    def alpha(self, value: int) -> None:
        self.color = _with_alpha(self.color, value)


class FadeIn(_Overlay):
    """Full-screen overlay that fades from opaque to transparent."""

    def __init__(self, texture: pygame.Surface, resolution: Tuple[int, int]) -> None:
        super().__init__(texture, resolution)
        self.alpha = 255

    def step(self) -> None:
        alpha = self.alpha
        self.alpha = alpha - FADE_STEP if alpha > 2 else 0


class FadeOutAndChangeRoom(_Overlay):
    """Full-screen overlay that fades in, then asks its room to switch."""

    def __init__(
        self, next_room: Room, texture: pygame.Surface, resolution: Tuple[int, int]
    ) -> None:
        super().__init__(texture, resolution)
        self.next_room = next_room
        self.alpha = 0

    def step(self) -> None:
        alpha = (self.alpha + FADE_STEP) % 256
        if alpha > 253:
            self._require_room().change_room(self.next_room)
        self.alpha = alpha