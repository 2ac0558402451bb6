"""Base sprite object with motion, animation frames and countdown alarms."""

from __future__ import annotations

import math
from enum import Enum, auto
from typing import TYPE_CHECKING, List, Optional, Tuple, Type, TypeVar

import pygame

if TYPE_CHECKING:
    from sokoban.room import Room

ALARM_COUNT = 6
WHITE = (255, 255, 255, 255)

T = TypeVar("T", bound="GameObject")


class Direction(Enum):
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()


class GameObject:
    """A positioned, optionally animated sprite living in a room."""

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        texture: Optional[pygame.Surface] = None,
        horizontal_frames: int = 1,
        vertical_frames: int = 1,
    ) -> None:
        if horizontal_frames < 1 or vertical_frames < 1:
            raise ValueError("frame counts must be at least 1")
        self.texture = texture
        self.x = float(x)
        self.y = float(y)
        self.x_start = self.x
        self.y_start = self.y
        self.x_previous = self.x
        self.y_previous = self.y
        self.visible = True
        self.depth = 0.0
        self.x_speed = 0.0
        self.y_speed = 0.0
        self.horizontal_frames = horizontal_frames
        self.vertical_frames = vertical_frames
        self._image_index = 0.0
        self.image_speed = 0.0
        self.color: Tuple[int, ...] = WHITE
        self.scale: Tuple[float, float] = (1.0, 1.0)
        self.room: Optional["Room"] = None
        self._alarms: List[int] = [-1] * ALARM_COUNT

    # --- animation -------------------------------------------------------

    @property
    def frame_count(self) -> int:
        return self.horizontal_frames * self.vertical_frames

    @property
    def image_index(self) -> float:
        return self._image_index

    @image_index.setter
    def image_index(self, value: float) -> None:
        total = self.frame_count
        value = math.fmod(value, total)
        if value < 0:
            value += total
        self._image_index = value

    @property
    def sprite_width(self) -> int:
        if self.texture is None:
            return 0
        return self.texture.get_width() // self.horizontal_frames

    @property
    def sprite_height(self) -> int:
        if self.texture is None:
            return 0
        return self.texture.get_height() // self.vertical_frames

    # --- motion ----------------------------------------------------------

    @property
    def speed(self) -> float:
        return math.hypot(self.x_speed, self.y_speed)

    @speed.setter
    def speed(self, new_speed: float) -> None:
        old_speed = self.speed
        if old_speed != 0.0:
            factor = new_speed / old_speed
            self.x_speed *= factor
            self.y_speed *= factor
        else:
            self.x_speed = float(new_speed)

    def set_direction(self, direction: Direction) -> None:
        """Point the current speed along ``direction``."""
        speed = self.speed
        if direction is Direction.LEFT:
            self.x_speed, self.y_speed = -speed, 0.0
        elif direction is Direction.RIGHT:
            self.x_speed, self.y_speed = speed, 0.0
        elif direction is Direction.UP:
            self.x_speed, self.y_speed = 0.0, -speed
        elif direction is Direction.DOWN:
            self.x_speed, self.y_speed = 0.0, speed

    # --- alarms ----------------------------------------------------------

    def alarm(self, index: int) -> int:
        """Remaining steps of alarm ``index``; -1 when it is not running."""
        return self._alarms[index]

    def set_alarm(self, index: int, value: int) -> None:
        self._alarms[index] = value

    def on_alarm(self, index: int) -> None:
        """Called when alarm ``index`` counts down to zero."""

    # --- frame update ----------------------------------------------------

    def step(self) -> None:
        """Advance animation, move by the speed vector and tick the alarms."""
        self.image_index = self.image_index + self.image_speed
        self.x += self.x_speed
        self.y += self.y_speed
        for index, value in enumerate(self._alarms):
            if value < 0:
                continue
            value -= 1
            self._alarms[index] = value
            if value == 0:
                self.on_alarm(index)
                self._alarms[index] = -1

    def _frame_rect(self) -> pygame.Rect:
        width, height = self.sprite_width, self.sprite_height
        index = int(self.image_index)
        column = index % self.horizontal_frames
        row = index % self.vertical_frames
        return pygame.Rect(column * width, row * height, width, height)

    def _render_frame(self, frame: pygame.Surface) -> pygame.Surface:
        x_scale, y_scale = self.scale
        if (x_scale, y_scale) != (1.0, 1.0):
            size = (
                max(0, round(frame.get_width() * x_scale)),
                max(0, round(frame.get_height() * y_scale)),
            )
            frame = pygame.transform.scale(frame, size)
        color = tuple(self.color) + (255,) * (4 - len(self.color))
        if color != WHITE:
            tinted = pygame.Surface(frame.get_size(), pygame.SRCALPHA)
            tinted.blit(frame, (0, 0))
            tinted.fill(color, special_flags=pygame.BLEND_RGBA_MULT)
            frame = tinted
        return frame

    def draw(self, surface: pygame.Surface) -> None:
        """Blit the current animation frame onto ``surface``."""
        if not self.visible or self.texture is None:
            return
        if self.sprite_width == 0 or self.sprite_height == 0:
            return
        frame = self.texture.subsurface(self._frame_rect())
        surface.blit(self._render_frame(frame), (int(self.x), int(self.y)))

    # --- queries ---------------------------------------------------------

    def contains_point(self, x: float, y: float) -> bool:
        """Whether the point lies inside this object's sprite bounds."""
        return (
            self.x <= x < self.x + self.sprite_width
            and self.y <= y < self.y + self.sprite_height
        )

    def _require_room(self) -> "Room":
        if self.room is None:
            raise RuntimeError("object is not in a room")
        return self.room

    def objects_at(self, kind: Type[T], x: float, y: float) -> List[T]:
        """Objects of ``kind`` in this object's room covering the point."""
        return self._require_room().objects_at(kind, x, y)

    def objects_of_type(self, kind: Type[T]) -> List[T]:
        """All objects of ``kind`` in this object's room."""
        return self._require_room().objects_of_type(kind)


class SolidObject(GameObject):
    """An object that blocks movement."""