"""A room: the collection of objects making up one screen of the game."""

from __future__ import annotations

from typing import List, Optional, Tuple, Type, TypeVar

import pygame

from sokoban.gameobject import GameObject

T = TypeVar("T", bound=GameObject)


class Room:
    """Holds game objects, steps and draws them, and records room change requests."""

    def __init__(self) -> None:
        self._objects: List[GameObject] = []
        self.pending_room: Optional["Room"] = None

    @property
    def objects(self) -> Tuple[GameObject, ...]:
        return tuple(self._objects)

    def __len__(self) -> int:
        return len(self._objects)

    def step(self) -> None:
        """Step every object, including ones created during this step."""
        for obj in self._objects:
            obj.step()

    def draw(self, surface: pygame.Surface) -> None:
        """Draw objects in ascending depth order."""
        self._objects.sort(key=lambda obj: obj.depth)
        for obj in self._objects:
            obj.draw(surface)

    def instance_create(self, obj: T) -> T:
        """Add ``obj`` to the room and return it."""
        obj.room = self
        self._objects.append(obj)
        return obj

    def change_room(self, next_room: "Room") -> None:
        """Request a switch to ``next_room``; only the first request is kept."""
        if self.pending_room is None:
            self.pending_room = next_room

    def objects_at(self, kind: Type[T], x: float, y: float) -> List[T]:
        """Objects of ``kind`` whose sprite bounds contain the point."""
        return [
            obj for obj in self._objects if isinstance(obj, kind) and obj.contains_point(x, y)
        ]

    def objects_of_type(self, kind: Type[T]) -> List[T]:
        """All objects of ``kind``, in room order."""
        return [obj for obj in self._objects if isinstance(obj, kind)]