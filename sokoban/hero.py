"""The player character: grid movement, box pushing and the victory check."""

from __future__ import annotations

from typing import Callable, NamedTuple, Optional, Tuple

import pygame

from sokoban.font import BitmapFont
from sokoban.game import DEFAULT_RESOLUTION
from sokoban.gameobject import WHITE, Direction, GameObject, SolidObject
from sokoban.input import Keyboard
from sokoban.room import Room
from sokoban.textures import TextureManager
from sokoban.tiles import Box, Goal
from sokoban.widgets import FadeOutAndChangeRoom

GREEN = (0, 255, 0, 255)
WALK_SPEED = 8.0
PUSH_SPEED = 4.0
BOX_SPEED = 8.0
WALK_STEPS = 8
PUSH_STEPS = 16
BOX_STEPS = 8
WALK_ANIMATION_SPEED = 0.175
VICTORY_DELAY = 60
MOVE_ALARM = 0
VICTORY_ALARM = 1


class _Move(NamedTuple):
    direction: Direction
    arrow_key: int
    letter_key: int
    offset: Tuple[int, int]
    texture: str


_MOVES = (
    _Move(Direction.RIGHT, pygame.K_RIGHT, pygame.K_d, (1, 0), "hero_right"),
    _Move(Direction.LEFT, pygame.K_LEFT, pygame.K_a, (-1, 0), "hero_left"),
    _Move(Direction.UP, pygame.K_UP, pygame.K_w, (0, -1), "hero_up"),
    _Move(Direction.DOWN, pygame.K_DOWN, pygame.K_s, (0, 1), "hero_down"),
)


class Hero(GameObject):
    """The pusher. Counts completed moves and reports when every goal holds a box.

    ``on_victory`` receives the level number and the step count, ``on_escape``
    returns the room to switch to when Escape is held (or None to stay), and
    ``next_room`` builds the room faded to after a won level.
    """

    def __init__(
        self,
        x: float,
        y: float,
        level_number: int,
        textures: TextureManager,
        keyboard: Keyboard,
        on_victory: Optional[Callable[[int, int], None]] = None,
        on_escape: Optional[Callable[[], Optional[Room]]] = None,
        next_room: Optional[Callable[[], Room]] = None,
    ) -> None:
        super().__init__(x, y, textures["hero_down"], 2, 1)
        self.depth = 3
        self.steps = 0
        self.level_number = level_number
        self.won_game = False
        self.textures = textures
        self.keyboard = keyboard
        self.on_victory = on_victory
        self.on_escape = on_escape
        self.next_room = next_room
        self.resolution: Tuple[int, int] = DEFAULT_RESOLUTION
        self._font = BitmapFont(textures.get("font"))

    def step(self) -> None:
        super().step()
        if self.won_game:
            return
        if self.keyboard.is_down(pygame.K_ESCAPE) and self.on_escape is not None:
            room = self.on_escape()
            if room is not None:
                self._require_room().change_room(room)
        for move in _MOVES:
            self._try_move(move)

    def _wants(self, move: _Move) -> bool:
        # The arrow keys ignore the move alarm; only the letter keys wait for it.
        return self.keyboard.is_down(move.arrow_key) or (
            self.keyboard.is_down(move.letter_key) and self.alarm(MOVE_ALARM) < 0
        )

    def _try_move(self, move: _Move) -> None:
        if not self._wants(move):
            return
        dx, dy = move.offset
        width, height = self.sprite_width, self.sprite_height
        ahead = (self.x + dx * width, self.y + dy * height)
        if not self.objects_at(SolidObject, *ahead):
            self._start(move, WALK_SPEED, WALK_STEPS)
            return
        boxes = self.objects_at(Box, *ahead)
        if len(boxes) != 1:
            return
        beyond = (self.x + 2 * dx * width, self.y + 2 * dy * height)
        if self.objects_at(SolidObject, *beyond):
            return
        box = boxes[0]
        if move.direction is Direction.UP:
            box.image_speed = WALK_ANIMATION_SPEED
        box.speed = BOX_SPEED
        box.set_direction(move.direction)
        box.set_alarm(MOVE_ALARM, BOX_STEPS)
        self._start(move, PUSH_SPEED, PUSH_STEPS)

    def _start(self, move: _Move, speed: float, steps: int) -> None:
        self.image_speed = WALK_ANIMATION_SPEED
        self.speed = speed
        self.set_direction(move.direction)
        self.set_alarm(MOVE_ALARM, steps)
        self.texture = self.textures[move.texture]

    def _all_goals_covered(self) -> bool:
        return all(
            len(self.objects_at(Box, goal.x, goal.y)) == 1
            for goal in self.objects_of_type(Goal)
        )

    def on_alarm(self, index: int) -> None:
        if index == MOVE_ALARM:
            self.image_speed = 0.0
            self.speed = 0.0
            self.steps += 1
            victory = self._all_goals_covered()
            self.won_game |= victory
            if victory and self.alarm(VICTORY_ALARM) < 0:
                self.set_alarm(VICTORY_ALARM, VICTORY_DELAY)
                if self.on_victory is not None:
                    self.on_victory(self.level_number, self.steps)
        if index == VICTORY_ALARM and self.next_room is not None:
            fade = FadeOutAndChangeRoom(
                self.next_room(), self.textures["1x1black"], self.resolution
            )
            self._require_room().instance_create(fade)

    def draw(self, surface: pygame.Surface) -> None:
        self._font.draw_text(surface, 5, 5, f"STEPS {self.steps}", GREEN)
        super().draw(surface)
        if self.won_game:
            self._font.draw_text(surface, 350, 75, "Level Complete!", WHITE, 3, 3)