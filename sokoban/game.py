"""Main loop: the window, fixed-rate stepping and switching between rooms."""

from __future__ import annotations

import time
from typing import Optional, Tuple

import pygame

from sokoban.input import Keyboard, Mouse
from sokoban.room import Room

DEFAULT_FPS = 60.0
DEFAULT_RESOLUTION: Tuple[int, int] = (1280, 768)
DEFAULT_TITLE = "Sokoban"
BACKGROUND = (0, 0, 0)


class Game:
    """Owns the window and the current room, and drives them at a fixed rate."""

    def __init__(
        self,
        initial_room: Room,
        keyboard: Optional[Keyboard] = None,
        mouse: Optional[Mouse] = None,
    ) -> None:
        self._fps = DEFAULT_FPS
        self._title = DEFAULT_TITLE
        pygame.display.init()
        self._window = pygame.display.set_mode(DEFAULT_RESOLUTION)
        pygame.display.set_caption(self._title)
        self.is_open = True
        self.keyboard = keyboard if keyboard is not None else Keyboard()
        self.mouse = mouse if mouse is not None else Mouse()
        self.current_room = initial_room
        self.next_room: Optional[Room] = None

    # --- settings --------------------------------------------------------

    @property
    def fps(self) -> float:
        return self._fps

    @fps.setter
    def fps(self, value: float) -> None:
        if value <= 0:
            raise ValueError("fps must be positive")
        self._fps = float(value)

    @property
    def time_per_frame(self) -> float:
        """Seconds of real time consumed by one game step."""
        return 2.0 / self._fps

    @property
    def window(self) -> pygame.Surface:
        return self._window

    @property
    def window_resolution(self) -> Tuple[int, int]:
        width, height = self._window.get_size()
        return width, height

    def set_window_resolution(self, width: int, height: int) -> None:
        """Recreate the window with a new size."""
        if width <= 0 or height <= 0:
            raise ValueError("window size must be positive")
        self._window = pygame.display.set_mode((int(width), int(height)))
        pygame.display.set_caption(self._title)

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, text: str) -> None:
        self._title = text
        pygame.display.set_caption(text)

    # --- loop ------------------------------------------------------------

    def process_events(self) -> None:
        """Drain the event queue; a close request closes the window."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.is_open = False

    def draw(self) -> None:
        """Clear the window, draw the current room and present the frame."""
        self._window.fill(BACKGROUND)
        self.current_room.draw(self._window)
        pygame.display.flip()

    def step(self) -> None:
        """Step the current room and pick up any room change it asked for."""
        self.current_room.step()
        pending = self.current_room.pending_room
        if pending is not None:
            self.current_room.pending_room = None
            self.change_room(pending)

    def change_room(self, new_room: Room) -> None:
        """Schedule ``new_room``; only the first request before a switch is kept."""
        if self.next_room is None:
            self.next_room = new_room

    def _switch_room(self) -> None:
        if self.next_room is not None:
            self.current_room = self.next_room
            self.next_room = None

    def run(self) -> None:
        """Run until the window is closed."""
        last = time.perf_counter()
        lag = 0.0
        while self.is_open:
            now = time.perf_counter()
            lag += now - last
            last = now
            self.process_events()
            while lag > self.time_per_frame:
                self.keyboard.update()
                self.mouse.update()
                lag -= self.time_per_frame
                self.step()
                self.process_events()
            self.draw()
            self._switch_room()

    def quit(self) -> None:
        """Leave the program immediately."""
        raise SystemExit(0)