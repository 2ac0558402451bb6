"""Bitmap font drawn from a 16 by 16 grid of glyphs."""

from __future__ import annotations

from typing import Sequence

import pygame

from sokoban.gameobject import WHITE, GameObject

GRID = 16


class BitmapFont(GameObject):
    """Draws text with one glyph per character code from a tiled texture."""

    def __init__(self, texture: pygame.Surface) -> None:
        super().__init__(1, 1, texture, GRID, GRID)

    def _glyph_rect(self) -> pygame.Rect:
        index = int(self.image_index)
        column = index % self.vertical_frames
        row = index // self.horizontal_frames
        width, height = self.sprite_width, self.sprite_height
        return pygame.Rect(column * width, row * height, width, height)

    def draw_text(
        self,
        surface: pygame.Surface,
        x: int,
        y: int,
        text: str,
        tint: Sequence[int] = WHITE,
        x_scale: float = 1.0,
        y_scale: float = 1.0,
    ) -> float:
        """Draw ``text`` with its top-left corner at (x, y); returns the x after it."""
        self.scale = (float(x_scale), float(y_scale))
        self.color = tuple(tint)
        self.x = float(x)
        self.y = float(y)
        if self.texture is None:
            return self.x
        for char in text:
            self.image_index = float(ord(char))
            frame = self.texture.subsurface(self._glyph_rect())
            surface.blit(self._render_frame(frame), (int(self.x), int(self.y)))
            self.x += x_scale * self.sprite_width
        return self.x