"""Named texture store."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Union

import pygame


class TextureManager:
    """Maps texture names to loaded surfaces; the first registration of a name wins."""

    def __init__(self) -> None:
        self._textures: Dict[str, pygame.Surface] = {}

    def add_texture(self, name: str, filename: Union[str, Path]) -> pygame.Surface:
        """Load an image file and register it under ``name``."""
        path = Path(filename)
        if not path.is_file():
            raise FileNotFoundError(f"texture file not found: {path}")
        surface = pygame.image.load(str(path))
        return self.add_surface(name, surface)

    def add_surface(self, name: str, surface: pygame.Surface) -> pygame.Surface:
        """Register an existing surface under ``name``; returns the registered one."""
        return self._textures.setdefault(name, surface)

    def get(self, name: str) -> Optional[pygame.Surface]:
        """Return the texture called ``name``, or None when unknown."""
        return self._textures.get(name)

    def __getitem__(self, name: str) -> pygame.Surface:
        return self._textures[name]

    def __contains__(self, name: object) -> bool:
        return name in self._textures

    def __len__(self) -> int:
        return len(self._textures)