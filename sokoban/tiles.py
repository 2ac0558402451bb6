"""Level pieces and menu backgrounds."""

from __future__ import annotations

from sokoban.gameobject import GameObject, SolidObject
from sokoban.textures import TextureManager


class Box(SolidObject):
    """A pushable crate; it stops when any of its alarms fires."""

    def __init__(self, x: float, y: float, textures: TextureManager) -> None:
        super().__init__(x, y, textures["Box"])
        self.depth = 3

    def on_alarm(self, index: int) -> None:
        self.speed = 0


class Wall(SolidObject):
    """An impassable wall tile."""

    def __init__(self, x: float, y: float, textures: TextureManager) -> None:
        super().__init__(x, y, textures["Wall"])
        self.depth = 0


class Goal(GameObject):
    """A target square that a box must cover."""

    def __init__(self, x: float, y: float, textures: TextureManager) -> None:
        super().__init__(x, y, textures["Goal"])
        self.depth = 1


class FloorLight(GameObject):
    """Light floor tile."""

    def __init__(self, x: float, y: float, textures: TextureManager) -> None:
        super().__init__(x, y, textures["FloarL"])


class FloorDark(GameObject):
    """Dark floor tile."""

    def __init__(self, x: float, y: float, textures: TextureManager) -> None:
        super().__init__(x, y, textures["FloarB"])


class MainMenuBackground(GameObject):
    """Main menu backdrop."""

    def __init__(self, x: float, y: float, textures: TextureManager) -> None:
        super().__init__(x, y, textures["main_menu_background"])


class LevelMenuBackground(GameObject):
    """Level selection backdrop."""

    def __init__(self, x: float, y: float, textures: TextureManager) -> None:
        super().__init__(x, y, textures["LVLMenu"])