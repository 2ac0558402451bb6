"""Level files, the level room and the start-up room that loads textures."""

from __future__ import annotations

from enum import Enum, auto
from pathlib import Path
from typing import Callable, Dict, Iterable, List, NamedTuple, Optional, Tuple, Union

from sokoban.gameobject import GameObject
from sokoban.hero import Hero
from sokoban.input import Keyboard
from sokoban.room import Room
from sokoban.textures import TextureManager
from sokoban.tiles import Box, FloorDark, FloorLight, Goal, Wall
from sokoban.widgets import FadeIn

TILE_SIZE = 64.0

TEXTURE_FILES: Dict[str, str] = {
    "main_menu_background": "menu/GameMenu.png",
    "ExitBUtton": "menu/ExitBUtton.png",
    "LvlsBUtton": "menu/LvlsBUtton.png",
    "PlayBUtton": "menu/PlayBUtton.png",
    "ScoreBUtton": "menu/ScoreBUtton.png",
    "NumBUtton": "menu/NumBUtton.png",
    "LVLMenu": "menu/LVLMenu.png",
    "font": "font/2.png",
    "1x1black": "font/1x1black.png",
    "Hero": "Hero.png",
    "Goal": "Goal.png",
    "Box": "Box.png",
    "Wall": "Wall.png",
    "FloarB": "FloarBlack.png",
    "FloarL": "FloarLight.png",
    "Tileset": "Tileset.png",
    "hero_left": "hero_left.png",
    "hero_right": "hero_right.png",
    "hero_up": "hero_up.png",
    "hero_down": "hero_down.png",
}


class Piece(Enum):
    WALL = auto()
    FLOOR_LIGHT = auto()
    FLOOR_DARK = auto()
    BOX = auto()
    GOAL = auto()
    HERO = auto()


class Placement(NamedTuple):
    piece: Piece
    x: float
    y: float


_SYMBOLS: Dict[str, Tuple[Piece, ...]] = {
    "#": (Piece.WALL,),
    "B": (Piece.FLOOR_LIGHT, Piece.BOX),
    "G": (Piece.GOAL,),
    "P": (Piece.FLOOR_LIGHT, Piece.HERO),
    "1": (Piece.FLOOR_LIGHT,),
    "2": (Piece.FLOOR_DARK,),
}

_TILE_CLASSES: Dict[Piece, Callable[[float, float, TextureManager], GameObject]] = {
    Piece.WALL: Wall,
    Piece.FLOOR_LIGHT: FloorLight,
    Piece.FLOOR_DARK: FloorDark,
    Piece.BOX: Box,
    Piece.GOAL: Goal,
}


def parse_level(lines: Iterable[str]) -> List[Placement]:
    """Turn level rows into placements; unknown characters are empty cells."""
    return [
        Placement(piece, column * TILE_SIZE, row * TILE_SIZE)
        for row, line in enumerate(lines)
        for column, symbol in enumerate(line)
        for piece in _SYMBOLS.get(symbol, ())
    ]


def load_textures(
    textures: TextureManager, asset_dir: Union[str, Path] = "assets"
) -> TextureManager:
    """Register every texture the game uses from ``asset_dir``."""
    base = Path(asset_dir)
    for name, relative in TEXTURE_FILES.items():
        textures.add_texture(name, base / relative)
    return textures


class GameLevelRoom(Room):
    """A playable level built from a level file."""

    def __init__(
        self,
        filename: Union[str, Path],
        level_number: int,
        textures: TextureManager,
        keyboard: Keyboard,
        resolution: Tuple[int, int],
        on_victory: Optional[Callable[[int, int], None]] = None,
        on_escape: Optional[Callable[[], Optional[Room]]] = None,
        next_room: Optional[Callable[[], Room]] = None,
    ) -> None:
        super().__init__()
        self.level_number = level_number
        with open(filename, encoding="utf-8") as level_file:
            placements = parse_level(level_file)
        for piece, x, y in placements:
            if piece is Piece.HERO:
                hero = Hero(
                    x, y, level_number, textures, keyboard, on_victory, on_escape, next_room
                )
                hero.resolution = resolution
                self.instance_create(hero)
            else:
                self.instance_create(_TILE_CLASSES[piece](x, y, textures))
        self.instance_create(FadeIn(textures["1x1black"], resolution))


class GameInitRoom(Room):
    """Loads all textures, then moves on to the first real room."""

    def __init__(
        self,
        textures: TextureManager,
        asset_dir: Union[str, Path],
        first_room: Callable[[], Room],
    ) -> None:
        super().__init__()
        self.textures = load_textures(textures, asset_dir)
        self._first_room = first_room

    def step(self) -> None:
        self.change_room(self._first_room())