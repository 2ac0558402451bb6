import pygame
import pytest

from sokoban.gameobject import SolidObject
from sokoban.room import Room
from sokoban.textures import TextureManager
from sokoban.tiles import (
    Box,
    FloorDark,
    FloorLight,
    Goal,
    LevelMenuBackground,
    MainMenuBackground,
    Wall,
)

NAMES = ["Box", "Wall", "Goal", "FloarL", "FloarB", "main_menu_background", "LVLMenu"]


@pytest.fixture
def textures():
    manager = TextureManager()
    for name in NAMES:
        manager.add_surface(name, pygame.Surface((64, 64)))
    return manager


@pytest.mark.parametrize(
    "cls, name",
    [
        (Box, "Box"),
        (Wall, "Wall"),
        (Goal, "Goal"),
        (FloorLight, "FloarL"),
        (FloorDark, "FloarB"),
        (MainMenuBackground, "main_menu_background"),
        (LevelMenuBackground, "LVLMenu"),
    ],
)
def test_uses_named_texture_and_position(textures, cls, name):
    obj = cls(128, 64, textures)
    assert obj.texture is textures[name]
    assert (obj.x, obj.y) == (128.0, 64.0)


def test_depths_from_source(textures):
    assert Box(0, 0, textures).depth == 3
    assert Wall(0, 0, textures).depth == 0
    assert Goal(0, 0, textures).depth == 1
    assert FloorLight(0, 0, textures).depth == 0


def test_only_box_and_wall_are_solid(textures):
    room = Room()
    for cls in (Box, Wall, Goal, FloorLight, FloorDark):
        room.instance_create(cls(0, 0, textures))
    solids = room.objects_at(SolidObject, 10, 10)
    assert sorted(type(obj).__name__ for obj in solids) == ["Box", "Wall"]


def test_box_stops_when_alarm_fires(textures):
    box = Box(0, 0, textures)
    box.speed = 8
    box.set_alarm(0, 2)
    box.step()
    assert box.speed == 8
    box.step()
    assert box.speed == 0
    assert box.alarm(0) == -1
    resting = box.x
    box.step()
    assert box.x == resting


def test_missing_texture_raises():
    with pytest.raises(KeyError):
        Wall(0, 0, TextureManager())