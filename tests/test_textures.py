import pygame
import pytest

from sokoban.textures import TextureManager


def test_add_surface_then_get_returns_it():
    manager = TextureManager()
    surface = pygame.Surface((8, 4))
    manager.add_surface("wall", surface)
    assert manager.get("wall") is surface
    assert manager["wall"] is surface
    assert "wall" in manager


def test_get_unknown_name_is_none():
    manager = TextureManager()
    assert manager.get("missing") is None
    with pytest.raises(KeyError):
        manager["missing"]


def test_first_registration_wins():
    manager = TextureManager()
    first = pygame.Surface((2, 2))
    second = pygame.Surface((3, 3))
    manager.add_surface("box", first)
    returned = manager.add_surface("box", second)
    assert returned is first
    assert manager.get("box") is first
    assert len(manager) == 1


def test_add_texture_loads_image_file(tmp_path):
    source = pygame.Surface((6, 5))
    source.fill((10, 200, 30))
    path = tmp_path / "goal.bmp"
    pygame.image.save(source, str(path))

    manager = TextureManager()
    loaded = manager.add_texture("goal", path)
    assert loaded.get_size() == (6, 5)
    assert manager.get("goal").get_at((0, 0))[:3] == (10, 200, 30)


def test_add_texture_missing_file_raises(tmp_path):
    manager = TextureManager()
    with pytest.raises(FileNotFoundError):
        manager.add_texture("hero", tmp_path / "nope.png")
    assert "hero" not in manager