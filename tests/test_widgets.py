import pygame
import pytest

from sokoban.input import Mouse
from sokoban.room import Room
from sokoban.widgets import OVERLAY_DEPTH, Button, FadeIn, FadeOutAndChangeRoom


class PointerState:
    def __init__(self):
        self.buttons = [False, False, False]
        self.pos = (0, 0)


@pytest.fixture
def pointer():
    return PointerState()


@pytest.fixture
def mouse(pointer):
    return Mouse(lambda: list(pointer.buttons), lambda: pointer.pos)


def make_button(mouse, clicks):
    texture = pygame.Surface((20, 10))
    return Button(100, 50, texture, lambda: clicks.append(1), mouse)


def test_button_outside_shows_first_frame(pointer, mouse):
    clicks = []
    button = make_button(mouse, clicks)
    pointer.pos = (0, 0)
    pointer.buttons[0] = True
    mouse.update()
    button.step()
    assert button.image_index == 0
    assert clicks == []


def test_button_hover_highlights_without_click(pointer, mouse):
    clicks = []
    button = make_button(mouse, clicks)
    pointer.pos = (105, 55)
    mouse.update()
    button.step()
    assert button.image_index == 1
    assert clicks == []


def test_button_click_fires_callback_once(pointer, mouse):
    clicks = []
    button = make_button(mouse, clicks)
    pointer.pos = (105, 55)
    pointer.buttons[0] = True
    mouse.update()
    button.step()
    assert clicks == [1]
    mouse.update()
    button.step()
    assert clicks == [1]


def test_fade_in_goes_to_transparent():
    fade = FadeIn(pygame.Surface((1, 1)), (64, 32))
    assert fade.depth == OVERLAY_DEPTH
    assert fade.scale == (64.0, 32.0)
    alphas = [fade.alpha]
    for _ in range(80):
        fade.step()
        alphas.append(fade.alpha)
    assert alphas == sorted(alphas, reverse=True)
    assert alphas[-1] == 0
    assert min(alphas) >= 0


def test_fade_out_requests_room_change_when_opaque():
    room = Room()
    target = Room()
    fade = room.instance_create(FadeOutAndChangeRoom(target, pygame.Surface((1, 1)), (8, 8)))
    assert fade.alpha == 0
    for _ in range(200):
        before = fade.alpha
        fade.step()
        if room.pending_room is not None:
            break
        assert fade.alpha > before
    assert room.pending_room is target
    assert fade.alpha > 253


def test_fade_out_without_room_fails_on_change():
    fade = FadeOutAndChangeRoom(Room(), pygame.Surface((1, 1)), (8, 8))
    with pytest.raises(RuntimeError):
        for _ in range(200):
            fade.step()