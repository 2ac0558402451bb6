import pygame

from sokoban.gameobject import GameObject, SolidObject
from sokoban.room import Room


def make_texture(size=64):
    return pygame.Surface((size, size))


class Logged(GameObject):
    def __init__(self, name, log, depth=0.0):
        super().__init__(0, 0, make_texture())
        self.name = name
        self.log = log
        self.depth = depth

    def step(self):
        self.log.append(("step", self.name))

    def draw(self, surface):
        self.log.append(("draw", self.name))


def test_instance_create_adds_and_links_object():
    room = Room()
    obj = GameObject()
    returned = room.instance_create(obj)
    assert returned is obj
    assert obj.room is room
    assert room.objects == (obj,)
    assert len(room) == 1


def test_step_steps_objects_in_order():
    log = []
    room = Room()
    room.instance_create(Logged("a", log))
    room.instance_create(Logged("b", log))
    room.step()
    assert log == [("step", "a"), ("step", "b")]


def test_objects_created_during_step_are_stepped():
    log = []
    room = Room()

    class Spawner(GameObject):
        def step(self):
            log.append(("step", "spawner"))
            if len(self.room) == 1:
                self.room.instance_create(Logged("child", log))

    room.instance_create(Spawner())
    room.step()
    assert len(room) == 2
    assert room.objects[1].name == "child"
    assert log == [("step", "spawner"), ("step", "child")]


def test_draw_orders_by_depth_and_keeps_order():
    log = []
    room = Room()
    room.instance_create(Logged("top", log, depth=100))
    room.instance_create(Logged("floor", log, depth=0))
    room.instance_create(Logged("hero", log, depth=3))
    room.draw(pygame.Surface((8, 8)))
    assert [name for _, name in log] == ["floor", "hero", "top"]
    assert [obj.depth for obj in room.objects] == sorted(obj.depth for obj in room.objects)


def test_objects_at_filters_type_and_point():
    room = Room()
    floor = room.instance_create(GameObject(64, 0, make_texture()))
    wall = room.instance_create(SolidObject(64, 0, make_texture()))
    room.instance_create(SolidObject(0, 0, make_texture()))
    assert room.objects_at(SolidObject, 64, 0) == [wall]
    assert room.objects_at(GameObject, 64, 0) == [floor, wall]
    assert room.objects_at(SolidObject, 200, 200) == []


def test_objects_of_type():
    room = Room()
    a = room.instance_create(SolidObject())
    room.instance_create(GameObject())
    b = room.instance_create(SolidObject())
    assert room.objects_of_type(SolidObject) == [a, b]
    assert len(room.objects_of_type(GameObject)) == len(room)


def test_change_room_keeps_first_request():
    room = Room()
    first, second = Room(), Room()
    assert room.pending_room is None
    room.change_room(first)
    room.change_room(second)
    assert room.pending_room is first