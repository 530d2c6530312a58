import pytest

from curtainsdrawn.anim import Anim, AnimType
from curtainsdrawn.rooms import Room


def make_anim(anim_type=AnimType.BONNIE, name="bonnie"):
    return Anim(anim_type, name, "la201", "mainFloor", 1, 1)


def build_map():
    office = Room("office", "X", 0, "&", True)
    utils = Room("utils", "0x3f5", 2, "*")
    main_floor = Room("mainFloor", "0x4a1", 4, "!")
    kitchen = Room("kitchen", "0x7b2", 3, "$")
    play = Room("playplace", "0x2z2", 3, "#")
    entrance = Room("entrance", "0x14e", 2, "-")
    office.add_connection(entrance).add_connection(utils)
    utils.add_connection(office).add_connection(main_floor)
    main_floor.add_connection(utils).add_connection(kitchen).add_connection(play)
    play.add_connection(main_floor).add_connection(entrance).add_connection(utils)
    kitchen.add_connection(main_floor).add_connection(entrance)
    entrance.add_connection(kitchen).add_connection(office).add_connection(play)
    return [office, utils, main_floor, kitchen, play, entrance]


def test_add_connection_chains():
    a = Room("a", "A", 0, "a")
    b = Room("b", "B", 0, "b")
    c = Room("c", "C", 0, "c")
    assert a.add_connection(b).add_connection(c) is a
    assert a.connections == [b, c]
    assert b.connections == []


def test_add_anim_sets_location():
    room = Room("a", "A", 0, "a")
    anim = make_anim()
    assert room.add_anim(anim) is room
    assert anim.location is room
    assert room.anims == [anim]


def test_remove_anim_removes_all_of_type():
    room = Room("a", "A", 0, "a")
    first = make_anim(AnimType.CHICA, "chica")
    second = make_anim(AnimType.CHICA, "chica2")
    other = make_anim(AnimType.FREDDY, "freddy")
    room.add_anim(first).add_anim(other).add_anim(second)
    room.remove_anim(AnimType.CHICA)
    assert room.anims == [other]


def test_set_dist_start_is_zero_and_edges_consistent():
    rooms = build_map()
    office = rooms[0]
    for room in rooms:
        room.dist_to_office = 99
    office.set_dist()
    assert office.dist_to_office == 0
    for room in rooms:
        for conn in room.connections:
            assert conn.dist_to_office <= room.dist_to_office + 1


def test_set_dist_chain():
    a = Room("a", "A", 9, "a")
    b = Room("b", "B", 9, "b")
    c = Room("c", "C", 9, "c")
    a.add_connection(b)
    b.add_connection(c)
    a.set_dist()
    assert [a.dist_to_office, b.dist_to_office, c.dist_to_office] == [0, 1, 2]


def test_set_dist_leaves_unreachable_rooms():
    a = Room("a", "A", 5, "a")
    lonely = Room("z", "Z", 7, "z")
    lonely.add_connection(a)
    a.set_dist()
    assert lonely.dist_to_office == 7


def test_map_replacement_empty_room():
    room = Room("office", "X", 0, "&", True)
    target, marker = room.map_replacement()
    assert target == "&" * 6
    assert marker == " " * 6


def test_map_replacement_marks_anims():
    room = Room("a", "A", 0, "!")
    room.add_anim(make_anim(AnimType.BONNIE)).add_anim(make_anim(AnimType.FOXY, "foxy"))
    _, marker = room.map_replacement()
    assert len(marker) == 6
    assert marker[int(AnimType.BONNIE)] == "·"
    assert marker[int(AnimType.FOXY)] == "·"
    assert marker[int(AnimType.CHICA)] == " "


def test_map_replacement_warning():
    room = Room("a", "A", 0, "!")
    room.warning = True
    _, marker = room.map_replacement()
    assert marker.startswith("⚠")


def test_target_must_be_single_char():
    with pytest.raises(ValueError):
        Room("a", "A", 0, "ab")


def test_intercom_reaches_anims():
    room = Room("a", "A", 0, "!")
    room.add_anim(make_anim(AnimType.FREDDY, "freddy"))
    assert room.intercom() == ["freddy"]