import asyncio
import contextlib
import random

import pytest

from curtainsdrawn.anim import AnimType
from curtainsdrawn.gamestate import GameState, Night
from curtainsdrawn.nights import MAIN_FLOOR, build_map, start_game, start_night1, start_night2


async def stop(task):
    task.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await task


@pytest.fixture
def state(tmp_path):
    return GameState(assets_dir=tmp_path, rng=random.Random(1))


def test_build_map_rooms(state):
    rooms = build_map(state)
    assert [r.name for r in state.room_list] == [
        "office", "utils", "mainFloor", "kitchen", "playplace", "entrance",
    ]
    assert rooms["office"].is_office is True
    assert rooms["mainFloor"].dist_to_office == 4
    assert rooms["utils"].tag == "0x3f5"


def test_build_map_connections(state):
    rooms = build_map(state)
    assert [r.name for r in rooms["office"].connections] == ["entrance", "utils"]
    assert [r.name for r in rooms["entrance"].connections] == ["kitchen", "office", "playplace"]
    for room in rooms.values():
        assert room not in room.connections


def test_targets_are_distinct(state):
    rooms = build_map(state)
    targets = [r.target for r in rooms.values()]
    assert len(set(targets)) == len(targets)


@pytest.mark.asyncio
async def test_start_night1(state):
    clock = await start_night1(state)
    try:
        assert state.game_start is True
        assert {a.anim_type for a in state.anims} == set(AnimType)
        assert all(a.location.name == MAIN_FLOOR for a in state.anims)
        foxy = next(a for a in state.anims if a.name == "foxy")
        assert foxy.awareness == 90
    finally:
        await stop(clock)


@pytest.mark.asyncio
async def test_start_night2(state):
    clock = await start_night2(state)
    try:
        assert [a.awareness for a in state.anims] == [1, 1, 1, 1, 1]
        assert [a.tag for a in state.anims] == ["284cx", "1231ss", "la201", "lmmm10", "balls12"]
    finally:
        await stop(clock)


@pytest.mark.asyncio
async def test_start_game_resets_clock(state):
    state.time = (2, 2)
    state.night = Night.SECOND
    clock = await start_game(state)
    try:
        assert state.time == (0, 0)
        assert len(state.room_list) == 6
    finally:
        await stop(clock)


@pytest.mark.asyncio
async def test_start_game_unknown_night(state):
    state.night = Night.THIRD
    with pytest.raises(ValueError):
        await start_game(state)
    assert state.room_list == []
    assert state.game_start is False