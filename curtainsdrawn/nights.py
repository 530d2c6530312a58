"""Setting up the building and animatronics for each night."""

from __future__ import annotations

import asyncio

from .anim import AnimType
from .gamestate import GameState, Night
from .rooms import Room

MAIN_FLOOR = "mainFloor"

_ROOMS = (
    ("office", "X", 0, "&", True),
    ("utils", "0x3f5", 2, "*", False),
    (MAIN_FLOOR, "0x4a1", 4, "!", False),
    ("kitchen", "0x7b2", 3, "$", False),
    ("playplace", "0x2z2", 3, "#", False),
    ("entrance", "0x14e", 2, "-", False),
)

_CONNECTIONS = {
    "office": ("entrance", "utils"),
    "utils": ("office", MAIN_FLOOR),
    MAIN_FLOOR: ("utils", "kitchen", "playplace"),
    "playplace": (MAIN_FLOOR, "entrance", "utils"),
    "kitchen": (MAIN_FLOOR, "entrance"),
    "entrance": ("kitchen", "office", "playplace"),
}

_ANIMS = (
    (AnimType.FREDDY, "freddy", "284cx"),
    (AnimType.CHICA, "chica", "1231ss"),
    (AnimType.BONNIE, "bonnie", "la201"),
    (AnimType.FOXY, "foxy", "lmmm10"),
    (AnimType.PUPPET, "puppet", "balls12"),
)


def build_map(game_state: GameState) -> dict[str, Room]:
    """Create the building's rooms and connections and register them."""
    rooms = {
        name: Room(name, tag, dist, target, is_office)
        for name, tag, dist, target, is_office in _ROOMS
    }
    for room in rooms.values():
        game_state.add_room(room)
    for name, targets in _CONNECTIONS.items():
        for target in targets:
            rooms[name].add_connection(rooms[target])
    return rooms


def _populate(game_state: GameState, foxy_awareness: int) -> None:
    for anim_type, name, tag in _ANIMS:
        awareness = foxy_awareness if anim_type is AnimType.FOXY else 1
        game_state.add_anim(anim_type, name, tag, MAIN_FLOOR, 1, awareness)


def _begin(game_state: GameState) -> asyncio.Task:
    clock = game_state.start_clock()
    game_state.toggle_game_active()
    return clock


async def start_night1(game_state: GameState) -> asyncio.Task:
    """Set up the first night; returns the running clock task."""
    build_map(game_state)
    _populate(game_state, foxy_awareness=90)
    return _begin(game_state)


async def start_night2(game_state: GameState) -> asyncio.Task:
    """Set up the second night; returns the running clock task."""
    build_map(game_state)
    _populate(game_state, foxy_awareness=1)
    return _begin(game_state)


_NIGHT_STARTERS = {Night.FIRST: start_night1, Night.SECOND: start_night2}


async def start_game(game_state: GameState) -> asyncio.Task:
    """Start the game's current night; returns the running clock task."""
    game_state.reset_clock()
    starter = _NIGHT_STARTERS.get(game_state.night)
    if starter is None:
        raise ValueError(f"night {game_state.night} is not available")
    return await starter(game_state)