"""Animatronics: movement through the building and rooted commands."""

from __future__ import annotations

import asyncio
import random
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Any

from .text import Color

if TYPE_CHECKING:
    from .rooms import Room

PROGRESS_STEPS = 20
ROOT_STEP_MS = 10
STATUS_STEP_MS = 25
AWARENESS_GAIN = 5
ERROR_SOUND = "sound/error.wav"
ROOTED_HELP = "rooted_help.txt"

_background_tasks: set[asyncio.Task] = set()


class AnimType(IntEnum):
    """Animatronic kinds; the value is the marker column on the map."""

    BONNIE = 1
    CHICA = 2
    FREDDY = 3
    PUPPET = 4
    FOXY = 5


class TravelMethod(Enum):
    SHORTEST = 1
    MOST_EMPTY = 2
    NONE = 3


_MOVE_DELAYS = {
    AnimType.BONNIE: 30,
    AnimType.CHICA: 30,
    AnimType.FREDDY: 25,
    AnimType.FOXY: 60,
    AnimType.PUPPET: 70,
}

_TRAVEL_METHODS = {
    AnimType.BONNIE: TravelMethod.SHORTEST,
    AnimType.CHICA: TravelMethod.SHORTEST,
    AnimType.FREDDY: TravelMethod.MOST_EMPTY,
    AnimType.FOXY: TravelMethod.NONE,
    AnimType.PUPPET: TravelMethod.NONE,
}


def default_move_delay(anim_type: AnimType) -> int:
    """Seconds an animatronic of this kind waits between moves."""
    return _MOVE_DELAYS[anim_type]


def _spawn(coro) -> asyncio.Task:
    task = asyncio.get_running_loop().create_task(coro)
    _background_tasks.add(task)
    task.add_done_callback(_background_tasks.discard)
    return task


async def _progress_bar(game_state: Any, label: str, step_ms: int) -> None:
    for i in range(PROGRESS_STEPS + 1):
        if i:
            game_state.pop_log()
        bar = "█" * i + " " * (PROGRESS_STEPS - i)
        game_state.add_log(f"{label} [{bar}]", Color.GREEN, Color.RESET)
        await asyncio.sleep(step_ms / 1000)


def _error_colour(awareness: int) -> Color:
    if awareness >= 50:
        return Color.RED
    if awareness >= 25:
        return Color.YELLOW
    return Color.GREEN


@dataclass(eq=False)
class Anim:
    """An animatronic roaming the building."""

    anim_type: AnimType
    name: str
    tag: str
    start_location: str
    aggression: int
    awareness: int
    rng: random.Random = field(default_factory=random.Random, repr=False)
    location: Room | None = field(default=None, repr=False)
    status: str = "idle"
    hidden: bool = False
    move_delay: int = field(init=False, default=0)
    cooldown: int = field(init=False, default=0)
    is_cooling_down: bool = False
    can_move: bool = False
    executing: bool = False

    def __post_init__(self) -> None:
        self.move_delay = default_move_delay(self.anim_type)
        self.cooldown = self.move_delay

    def travel_method(self) -> TravelMethod:
        return _TRAVEL_METHODS[self.anim_type]

    def roll(self, chance_percent: float) -> bool:
        """True with the given percentage chance."""
        return self.rng.random() * 100.0 < chance_percent

    def start_cooldown(self) -> None:
        self.cooldown = self.move_delay

    def move(self) -> Room | None:
        """Move to a neighbouring room if allowed; returns the new room."""
        if not self.can_move:
            if not self.is_cooling_down:
                self.start_cooldown()
            return None
        if self.location is None:
            raise RuntimeError(f"{self.name} has no location")

        origin = self.location
        method = self.travel_method()
        if method is TravelMethod.SHORTEST:
            candidates = [r for r in origin.connections if r.dist_to_office <= origin.dist_to_office]
        elif method is TravelMethod.MOST_EMPTY:
            candidates = [r for r in origin.connections if len(r.anims) <= 1]
        else:
            candidates = []
        if not candidates:
            return None

        destination = self.rng.choice(candidates)
        destination.add_anim(self)
        origin.remove_anim(self.anim_type)
        self.location = destination
        self.can_move = False
        self.start_cooldown()
        return destination

    async def root_into(self, game_state: Any) -> asyncio.Task | None:
        """Start rooting into this animatronic in the background.

        Returns the running task, or None if a command is already executing.
        """
        if self.executing:
            return None
        self.executing = True
        return _spawn(self._root(game_state))

    async def _root(self, game_state: Any) -> None:
        awareness = self.awareness
        try:
            success = self.roll(100 - awareness)
            await _progress_bar(game_state, "Rooting", ROOT_STEP_MS + awareness)
        finally:
            self.executing = False
        if success:
            self.awareness += AWARENESS_GAIN
            game_state.rooted = self
            game_state.add_log(
                f"[SUCCESS] rooted into {self.name} {self.tag}", Color.WHITE, Color.GREEN
            )
            return
        game_state.add_log(
            f"[ERROR] Failed to root into {self.name} {self.tag}", Color.BLACK, Color.RED
        )
        game_state.play_sound(ERROR_SOUND, False)

    async def execute(self, game_state: Any, args: list[str]) -> asyncio.Task | None:
        """Run a command typed while rooted into this animatronic.

        Returns the background task started by long-running commands.
        """
        if self.executing:
            game_state.add_log(
                "Already executing a command please wait...", Color.WHITE, Color.GREEN
            )
            return None

        self.executing = True
        task = None
        try:
            command = args[0] if args else None
            if command == "unroot":
                game_state.rooted = None
                game_state.add_log("unrooted successful", Color.WHITE, Color.GREEN)
            elif command == "clear":
                game_state.clear_logs()
            elif command == "status":
                task = _spawn(self._status(game_state))
            elif command == "help":
                for line in game_state.read_asset(ROOTED_HELP).splitlines():
                    game_state.add_log(line, Color.GREEN, Color.RESET)
            elif command is not None:
                game_state.add_log(f"unknown command {command}", Color.WHITE, Color.RED)
            game_state.input = ""
        finally:
            self.executing = False
        return task

    async def _status(self, game_state: Any) -> None:
        awareness = self.awareness
        await _progress_bar(game_state, "Retreueveubg status", STATUS_STEP_MS + awareness)
        self.awareness += AWARENESS_GAIN
        game_state.rooted = self
        game_state.add_log(
            f"[SUCCESS] Retrieved Status of {self.name} {self.tag}", Color.WHITE, Color.GREEN
        )
        colour = _error_colour(awareness)
        for _ in range(2):
            game_state.add_log(f"internal errors:  {self.name} {self.tag}", Color.WHITE, colour)