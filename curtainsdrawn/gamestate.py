"""Game state: the log, the clock, the map and the animatronics on it."""

from __future__ import annotations

import asyncio
import random
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .anim import Anim, AnimType
from .audio import AudioError, AudioPlayer
from .rooms import Room
from .text import Color, Line, Span, Style, styled_line

NIGHT_HOURS = 6
SECONDS_PER_HOUR = 60
NIGHT_TEXT_DELAY = 0.01
BOOT_START_DELAY_MS = 120

WELCOME = "welcome.txt"
HOME_MENU = "home_menu.txt"
BOOT_SOUND = "sound/pc-start-63725(1).wav"
AMBIENCE_SOUND = "sound/fnaf1-ambience.wav"
VICTORY_SOUND = "sound/victory.wav"
ALARM_SOUND = "sound/night_finish_alarm.wav"
NIGHT_START_SOUND = "sound/night_start.wav"

REPLACEMENT_COLOURS = (
    Color.RED,
    Color.LIGHT_BLUE,
    Color.YELLOW,
    Color.BROWN,
    Color.WHITE,
    Color.RED,
)

_background_tasks: set[asyncio.Task] = set()


class Night(Enum):
    FIRST = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4
    FIFTH = 5

    def __str__(self) -> str:
        return self.name.capitalize()


NIGHT_TEXTS = {Night.FIRST: "night1.txt", Night.SECOND: "night2.txt"}


def _next_night(night: Night) -> Night:
    try:
        return Night(night.value + 1)
    except ValueError:
        return night


def _spawn(coro) -> asyncio.Task:
    task = asyncio.get_running_loop().create_task(coro)
    _background_tasks.add(task)
    task.add_done_callback(_background_tasks.discard)
    return task


@dataclass(eq=False)
class GameState:
    """Everything the running game knows about itself."""

    logs: list[Line] = field(default_factory=list)
    input: str = ""
    scroll_offset: int = 0
    scroll: int = 0
    scroll_speed: int = 3
    anims: list[Anim] = field(default_factory=list)
    exit: bool = False
    room_list: list[Room] = field(default_factory=list)
    night: Night = Night.FIRST
    audio: AudioPlayer = field(default_factory=AudioPlayer)
    game_start: bool = False
    time: tuple[int, int] = (0, 0)
    end_night: bool = False
    rooted: Anim | None = None
    assets_dir: Path = Path("assets")
    rng: random.Random = field(default_factory=random.Random, repr=False)
    clock_interval: float = 1.0

    # --- map and animatronics -------------------------------------------

    def add_room(self, room: Room) -> GameState:
        self.room_list.append(room)
        return self

    def add_anim(
        self,
        anim_type: AnimType,
        name: str,
        tag: str,
        start_location: str,
        aggression: int,
        awareness: int,
    ) -> GameState:
        """Create an animatronic in the room named start_location."""
        anim = Anim(anim_type, name, tag, start_location, aggression, awareness, rng=self.rng)
        for room in self.room_list:
            if room.name == start_location:
                room.add_anim(anim)
                self.anims.append(anim)
                return self
        raise ValueError(f"no room named {start_location!r} for {name}")

    # --- log ----------------------------------------------------------------

    def add_log(self, content: str, fg: Color, bg: Color) -> None:
        self.logs.append(styled_line(content, fg, bg))
        self.scroll = 0

    def add_line(self, line: Line) -> None:
        self.logs.append(line)

    def pop_log(self) -> None:
        if self.logs:
            self.logs.pop()

    def clear_logs(self) -> None:
        self.logs = []
        self.input = ""

    def read_asset(self, name: str) -> str:
        return (self.assets_dir / name).read_text(encoding="utf-8")

    def styled_replacements(self, text: str) -> Line:
        """Colour a map line, swapping each room's placeholder for its markers."""
        replacements = [room.map_replacement() for room in self.room_list]
        spans: list[Span] = []
        i = 0
        while i < len(text):
            for pattern, replacement in replacements:
                if pattern and text.startswith(pattern, i):
                    spans.extend(
                        Span(ch, Style(fg=_replacement_colour(j), bold=True))
                        for j, ch in enumerate(replacement)
                    )
                    i += len(pattern)
                    break
            else:
                spans.append(Span(text[i], Style(fg=Color.GREEN)))
                i += 1
        return Line(spans)

    async def night_start_text(self) -> None:
        self.play_sound(NIGHT_START_SOUND, True)
        asset = NIGHT_TEXTS.get(self.night)
        text = self.read_asset(asset) if asset else "bleh :p"
        for line in text.splitlines():
            self.add_log(line, Color.GREEN, Color.RESET)
            await asyncio.sleep(NIGHT_TEXT_DELAY)

    async def boot_sequence(self) -> None:
        """Show the welcome screen followed by the home menu."""
        await self._boot(self.read_asset(WELCOME), self.read_asset(HOME_MENU))

    async def _boot(self, welcome: str, menu: str) -> None:
        self.play_sound(BOOT_SOUND, False)
        delay, factor = BOOT_START_DELAY_MS, 1
        for line in welcome.splitlines():
            self.add_log(line, Color.GREEN, Color.RESET)
            await asyncio.sleep(delay / 1000)
            if delay > 2:
                delay = max(0, delay - factor)
                factor += 1
        self.clear_logs()
        for line in menu.splitlines():
            self.add_log(line, Color.GREEN, Color.BLACK)
        self.scroll = 0
        self.add_log(f"type continue to continue night {self.night}", Color.GREEN, Color.RESET)
        self.play_sound(AMBIENCE_SOUND, True)

    # --- audio --------------------------------------------------------------

    def play_sound(self, src: str, looping: bool) -> bool:
        """Play an asset sound; returns whether it could be started."""
        try:
            self.audio.play(self.assets_dir / src, looping)
        except (OSError, AudioError):
            return False
        return True

    def stop_all_sounds(self) -> None:
        self.audio.stop_all()

    # --- clock and night lifecycle -------------------------------------------

    def toggle_game_active(self) -> None:
        self.game_start = not self.game_start

    def reset_clock(self) -> None:
        self.time = (0, 0)

    def tick(self) -> bool:
        """Advance the clock one second; True once the night is over."""
        hours, seconds = self.time
        seconds += 1
        if seconds >= SECONDS_PER_HOUR:
            seconds -= SECONDS_PER_HOUR
            hours += 1
        self.time = (hours, seconds)
        if hours >= NIGHT_HOURS:
            return True
        for anim in self.anims:
            anim.cooldown = max(0, anim.cooldown - 1)
            if anim.cooldown == 0:
                anim.can_move = True
        return False

    def start_clock(self) -> asyncio.Task:
        """Reset the clock and run it in the background."""
        self.reset_clock()
        return _spawn(self._run_clock())

    async def _run_clock(self) -> None:
        while True:
            await asyncio.sleep(self.clock_interval)
            if self.exit:
                return
            if self.tick():
                self.night_exit_win()
                return

    def cleanup_night(self) -> None:
        self.game_start = False
        self.room_list = []
        self.anims = []

    def night_exit_win(self) -> asyncio.Task:
        """End the night as survived; returns the task showing the victory screens."""
        self.stop_all_sounds()
        welcome = self.read_asset(WELCOME)
        menu = self.read_asset(HOME_MENU)
        task = _spawn(self._victory(welcome, menu))
        self.play_sound(ALARM_SOUND, False)
        self.cleanup_night()
        return task

    async def _victory(self, welcome: str, menu: str) -> None:
        await self._boot(welcome, menu)
        self.play_sound(VICTORY_SOUND, False)
        self.add_log(f"{self.night} COMPLETED !", Color.CYAN, Color.LIGHT_RED)
        self.night = _next_night(self.night)

    # --- per-frame logic -----------------------------------------------------

    def update(self) -> None:
        if self.game_start:
            self.move_anims()

    def move_anims(self) -> None:
        for anim in self.anims:
            if anim.can_move:
                anim.move()
                anim.can_move = False
                anim.cooldown = anim.move_delay


def _replacement_colour(index: int) -> Color:
    if index < len(REPLACEMENT_COLOURS):
        return REPLACEMENT_COLOURS[index]
    return Color.RESET