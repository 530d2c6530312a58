"""Keyboard input handling for the home screen and during a night."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum, auto

from .gamestate import GameState, Night
from .nights import start_game
from .text import Color

HELP = "help.txt"
MAP = "map.txt"
LORE = "blah blah blah probably some lore"
MAP_ARGS_ERROR = '[ERROR] too many arguments the command "map" takes zero extra arguments'

_PLAYABLE_NIGHTS = (Night.FIRST, Night.SECOND)
_background_tasks: set[asyncio.Task] = set()


class KeyCode(Enum):
    CHAR = auto()
    BACKSPACE = auto()
    ENTER = auto()
    ESC = auto()
    UP = auto()
    DOWN = auto()
    OTHER = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A key press; char holds the typed character for KeyCode.CHAR."""

    code: KeyCode
    char: str = ""


def _spawn(coro) -> asyncio.Task:
    task = asyncio.get_running_loop().create_task(coro)
    _background_tasks.add(task)
    task.add_done_callback(_background_tasks.discard)
    return task


def _edit(game_state: GameState, key: KeyEvent) -> None:
    """Handle every key other than Enter: typing, deleting and scrolling."""
    if key.code is KeyCode.CHAR:
        game_state.input += key.char
    elif key.code is KeyCode.BACKSPACE:
        game_state.input = game_state.input[:-1]
    elif key.code is KeyCode.UP:
        if game_state.scroll < len(game_state.logs):
            game_state.scroll += 1
    elif key.code is KeyCode.DOWN:
        if game_state.scroll > 0:
            game_state.scroll -= 1


def _echo(game_state: GameState, precursor: str, output: str, fg: Color, bg: Color) -> None:
    """Log the entered command and its output, then clear the input line."""
    game_state.add_log(f"{precursor}> {game_state.input} ", fg, bg)
    for line in output.splitlines():
        game_state.add_log(line, fg, bg)
        game_state.scroll = 0
    game_state.input = ""


async def process_input(game_state: GameState, key: KeyEvent) -> asyncio.Task | None:
    """Dispatch a key press; returns any background task it started."""
    if not game_state.game_start:
        return await process_input_home(game_state, key)
    if game_state.night in _PLAYABLE_NIGHTS:
        return await process_input_night(game_state, key)
    raise ValueError(f"night {game_state.night} is not available")


async def process_input_home(game_state: GameState, key: KeyEvent) -> asyncio.Task | None:
    """Handle a key press on the home screen."""
    if key.code is not KeyCode.ENTER:
        _edit(game_state, key)
        return None

    commands = game_state.input.split()
    if not commands:
        return None

    fg, bg = Color.WHITE, Color.RESET
    output = ""
    task = None
    command = commands[0]
    if command == "clear":
        game_state.clear_logs()
        return None
    if command == "help":
        fg = Color.GREEN
        output = game_state.read_asset(HELP)
    elif command == "map":
        fg = Color.GREEN
        game_state.scroll = 0
        output = game_state.read_asset(MAP)
    elif command in ("exit-game", "quit-game"):
        game_state.exit = True
    elif command == "start":
        game_state.clear_logs()
        await game_state.night_start_text()
        task = _spawn(start_game(game_state))
    else:
        bg = Color.RED
        output = f"unknown command: {game_state.input}"

    if game_state.input == "exit":
        game_state.exit = True

    _echo(game_state, "", output, fg, bg)
    return task


async def process_input_night(game_state: GameState, key: KeyEvent) -> asyncio.Task | None:
    """Handle a key press while a night is running."""
    if key.code is not KeyCode.ENTER:
        _edit(game_state, key)
        return None

    entered = game_state.input.lower()
    commands = entered.split()
    if not commands:
        return None

    if game_state.rooted is not None:
        return await game_state.rooted.execute(game_state, commands)

    fg, bg = Color.WHITE, Color.RESET
    output = ""
    command = commands[0]
    if command == "error-logs":
        output = LORE
    elif command == "ping-near":
        fg, bg = Color.GREEN, Color.RESET
        output = "pinging near ···"
    elif command in ("clear", "continue"):
        game_state.logs = []
        game_state.input = ""
    elif command == "help":
        fg = Color.GREEN
        output = game_state.read_asset(HELP)
    elif command == "anims":
        for anim in list(game_state.anims):
            game_state.add_log(
                f"{anim.name} {anim.cooldown} | {anim.move_delay}   \\ {str(anim.can_move).lower()}",
                Color.WHITE,
                Color.RED,
            )
        output = "ran anims"
    elif command == "map":
        if len(commands) > 1:
            game_state.add_log(f"> {entered} ", Color.WHITE, Color.RED)
            game_state.add_log(MAP_ARGS_ERROR, Color.WHITE, Color.RED)
            game_state.input = ""
            return None
        map_text = game_state.read_asset(MAP)
        game_state.scroll = 0
        typed, game_state.input = game_state.input, ""
        game_state.add_log(f"> {typed} ", Color.GREEN, bg)
        for line in map_text.splitlines():
            game_state.add_line(game_state.styled_replacements(line))
            await asyncio.sleep(0)
        return None
    elif command == "root":
        game_state.rooted = None
        if len(commands) < 2:
            output = "you need to specfiy the animatronic to root into"
        else:
            target = commands[1]
            anim = next((a for a in game_state.anims if a.name == target), None)
            if anim is not None:
                task = await anim.root_into(game_state)
                game_state.clear_logs()
                return task
            output = "no anim was found"
    elif command == "intercom":
        if len(commands) > 1:
            for room in game_state.room_list:
                room.intercom()
            output = "successfully intercomed"
        else:
            output = "already intercom"
    else:
        bg = Color.RED
        output = f"unknown command: {game_state.input}"

    if game_state.input == "exit-game":
        game_state.exit = True

    precursor = game_state.rooted.name if game_state.rooted is not None else ""
    _echo(game_state, precursor, output, fg, bg)
    return None