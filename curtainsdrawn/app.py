"""Terminal front end: drawing the screen and the main input loop."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from blessed import Terminal

from .audio import AudioPlayer
from .commands import KeyCode, KeyEvent, process_input
from .gamestate import GameState
from .text import Color, Line, Style

STATUS_TEMPLATE = (
    "🧭 Status: Active | Battery: 87% | Employee ID: 00129072 | Connection Status: STRONG"
    " | FootPrint: None             Afton co. Animatronic Intefacing Terminal"
    " | scroll: {scroll} | time: {hours}:{seconds:02d} "
)
PANEL_TITLE = "Terminal"
INPUT_POLL = 0.01
STARTUP_ASSETS = ("welcome.txt", "home_menu.txt", "help.txt", "map.txt")

_SEQUENCES = {
    "KEY_ENTER": KeyCode.ENTER,
    "KEY_BACKSPACE": KeyCode.BACKSPACE,
    "KEY_DELETE": KeyCode.BACKSPACE,
    "KEY_ESCAPE": KeyCode.ESC,
    "KEY_UP": KeyCode.UP,
    "KEY_DOWN": KeyCode.DOWN,
}
_CONTROLS = {
    "\r": KeyCode.ENTER,
    "\n": KeyCode.ENTER,
    "\x7f": KeyCode.BACKSPACE,
    "\x08": KeyCode.BACKSPACE,
    "\x1b": KeyCode.ESC,
}
_COLOUR_NAMES = {
    Color.BLACK: "black",
    Color.RED: "red",
    Color.GREEN: "green",
    Color.YELLOW: "yellow",
    Color.BLUE: "blue",
    Color.CYAN: "cyan",
    Color.WHITE: "white",
    Color.LIGHT_RED: "bright_red",
    Color.LIGHT_BLUE: "bright_blue",
}

_background_tasks: set[asyncio.Task] = set()


def status_bar(game_state: GameState) -> str:
    """The text of the top status bar."""
    hours, seconds = game_state.time
    return STATUS_TEMPLATE.format(scroll=game_state.scroll, hours=hours, seconds=seconds)


def _prompt(game_state: GameState) -> Line:
    precursor = game_state.rooted.name if game_state.rooted is not None else ""
    return Line.styled(f"{precursor}> {game_state.input}", Style(fg=Color.YELLOW))


def visible_lines(game_state: GameState, height: int) -> list[Line]:
    """Lines shown in a log panel of the given height, borders included.

    Clamps the game's scroll position to what the log allows.
    """
    lines = [*game_state.logs, _prompt(game_state)]
    inner = max(0, height - 2)
    visible = inner - int(inner * 0.03)
    max_scroll = max(0, len(lines) - visible)
    game_state.scroll = min(game_state.scroll, max_scroll)
    offset = max(0, max_scroll - game_state.scroll - 1)
    return lines[offset : offset + inner]


def translate_key(keystroke) -> KeyEvent | None:
    """Turn a blessed keystroke into a key event; None when no key was pressed."""
    if keystroke.is_sequence:
        return KeyEvent(_SEQUENCES.get(keystroke.name, KeyCode.OTHER))
    text = str(keystroke)
    if not text:
        return None
    if text in _CONTROLS:
        return KeyEvent(_CONTROLS[text])
    if not text.isprintable():
        return KeyEvent(KeyCode.OTHER)
    return KeyEvent(KeyCode.CHAR, text)


def _colour(term: Terminal, colour: Color, background: bool) -> str:
    if colour is Color.RESET:
        return ""
    if colour.rgb is not None:
        return (term.on_color_rgb if background else term.color_rgb)(*colour.rgb)
    name = _COLOUR_NAMES[colour]
    return getattr(term, f"on_{name}" if background else name)


def _style(term: Terminal, style: Style) -> str:
    prefix = _colour(term, style.fg, False) + _colour(term, style.bg, True)
    return prefix + (term.bold if style.bold else "")


def _render_line(term: Terminal, line: Line | None, width: int) -> str:
    parts = []
    remaining = width
    for span in line.spans if line is not None else ():
        if remaining <= 0:
            break
        chunk = span.content[:remaining]
        remaining -= len(chunk)
        parts.append(_style(term, span.style) + chunk + term.normal)
    parts.append(" " * remaining)
    return "".join(parts)


def render(term: Terminal, game_state: GameState) -> str:
    """Build one full frame of the screen."""
    width, height = term.width, term.height
    inner_width = max(0, width - 2)
    panel_height = max(0, height - 1)

    bar = status_bar(game_state)[:width].ljust(width)
    parts = [term.move_xy(0, 0) + term.on_blue + term.white + bar + term.normal]

    rows = visible_lines(game_state, panel_height)
    if panel_height >= 1:
        title = PANEL_TITLE[:inner_width]
        parts.append(term.move_xy(0, 1) + "┌" + title + "─" * (inner_width - len(title)) + "┐")
    inner_height = max(0, panel_height - 2)
    padded = rows + [None] * (inner_height - len(rows))
    for y, line in enumerate(padded, start=2):
        parts.append(term.move_xy(0, y) + "│" + _render_line(term, line, inner_width) + "│")
    if panel_height >= 2:
        parts.append(term.move_xy(0, panel_height) + "└" + "─" * inner_width + "┘")
    return "".join(parts)


async def run(term: Terminal, game_state: GameState) -> None:
    """Read keys, advance the game and redraw until the game asks to exit."""
    while not game_state.exit:
        event = translate_key(term.inkey(timeout=INPUT_POLL))
        if event is not None:
            task = await process_input(game_state, event)
            if task is not None:
                _background_tasks.add(task)
                task.add_done_callback(_background_tasks.discard)
        game_state.update()
        term.stream.write(render(term, game_state))
        term.stream.flush()
        await asyncio.sleep(0)


async def _play(term: Terminal, game_state: GameState) -> None:
    boot = asyncio.get_running_loop().create_task(game_state.boot_sequence())
    try:
        await run(term, game_state)
    finally:
        boot.cancel()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="curtainsdrawn", description="A terminal horror game of rooting into animatronics."
    )
    parser.add_argument("--assets", type=Path, default=Path("assets"), help="asset directory")
    args = parser.parse_args(argv)

    game_state = GameState(assets_dir=args.assets)
    try:
        for name in STARTUP_ASSETS:
            game_state.read_asset(name)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    game_state.audio = AudioPlayer.from_mixer()
    term = Terminal()
    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        asyncio.run(_play(term, game_state))
    game_state.stop_all_sounds()
    return 0


if __name__ == "__main__":
    sys.exit(main())