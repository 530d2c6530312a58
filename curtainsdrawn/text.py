"""Styled text primitives used for the terminal log."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

LOG_WIDTH = 100
TAB = "    "


class Color(Enum):
    """Terminal colours used by the game."""

    RESET = "reset"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    CYAN = "cyan"
    WHITE = "white"
    LIGHT_RED = "light_red"
    LIGHT_BLUE = "light_blue"
    BROWN = "brown"

    @property
    def rgb(self) -> tuple[int, int, int] | None:
        """The explicit RGB value of the colour, if it has one."""
        return _RGB.get(self)


_RGB = {Color.BROWN: (150, 75, 0)}


@dataclass(frozen=True)
class Style:
    """Foreground, background and weight of a piece of text."""

    fg: Color = Color.RESET
    bg: Color = Color.RESET
    bold: bool = False


@dataclass(frozen=True)
class Span:
    """A run of text sharing one style."""

    content: str
    style: Style = Style()


@dataclass
class Line:
    """A single rendered line made of styled spans."""

    spans: list[Span] = field(default_factory=list)

    @classmethod
    def styled(cls, content: str, style: Style) -> Line:
        return cls([Span(content, style)])

    def text(self) -> str:
        """The plain text of the line."""
        return "".join(span.content for span in self.spans)


def pad_log(content: str) -> str:
    """Expand tabs and left-justify the content to the log width."""
    return content.replace("\t", TAB).ljust(LOG_WIDTH)


def styled_line(content: str, fg: Color, bg: Color) -> Line:
    """Build a padded log line in the given colours."""
    return Line.styled(pad_log(content), Style(fg=fg, bg=bg))