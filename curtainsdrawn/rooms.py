"""Rooms of the building and the connections between them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .anim import Anim, AnimType

MARKER_WIDTH = 6
WARNING_MARK = "⚠"
ANIM_MARK = "·"


class Direction(Enum):
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    LEFT_UP = auto()
    RIGHT_UP = auto()
    LEFT_DOWN = auto()
    RIGHT_DOWN = auto()
    NONE = auto()


@dataclass(eq=False)
class Room:
    """A location the animatronics can occupy."""

    name: str
    tag: str
    dist_to_office: int
    target: str
    is_office: bool = False
    connections: list[Room] = field(default_factory=list, repr=False)
    anims: list[Anim] = field(default_factory=list, repr=False)
    warning: bool = False

    def __post_init__(self) -> None:
        if len(self.target) != 1:
            raise ValueError(f"map target must be a single character, got {self.target!r}")

    def add_connection(self, other: Room) -> Room:
        """Add a one-way connection to another room; returns self for chaining."""
        self.connections.append(other)
        return self

    def add_anim(self, anim: Anim) -> Room:
        """Place an animatronic in this room; returns self for chaining."""
        anim.location = self
        self.anims.append(anim)
        return self

    def remove_anim(self, anim_type: AnimType) -> None:
        """Remove every animatronic of the given type from this room."""
        self.anims = [anim for anim in self.anims if anim.anim_type != anim_type]

    def set_dist(self) -> None:
        """Recompute distances of all reachable rooms, measured from this one."""
        queue: deque[tuple[Room, int]] = deque([(self, 0)])
        visited = {self.tag}
        while queue:
            room, dist = queue.popleft()
            room.dist_to_office = dist
            for conn in room.connections:
                if conn.tag not in visited:
                    visited.add(conn.tag)
                    queue.append((conn, dist + 1))

    def map_replacement(self) -> tuple[str, str]:
        """Return the map placeholder for this room and the marker text replacing it."""
        cells = list((WARNING_MARK if self.warning else " ").ljust(MARKER_WIDTH))
        for anim in self.anims:
            cells[int(anim.anim_type)] = ANIM_MARK
        return self.target * MARKER_WIDTH, "".join(cells)

    def intercom(self) -> list[str]:
        """Broadcast over the room's intercom; returns the names of those who hear it."""
        return [anim.name for anim in self.anims]