"""Commands - the discrete requests a controller can send to the engine.

The presentation layer translates raw input into one of these values;
``GameEngine.handle`` applies it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """The four unit steps on the grid (y grows downward)."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


@dataclass(frozen=True)
class Move:
    """Step an actor one cell, collecting stone on the way."""

    actor_index: int
    direction: Direction


@dataclass(frozen=True)
class Place:
    """Place a stone in the cell one step from the actor."""

    actor_index: int
    direction: Direction


@dataclass(frozen=True)
class Regenerate:
    """Generate a new map around the current actor positions."""


@dataclass(frozen=True)
class ToggleDebug:
    """Show or hide the debug panel."""


@dataclass(frozen=True)
class ClearLog:
    """Empty the debug log."""


@dataclass(frozen=True)
class Quit:
    """Stop the run loop."""


Command = Move | Place | Regenerate | ToggleDebug | ClearLog | Quit
