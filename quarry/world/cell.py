"""Cell - the state of a single tile in the world grid.

A cell is one of five variants: empty ground, an actor's slot, stone,
water, or wall.  Cells are immutable values; the grid swaps them out
wholesale rather than mutating them in place.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CellKind(Enum):
    """Terrain/occupancy variant of a cell."""

    EMPTY = "empty"
    ACTOR = "actor"
    STONE = "stone"
    WATER = "water"
    WALL = "wall"


@dataclass(frozen=True)
class Cell:
    """A single tile value in the world grid.

    Attributes:
        kind: Which variant this cell is.
        actor_id: Id of the occupying actor; only set when ``kind`` is
            ``CellKind.ACTOR``.
    """

    kind: CellKind
    actor_id: int | None = None

    @classmethod
    def actor(cls, actor_id: int) -> Cell:
        """Return the slot cell for the actor with ``actor_id``."""
        return cls(kind=CellKind.ACTOR, actor_id=actor_id)

    @property
    def is_empty(self) -> bool:
        return self.kind is CellKind.EMPTY

    @property
    def is_actor(self) -> bool:
        return self.kind is CellKind.ACTOR

    @property
    def is_obstacle(self) -> bool:
        """Return True for terrain that blocks an actor's clearance zone."""
        return self.kind in (CellKind.STONE, CellKind.WATER, CellKind.WALL)


EMPTY = Cell(CellKind.EMPTY)
STONE = Cell(CellKind.STONE)
WATER = Cell(CellKind.WATER)
WALL = Cell(CellKind.WALL)
