"""World - the single source of truth for grid, actors, and debug log.

The World owns the grid, the ordered list of actors, the debug log, and
the random generator that seeds terrain noise.  Interaction rules in
``quarry.game.interaction`` mutate it; renderers only read it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np
from numpy.random import Generator

from quarry.world.actor import STONE, Actor
from quarry.world.debug_log import DEFAULT_CAPACITY, DebugLog
from quarry.world.grid import Grid
from quarry.world.terrain import TerrainParams, generate

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 60
DEFAULT_HEIGHT = 30

# Distance from the edge to each actor start
_INSET = 2


def default_starts(width: int, height: int) -> list[tuple[int, int]]:
    """Return start positions near opposite corners, inset two cells."""
    return [(2, 2), (width - 3, height - 3)]


def check_starts(width: int, height: int, starts: list[tuple[int, int]]) -> None:
    """Reject start positions that would break the clearance guarantee.

    Every start must sit at least two cells in from the edge so its 3x3
    clearance zone stays inside the wall ring, and no two starts may be
    within each other's 3x3 zone.

    Args:
        width: Number of grid columns.
        height: Number of grid rows.
        starts: Starting ``(x, y)`` per actor.

    Raises:
        ValueError: If there are no starts, or one is too close to the
            edge, duplicated, or adjacent to another.
    """
    if not starts:
        msg = "a world needs at least one actor"
        raise ValueError(msg)
    for x, y in starts:
        if not (_INSET <= x <= width - 1 - _INSET and _INSET <= y <= height - 1 - _INSET):
            msg = (
                f"actor start ({x}, {y}) must be at least {_INSET} cells inside "
                f"the edge of {width}x{height}"
            )
            raise ValueError(msg)
    if len(set(starts)) != len(starts):
        msg = f"actor start positions must be distinct: {starts}"
        raise ValueError(msg)
    for i, (ax, ay) in enumerate(starts):
        for bx, by in starts[i + 1 :]:
            if max(abs(ax - bx), abs(ay - by)) < _INSET:
                msg = f"actor starts ({ax}, {ay}) and ({bx}, {by}) are adjacent"
                raise ValueError(msg)


@dataclass
class World:
    """A generated grid plus the actors moving through it.

    Attributes:
        width: Number of grid columns.
        height: Number of grid rows.
        actor_starts: Starting ``(x, y)`` for each actor, in actor order.
            Defaults to two actors near opposite corners.
        terrain: Noise parameters used by the terrain generator.
        log_capacity: Maximum number of debug-log entries kept.
        seed: Seed for the terrain RNG; None draws from OS entropy.
        grid: The cell grid.
        actors: Actors in fixed order; actor ``i`` has id ``i + 1``.
        debug_log: Bounded log of notable game events.
        show_debug_panel: Presentation hint for the debug panel.
        rng: Random generator the noise seeds are drawn from.
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    actor_starts: list[tuple[int, int]] | None = None
    terrain: TerrainParams = field(default_factory=TerrainParams)
    log_capacity: int = DEFAULT_CAPACITY
    seed: int | None = None
    grid: Grid = field(init=False, repr=False)
    actors: list[Actor] = field(init=False)
    debug_log: DebugLog = field(init=False, repr=False)
    show_debug_panel: bool = field(init=False, default=False)
    rng: Generator = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Place actors at their starts and generate the first map.

        Raises:
            ValueError: If there are no actors, or a start position is
                duplicated, adjacent, or less than two cells from the edge.
        """
        starts = self.actor_starts
        if starts is None:
            starts = default_starts(self.width, self.height)
        self.actor_starts = [tuple(pos) for pos in starts]

        check_starts(self.width, self.height, self.actor_starts)
        self.grid = Grid(width=self.width, height=self.height)

        self.actors = [
            Actor(actor_id=i + 1, x=x, y=y)
            for i, (x, y) in enumerate(self.actor_starts)
        ]
        self.debug_log = DebugLog(capacity=self.log_capacity)
        self.rng = np.random.default_rng(self.seed)
        generate(self)
        logger.info(
            "Created %dx%d world with %d actors",
            self.width,
            self.height,
            len(self.actors),
        )

    def actor(self, index: int) -> Actor:
        """Return the actor at position ``index`` in actor order.

        Raises:
            IndexError: If no actor has that index.
        """
        return self.actors[index]

    def regenerate(self) -> None:
        """Build a new map around the actors' current positions.

        Every actor's stone counter is reset to zero; other inventory
        slots and all positions are kept.
        """
        for actor in self.actors:
            actor.reset(STONE)
        generate(self)
        logger.debug("Regenerated world")

    def log(self, message: str) -> None:
        """Append a message to the debug log."""
        self.debug_log.log(message)

    def clear_log(self) -> None:
        """Empty the debug log."""
        self.debug_log.clear()

    def toggle_panel(self) -> None:
        """Flip debug panel visibility.  Has no effect on game rules."""
        self.show_debug_panel = not self.show_debug_panel
