"""Terrain generation from two independent OpenSimplex noise fields.

One field decides where water pools, the other where stone outcrops.
Both are sampled over the interior at the same frequency, each with its
own seed drawn from the world's random generator, so every call
produces a visually different map.  Water always wins over stone.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray
from opensimplex import OpenSimplex

from quarry.world.cell import EMPTY, STONE, WATER, Cell, CellKind

if TYPE_CHECKING:
    from numpy.random import Generator

    from quarry.world.world import World

logger = logging.getLogger(__name__)

_SEED_CEILING = 2**31


@dataclass(frozen=True)
class TerrainParams:
    """Noise sampling parameters.

    Attributes:
        noise_scale: Coordinates are divided by this before sampling;
            larger values give broader features.
        water_threshold: Noise value above which a cell becomes water.
        stone_threshold: Noise value above which an empty cell becomes stone.
    """

    noise_scale: float = 10.0
    water_threshold: float = 0.4
    stone_threshold: float = 0.2


def sample_field(
    seed: int,
    width: int,
    height: int,
    noise_scale: float,
) -> NDArray[np.float64]:
    """Sample a 2D OpenSimplex field over a ``width x height`` grid.

    Args:
        seed: Seed for the noise generator.
        width: Number of columns.
        height: Number of rows.
        noise_scale: Divisor applied to coordinates before sampling.

    Returns:
        Array of shape ``(height, width)`` with values roughly in [-1, 1].
    """
    gen = OpenSimplex(seed=seed)
    xs = np.arange(width) / noise_scale
    ys = np.arange(height) / noise_scale
    return gen.noise2array(xs, ys).astype(np.float64)


def draw_seed(rng: Generator) -> int:
    """Draw a fresh noise seed from ``rng``."""
    return int(rng.integers(0, _SEED_CEILING))


def generate(world: World) -> None:
    """Overwrite the world's grid with freshly generated terrain.

    Actor positions are read from the world and never changed.  Every
    actor's 3x3 neighbourhood is carved clear after the noise passes so
    terrain never boxes an actor in.

    Args:
        world: The world whose grid is regenerated.
    """
    grid = world.grid
    params = world.terrain

    grid.fill(EMPTY)
    grid.stamp_border()

    water_seed = draw_seed(world.rng)
    stone_seed = draw_seed(world.rng)
    water = sample_field(water_seed, grid.width, grid.height, params.noise_scale)
    stone = sample_field(stone_seed, grid.width, grid.height, params.noise_scale)

    for y in range(1, grid.height - 1):
        for x in range(1, grid.width - 1):
            cell: Cell = EMPTY
            if water[y, x] > params.water_threshold:
                cell = WATER
            elif stone[y, x] > params.stone_threshold:
                cell = STONE
            grid.cells[y][x] = cell

    for actor in world.actors:
        for x, y in grid.neighbourhood(actor.x, actor.y):
            grid.cells[y][x] = EMPTY

    for actor in world.actors:
        grid.cells[actor.y][actor.x] = Cell.actor(actor.actor_id)

    logger.debug(
        "Generated %dx%d terrain (water seed %d, stone seed %d): %d water, %d stone",
        grid.width,
        grid.height,
        water_seed,
        stone_seed,
        grid.count(CellKind.WATER),
        grid.count(CellKind.STONE),
    )
