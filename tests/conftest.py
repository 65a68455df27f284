"""Shared fixtures for the Quarry test suite."""

from __future__ import annotations

import pytest

from quarry.game.config import GameConfig
from quarry.world.cell import EMPTY, Cell
from quarry.world.world import World


def clear_interior(world: World) -> World:
    """Empty every interior cell, then re-stamp the actors' slots."""
    grid = world.grid
    for y in range(1, grid.height - 1):
        for x in range(1, grid.width - 1):
            grid.cells[y][x] = EMPTY
    for actor in world.actors:
        grid.cells[actor.y][actor.x] = Cell.actor(actor.actor_id)
    return world


@pytest.fixture
def default_config() -> GameConfig:
    """Default game config with a fixed seed (no YAML file needed)."""
    return GameConfig(seed=12345)


@pytest.fixture
def world() -> World:
    """A full-size seeded world with generated terrain."""
    return World(seed=12345)


@pytest.fixture
def flat_world() -> World:
    """A small 12x8 world with no terrain inside the walls.

    Actor 1 (index 0) stands at (3, 3); actor 2 (index 1) at (8, 4).
    """
    world = World(width=12, height=8, actor_starts=[(3, 3), (8, 4)], seed=7)
    return clear_interior(world)
