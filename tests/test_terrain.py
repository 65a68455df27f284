"""Tests for quarry.world.terrain - noise sampling and map generation."""

from __future__ import annotations

import numpy as np
import pytest

from quarry.world import terrain
from quarry.world.actor import STONE, WOOD
from quarry.world.cell import EMPTY, WALL, CellKind
from quarry.world.terrain import TerrainParams, generate, sample_field
from quarry.world.world import World


def assert_generation_invariant(world: World) -> None:
    grid = world.grid
    for y in range(grid.height):
        for x in range(grid.width):
            on_ring = x in (0, grid.width - 1) or y in (0, grid.height - 1)
            is_wall = grid.cell_at(x, y) == WALL
            assert on_ring == is_wall, f"({x}, {y}) wall={is_wall} ring={on_ring}"

    for actor in world.actors:
        cells = [
            grid.cell_at(actor.x + dx, actor.y + dy)
            for dy in (-1, 0, 1)
            for dx in (-1, 0, 1)
        ]
        assert not any(c.is_obstacle for c in cells)
        assert [c for c in cells if c.is_actor] == [
            grid.cell_at(actor.x, actor.y),
        ]
        assert grid.cell_at(actor.x, actor.y).actor_id == actor.actor_id

    slots = {
        (x, y)
        for y, row in enumerate(grid.cells)
        for x, cell in enumerate(row)
        if cell.is_actor
    }
    assert slots == {a.position for a in world.actors}


def constant_fields(
    monkeypatch: pytest.MonkeyPatch,
    water: float,
    stone: float,
) -> None:
    """Make the generator see flat noise: first call water, second stone."""
    values = iter([water, stone])

    def fake_sample(
        seed: int,
        width: int,
        height: int,
        noise_scale: float,
    ) -> np.ndarray:
        return np.full((height, width), next(values))

    monkeypatch.setattr(terrain, "sample_field", fake_sample)


class TestSampleField:
    """Tests for raw noise sampling."""

    def test_shape(self) -> None:
        field = sample_field(seed=3, width=12, height=7, noise_scale=10.0)
        assert field.shape == (7, 12)

    def test_indexed_row_then_column(self) -> None:
        from opensimplex import OpenSimplex

        gen = OpenSimplex(seed=3)
        field = sample_field(seed=3, width=12, height=7, noise_scale=10.0)
        assert field[5, 2] == pytest.approx(gen.noise2(0.2, 0.5))
        assert field[1, 11] == pytest.approx(gen.noise2(1.1, 0.1))

    def test_range(self) -> None:
        field = sample_field(seed=3, width=30, height=30, noise_scale=10.0)
        assert np.all(field >= -1.0)
        assert np.all(field <= 1.0)

    def test_same_seed_same_field(self) -> None:
        a = sample_field(seed=9, width=20, height=10, noise_scale=10.0)
        b = sample_field(seed=9, width=20, height=10, noise_scale=10.0)
        assert np.array_equal(a, b)

    def test_coherent(self) -> None:
        """Neighbouring samples differ far less than the full range."""
        field = sample_field(seed=5, width=40, height=20, noise_scale=10.0)
        assert np.max(np.abs(np.diff(field, axis=1))) < 0.5


class TestGenerate:
    """Tests for full-map generation."""

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_generation_invariant(self, seed: int) -> None:
        assert_generation_invariant(World(seed=seed))

    def test_rejects_start_next_to_wall(self) -> None:
        with pytest.raises(ValueError, match="inside the edge"):
            World(width=10, height=8, actor_starts=[(1, 1), (7, 5)], seed=11)

    def test_rejects_adjacent_starts(self) -> None:
        with pytest.raises(ValueError, match="adjacent"):
            World(width=12, height=10, actor_starts=[(4, 4), (5, 4)], seed=11)

    def test_smallest_grid_keeps_clearance(self) -> None:
        assert_generation_invariant(World(width=8, height=8, seed=11))

    def test_overlapping_clearance_zones(self) -> None:
        world = World(width=12, height=10, actor_starts=[(4, 4), (6, 4)], seed=11)
        assert_generation_invariant(world)

    def test_same_seed_same_map(self) -> None:
        assert World(seed=42).grid.cells == World(seed=42).grid.cells

    def test_each_field_gets_its_own_seed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        seeds: list[int] = []
        real_sample = terrain.sample_field

        def spy(seed: int, width: int, height: int, noise_scale: float) -> np.ndarray:
            seeds.append(seed)
            return real_sample(seed, width, height, noise_scale)

        monkeypatch.setattr(terrain, "sample_field", spy)
        World(seed=8)
        assert len(seeds) == 2
        assert seeds[0] != seeds[1]

    def test_high_noise_floods_with_water(self, monkeypatch: pytest.MonkeyPatch) -> None:
        constant_fields(monkeypatch, water=0.9, stone=0.9)
        world = World(width=10, height=8, actor_starts=[(3, 3)], seed=1)
        # Water wins everywhere except the 3x3 carve
        assert world.grid.count(CellKind.STONE) == 0
        assert world.grid.count(CellKind.WATER) == 8 * 6 - 9
        assert_generation_invariant(world)

    def test_stone_where_no_water(self, monkeypatch: pytest.MonkeyPatch) -> None:
        constant_fields(monkeypatch, water=0.0, stone=0.3)
        world = World(width=10, height=8, actor_starts=[(3, 3)], seed=1)
        assert world.grid.count(CellKind.WATER) == 0
        assert world.grid.count(CellKind.STONE) == 8 * 6 - 9

    def test_thresholds_are_strict(self, monkeypatch: pytest.MonkeyPatch) -> None:
        constant_fields(monkeypatch, water=0.4, stone=0.2)
        world = World(width=10, height=8, actor_starts=[(3, 3)], seed=1)
        assert world.grid.count(CellKind.WATER) == 0
        assert world.grid.count(CellKind.STONE) == 0

    def test_custom_thresholds(self, monkeypatch: pytest.MonkeyPatch) -> None:
        constant_fields(monkeypatch, water=0.5, stone=0.0)
        world = World(
            width=10,
            height=8,
            actor_starts=[(3, 3)],
            terrain=TerrainParams(water_threshold=0.6, stone_threshold=-0.1),
            seed=1,
        )
        assert world.grid.count(CellKind.WATER) == 0
        assert world.grid.count(CellKind.STONE) == 8 * 6 - 9

    def test_generate_overwrites_previous_map(self, world: World) -> None:
        world.grid.cells[5][5] = WALL
        generate(world)
        assert world.grid.cell_at(5, 5).kind is not CellKind.WALL


class TestRegenerate:
    """Tests for World.regenerate."""

    def test_keeps_positions_and_ids(self, world: World) -> None:
        world.actors[0].add(STONE, 3)
        world.regenerate()
        assert [a.actor_id for a in world.actors] == [1, 2]
        assert [a.position for a in world.actors] == [(2, 2), (57, 27)]

    def test_resets_stone_only(self, world: World) -> None:
        world.actors[0].add(STONE, 3)
        world.actors[1].add(WOOD, 2)
        world.regenerate()
        assert world.actors[0].stones == 0
        assert world.actors[1].inventory[WOOD] == 2

    def test_moved_actor_is_carved_where_it_stands(self, flat_world: World) -> None:
        actor = flat_world.actors[0]
        flat_world.grid.cells[actor.y][actor.x] = EMPTY
        actor.x, actor.y = 5, 5
        flat_world.regenerate()
        assert actor.position == (5, 5)
        assert_generation_invariant(flat_world)

    def test_generation_invariant(self, world: World) -> None:
        for _ in range(3):
            world.regenerate()
            assert_generation_invariant(world)

    def test_keeps_debug_log(self, world: World) -> None:
        world.log("before")
        world.regenerate()
        assert world.debug_log.entries == ["before"]
