"""Text rendering of the world - glyph rows and panel lines.

Shared by the Pygame window and the ``--dump`` command-line option.
Only reads the world.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from quarry.world.cell import Cell, CellKind

if TYPE_CHECKING:
    from quarry.world.grid import Grid
    from quarry.world.world import World

GLYPHS: dict[CellKind, str] = {
    CellKind.EMPTY: " ",
    CellKind.ACTOR: "@",
    CellKind.STONE: "#",
    CellKind.WATER: ".",
    CellKind.WALL: "█",
}


def glyph(cell: Cell) -> str:
    """Return the single-character glyph for ``cell``.

    Actors with ids 1-9 are drawn as their digit so the two players can
    tell each other apart; any other id falls back to ``@``.
    """
    if cell.is_actor and cell.actor_id is not None and 0 < cell.actor_id < 10:
        return str(cell.actor_id)
    return GLYPHS[cell.kind]


def render_rows(grid: Grid) -> list[str]:
    """Return one string per grid row."""
    return ["".join(glyph(cell) for cell in row) for row in grid.cells]


def inventory_lines(world: World) -> list[str]:
    """Return the inventory panel text, one block per actor."""
    lines: list[str] = []
    for actor in world.actors:
        lines.append(f"Actor {actor.actor_id} @ ({actor.x}, {actor.y})")
        lines += [f"  {name}: {count}" for name, count in actor.inventory.items()]
    return lines
