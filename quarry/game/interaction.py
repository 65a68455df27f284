"""Interaction rules - movement, stone collection, and stone placement.

Every rule is a plain function that validates a request against the
world and either applies it completely or leaves the world untouched.
Rejected moves are silent; rejected placements leave one message in
the debug log explaining why.  Nothing here raises for coordinates in
the range the controllers can produce.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from quarry.world.actor import STONE
from quarry.world.cell import EMPTY
from quarry.world.cell import STONE as STONE_CELL
from quarry.world.cell import Cell, CellKind

if TYPE_CHECKING:
    from quarry.world.actor import Actor
    from quarry.world.world import World

_UNIT_STEPS = frozenset({(0, -1), (0, 1), (-1, 0), (1, 0)})


def _relocate(world: World, actor: Actor, x: int, y: int) -> None:
    """Move ``actor`` to ``(x, y)``, keeping its grid slot in sync."""
    world.grid.cells[actor.y][actor.x] = EMPTY
    actor.x, actor.y = x, y
    world.grid.cells[y][x] = Cell.actor(actor.actor_id)


def move_actor(world: World, actor_index: int, dx: int, dy: int) -> None:
    """Step an actor one cell in a unit direction.

    Empty cells are walked into.  Stone is collected (the counter goes
    up by one and the stone is removed) and then walked into.  Water,
    wall, and other actors block the move.  Candidates touching or
    beyond the wall ring are ignored.

    Args:
        world: The world to mutate.
        actor_index: Which actor moves.
        dx: Column step, one of -1, 0, 1.
        dy: Row step, one of -1, 0, 1.
    """
    if (dx, dy) not in _UNIT_STEPS:
        return

    actor = world.actor(actor_index)
    nx, ny = actor.x + dx, actor.y + dy
    if not world.grid.in_interior(nx, ny):
        return

    target = world.grid.cells[ny][nx]
    if target.kind is CellKind.EMPTY:
        _relocate(world, actor, nx, ny)
    elif target.kind is CellKind.STONE:
        total = actor.add(STONE)
        world.grid.cells[ny][nx] = EMPTY
        _relocate(world, actor, nx, ny)
        world.log(f"Actor {actor.actor_id} collected a stone ({total} total)")


def place(world: World, actor_index: int, target_x: int, target_y: int) -> None:
    """Put one of the actor's stones onto an empty cell next to it.

    Checked in order: the target must be on the grid, be empty, the
    actor must carry a stone, and the target must be within the actor's
    3x3 neighbourhood.  The first failing check logs a message and the
    world is left as it was.

    Args:
        world: The world to mutate.
        actor_index: Which actor places the stone.
        target_x: Target column.
        target_y: Target row.
    """
    actor = world.actor(actor_index)
    where = f"({target_x}, {target_y})"

    if not world.grid.in_bounds(target_x, target_y):
        world.log(f"Cannot place at {where}: out of bounds")
        return
    if not world.grid.cells[target_y][target_x].is_empty:
        world.log(f"Cannot place at {where}: cell not empty")
        return
    if actor.stones <= 0:
        world.log(f"Actor {actor.actor_id} has no stones to place")
        return
    if actor.distance_to(target_x, target_y) > 1:
        world.log(f"Cannot place at {where}: not adjacent to actor {actor.actor_id}")
        return

    world.grid.cells[target_y][target_x] = STONE_CELL
    actor.remove(STONE)
    world.log(f"Actor {actor.actor_id} placed a stone at {where}")


def place_toward(world: World, actor_index: int, dx: int, dy: int) -> None:
    """Place a stone at the cell offset ``(dx, dy)`` from the actor."""
    actor = world.actor(actor_index)
    place(world, actor_index, actor.x + dx, actor.y + dy)
