"""Actor - an independently controlled gatherer on the grid."""

from __future__ import annotations

from dataclasses import dataclass, field

STONE = "Stone"
WOOD = "Wood"

# Slots shown in the inventory panel, in display order
RESOURCES: tuple[str, ...] = (STONE, WOOD)


def _empty_inventory() -> dict[str, int]:
    return dict.fromkeys(RESOURCES, 0)


@dataclass
class Actor:
    """A single actor and its carried resources.

    Attributes:
        actor_id: Stable identifier, also stamped into the actor's grid slot.
        x: Current column position.
        y: Current row position.
        inventory: Ordered resource counters, each a non-negative count.
    """

    actor_id: int
    x: int
    y: int
    inventory: dict[str, int] = field(default_factory=_empty_inventory)

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    @property
    def stones(self) -> int:
        """Return the number of stones carried."""
        return self.inventory.get(STONE, 0)

    def add(self, resource: str, amount: int = 1) -> int:
        """Add ``amount`` of ``resource`` and return the new count."""
        self.inventory[resource] = self.inventory.get(resource, 0) + amount
        return self.inventory[resource]

    def remove(self, resource: str, amount: int = 1) -> bool:
        """Take ``amount`` of ``resource`` if enough is carried.

        Returns:
            True if the resource was removed, False if too few were held.
        """
        held = self.inventory.get(resource, 0)
        if held < amount:
            return False
        self.inventory[resource] = held - amount
        return True

    def reset(self, resource: str) -> None:
        """Zero a single inventory counter."""
        self.inventory[resource] = 0

    def distance_to(self, x: int, y: int) -> int:
        """Return the Chebyshev distance from the actor to ``(x, y)``."""
        return max(abs(x - self.x), abs(y - self.y))
