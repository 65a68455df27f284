"""Key bindings - translate Pygame key events into game commands.

Actor 1 walks with W/A/S/D and places stone by holding Shift.
Actor 2 walks with the arrow keys and places stone by holding Ctrl.
"""

from __future__ import annotations

import pygame

from quarry.game.commands import (
    ClearLog,
    Command,
    Direction,
    Move,
    Place,
    Quit,
    Regenerate,
    ToggleDebug,
)

# key -> (actor index, direction)
MOVEMENT_KEYS: dict[int, tuple[int, Direction]] = {
    pygame.K_w: (0, Direction.UP),
    pygame.K_s: (0, Direction.DOWN),
    pygame.K_a: (0, Direction.LEFT),
    pygame.K_d: (0, Direction.RIGHT),
    pygame.K_UP: (1, Direction.UP),
    pygame.K_DOWN: (1, Direction.DOWN),
    pygame.K_LEFT: (1, Direction.LEFT),
    pygame.K_RIGHT: (1, Direction.RIGHT),
}

# Modifier that turns an actor's movement key into a placement
PLACE_MODIFIERS: dict[int, int] = {
    0: pygame.KMOD_SHIFT,
    1: pygame.KMOD_CTRL,
}

CONTROL_KEYS: dict[int, Command] = {
    pygame.K_r: Regenerate(),
    pygame.K_TAB: ToggleDebug(),
    pygame.K_c: ClearLog(),
    pygame.K_q: Quit(),
    pygame.K_ESCAPE: Quit(),
}

HELP_LINES = [
    "P1: WASD move, Shift+dir place",
    "P2: arrows move, Ctrl+dir place",
    "R: new map  TAB: debug",
    "C: clear log  Q/ESC: quit",
]


def translate_key(key: int, mod: int = 0) -> Command | None:
    """Map a key press to a command.

    Args:
        key: Pygame key code.
        mod: Bitmask of held modifier keys.

    Returns:
        The command for this key, or None if the key is unbound.
    """
    if key in MOVEMENT_KEYS:
        actor_index, direction = MOVEMENT_KEYS[key]
        if mod & PLACE_MODIFIERS[actor_index]:
            return Place(actor_index, direction)
        return Move(actor_index, direction)
    return CONTROL_KEYS.get(key)
