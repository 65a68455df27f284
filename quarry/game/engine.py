"""GameEngine - applies controller commands to the world.

Owns the World built from a GameConfig and dispatches each command to
the matching interaction rule.  Commands are applied one at a time and
completely; the caller renders after every call whether or not the
world changed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from quarry.game.commands import (
    ClearLog,
    Command,
    Move,
    Place,
    Quit,
    Regenerate,
    ToggleDebug,
)
from quarry.game.config import GameConfig
from quarry.game.interaction import move_actor, place_toward
from quarry.world.world import World

logger = logging.getLogger(__name__)


@dataclass
class GameEngine:
    """Drives the game forward one command at a time.

    Attributes:
        config: Loaded game configuration.
        world: The world state.
        turn: Number of commands handled so far.
    """

    config: GameConfig
    world: World = field(init=False)
    turn: int = 0

    def __post_init__(self) -> None:
        """Validate the config and build the world from it."""
        self.config.validate()
        self.world = World(
            width=self.config.width,
            height=self.config.height,
            actor_starts=list(self.config.actor_starts) or None,
            terrain=self.config.terrain,
            log_capacity=self.config.log_capacity,
            seed=self.config.seed,
        )

    def handle(self, command: Command) -> bool:
        """Apply a single command to the world.

        Args:
            command: The command to apply.

        Returns:
            False if the command asks the run loop to stop, else True.

        Raises:
            TypeError: If ``command`` is not a known command type.
        """
        logger.debug("Turn %d: %s", self.turn, command)

        if isinstance(command, (Move, Place)) and not (
            0 <= command.actor_index < len(self.world.actors)
        ):
            logger.debug("Ignoring %s: no actor %d", command, command.actor_index)
        elif isinstance(command, Move):
            d = command.direction
            move_actor(self.world, command.actor_index, d.dx, d.dy)
        elif isinstance(command, Place):
            d = command.direction
            place_toward(self.world, command.actor_index, d.dx, d.dy)
        elif isinstance(command, Regenerate):
            self.world.regenerate()
        elif isinstance(command, ToggleDebug):
            self.world.toggle_panel()
        elif isinstance(command, ClearLog):
            self.world.clear_log()
        elif isinstance(command, Quit):
            self.turn += 1
            logger.info("Quit requested after %d commands", self.turn)
            return False
        else:
            msg = f"unknown command: {command!r}"
            raise TypeError(msg)
        self.turn += 1
        return True

    def run(self, commands: list[Command]) -> int:
        """Apply a sequence of commands, stopping at the first Quit.

        Args:
            commands: Commands to apply in order.

        Returns:
            Number of commands applied, including a final Quit.
        """
        applied = 0
        for command in commands:
            applied += 1
            if not self.handle(command):
                break
        return applied
