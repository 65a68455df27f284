"""Config - load game parameters from YAML files.

Grid size, terrain noise settings, actor start positions, and the debug
log size live in YAML and are parsed into a typed dataclass here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from quarry.world.debug_log import DEFAULT_CAPACITY
from quarry.world.terrain import TerrainParams
from quarry.world.world import DEFAULT_HEIGHT, DEFAULT_WIDTH, check_starts, default_starts

# Smallest grid whose default starts keep their clearance zones apart
_MIN_SIZE = 8


@dataclass
class GameConfig:
    """Top-level game configuration.

    Attributes:
        seed: Terrain RNG seed; None gives a different map every run.
        width: Number of grid columns.
        height: Number of grid rows.
        noise_scale: Divisor applied to coordinates before noise sampling.
        water_threshold: Noise level above which a cell becomes water.
        stone_threshold: Noise level above which a cell becomes stone.
        log_capacity: Number of debug-log messages retained.
        actor_starts: Starting ``(x, y)`` per actor.  Empty means two
            actors near opposite corners.
    """

    seed: int | None = None
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    noise_scale: float = 10.0
    water_threshold: float = 0.4
    stone_threshold: float = 0.2
    log_capacity: int = DEFAULT_CAPACITY
    actor_starts: list[tuple[int, int]] = field(default_factory=list)

    @classmethod
    def from_yaml(cls, path: str | Path) -> GameConfig:
        """Load configuration from a YAML file.

        Unknown keys are ignored; missing keys keep their defaults.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated, validated GameConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ValueError: If the values describe an unplayable game.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        config = cls(
            seed=data.get("seed", cls.seed),
            width=data.get("width", cls.width),
            height=data.get("height", cls.height),
            noise_scale=data.get("noise_scale", cls.noise_scale),
            water_threshold=data.get("water_threshold", cls.water_threshold),
            stone_threshold=data.get("stone_threshold", cls.stone_threshold),
            log_capacity=data.get("log_capacity", cls.log_capacity),
            actor_starts=[(int(x), int(y)) for x, y in data.get("actor_starts") or []],
        )
        config.validate()
        return config

    @property
    def terrain(self) -> TerrainParams:
        """Return the noise parameters as a TerrainParams."""
        return TerrainParams(
            noise_scale=self.noise_scale,
            water_threshold=self.water_threshold,
            stone_threshold=self.stone_threshold,
        )

    def validate(self) -> None:
        """Reject values the world cannot be built from.

        Raises:
            ValueError: On a grid smaller than 8x8, a non-positive noise
                scale or log capacity, or start positions that are missing,
                duplicated, adjacent, or within two cells of the edge.
        """
        if self.width < _MIN_SIZE or self.height < _MIN_SIZE:
            msg = f"grid must be at least {_MIN_SIZE}x{_MIN_SIZE}, got {self.width}x{self.height}"
            raise ValueError(msg)
        if self.noise_scale <= 0:
            msg = f"noise_scale must be positive, got {self.noise_scale}"
            raise ValueError(msg)
        if self.log_capacity <= 0:
            msg = f"log_capacity must be positive, got {self.log_capacity}"
            raise ValueError(msg)
        starts = list(self.actor_starts) or default_starts(self.width, self.height)
        check_starts(self.width, self.height, starts)
