"""Entry point for ``python -m quarry``.

Loads the default YAML config, builds a game engine, and opens a Pygame
window for two players sharing the keyboard.
"""

from __future__ import annotations

import argparse
import pathlib

from quarry.game.config import GameConfig
from quarry.game.engine import GameEngine
from quarry.logs import setup_logging
from quarry.ui.text import inventory_lines, render_rows

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def build_parser() -> argparse.ArgumentParser:
    """Return the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="quarry",
        description="Quarry - two-player stone gathering and building",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Terrain seed, overrides the config file",
    )
    parser.add_argument(
        "--font-size",
        type=int,
        default=16,
        help="Glyph font size in points (default: 16)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=30,
        help="Target frames per second (default: 30)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level for quarry loggers (default: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        type=pathlib.Path,
        default=None,
        help="Also write logs to this file",
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print the generated map as text and exit",
    )
    return parser


def load_config(path: pathlib.Path, seed: int | None) -> GameConfig:
    """Load the config file, falling back to defaults if it is missing."""
    config = GameConfig.from_yaml(path) if path.exists() else GameConfig()
    if seed is not None:
        config.seed = seed
    return config


def main(argv: list[str] | None = None) -> int:
    """Parse CLI args, create engine, launch renderer."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    config = load_config(args.config, args.seed)
    engine = GameEngine(config=config)

    if args.dump:
        for row in render_rows(engine.world.grid):
            print(row)
        for line in inventory_lines(engine.world):
            print(line)
        return 0

    from quarry.ui.pygame_client import PygameRenderer

    renderer = PygameRenderer(engine=engine, font_size=args.font_size)
    renderer.run(fps=args.fps)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
