"""Pygame front end for Quarry.

Draws the map as monospace glyphs, an inventory panel beside it, and
the debug log underneath when the panel is toggled on.  Key presses are
translated by ``quarry.ui.keymap`` and handed to the engine; every frame
is redrawn from the world whether or not anything changed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from quarry.game.engine import GameEngine

from quarry.ui.keymap import HELP_LINES, translate_key
from quarry.ui.text import glyph, inventory_lines
from quarry.world.cell import CellKind

# Colour palette
_BG = (12, 12, 16)
_TEXT = (200, 200, 200)
_TITLE = (240, 220, 120)

_CELL_COLOURS: dict[CellKind, tuple[int, int, int]] = {
    CellKind.EMPTY: _TEXT,
    CellKind.STONE: (160, 150, 140),
    CellKind.WATER: (70, 130, 230),
    CellKind.WALL: (110, 110, 110),
}

# Actor colours by actor index
_ACTOR_COLOURS = [(255, 200, 50), (100, 220, 120), (240, 100, 200), (100, 200, 255)]

_PANEL_COLUMNS = 34
_LOG_ROWS_PAD = 2


class PygameRenderer:
    """Renders a GameEngine's world into a Pygame window.

    Attributes:
        engine: The game engine to drive and draw.
        font_size: Point size of the monospace font.
        screen: The Pygame display surface.
    """

    def __init__(self, engine: GameEngine, font_size: int = 16) -> None:
        """Initialise Pygame and size the window to the grid.

        Args:
            engine: The game engine to render.
            font_size: Point size of the monospace font.
        """
        self.engine = engine
        self.font_size = font_size

        pygame.init()
        self.font = pygame.font.SysFont("monospace", font_size)
        self._char_w, self._line_h = self.font.size("#")

        world = engine.world
        log_rows = world.debug_log.capacity + _LOG_ROWS_PAD
        self._map_w = world.width * self._char_w
        self._map_h = world.height * self._line_h
        self._win_w = self._map_w + _PANEL_COLUMNS * self._char_w
        self._win_h = self._map_h + log_rows * self._line_h

        self.screen = pygame.display.set_mode((self._win_w, self._win_h))
        pygame.display.set_caption("Quarry")
        self.clock = pygame.time.Clock()
        self.running = True
        self._glyph_cache: dict[tuple[str, tuple[int, int, int]], pygame.Surface] = {}

    def run(self, fps: int = 30) -> None:
        """Main loop: handle events, render.

        Args:
            fps: Target frames per second.
        """
        while self.running:
            self.clock.tick(fps)
            self._handle_events()
            self._draw()

        pygame.quit()

    def _handle_events(self) -> None:
        """Process Pygame input events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                command = translate_key(event.key, event.mod)
                if command is not None and not self.engine.handle(command):
                    self.running = False

    def _draw(self) -> None:
        """Render one frame."""
        self.screen.fill(_BG)
        self._draw_map()
        self._draw_inventory_panel()
        if self.engine.world.show_debug_panel:
            self._draw_debug_panel()
        pygame.display.flip()

    def _render_glyph(self, char: str, colour: tuple[int, int, int]) -> pygame.Surface:
        key = (char, colour)
        surf = self._glyph_cache.get(key)
        if surf is None:
            surf = self.font.render(char, True, colour)
            self._glyph_cache[key] = surf
        return surf

    def _draw_map(self) -> None:
        """Draw every non-empty cell as a coloured glyph."""
        world = self.engine.world
        for y, row in enumerate(world.grid.cells):
            for x, cell in enumerate(row):
                if cell.is_empty:
                    continue
                if cell.is_actor:
                    index = (cell.actor_id or 1) - 1
                    colour = _ACTOR_COLOURS[index % len(_ACTOR_COLOURS)]
                else:
                    colour = _CELL_COLOURS[cell.kind]
                surf = self._render_glyph(glyph(cell), colour)
                self.screen.blit(surf, (x * self._char_w, y * self._line_h))

    def _draw_lines(
        self,
        lines: list[str],
        x: int,
        y: int,
        title: str | None = None,
    ) -> None:
        if title is not None:
            self.screen.blit(self.font.render(title, True, _TITLE), (x, y))
            y += self._line_h
        for line in lines:
            self.screen.blit(self.font.render(line, True, _TEXT), (x, y))
            y += self._line_h

    def _draw_inventory_panel(self) -> None:
        """Draw each actor's inventory and the key help to the right of the map."""
        lines = [*inventory_lines(self.engine.world), "", *HELP_LINES]
        self._draw_lines(lines, self._map_w + self._char_w, 0, title="INV")

    def _draw_debug_panel(self) -> None:
        """Draw the debug log under the map."""
        self._draw_lines(
            self.engine.world.debug_log.entries,
            0,
            self._map_h,
            title="DEBUG",
        )
