"""Grid - the fixed-size 2D array of cells.

The grid is overwritten wholesale by the terrain generator and then
mutated cell-by-cell by the interaction rules.  It knows nothing about
actors beyond the slot cells stamped into it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from quarry.world.cell import EMPTY, WALL, Cell, CellKind


@dataclass
class Grid:
    """A rectangular grid of cells.

    Attributes:
        width: Number of columns in the grid.
        height: Number of rows in the grid.
        cells: 2D list of Cell values indexed as ``cells[y][x]``.
    """

    width: int
    height: int
    cells: list[list[Cell]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Initialise the grid with empty cells."""
        self.cells = [[EMPTY for _ in range(self.width)] for _ in range(self.height)]

    def in_bounds(self, x: int, y: int) -> bool:
        """Return True if ``(x, y)`` lies anywhere on the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def in_interior(self, x: int, y: int) -> bool:
        """Return True if ``(x, y)`` lies strictly inside the wall ring."""
        return 0 < x < self.width - 1 and 0 < y < self.height - 1

    def cell_at(self, x: int, y: int) -> Cell:
        """Return the cell at grid coordinates ``(x, y)``.

        Args:
            x: Column index.
            y: Row index.

        Raises:
            IndexError: If coordinates are out of bounds.
        """
        if not self.in_bounds(x, y):
            msg = f"({x}, {y}) out of bounds for {self.width}x{self.height}"
            raise IndexError(msg)
        return self.cells[y][x]

    def set_cell(self, x: int, y: int, cell: Cell) -> None:
        """Replace the cell at ``(x, y)``.

        Raises:
            IndexError: If coordinates are out of bounds.
        """
        if not self.in_bounds(x, y):
            msg = f"({x}, {y}) out of bounds for {self.width}x{self.height}"
            raise IndexError(msg)
        self.cells[y][x] = cell

    def fill(self, cell: Cell) -> None:
        """Set every cell on the grid to ``cell``."""
        for row in self.cells:
            for x in range(self.width):
                row[x] = cell

    def stamp_border(self) -> None:
        """Set the outer ring (first/last row and column) to Wall."""
        for x, y in self.border_coords():
            self.cells[y][x] = WALL

    def border_coords(self) -> list[tuple[int, int]]:
        """Return every coordinate on the outer ring."""
        coords = [(x, y) for x in range(self.width) for y in (0, self.height - 1)]
        coords += [(x, y) for y in range(1, self.height - 1) for x in (0, self.width - 1)]
        return coords

    def neighbourhood(self, x: int, y: int) -> list[tuple[int, int]]:
        """Return the 3x3 block centred on ``(x, y)``, clipped to the interior.

        The centre itself is included when it is an interior cell.

        Args:
            x: Centre column.
            y: Centre row.

        Returns:
            List of ``(x, y)`` coordinates.
        """
        result: list[tuple[int, int]] = []
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                nx, ny = x + dx, y + dy
                if self.in_interior(nx, ny):
                    result.append((nx, ny))
        return result

    def count(self, kind: CellKind) -> int:
        """Return how many cells on the grid are of ``kind``."""
        return sum(1 for row in self.cells for cell in row if cell.kind is kind)
