"""Board representation for the playfield."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .config import HEIGHT, WIDTH
from .tetromino import Cell


Grid = NDArray[np.uint8]

# ``0`` marks an empty cell, so a board can hold at most 255 distinct colours.
MAX_COLORS = int(np.iinfo(np.uint8).max)


def create_empty_grid(width: int = WIDTH, height: int = HEIGHT) -> Grid:
    """Return a new empty board grid filled with zeros."""

    return np.zeros((height, width), dtype=np.uint8)


class Board:
    """Grid of locked cells.

    The grid is indexed ``[row, col]`` and stores small integers that refer to
    the board's colour palette.  Public methods take and return ``(col, row)``
    cells.
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        self.width = width
        self.height = height
        self.grid: Grid = create_empty_grid(width, height)
        self._palette: List[str] = []
        self._codes: Dict[str, int] = {}

    def in_bounds(self, cell: Cell) -> bool:
        """Return ``True`` if ``cell`` lies on the board."""

        col, row = cell
        return 0 <= col < self.width and 0 <= row < self.height

    def _check(self, cell: Cell) -> None:
        if not self.in_bounds(cell):
            raise IndexError(f"Cell {cell} out of bounds")

    def _code_for(self, color: str) -> int:
        code = self._codes.get(color)
        if code is None:
            if len(self._palette) >= MAX_COLORS:
                raise ValueError("Board colour palette is full")
            self._palette.append(color)
            code = len(self._palette)
            self._codes[color] = code
        return code

    def is_occupied(self, cell: Cell) -> bool:
        """Return ``True`` if ``cell`` holds a locked block.

        Raises:
            IndexError: If the cell is outside the board.
        """

        self._check(cell)
        col, row = cell
        return bool(self.grid[row, col] != 0)

    def color_at(self, cell: Cell) -> Optional[str]:
        """Return the colour locked at ``cell`` or ``None`` when empty."""

        self._check(cell)
        col, row = cell
        code = int(self.grid[row, col])
        return self._palette[code - 1] if code else None

    def is_row_full(self, row: int) -> bool:
        """Return ``True`` if every column of ``row`` holds a locked block.

        Raises:
            IndexError: If ``row`` is outside the board.
        """

        if not 0 <= row < self.height:
            raise IndexError(f"Row {row} out of bounds")
        return bool(np.all(self.grid[row] != 0))

    def lock_cells(self, cells: Iterable[Cell], color: str) -> None:
        """Lock ``cells`` into the grid with ``color``.

        Raises:
            IndexError: If any cell is outside the board.
            ValueError: If any cell is already locked.
        """

        coordinates = np.asarray(list(cells), dtype=np.int16).reshape(-1, 2)
        if coordinates.size == 0:
            return

        cols, rows = coordinates.T
        if (
            np.any(rows < 0)
            or np.any(rows >= self.height)
            or np.any(cols < 0)
            or np.any(cols >= self.width)
        ):
            raise IndexError("Block out of bounds")
        if np.any(self.grid[rows, cols] != 0):
            raise ValueError("Cannot lock over an occupied cell")

        self.grid[rows, cols] = np.uint8(self._code_for(color))

    def clear_row(self, row: int) -> None:
        """Remove ``row`` and shift every row above it down by one."""

        if not 0 <= row < self.height:
            raise IndexError(f"Row {row} out of bounds")
        self.grid[1 : row + 1] = self.grid[0:row].copy()
        self.grid[0] = 0

    def clear_completed_lines(self) -> int:
        """Clear full rows from the bottom up and return how many were removed.

        After a clear the rows above have moved into the same index, so that
        index is checked again before the scan continues upwards.
        """

        cleared = 0
        row = self.height - 1
        while row >= 0:
            if self.is_row_full(row):
                self.clear_row(row)
                cleared += 1
            else:
                row -= 1
        return cleared

    def locked_cells(self) -> List[Tuple[Cell, str]]:
        """Return every locked cell with its colour, ordered by row then column."""

        rows, cols = np.nonzero(self.grid)
        return [
            ((int(c), int(r)), self._palette[int(self.grid[r, c]) - 1])
            for r, c in zip(rows, cols)
        ]

    def clear(self) -> None:
        """Remove every locked cell and forget the colour palette."""

        self.grid = create_empty_grid(self.width, self.height)
        self._palette.clear()
        self._codes.clear()

    def copy(self) -> "Board":
        """Return an independent copy of the board and its palette."""

        other = Board(self.width, self.height)
        other.grid = self.grid.copy()
        other._palette = list(self._palette)
        other._codes = dict(self._codes)
        return other
