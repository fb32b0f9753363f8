"""Tetromino catalog and the active piece.

Shapes are plain data: every :class:`Shape` maps to four ``(dcol, drow)``
offsets around a pivot cell plus a colour tag.  Nothing here knows about the
board; placement and collision live in :mod:`blockfall.spawner` and
:mod:`blockfall.transform`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

Cell = Tuple[int, int]  # (col, row)
Offsets = Tuple[Cell, Cell, Cell, Cell]


class Shape(str, Enum):
    """Enumeration of the seven standard tetromino shapes."""

    I = "I"
    O = "O"
    T = "T"
    S = "S"
    Z = "Z"
    J = "J"
    L = "L"


# Offsets are relative to the pivot, rows grow downwards.  The pivot is the
# fixed centre used by rotation.
_OFFSETS: Dict[Shape, Offsets] = {
    Shape.I: ((0, -1), (0, 0), (0, 1), (0, 2)),
    Shape.O: ((0, 0), (1, 0), (0, 1), (1, 1)),
    Shape.T: ((-1, 0), (0, 0), (1, 0), (0, 1)),
    Shape.S: ((0, 0), (1, 0), (-1, 1), (0, 1)),
    Shape.Z: ((-1, 0), (0, 0), (0, 1), (1, 1)),
    Shape.J: ((0, -1), (0, 0), (0, 1), (-1, 1)),
    Shape.L: ((0, -1), (0, 0), (0, 1), (1, 1)),
}

_COLORS: Dict[Shape, str] = {
    Shape.I: "cyan",
    Shape.O: "yellow",
    Shape.T: "purple",
    Shape.S: "green",
    Shape.Z: "red",
    Shape.J: "blue",
    Shape.L: "orange",
}


def shape_offsets(shape: Shape) -> Offsets:
    """Return the four pivot-relative offsets for ``shape``."""

    return _OFFSETS[shape]


def shape_color(shape: Shape) -> str:
    """Return the colour tag used when ``shape`` is drawn or locked."""

    return _COLORS[shape]


def shape_width(shape: Shape) -> int:
    """Return the number of columns spanned by ``shape`` in spawn orientation."""

    cols = [dc for dc, _ in _OFFSETS[shape]]
    return max(cols) - min(cols) + 1


@dataclass
class Piece:
    """Active falling piece in the game.

    ``cells`` is authoritative: rotation is applied to the current cells rather
    than recomputed from the catalog, so rounding effects accumulate exactly as
    the player sees them.
    """

    shape: Shape
    pivot: Cell
    cells: Tuple[Cell, ...]

    @classmethod
    def at(cls, shape: Shape, pivot: Cell) -> "Piece":
        """Build a piece of ``shape`` in spawn orientation around ``pivot``."""

        col, row = pivot
        cells = tuple((col + dc, row + dr) for dc, dr in shape_offsets(shape))
        return cls(shape, pivot, cells)

    @property
    def color(self) -> str:
        """Colour tag of the piece's shape."""

        return shape_color(self.shape)

    def commit(self, cells, pivot: Optional[Cell] = None) -> None:
        """Replace the cached cells and, when given, the pivot."""

        self.cells = tuple(cells)
        if pivot is not None:
            self.pivot = pivot
