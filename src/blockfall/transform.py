"""Candidate cell computation and collision checks.

All functions are pure: they take the active piece's current cells and return
new candidates, leaving both the piece and the board untouched.  Callers decide
what an illegal candidate means (no-op for sideways moves and rotation, lock
signal for downward moves).
"""

from __future__ import annotations

import math
from typing import Iterable, List, Optional

import numpy as np

from .board import Board
from .tetromino import Cell


def translate(cells: Iterable[Cell], delta: Cell) -> List[Cell]:
    """Return ``cells`` shifted by ``(dcol, drow)``."""

    dc, dr = delta
    return [(col + dc, row + dr) for col, row in cells]


def rotate(cells: Iterable[Cell], pivot: Cell, angle: float) -> List[Cell]:
    """Return ``cells`` rotated by ``angle`` radians about ``pivot``.

    Each cell is rotated with the matrix ``[[cos, -sin], [sin, cos]]`` and both
    axes are rounded to the nearest integer independently (halves round up).
    The rounding is lossy for angles that are not multiples of 90 degrees and
    two cells may collapse onto one; the result is returned as computed.
    """

    coords = np.asarray(list(cells), dtype=np.float64).reshape(-1, 2)
    if coords.size == 0:
        return []
    origin = np.asarray(pivot, dtype=np.float64)
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    matrix = np.array([[cos_a, -sin_a], [sin_a, cos_a]])
    rotated = (coords - origin) @ matrix.T
    snapped = np.floor(rotated + 0.5).astype(np.int64) + np.asarray(pivot, dtype=np.int64)
    return [(int(col), int(row)) for col, row in snapped]


def is_legal(
    cells: Iterable[Cell],
    board: Board,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> bool:
    """Return ``True`` if every cell is on the board and none is locked.

    ``width`` and ``height`` default to the board's own dimensions.
    """

    width = board.width if width is None else width
    height = board.height if height is None else height
    for col, row in cells:
        if not (0 <= col < width and 0 <= row < height):
            return False
        if not board.in_bounds((col, row)) or board.is_occupied((col, row)):
            return False
    return True
