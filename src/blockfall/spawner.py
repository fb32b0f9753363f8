"""Random selection and placement of new pieces."""

from __future__ import annotations

import random
from typing import Optional

from .config import WIDTH
from .tetromino import Piece, Shape, shape_offsets, shape_width


class Spawner:
    """Produce new active pieces at the top of the board.

    Shapes are drawn uniformly from the catalog and shifted uniformly across
    every column range that keeps the piece on the board.  The spawner never
    looks at locked cells; detecting a blocked spawn is the session's job.
    """

    def __init__(
        self,
        width: int = WIDTH,
        *,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.width = width
        self._rng = rng or random.Random(seed)

    def _random_shape(self) -> Shape:
        return self._rng.choice(list(Shape))

    def max_shift(self, shape: Shape) -> int:
        """Return the largest column shift that keeps ``shape`` on the board."""

        return self.width - shape_width(shape)

    def spawn(self, shape: Optional[Shape] = None, shift: Optional[int] = None) -> Piece:
        """Return a new piece whose topmost cell sits on row 0.

        Parameters
        ----------
        shape:
            Force a particular shape instead of drawing one at random.
        shift:
            Column of the piece's leftmost cell.  Drawn at random when omitted.

        Raises:
            ValueError: If ``shift`` would place part of the piece off the board.
        """

        if shape is None:
            shape = self._random_shape()
        limit = self.max_shift(shape)
        if limit < 0:
            raise ValueError(f"Board width {self.width} is too narrow for shape {shape.value}")
        if shift is None:
            shift = self._rng.randint(0, limit)
        elif not 0 <= shift <= limit:
            raise ValueError(f"Shift {shift} out of range 0..{limit} for shape {shape.value}")

        offsets = shape_offsets(shape)
        min_dc = min(dc for dc, _ in offsets)
        min_dr = min(dr for _, dr in offsets)
        return Piece.at(shape, (shift - min_dc, -min_dr))
