"""Configuration for a game session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .tetromino import Shape, shape_width


# Dimensions of the standard playfield.
WIDTH = 10
HEIGHT = 20

# Milliseconds between automatic downward moves.
TICK_MS = 500

POINTS_PER_LINE = 10

# Narrowest board on which every shape can spawn.
MIN_WIDTH = max(shape_width(shape) for shape in Shape)


@dataclass(frozen=True)
class GameConfig:
    """Tunable parameters shared by the board, spawner and session.

    Raises:
        ValueError: If the board is narrower than the widest shape, the height
            or the tick interval is not positive, or the score per line is
            negative.
    """

    width: int = WIDTH
    height: int = HEIGHT
    tick_ms: int = TICK_MS
    points_per_line: int = POINTS_PER_LINE
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width < MIN_WIDTH:
            raise ValueError(f"Board must be at least {MIN_WIDTH} columns wide, got {self.width}")
        if self.height <= 0:
            raise ValueError(f"Board height must be positive, got {self.height}")
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.points_per_line < 0:
            raise ValueError("points_per_line cannot be negative")
