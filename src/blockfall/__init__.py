"""Falling-block puzzle engine."""

from .board import Board
from .commands import Command
from .config import GameConfig
from .game_state import GameState, Snapshot, Status
from .loop import GameLoop
from .spawner import Spawner
from .tetromino import Piece, Shape, shape_color, shape_offsets
from .transform import is_legal, rotate, translate
from .utils import render_grid

__all__ = [
    "Board",
    "Command",
    "GameConfig",
    "GameState",
    "GameLoop",
    "Piece",
    "Shape",
    "Snapshot",
    "Spawner",
    "Status",
    "is_legal",
    "render_grid",
    "rotate",
    "shape_color",
    "shape_offsets",
    "translate",
]
