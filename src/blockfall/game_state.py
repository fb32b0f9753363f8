"""Game session: the active piece, the board, the score and their transitions."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union

from .board import Board
from .commands import Command
from .config import GameConfig
from .spawner import Spawner
from .tetromino import Cell, Piece, Shape
from .transform import is_legal, rotate, translate


LOGGER = logging.getLogger(__name__)

ROTATION_ANGLE = math.pi / 2

DOWN: Cell = (0, 1)
LEFT: Cell = (-1, 0)
RIGHT: Cell = (1, 0)


class Status(str, Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a session handed to renderers after each transition."""

    width: int
    height: int
    locked: Tuple[Tuple[Cell, str], ...]
    active_cells: Tuple[Cell, ...]
    active_color: Optional[str]
    active_shape: Optional[Shape]
    score: int
    lines: int
    pieces: int
    status: Status


@dataclass
class GameState:
    """Mutable state for a single game session.

    Every public transition runs to completion synchronously.  Callers that
    feed commands from several sources must serialise them, see
    :class:`blockfall.loop.GameLoop`.
    """

    config: GameConfig = field(default_factory=GameConfig)
    board: Board = field(init=False)
    spawner: Spawner = field(init=False)
    active: Optional[Piece] = field(init=False, default=None)
    score: int = field(init=False, default=0)
    lines: int = field(init=False, default=0)
    pieces: int = field(init=False, default=0)
    status: Status = field(init=False, default=Status.RUNNING)

    def __post_init__(self) -> None:
        self.board = Board(self.config.width, self.config.height)
        self.spawner = Spawner(self.config.width, seed=self.config.seed)
        self.spawn_piece()

    @property
    def running(self) -> bool:
        """``True`` until a spawned piece overlaps locked cells."""

        return self.status is Status.RUNNING

    def spawn_piece(self, shape: Optional[Shape] = None, shift: Optional[int] = None) -> Piece:
        """Spawn and return a new active piece.

        If the new piece overlaps locked cells the session is over; the piece
        is kept so the final frame can still be drawn.
        """

        self.active = self.spawner.spawn(shape, shift)
        if not is_legal(self.active.cells, self.board):
            self.status = Status.GAME_OVER
            LOGGER.info(
                "Game over: %s spawned onto locked cells. Final score %d",
                self.active.shape.value,
                self.score,
            )
        return self.active

    # Transitions -------------------------------------------------------
    def _shift(self, delta: Cell) -> bool:
        if not self.running or self.active is None:
            return False
        candidate = translate(self.active.cells, delta)
        if not is_legal(candidate, self.board):
            return False
        col, row = self.active.pivot
        self.active.commit(candidate, (col + delta[0], row + delta[1]))
        return True

    def _lock_active(self) -> int:
        """Lock the active piece, clear lines, score them and spawn the next piece."""

        piece = self.active
        assert piece is not None
        self.board.lock_cells(piece.cells, piece.color)
        self.pieces += 1
        LOGGER.debug("Locked %s at %s", piece.shape.value, sorted(piece.cells))

        cleared = self.board.clear_completed_lines()
        if cleared:
            self.lines += cleared
            self.score += cleared * self.config.points_per_line
            LOGGER.info("Cleared %d row(s). Score: %d", cleared, self.score)

        self.spawn_piece()
        return cleared

    def soft_drop(self) -> bool:
        """Move the piece down one row, locking it when it cannot fall.

        Returns ``True`` if the piece moved and ``False`` if it locked (or the
        game is over).
        """

        if not self.running or self.active is None:
            return False
        if self._shift(DOWN):
            return True
        self._lock_active()
        return False

    def tick(self) -> bool:
        """Gravity step; identical to :meth:`soft_drop`."""

        return self.soft_drop()

    def move_left(self) -> bool:
        """Shift the piece one column left; returns ``False`` if blocked."""

        return self._shift(LEFT)

    def move_right(self) -> bool:
        """Shift the piece one column right; returns ``False`` if blocked."""

        return self._shift(RIGHT)

    def rotate(self) -> bool:
        """Rotate the piece 90 degrees about its pivot if the result is legal."""

        if not self.running or self.active is None:
            return False
        candidate = rotate(self.active.cells, self.active.pivot, ROTATION_ANGLE)
        if not is_legal(candidate, self.board):
            return False
        self.active.commit(candidate)
        return True

    def hard_drop(self) -> int:
        """Drop the piece to rest, lock it and return the number of rows fallen."""

        if not self.running or self.active is None:
            return 0
        dropped = 0
        while self._shift(DOWN):
            dropped += 1
        self._lock_active()
        return dropped

    def reset(self) -> None:
        """Reset the entire session for a new game."""

        self.board.clear()
        self.score = 0
        self.lines = 0
        self.pieces = 0
        self.status = Status.RUNNING
        self.active = None
        self.spawn_piece()
        LOGGER.info("Game reset")

    def apply(self, command: Union[Command, str]) -> None:
        """Dispatch ``command`` to the matching transition.

        Raises:
            ValueError: If ``command`` is not a known command name.
        """

        command = Command(command)
        handlers = {
            Command.MOVE_LEFT: self.move_left,
            Command.MOVE_RIGHT: self.move_right,
            Command.SOFT_DROP: self.soft_drop,
            Command.HARD_DROP: self.hard_drop,
            Command.ROTATE: self.rotate,
            Command.RESET: self.reset,
            Command.TICK: self.tick,
        }
        handlers[command]()

    def snapshot(self) -> Snapshot:
        """Return a read-only copy of the board, active piece and score."""

        piece = self.active
        return Snapshot(
            width=self.board.width,
            height=self.board.height,
            locked=tuple(self.board.locked_cells()),
            active_cells=tuple(piece.cells) if piece else (),
            active_color=piece.color if piece else None,
            active_shape=piece.shape if piece else None,
            score=self.score,
            lines=self.lines,
            pieces=self.pieces,
            status=self.status,
        )
