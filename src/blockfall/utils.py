"""Helpers for text front-ends."""

from __future__ import annotations

from typing import List

from .game_state import Snapshot


EMPTY = "."
LOCKED = "#"
ACTIVE = "@"


def render_grid(snapshot: Snapshot) -> List[str]:
    """Return the snapshot as one string per row.

    Locked cells are drawn as ``#`` and the active piece as ``@`` on top of
    them, which makes an overlapping spawn at game over visible.
    """

    grid = [[EMPTY] * snapshot.width for _ in range(snapshot.height)]
    for (col, row), _ in snapshot.locked:
        grid[row][col] = LOCKED
    for col, row in snapshot.active_cells:
        if 0 <= row < snapshot.height and 0 <= col < snapshot.width:
            grid[row][col] = ACTIVE
    return ["".join(row) for row in grid]
