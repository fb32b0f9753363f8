"""Discrete inputs accepted by a game session."""

from __future__ import annotations

from enum import Enum


class Command(str, Enum):
    """Commands forwarded by front-ends, plus the timer's ``tick``."""

    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DROP = "soft_drop"
    HARD_DROP = "hard_drop"
    ROTATE = "rotate"
    RESET = "reset"
    TICK = "tick"
