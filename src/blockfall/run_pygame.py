"""Simple pygame front-end for the engine.

The window only reads snapshots and forwards key presses as commands to a
:class:`~blockfall.loop.GameLoop`; all game rules live in the core modules.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, Optional

import pygame

from .commands import Command
from .game_state import GameState, Snapshot, Status
from .loop import GameLoop

LOGGER = logging.getLogger(__name__)

# Size of a single board cell in pixels
CELL_SIZE = 30
# Frames per second to run the game loop at
FPS = 60

BACKGROUND = (0, 0, 0)
GRID_LINE = (50, 50, 50)

# RGB values for the colour tags used by the catalog
TAG_COLORS: Dict[str, tuple[int, int, int]] = {
    "cyan": (0, 255, 255),
    "yellow": (255, 255, 0),
    "purple": (128, 0, 128),
    "green": (0, 255, 0),
    "red": (255, 0, 0),
    "blue": (0, 0, 255),
    "orange": (255, 165, 0),
}
UNKNOWN_TAG = (200, 200, 200)

KEY_BINDINGS: Dict[int, Command] = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_UP: Command.ROTATE,
    pygame.K_SPACE: Command.HARD_DROP,
    pygame.K_r: Command.RESET,
}


def command_for_key(key: int) -> Optional[Command]:
    """Return the command bound to ``key`` or ``None`` if unbound."""

    return KEY_BINDINGS.get(key)


def _draw_cell(screen: pygame.Surface, col: int, row: int, color) -> None:
    rect = pygame.Rect(col * CELL_SIZE, row * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect)
    pygame.draw.rect(screen, GRID_LINE, rect, 1)


def draw_snapshot(screen: pygame.Surface, snapshot: Snapshot) -> None:
    """Render locked cells and the active piece from ``snapshot``."""

    screen.fill(BACKGROUND)
    for (col, row), tag in snapshot.locked:
        _draw_cell(screen, col, row, TAG_COLORS.get(tag, UNKNOWN_TAG))
    if snapshot.active_color is not None:
        color = TAG_COLORS.get(snapshot.active_color, UNKNOWN_TAG)
        for col, row in snapshot.active_cells:
            _draw_cell(screen, col, row, color)


def caption(snapshot: Snapshot) -> str:
    suffix = " - Game over" if snapshot.status is Status.GAME_OVER else ""
    return f"Blockfall - Score: {snapshot.score}{suffix}"


class GameRunner:
    """Own the pygame window and pump a :class:`GameLoop` once per frame."""

    def __init__(self, loop: Optional[GameLoop] = None) -> None:
        self.loop = loop or GameLoop(GameState())
        self._running = False
        self._screen: Optional[pygame.Surface] = None
        self._clock: Optional[pygame.time.Clock] = None

    @property
    def running(self) -> bool:
        return self._running

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self._running = False
        elif event.type == pygame.KEYDOWN:
            command = command_for_key(event.key)
            if command is not None:
                self.loop.submit(command)

    async def _run_loop(self) -> None:
        pygame.init()
        snapshot = self.loop.snapshot
        self._screen = pygame.display.set_mode(
            (snapshot.width * CELL_SIZE, snapshot.height * CELL_SIZE)
        )
        self._clock = pygame.time.Clock()
        LOGGER.info("Game started")

        self._running = True
        while self._running:
            dt = self._clock.tick(FPS)
            for event in pygame.event.get():
                self.handle_event(event)
            self.loop.advance(dt)
            self.loop.pump()

            snapshot = self.loop.snapshot
            draw_snapshot(self._screen, snapshot)
            pygame.display.set_caption(caption(snapshot))
            pygame.display.flip()

            # Yield to the host event loop to keep the UI responsive
            await asyncio.sleep(0)

        pygame.quit()
        LOGGER.info("Game stopped")

    def start(self) -> None:
        asyncio.run(self._run_loop())

    def stop(self) -> None:
        self._running = False


def main() -> None:  # pragma: no cover - manual execution only
    logging.basicConfig(level=logging.INFO)
    GameRunner().start()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
