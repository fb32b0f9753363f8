import pytest

pygame = pytest.importorskip("pygame")

from blockfall.commands import Command
from blockfall.config import GameConfig
from blockfall.game_state import GameState
from blockfall.loop import GameLoop
from blockfall.run_pygame import (
    CELL_SIZE,
    TAG_COLORS,
    GameRunner,
    caption,
    command_for_key,
    draw_snapshot,
)
from blockfall.tetromino import Shape


def _pixel(surface, col, row):
    x = col * CELL_SIZE + CELL_SIZE // 2
    y = row * CELL_SIZE + CELL_SIZE // 2
    return tuple(surface.get_at((x, y)))[:3]


def test_key_bindings():
    assert command_for_key(pygame.K_LEFT) is Command.MOVE_LEFT
    assert command_for_key(pygame.K_RIGHT) is Command.MOVE_RIGHT
    assert command_for_key(pygame.K_DOWN) is Command.SOFT_DROP
    assert command_for_key(pygame.K_UP) is Command.ROTATE
    assert command_for_key(pygame.K_SPACE) is Command.HARD_DROP
    assert command_for_key(pygame.K_r) is Command.RESET
    assert command_for_key(pygame.K_a) is None


def test_draw_snapshot_paints_locked_and_active_cells():
    state = GameState(GameConfig(seed=0))
    state.board.lock_cells([(0, 19)], "red")
    state.spawn_piece(Shape.O, 4)
    snapshot = state.snapshot()
    surface = pygame.Surface((snapshot.width * CELL_SIZE, snapshot.height * CELL_SIZE))

    draw_snapshot(surface, snapshot)

    assert _pixel(surface, 0, 19) == TAG_COLORS["red"]
    assert _pixel(surface, 4, 0) == TAG_COLORS["yellow"]
    assert _pixel(surface, 9, 10) == (0, 0, 0)


def test_key_events_are_forwarded_to_the_loop():
    loop = GameLoop(GameState(GameConfig(seed=0)))
    piece = loop.state.spawn_piece(Shape.O, 4)
    runner = GameRunner(loop)

    runner.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT))
    runner.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))
    assert loop.pump() == 1
    assert piece.pivot == (3, 0)


def test_caption_shows_score():
    state = GameState(GameConfig(seed=0))
    state.score = 30
    assert caption(state.snapshot()) == "Blockfall - Score: 30"
