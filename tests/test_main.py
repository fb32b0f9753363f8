import pytest

from blockfall.__main__ import main
from blockfall.config import GameConfig
from blockfall.game_state import GameState
from blockfall.tetromino import Shape
from blockfall.utils import render_grid


def test_render_grid_marks_locked_and_active_cells():
    state = GameState(GameConfig(width=4, height=3, seed=0))
    state.board.lock_cells([(0, 2), (3, 2)], "red")
    state.spawn_piece(Shape.I, 1)
    # I is taller than this board; only on-board cells are drawn.
    assert render_grid(state.snapshot()) == [".@..", ".@..", "#@.#"]


def test_main_prints_frame_and_score(capsys):
    main(["--seed", "1", "--commands", "hard_drop"])
    out = capsys.readouterr().out.splitlines()

    assert len(out) == 21
    assert out[-1] == "score: 0"
    frame = "".join(out[:-1])
    assert frame.count("#") == 4
    assert frame.count("@") == 4


def test_main_custom_board(capsys):
    main(["--width", "6", "--height", "8", "--seed", "4"])
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 9
    assert all(len(line) == 6 for line in out[:-1])


def test_main_rejects_unknown_commands(capsys):
    with pytest.raises(SystemExit):
        main(["--commands", "hard_drop,fly"])
    assert "fly" in capsys.readouterr().err
