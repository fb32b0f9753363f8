import random

import pytest

from blockfall.config import WIDTH
from blockfall.spawner import Spawner
from blockfall.tetromino import Shape


def test_spawned_pieces_start_on_the_top_row_inside_the_board():
    spawner = Spawner(seed=7)
    for _ in range(200):
        piece = spawner.spawn()
        rows = [row for _, row in piece.cells]
        cols = [col for col, _ in piece.cells]
        assert min(rows) == 0
        assert all(0 <= col < WIDTH for col in cols)
        assert len(set(piece.cells)) == 4


def test_every_shape_and_shift_is_reachable():
    spawner = Spawner(rng=random.Random(0))
    shapes = set()
    shifts = set()
    for _ in range(2000):
        piece = spawner.spawn()
        shapes.add(piece.shape)
        if piece.shape is Shape.I:
            shifts.add(piece.cells[0][0])
    assert shapes == set(Shape)
    assert shifts == set(range(WIDTH))


def test_seed_makes_spawns_repeatable():
    first, second = Spawner(seed=3), Spawner(seed=3)
    assert [first.spawn() for _ in range(5)] == [second.spawn() for _ in range(5)]


def test_explicit_shape_and_shift():
    spawner = Spawner()
    piece = spawner.spawn(Shape.O, 4)
    assert sorted(piece.cells) == [(4, 0), (4, 1), (5, 0), (5, 1)]

    tall = spawner.spawn(Shape.I, 9)
    assert sorted(tall.cells) == [(9, 0), (9, 1), (9, 2), (9, 3)]

    l_piece = spawner.spawn(Shape.L, 0)
    assert {row for _, row in l_piece.cells} == {0, 1, 2}
    assert l_piece.pivot == (0, 1)

    t_piece = spawner.spawn(Shape.T, 0)
    assert sorted(t_piece.cells) == [(0, 0), (1, 0), (1, 1), (2, 0)]


def test_shift_out_of_range_raises():
    spawner = Spawner()
    assert spawner.max_shift(Shape.T) == WIDTH - 3
    with pytest.raises(ValueError):
        spawner.spawn(Shape.T, WIDTH - 2)
    with pytest.raises(ValueError):
        spawner.spawn(Shape.I, -1)


def test_narrow_board_rejects_wide_shape():
    with pytest.raises(ValueError):
        Spawner(width=2).spawn(Shape.T)
