import threading

import pytest

from blockfall.commands import Command
from blockfall.config import GameConfig
from blockfall.game_state import GameState
from blockfall.loop import GameLoop
from blockfall.tetromino import Shape


def _loop(tick_ms=500) -> GameLoop:
    return GameLoop(GameState(GameConfig(seed=2)), tick_ms=tick_ms)


def test_commands_are_applied_in_submission_order():
    loop = _loop()
    piece = loop.state.spawn_piece(Shape.O, 4)
    loop.submit(Command.MOVE_LEFT)
    loop.submit("move_left")
    loop.submit(Command.MOVE_RIGHT)
    assert piece.pivot == (4, 0)

    assert loop.pump() == 3
    assert piece.pivot == (3, 0)
    assert loop.pump() == 0


def test_advance_queues_one_tick_per_interval():
    loop = _loop()
    piece = loop.state.spawn_piece(Shape.O, 4)
    assert loop.advance(1200) == 2
    assert loop.drop_accum == pytest.approx(200)
    assert loop.advance(299) == 0
    assert loop.advance(1) == 1
    loop.pump()
    assert piece.pivot == (4, 3)


def test_reset_zeroes_the_tick_accumulator():
    loop = _loop()
    loop.advance(400)
    loop.submit(Command.RESET)
    loop.pump()
    assert loop.drop_accum == 0


def test_snapshot_published_after_every_transition():
    loop = _loop()
    loop.state.spawn_piece(Shape.O, 4)
    seen = []
    loop.subscribe(seen.append)

    loop.submit(Command.HARD_DROP)
    loop.submit(Command.ROTATE)
    loop.pump()

    assert len(seen) == 2
    assert seen[0].pieces == 1
    assert loop.snapshot is seen[-1]
    assert ((4, 19), "yellow") in loop.snapshot.locked


def test_unknown_command_rejected_on_submit():
    loop = _loop()
    with pytest.raises(ValueError):
        loop.submit("jump")


def test_non_positive_tick_interval_rejected():
    with pytest.raises(ValueError):
        GameLoop(GameState(), tick_ms=0)


def test_submissions_from_several_threads_are_all_applied():
    loop = _loop()
    loop.state.spawn_piece(Shape.I, 0)

    def feed():
        for _ in range(25):
            loop.submit(Command.ROTATE)

    threads = [threading.Thread(target=feed) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert loop.pump() == 100


def test_run_converts_clock_time_into_ticks():
    loop = _loop()
    piece = loop.state.spawn_piece(Shape.O, 4)
    stop = threading.Event()
    times = iter([0.0, 0.25, 0.5, 0.75, 1.0, 1.25])
    sleeps = []

    def fake_sleep(seconds):
        sleeps.append(seconds)
        if len(sleeps) == 4:
            stop.set()

    loop.run(stop, clock=lambda: next(times), sleep=fake_sleep)

    assert len(sleeps) == 4
    assert piece.pivot == (4, 2)
