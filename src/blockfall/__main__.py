"""Simple ASCII demo for the engine.

Run with: `python -m blockfall --seed 3 --commands rotate,hard_drop`

Applies the given commands to a fresh session and prints the resulting frame,
useful as a smoke test that the board, the active piece and the score all make
it into a snapshot.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from .commands import Command
from .config import HEIGHT, WIDTH, GameConfig
from .game_state import GameState, Status
from .loop import GameLoop
from .utils import render_grid


def _command_list(text: str) -> List[Command]:
    names = [part.strip() for part in text.split(",") if part.strip()]
    try:
        return [Command(name) for name in names]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="blockfall", description=__doc__.splitlines()[0])
    parser.add_argument("--seed", type=int, default=None, help="Seed for the piece spawner")
    parser.add_argument("--width", type=int, default=WIDTH)
    parser.add_argument("--height", type=int, default=HEIGHT)
    parser.add_argument(
        "--commands",
        type=_command_list,
        default=[],
        help="Comma separated commands, e.g. move_left,rotate,hard_drop",
    )
    parser.add_argument("--verbose", action="store_true", help="Log game events")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config = GameConfig(width=args.width, height=args.height, seed=args.seed)
    loop = GameLoop(GameState(config))
    for command in args.commands:
        loop.submit(command)
    loop.pump()

    snapshot = loop.snapshot
    for line in render_grid(snapshot):
        print(line)
    print(f"score: {snapshot.score}")
    if snapshot.status is Status.GAME_OVER:
        print("game over")


if __name__ == "__main__":
    main()
