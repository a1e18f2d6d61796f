"""
Terminal front end. Stands in for a graphical presentation layer: it renders
snapshots, forwards gestures to the engine and owns all display pacing.
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import Callable, List, Optional

from loguru import logger

from .board import render_text
from .config import config
from .dice import RandomDice, ScriptedDice
from .errors import InvariantViolation
from .game import Game
from .messages import describe, status_line

HELP = (
    "Commands: r = roll, 0-3 = move token, x,y = move token on cell, "
    "b = board, n = new game, h = help, q = quit"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play four-player Ludo in the terminal")
    parser.add_argument(
        "--seed",
        type=int,
        default=config.SEED,
        help="Seed for the dice (env LUDO_SEED)",
    )
    parser.add_argument(
        "--dice",
        type=str,
        default=None,
        help="Comma separated dice values to replay instead of random rolls",
    )
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Skip the roll animation and turn pauses",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=config.LOG_LEVEL,
        help="Log level for engine messages on stderr (env LUDO_LOG_LEVEL)",
    )
    return parser


def parse_dice(raw: str) -> List[int]:
    return [int(v) for v in raw.split(",") if v.strip()]


def _pause(ms: int, enabled: bool) -> None:
    if enabled and ms > 0:
        time.sleep(ms / 1000.0)


def _parse_cell(command: str) -> Optional[tuple]:
    parts = command.split(",")
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def run(
    game: Game,
    read: Optional[Callable[[str], str]] = None,
    write: Optional[Callable[[str], None]] = None,
    delays: bool = True,
) -> None:
    read = read or input
    write = write or print
    write(HELP)
    write(render_text(game.get_snapshot()))
    write(status_line(game.get_snapshot()))

    while True:
        try:
            command = read("> ").strip().lower()
        except EOFError:
            break
        if not command:
            continue
        if command == "q":
            break
        if command == "h":
            write(HELP)
            continue
        if command == "b":
            write(render_text(game.get_snapshot()))
            continue
        if command == "n":
            game.reset()
            write(render_text(game.get_snapshot()))
            write(status_line(game.get_snapshot()))
            continue

        mover = game.state.current_player
        if command == "r":
            write("Rolling...")
            _pause(config.ROLL_TICKS * config.ROLL_TICK_MS, delays)
            result = game.request_roll()
            write(describe(result, mover))
            if result.accepted and not result.has_moves:
                _pause(config.NO_MOVE_DELAY_MS, delays)
        elif command.isdigit():
            try:
                result = game.select_token(int(command))
            except InvariantViolation as e:
                write(f"Unknown token: {e}")
                continue
            write(describe(result, mover))
            if result.accepted:
                _pause(config.MOVE_DELAY_MS, delays)
        else:
            cell = _parse_cell(command)
            if cell is None:
                write(HELP)
                continue
            result = game.select_cell(cell)
            write(describe(result, mover))
            if result.accepted:
                _pause(config.MOVE_DELAY_MS, delays)

        snapshot = game.get_snapshot()
        if result.accepted:
            write(render_text(snapshot))
        write(status_line(snapshot))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())

    if args.dice:
        dice = ScriptedDice(parse_dice(args.dice))
    else:
        dice = RandomDice(args.seed)
    game = Game(dice=dice)

    try:
        run(game, delays=not args.no_delay)
    except InvariantViolation as e:
        # Scripted dice ran out or a replay went off the rails.
        logger.error(f"Stopped: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
