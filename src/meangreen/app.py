"""Command-line entry point: print the greedy move for a position."""

from __future__ import annotations

import argparse
import logging
import sys

from meangreen.core.notation import STARTING_FEN, board_from_fen, parse_color, side_from_fen
from meangreen.engine.search import SearchLimits
from meangreen.game.player import GreedyAIPlayer

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="meangreen",
        description="Select a greedy, king-safe move for a chess position.",
    )
    parser.add_argument(
        "--fen",
        default=STARTING_FEN,
        help="FEN record or bare piece placement (default: starting position)",
    )
    parser.add_argument(
        "--color",
        help="side to move: white/black (default: FEN side field, else white)",
    )
    parser.add_argument(
        "--time-limit-ms",
        type=int,
        default=SearchLimits().time_limit_ms,
        help="turn budget in milliseconds",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log search details")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        board = board_from_fen(args.fen)
        color = parse_color(args.color) if args.color else side_from_fen(args.fen)
    except ValueError as exc:
        _LOGGER.error("%s", exc)
        return 2

    player = GreedyAIPlayer(color, limits=SearchLimits(time_limit_ms=args.time_limit_ms))
    move = player.get_next_move(board)
    if move is None:
        print("turn expired")
        return 1
    if move.is_terminal:
        print("game over")
        return 0
    print(move.uci)
    return 0


if __name__ == "__main__":
    sys.exit(main())
