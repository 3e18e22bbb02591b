"""
Command-line entry point: gsqsolve.

Usage:
    gsqsolve C4 B1 E5 A6 D2 C5 A5    # solve a given set of blockers
    gsqsolve --random [COUNT]        # roll the dice and solve
    gsqsolve --verify-all            # check every possible roll
"""

import argparse
import logging
import random
import sys

from . import config
from .board import Board
from .conversion_utils import BlockerInputError, format_mask
from .dices import random_blockers
from .solver import SolveStats, solve_board, solve_puzzle
from .verify import verify_all_possible_rolls
from .viz import format_board, render_svg

logger = logging.getLogger(__name__)

# Exit codes (sysexits.h where one applies)
EX_OK = 0
EX_NO_SOLUTION = 1
EX_USAGE = 64
EX_SOFTWARE = 70


class _ArgumentParser(argparse.ArgumentParser):
    """argparse exits with 2 on bad arguments; use EX_USAGE instead."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EX_USAGE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="gsqsolve",
        description="Solve Genius Square puzzles.",
    )
    parser.add_argument(
        "positions", nargs="*", metavar="POS",
        help="the 7 blocker positions, e.g. C4 B1 E5 A6 D2 C5 A5",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--random", nargs="?", const=1, type=int, metavar="COUNT",
        help="solve COUNT randomly rolled boards (default 1)",
    )
    mode.add_argument(
        "--verify-all", action="store_true",
        help="check that every possible dice roll has a solution",
    )
    parser.add_argument("--seed", type=int, help="random seed for --random")
    parser.add_argument("--plain", action="store_true", help="print digits instead of colors")
    parser.add_argument("--svg", metavar="FILE", help="also write the last solved board as SVG")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.LOG_LEVEL,
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATEFMT,
    )


def show(board: Board, args: argparse.Namespace) -> None:
    print(format_board(board, color=not args.plain))
    if args.svg:
        render_svg(board, args.svg)
        logger.info("SVG saved to %s", args.svg)


def run_positions(args, parser) -> int:
    stats = SolveStats()
    try:
        board = solve_puzzle(args.positions, stats)
    except BlockerInputError as e:
        for problem in e.problems:
            print(f"{parser.prog}: {problem}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return EX_USAGE

    logger.debug("%s", stats)
    if board is None:
        print("No solution.")
        return EX_NO_SOLUTION
    show(board, args)
    return EX_OK


def run_random(args) -> int:
    rng = random.Random(args.seed)
    status = EX_OK
    for i in range(args.random):
        if i:
            print()
        blockers = random_blockers(rng)
        board = solve_board(blockers)
        if board is None:
            # Every real roll is solvable, so this is a bug
            logger.error("Couldn't solve board %s", format_mask(blockers))
            status = EX_SOFTWARE
            continue
        show(board, args)
    return status


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return e.code

    setup_logging(args.verbose)

    if args.random is not None:
        if args.random < 1:
            parser.print_usage(sys.stderr)
            print(f"{parser.prog}: error: COUNT must be at least 1", file=sys.stderr)
            return EX_USAGE
        if args.positions:
            parser.print_usage(sys.stderr)
            print(f"{parser.prog}: error: positions can't be combined with --random", file=sys.stderr)
            return EX_USAGE
        return run_random(args)

    if args.verify_all:
        if args.positions:
            parser.print_usage(sys.stderr)
            print(f"{parser.prog}: error: positions can't be combined with --verify-all", file=sys.stderr)
            return EX_USAGE
        return EX_OK if verify_all_possible_rolls() else EX_NO_SOLUTION

    return run_positions(args, parser)


if __name__ == "__main__":
    sys.exit(main())
