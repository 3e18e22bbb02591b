"""
Genius Square puzzle solver using backtracking.

Each placeable piece has a precomputed list of candidate masks (see
pieces.py). The search walks the pieces in SOLVE_ORDER and, for each
one, takes the first candidate that doesn't touch any occupied cell,
then moves on to the next piece. When a piece has nothing left to
try, the previous piece moves on to its next candidate.

Only the first solution is returned.
"""

import logging
from dataclasses import dataclass

from .board import Board
from .config import NUM_BLOCKERS
from .conversion_utils import format_mask, parse_blockers, popcount
from .dices import is_valid_roll
from .pieces import SHAPE_CANDIDATES, SOLVE_ORDER

logger = logging.getLogger(__name__)


@dataclass
class SolveStats:
    """Search effort for one solve() call."""
    placements_tried: int = 0
    backtracks: int = 0

    def __str__(self) -> str:
        return f"Placements: {self.placements_tried}, Backtracks: {self.backtracks}"


def _search(
    catalogs: list[tuple[int, ...]],
    level: int,
    used: int,
    chosen: list[int],
    stats: SolveStats | None,
) -> bool:
    """Place piece `level` and everything after it, or report failure.

    `used` is the occupied mask on entry to this level. A tentative
    placement only ever lives in the `used | mask` passed down, so
    trying the next candidate undoes it.
    """
    last = level == len(catalogs) - 1
    for mask in catalogs[level]:
        if mask & used:
            continue
        chosen[level] = mask
        if stats is not None:
            stats.placements_tried += 1
        if last or _search(catalogs, level + 1, used | mask, chosen, stats):
            return True
    if stats is not None:
        stats.backtracks += 1
    return False


def solve(blockers: int, stats: SolveStats | None = None) -> tuple[bool, dict[str, int]]:
    """
    Find a placement for every piece except the single-cell one.

    Args:
        blockers: mask of pre-occupied cells (normally the 7 dice)
        stats: optional counters, filled in during the search

    Returns:
        (True, piece name -> mask) on success, (False, {}) otherwise.
    """
    catalogs = [SHAPE_CANDIDATES[name] for name in SOLVE_ORDER]
    chosen = [0] * len(catalogs)

    if not _search(catalogs, 0, blockers, chosen, stats):
        logger.debug("No solution for blockers %s", format_mask(blockers))
        return False, {}

    return True, dict(zip(SOLVE_ORDER, chosen))


def solve_board(blockers: int, stats: SolveStats | None = None) -> Board | None:
    """Solve and wrap the result in a Board. Returns None if unsolvable."""
    ok, placements = solve(blockers, stats)
    if not ok:
        return None
    board = Board(blockers, placements)
    board.check_consistent(expect_single=popcount(blockers) == NUM_BLOCKERS)
    return board


def solve_puzzle(cells: list[str], stats: SolveStats | None = None) -> Board | None:
    """
    Main entry point. Takes 7 cell names (e.g. from the dice).
    Returns solved board or None.

    Raises:
        BlockerInputError: if the names are malformed, repeated or not 7.
    """
    blockers = parse_blockers(cells)

    # Boards that didn't come from the dice may have no solution
    if not is_valid_roll(blockers):
        logger.warning("Given board is not a valid dice roll")

    return solve_board(blockers, stats)


if __name__ == "__main__":
    from .dices import TEST_ROLLS
    from .viz import display_board

    for roll in TEST_ROLLS:
        stats = SolveStats()
        print(f"Solving with blockers at cells: {roll}")
        result = solve_puzzle(roll, stats)
        if result:
            display_board(result)
        else:
            print("No solution.")
        print(stats)
        print()
