"""
Exhaustive check that every dice roll can be solved.

Rolls are generated from each die's distinct faces only; duplicate
faces would just repeat boards already checked. With the standard dice
that is 6 * 6 * 6 * 4 * 6 * 6 * 2 = 62208 boards.
"""

import logging

from .conversion_utils import format_mask
from .dices import ALL_DICE, Die, count_all_rolls, is_valid_roll, iter_all_rolls
from .solver import solve

logger = logging.getLogger(__name__)


def verify_roll(blockers: int, dice: list[Die] = ALL_DICE) -> bool:
    """Solve one roll, logging an error if it can't be solved."""
    assert is_valid_roll(blockers, dice)
    ok, _ = solve(blockers)
    if not ok:
        logger.error("Couldn't solve board %s", format_mask(blockers))
    return ok


def find_unsolvable_rolls(dice: list[Die] = ALL_DICE) -> list[int]:
    """Every roll of `dice` that has no solution.

    Keeps going after a failure so one run reports all of them.
    """
    total = count_all_rolls(dice)
    logger.info("Verifying %d rolls", total)

    failures = []
    for checked, blockers in enumerate(iter_all_rolls(dice), start=1):
        if not verify_roll(blockers, dice):
            failures.append(blockers)
        if checked % 10000 == 0:
            logger.debug("%d / %d rolls checked, %d failures", checked, total, len(failures))

    logger.info("Checked %d rolls, %d failures", total, len(failures))
    return failures


def verify_all_possible_rolls(dice: list[Die] = ALL_DICE) -> bool:
    """True if every possible roll of the dice has a solution."""
    return not find_unsolvable_rolls(dice)
