"""Tests for verify.py: checking that dice rolls can be solved."""

import logging
import os
import random

import pytest

from gsq_solver import verify
from gsq_solver.dices import ALL_DICE, Die, count_all_rolls, iter_all_rolls, random_blockers
from gsq_solver.verify import find_unsolvable_rolls, verify_all_possible_rolls, verify_roll


@pytest.fixture(scope="module")
def small_dice():
    """The real dice cut down to their first two distinct faces (128 rolls)."""
    dice = []
    for die in ALL_DICE:
        a, b = die.distinct_faces()[:2]
        dice.append(Die((a, b) * 3))
    return dice


def test_sampled_rolls():
    rng = random.Random(2024)
    for _ in range(25):
        assert verify_roll(random_blockers(rng))


def test_small_dice_all_solvable(small_dice):
    assert count_all_rolls(small_dice) == 128
    assert find_unsolvable_rolls(small_dice) == []
    assert verify_all_possible_rolls(small_dice)


def test_verify_roll_needs_a_roll(unsolvable_blockers):
    with pytest.raises(AssertionError):
        verify_roll(unsolvable_blockers)


def test_collects_every_failure(small_dice, monkeypatch, caplog):
    rolls = list(iter_all_rolls(small_dice))
    bad = {rolls[3], rolls[100]}
    monkeypatch.setattr(verify, "solve", lambda blockers: (blockers not in bad, {}))

    with caplog.at_level(logging.ERROR, logger="gsq_solver.verify"):
        failures = find_unsolvable_rolls(small_dice)

    # Scan doesn't stop at the first failure
    assert failures == [rolls[3], rolls[100]]
    assert len(caplog.records) == 2
    assert "Couldn't solve board" in caplog.records[0].getMessage()
    assert not verify_all_possible_rolls(small_dice)


@pytest.mark.slow
@pytest.mark.skipif(not os.environ.get("GSQ_RUN_SLOW"), reason="set GSQ_RUN_SLOW=1 to solve all 62208 rolls")
def test_all_possible_rolls():
    assert verify_all_possible_rolls()
