"""Shared fixtures for solver tests."""

import pytest

from gsq_solver.conversion_utils import cells_to_mask
from gsq_solver.solver import solve_board

# Example board from the game's instructions
EXAMPLE_CELLS = ["C4", "B1", "E5", "A6", "D2", "C5", "A5"]

# All seven cells are the same checkerboard color, so the free cells
# split 11/18. The pieces can only make up a difference of 5.
UNSOLVABLE_CELLS = ["A3", "B2", "C1", "D2", "E3", "E5", "F2"]


@pytest.fixture
def example_blockers() -> int:
    return cells_to_mask(EXAMPLE_CELLS)


@pytest.fixture
def unsolvable_blockers() -> int:
    return cells_to_mask(UNSOLVABLE_CELLS)


@pytest.fixture(scope="module")
def example_board():
    return solve_board(cells_to_mask(EXAMPLE_CELLS))
