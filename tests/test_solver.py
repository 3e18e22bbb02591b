"""Tests for solver.py and the solved Board it returns."""

import logging

import pytest

from conftest import EXAMPLE_CELLS, UNSOLVABLE_CELLS
from gsq_solver.board import Board
from gsq_solver.conversion_utils import BOARD_MASK, BlockerInputError, cells_to_mask, parse, popcount
from gsq_solver.dices import TEST_ROLLS
from gsq_solver.pieces import BLOCKER, LINE2, SHAPE_CANDIDATES, SHAPE_SIZES, SINGLE, SOLVE_ORDER
from gsq_solver.solver import SolveStats, solve, solve_board, solve_puzzle


def assert_valid_solution(blockers, placements):
    assert list(placements) == SOLVE_ORDER
    used = blockers
    for name, mask in placements.items():
        assert mask in SHAPE_CANDIDATES[name]
        assert used & mask == 0, f"{name} overlaps"
        used |= mask
    assert popcount(used) == 35


class TestSolve:
    def test_example_board(self, example_blockers):
        ok, placements = solve(example_blockers)
        assert ok
        assert_valid_solution(example_blockers, placements)

    @pytest.mark.parametrize("roll", TEST_ROLLS)
    def test_test_rolls(self, roll):
        blockers = cells_to_mask(roll)
        ok, placements = solve(blockers)
        assert ok
        assert_valid_solution(blockers, placements)

    def test_deterministic(self, example_blockers):
        assert solve(example_blockers) == solve(example_blockers)

    def test_unsolvable(self, unsolvable_blockers):
        assert solve(unsolvable_blockers) == (False, {})

    def test_stats(self, example_blockers):
        stats = SolveStats()
        solve(example_blockers, stats)
        assert stats.placements_tried >= len(SOLVE_ORDER)
        assert stats.backtracks > 0
        assert str(stats).startswith("Placements: ")

    def test_unsolvable_stats(self, unsolvable_blockers):
        stats = SolveStats()
        solve(unsolvable_blockers, stats)
        assert stats.backtracks > 0


class TestSolvePuzzle:
    def test_returns_board(self):
        board = solve_puzzle(EXAMPLE_CELLS)
        assert isinstance(board, Board)
        assert board.is_solved()

    def test_bad_input(self):
        with pytest.raises(BlockerInputError) as excinfo:
            solve_puzzle(["C4", "B1", "E5", "A6", "D2", "C5", "C5"])
        assert excinfo.value.problems == ['Board position listed multiple times: "C5"']

    def test_warns_on_invalid_roll(self, caplog):
        with caplog.at_level(logging.WARNING, logger="gsq_solver.solver"):
            board = solve_puzzle(UNSOLVABLE_CELLS)
        assert board is None
        assert "not a valid dice roll" in caplog.text

    def test_no_warning_for_real_roll(self, caplog):
        with caplog.at_level(logging.WARNING, logger="gsq_solver.solver"):
            solve_puzzle(EXAMPLE_CELLS)
        assert caplog.records == []


class TestBoard:
    def test_piece_at(self, example_board, example_blockers):
        counts = {}
        for row in range(6):
            for col in range(6):
                piece = example_board.piece_at(row, col)
                counts[piece] = counts.get(piece, 0) + 1
        assert counts[BLOCKER] == 7
        assert counts[SINGLE] == 1
        for name in SOLVE_ORDER:
            assert counts[name] == SHAPE_SIZES[name]
        assert example_board.piece_at(2, 3) == BLOCKER  # C4

    def test_single_cell(self, example_board):
        row, col = example_board.single_cell()
        assert example_board.piece_at(row, col) == SINGLE
        assert example_board.uncovered() == 1 << (row * 6 + col)

    def test_grid(self, example_board):
        grid = example_board.grid()
        assert len(grid) == 6
        assert all(len(row) == 6 for row in grid)
        assert grid[2][3] == BLOCKER

    def test_solution_cells(self, example_board):
        cells = example_board.solution_cells()
        assert set(cells) == set(SOLVE_ORDER)
        assert sum(len(c) for c in cells.values()) == 28

    def test_empty_board(self):
        board = Board(parse("A1"))
        assert not board.is_solved()
        assert board.single_cell() is None
        assert board.piece_at(0, 0) == BLOCKER
        assert board.piece_at(0, 1) == SINGLE
        assert board.uncovered() == BOARD_MASK ^ 1

    def test_copy(self, example_board):
        board = example_board.copy()
        board.placements.pop(LINE2)
        assert LINE2 in example_board.placements
        assert not board.is_solved()

    def test_overlap_detected(self):
        board = Board(parse("A1"), {LINE2: parse("A1") | parse("A2")})
        with pytest.raises(AssertionError):
            board.check_consistent(expect_single=False)
        with pytest.raises(AssertionError):
            board.piece_at(0, 0)

    def test_str(self, example_board):
        lines = str(example_board).splitlines()
        assert len(lines) == 6
        assert "".join(lines).count("●") == 7


def test_solve_board_with_fewer_blockers():
    # Not a dice roll; more cells than one stay free once the pieces are down
    blockers = cells_to_mask(["A1", "F6"])
    board = solve_board(blockers)
    assert board is not None
    assert popcount(board.uncovered()) == 36 - 2 - 28
