"""
gsq_solver - Genius Square puzzle solver package

Core components:
- Board: blockers plus placed pieces, with piece_at lookup
- solve / solve_puzzle: backtracking solver
- ALL_DICE, random_blockers, is_valid_roll: the game's dice
- verify_all_possible_rolls: check every roll of the dice is solvable
"""

from .board import Board
from .conversion_utils import BlockerInputError, encode, parse, parse_blockers
from .dices import ALL_DICE, Die, is_valid_roll, random_blockers
from .pieces import PIECE_IDS, SHAPE_CANDIDATES, SOLVE_ORDER
from .solver import SolveStats, solve, solve_board, solve_puzzle
from .verify import verify_all_possible_rolls
from .viz import display_board, format_board, render_svg
