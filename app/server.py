"""
Genius Square - FastAPI Backend Server

Provides API endpoints for solving boards, rolling the dice and
checking that every roll is solvable.
"""

from pathlib import Path
import logging
import random
import sys

# Add project root to path for gsq_solver imports
_project_root = Path(__file__).parent.parent
sys.path.insert(0, str(_project_root))

from fastapi import FastAPI, APIRouter, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
import uvicorn

from gsq_solver import config
from gsq_solver.board import Board
from gsq_solver.conversion_utils import BlockerInputError, cell_name, format_mask, mask_to_cells, parse_blockers
from gsq_solver.dices import ALL_DICE, count_all_rolls, is_valid_roll, random_blockers
from gsq_solver.solver import solve_board
from gsq_solver.verify import find_unsolvable_rolls

logger = logging.getLogger(__name__)

app = FastAPI(title="Genius Square")
api_router = APIRouter(prefix="/api")

# Enable CORS
# Allow all origins for simplicity and robust public access
origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response models
class BoardState(BaseModel):
    cells: list[str]  # Blocker cell names, e.g. "C4"


class SolveResponse(BaseModel):
    success: bool
    blockers: list[str] = []
    valid_roll: bool | None = None
    solution: dict[str, list[str]] | None = None  # Piece name -> cell names
    single: str | None = None                     # Cell left for the 1x1 piece
    grid: list[list[str]] | None = None           # Piece name per cell, top row first
    error: str | None = None


class DiceResponse(BaseModel):
    dice: list[list[str]]
    distinct_rolls: int


class RandomResponse(BaseModel):
    boards: list[SolveResponse]


class VerifyResponse(BaseModel):
    ok: bool
    rolls_checked: int
    failures: list[list[str]] = []


def board_response(board: Board) -> SolveResponse:
    """Convert a solved Board to its API form."""
    single = board.single_cell()
    return SolveResponse(
        success=True,
        blockers=mask_to_cells(board.blockers),
        valid_roll=is_valid_roll(board.blockers),
        solution=board.solution_cells(),
        single=cell_name(*single) if single else None,
        grid=board.grid(),
    )


# Routes
@api_router.get("/dice", response_model=DiceResponse)
async def get_dice():
    """The seven dice, each as its six faces."""
    return DiceResponse(
        dice=[die.cells() for die in ALL_DICE],
        distinct_rolls=count_all_rolls(),
    )


@api_router.post("/solve", response_model=SolveResponse)
async def solve(state: BoardState):
    """
    Solve the puzzle for the given blockers.

    Returns the solution as piece name -> list of cell names.
    """
    try:
        blockers = parse_blockers(state.cells)
    except BlockerInputError as e:
        return SolveResponse(success=False, error=str(e))

    valid = is_valid_roll(blockers)
    if not valid:
        logger.warning("Given board is not a valid dice roll: %s", state.cells)

    board = solve_board(blockers)
    if board is None:
        return SolveResponse(
            success=False,
            blockers=mask_to_cells(blockers),
            valid_roll=valid,
            error="No solution found",
        )
    return board_response(board)


@api_router.get("/random", response_model=RandomResponse)
async def random_boards(
    count: int = Query(1, ge=1, le=config.MAX_RANDOM_BOARDS),
    seed: int | None = None,
):
    """Roll the dice `count` times and solve each board."""
    rng = random.Random(seed)
    boards = []
    for _ in range(count):
        blockers = random_blockers(rng)
        board = solve_board(blockers)
        if board is None:
            logger.error("Couldn't solve board %s", format_mask(blockers))
            boards.append(SolveResponse(
                success=False,
                blockers=mask_to_cells(blockers),
                valid_roll=True,
                error="No solution found",
            ))
            continue
        boards.append(board_response(board))
    return RandomResponse(boards=boards)


@api_router.get("/verify", response_model=VerifyResponse)
def verify():
    """
    Solve every possible roll of the dice.
    Slow: runs in the threadpool so the event loop stays free.
    """
    failures = find_unsolvable_rolls()
    return VerifyResponse(
        ok=not failures,
        rolls_checked=count_all_rolls(),
        failures=[mask_to_cells(blockers) for blockers in failures],
    )


# Register the API router
app.include_router(api_router)


if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT, datefmt=config.LOG_DATEFMT)
    print(f"Starting Genius Square server at http://{config.SERVER_HOST}:{config.SERVER_PORT}")
    uvicorn.run(app, host=config.SERVER_HOST, port=config.SERVER_PORT)
