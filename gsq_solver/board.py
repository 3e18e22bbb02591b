"""
Genius Square board state.

A board is the blocker mask it was created with plus, once solved,
one placement mask per placeable piece. Cells are addressed by
(row, col) with row 0 at the top; see conversion_utils for the
bit layout.
"""

from dataclasses import dataclass, field

from .config import BOARD_SIZE
from .conversion_utils import BOARD_MASK, bit_to_coords, cell_name, encode, mask_to_cells
from .pieces import BLOCKER, SINGLE, SOLVE_ORDER


@dataclass
class Board:
    """Blockers plus the placed pieces (piece name -> mask)."""
    blockers: int
    placements: dict[str, int] = field(default_factory=dict)

    def copy(self) -> "Board":
        return Board(self.blockers, self.placements.copy())

    def covered(self) -> int:
        """Mask of every cell taken by a blocker or a placed piece."""
        used = self.blockers
        for mask in self.placements.values():
            used |= mask
        return used

    def uncovered(self) -> int:
        return BOARD_MASK & ~self.covered()

    def is_solved(self) -> bool:
        """True once all 8 placeable pieces are down and one cell is left."""
        free = self.uncovered()
        return (
            len(self.placements) == len(SOLVE_ORDER)
            and free != 0
            and free & (free - 1) == 0
        )

    def single_cell(self) -> tuple[int, int] | None:
        """Where the single-cell piece goes, if the board is solved."""
        if not self.is_solved():
            return None
        return bit_to_coords(self.uncovered())

    def piece_at(self, row: int, col: int) -> str:
        """Which piece covers this cell.

        Blockers are checked first, then pieces in solve order. A cell
        nothing covers holds the single-cell piece.
        """
        bit = encode(row, col)
        if bit & self.blockers:
            assert not any(bit & mask for mask in self.placements.values()), \
                f"{cell_name(row, col)} is both a blocker and covered by a piece"
            return BLOCKER
        for name in SOLVE_ORDER:
            if bit & self.placements.get(name, 0):
                return name
        return SINGLE

    def grid(self) -> list[list[str]]:
        """6x6 grid of piece names, top row first."""
        return [
            [self.piece_at(row, col) for col in range(BOARD_SIZE)]
            for row in range(BOARD_SIZE)
        ]

    def solution_cells(self) -> dict[str, list[str]]:
        """Piece name -> cell names, for every placed piece."""
        return {name: mask_to_cells(mask) for name, mask in self.placements.items()}

    def check_consistent(self, expect_single: bool = True) -> None:
        """Assert no two masks overlap and exactly one cell is left over.

        With fewer than 7 blockers more cells stay empty; pass
        expect_single=False to only check for overlaps.
        """
        total = self.blockers
        used = self.blockers
        for mask in self.placements.values():
            total += mask
            used |= mask
        # Overlapping masks would make the sum differ from the union
        assert total == used, "pieces overlap"
        assert used & ~BOARD_MASK == 0, "mask outside the board"
        if not expect_single:
            return
        free = BOARD_MASK ^ used
        assert free != 0 and free & (free - 1) == 0, \
            f"expected one empty cell, found {mask_to_cells(free)}"

    def __str__(self) -> str:
        from .viz import format_board
        return format_board(self, color=False)
