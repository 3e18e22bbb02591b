"""
Puzzle piece definitions for Genius Square.

Each placeable piece is described by one or more variants (cell offsets
relative to the top-left of the variant's bounding box). Every variant
is slid over every anchor that keeps it on the 6x6 board, and the
resulting bitmasks make up the piece's candidate list.

The single-cell piece is never placed by the solver: once the other
eight pieces are down, the one remaining empty cell is where it goes.
"""

from dataclasses import dataclass

from .config import BOARD_SIZE
from .conversion_utils import encode

# Piece identifiers
SINGLE = "single"
LINE2 = "line2"
LINE3 = "line3"
LINE4 = "line4"
SQUARE = "square"
LBLOCK2 = "lblock2"
LBLOCK3 = "lblock3"
ZBLOCK = "zblock"
TBLOCK = "tblock"
BLOCKER = "blocker"

Offsets = tuple[tuple[int, int], ...]


@dataclass(frozen=True)
class Shape:
    """A placeable piece: a name and its distinct orientations."""
    name: str
    variants: tuple[Offsets, ...]

    @property
    def size(self) -> int:
        return len(self.variants[0])

    def placements(self) -> tuple[int, ...]:
        """All bitmasks for this shape that fit on the board.

        Variants in declared order, each swept row by row over its
        valid anchors.
        """
        masks = []
        for offsets in self.variants:
            height = max(r for r, _ in offsets) + 1
            width = max(c for _, c in offsets) + 1
            for row in range(BOARD_SIZE - height + 1):
                for col in range(BOARD_SIZE - width + 1):
                    mask = 0
                    for dr, dc in offsets:
                        mask |= encode(row + dr, col + dc)
                    masks.append(mask)
        return tuple(masks)


def make_shape(name: str, variants: list[list[tuple[int, int]]]) -> Shape:
    """Helper to create a shape from lists of (row, col) offsets."""
    return Shape(name, tuple(tuple(v) for v in variants))


# Straight lines: horizontal then vertical

LINE2_SHAPE = make_shape(LINE2, [
    [(0, 0), (0, 1)],
    [(0, 0), (1, 0)],
])

LINE3_SHAPE = make_shape(LINE3, [
    [(0, 0), (0, 1), (0, 2)],
    [(0, 0), (1, 0), (2, 0)],
])

LINE4_SHAPE = make_shape(LINE4, [
    [(0, 0), (0, 1), (0, 2), (0, 3)],
    [(0, 0), (1, 0), (2, 0), (3, 0)],
])

# XX
# XX
SQUARE_SHAPE = make_shape(SQUARE, [
    [(0, 0), (0, 1), (1, 0), (1, 1)],
])

#  X   X     XX  XX
# XX   XX     X  X
LBLOCK2_SHAPE = make_shape(LBLOCK2, [
    [(0, 1), (1, 0), (1, 1)],
    [(0, 0), (1, 0), (1, 1)],
    [(0, 0), (0, 1), (1, 1)],
    [(0, 0), (0, 1), (1, 0)],
])

#   X  X     XXX  XXX   X  X    XX  XX
# XXX  XXX     X  X      X  X     X  X
#                       XX  XX    X  X
LBLOCK3_SHAPE = make_shape(LBLOCK3, [
    [(0, 2), (1, 0), (1, 1), (1, 2)],
    [(0, 0), (1, 0), (1, 1), (1, 2)],
    [(0, 0), (0, 1), (0, 2), (1, 2)],
    [(0, 0), (0, 1), (0, 2), (1, 0)],
    [(0, 1), (1, 1), (2, 1), (2, 0)],
    [(0, 0), (1, 0), (2, 0), (2, 1)],
    [(0, 0), (0, 1), (1, 1), (2, 1)],
    [(0, 0), (1, 0), (2, 0), (0, 1)],
])

# XX     XX    X  X
#  XX   XX    XX  XX
#             X    X
ZBLOCK_SHAPE = make_shape(ZBLOCK, [
    [(0, 0), (0, 1), (1, 1), (1, 2)],
    [(0, 1), (0, 2), (1, 0), (1, 1)],
    [(0, 1), (1, 1), (1, 0), (2, 0)],
    [(0, 0), (1, 0), (1, 1), (2, 1)],
])

# XXX   X    X    X
#  X   XXX   XX  XX
#            X    X
TBLOCK_SHAPE = make_shape(TBLOCK, [
    [(0, 0), (0, 1), (0, 2), (1, 1)],
    [(1, 0), (1, 1), (1, 2), (0, 1)],
    [(0, 0), (1, 0), (2, 0), (1, 1)],
    [(0, 1), (1, 1), (2, 1), (1, 0)],
])

ALL_SHAPES = [
    LINE2_SHAPE,
    LINE3_SHAPE,
    LINE4_SHAPE,
    SQUARE_SHAPE,
    LBLOCK2_SHAPE,
    LBLOCK3_SHAPE,
    ZBLOCK_SHAPE,
    TBLOCK_SHAPE,
]

# Search order: the five 4-cell pieces, then the two 3-cell pieces, then
# the domino. Placing a piece is one OR whatever its size, so the big ones
# go first and conflicts show up after the fewest steps.
SOLVE_ORDER = [
    LINE4,
    SQUARE,
    LBLOCK3,
    ZBLOCK,
    TBLOCK,
    LINE3,
    LBLOCK2,
    LINE2,
]

# Precompute every placement of every shape (read-only from here on)
SHAPE_CANDIDATES: dict[str, tuple[int, ...]] = {
    shape.name: shape.placements() for shape in ALL_SHAPES
}

SHAPE_SIZES: dict[str, int] = {shape.name: shape.size for shape in ALL_SHAPES}
SHAPE_SIZES[SINGLE] = 1

# Identifiers in rendering order (piece_at never returns anything else)
PIECE_IDS = [SINGLE, LINE2, LINE3, LINE4, SQUARE, LBLOCK2, LBLOCK3, ZBLOCK, TBLOCK, BLOCKER]

# Colors for each piece (for visualization)
PIECE_COLORS: dict[str, str] = {
    SINGLE: "#1f4fd1",   # Dark blue
    LINE2: "#8a5e3c",    # Brown
    LINE3: "#ff8717",    # Orange
    LINE4: "#8c8c8c",    # Grey
    SQUARE: "#2e9e3f",   # Green
    LBLOCK2: "#7a2d9e",  # Purple
    LBLOCK3: "#00a0de",  # Light blue
    ZBLOCK: "#de241b",   # Red
    TBLOCK: "#ffc100",   # Yellow
}

BLOCKER_COLOR = "#FFFFFF"


if __name__ == "__main__":
    from .conversion_utils import mask_to_cells

    for name in SOLVE_ORDER:
        candidates = SHAPE_CANDIDATES[name]
        print(f"{name:8} {len(candidates):4} placements, first: {mask_to_cells(candidates[0])}")
