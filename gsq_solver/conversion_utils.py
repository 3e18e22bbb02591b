"""
Coordinate conversion utilities for Genius Square.

Representations:
1. (row, col) - row 0..5 top to bottom, col 0..5 left to right
2. Cell name  - "A1".."F6": letter is the row, digit is the column
3. Bitmask    - one bit per cell, bit index = row * 6 + col

A set of cells is the OR of their bitmasks, so overlap tests and
disjoint unions are single bitwise operations. Only the low 36 bits
are ever set.
"""

from typing import Iterable, Iterator

from .config import BOARD_SIZE, NUM_BLOCKERS, NUM_CELLS

BOARD_MASK = (1 << NUM_CELLS) - 1

ROW_LETTERS = "ABCDEF"


class BlockerInputError(ValueError):
    """One or more blocker identifiers could not be used.

    All problems found are collected in `problems`, one message per
    offending token, so a caller can report every one of them.
    """

    def __init__(self, problems: list[str]):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))


def encode(row: int, col: int) -> int:
    """Single-bit mask for the cell at (row, col)."""
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise ValueError(f"Cell ({row}, {col}) is outside the board")
    return 1 << (row * BOARD_SIZE + col)


def parse(identifier: str) -> int:
    """Parse a cell name like "C4" (or "c4") into its bitmask.

    Returns 0 for anything that isn't a letter A-F followed by a
    digit 1-6. 0 is never a valid cell mask, so callers test for it.
    """
    if not isinstance(identifier, str) or len(identifier) != 2:
        return 0
    letter, digit = identifier[0].upper(), identifier[1]
    if letter not in ROW_LETTERS or digit not in "123456":
        return 0
    return encode(ROW_LETTERS.index(letter), int(digit) - 1)


def cell_name(row: int, col: int) -> str:
    """(row, col) -> "A1" style name."""
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise ValueError(f"Cell ({row}, {col}) is outside the board")
    return f"{ROW_LETTERS[row]}{col + 1}"


def bit_to_coords(bit: int) -> tuple[int, int]:
    """Single-bit mask -> (row, col)."""
    return divmod(bit.bit_length() - 1, BOARD_SIZE)


def iter_cells(mask: int) -> Iterator[tuple[int, int]]:
    """Yield (row, col) for every set bit, lowest bit first."""
    while mask:
        low = mask & -mask
        yield bit_to_coords(low)
        mask ^= low


def popcount(mask: int) -> int:
    return bin(mask).count("1")


def mask_to_cells(mask: int) -> list[str]:
    """Bitmask -> sorted list of cell names."""
    return [cell_name(row, col) for row, col in iter_cells(mask)]


def cells_to_mask(names: Iterable[str]) -> int:
    """Cell names -> bitmask. Raises ValueError on a bad name."""
    mask = 0
    for name in names:
        bit = parse(name)
        if bit == 0:
            raise ValueError(f"Bad board position: \"{name}\"")
        mask |= bit
    return mask


def parse_blockers(tokens: list[str], expected: int = NUM_BLOCKERS) -> int:
    """Parse the blocker identifiers given on the command line or API.

    Every token is checked so that all malformed and duplicated
    positions are reported together.

    Raises:
        BlockerInputError: listing every problem found.
    """
    problems = []
    if len(tokens) != expected:
        problems.append(f"Expected {expected} board positions, got {len(tokens)}")

    blockers = 0
    for token in tokens:
        bit = parse(token)
        if bit == 0:
            problems.append(f"Bad board position: \"{token}\"")
            continue
        if blockers & bit:
            problems.append(f"Board position listed multiple times: \"{token}\"")
        blockers |= bit

    if problems:
        raise BlockerInputError(problems)
    return blockers


def format_mask(mask: int) -> str:
    """Hex form used in diagnostics, e.g. 00A100C41."""
    return f"{mask:09X}"
