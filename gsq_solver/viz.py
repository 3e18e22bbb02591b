"""
Visualization utilities for Genius Square board.
"""

from .board import Board
from .config import BOARD_SIZE, SVG_OUTPUT
from .conversion_utils import cell_name
from .pieces import (
    BLOCKER, BLOCKER_COLOR, LBLOCK2, LBLOCK3, LINE2, LINE3, LINE4,
    PIECE_COLORS, SINGLE, SQUARE, TBLOCK, ZBLOCK,
)

BLOCKER_GLYPH = "●"

# ANSI background color per piece, matching the physical game
ANSI_CODES: dict[str, int] = {
    SINGLE: 104,   # Dark blue
    LINE2: 101,    # Brown (bright red on most terminals)
    LINE3: 43,     # Orange (dim yellow)
    LINE4: 100,    # Grey
    SQUARE: 102,   # Green
    LBLOCK2: 105,  # Purple
    LBLOCK3: 106,  # Light blue
    ZBLOCK: 41,    # Red
    TBLOCK: 103,   # Yellow
}

# Digits for terminals without color
PLAIN_GLYPHS: dict[str, str] = {
    SINGLE: "1",
    LINE2: "2",
    LINE3: "3",
    LINE4: "4",
    SQUARE: "5",
    LBLOCK2: "6",
    LBLOCK3: "7",
    ZBLOCK: "8",
    TBLOCK: "9",
}


def cell_glyph(piece: str, color: bool = True) -> str:
    if piece == BLOCKER:
        return BLOCKER_GLYPH
    if color:
        return f"\033[{ANSI_CODES[piece]}m \033[0m"
    return PLAIN_GLYPHS[piece]


def format_board(board: Board, color: bool = True) -> str:
    """One line per row, one character cell per square."""
    return "\n".join(
        "".join(cell_glyph(piece, color) for piece in row)
        for row in board.grid()
    )


def display_board(board: Board, color: bool = True) -> None:
    """Print the solved board to stdout."""
    print(format_board(board, color))


def render_svg(board: Board, filename: str = SVG_OUTPUT) -> str:
    """
    Render board to SVG file with colored pieces.
    Returns the filename.
    """
    # SVG settings
    scale = 50  # pixels per cell
    margin = 20
    size = margin * 2 + BOARD_SIZE * scale

    svg_parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}">',
        '<rect width="100%" height="100%" fill="#1b2856"/>',
    ]

    for row, pieces in enumerate(board.grid()):
        for col, piece in enumerate(pieces):
            x = margin + col * scale
            y = margin + row * scale
            svg_parts.append(
                f'<rect x="{x}" y="{y}" width="{scale}" height="{scale}" '
                f'fill="#1b2856" stroke="#000" stroke-width="1"/>'
            )
            cx = x + scale / 2
            cy = y + scale / 2
            if piece == BLOCKER:
                # Blockers are round pegs
                svg_parts.append(
                    f'<circle cx="{cx:.1f}" cy="{cy:.1f}" r="{scale * 0.35:.1f}" '
                    f'fill="{BLOCKER_COLOR}" stroke="#000" stroke-width="1"/>'
                )
            else:
                inset = scale * 0.05
                svg_parts.append(
                    f'<rect x="{x + inset:.1f}" y="{y + inset:.1f}" '
                    f'width="{scale - 2 * inset:.1f}" height="{scale - 2 * inset:.1f}" '
                    f'fill="{PIECE_COLORS[piece]}" stroke="none"/>'
                )

            # Add cell name label
            svg_parts.append(
                f'<text x="{cx:.1f}" y="{cy:.1f}" text-anchor="middle" '
                f'dominant-baseline="middle" font-size="10" fill="#888">{cell_name(row, col)}</text>'
            )

    svg_parts.append('</svg>')
    svg_content = "\n".join(svg_parts)

    with open(filename, "w") as f:
        f.write(svg_content)

    return filename


if __name__ == "__main__":
    from .dices import TEST_ROLLS
    from .solver import solve_puzzle

    board = solve_puzzle(TEST_ROLLS[1])
    display_board(board)
    print()
    display_board(board, color=False)
    print(f"\nSVG saved to: {render_svg(board)}")
