"""
Square indexing for the printed board layout.

Squares are numbered 0-63 in reading order of the board text:

    index  0 = a8 (top-left)      index  7 = h8
    index 56 = a1                 index 63 = h1 (bottom-right)

Row 0 is rank 8, column 0 is the A-file. Note that this is the reverse rank
order of python-chess, where square 0 is a1 (see representation.py).
"""

from typing import Tuple

from packed_chess.board.piece import Color

NUM_ROWS = 8
NUM_COLS = 8
NUM_SQUARES = NUM_ROWS * NUM_COLS

FILE_NAMES = "abcdefgh"


def square_index(row: int, col: int) -> int:
    """
    Convert (row, column) coordinates to a square index.

    Args:
        row: Row index (0-7) where 0 is rank 8
        col: Column index (0-7) where 0 is A-file

    Returns:
        Square index (0-63)

    Raises:
        ValueError: If either coordinate is off the board
    """
    if not (0 <= row < NUM_ROWS and 0 <= col < NUM_COLS):
        raise ValueError(f"Coordinates off the board: ({row}, {col})")
    return row * NUM_COLS + col


def square_coordinates(index: int) -> Tuple[int, int]:
    """Convert a square index (0-63) to (row, col)."""
    if not 0 <= index < NUM_SQUARES:
        raise ValueError(f"Square index out of range: {index}")
    return divmod(index, NUM_COLS)


def square_name(index: int) -> str:
    """Algebraic name of a square, e.g. 0 -> 'a8', 63 -> 'h1'."""
    row, col = square_coordinates(index)
    return f"{FILE_NAMES[col]}{NUM_ROWS - row}"


def square_color(index: int) -> Color:
    """
    Colour an empty square is drawn with.

    Follows the checkerboard of the standard board text: the first empty
    row (row 2) starts with a Dark square ('.'), the next one with a White
    square ('#').
    """
    row, col = square_coordinates(index)
    return Color.WHITE if (row + col) % 2 else Color.DARK
