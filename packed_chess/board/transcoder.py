"""
Board Transcoder

Converts between the plain-text board layout and a Board.

Text format:
    - 8 rows of 8 characters, top row = rank 8, left column = A-file
    - Alphabet: '#' '.' 'p' 'n' 'b' 'r' 'q' 'k' 'P' 'N' 'B' 'R' 'Q' 'K'
    - Blank lines before, between or after the rows are ignored
    - Rows end in "\n"; a "\r" before it is dropped, so CRLF text parses too

Data Flow:
    text -> parse() -> 64 x decode_char() -> Board
    Board -> 64 x encode_char() -> render() -> text

render() always produces the normalized form: no leading blank line, every
row terminated by a newline. For normalized text, render(parse(text)) == text.
"""

import logging

from packed_chess.board.board import Board
from packed_chess.board.piece import decode_char, encode_char
from packed_chess.board.squares import NUM_COLS, NUM_ROWS
from packed_chess.errors import MalformedBoard, UnrecognizedPieceChar

logger = logging.getLogger(__name__)

STARTING_POSITION = (
    "rnbkqbnr\n"
    "pppppppp\n"
    ".#.#.#.#\n"
    "#.#.#.#.\n"
    ".#.#.#.#\n"
    "#.#.#.#.\n"
    "PPPPPPPP\n"
    "RNBKQBNR\n"
)


def parse(text: str) -> Board:
    """
    Parse board text into a Board.

    Args:
        text: 8 non-empty lines of 8 characters each

    Returns:
        Board with the squares in reading order

    Raises:
        MalformedBoard: If there are not 8 rows, or a row is not 8 characters
        UnrecognizedPieceChar: If a character is outside the alphabet; its
            position attribute holds the (row, col) of the character
    """
    lines = (line[:-1] if line.endswith("\r") else line for line in text.split("\n"))
    rows = [line for line in lines if line]

    if len(rows) != NUM_ROWS:
        raise MalformedBoard(f"expected {NUM_ROWS} rows, got {len(rows)}")

    pieces = []
    for row_idx, row in enumerate(rows):
        if len(row) != NUM_COLS:
            raise MalformedBoard(
                f"row {row_idx} has length {len(row)}, expected {NUM_COLS}"
            )

        for col_idx, char in enumerate(row):
            try:
                pieces.append(decode_char(char))
            except UnrecognizedPieceChar as e:
                raise UnrecognizedPieceChar(char, position=(row_idx, col_idx)) from e

    board = Board(pieces)
    logger.debug(
        f"Parsed board with {sum(not piece.is_empty for piece in board)} pieces"
    )
    return board


def render(board: Board) -> str:
    """
    Render a Board as text.

    Never raises: a Board only holds valid Pieces.

    Args:
        board: Board to render

    Returns:
        8 lines of 8 characters, each followed by a newline
    """
    return "".join(
        "".join(encode_char(piece) for piece in row) + "\n"
        for row in board.rows()
    )
