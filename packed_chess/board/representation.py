"""
Board Representation Bridges

This module converts a packed Board to and from the representations used
by the rest of the Python chess ecosystem.

numpy:
    board_to_array() gives an (8, 8) uint8 array of the packed bytes laid
    out as the board text: array[0, 0] is a8, array[7, 7] is h1.

python-chess:
    to_chess_board() / from_chess_board() translate piece placement only.
    python-chess numbers squares from a1 (0) to h8 (63) and uses its own
    piece type constants (ROOK = 4, BISHOP = 3), so both the square index
    and the type code are remapped.

    Dark pieces map to chess.BLACK. Empty squares are not stored by
    python-chess; on the way back they take their checkerboard colour.
"""

from typing import Dict, Tuple

import chess
import numpy as np

from packed_chess.board.board import Board
from packed_chess.board.piece import Color, Piece, PieceType
from packed_chess.board.squares import NUM_COLS, NUM_ROWS, NUM_SQUARES, square_color
from packed_chess.errors import MalformedBoard

PIECE_TYPE_TO_CHESS: Dict[PieceType, chess.PieceType] = {
    PieceType.PAWN: chess.PAWN,
    PieceType.KNIGHT: chess.KNIGHT,
    PieceType.ROOK: chess.ROOK,
    PieceType.BISHOP: chess.BISHOP,
    PieceType.QUEEN: chess.QUEEN,
    PieceType.KING: chess.KING,
}
CHESS_TO_PIECE_TYPE: Dict[chess.PieceType, PieceType] = {
    v: k for k, v in PIECE_TYPE_TO_CHESS.items()
}


def square_to_coordinates(square: int) -> Tuple[int, int]:
    """python-chess square (a1 = 0) to (row, col) with row 0 at the top."""
    rank = chess.square_rank(square)
    file = chess.square_file(square)
    return 7 - rank, file


def coordinates_to_square(row: int, col: int) -> int:
    """(row, col) to python-chess square; inverse of square_to_coordinates."""
    return chess.square(col, 7 - row)


def board_to_array(board: Board) -> np.ndarray:
    """
    Convert a Board to an (8, 8) array of packed bytes.

    Returns:
        Writable numpy array of shape (8, 8) with dtype uint8
    """
    return np.frombuffer(board.to_bytes(), dtype=np.uint8).reshape(NUM_ROWS, NUM_COLS).copy()


def array_to_board(array: np.ndarray) -> Board:
    """
    Convert an (8, 8) array of packed bytes back to a Board.

    This is the inverse of board_to_array().

    Raises:
        MalformedBoard: If the array does not have shape (8, 8) or
            a non-integer dtype
        InvalidPieceEncoding: If any value is not a valid Piece
    """
    if array.shape != (NUM_ROWS, NUM_COLS):
        raise MalformedBoard(
            f"invalid array shape: {array.shape}. Expected ({NUM_ROWS}, {NUM_COLS})"
        )
    if not np.issubdtype(array.dtype, np.integer):
        raise MalformedBoard(f"invalid array dtype: {array.dtype}. Expected integers")

    return Board(Piece.from_byte(value) for value in array.reshape(-1))


def to_chess_board(board: Board) -> chess.Board:
    """
    Place the pieces of a Board on an empty python-chess Board.

    The result has no castling rights, en passant square or move history;
    side to move is python-chess's default (White).
    """
    chess_board = chess.Board(fen=None)

    for index, piece in enumerate(board):
        if piece.is_empty:
            continue
        row, col = divmod(index, NUM_COLS)
        chess_board.set_piece_at(
            coordinates_to_square(row, col),
            chess.Piece(PIECE_TYPE_TO_CHESS[piece.piece_type], piece.color is Color.WHITE),
        )

    return chess_board


def from_chess_board(chess_board: chess.Board) -> Board:
    """
    Build a Board from the piece placement of a python-chess Board.

    This is the inverse of to_chess_board().
    """
    pieces = []
    for index in range(NUM_SQUARES):
        row, col = divmod(index, NUM_COLS)
        occupant = chess_board.piece_at(coordinates_to_square(row, col))

        if occupant is None:
            pieces.append(Piece.compose(PieceType.NO_PIECE, square_color(index)))
        else:
            color = Color.WHITE if occupant.color == chess.WHITE else Color.DARK
            pieces.append(Piece.compose(CHESS_TO_PIECE_TYPE[occupant.piece_type], color))

    return Board(pieces)
