"""
Board value: 64 packed Pieces in reading order.

The squares live in a read-only numpy uint8 array, one byte per square, so
the in-memory layout is exactly the packed encoding.
"""

from typing import Iterable, Iterator, Tuple

import numpy as np

from packed_chess.board.piece import Piece, PieceType
from packed_chess.board.squares import NUM_COLS, NUM_ROWS, NUM_SQUARES, square_color
from packed_chess.errors import MalformedBoard


class Board:
    """
    Fixed-size sequence of 64 Pieces, index 0 = a8, index 63 = h1.

    Every byte stored in a Board is a valid Piece, so reading squares back
    never fails.

    Args:
        pieces: Exactly 64 Pieces in row-major order

    Raises:
        MalformedBoard: If pieces does not hold 64 squares
        InvalidPieceEncoding: If any Piece has a type code outside 0-6
    """

    def __init__(self, pieces: Iterable[Piece]):
        values = [Piece.from_byte(piece.value).value for piece in pieces]
        if len(values) != NUM_SQUARES:
            raise MalformedBoard(f"expected {NUM_SQUARES} squares, got {len(values)}")

        squares = np.array(values, dtype=np.uint8)
        squares.setflags(write=False)
        self._squares = squares

    @classmethod
    def from_bytes(cls, data: bytes) -> "Board":
        """
        Build a Board from 64 raw bytes.

        Raises:
            MalformedBoard: If data is not 64 bytes long
            InvalidPieceEncoding: If any byte has corrupt type bits
        """
        if len(data) != NUM_SQUARES:
            raise MalformedBoard(f"expected {NUM_SQUARES} bytes, got {len(data)}")
        return cls(Piece.from_byte(byte) for byte in data)

    def to_bytes(self) -> bytes:
        return self._squares.tobytes()

    def rows(self) -> Iterator[Tuple[Piece, ...]]:
        """Yield the board row by row, top row (rank 8) first."""
        for row in range(NUM_ROWS):
            start = row * NUM_COLS
            yield tuple(self[i] for i in range(start, start + NUM_COLS))

    def __len__(self) -> int:
        return NUM_SQUARES

    def __getitem__(self, index: int) -> Piece:
        return Piece(int(self._squares[index]))

    def __iter__(self) -> Iterator[Piece]:
        for value in self._squares:
            yield Piece(int(value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._squares, other._squares))

    def __hash__(self) -> int:
        return hash(self.to_bytes())

    def __repr__(self) -> str:
        return f"Board({self.to_bytes().hex()})"


def empty_board() -> Board:
    """Board with no pieces, every square drawn in its checkerboard colour."""
    return Board(
        Piece.compose(PieceType.NO_PIECE, square_color(index))
        for index in range(NUM_SQUARES)
    )
