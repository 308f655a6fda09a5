"""
Piece Codec

A Piece is a single byte holding a square's occupant:

    bit  7     : colour flag (1 = White, 0 = Dark)
    bits 0 - 6 : type code

    Type codes:
        0: NoPiece     4: Bishop
        1: Pawn        5: Queen
        2: Knight      6: King
        3: Rook

Empty squares carry a colour too, so the board text can draw a
checkerboard: an empty White square is '#', an empty Dark square is '.'.
Pieces use their usual letters, uppercase for White and lowercase for Dark.

Examples:
    0x83 = 1000 0011 = White Rook   ('R')
    0x03 = 0000 0011 = Dark Rook    ('r')
    0x80 = 1000 0000 = empty White  ('#')

Any byte whose type bits are outside 0-6 is corrupt. Such a value can be
held by a Piece, but every operation that reads the type rejects it with
InvalidPieceEncoding.
"""

import operator
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Tuple

from packed_chess.errors import InvalidPieceEncoding, UnrecognizedPieceChar

COLOR_BIT = 1 << 7
TYPE_MASK = 0b0111_1111


class PieceType(IntEnum):
    """Type code stored in bits 0-6 of a Piece."""
    NO_PIECE = 0
    PAWN = 1
    KNIGHT = 2
    ROOK = 3
    BISHOP = 4
    QUEEN = 5
    KING = 6


class Color(Enum):
    """Colour stored in bit 7 of a Piece."""
    WHITE = 1
    DARK = 0


@dataclass(frozen=True)
class Piece:
    """
    Packed square occupant.

    Attributes:
        value: The raw byte (0-255)

    Raises:
        InvalidPieceEncoding: If value does not fit in a byte
    """

    value: int

    def __post_init__(self):
        if not isinstance(self.value, int) or not 0 <= self.value <= 0xFF:
            raise InvalidPieceEncoding(self.value)

    @classmethod
    def compose(cls, piece_type: PieceType, color: Color) -> "Piece":
        """Build a Piece from a type and a colour."""
        return with_color(cls(int(piece_type)), color)

    @classmethod
    def from_byte(cls, value: int) -> "Piece":
        """
        Reinterpret a raw byte as a Piece, rejecting corrupt type bits.

        Raises:
            InvalidPieceEncoding: If value is not a byte or its type code
                is outside 0-6
        """
        try:
            byte = operator.index(value)
        except TypeError:
            raise InvalidPieceEncoding(value) from None
        piece = cls(byte)
        type_of(piece)
        return piece

    @property
    def color(self) -> Color:
        return color_of(self)

    @property
    def piece_type(self) -> PieceType:
        return type_of(self)

    @property
    def is_empty(self) -> bool:
        return type_of(self) is PieceType.NO_PIECE

    def __repr__(self) -> str:
        return f"Piece({self.value:#04x})"


# Display character for every (type, colour) pair.
# Uppercase R is White Rook.
PIECE_CHARS: Dict[Tuple[PieceType, Color], str] = {
    (PieceType.NO_PIECE, Color.WHITE): "#",
    (PieceType.NO_PIECE, Color.DARK): ".",
    (PieceType.PAWN, Color.WHITE): "P",
    (PieceType.PAWN, Color.DARK): "p",
    (PieceType.KNIGHT, Color.WHITE): "N",
    (PieceType.KNIGHT, Color.DARK): "n",
    (PieceType.ROOK, Color.WHITE): "R",
    (PieceType.ROOK, Color.DARK): "r",
    (PieceType.BISHOP, Color.WHITE): "B",
    (PieceType.BISHOP, Color.DARK): "b",
    (PieceType.QUEEN, Color.WHITE): "Q",
    (PieceType.QUEEN, Color.DARK): "q",
    (PieceType.KING, Color.WHITE): "K",
    (PieceType.KING, Color.DARK): "k",
}

CHAR_TO_PIECE: Dict[str, Tuple[PieceType, Color]] = {
    char: key for key, char in PIECE_CHARS.items()
}


def color_of(piece: Piece) -> Color:
    """Read the colour flag (bit 7)."""
    return Color.WHITE if piece.value & COLOR_BIT else Color.DARK


def type_of(piece: Piece) -> PieceType:
    """
    Read and validate the type code (bits 0-6).

    Raises:
        InvalidPieceEncoding: If the type code is outside 0-6
    """
    code = piece.value & TYPE_MASK
    if code > PieceType.KING:
        raise InvalidPieceEncoding(piece.value)
    return PieceType(code)


def with_color(piece: Piece, color: Color) -> Piece:
    """Return a new Piece with the same type bits and bit 7 set per color."""
    if not isinstance(color, Color):
        raise TypeError(f"Expected a Color, got {color!r}")
    flag = COLOR_BIT if color is Color.WHITE else 0
    return Piece((piece.value & TYPE_MASK) | flag)


def decode_char(char: str) -> Piece:
    """
    Decode a display character into a Piece.

    Args:
        char: One of '#', '.', 'pnbrqk' (Dark) or 'PNBRQK' (White)

    Returns:
        Piece for that character

    Raises:
        UnrecognizedPieceChar: If char is not one of the 14 symbols
    """
    try:
        piece_type, color = CHAR_TO_PIECE[char]
    except (KeyError, TypeError):
        raise UnrecognizedPieceChar(char) from None
    return Piece.compose(piece_type, color)


def encode_char(piece: Piece) -> str:
    """
    Encode a Piece as its display character.

    Raises:
        InvalidPieceEncoding: If the type code is outside 0-6
    """
    return PIECE_CHARS[(type_of(piece), color_of(piece))]
