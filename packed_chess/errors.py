"""
Error Taxonomy

Every failure raised by the codec and the transcoder derives from
BoardCodecError. It subclasses ValueError, so callers that only care about
"bad input" can keep catching ValueError.

    BoardCodecError
    ├── UnrecognizedPieceChar  - character outside the 14-symbol alphabet
    ├── InvalidPieceEncoding   - packed byte with type bits outside 0-6
    └── MalformedBoard         - wrong row count, row length or square count
"""

from typing import Optional, Tuple


class BoardCodecError(ValueError):
    """Base class for all board encoding errors."""


class UnrecognizedPieceChar(BoardCodecError):
    """
    A display character that does not map to any Piece.

    Attributes:
        char: The offending input
        position: (row, col) of the character when raised while parsing a
            board, None when raised by a single decode call
    """

    def __init__(self, char: str, position: Optional[Tuple[int, int]] = None):
        self.char = char
        self.position = position
        message = f"Unrecognized piece character: {char!r}"
        if position is not None:
            row, col = position
            message += f" at row {row}, column {col}"
        super().__init__(message)


class InvalidPieceEncoding(BoardCodecError):
    """A raw value that cannot be reinterpreted as a Piece."""

    def __init__(self, byte: int):
        self.byte = byte
        if isinstance(byte, int) and 0 <= byte <= 0xFF:
            super().__init__(f"Invalid piece encoding: {byte:#04x}")
        else:
            super().__init__(f"Invalid piece encoding: {byte!r} is not a byte")


class MalformedBoard(BoardCodecError):
    """Board text or data with the wrong shape."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Malformed board: {reason}")
