"""
Packed Chess

A minimal chess board representation: every square's occupant is packed
into a single byte, and a board converts to and from a plain 8x8 text
layout.

## Encoding

    bit  7     : colour (1 = White, 0 = Dark)
    bits 0 - 6 : type (0 NoPiece, 1 Pawn, 2 Knight, 3 Rook,
                       4 Bishop, 5 Queen, 6 King)

Empty squares keep a colour so the text can show a checkerboard
('#' = White, '.' = Dark).

## Quick Start

```python
from packed_chess.board import STARTING_POSITION, parse, render

board = parse(STARTING_POSITION)
print(board[0].piece_type, board[0].color)   # PieceType.ROOK Color.DARK
assert render(board) == STARTING_POSITION
```

### From the command line

```bash
python -m packed_chess [BOARD_FILE ...]
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from packed_chess.board import Board, Color, Piece, PieceType, parse, render
from packed_chess.errors import (
    BoardCodecError,
    InvalidPieceEncoding,
    MalformedBoard,
    UnrecognizedPieceChar,
)

__all__ = [
    'Board',
    'Color',
    'Piece',
    'PieceType',
    'parse',
    'render',
    'BoardCodecError',
    'InvalidPieceEncoding',
    'MalformedBoard',
    'UnrecognizedPieceChar',
]
