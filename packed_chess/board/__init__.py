"""
Board Module

This module holds the packed board representation and its text format.

Key Components:
    - piece: Piece Codec, one byte per square (colour bit + type code)
    - board: Board, 64 packed Pieces in reading order
    - transcoder: parse()/render() between board text and Board
    - representation: numpy and python-chess bridges

Data Flow:
    board text → parse() → Board (64 bytes) → render() → board text
"""

from packed_chess.board.board import Board, empty_board
from packed_chess.board.piece import (
    Color,
    Piece,
    PieceType,
    color_of,
    decode_char,
    encode_char,
    type_of,
    with_color,
)
from packed_chess.board.transcoder import STARTING_POSITION, parse, render

__all__ = [
    'Board',
    'empty_board',
    'Color',
    'Piece',
    'PieceType',
    'color_of',
    'decode_char',
    'encode_char',
    'type_of',
    'with_color',
    'STARTING_POSITION',
    'parse',
    'render',
]
