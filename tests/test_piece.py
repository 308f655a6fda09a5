"""
Unit Tests for the Piece Codec

Tests for the packed byte layout, focusing on:
    - Character decode/encode for all 14 symbols
    - Colour flag handling (with_color never touches the type bits)
    - Rejection of corrupt bytes and unknown characters
"""

import numpy as np
import pytest

from packed_chess.board.piece import (
    COLOR_BIT,
    PIECE_CHARS,
    Color,
    Piece,
    PieceType,
    color_of,
    decode_char,
    encode_char,
    type_of,
    with_color,
)
from packed_chess.errors import BoardCodecError, InvalidPieceEncoding, UnrecognizedPieceChar

ALL_CHARS = "#.rnpbqkRNPBQK"
VALID_PIECES = [Piece.compose(t, c) for t in PieceType for c in Color]


class TestCharCodec:
    """Tests for decode_char and encode_char."""

    @pytest.mark.parametrize("char", list(ALL_CHARS))
    def test_roundtrip(self, char):
        """Test that every symbol encodes back to itself."""
        assert encode_char(decode_char(char)) == char

    def test_alphabet_size(self):
        """Test that each (type, colour) pair has its own character."""
        assert len(PIECE_CHARS) == 14
        assert set(PIECE_CHARS.values()) == set(ALL_CHARS)

    def test_uppercase_rook_is_rook(self):
        """Test that 'R' decodes to White Rook, not King."""
        piece = decode_char("R")
        assert type_of(piece) is PieceType.ROOK
        assert color_of(piece) is Color.WHITE

    def test_case_selects_color(self):
        for lower in "pnbrqk":
            assert color_of(decode_char(lower)) is Color.DARK
            assert color_of(decode_char(lower.upper())) is Color.WHITE
            assert type_of(decode_char(lower)) == type_of(decode_char(lower.upper()))

    def test_empty_squares_keep_color(self):
        """Test that '#' and '.' are both empty but differ in colour."""
        light = decode_char("#")
        dark = decode_char(".")

        assert light.is_empty and dark.is_empty
        assert color_of(light) is Color.WHITE
        assert color_of(dark) is Color.DARK
        assert light != dark

    @pytest.mark.parametrize("char", ["x", " ", "1", "", "rr", "\n"])
    def test_unrecognized_char(self, char):
        with pytest.raises(UnrecognizedPieceChar) as exc_info:
            decode_char(char)

        assert exc_info.value.char == char
        assert exc_info.value.position is None

    def test_non_string_input(self):
        with pytest.raises(UnrecognizedPieceChar):
            decode_char(["r"])

    def test_errors_are_value_errors(self):
        """Test that codec errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            decode_char("x")
        assert issubclass(InvalidPieceEncoding, BoardCodecError)

    def test_encode_corrupt_byte(self):
        with pytest.raises(InvalidPieceEncoding):
            encode_char(Piece(0x87))


class TestBitLayout:
    """Tests for the colour bit and type code."""

    def test_known_values(self):
        """Test the concrete byte values of a few pieces."""
        assert decode_char("R").value == 0x83
        assert decode_char("r").value == 0x03
        assert decode_char("#").value == 0x80
        assert decode_char(".").value == 0x00
        assert decode_char("K").value == COLOR_BIT | PieceType.KING

    @pytest.mark.parametrize("piece", VALID_PIECES)
    def test_with_color_preserves_type(self, piece):
        assert type_of(with_color(piece, Color.WHITE)) == type_of(piece)
        assert type_of(with_color(piece, Color.DARK)) == type_of(piece)

    @pytest.mark.parametrize("piece", VALID_PIECES)
    @pytest.mark.parametrize("color", list(Color))
    def test_with_color_sets_color(self, piece, color):
        assert color_of(with_color(piece, color)) is color

    def test_with_color_clears_white_bit(self):
        """Test that switching a White piece to Dark clears bit 7."""
        assert with_color(Piece(0x85), Color.DARK) == Piece(0x05)

    @pytest.mark.parametrize("color", [True, False, 1, "white", None])
    def test_with_color_rejects_non_color(self, color):
        """Test that python-chess style booleans are not taken as a Color."""
        with pytest.raises(TypeError):
            with_color(decode_char("K"), color)

    def test_with_color_returns_new_piece(self):
        piece = decode_char("Q")
        recolored = with_color(piece, Color.DARK)

        assert piece.value == 0x85
        assert recolored is not piece
        assert encode_char(recolored) == "q"

    def test_properties_match_functions(self):
        piece = decode_char("n")
        assert piece.color is color_of(piece)
        assert piece.piece_type is type_of(piece)
        assert not piece.is_empty


class TestInvalidEncoding:
    """Tests for bytes outside the valid Piece range."""

    @pytest.mark.parametrize("value", [0x07, 0x7F, 0x87, 0xFF])
    def test_type_of_rejects_bad_type_code(self, value):
        with pytest.raises(InvalidPieceEncoding) as exc_info:
            type_of(Piece(value))
        assert exc_info.value.byte == value

    @pytest.mark.parametrize("value", [0x07, 0x7F, 0x87, 0xFF])
    def test_from_byte_rejects_bad_type_code(self, value):
        with pytest.raises(InvalidPieceEncoding):
            Piece.from_byte(value)

    @pytest.mark.parametrize("value", [-1, 256, 1000])
    def test_value_must_be_a_byte(self, value):
        with pytest.raises(InvalidPieceEncoding, match="not a byte"):
            Piece(value)

    @pytest.mark.parametrize("value", [3.9, 3.0, "3", b"\x03", None])
    def test_from_byte_rejects_non_integers(self, value):
        """Test that floats and numeric strings are not coerced to a byte."""
        with pytest.raises(InvalidPieceEncoding):
            Piece.from_byte(value)

    def test_from_byte_accepts_numpy_integers(self):
        assert Piece.from_byte(np.uint8(0x83)) == decode_char("R")

    def test_color_of_ignores_type_bits(self):
        """Test that the colour bit is readable even on a corrupt byte."""
        assert color_of(Piece(0xFF)) is Color.WHITE

    def test_from_byte_accepts_valid_bytes(self):
        for piece in VALID_PIECES:
            assert Piece.from_byte(piece.value) == piece

    def test_message_shows_hex(self):
        with pytest.raises(InvalidPieceEncoding, match="0x07"):
            type_of(Piece(7))
