"""Tests for terminal styling of single squares."""

import unittest

from fencat.board import EMPTY, Color, Kind, Piece, Square
from fencat.renderer import (
    BASIC, BLANK_CELL, CLASSIC, GLYPH_SETS, PALETTES, RESET, Palette,
    get_palette, get_piece_map, render_square, sgr
)

FEN_LETTERS = 'pnbrqkPNBRQK'


class TestGetPieceMap(unittest.TestCase):
    """Test suite for get_piece_map."""

    def test_every_set_covers_all_pieces(self):
        """Every glyph set maps all 12 piece letters."""
        for name in GLYPH_SETS:
            self.assertEqual(set(get_piece_map(name)), set(FEN_LETTERS), name)

    def test_unicode_glyphs_distinct_and_non_blank(self):
        glyphs = get_piece_map('unicode')
        values = [glyphs[letter] for letter in FEN_LETTERS]
        self.assertEqual(len(set(values)), 12)
        self.assertTrue(all(value.strip() for value in values))

    def test_ascii_glyphs_distinct(self):
        glyphs = get_piece_map('ascii')
        self.assertEqual(len(set(glyphs.values())), 12)
        self.assertEqual(glyphs['Q'], 'Q')

    def test_unicode_symbols(self):
        """White pieces use outline symbols, Black pieces solid ones."""
        glyphs = get_piece_map()
        self.assertEqual(glyphs['K'], '♔')
        self.assertEqual(glyphs['P'], '♙')
        self.assertEqual(glyphs['k'], '♚')
        self.assertEqual(glyphs['p'], '\u265f\ufe0e')

    def test_solid_set_shares_symbols(self):
        glyphs = get_piece_map('solid')
        self.assertEqual(glyphs['R'], glyphs['r'])

    def test_unknown_set(self):
        with self.assertRaises(KeyError):
            get_piece_map('emoji')

    def test_tables_are_read_only(self):
        with self.assertRaises(TypeError):
            GLYPH_SETS['unicode']['K'] = 'X'
        with self.assertRaises(TypeError):
            PALETTES['mine'] = CLASSIC


class TestPalette(unittest.TestCase):
    """Test suite for Palette."""

    def test_background_by_parity(self):
        self.assertEqual(CLASSIC.background(0), "48;5;249")
        self.assertEqual(CLASSIC.background(1), "48;5;246")

    def test_foreground_by_color(self):
        self.assertEqual(CLASSIC.foreground(Color.WHITE), "38;5;231")
        self.assertEqual(CLASSIC.foreground(Color.BLACK), "38;5;0")

    def test_builtins_validate(self):
        for palette in PALETTES.values():
            palette.validate()

    def test_invalid_value(self):
        palette = Palette("bad", "48;5;249", "red", "38;5;231", "38;5;0")
        with self.assertRaises(ValueError) as ctx:
            palette.validate()
        self.assertIn("dark_background", str(ctx.exception))

    def test_get_palette(self):
        self.assertIs(get_palette(), CLASSIC)
        self.assertIs(get_palette('basic'), BASIC)
        with self.assertRaises(KeyError):
            get_palette('neon')

    def test_sgr(self):
        self.assertEqual(sgr("48;5;249"), "\x1b[48;5;249m")


class TestRenderSquare(unittest.TestCase):
    """Test suite for render_square."""

    def test_empty_light_square(self):
        self.assertEqual(render_square(EMPTY, 0), f"\x1b[48;5;249m{BLANK_CELL}\x1b[0m")

    def test_empty_dark_square(self):
        self.assertEqual(render_square(EMPTY, 1), f"\x1b[48;5;246m{BLANK_CELL}\x1b[0m")

    def test_white_piece(self):
        square = Square(Piece(Color.WHITE, Kind.KING))
        self.assertEqual(render_square(square, 1), "\x1b[48;5;246m\x1b[38;5;231m ♔ \x1b[0m")

    def test_black_piece(self):
        square = Square(Piece(Color.BLACK, Kind.ROOK))
        self.assertEqual(render_square(square, 0), "\x1b[48;5;249m\x1b[38;5;0m ♜ \x1b[0m")

    def test_basic_palette(self):
        square = Square(Piece(Color.WHITE, Kind.QUEEN))
        self.assertEqual(
            render_square(square, 0, BASIC, get_piece_map('ascii')),
            "\x1b[47m\x1b[97m Q \x1b[0m"
        )

    def test_unknown_square_is_blank(self):
        self.assertEqual(render_square(Square(unknown="x"), 0), f"\x1b[48;5;249m{BLANK_CELL}\x1b[0m")

    def test_unmapped_glyph_is_blank(self):
        square = Square(Piece(Color.WHITE, Kind.KING))
        self.assertEqual(render_square(square, 0, CLASSIC, {}), f"\x1b[48;5;249m{BLANK_CELL}\x1b[0m")

    def test_always_reset(self):
        """Styling never leaks past the cell."""
        for letter in FEN_LETTERS:
            for parity in (0, 1):
                cell = render_square(Square(Piece.from_fen(letter)), parity)
                self.assertTrue(cell.endswith(RESET))
                self.assertEqual(cell.count(RESET), 1)


if __name__ == '__main__':
    unittest.main()
