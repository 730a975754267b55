"""
Tests for the bitmap matrix fonts.
"""

import unittest

from dotmatrix.matrix_font import (
    MATRIX_FONT_3X5,
    MATRIX_FONT_8X8,
    MatrixFont,
    get_bit_at,
    is_bit_set,
)


class TestBitLookup(unittest.TestCase):

    def test_get_bit_at_reads_lsb_first(self):
        glyph = (0b100, 0b001)
        self.assertEqual(get_bit_at(2, 0, glyph), 1)
        self.assertEqual(get_bit_at(0, 0, glyph), 0)
        self.assertEqual(get_bit_at(0, 1, glyph), 1)

    def test_is_bit_set(self):
        self.assertTrue(is_bit_set(1, 0, (0b10,)))
        self.assertFalse(is_bit_set(0, 0, (0b10,)))


class TestMatrixFont8x8(unittest.TestCase):

    def test_dimensions(self):
        self.assertEqual(MATRIX_FONT_8X8.character_width, 8)
        self.assertEqual(MATRIX_FONT_8X8.character_height, 8)

    def test_covers_printable_ascii(self):
        # only the space glyph is blank; anything missing would fall back to it
        for code in range(0x21, 0x7F):
            self.assertNotEqual(MATRIX_FONT_8X8.get_character(chr(code)), (0,) * 8, chr(code))

    def test_every_glyph_has_eight_rows(self):
        for code in range(0x20, 0x7F):
            self.assertEqual(len(MATRIX_FONT_8X8.get_character(chr(code))), 8)

    def test_highest_bit_is_leftmost_column(self):
        # 'L' has its stem on the left: bits 6 and 5 of every upper row
        glyph = MATRIX_FONT_8X8.get_character("L")
        self.assertEqual(glyph[0], 0x60)
        self.assertEqual(get_bit_at(6, 0, glyph), 1)
        self.assertEqual(get_bit_at(1, 0, glyph), 0)

    def test_space_is_blank(self):
        self.assertEqual(MATRIX_FONT_8X8.get_character(" "), (0,) * 8)

    def test_unsupported_character_returns_blank_fallback(self):
        self.assertEqual(MATRIX_FONT_8X8.get_character("☃"), (0,) * 8)

    def test_empty_string_returns_fallback(self):
        self.assertEqual(MATRIX_FONT_8X8.get_character(""), (0,) * 8)


class TestMatrixFont3x5(unittest.TestCase):

    def test_dimensions(self):
        self.assertEqual(MATRIX_FONT_3X5.character_width, 3)
        self.assertEqual(MATRIX_FONT_3X5.character_height, 5)

    def test_lowercase_falls_back_to_uppercase(self):
        self.assertEqual(MATRIX_FONT_3X5.get_character("a"),
                         MATRIX_FONT_3X5.get_character("A"))

    def test_si_prefixes_keep_their_own_glyphs(self):
        self.assertNotEqual(MATRIX_FONT_3X5.get_character("k"),
                            MATRIX_FONT_3X5.get_character("K"))

    def test_omega(self):
        self.assertEqual(MATRIX_FONT_3X5.get_character("Ω"), (2, 5, 5, 2, 5))


class TestCustomFont(unittest.TestCase):

    def test_custom_fallback(self):
        font = MatrixFont("box", 2, 2, {"a": (3, 3)}, fallback=(1, 2))
        self.assertEqual(font.get_character("z"), (1, 2))

    def test_wrong_row_count_raises(self):
        with self.assertRaises(ValueError):
            MatrixFont("bad", 3, 5, {"x": (1, 2, 3)})

    def test_non_positive_size_raises(self):
        with self.assertRaises(ValueError):
            MatrixFont("bad", 0, 5, {})


if __name__ == "__main__":
    unittest.main()
