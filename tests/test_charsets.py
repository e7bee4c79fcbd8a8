"""
Charset and Glyph Rasterization Tests
"""

import unittest
import numpy as np

from ascii_art.brightness import glyph_brightness
from ascii_art.charsets import (
    ASCII_STANDARD,
    GLYPH_RESOLUTION,
    char_range,
    get_charset,
    list_charsets,
    parse_range,
    render_glyph,
)


class TestRenderGlyph(unittest.TestCase):

    def test_grid_shape(self):
        grid = render_glyph('A')
        self.assertEqual(grid.shape, (GLYPH_RESOLUTION, GLYPH_RESOLUTION))
        self.assertEqual(grid.dtype, np.bool_)

    def test_space_is_fully_bright(self):
        self.assertEqual(glyph_brightness(render_glyph(' ')), 1.0)

    def test_ink_darkens(self):
        self.assertLess(glyph_brightness(render_glyph('#')), 1.0)

    def test_custom_resolution(self):
        self.assertEqual(render_glyph('x', resolution=8).shape, (8, 8))

    def test_rejects_multiple_characters(self):
        with self.assertRaises(ValueError):
            render_glyph('ab')


class TestCharsets(unittest.TestCase):

    def test_standard_is_printable_ascii(self):
        self.assertEqual(len(ASCII_STANDARD), 95)
        self.assertEqual(ASCII_STANDARD[0], ' ')
        self.assertEqual(ASCII_STANDARD[-1], '~')

    def test_named_sets(self):
        self.assertEqual(get_charset("digits"), "0123456789")
        self.assertIn("ascii_dense", list_charsets())
        with self.assertRaises(ValueError):
            get_charset("klingon")

    def test_parse_range(self):
        self.assertEqual(parse_range("a-z"), ("a", "z"))
        self.assertEqual(parse_range("z-a"), ("z", "a"))
        self.assertEqual(parse_range("--/"), ("-", "/"))
        self.assertIsNone(parse_range("abc"))
        self.assertIsNone(parse_range("a - z"))

    def test_char_range_is_inclusive_in_either_order(self):
        self.assertEqual(char_range('a', 'e'), "abcde")
        self.assertEqual(char_range('e', 'a'), "abcde")
        self.assertEqual(char_range('q', 'q'), "q")


if __name__ == '__main__':
    unittest.main()
