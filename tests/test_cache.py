"""
Brightness Cache Tests
"""

import unittest
import numpy as np

from ascii_art.cache import BrightnessCache
from ascii_art.image import RasterImage


class TestImageEntries(unittest.TestCase):

    def setUp(self):
        self.cache = BrightnessCache()
        self.pixels = np.arange(4 * 4 * 3, dtype=np.uint8).reshape(4, 4, 3)

    def test_lookup_is_structural(self):
        """Separately built images with the same pixels share an entry."""
        self.cache.set_image_brightnesses(RasterImage(self.pixels), 2, [0.1, 0.2, 0.3, 0.4])
        copy = RasterImage(self.pixels.copy())
        self.assertEqual(self.cache.image_brightnesses(copy, 2), (0.1, 0.2, 0.3, 0.4))

    def test_different_pixels_miss(self):
        self.cache.set_image_brightnesses(RasterImage(self.pixels), 2, [0.0] * 4)
        other = self.pixels.copy()
        other[3, 3, 2] += 1
        self.assertIsNone(self.cache.image_brightnesses(RasterImage(other), 2))

    def test_resolutions_are_separate(self):
        image = RasterImage(self.pixels)
        self.cache.set_image_brightnesses(image, 1, [0.5])
        self.assertIsNone(self.cache.image_brightnesses(image, 2))
        self.assertEqual(self.cache.image_brightnesses(image, 1), (0.5,))

    def test_vector_length_must_match(self):
        image = RasterImage(self.pixels)
        with self.assertRaises(ValueError):
            self.cache.set_image_brightnesses(image, 2, [0.1, 0.2, 0.3])
        self.assertIsNone(self.cache.image_brightnesses(image, 2))

    def test_stored_vector_is_immutable(self):
        values = [0.1, 0.2, 0.3, 0.4]
        image = RasterImage(self.pixels)
        self.cache.set_image_brightnesses(image, 2, values)
        values.append(0.5)
        self.assertIsInstance(self.cache.image_brightnesses(image, 2), tuple)
        self.assertEqual(len(self.cache.image_brightnesses(image, 2)), 4)


class TestGlyphEntries(unittest.TestCase):

    def test_get_and_set(self):
        cache = BrightnessCache()
        self.assertIsNone(cache.glyph_brightness('a'))
        cache.set_glyph_brightness('a', 0.25)
        self.assertEqual(cache.glyph_brightness('a'), 0.25)
        self.assertIsNone(cache.glyph_brightness('b'))

    def test_stats(self):
        cache = BrightnessCache()
        cache.glyph_brightness('a')
        cache.set_glyph_brightness('a', 0.5)
        cache.glyph_brightness('a')
        cache.set_image_brightnesses(RasterImage.blank(2, 2), 1, [1.0])

        stats = cache.stats()
        self.assertEqual((stats.glyph_hits, stats.glyph_misses), (1, 1))
        self.assertEqual((stats.images, stats.glyphs), (1, 1))


if __name__ == '__main__':
    unittest.main()
