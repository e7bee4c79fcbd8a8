"""
Padding and Tiling Tests
========================
Verifies power-of-two padding, the white border, row-major tiling and the
tile round trip.
"""

import unittest
import numpy as np

from ascii_art.image import RasterImage, WHITE, BLACK
from ascii_art.geometry import (
    assemble_tiles,
    next_power_of_two,
    pad_image,
    padding_for,
    tile_image,
)
from ascii_art.exceptions import DegenerateImageError, InvalidResolutionError


def random_image(width, height, seed=0):
    rng = np.random.default_rng(seed)
    return RasterImage(rng.integers(0, 256, size=(height, width, 3), dtype=np.uint8))


class TestPadding(unittest.TestCase):

    def test_next_power_of_two(self):
        self.assertEqual(next_power_of_two(1), 1)
        self.assertEqual(next_power_of_two(2), 2)
        self.assertEqual(next_power_of_two(3), 4)
        self.assertEqual(next_power_of_two(64), 64)
        self.assertEqual(next_power_of_two(65), 128)

    def test_padded_dimensions_are_powers_of_two(self):
        """Every size from 1 to 40 pads up to the nearest power of two."""
        for width in range(1, 41, 3):
            for height in range(1, 41, 5):
                padded = pad_image(RasterImage.blank(width, height, color=BLACK))
                for original, size in ((width, padded.width), (height, padded.height)):
                    self.assertGreaterEqual(size, original)
                    self.assertEqual(size & (size - 1), 0, f"{size} is not a power of two")
                    self.assertLess(size, 2 * original)

    def test_power_of_two_image_is_unchanged(self):
        image = random_image(16, 8)
        padded = pad_image(image)
        self.assertEqual(padded, image)
        self.assertEqual((padded.width, padded.height), (16, 8))

    def test_content_is_centered_with_white_border(self):
        """A 3x5 black image lands in a 4x8 canvas; the odd remainder goes bottom/right."""
        padded = pad_image(RasterImage.blank(3, 5, color=BLACK))
        self.assertEqual((padded.width, padded.height), (4, 8))
        self.assertEqual(padding_for(5), (1, 2))
        self.assertEqual(padding_for(3), (0, 1))

        pixels = padded.pixels
        # content rows 1..5, columns 0..2
        self.assertTrue(np.all(pixels[1:6, 0:3] == 0))
        # border
        self.assertTrue(np.all(pixels[0, :] == 255))
        self.assertTrue(np.all(pixels[6:, :] == 255))
        self.assertTrue(np.all(pixels[:, 3] == 255))

    def test_pixels_keep_their_values(self):
        image = random_image(5, 6, seed=3)
        padded = pad_image(image)
        top, _ = padding_for(6)
        left, _ = padding_for(5)
        np.testing.assert_array_equal(
            padded.pixels[top:top + 6, left:left + 5], image.pixels
        )
        self.assertEqual(padded.get_pixel(0, 0), WHITE)

    def test_zero_sized_image_fails(self):
        with self.assertRaises(DegenerateImageError):
            pad_image(RasterImage(np.zeros((0, 4, 3), dtype=np.uint8)))
        with self.assertRaises(DegenerateImageError):
            pad_image(RasterImage(np.zeros((4, 0, 3), dtype=np.uint8)))


class TestTiling(unittest.TestCase):

    def test_tile_count_and_shape(self):
        tiles = tile_image(random_image(8, 8), 4)
        self.assertEqual(len(tiles), 16)
        for tile in tiles:
            self.assertEqual(tile.shape, (2, 2, 3))

    def test_row_major_order(self):
        """Tile 1 is the top row, second column; tile 2 (of 2x2) starts the second row."""
        image = random_image(8, 4, seed=1)
        tiles = tile_image(image, 2)
        np.testing.assert_array_equal(tiles[0], image.pixels[0:2, 0:4])
        np.testing.assert_array_equal(tiles[1], image.pixels[0:2, 4:8])
        np.testing.assert_array_equal(tiles[2], image.pixels[2:4, 0:4])
        np.testing.assert_array_equal(tiles[3], image.pixels[2:4, 4:8])

    def test_round_trip(self):
        for resolution in (1, 2, 4, 8, 16):
            image = pad_image(random_image(13, 11, seed=resolution))
            tiles = tile_image(image, resolution)
            self.assertEqual(len(tiles), resolution * resolution)
            self.assertEqual(assemble_tiles(tiles, resolution), image)

    def test_uneven_resolution_drops_trailing_pixels(self):
        image = random_image(8, 8, seed=2)
        tiles = tile_image(image, 3)
        self.assertEqual(len(tiles), 9)
        self.assertEqual(tiles[0].shape, (2, 2, 3))
        np.testing.assert_array_equal(tiles[8], image.pixels[4:6, 4:6])

    def test_tiles_are_read_only(self):
        tile = tile_image(random_image(4, 4), 2)[0]
        with self.assertRaises(ValueError):
            tile[0, 0] = (1, 2, 3)

    def test_invalid_resolution(self):
        image = random_image(8, 8)
        with self.assertRaises(InvalidResolutionError):
            tile_image(image, 0)
        with self.assertRaises(InvalidResolutionError):
            tile_image(image, 16)

    def test_assemble_rejects_wrong_count(self):
        tiles = tile_image(random_image(4, 4), 2)
        with self.assertRaises(ValueError):
            assemble_tiles(tiles[:3], 2)


if __name__ == '__main__':
    unittest.main()
