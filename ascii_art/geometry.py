"""
Image Geometry

Padding and tiling for the brightness pipeline:
- pad_image: grow each side to the next power of two with a white border
- tile_image: split the padded image into a resolution x resolution grid
- assemble_tiles: stitch a tile list back into one image

Tiles are produced in row-major order. The same order fills the output
character grid and the per-image brightness vector in the cache.
"""

from typing import List, Sequence, Tuple
import numpy as np
import cv2

from .image import RasterImage, WHITE
from .exceptions import DegenerateImageError, InvalidResolutionError


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n (n >= 1)."""
    return 1 << (n - 1).bit_length()


def padding_for(size: int) -> Tuple[int, int]:
    """
    Border widths (before, after) that center ``size`` in its padded length.

    The odd remainder goes to the high side.
    """
    total = next_power_of_two(size) - size
    before = total // 2
    return before, total - before


def pad_image(image: RasterImage) -> RasterImage:
    """
    Pad an image with white pixels so both sides are powers of two.

    Args:
        image: Source image

    Returns:
        Padded image (the input itself if no padding is needed)

    Raises:
        DegenerateImageError: If width or height is 0
    """
    if image.width == 0 or image.height == 0:
        raise DegenerateImageError()

    top, bottom = padding_for(image.height)
    left, right = padding_for(image.width)

    if top == bottom == left == right == 0:
        return image

    padded = cv2.copyMakeBorder(
        np.array(image.pixels),
        top, bottom, left, right,
        cv2.BORDER_CONSTANT,
        value=WHITE,
    )
    return RasterImage(padded)


def tile_shape(image: RasterImage, resolution: int) -> Tuple[int, int]:
    """
    (tile_height, tile_width) for a resolution.

    Truncating division: rows/columns that do not fit a whole tile are dropped.
    """
    if resolution < 1:
        raise InvalidResolutionError(f"Resolution must be at least 1, got {resolution}")

    tile_h = image.height // resolution
    tile_w = image.width // resolution
    if tile_h == 0 or tile_w == 0:
        raise InvalidResolutionError(
            f"Resolution {resolution} is larger than the image ({image.width}x{image.height})"
        )
    return tile_h, tile_w


def tile_image(image: RasterImage, resolution: int) -> List[np.ndarray]:
    """
    Split an image into ``resolution * resolution`` tiles.

    Args:
        image: Padded image
        resolution: Number of tiles per side

    Returns:
        Read-only (tile_h, tile_w, 3) views, row by row, left to right
    """
    tile_h, tile_w = tile_shape(image, resolution)
    pixels = image.pixels

    tiles = []
    for row in range(resolution):
        y = row * tile_h
        for col in range(resolution):
            x = col * tile_w
            tiles.append(pixels[y:y + tile_h, x:x + tile_w])
    return tiles


def assemble_tiles(tiles: Sequence[np.ndarray], resolution: int) -> RasterImage:
    """Rebuild an image from tiles in row-major order."""
    if len(tiles) != resolution * resolution:
        raise ValueError(f"Expected {resolution * resolution} tiles, got {len(tiles)}")

    rows = [
        np.concatenate(tiles[r * resolution:(r + 1) * resolution], axis=1)
        for r in range(resolution)
    ]
    return RasterImage(np.concatenate(rows, axis=0))
