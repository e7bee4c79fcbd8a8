"""
Brightness Measures

- tile_brightness: perceptual (BT.709 luma) mean of an image tile, in [0, 1]
- glyph_brightness: share of "on" cells in a glyph occupancy grid, in [0, 1]
"""

from typing import Union
import numpy as np

from .image import RasterImage


# ITU-R BT.709 luma coefficients (R, G, B)
LUMA_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)

MAX_RGB = 255


def tile_brightness(tile: Union[np.ndarray, RasterImage]) -> float:
    """
    Average perceptual brightness of a tile.

    Args:
        tile: (H, W, 3) RGB array (0-255) or a RasterImage

    Returns:
        sum(luma) / (pixel_count * 255), 0.0 for black and 1.0 for white
    """
    if isinstance(tile, RasterImage):
        tile = tile.pixels

    pixel_count = tile.shape[0] * tile.shape[1]
    if pixel_count == 0:
        raise ValueError("Cannot compute brightness of an empty tile")

    # exact integer channel sums, weighted once, so a white tile is exactly 1.0
    sums = tile.reshape(-1, 3).sum(axis=0, dtype=np.int64)
    return float((sums / (pixel_count * MAX_RGB)) @ LUMA_WEIGHTS)


def glyph_brightness(occupancy: np.ndarray) -> float:
    """
    Raw brightness of a rendered glyph.

    Args:
        occupancy: Square boolean grid, True where the cell counts as bright

    Returns:
        Fraction of True cells
    """
    occupancy = np.asarray(occupancy, dtype=bool)
    if occupancy.size == 0:
        raise ValueError("Occupancy grid is empty")
    return np.count_nonzero(occupancy) / occupancy.size
