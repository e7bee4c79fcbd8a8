"""
ASCII Art Algorithm

End-to-end conversion of a RasterImage into a resolution x resolution grid
of characters:

    image -> pad -> tile -> [cache] -> tile brightness -> match -> grid

Tile brightness vectors are memoized per (image, resolution) in the
BrightnessCache, so converting the same picture again only re-runs the
(cheap) matching step against the current palette.
"""

import time
from typing import Callable, List, Optional, Tuple
import numpy as np

from .brightness import tile_brightness
from .cache import BrightnessCache
from .exceptions import EmptyPaletteError
from .geometry import pad_image, tile_image
from .image import RasterImage
from .matcher import match_brightnesses
from .palette import CharacterPalette
from .result import AsciiArtResult, create_result


BrightnessFn = Callable[[np.ndarray], float]

CharGrid = List[List[str]]


class AsciiArtAlgorithm:
    """
    Brightness-matching ASCII art converter.

    Example:
        >>> cache = BrightnessCache()
        >>> palette = CharacterPalette("0123456789", cache=cache)
        >>> algorithm = AsciiArtAlgorithm(cache=cache)
        >>> grid = algorithm.run(RasterImage.open("cat.jpeg"), 64, palette)
        >>> len(grid), len(grid[0])
        (64, 64)
    """

    def __init__(
        self,
        cache: Optional[BrightnessCache] = None,
        brightness_fn: BrightnessFn = tile_brightness,
        verbose: bool = False,
    ):
        """
        Args:
            cache: Shared brightness cache (a private one if None)
            brightness_fn: Per-tile brightness measure
            verbose: Print progress and cache status
        """
        self.cache = cache if cache is not None else BrightnessCache()
        self.brightness_fn = brightness_fn
        self.verbose = verbose

    def tile_brightnesses(self, image: RasterImage, resolution: int) -> Tuple[Tuple[float, ...], bool]:
        """
        Brightness of every tile, row-major.

        Returns:
            (brightness vector, True if it came from the cache)
        """
        cached = self.cache.image_brightnesses(image, resolution)
        if cached is not None:
            if self.verbose:
                print(f"♻️  Reusing cached brightness for {image.width}x{image.height} @ {resolution}")
            return cached, True

        padded = pad_image(image)
        tiles = tile_image(padded, resolution)

        if self.verbose:
            print(f"⚡ Measuring {len(tiles)} tiles ({padded.width}x{padded.height} padded)...")

        # Commit only once every tile has been measured
        values = tuple(self.brightness_fn(tile) for tile in tiles)
        self.cache.set_image_brightnesses(image, resolution, values)
        return values, False

    def run(self, image: RasterImage, resolution: int, palette: CharacterPalette) -> CharGrid:
        """
        Convert an image to a grid of characters.

        Args:
            image: Source image
            resolution: Characters per side of the output grid
            palette: Characters to choose from

        Returns:
            ``resolution`` rows of ``resolution`` characters

        Raises:
            EmptyPaletteError: If the palette is empty
            DegenerateImageError: If the image has zero width or height
            InvalidResolutionError: If the resolution does not fit the image
        """
        grid, _ = self._match(image, resolution, palette)
        return grid

    def _match(self, image: RasterImage, resolution: int, palette: CharacterPalette) -> Tuple[CharGrid, bool]:
        if len(palette) == 0:
            raise EmptyPaletteError()

        brightnesses, from_cache = self.tile_brightnesses(image, resolution)
        chars = match_brightnesses(brightnesses, palette)

        grid = [
            chars[row * resolution:(row + 1) * resolution]
            for row in range(resolution)
        ]
        return grid, from_cache

    def convert(self, image: RasterImage, resolution: int, palette: CharacterPalette) -> AsciiArtResult:
        """Like run(), wrapped in an AsciiArtResult with run metadata."""
        start_time = time.time()
        grid, from_cache = self._match(image, resolution, palette)
        elapsed = time.time() - start_time

        if self.verbose:
            print(f"✅ Converted in {elapsed:.3f}s")

        return create_result(
            grid,
            source_image=image,
            resolution=resolution,
            charset="".join(palette.characters()),
            cached=from_cache,
            elapsed_seconds=round(elapsed, 4),
        )


def image_to_ascii(
    image: RasterImage,
    resolution: int,
    palette: CharacterPalette,
    cache: Optional[BrightnessCache] = None,
    verbose: bool = False,
) -> AsciiArtResult:
    """
    Convenience function to convert an image to ASCII art.

    Args:
        image: Source image
        resolution: Characters per side
        palette: Characters to choose from
        cache: Brightness cache to reuse (defaults to the palette's cache)
        verbose: Print progress

    Returns:
        AsciiArtResult
    """
    algorithm = AsciiArtAlgorithm(cache=cache or palette.cache, verbose=verbose)
    return algorithm.convert(image, resolution, palette)
