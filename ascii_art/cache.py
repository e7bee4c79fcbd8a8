"""
Brightness Cache

Memoizes the two expensive measurements of the pipeline:
- per image: the tile-brightness vector for a given resolution
- per character: the raw (unnormalized) glyph brightness

Normalized palette values depend on the whole palette and are never cached.
Entries are never evicted; one cache object is meant to live as long as the
process (or shell session) that owns it and is passed explicitly to the
palette and the algorithm.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

from .image import RasterImage


@dataclass
class CacheStats:
    """Lookup counters for verbose output and tests."""
    image_hits: int = 0
    image_misses: int = 0
    glyph_hits: int = 0
    glyph_misses: int = 0
    images: int = 0
    glyphs: int = 0


class BrightnessCache:
    """
    Image- and character-keyed brightness memo.

    Images are looked up structurally: two RasterImage objects with the same
    dimensions and pixels share an entry.

    Example:
        >>> cache = BrightnessCache()
        >>> cache.glyph_brightness('a') is None
        True
        >>> cache.set_glyph_brightness('a', 0.25)
        >>> cache.glyph_brightness('a')
        0.25
    """

    def __init__(self):
        self._images: Dict[Tuple[RasterImage, int], Tuple[float, ...]] = {}
        self._glyphs: Dict[str, float] = {}
        self._stats = CacheStats()

    # ------------------------------------------------------------------
    # Image tile brightness
    # ------------------------------------------------------------------

    def image_brightnesses(
        self,
        image: RasterImage,
        resolution: int,
    ) -> Optional[Tuple[float, ...]]:
        """Cached tile brightness vector (row-major), or None."""
        values = self._images.get((image, resolution))
        if values is None:
            self._stats.image_misses += 1
        else:
            self._stats.image_hits += 1
        return values

    def set_image_brightnesses(
        self,
        image: RasterImage,
        resolution: int,
        values: Iterable[float],
    ):
        """
        Store the full tile brightness vector of an image.

        The vector is committed as one immutable tuple, so readers never see
        a partially filled entry.

        Raises:
            ValueError: If the vector does not hold resolution**2 values
        """
        values = tuple(float(v) for v in values)
        if len(values) != resolution * resolution:
            raise ValueError(
                f"Expected {resolution * resolution} tile brightnesses, got {len(values)}"
            )
        self._images[(image, resolution)] = values

    # ------------------------------------------------------------------
    # Glyph brightness
    # ------------------------------------------------------------------

    def glyph_brightness(self, char: str) -> Optional[float]:
        """Cached raw brightness of a character, or None."""
        value = self._glyphs.get(char)
        if value is None:
            self._stats.glyph_misses += 1
        else:
            self._stats.glyph_hits += 1
        return value

    def set_glyph_brightness(self, char: str, value: float):
        self._glyphs[char] = float(value)

    # ------------------------------------------------------------------

    def stats(self) -> CacheStats:
        return CacheStats(
            image_hits=self._stats.image_hits,
            image_misses=self._stats.image_misses,
            glyph_hits=self._stats.glyph_hits,
            glyph_misses=self._stats.glyph_misses,
            images=len(self._images),
            glyphs=len(self._glyphs),
        )

    def __repr__(self) -> str:
        return f"BrightnessCache(images={len(self._images)}, glyphs={len(self._glyphs)})"
