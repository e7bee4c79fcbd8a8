"""
Brightness-Matched ASCII Art

Converts a raster image into a square grid of characters whose ink density
follows the brightness of the image:
- Power-of-two white padding and square tiling
- BT.709 luma per tile
- Normalized glyph-brightness palette with closest-match lookup
- Process-lifetime memoization of tile and glyph brightness
"""

__version__ = "1.0.0"

from .image import RasterImage
from .cache import BrightnessCache
from .palette import CharacterPalette
from .matcher import closest_character, match_brightnesses
from .geometry import pad_image, tile_image
from .brightness import tile_brightness, glyph_brightness
from .algorithm import AsciiArtAlgorithm, image_to_ascii
from .result import AsciiArtResult
from .exceptions import AsciiArtError, EmptyPaletteError, DegenerateImageError

__all__ = [
    "RasterImage",
    "BrightnessCache",
    "CharacterPalette",
    "closest_character",
    "match_brightnesses",
    "pad_image",
    "tile_image",
    "tile_brightness",
    "glyph_brightness",
    "AsciiArtAlgorithm",
    "image_to_ascii",
    "AsciiArtResult",
    "AsciiArtError",
    "EmptyPaletteError",
    "DegenerateImageError",
]
