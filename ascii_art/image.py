"""
Raster Image Container

Immutable RGB pixel grid used throughout the pipeline. Equality and hashing
are structural (dimensions + full pixel content) so that two separately
loaded copies of the same picture share brightness cache entries.
"""

from typing import Tuple, Union
import numpy as np
from PIL import Image

from .exceptions import ImageLoadError


Color = Tuple[int, int, int]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)


class RasterImage:
    """
    Read-only grid of 8-bit RGB pixels.

    Pixels are stored as a ``(height, width, 3)`` uint8 array whose write flag
    is cleared, so tiles sliced from it stay read-only as well.

    Example:
        >>> img = RasterImage.blank(4, 2, color=WHITE)
        >>> img.width, img.height
        (4, 2)
        >>> img.get_pixel(1, 3)
        (255, 255, 255)
    """

    __slots__ = ("_pixels", "_hash")

    def __init__(self, pixels: Union[np.ndarray, list]):
        arr = np.array(pixels, dtype=np.uint8)
        if arr.ndim == 2 and arr.size == 0:
            arr = arr.reshape(arr.shape + (3,))
        if arr.ndim != 3 or arr.shape[2] != 3:
            raise ValueError(f"Expected (height, width, 3) pixels, got shape {arr.shape}")
        arr.setflags(write=False)
        self._pixels = arr
        self._hash = None

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def blank(cls, width: int, height: int, color: Color = WHITE) -> "RasterImage":
        """Create a uniformly colored image."""
        arr = np.empty((height, width, 3), dtype=np.uint8)
        arr[...] = color
        return cls(arr)

    @classmethod
    def from_pil(cls, image: Image.Image) -> "RasterImage":
        """Convert a PIL image (any mode) to an RGB raster."""
        if image.mode != 'RGB':
            image = image.convert('RGB')
        return cls(np.asarray(image))

    @classmethod
    def open(cls, path: str) -> "RasterImage":
        """
        Load an image file from disk.

        Raises:
            ImageLoadError: If the file is missing or not a readable image
        """
        try:
            with Image.open(path) as img:
                return cls.from_pil(img)
        except (OSError, ValueError) as e:
            raise ImageLoadError() from e

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def pixels(self) -> np.ndarray:
        """Read-only ``(height, width, 3)`` pixel array."""
        return self._pixels

    def get_pixel(self, row: int, col: int) -> Color:
        r, g, b = self._pixels[row, col]
        return int(r), int(g), int(b)

    def to_pil(self) -> Image.Image:
        return Image.fromarray(np.ascontiguousarray(self._pixels))

    def save(self, path: str):
        self.to_pil().save(path)

    # ------------------------------------------------------------------
    # Structural identity
    # ------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if other is self:
            return True
        if not isinstance(other, RasterImage):
            return NotImplemented
        return (
            self._pixels.shape == other._pixels.shape
            and np.array_equal(self._pixels, other._pixels)
        )

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash((self.height, self.width, self._pixels.tobytes()))
        return self._hash

    def __repr__(self) -> str:
        return f"RasterImage(width={self.width}, height={self.height})"
