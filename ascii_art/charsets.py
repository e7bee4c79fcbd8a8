"""
Character Set Definitions and Glyph Rasterization

Provides:
- Named character sets (digits, printable ASCII, density ramps, ...)
- render_glyph: rasterize one character to a square boolean occupancy grid
- Helpers for the printable ASCII range and "a-z" style range arguments

The occupancy grid marks True where the glyph leaves the cell uncovered, so
characters with less ink come out brighter (a space is all True).
"""

import re
from typing import Dict, List, Optional, Tuple
import numpy as np
from PIL import Image, ImageDraw, ImageFont


# ============================================================================
# CHARACTER SET DEFINITIONS
# ============================================================================

MIN_ASCII = 32   # space
MAX_ASCII = 126  # ~

DIGITS = "0123456789"

# Standard 95 printable ASCII (0x20-0x7E)
ASCII_STANDARD = "".join(chr(i) for i in range(MIN_ASCII, MAX_ASCII + 1))

# Dense characters sorted by visual density
ASCII_DENSE = " .'`^\",:;Il!i><~+_-?][}{1)(|/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"

ASCII_MINIMAL = " .:-=+*#%@"

ASCII_HEAVY = " @#%8&WM$B0OQZEX"

DEFAULT_CHARSET = DIGITS

_CHARSETS: Dict[str, str] = {
    "digits": DIGITS,
    "ascii_standard": ASCII_STANDARD,
    "ascii_dense": ASCII_DENSE,
    "ascii_minimal": ASCII_MINIMAL,
    "ascii_heavy": ASCII_HEAVY,
}


def get_charset(name: str) -> str:
    """
    Get a character set by name.

    Available charsets:
        - digits: 0-9 (the shell default)
        - ascii_standard: 95 printable ASCII characters
        - ascii_dense: Characters sorted by density
        - ascii_minimal: 10-step ramp
        - ascii_heavy: High contrast subset

    Raises:
        ValueError: If the name is unknown
    """
    if name not in _CHARSETS:
        raise ValueError(f"Unknown charset: {name}. Available: {list(_CHARSETS.keys())}")
    return _CHARSETS[name]


def list_charsets() -> List[str]:
    """List all available charset names."""
    return list(_CHARSETS.keys())


RANGE_PATTERN = re.compile(r"^(\S)-(\S)$")


def parse_range(spec: str) -> Optional[Tuple[str, str]]:
    """
    Parse a "c1-c2" range argument.

    Returns:
        (c1, c2) as written, or None if ``spec`` is not a range
    """
    match = RANGE_PATTERN.match(spec)
    if not match:
        return None
    return match.group(1), match.group(2)


def char_range(first: str, last: str) -> str:
    """All characters between two endpoints, inclusive, in either order."""
    lo, hi = sorted((ord(first), ord(last)))
    return "".join(chr(i) for i in range(lo, hi + 1))


# ============================================================================
# GLYPH RASTERIZATION
# ============================================================================

# Side length of the square occupancy grid
GLYPH_RESOLUTION = 16

FONT_CANDIDATES = [
    "Courier New",
    "cour.ttf",  # Windows
    "/System/Library/Fonts/Supplemental/Courier New.ttf",  # macOS
    "/usr/share/fonts/truetype/msttcorefonts/Courier_New.ttf",  # Linux (mscorefonts)
    "/System/Library/Fonts/Menlo.ttc",
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
]

_FONT_CACHE: Dict[int, ImageFont.ImageFont] = {}


def _get_font(size: int):
    """Get a monospace font for rendering, falling back to PIL's default."""
    if size not in _FONT_CACHE:
        font = None
        for font_name in FONT_CANDIDATES:
            try:
                font = ImageFont.truetype(font_name, size)
                break
            except (OSError, IOError):
                continue

        if font is None:
            font = ImageFont.load_default()
        _FONT_CACHE[size] = font

    return _FONT_CACHE[size]


def render_glyph(char: str, resolution: int = GLYPH_RESOLUTION) -> np.ndarray:
    """
    Render a single character to a square boolean occupancy grid.

    Args:
        char: Single character to render
        resolution: Side length of the grid in pixels

    Returns:
        (resolution, resolution) bool array, True where no ink was drawn
    """
    if len(char) != 1:
        raise ValueError(f"Expected a single character, got {char!r}")

    img = Image.new('L', (resolution, resolution), color=0)
    draw = ImageDraw.Draw(img)
    font = _get_font(resolution)

    # Center the ink box in the cell
    bbox = draw.textbbox((0, 0), char, font=font)
    text_width = bbox[2] - bbox[0]
    text_height = bbox[3] - bbox[1]
    x = (resolution - text_width) // 2 - bbox[0]
    y = (resolution - text_height) // 2 - bbox[1]

    draw.text((x, y), char, fill=255, font=font)

    arr = np.array(img)
    return arr < 128
