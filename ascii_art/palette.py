"""
Character Palette

The working character set and its brightness scores. Each character keeps
its raw glyph brightness; the normalized score is recomputed for the whole
palette after every mutation so that the darkest member maps to 0.0 and the
brightest to 1.0.
"""

from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple
import numpy as np

from .brightness import glyph_brightness
from .cache import BrightnessCache
from .charsets import MIN_ASCII, MAX_ASCII, char_range, render_glyph as default_render_glyph


GlyphRenderer = Callable[[str], np.ndarray]


class CharacterPalette:
    """
    Characters ordered by code point, each with a normalized brightness.

    Raw glyph brightness is looked up in the shared BrightnessCache first and
    only rendered on a miss.

    Example:
        >>> palette = CharacterPalette("0123456789")
        >>> palette.add('@')
        >>> palette.remove_range('0', '4')
        >>> palette.characters()
        ['5', '6', '7', '8', '9', '@']
    """

    def __init__(
        self,
        characters: Iterable[str] = "",
        cache: Optional[BrightnessCache] = None,
        render_glyph: Optional[GlyphRenderer] = None,
    ):
        """
        Args:
            characters: Initial characters
            cache: Shared brightness cache (a private one if None)
            render_glyph: Glyph rasterizer returning a square bool grid
        """
        self.cache = cache if cache is not None else BrightnessCache()
        self._render_glyph = render_glyph or default_render_glyph
        self._raw: Dict[str, float] = {}
        self._normalized: Dict[str, float] = {}
        self.add_many(characters)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, char: str):
        """Add (or refresh) one character and renormalize."""
        self.add_many([self._validate(char)])

    def add_many(self, chars: Iterable[str]):
        """Add several characters, renormalizing once at the end."""
        chars = [self._validate(c) for c in chars]
        raw = {c: self._raw_brightness(c) for c in chars}
        self._raw.update(raw)
        self._renormalize()

    def remove(self, char: str):
        """Remove a character; absent characters are ignored."""
        self.remove_many([self._validate(char)])

    def remove_many(self, chars: Iterable[str]):
        chars = [self._validate(c) for c in chars]
        for c in chars:
            self._raw.pop(c, None)
        self._renormalize()

    def add_range(self, first: str, last: str):
        """Add every character between the endpoints, both inclusive."""
        self.add_many(char_range(self._validate(first), self._validate(last)))

    def remove_range(self, first: str, last: str):
        """Remove every character between the endpoints, both inclusive."""
        self.remove_many(char_range(self._validate(first), self._validate(last)))

    def add_all(self):
        """Add all printable ASCII characters (space to ~)."""
        self.add_range(chr(MIN_ASCII), chr(MAX_ASCII))

    def remove_all(self):
        self.remove_range(chr(MIN_ASCII), chr(MAX_ASCII))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def size(self) -> int:
        return len(self._normalized)

    def characters(self) -> List[str]:
        """Characters in ascending code point order."""
        return list(self._normalized)

    def brightness_of(self, char: str) -> float:
        """Normalized brightness of a member (KeyError if absent)."""
        return self._normalized[char]

    def raw_brightness_of(self, char: str) -> float:
        return self._raw[char]

    def items(self) -> List[Tuple[str, float]]:
        """(character, normalized brightness) pairs in code point order."""
        return list(self._normalized.items())

    def __len__(self) -> int:
        return len(self._normalized)

    def __contains__(self, char) -> bool:
        return char in self._normalized

    def __iter__(self) -> Iterator[str]:
        return iter(self.characters())

    def __repr__(self) -> str:
        return f"CharacterPalette({''.join(self._normalized)!r})"

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _validate(char: str) -> str:
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}")
        return char

    def _raw_brightness(self, char: str) -> float:
        value = self.cache.glyph_brightness(char)
        if value is None:
            value = glyph_brightness(self._render_glyph(char))
            self.cache.set_glyph_brightness(char, value)
        return value

    def _renormalize(self):
        """Rescale every raw value against the current min/max."""
        ordered = sorted(self._raw.items())
        if len(ordered) < 2:
            self._normalized = dict(ordered)
            return

        lo = min(v for _, v in ordered)
        hi = max(v for _, v in ordered)
        if hi == lo:
            # All glyphs equally bright: nothing to stretch
            self._normalized = dict(ordered)
            return

        span = hi - lo
        self._normalized = {c: (v - lo) / span for c, v in ordered}
