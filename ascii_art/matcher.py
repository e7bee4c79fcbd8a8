"""
Brightness Matching

Finds the palette character whose normalized brightness is closest to a
target. Candidates are scanned in ascending code point order and the best
is only replaced on a strictly smaller distance, so among equally close
characters the one with the smallest code point always wins.
"""

from typing import List, Mapping, Sequence, Tuple, Union
import numpy as np

from .exceptions import EmptyPaletteError
from .palette import CharacterPalette


PaletteLike = Union[CharacterPalette, Mapping[str, float]]


def _sorted_entries(palette: PaletteLike) -> List[Tuple[str, float]]:
    if isinstance(palette, CharacterPalette):
        entries = palette.items()
    else:
        entries = sorted(palette.items())
    if not entries:
        raise EmptyPaletteError()
    return entries


def closest_character(target: float, palette: PaletteLike) -> str:
    """
    Character whose brightness is closest to ``target``.

    Args:
        target: Brightness in [0, 1]
        palette: CharacterPalette or char -> brightness mapping

    Raises:
        EmptyPaletteError: If the palette has no characters
    """
    entries = _sorted_entries(palette)

    best_char, best_value = entries[0]
    for char, value in entries[1:]:
        if abs(value - target) < abs(best_value - target):
            best_char, best_value = char, value
    return best_char


def match_brightnesses(targets: Sequence[float], palette: PaletteLike) -> List[str]:
    """
    Vectorized closest_character for a whole brightness vector.

    np.argmin returns the first minimum, which gives the same tie-break as
    the strict comparison in closest_character.
    """
    entries = _sorted_entries(palette)
    chars = [c for c, _ in entries]
    values = np.array([v for _, v in entries], dtype=np.float64)

    targets = np.asarray(targets, dtype=np.float64)
    if targets.size == 0:
        return []

    distances = np.abs(values[np.newaxis, :] - targets[:, np.newaxis])
    return [chars[i] for i in np.argmin(distances, axis=1)]
