"""
Band validity matrix.

Legal colors for every (band count, band position) pair. Positions are
1-based here to match how bands are numbered on datasheets.
"""

from typing import Dict, FrozenSet, Tuple

from colorcode.colors import Color, DIGITS, EXPONENTS, TCRS, TOLERANCES

VALID_BAND_COUNTS = (1, 3, 4, 5, 6)

_DIGIT = frozenset(DIGITS)
_FIRST_DIGIT = _DIGIT - {Color.BLACK}  # no leading zero
_MULTIPLIER = frozenset(EXPONENTS)
_TOLERANCE = frozenset(TOLERANCES)
_TCR = frozenset(TCRS)

BAND_MATRIX: Dict[Tuple[int, int], FrozenSet[Color]] = {
    (1, 1): frozenset({Color.BLACK}),

    (3, 1): _FIRST_DIGIT,
    (3, 2): _DIGIT,
    (3, 3): _MULTIPLIER,

    (4, 1): _FIRST_DIGIT,
    (4, 2): _DIGIT,
    (4, 3): _MULTIPLIER,
    (4, 4): _TOLERANCE,

    (5, 1): _FIRST_DIGIT,
    (5, 2): _DIGIT,
    (5, 3): _DIGIT,
    (5, 4): _MULTIPLIER,
    (5, 5): _TOLERANCE,

    (6, 1): _FIRST_DIGIT,
    (6, 2): _DIGIT,
    (6, 3): _DIGIT,
    (6, 4): _MULTIPLIER,
    (6, 5): _TOLERANCE,
    (6, 6): _TCR,
}


def valid_colors(position: int, band_count: int) -> FrozenSet[Color]:
    """Colors allowed at 1-based `position` of a `band_count`-band resistor."""
    return BAND_MATRIX.get((band_count, position), frozenset())


def is_valid_color_in_band(color: Color, position: int, band_count: int) -> bool:
    return color in valid_colors(position, band_count)
