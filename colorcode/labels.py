"""
Human-readable band annotations.

What each band means in a given layout ("Digit 2", "Multiplier", ...),
what a color is worth in that band ("7", "10^3", "±5%", "50 ppm/K"), and a
one-line summary of a whole resistor.
"""

from typing import Dict, Tuple

from colorcode.colors import Color
from colorcode.errors import IndexOutOfBounds, InvalidBandCount
from colorcode.matrix import VALID_BAND_COUNTS
from colorcode.notation import engineering_notation
from colorcode.resistor import Resistor, construct, specs

ZERO_OHM = 'Zero-ohm link'
MULTIPLIER = 'Multiplier'
TOLERANCE = 'Tolerance'
TCR = 'TCR'

_LAYOUTS: Dict[int, Tuple[str, ...]] = {
    1: (ZERO_OHM,),
    3: ('Digit 1', 'Digit 2', MULTIPLIER),
    4: ('Digit 1', 'Digit 2', MULTIPLIER, TOLERANCE),
    5: ('Digit 1', 'Digit 2', 'Digit 3', MULTIPLIER, TOLERANCE),
    6: ('Digit 1', 'Digit 2', 'Digit 3', MULTIPLIER, TOLERANCE, TCR),
}

_DEFAULT_BANDS: Dict[int, Tuple[Color, ...]] = {
    1: (Color.BLACK,),
    3: (Color.BROWN, Color.BLACK, Color.BLACK),
    4: (Color.BROWN, Color.BLACK, Color.BLACK, Color.BROWN),
    5: (Color.BROWN, Color.BLACK, Color.BLACK, Color.BLACK, Color.BROWN),
    6: (Color.BROWN, Color.BLACK, Color.BLACK, Color.BLACK, Color.BROWN, Color.BLACK),
}


def band_role(band_count: int, index: int) -> str:
    """Meaning of band `index` (0-based) in a `band_count`-band resistor."""
    if band_count not in _LAYOUTS:
        raise InvalidBandCount(band_count)
    layout = _LAYOUTS[band_count]
    if not 0 <= index < len(layout):
        raise IndexOutOfBounds(f"Band {index} out of range for a {band_count}-band resistor")
    return layout[index]


def band_value_label(band_count: int, index: int, color: Color) -> str:
    """
    What `color` contributes at band `index`. Blank when the color has no
    value for that role, and for a black leading digit.
    """
    role = band_role(band_count, index)

    if role == ZERO_OHM:
        return '0'
    if role == MULTIPLIER:
        return f"10^{color.exponent}"
    if role == TOLERANCE:
        tolerance = color.tolerance
        return f"±{tolerance * 100:g}%" if tolerance is not None else ''
    if role == TCR:
        return f"{color.tcr} ppm/K" if color.tcr is not None else ''

    if index == 0 and color is Color.BLACK:
        return ''
    return str(color.digit) if color.digit is not None else ''


def describe(resistor: Resistor) -> str:
    """One-line summary, e.g. 'Red-Red-Orange-Gold: 22kΩ ±5%'."""
    names = '-'.join(c.label for c in resistor.bands)
    if resistor.is_zero_ohm:
        return f"{names}: 0Ω ({ZERO_OHM.lower()})"

    s = specs(resistor)
    text = f"{names}: {engineering_notation(s.ohm)} ±{s.tolerance * 100:g}%"
    if s.tcr is not None:
        text += f" {s.tcr} ppm/K"
    return text


def default_resistor(band_count: int) -> Resistor:
    """Brown-Black starting bands for each layout."""
    if band_count not in VALID_BAND_COUNTS:
        raise InvalidBandCount(band_count)
    return construct(_DEFAULT_BANDS[band_count])
