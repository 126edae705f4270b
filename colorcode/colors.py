"""
IEC 60062 resistor color table.

Each of the 13 band colors carries up to four independent roles:
significant digit, multiplier exponent, tolerance and temperature
coefficient (TCR). Roles a color does not define read as None.
"""

from enum import Enum
from typing import Dict, Optional


class Color(str, Enum):
    BLACK = "black"
    BROWN = "brown"
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    VIOLET = "violet"
    GREY = "grey"
    WHITE = "white"
    GOLD = "gold"
    SILVER = "silver"
    PINK = "pink"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def digit(self) -> Optional[int]:
        """Significant digit 0-9, None for the metallic and pink bands."""
        return DIGITS.get(self)

    @property
    def exponent(self) -> int:
        """Power of ten when the color sits in a multiplier band."""
        return EXPONENTS[self]

    @property
    def tolerance(self) -> Optional[float]:
        """Tolerance as a fraction (0.05 for ±5%)."""
        return TOLERANCES.get(self)

    @property
    def tcr(self) -> Optional[int]:
        """Temperature coefficient in ppm/K."""
        return TCRS.get(self)


# Cycle order used when stepping through colors
COLOR_ORDER = list(Color)

DIGITS: Dict[Color, int] = {
    Color.BLACK: 0,
    Color.BROWN: 1,
    Color.RED: 2,
    Color.ORANGE: 3,
    Color.YELLOW: 4,
    Color.GREEN: 5,
    Color.BLUE: 6,
    Color.VIOLET: 7,
    Color.GREY: 8,
    Color.WHITE: 9,
}

EXPONENTS: Dict[Color, int] = {
    **DIGITS,
    Color.GOLD: -1,
    Color.SILVER: -2,
    Color.PINK: -3,
}

TOLERANCES: Dict[Color, float] = {
    Color.BROWN: 0.01,
    Color.RED: 0.02,
    Color.ORANGE: 0.0005,
    Color.YELLOW: 0.0002,
    Color.GREEN: 0.005,
    Color.BLUE: 0.0025,
    Color.VIOLET: 0.001,
    Color.GREY: 0.0001,
    Color.GOLD: 0.05,
    Color.SILVER: 0.1,
}

TCRS: Dict[Color, int] = {
    Color.BLACK: 250,
    Color.BROWN: 100,
    Color.RED: 50,
    Color.ORANGE: 15,
    Color.YELLOW: 25,
    Color.GREEN: 20,
    Color.BLUE: 10,
    Color.VIOLET: 5,
    Color.GREY: 1,
}

# Tolerances as callers type them: percent, not fraction
TOLERANCE_PERCENT_COLORS: Dict[float, Color] = {
    1.0: Color.BROWN,
    2.0: Color.RED,
    0.05: Color.ORANGE,
    0.02: Color.YELLOW,
    0.5: Color.GREEN,
    0.25: Color.BLUE,
    0.1: Color.VIOLET,
    0.01: Color.GREY,
    5.0: Color.GOLD,
    10.0: Color.SILVER,
}

TCR_COLORS: Dict[int, Color] = {ppm: color for color, ppm in TCRS.items()}

_VALUE_COLORS: Dict[int, Color] = {value: color for color, value in EXPONENTS.items()}

VALID_TOLERANCES = tuple(TOLERANCE_PERCENT_COLORS)
VALID_TCRS = tuple(TCR_COLORS)


def color_for_value(value: int) -> Color:
    """Color encoding a digit (0-9) or a multiplier exponent (-3 to 9)."""
    if value not in _VALUE_COLORS:
        raise ValueError(f"No color encodes {value}. Must be between -3 and 9")
    return _VALUE_COLORS[value]


def color_for_tolerance(percent: float) -> Color:
    """Tolerance band color for a tolerance given in percent (5.0 → Gold)."""
    if percent not in TOLERANCE_PERCENT_COLORS:
        raise ValueError(
            f"Unknown tolerance {percent}%. Must be one of: {list(VALID_TOLERANCES)}"
        )
    return TOLERANCE_PERCENT_COLORS[percent]


def color_for_tcr(ppm: int) -> Color:
    if ppm not in TCR_COLORS:
        raise ValueError(f"Unknown TCR {ppm} ppm/K. Must be one of: {list(VALID_TCRS)}")
    return TCR_COLORS[ppm]
