"""
Resistor band sequences and their decoded specifications.

A Resistor is an immutable, validated sequence of 1, 3, 4, 5 or 6 color
bands. Every instance satisfies the band validity matrix; edits go through
with_color(), which builds and validates a new instance.

Decoding (specs) is total: a valid band sequence always yields a nominal
resistance, tolerance, min/max bounds and, for 6 bands, a TCR.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from colorcode.colors import COLOR_ORDER, Color
from colorcode.errors import IndexOutOfBounds, InvalidBandColor, InvalidBandCount
from colorcode.matrix import VALID_BAND_COUNTS, is_valid_color_in_band

# Tolerance of a 3-band (or unmarked) resistor
DEFAULT_TOLERANCE = 0.2

ColorLike = Union[Color, str]


class ResistorSpecs(BaseModel):
    """Numeric specification decoded from a band sequence."""
    model_config = ConfigDict(frozen=True)

    ohm: float = Field(..., ge=0, description="Nominal resistance (Ohms)")
    tolerance: float = Field(..., gt=0, description="Tolerance as a fraction (0.05 = ±5%)")
    min_ohm: float = Field(..., ge=0, description="Lower bound (Ohms)")
    max_ohm: float = Field(..., ge=0, description="Upper bound (Ohms)")
    tcr: Optional[int] = Field(None, description="Temperature coefficient (ppm/K), 6-band only")


@dataclass(frozen=True)
class Resistor:
    bands: Tuple[Color, ...]

    def __post_init__(self):
        colors = tuple(self.bands)
        count = len(colors)
        if count not in VALID_BAND_COUNTS:
            raise InvalidBandCount(count)
        for i, color in enumerate(colors):
            if not is_valid_color_in_band(color, i + 1, count):
                raise InvalidBandColor(i, color, count)
        object.__setattr__(self, 'bands', colors)

    @property
    def band_count(self) -> int:
        return len(self.bands)

    @property
    def is_zero_ohm(self) -> bool:
        return len(self.bands) == 1


def _coerce(color: ColorLike, position: int, band_count: int) -> Color:
    if isinstance(color, Color):
        return color
    try:
        return Color(str(color).strip().lower())
    except ValueError:
        raise InvalidBandColor(position, None, band_count) from None


def construct(colors: Iterable[ColorLike]) -> Resistor:
    """
    Build a validated Resistor from an ordered band sequence.

    Colors may be Color members or their names ("red", "Gold").

    Raises:
        InvalidBandCount: length is not 1, 3, 4, 5 or 6.
        InvalidBandColor: first band whose color is illegal at its position.
    """
    colors = list(colors)
    count = len(colors)
    if count not in VALID_BAND_COUNTS:
        raise InvalidBandCount(count)
    return Resistor(tuple(_coerce(c, i, count) for i, c in enumerate(colors)))


def bands(resistor: Resistor) -> Tuple[Color, ...]:
    return resistor.bands


def _scale(mantissa: int, exponent: int) -> float:
    """mantissa · 10^exponent, rounded once so it matches the decimal exactly."""
    if exponent >= 0:
        return float(mantissa * 10 ** exponent)
    return mantissa / 10 ** -exponent


def specs(resistor: Resistor) -> ResistorSpecs:
    """Decode nominal resistance, tolerance, bounds and TCR from the bands."""
    b = resistor.bands
    count = len(b)

    if count == 1:
        return ResistorSpecs(ohm=0.0, tolerance=DEFAULT_TOLERANCE, min_ohm=0.0, max_ohm=0.0)

    if count in (3, 4):
        mantissa = b[0].digit * 10 + b[1].digit
        exponent = b[2].exponent
        tolerance = b[3].tolerance if count == 4 else DEFAULT_TOLERANCE
        tcr = None
    else:
        mantissa = b[0].digit * 100 + b[1].digit * 10 + b[2].digit
        exponent = b[3].exponent
        tolerance = b[4].tolerance
        tcr = b[5].tcr if count == 6 else None

    ohm = _scale(mantissa, exponent)
    tolerance_ohm = ohm * tolerance
    return ResistorSpecs(
        ohm=ohm,
        tolerance=tolerance,
        min_ohm=ohm - tolerance_ohm,
        max_ohm=ohm + tolerance_ohm,
        tcr=tcr,
    )


def with_color(resistor: Resistor, color: ColorLike, position: int) -> Resistor:
    """
    Return a copy of `resistor` with band `position` (0-based) set to `color`.

    The whole sequence is re-validated; the original is never modified.

    Raises:
        IndexOutOfBounds: position outside the resistor's bands.
        InvalidBandColor: color not legal at that position.
    """
    count = resistor.band_count
    if not 0 <= position < count:
        raise IndexOutOfBounds(f"Band {position} out of range for a {count}-band resistor")
    new_bands = list(resistor.bands)
    new_bands[position] = color
    return construct(new_bands)


def step_color(resistor: Resistor, position: int, step: int = 1) -> Resistor:
    """
    Move band `position` to the next (step=1) or previous (step=-1) color
    that is legal there, wrapping around the 13-color cycle.
    """
    if step not in (1, -1):
        raise ValueError(f"step must be 1 or -1, got {step}")
    count = resistor.band_count
    if not 0 <= position < count:
        raise IndexOutOfBounds(f"Band {position} out of range for a {count}-band resistor")

    start = COLOR_ORDER.index(resistor.bands[position])
    for offset in range(1, len(COLOR_ORDER)):
        candidate = COLOR_ORDER[(start + step * offset) % len(COLOR_ORDER)]
        try:
            return with_color(resistor, candidate, position)
        except InvalidBandColor:
            continue
    # Only the current color is legal here (zero-ohm link)
    return resistor
