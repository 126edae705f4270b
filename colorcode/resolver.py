"""
Resistance → color band resolution.

Turns a nominal resistance (plus optional tolerance and TCR) into the
shortest band sequence able to carry it:

    1 band   zero-ohm link
    3 bands  2 digits + multiplier                       (±20%)
    4 bands  2 digits + multiplier + tolerance
    5 bands  3 digits + multiplier + tolerance
    6 bands  3 digits + multiplier + tolerance + TCR

The value is first normalized to 1-3 significant digits and a power-of-ten
exponent in [-3, 9], the range a multiplier band can encode.
"""

import logging
import math
from decimal import Decimal
from typing import List, Optional, Tuple

from colorcode.colors import (
    Color,
    TCR_COLORS,
    TOLERANCE_PERCENT_COLORS,
    VALID_TCRS,
    VALID_TOLERANCES,
    color_for_tcr,
    color_for_tolerance,
    color_for_value,
)
from colorcode.errors import (
    InvalidTcr,
    InvalidTolerance,
    MissingTolerance,
    NotRepresentable,
    ResistorError,
    raise_collected,
)
from colorcode.resistor import Resistor, construct

logger = logging.getLogger(__name__)

MIN_EXPONENT = -3   # Pink
MAX_EXPONENT = 9    # White
MAX_SIGNIFICANT_DIGITS = 3

# Above 99 GΩ a trailing zero can't be folded into the multiplier
_MAX_TWO_DIGIT_OHM = 99e9


def validate_tolerance(tolerance: Optional[float]) -> Optional[float]:
    """Check a tolerance given in percent against the tolerance band values."""
    if tolerance is None:
        return None
    if tolerance not in TOLERANCE_PERCENT_COLORS:
        raise InvalidTolerance(
            f"{tolerance}% is not a valid tolerance. Must be one of: {list(VALID_TOLERANCES)}"
        )
    return tolerance


def validate_tcr(tcr: Optional[int]) -> Optional[int]:
    if tcr is None:
        return None
    if tcr not in TCR_COLORS:
        raise InvalidTcr(
            f"{tcr} ppm/K is not a valid TCR. Must be one of: {list(VALID_TCRS)}"
        )
    return tcr


def normalize(resistance: float) -> Tuple[List[int], int]:
    """
    Split a resistance into significant digits and a power-of-ten exponent.

    Examples:
        normalize(0)     → ([0], 0)
        normalize(1.2)   → ([1, 2], -1)
        normalize(1)     → ([1, 0], -1)
        normalize(200)   → ([2, 0], 1)
        normalize(0.123) → ([1, 2, 3], -3)

    Two digits are preferred whenever a trailing zero can move into the
    exponent; a lone nonzero digit is padded to two.

    Raises:
        NotRepresentable: negative or non-finite input, more than three
            significant digits, or an exponent outside [-3, 9].
    """
    if not math.isfinite(resistance) or resistance < 0:
        raise NotRepresentable(f"{resistance} is not a valid resistance")

    # Shortest decimal digits that round-trip to this float
    _, raw_digits, exp = Decimal(repr(float(resistance))).as_tuple()
    digits = list(raw_digits)

    significant = digits[:]
    while significant and significant[-1] == 0:
        significant.pop()
    while significant and significant[0] == 0:
        significant.pop(0)
    if not significant:
        return [0], 0
    if len(significant) > MAX_SIGNIFICANT_DIGITS:
        raise NotRepresentable(
            f"{resistance} has {len(significant)} significant digits, "
            f"at most {MAX_SIGNIFICANT_DIGITS} fit on a resistor"
        )

    # Integer mantissa: drop fractional zeros, expand positive exponents
    while exp < 0 and digits[-1] == 0:
        digits.pop()
        exp += 1
    if exp > 0:
        digits.extend([0] * exp)
        exp = 0
    while digits[0] == 0:
        digits.pop(0)
    exponent = exp

    if len(digits) == 1:
        digits.append(0)
        exponent -= 1

    fits_two_digits = resistance <= _MAX_TWO_DIGIT_OHM
    while len(digits) > MAX_SIGNIFICANT_DIGITS or (
        fits_two_digits and len(digits) == MAX_SIGNIFICANT_DIGITS and digits[-1] == 0
    ):
        digits.pop()
        exponent += 1

    if not MIN_EXPONENT <= exponent <= MAX_EXPONENT:
        raise NotRepresentable(
            f"{resistance} needs a multiplier of 10^{exponent}, "
            f"bands only encode 10^{MIN_EXPONENT} to 10^{MAX_EXPONENT}"
        )
    return digits, exponent


def _select_bands(
    digits: List[int],
    exponent: int,
    tolerance: Optional[float],
    tcr: Optional[int],
) -> List[Color]:
    """Pick the band layout for normalized digits and the requested precision."""
    digit_colors = [color_for_value(d) for d in digits]
    has_tolerance = tolerance is not None
    has_tcr = tcr is not None

    if len(digits) == 1 and exponent == 0 and not has_tolerance and not has_tcr:
        return digit_colors

    if len(digits) == 2 and not has_tcr:
        layout = digit_colors + [color_for_value(exponent)]
        if has_tolerance:
            layout.append(color_for_tolerance(tolerance))
        return layout

    if len(digits) == 2 and has_tolerance and has_tcr:
        # 6 bands always carry 3 digits: 54 · 10^0 → 540 · 10^-1
        if exponent - 1 < MIN_EXPONENT:
            raise NotRepresentable(
                f"{_describe_input(digits, exponent)} can't be written with three digits "
                f"and a multiplier of at least 10^{MIN_EXPONENT}"
            )
        return digit_colors + [
            Color.BLACK,
            color_for_value(exponent - 1),
            color_for_tolerance(tolerance),
            color_for_tcr(tcr),
        ]

    if len(digits) == 3 and has_tolerance:
        layout = digit_colors + [color_for_value(exponent), color_for_tolerance(tolerance)]
        if has_tcr:
            layout.append(color_for_tcr(tcr))
        return layout

    if len(digits) == 3 and not has_tolerance and not has_tcr:
        raise MissingTolerance("A 3-digit resistor needs a tolerance.")

    if has_tcr and not has_tolerance:
        raise NotRepresentable("A TCR band is only available together with a tolerance band.")
    raise NotRepresentable("Not a representable resistance value.")


def _describe_input(digits: List[int], exponent: int) -> str:
    return f"{''.join(str(d) for d in digits)}e{exponent}"


def determine(
    resistance: float,
    tolerance: Optional[float] = None,
    tcr: Optional[int] = None,
) -> Resistor:
    """
    Find the minimal band sequence for a resistance.

    Args:
        resistance: Nominal resistance (Ohms)
        tolerance: Tolerance in percent (e.g. 5.0 for Gold), or None for none
        tcr: Temperature coefficient (ppm/K), or None for none

    Returns:
        The validated Resistor.

    Raises:
        InvalidTolerance, InvalidTcr, NotRepresentable, MissingTolerance,
        or ResistorSpecError when several inputs are invalid at once.
    """
    errors: List[ResistorError] = []
    normalized = None
    try:
        normalized = normalize(resistance)
    except NotRepresentable as e:
        errors.append(e)
    try:
        validate_tolerance(tolerance)
    except InvalidTolerance as e:
        errors.append(e)
    try:
        validate_tcr(tcr)
    except InvalidTcr as e:
        errors.append(e)

    if errors:
        logger.debug("Rejected %r (tolerance=%r, tcr=%r): %s", resistance, tolerance, tcr,
                     "; ".join(str(e) for e in errors))
        raise_collected(errors)

    digits, exponent = normalized
    logger.debug("Normalized %r to digits=%s exponent=%d", resistance, digits, exponent)

    colors = _select_bands(digits, exponent, tolerance, tcr)
    logger.debug("Resolved %r to %d bands: %s", resistance, len(colors),
                 "-".join(c.label for c in colors))
    return construct(colors)
