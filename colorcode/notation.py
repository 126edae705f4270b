"""
Text input parsing and engineering notation display.

Resistances are typed the way they are printed on schematics:

    parse_resistance("4k7")   → 4700.0
    parse_resistance("2.2M")  → 2200000.0
    parse_resistance("4R7")   → 4.7
    parse_resistance("470m")  → 0.47

and displayed back with SI prefixes:

    engineering_notation(4700)  → '4.7kΩ'
    engineering_notation(0.47)  → '470mΩ'
"""

import math
import re
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from colorcode.config import get_settings
from colorcode.errors import InvalidInput, ResistorError, raise_collected
from colorcode.resistor import Resistor
from colorcode.resolver import determine

_MULTIPLIERS = {
    'm': Decimal('1e-3'),
    'R': Decimal(1),
    'r': Decimal(1),
    'k': Decimal('1e3'),
    'K': Decimal('1e3'),
    'M': Decimal('1e6'),
    'G': Decimal('1e9'),
}

# "4k7", "4.7k", "k47", "470m", "4R7"
_ENGINEERING = re.compile(r'^(\d+(?:\.\d*)?)?([mRrkKMG])(\d+)?$')
_UNIT_SUFFIX = re.compile(r'\s*(?:Ω|ohms?)$', re.IGNORECASE)

_SI_PREFIXES = [
    (1e-3, 'm'),
    (1e0,  ''),
    (1e3,  'k'),
    (1e6,  'M'),
    (1e9,  'G'),
]


def parse_resistance(text: str) -> float:
    """
    Parse a resistance typed as a plain number or in engineering notation.

    The SI letter may follow the number ("4.7k") or stand in for the
    decimal point ("4k7"). A trailing Ω / ohm / ohms is ignored.

    Raises:
        InvalidInput: the text is not a finite number in either form.
    """
    cleaned = _UNIT_SUFFIX.sub('', text.strip())
    try:
        value = float(cleaned)
    except ValueError:
        value = _parse_engineering(cleaned)
        if value is None:
            raise InvalidInput(f"invalid input for resistance: '{text}'") from None
    if not math.isfinite(value):
        raise InvalidInput(f"invalid input for resistance: '{text}'")
    return value


def _parse_engineering(text: str) -> Optional[float]:
    match = _ENGINEERING.match(text)
    if match is None:
        return None
    whole, letter, fraction = match.groups()
    if whole is None and fraction is None:
        return None
    if fraction is not None and whole is not None and '.' in whole:
        return None  # "4.7k3"
    number = f"{whole or '0'}.{fraction}" if fraction is not None else whole
    try:
        return float(Decimal(number) * _MULTIPLIERS[letter])
    except InvalidOperation:
        return None


def parse_tolerance(text: str) -> Optional[float]:
    """Tolerance in percent ("5", "±0.5%"); blank text means no tolerance band."""
    cleaned = text.strip().lstrip('±').rstrip('%').strip()
    if not cleaned:
        return None
    try:
        value = float(cleaned)
    except ValueError:
        raise InvalidInput(f"invalid input for tolerance: '{text}'") from None
    if not math.isfinite(value):
        raise InvalidInput(f"invalid input for tolerance: '{text}'")
    return value


def parse_tcr(text: str) -> Optional[int]:
    """TCR in ppm/K as a non-negative integer; blank text means no TCR band."""
    cleaned = text.strip()
    if not cleaned:
        return None
    if not re.fullmatch(r'\d+', cleaned, re.ASCII):
        raise InvalidInput(f"invalid input for tcr: '{text}'")
    return int(cleaned)


def determine_from_text(resistance: str, tolerance: str = '', tcr: str = '') -> Resistor:
    """
    Parse the three text fields of a specs form and resolve the bands.

    Every field is parsed before giving up, so a form with several bad
    fields reports all of them at once.
    """
    errors: List[ResistorError] = []
    parsed = []
    for parser, text in ((parse_resistance, resistance),
                         (parse_tolerance, tolerance),
                         (parse_tcr, tcr)):
        try:
            parsed.append(parser(text))
        except InvalidInput as e:
            errors.append(e)
            parsed.append(None)
    raise_collected(errors)
    return determine(*parsed)


def engineering_notation(value: float, unit: str = 'Ω', precision: Optional[int] = None) -> str:
    """
    Format a value in engineering notation with SI prefix.

    Examples:
        engineering_notation(22000)   → '22kΩ'
        engineering_notation(4700)    → '4.7kΩ'
        engineering_notation(0.47)    → '470mΩ'
        engineering_notation(0)       → '0Ω'
    """
    if precision is None:
        precision = get_settings().display_precision

    if value == 0:
        return f"0{unit}"

    abs_value = abs(value)
    sign = '-' if value < 0 else ''

    for scale, prefix in reversed(_SI_PREFIXES):
        if abs_value >= scale:
            scaled = abs_value / scale
            if scaled == int(scaled):
                return f"{sign}{int(scaled)}{prefix}{unit}"
            return f"{sign}{scaled:.{precision}g}{prefix}{unit}"

    # Below a milliohm
    return f"{value:.{precision}g}{unit}"
