"""
colorcode

Resistor color code codec: band sequences ↔ resistance, tolerance and TCR,
following the IEC 60062 color table.

The codec functions are pure: no I/O, no shared state. Applications that
want .env support or log output call load_env() and configure_logging()
once at startup.
"""

from colorcode.colors import Color
from colorcode.config import configure_logging, load_env
from colorcode.errors import (
    ResistorError,
    InvalidBandCount,
    InvalidBandColor,
    InvalidTolerance,
    InvalidTcr,
    NotRepresentable,
    MissingTolerance,
    IndexOutOfBounds,
    InvalidInput,
    ResistorSpecError,
)
from colorcode.resistor import Resistor, ResistorSpecs, construct, bands, specs, with_color, step_color
from colorcode.resolver import determine, normalize
from colorcode.notation import parse_resistance, determine_from_text, engineering_notation
from colorcode.labels import band_role, band_value_label, describe, default_resistor

__version__ = "0.1.0"
