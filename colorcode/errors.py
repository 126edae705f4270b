"""Errors raised by the color code codec."""

from typing import List, Optional, Sequence


class ResistorError(ValueError):
    """Base class for every codec failure."""
    kind = "resistor_error"


class InvalidBandCount(ResistorError):
    kind = "invalid_band_count"

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"A resistor has 1, 3, 4, 5 or 6 bands, got {count}")


class InvalidBandColor(ResistorError):
    kind = "invalid_band_color"

    def __init__(self, position: int, color=None, band_count: Optional[int] = None):
        self.position = position
        self.color = color
        self.band_count = band_count
        name = getattr(color, "label", color) if color is not None else "This color"
        super().__init__(
            f"{name} is not valid in band {position + 1} of a {band_count}-band resistor"
        )


class InvalidTolerance(ResistorError):
    kind = "invalid_tolerance"


class InvalidTcr(ResistorError):
    kind = "invalid_tcr"


class NotRepresentable(ResistorError):
    kind = "not_representable"


class MissingTolerance(ResistorError):
    kind = "missing_tolerance"


class IndexOutOfBounds(ResistorError, IndexError):
    kind = "index_out_of_bounds"


class InvalidInput(ResistorError):
    kind = "invalid_input"


class ResistorSpecError(ResistorError):
    """Several independent failures reported together, one message per line."""
    kind = "multiple"

    def __init__(self, errors: Sequence[ResistorError]):
        self.errors: List[ResistorError] = list(errors)
        super().__init__("\n".join(str(e) for e in self.errors))


def raise_collected(errors: Sequence[ResistorError]) -> None:
    """Raise a lone error as is and several as one ResistorSpecError."""
    if len(errors) == 1:
        raise errors[0]
    if errors:
        raise ResistorSpecError(errors)
