"""
Tests for the Resistor value object.

Validates:
1. Construction against the band validity matrix
2. Decoding to ohm / tolerance / bounds / TCR
3. Single-band edits and color stepping
"""

import dataclasses

import pytest
import sys
import os

from pydantic import ValidationError

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from colorcode.colors import Color
from colorcode.errors import IndexOutOfBounds, InvalidBandColor, InvalidBandCount
from colorcode.resistor import Resistor, bands, construct, specs, step_color, with_color

C = Color


class TestConstruct:
    """Test building resistors from band sequences."""

    def test_zero_ohm(self):
        r = construct([C.BLACK])
        assert r.bands == (C.BLACK,)
        assert r.is_zero_ohm

    def test_invalid_single_band(self):
        with pytest.raises(InvalidBandColor):
            construct([C.BLUE])

    @pytest.mark.parametrize("count", [0, 2, 7])
    def test_invalid_band_count(self, count):
        with pytest.raises(InvalidBandCount):
            construct([C.BROWN] * count)

    def test_valid_three_band(self):
        r = construct([C.BLUE, C.BROWN, C.PINK])
        assert r.band_count == 3

    def test_leading_black_rejected(self):
        with pytest.raises(InvalidBandColor) as exc_info:
            construct([C.BLACK, C.BROWN, C.PINK])
        assert exc_info.value.position == 0

    def test_valid_four_band(self):
        r = construct([C.BLUE, C.BROWN, C.PINK, C.SILVER])
        assert r.band_count == 4

    def test_black_is_not_a_tolerance(self):
        with pytest.raises(InvalidBandColor) as exc_info:
            construct([C.BLUE, C.BROWN, C.PINK, C.BLACK])
        assert exc_info.value.position == 3

    def test_valid_five_band(self):
        r = construct([C.BLUE, C.BROWN, C.WHITE, C.SILVER, C.SILVER])
        assert r.band_count == 5

    def test_pink_is_not_a_digit(self):
        with pytest.raises(InvalidBandColor) as exc_info:
            construct([C.BLUE, C.BROWN, C.PINK, C.BLACK, C.BLACK])
        assert exc_info.value.position == 2

    def test_valid_six_band(self):
        r = construct([C.BLUE, C.BROWN, C.WHITE, C.SILVER, C.SILVER, C.BLACK])
        assert r.band_count == 6

    def test_white_is_not_a_tcr(self):
        with pytest.raises(InvalidBandColor) as exc_info:
            construct([C.BLUE, C.BROWN, C.GREY, C.BLACK, C.SILVER, C.WHITE])
        assert exc_info.value.position == 5

    def test_color_names(self):
        """Names are accepted case-insensitively."""
        r = construct(["red", "Red", "ORANGE", "gold"])
        assert r.bands == (C.RED, C.RED, C.ORANGE, C.GOLD)

    def test_unknown_color_name(self):
        with pytest.raises(InvalidBandColor) as exc_info:
            construct(["purple", "red", "red"])
        assert exc_info.value.position == 0

    def test_direct_instantiation_is_validated(self):
        with pytest.raises(InvalidBandColor):
            Resistor((C.BLACK, C.RED, C.RED))

    def test_immutable(self):
        r = construct([C.RED, C.RED, C.ORANGE])
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.bands = (C.BROWN, C.BLACK, C.BLACK)

    def test_bands_accessor(self):
        r = construct([C.RED, C.RED, C.ORANGE, C.GOLD])
        assert bands(r) == (C.RED, C.RED, C.ORANGE, C.GOLD)

    def test_equal_and_hashable(self):
        a = construct([C.RED, C.RED, C.ORANGE])
        b = construct(["red", "red", "orange"])
        assert a == b
        assert len({a, b}) == 1


class TestSpecs:
    """Test decoding band sequences."""

    def test_zero_ohm(self):
        s = specs(construct([C.BLACK]))
        assert s.ohm == 0.0
        assert s.tolerance == 0.2
        assert s.min_ohm == 0.0
        assert s.max_ohm == 0.0
        assert s.tcr is None

    def test_three_band_has_twenty_percent(self):
        s = specs(construct([C.RED, C.BLACK, C.PINK]))
        assert s.ohm == pytest.approx(0.02)
        assert s.tolerance == 0.2
        assert s.min_ohm == pytest.approx(0.016)
        assert s.max_ohm == pytest.approx(0.024)
        assert s.tcr is None

    def test_four_band(self):
        s = specs(construct([C.RED, C.RED, C.ORANGE, C.GOLD]))
        assert s.ohm == 22000.0
        assert s.tolerance == 0.05
        assert s.min_ohm == 20900.0
        assert s.max_ohm == 23100.0
        assert s.tcr is None

    def test_four_band_hundreds(self):
        s = specs(construct([C.YELLOW, C.VIOLET, C.BROWN, C.GOLD]))
        assert s.ohm == 470.0
        assert s.min_ohm == pytest.approx(446.5)
        assert s.max_ohm == pytest.approx(493.5)

    def test_four_band_precision_tolerance(self):
        s = specs(construct([C.BLUE, C.GREY, C.BLACK, C.ORANGE]))
        assert s.ohm == 68.0
        assert s.tolerance == 0.0005
        assert s.min_ohm == pytest.approx(67.966)
        assert s.max_ohm == pytest.approx(68.034)

    def test_five_band(self):
        s = specs(construct([C.GREEN, C.BLUE, C.BLACK, C.BLACK, C.BROWN]))
        assert s.ohm == 560.0
        assert s.min_ohm == pytest.approx(554.4)
        assert s.max_ohm == pytest.approx(565.6)
        assert s.tcr is None

    def test_six_band(self):
        s = specs(construct([C.GREEN, C.BLUE, C.BLACK, C.BLACK, C.BROWN, C.GREY]))
        assert s.ohm == 560.0
        assert s.min_ohm == pytest.approx(554.4)
        assert s.max_ohm == pytest.approx(565.6)
        assert s.tcr == 1

    def test_fractional_multiplier_is_exact(self):
        """Negative exponents divide, so 0.59 decodes to the float 0.59."""
        s = specs(construct([C.GREEN, C.WHITE, C.SILVER]))
        assert s.ohm == 0.59

    def test_largest_multiplier(self):
        s = specs(construct([C.WHITE, C.WHITE, C.WHITE]))
        assert s.ohm == 99e9

    @pytest.mark.parametrize("colors", [
        [C.BROWN, C.BLACK, C.GOLD],
        [C.RED, C.RED, C.ORANGE, C.SILVER],
        [C.BROWN, C.RED, C.ORANGE, C.PINK, C.GREEN],
        [C.WHITE, C.WHITE, C.WHITE, C.WHITE, C.GREY, C.BLUE],
    ])
    def test_tolerance_band_is_symmetric(self, colors):
        s = specs(construct(colors))
        assert s.min_ohm <= s.ohm <= s.max_ohm
        assert s.max_ohm - s.ohm == pytest.approx(s.ohm - s.min_ohm)

    def test_specs_are_frozen(self):
        s = specs(construct([C.RED, C.RED, C.ORANGE, C.GOLD]))
        with pytest.raises(ValidationError):
            s.ohm = 1.0

    def test_specs_dump(self):
        s = specs(construct([C.RED, C.RED, C.ORANGE, C.GOLD]))
        assert s.model_dump() == {
            'ohm': 22000.0,
            'tolerance': 0.05,
            'min_ohm': 20900.0,
            'max_ohm': 23100.0,
            'tcr': None,
        }


class TestWithColor:
    """Test single-band edits."""

    SIX_BAND = [C.BROWN, C.BLACK, C.BLACK, C.BLACK, C.BROWN, C.BLACK]

    def test_replaces_band(self):
        r = construct([C.RED, C.RED, C.ORANGE, C.GOLD])
        edited = with_color(r, C.YELLOW, 2)
        assert edited.bands == (C.RED, C.RED, C.YELLOW, C.GOLD)

    def test_original_untouched(self):
        r = construct([C.RED, C.RED, C.ORANGE, C.GOLD])
        with_color(r, C.YELLOW, 2)
        assert r.bands == (C.RED, C.RED, C.ORANGE, C.GOLD)

    @pytest.mark.parametrize("position", range(6))
    def test_same_color_is_noop(self, position):
        r = construct(self.SIX_BAND)
        assert with_color(r, r.bands[position], position) == r

    def test_invalid_color(self):
        r = construct([C.RED, C.RED, C.ORANGE, C.GOLD])
        with pytest.raises(InvalidBandColor) as exc_info:
            with_color(r, C.BLACK, 3)
        assert exc_info.value.position == 3

    @pytest.mark.parametrize("position", [-1, 4, 10])
    def test_out_of_bounds(self, position):
        r = construct([C.RED, C.RED, C.ORANGE, C.GOLD])
        with pytest.raises(IndexOutOfBounds):
            with_color(r, C.RED, position)

    def test_out_of_bounds_is_index_error(self):
        r = construct([C.BLACK])
        with pytest.raises(IndexError):
            with_color(r, C.BLACK, 1)


class TestStepColor:
    """Test moving a band to the next or previous legal color."""

    def test_next_digit(self):
        r = construct([C.BROWN, C.BLACK, C.BLACK, C.BROWN])
        assert step_color(r, 0).bands[0] == C.RED

    def test_previous_skips_illegal_colors(self):
        """From Brown back past Black, Pink, Silver and Gold to White."""
        r = construct([C.BROWN, C.BLACK, C.BLACK, C.BROWN])
        assert step_color(r, 0, -1).bands[0] == C.WHITE

    def test_next_wraps_around(self):
        r = construct([C.BROWN, C.BLACK, C.BLACK, C.SILVER])
        assert step_color(r, 3).bands[3] == C.BROWN

    def test_multiplier_reaches_pink(self):
        r = construct([C.BROWN, C.BLACK, C.SILVER])
        assert step_color(r, 2).bands[2] == C.PINK

    def test_zero_ohm_stays(self):
        r = construct([C.BLACK])
        assert step_color(r, 0) == r

    def test_out_of_bounds(self):
        r = construct([C.BROWN, C.BLACK, C.BLACK])
        with pytest.raises(IndexOutOfBounds):
            step_color(r, 3)

    def test_invalid_step(self):
        r = construct([C.BROWN, C.BLACK, C.BLACK])
        with pytest.raises(ValueError):
            step_color(r, 0, 2)
