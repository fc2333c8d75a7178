"""Tests for mpd_palette.core.colourspace — hex parsing, LAB and HLS values."""

import numpy as np
import pytest
from mpd_palette.core.colourspace import (
    hex_to_lab,
    hex_to_rgb,
    lightness_of,
    make_colour,
    rgb_to_lab,
    saturation_of,
)
from mpd_palette.core.errors import InvalidColourError, PaletteError


class TestHexToRgb:
    def test_white(self):
        assert hex_to_rgb('#ffffff') == (255, 255, 255)

    def test_black(self):
        assert hex_to_rgb('#000000') == (0, 0, 0)

    def test_mixed(self):
        assert hex_to_rgb('#2563eb') == (37, 99, 235)

    def test_uppercase(self):
        assert hex_to_rgb('#FF0000') == (255, 0, 0)

    def test_short_hex(self):
        assert hex_to_rgb('#abc') == (170, 187, 204)

    def test_no_hash(self):
        assert hex_to_rgb('00ff00') == (0, 255, 0)

    @pytest.mark.parametrize('bad', ['invalid', '#ff', '#ffffffff', '#gggggg', '', 'red', '#12345'])
    def test_invalid_raises(self, bad):
        with pytest.raises(InvalidColourError):
            hex_to_rgb(bad)

    def test_non_string_raises(self):
        with pytest.raises(InvalidColourError):
            hex_to_rgb(0xFF0000)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            hex_to_rgb('nope')
        assert issubclass(InvalidColourError, PaletteError)


class TestLab:
    def test_white(self):
        L, a, b = hex_to_lab('#ffffff')
        assert L == pytest.approx(100.0, abs=0.01)
        assert a == pytest.approx(0.0, abs=0.01)
        assert b == pytest.approx(0.0, abs=0.01)

    def test_black(self):
        assert hex_to_lab('#000000') == pytest.approx((0.0, 0.0, 0.0), abs=0.01)

    def test_red(self):
        L, a, b = hex_to_lab('#ff0000')
        assert L == pytest.approx(53.24, abs=0.05)
        assert a == pytest.approx(80.09, abs=0.05)
        assert b == pytest.approx(67.20, abs=0.05)

    def test_batch_shape(self):
        lab = rgb_to_lab([(255, 0, 0), (0, 255, 0), (0, 0, 255)])
        assert lab.shape == (3, 3)
        # Green is the lightest primary, blue the darkest
        assert np.argmax(lab[:, 0]) == 1
        assert np.argmin(lab[:, 0]) == 2

    def test_empty_batch(self):
        assert rgb_to_lab([]).shape == (0, 3)


class TestHls:
    def test_pure_red(self):
        assert saturation_of('#ff0000') == pytest.approx(1.0)
        assert lightness_of('#ff0000') == pytest.approx(0.5)

    def test_grey_has_no_saturation(self):
        assert saturation_of('#808080') == pytest.approx(0.0)
        assert lightness_of('#808080') == pytest.approx(128 / 255)

    def test_white_and_black(self):
        assert lightness_of('#ffffff') == pytest.approx(1.0)
        assert lightness_of('#000000') == pytest.approx(0.0)


class TestMakeColour:
    def test_identity_is_stripped(self):
        assert make_colour('  #ff0000\n').hex == '#ff0000'

    def test_keeps_original_spelling(self):
        c = make_colour('FF8080')
        assert c.hex == 'FF8080'
        assert c.rgb == (255, 128, 128)

    def test_derived_attributes(self):
        c = make_colour('#0000ff')
        assert c.saturation == pytest.approx(1.0)
        assert c.lightness == pytest.approx(0.5)
        assert c.lab == pytest.approx(hex_to_lab('#0000ff'))
