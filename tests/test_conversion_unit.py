"""
Unit tests for RGB to HSL conversion.

Tests the simplified HSL transform:
- achromatic and primary colors
- hue branch selection and wraparound
- agreement between the scalar and vectorized paths
"""

import itertools

import numpy as np
import pytest

from munsell.colors.conversion import rgb_to_hsl, rgb_array_to_hsl
from munsell.schemas import RGBComponents


def hsl_of(r, g, b):
    return rgb_to_hsl(RGBComponents(red=r, green=g, blue=b))


class TestRgbToHsl:
    """Test scalar RGB to HSL conversion"""

    def test_black(self):
        """Test that black has zero hue, saturation and lightness"""
        assert hsl_of(0, 0, 0).as_tuple() == (0.0, 0.0, 0.0)

    def test_white(self):
        """Test that white is fully light with no saturation"""
        hsl = hsl_of(255, 255, 255)
        assert hsl.hue == 0.0
        assert hsl.saturation == 0.0
        assert hsl.lightness == 100.0

    def test_primaries(self):
        """Test pure red, green and blue"""
        assert hsl_of(255, 0, 0).as_tuple() == (0.0, 100.0, 50.0)
        assert hsl_of(0, 255, 0).as_tuple() == (120.0, 100.0, 50.0)
        assert hsl_of(0, 0, 255).as_tuple() == (240.0, 100.0, 50.0)

    def test_gray_is_achromatic(self):
        """Test that equal channels give zero hue and saturation"""
        hsl = hsl_of(128, 128, 128)
        assert hsl.hue == 0.0
        assert hsl.saturation == 0.0
        assert hsl.lightness == pytest.approx(50.196, abs=1e-3)

    def test_saturation_is_chroma(self):
        """Test the simplified saturation formula (no lightness correction)"""
        # Textbook HSL would report 100% saturation for navy
        hsl = hsl_of(0, 0, 128)
        assert hsl.saturation == pytest.approx(128 / 255 * 100)
        assert hsl.lightness == pytest.approx(128 / 255 * 50)

    def test_red_branch_wraps(self):
        """Test that a negative red-branch segment wraps past 300 degrees"""
        assert hsl_of(255, 0, 255).hue == pytest.approx(300.0)
        assert hsl_of(255, 0, 128).hue == pytest.approx(360 - 128 / 255 * 60)

    def test_hue_within_range(self):
        """Test that hue stays in [0, 360) across a sample of colors"""
        for r, g, b in itertools.product(range(0, 256, 15), repeat=3):
            assert 0.0 <= hsl_of(r, g, b).hue < 360.0

    def test_tie_prefers_red_then_green(self):
        """Test branch priority when two channels share the maximum"""
        # red == green: red branch, (g - b) / c = 1
        assert hsl_of(255, 255, 0).hue == pytest.approx(60.0)
        # green == blue: green branch, (b - r) / c + 2 = 3
        assert hsl_of(0, 255, 255).hue == pytest.approx(180.0)
        # red == blue: red branch with wraparound
        assert hsl_of(200, 0, 200).hue == pytest.approx(300.0)

    def test_orange(self):
        hsl = hsl_of(255, 128, 0)
        assert hsl.hue == pytest.approx(128 / 255 * 60)
        assert hsl.saturation == 100.0
        assert hsl.lightness == 50.0


class TestRgbArrayToHsl:
    """Test vectorized conversion of pixel arrays"""

    def test_matches_scalar_conversion(self):
        """Test that every row equals the scalar result exactly"""
        pixels = np.array(
            list(itertools.product(range(0, 256, 17), repeat=3)) +
            [(255, 255, 0), (0, 255, 255), (255, 0, 255), (10, 10, 10), (1, 0, 0)],
            dtype=np.uint8,
        )
        result = rgb_array_to_hsl(pixels)
        expected = np.array([hsl_of(*map(int, row)).as_tuple() for row in pixels])
        assert result.shape == (len(pixels), 3)
        np.testing.assert_array_equal(result, expected)

    def test_single_pixel(self):
        """Test that a flat (3,) array is treated as one pixel"""
        result = rgb_array_to_hsl(np.array([0, 255, 0]))
        np.testing.assert_array_equal(result, [[120.0, 100.0, 50.0]])

    def test_empty_array(self):
        result = rgb_array_to_hsl(np.zeros((0, 3), dtype=np.uint8))
        assert result.shape == (0, 3)

    def test_no_division_warnings(self):
        """Test that achromatic pixels convert without numpy warnings"""
        with np.errstate(all="raise"):
            result = rgb_array_to_hsl(np.array([[0, 0, 0], [255, 255, 255]]))
        np.testing.assert_array_equal(result[:, 0], [0.0, 0.0])

    def test_invalid_shape(self):
        """Test rejection of arrays that are not (N, 3)"""
        with pytest.raises(ValueError):
            rgb_array_to_hsl(np.zeros((4, 4)))
        with pytest.raises(ValueError):
            rgb_array_to_hsl(np.zeros((2, 2, 3)))

    def test_out_of_range_values(self):
        """Test rejection of values outside the 8-bit range"""
        with pytest.raises(ValueError):
            rgb_array_to_hsl(np.array([[256, 0, 0]]))
        with pytest.raises(ValueError):
            rgb_array_to_hsl(np.array([[-1, 0, 0]]))

    def test_fractional_values(self):
        with pytest.raises(ValueError):
            rgb_array_to_hsl(np.array([[0.5, 0, 0]]))
