"""Tests for hue, saturation and lightness replacement."""

from __future__ import annotations

import numpy as np
import pytest

from pixelsmith.core.pixel import Pixel
from pixelsmith.core.raster import Raster
from pixelsmith.errors import ValidationError
from pixelsmith.transforms import set_hue, set_lightness, set_saturation


def _one(rgb):
    return Raster.from_array(np.array([[rgb]]))


class TestSetHue:
    """Tests for hue replacement."""

    def test_red_to_green(self):
        assert set_hue(_one((255, 0, 0)), 120).get_pixel(0, 0) == Pixel(0, 255, 0)

    def test_hue_not_range_checked(self):
        """Hue wraps modulo 360 during conversion."""
        img = _one((255, 0, 0))
        assert set_hue(img, 600) == set_hue(img, 240)
        assert set_hue(img, -120) == set_hue(img, 240)

    @pytest.mark.parametrize("hue", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_hue_rejected(self, hue):
        with pytest.raises(ValidationError):
            set_hue(_one((255, 0, 0)), hue)

    def test_gray_unchanged(self):
        """Zero saturation ignores hue."""
        img = _one((90, 90, 90))
        assert set_hue(img, 200) == img

    def test_preserves_lightness(self, random_raster):
        from pixelsmith.color.hsl import rgb_to_hsl_array

        _, _, before = rgb_to_hsl_array(random_raster.array)
        _, _, after = rgb_to_hsl_array(set_hue(random_raster, 45).array)
        np.testing.assert_allclose(after, before, atol=1.0 / 255)


class TestSetSaturation:
    """Tests for saturation replacement."""

    def test_zero_desaturates(self, random_raster):
        """Every output pixel has R == G == B."""
        data = set_saturation(random_raster, 0).array
        assert np.all(data[..., 0] == data[..., 1])
        assert np.all(data[..., 1] == data[..., 2])

    def test_full_saturation(self):
        """A muted red becomes pure red at the same lightness."""
        out = set_saturation(_one((191, 64, 64)), 1.0).get_pixel(0, 0)
        assert out.red > 250
        assert out.green < 5 and out.blue < 5

    def test_out_of_range_clamped(self, random_raster):
        assert set_saturation(random_raster, 1.5) == set_saturation(random_raster, 1.0)
        assert set_saturation(random_raster, -2) == set_saturation(random_raster, 0.0)


class TestSetLightness:
    """Tests for lightness replacement."""

    def test_extremes(self, random_raster):
        assert not set_lightness(random_raster, 0).array.any()
        assert np.all(set_lightness(random_raster, 1).array == 255)

    def test_mid_lightness_keeps_hue(self):
        out = set_lightness(_one((0, 0, 100)), 0.5).get_pixel(0, 0)
        assert out == Pixel(0, 0, 255)

    def test_out_of_range_clamped(self, random_raster):
        assert set_lightness(random_raster, 7) == set_lightness(random_raster, 1.0)
