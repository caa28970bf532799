"""Tests for RGB <-> HSL conversion."""

from __future__ import annotations

import numpy as np
import pytest

from pixelsmith.color.hsl import HSL, hsl_to_rgb_array, rgb_to_hsl_array
from pixelsmith.core.pixel import Pixel


class TestRGBToHSL:
    """Tests for the forward conversion."""

    @pytest.mark.parametrize("rgb, hue", [
        ((255, 0, 0), 0.0),
        ((255, 255, 0), 60.0),
        ((0, 255, 0), 120.0),
        ((0, 255, 255), 180.0),
        ((0, 0, 255), 240.0),
        ((255, 0, 255), 300.0),
    ])
    def test_primary_hues(self, rgb, hue):
        """Fully saturated colors land on their hue angle."""
        hsl = Pixel(*rgb).to_hsl()
        assert hsl.hue == pytest.approx(hue)
        assert hsl.saturation == pytest.approx(1.0)
        assert hsl.lightness == pytest.approx(0.5)

    def test_achromatic(self):
        """Grays have zero hue and saturation."""
        hsl = Pixel(128, 128, 128).to_hsl()
        assert hsl.hue == 0.0
        assert hsl.saturation == 0.0
        assert hsl.lightness == pytest.approx(128 / 255)

    def test_red_wraps_below_zero(self):
        """Red max with g < b adds 6 sectors so hue stays positive."""
        hsl = Pixel(255, 0, 51).to_hsl()
        assert 300.0 < hsl.hue < 360.0

    def test_light_saturation_branch(self):
        """Lightness above 0.5 uses delta / (2 - max - min)."""
        hsl = Pixel(255, 128, 128).to_hsl()
        mx, mn = 1.0, 128 / 255
        assert hsl.lightness > 0.5
        assert hsl.saturation == pytest.approx((mx - mn) / (2 - mx - mn))

    def test_array_matches_scalar(self):
        """Vectorized and scalar conversions agree."""
        rng = np.random.default_rng(7)
        rgb = rng.integers(0, 256, size=(50, 3))
        h, s, l = rgb_to_hsl_array(rgb)
        for i, c in enumerate(rgb):
            hsl = Pixel(*c).to_hsl()
            assert hsl.hue == pytest.approx(h[i])
            assert hsl.saturation == pytest.approx(s[i])
            assert hsl.lightness == pytest.approx(l[i])


class TestHSLToRGB:
    """Tests for the inverse conversion."""

    def test_green(self):
        assert HSL(120, 1.0, 0.5).to_pixel() == Pixel(0, 255, 0)

    def test_hue_wraps_on_conversion(self):
        """Hue outside [0, 360) is stored as-is and wraps when converted."""
        hsl = HSL(480, 1.0, 0.5)
        assert hsl.hue == 480
        assert hsl.to_pixel() == Pixel(0, 255, 0)
        assert HSL(-120, 1.0, 0.5).to_pixel() == Pixel(0, 0, 255)

    def test_zero_saturation_is_gray(self):
        p = HSL(200, 0.0, 0.4).to_pixel()
        assert p.red == p.green == p.blue

    def test_lightness_extremes(self):
        assert HSL(33, 0.7, 0.0).to_pixel() == Pixel(0, 0, 0)
        assert HSL(33, 0.7, 1.0).to_pixel() == Pixel(255, 255, 255)

    def test_out_of_range_components_clamp(self):
        """Saturation/lightness beyond [0, 1] still yield valid channels."""
        rgb = hsl_to_rgb_array(np.array([10.0]), np.array([3.0]), np.array([1.4]))
        assert rgb.dtype == np.uint8
        assert rgb.shape == (1, 3)

    def test_with_methods(self):
        hsl = HSL(10, 0.2, 0.3)
        assert hsl.with_hue(50) == HSL(50, 0.2, 0.3)
        assert hsl.with_saturation(0.9) == HSL(10, 0.9, 0.3)
        assert hsl.with_lightness(0.1) == HSL(10, 0.2, 0.1)

    def test_from_hsl(self):
        assert Pixel.from_hsl(HSL(0, 1.0, 0.5)) == Pixel(255, 0, 0)


class TestRoundTrip:
    """RGB -> HSL -> RGB stays within +/-1 per channel."""

    def test_roundtrip_random(self):
        rng = np.random.default_rng(42)
        rgb = rng.integers(0, 256, size=(20000, 3))
        back = hsl_to_rgb_array(*rgb_to_hsl_array(rgb)).astype(np.int64)
        assert np.max(np.abs(back - rgb)) <= 1

    def test_roundtrip_grid(self):
        """Coarse lattice over the full cube, including all corners."""
        axis = np.arange(0, 256, 15).tolist() + [255]
        rr, gg, bb = np.meshgrid(axis, axis, axis, indexing="ij")
        rgb = np.stack([rr.ravel(), gg.ravel(), bb.ravel()], axis=-1)
        back = hsl_to_rgb_array(*rgb_to_hsl_array(rgb)).astype(np.int64)
        assert np.max(np.abs(back - rgb)) <= 1

    def test_roundtrip_scalar(self):
        for rgb in [(0, 0, 0), (255, 255, 255), (12, 200, 99), (254, 1, 128)]:
            back = Pixel(*rgb).to_hsl().to_pixel()
            assert all(abs(a - b) <= 1 for a, b in zip(back.as_tuple(), rgb))
