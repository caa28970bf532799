"""Tests for halo and grain overlays."""

from __future__ import annotations

import numpy as np
import pytest

from pixelsmith.config import DEFAULT_OVERLAY_SIZE
from pixelsmith.errors import DecodeError
from pixelsmith.overlays import generate_grain, generate_halo, load_overlays


class TestProceduralOverlays:
    """Tests for generated default overlays."""

    def test_halo_vignette(self):
        """Bright centre, dark corners."""
        halo = generate_halo(64)
        assert halo.size == (64, 64)
        centre = halo.get_pixel(32, 32).red
        corner = halo.get_pixel(0, 0).red
        assert centre > 240
        assert corner < 20

    def test_halo_gray(self):
        data = generate_halo(16).array
        assert np.all(data[..., 0] == data[..., 2])

    def test_grain_seeded(self):
        assert generate_grain(32, seed=1) == generate_grain(32, seed=1)
        assert generate_grain(32, seed=1) != generate_grain(32, seed=2)

    def test_grain_range(self):
        data = generate_grain(64).array.astype(int)
        assert data.min() >= 128 - 64
        assert data.max() <= 128 + 64


class TestLoadOverlays:
    """Tests for loading overlays from disk."""

    def test_defaults(self):
        overlays = load_overlays()
        assert overlays.halo.size == (DEFAULT_OVERLAY_SIZE, DEFAULT_OVERLAY_SIZE)
        assert overlays.grain.size == (DEFAULT_OVERLAY_SIZE, DEFAULT_OVERLAY_SIZE)

    def test_from_files(self, tmp_image_dir):
        from pixelsmith.io.image import save_raster

        halo_path = save_raster(generate_halo(20), tmp_image_dir / "halo.png")
        overlays = load_overlays(halo_path=halo_path)
        assert overlays.halo == generate_halo(20)
        assert overlays.grain.size == (DEFAULT_OVERLAY_SIZE, DEFAULT_OVERLAY_SIZE)

    def test_missing_file(self, tmp_image_dir):
        with pytest.raises(DecodeError):
            load_overlays(grain_path=tmp_image_dir / "missing.png")
