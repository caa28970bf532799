"""Shared fixtures for PixelSmith tests."""

from __future__ import annotations

import numpy as np
import pytest

from pixelsmith.core.raster import Raster


@pytest.fixture
def scenario_2x2():
    """2x2 image: (10,20,30) (200,100,50) / (0,0,0) (255,255,255)."""
    return Raster.from_array(np.array([
        [[10, 20, 30], [200, 100, 50]],
        [[0, 0, 0], [255, 255, 255]],
    ]))


@pytest.fixture
def random_raster():
    """Random 7x5 (W x H) raster with odd dimensions."""
    rng = np.random.default_rng(42)
    return Raster.from_array(rng.integers(0, 256, size=(5, 7, 3)))


@pytest.fixture
def gradient_raster():
    """Horizontal color gradient, 16x8."""
    x = np.linspace(0, 255, 16)
    data = np.zeros((8, 16, 3))
    data[..., 0] = x
    data[..., 1] = x[::-1]
    data[..., 2] = np.linspace(0, 255, 8)[:, np.newaxis]
    return Raster.from_array(data)


@pytest.fixture
def tmp_image_dir(tmp_path):
    """Temporary directory for test images."""
    d = tmp_path / "images"
    d.mkdir()
    return d


@pytest.fixture
def sample_image_path(tmp_image_dir, random_raster):
    """The random raster saved as PNG on disk."""
    from pixelsmith.io.image import save_raster

    return save_raster(random_raster, tmp_image_dir / "sample.png")
