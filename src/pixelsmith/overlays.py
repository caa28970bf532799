"""Halo and grain overlay rasters for the Instagram-style filter.

Overlays load from image files when paths are given. Otherwise they are
generated procedurally:

    halo:  radial vignette, white at the centre falling to black at the
           corners (falloff exponent ``HALO_FALLOFF``).
    grain: seeded uniform noise of +/- ``GRAIN_AMPLITUDE`` around mid-gray,
           identical on all three channels.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np

from pixelsmith.config import (
    DEFAULT_GRAIN_SEED,
    DEFAULT_OVERLAY_SIZE,
    GRAIN_AMPLITUDE,
    HALO_FALLOFF,
)
from pixelsmith.core.raster import Raster

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Overlays:
    """The pair of auxiliary rasters blended by the Instagram filter."""
    halo: Raster
    grain: Raster


def generate_halo(size: int = DEFAULT_OVERLAY_SIZE) -> Raster:
    """Generate a size x size vignette (vectorized)."""
    coords = (np.arange(size, dtype=np.float64) + 0.5) / size * 2.0 - 1.0
    xx, yy = np.meshgrid(coords, coords)
    # Normalized so the corners reach distance 1
    dist = np.sqrt(xx ** 2 + yy ** 2) / np.sqrt(2.0)
    level = 255.0 * (1.0 - np.clip(dist, 0.0, 1.0) ** HALO_FALLOFF)
    return Raster.from_array(np.repeat(level[:, :, np.newaxis], 3, axis=2))


def generate_grain(
    size: int = DEFAULT_OVERLAY_SIZE,
    seed: int = DEFAULT_GRAIN_SEED,
) -> Raster:
    """Generate a size x size monochrome noise texture."""
    rng = np.random.default_rng(seed)
    noise = rng.integers(-GRAIN_AMPLITUDE, GRAIN_AMPLITUDE + 1, size=(size, size))
    level = 128 + noise
    return Raster.from_array(np.repeat(level[:, :, np.newaxis], 3, axis=2))


def load_overlays(
    halo_path: Optional[str | Path] = None,
    grain_path: Optional[str | Path] = None,
) -> Overlays:
    """Load halo/grain overlays, generating defaults for missing paths.

    Raises:
        DecodeError: If a given overlay file cannot be decoded.
    """
    from pixelsmith.io.image import load_raster

    if halo_path is not None:
        halo = load_raster(halo_path)
    else:
        logger.debug("Using procedural halo overlay")
        halo = generate_halo()

    if grain_path is not None:
        grain = load_raster(grain_path)
    else:
        logger.debug("Using procedural grain overlay")
        grain = generate_grain()

    return Overlays(halo=halo, grain=grain)
