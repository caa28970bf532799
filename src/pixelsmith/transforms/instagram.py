"""Instagram-style filter: warm shift, halo vignette, decorative grain.

The halo and grain overlays are ordinary rasters whose size is independent
of the base image. They are sampled nearest-neighbor, never resized:
the overlay pixel for base coordinate c is floor(c * overlay_dim / base_dim).
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from pixelsmith.config import (
    GRAIN_BLEND,
    HALO_BLEND,
    WARM_BLUE_DIVISOR,
    WARM_RED_GAIN,
)
from pixelsmith.core.raster import Raster
from pixelsmith.errors import DimensionMismatchError
from pixelsmith.overlays import Overlays, load_overlays

logger = logging.getLogger(__name__)


def warm(image: Raster) -> Raster:
    """Boost red by 1.2x and divide blue by 1.5; green is unchanged."""
    data = image.array.astype(np.float64)
    data[..., 0] = data[..., 0] * WARM_RED_GAIN
    data[..., 2] = data[..., 2] / WARM_BLUE_DIVISOR
    return Raster.from_array(data)


def _sample_indices(base_dim: int, overlay_dim: int) -> np.ndarray:
    """Nearest-neighbor overlay indices for each base coordinate."""
    if base_dim <= 0 or overlay_dim <= 0:
        raise DimensionMismatchError(
            f"Cannot sample a {overlay_dim}-pixel overlay axis onto {base_dim} pixels"
        )
    ratio = overlay_dim / float(base_dim)
    idx = np.floor(np.arange(base_dim) * ratio).astype(np.int64)
    if idx.size and (idx[0] < 0 or idx[-1] >= overlay_dim):
        raise DimensionMismatchError(
            f"Overlay index {int(idx[-1])} outside overlay axis of {overlay_dim}"
        )
    return idx


def sample_nearest(overlay: Raster, width: int, height: int) -> np.ndarray:
    """Sample ``overlay`` onto a width x height grid.

    Returns:
        (height, width, 3) uint8 array.
    """
    xs = _sample_indices(width, overlay.width)
    ys = _sample_indices(height, overlay.height)
    return overlay.array[ys[:, np.newaxis], xs[np.newaxis, :]]


def blend_overlay(
    image: Raster,
    overlay: Raster,
    base_weight: float,
    overlay_weight: float,
) -> Raster:
    """Weighted blend base_weight * image + overlay_weight * overlay, truncated."""
    sampled = sample_nearest(overlay, image.width, image.height).astype(np.float64)
    base = image.array.astype(np.float64)
    return Raster.from_array(base_weight * base + overlay_weight * sampled)


def instagram(image: Raster, overlays: Optional[Overlays] = None) -> Raster:
    """Apply warm shift, then the halo blend, then the grain blend.

    Args:
        image: Base image.
        overlays: Halo and grain rasters. Defaults to the procedural pair.

    Returns:
        Filtered image with the dimensions of ``image``.
    """
    if overlays is None:
        overlays = load_overlays()

    logger.debug(
        "instagram: base %dx%d, halo %dx%d, grain %dx%d",
        image.width, image.height,
        overlays.halo.width, overlays.halo.height,
        overlays.grain.width, overlays.grain.height,
    )
    result = warm(image)
    result = blend_overlay(result, overlays.halo, *HALO_BLEND)
    result = blend_overlay(result, overlays.grain, *GRAIN_BLEND)
    return result
