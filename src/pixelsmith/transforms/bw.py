"""Stylized black/white: every pixel becomes pure black or pure white.

Two explicit phases:
    1. ``compute_luminance`` + ``median_luminance`` over the whole image.
    2. ``apply_threshold``: luminance >= median -> white, else black.

Luminance here is sqrt(.299 r^2 + .587 g^2 + .114 b^2) on 8-bit channels.
"""

from __future__ import annotations

import logging

import numpy as np

from pixelsmith.config import LUMINANCE_WEIGHTS
from pixelsmith.core.raster import Raster
from pixelsmith.core.types import MedianMode
from pixelsmith.errors import DimensionMismatchError, ValidationError

logger = logging.getLogger(__name__)


def compute_luminance(image: Raster) -> np.ndarray:
    """Per-pixel luminance as an (H, W) float64 array."""
    data = image.array.astype(np.float64)
    wr, wg, wb = LUMINANCE_WEIGHTS
    return np.sqrt(
        wr * data[..., 0] ** 2
        + wg * data[..., 1] ** 2
        + wb * data[..., 2] ** 2
    )


def median_luminance(
    luminance: np.ndarray,
    mode: MedianMode = MedianMode.CONVENTIONAL,
) -> float:
    """Median of all luminance values.

    Odd counts use the middle element in both modes. For even counts,
    CONVENTIONAL averages sorted[n/2 - 1] and sorted[n/2]; LEGACY averages
    sorted[n/2] and sorted[n/2 + 1], with the upper index capped at n - 1.
    """
    values = np.sort(np.asarray(luminance, dtype=np.float64).ravel())
    n = values.size
    if n == 0:
        raise ValidationError("Cannot take the median of an empty image")

    mid = n // 2
    if n % 2 == 1:
        return float(values[mid])

    mode = MedianMode(mode)
    if mode is MedianMode.LEGACY:
        lo, hi = mid, min(mid + 1, n - 1)
    else:
        lo, hi = mid - 1, mid
    return float((values[lo] + values[hi]) / 2)


def apply_threshold(image: Raster, luminance: np.ndarray, threshold: float) -> Raster:
    """Map pixels with luminance >= threshold to white, the rest to black."""
    if luminance.shape != (image.height, image.width):
        raise DimensionMismatchError(
            f"Luminance shape {luminance.shape} does not match "
            f"{image.width}x{image.height} image"
        )
    white = luminance >= threshold
    out = np.where(white[:, :, np.newaxis], 255, 0)
    return Raster.from_array(np.broadcast_to(out, (image.height, image.width, 3)))


def stylized_bw(image: Raster, mode: MedianMode = MedianMode.CONVENTIONAL) -> Raster:
    """Convert to a two-tone image split at the median luminance."""
    luminance = compute_luminance(image)
    median = median_luminance(luminance, mode)
    logger.debug("stylized_bw: median luminance %.3f (%s)", median, MedianMode(mode).value)
    return apply_threshold(image, luminance, median)
