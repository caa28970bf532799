"""Per-pixel color transforms: grayscale, invert, sepia."""

from __future__ import annotations

import logging

import numpy as np

from pixelsmith.config import SEPIA_MATRIX
from pixelsmith.core.raster import Raster

logger = logging.getLogger(__name__)


def grayscale(image: Raster) -> Raster:
    """Set every channel to the truncated average (r + g + b) // 3."""
    data = image.array.astype(np.int32)
    avg = data.sum(axis=2) // 3
    logger.debug("grayscale: %dx%d", image.width, image.height)
    return Raster.from_array(np.repeat(avg[:, :, np.newaxis], 3, axis=2))


def invert(image: Raster) -> Raster:
    """Replace each channel c with 255 - c."""
    logger.debug("invert: %dx%d", image.width, image.height)
    return Raster.from_array(255 - image.array.astype(np.int32))


def sepia(image: Raster) -> Raster:
    """Apply the sepia tone matrix; results are truncated then clamped."""
    data = image.array.astype(np.float64)
    r = data[..., 0]
    g = data[..., 1]
    b = data[..., 2]

    out = np.stack(
        [wr * r + wg * g + wb * b for wr, wg, wb in SEPIA_MATRIX],
        axis=-1,
    )
    logger.debug("sepia: %dx%d", image.width, image.height)
    return Raster.from_array(out)
