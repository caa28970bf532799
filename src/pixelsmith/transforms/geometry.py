"""Geometric transforms."""

from __future__ import annotations

import numpy as np

from pixelsmith.core.raster import Raster


def rotate_clockwise(image: Raster) -> Raster:
    """Rotate 90 degrees clockwise into a new raster.

    The result is height x width; source (x, y) lands at (height - 1 - y, x).
    """
    return Raster.from_array(np.rot90(image.array, k=-1))
