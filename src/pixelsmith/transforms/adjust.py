"""Hue, saturation and lightness replacement.

Each transform converts every pixel to HSL, overwrites one component with
the given value and converts back to RGB.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from pixelsmith.color.hsl import hsl_to_rgb_array, rgb_to_hsl_array
from pixelsmith.core.raster import Raster
from pixelsmith.errors import ValidationError

logger = logging.getLogger(__name__)


def _unit_interval(value: float, name: str) -> float:
    """Clamp a saturation/lightness parameter to [0, 1]."""
    clamped = min(1.0, max(0.0, float(value)))
    if clamped != value:
        logger.warning("%s %.4g outside [0, 1], clamped to %.4g", name, value, clamped)
    return clamped


def set_hue(image: Raster, hue: float) -> Raster:
    """Set every pixel's hue (degrees). Not range-checked; wraps modulo 360.

    Raises:
        ValidationError: If hue is NaN or infinite.
    """
    if not math.isfinite(hue):
        raise ValidationError(f"Hue must be a finite number of degrees, got {hue}")
    _, s, l = rgb_to_hsl_array(image.array)
    return Raster.from_array(hsl_to_rgb_array(np.full_like(s, float(hue)), s, l))


def set_saturation(image: Raster, saturation: float) -> Raster:
    """Set every pixel's saturation. 0 yields a fully gray image."""
    saturation = _unit_interval(saturation, "Saturation")
    h, _, l = rgb_to_hsl_array(image.array)
    return Raster.from_array(hsl_to_rgb_array(h, np.full_like(l, saturation), l))


def set_lightness(image: Raster, lightness: float) -> Raster:
    """Set every pixel's lightness. 0 is black, 1 is white."""
    lightness = _unit_interval(lightness, "Lightness")
    h, s, _ = rgb_to_hsl_array(image.array)
    return Raster.from_array(hsl_to_rgb_array(h, s, np.full_like(h, lightness)))
