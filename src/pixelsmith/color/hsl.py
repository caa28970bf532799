"""Hue/saturation/lightness color model.

RGB -> HSL:
    Channels are normalized to [0, 1]. With max/min over the channels,
    lightness is (max + min) / 2 and delta is max - min. A delta below
    ``HSL_EPSILON`` is achromatic (hue = saturation = 0). Otherwise hue is
    taken from the largest channel, checked in red, green, blue order, and
    scaled to degrees.

HSL -> RGB:
    The standard inverse. Hue wraps modulo 360, channels are rounded to the
    nearest integer and clamped to [0, 255].

The array functions are the single implementation; the scalar ``HSL`` and
``Pixel`` conversions delegate to them.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

import numpy as np

from pixelsmith.config import HSL_EPSILON

if TYPE_CHECKING:
    from pixelsmith.core.pixel import Pixel


@dataclass(frozen=True)
class HSL:
    """Hue in degrees, saturation and lightness nominally in [0, 1].

    Values are stored as given. Hue wraps and RGB channels clamp only when
    converting back with ``to_pixel``.
    """
    hue: float
    saturation: float
    lightness: float

    def with_hue(self, hue: float) -> HSL:
        return replace(self, hue=hue)

    def with_saturation(self, saturation: float) -> HSL:
        return replace(self, saturation=saturation)

    def with_lightness(self, lightness: float) -> HSL:
        return replace(self, lightness=lightness)

    def to_pixel(self) -> Pixel:
        from pixelsmith.core.pixel import Pixel

        rgb = hsl_to_rgb_array(
            np.array([self.hue], dtype=np.float64),
            np.array([self.saturation], dtype=np.float64),
            np.array([self.lightness], dtype=np.float64),
        )
        return Pixel(*(int(c) for c in rgb[0]))


def rgb_to_hsl_array(rgb: np.ndarray) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Convert (..., 3) 8-bit RGB values to HSL.

    Args:
        rgb: (..., 3) array of channel values in [0, 255].

    Returns:
        (hue, saturation, lightness) float64 arrays of shape rgb.shape[:-1].
        Hue is in degrees [0, 360).
    """
    norm = np.asarray(rgb, dtype=np.float64) / 255.0
    r = norm[..., 0]
    g = norm[..., 1]
    b = norm[..., 2]

    mx = np.maximum(r, np.maximum(g, b))
    mn = np.minimum(r, np.minimum(g, b))
    lightness = (mx + mn) / 2.0
    delta = mx - mn

    chromatic = delta >= HSL_EPSILON
    safe_delta = np.where(chromatic, delta, 1.0)

    hue = np.select(
        [mx == r, mx == g],
        [
            (g - b) / safe_delta + np.where(g < b, 6.0, 0.0),
            (b - r) / safe_delta + 2.0,
        ],
        default=(r - g) / safe_delta + 4.0,
    )
    hue = np.where(chromatic, hue * 60.0, 0.0)

    denom = np.where(lightness > 0.5, 2.0 - mx - mn, mx + mn)
    denom = np.where(chromatic, denom, 1.0)
    saturation = np.where(chromatic, delta / denom, 0.0)

    return hue, saturation, lightness


def _hue_to_channel(p: np.ndarray, q: np.ndarray, t: np.ndarray) -> np.ndarray:
    """Piecewise hue ramp for one channel; ``t`` is a hue fraction."""
    t = np.mod(t, 1.0)
    return np.select(
        [t < 1.0 / 6.0, t < 0.5, t < 2.0 / 3.0],
        [p + (q - p) * 6.0 * t, q, p + (q - p) * (2.0 / 3.0 - t) * 6.0],
        default=p,
    )


def hsl_to_rgb_array(
    hue: np.ndarray,
    saturation: np.ndarray,
    lightness: np.ndarray,
) -> np.ndarray:
    """Convert HSL arrays back to 8-bit RGB.

    Args:
        hue: Degrees, any range (wrapped modulo 360).
        saturation: Saturation values.
        lightness: Lightness values.

    Returns:
        (..., 3) uint8 array.
    """
    h = np.mod(np.asarray(hue, dtype=np.float64), 360.0) / 360.0
    s = np.asarray(saturation, dtype=np.float64)
    l = np.asarray(lightness, dtype=np.float64)
    h, s, l = np.broadcast_arrays(h, s, l)

    q = np.where(l < 0.5, l * (1.0 + s), l + s - l * s)
    p = 2.0 * l - q

    rgb = np.stack([
        _hue_to_channel(p, q, h + 1.0 / 3.0),
        _hue_to_channel(p, q, h),
        _hue_to_channel(p, q, h - 1.0 / 3.0),
    ], axis=-1)

    return np.clip(np.rint(rgb * 255.0), 0, 255).astype(np.uint8)
