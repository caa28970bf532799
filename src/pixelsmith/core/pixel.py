"""RGB pixel value object and the channel clamping rule.

Every channel value that enters the system passes through ``clamp_channel``
(scalars) or ``clamp_channels`` (arrays). Out-of-range values are never an
error: they are truncated toward zero and pinned to [0, 255].
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from pixelsmith.config import CHANNEL_MAX, CHANNEL_MIN

if TYPE_CHECKING:
    from pixelsmith.color.hsl import HSL


def clamp_channel(value) -> int:
    """Clamp a single channel value to [0, 255].

    Floats are truncated toward zero; NaN maps to 0 and +/-inf to the bounds.
    """
    if isinstance(value, (float, np.floating)):
        if math.isnan(value):
            return CHANNEL_MIN
        if math.isinf(value):
            return CHANNEL_MAX if value > 0 else CHANNEL_MIN
    v = int(value)
    if v > CHANNEL_MAX:
        return CHANNEL_MAX
    if v < CHANNEL_MIN:
        return CHANNEL_MIN
    return v


def clamp_channels(values: np.ndarray) -> np.ndarray:
    """Vectorized ``clamp_channel``.

    Args:
        values: Array of any numeric dtype.

    Returns:
        uint8 array of the same shape. Floats are truncated toward zero
        before clamping, matching ``int()``.
    """
    arr = np.asarray(values)
    if np.issubdtype(arr.dtype, np.floating):
        arr = np.trunc(np.nan_to_num(arr, nan=0.0, posinf=CHANNEL_MAX, neginf=CHANNEL_MIN))
    return np.clip(arr, CHANNEL_MIN, CHANNEL_MAX).astype(np.uint8)


@dataclass(frozen=True)
class Pixel:
    """A red-green-blue pixel with channels always in [0, 255]."""
    red: int = 0
    green: int = 0
    blue: int = 0

    def __post_init__(self):
        object.__setattr__(self, "red", clamp_channel(self.red))
        object.__setattr__(self, "green", clamp_channel(self.green))
        object.__setattr__(self, "blue", clamp_channel(self.blue))

    def with_red(self, red) -> Pixel:
        return Pixel(red, self.green, self.blue)

    def with_green(self, green) -> Pixel:
        return Pixel(self.red, green, self.blue)

    def with_blue(self, blue) -> Pixel:
        return Pixel(self.red, self.green, blue)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def to_hsl(self) -> HSL:
        """Convert to hue/saturation/lightness."""
        from pixelsmith.color.hsl import HSL, rgb_to_hsl_array

        h, s, l = rgb_to_hsl_array(np.array([self.as_tuple()], dtype=np.uint8))
        return HSL(float(h[0]), float(s[0]), float(l[0]))

    @classmethod
    def from_hsl(cls, hsl: HSL) -> Pixel:
        return hsl.to_pixel()


BLACK = Pixel(0, 0, 0)
WHITE = Pixel(255, 255, 255)
