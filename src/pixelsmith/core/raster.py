"""In-memory raster image: a width x height grid of RGB pixels.

CONVENTION:
    Pixel data is an (H, W, 3) uint8 array indexed as data[y, x, channel].
    Accessors take (x, y), i.e. column first, matching image coordinates.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import numpy as np

from pixelsmith.config import MAX_IMAGE_DIMENSION, MAX_IMAGE_PIXELS
from pixelsmith.core.pixel import Pixel, clamp_channels
from pixelsmith.errors import ImageDimensionError

logger = logging.getLogger(__name__)


def validate_dimensions(width: int, height: int) -> None:
    """Check image dimensions before memory allocation."""
    if width <= 0 or height <= 0:
        raise ImageDimensionError(f"Invalid image dimensions: {width}x{height}")
    if width > MAX_IMAGE_DIMENSION or height > MAX_IMAGE_DIMENSION:
        raise ImageDimensionError(
            f"Image dimension {max(width, height)} exceeds "
            f"maximum allowed {MAX_IMAGE_DIMENSION}"
        )
    if width * height > MAX_IMAGE_PIXELS:
        raise ImageDimensionError(
            f"Image has {width * height:,} pixels, exceeds "
            f"maximum allowed {MAX_IMAGE_PIXELS:,}"
        )


class Raster:
    """A mutable grid of pixels owned by a single caller.

    Construct with ``Raster(width, height)`` for a black image, or with
    ``Raster.from_array`` / ``Raster.load`` for existing pixel data.
    """

    __hash__ = None

    def __init__(self, width: int, height: int):
        validate_dimensions(width, height)
        self._data = np.zeros((height, width, 3), dtype=np.uint8)

    @classmethod
    def from_array(cls, array: np.ndarray) -> Raster:
        """Build a raster from an (H, W, 3) array, clamping every channel."""
        arr = np.asarray(array)
        if arr.ndim != 3 or arr.shape[2] != 3:
            raise ImageDimensionError(f"Expected (H, W, 3) array, got shape {arr.shape}")
        raster = cls(arr.shape[1], arr.shape[0])
        raster._data[...] = clamp_channels(arr)
        return raster

    @classmethod
    def from_pixels(cls, rows: list[list[Pixel]]) -> Raster:
        """Build a raster from rows of pixels (rows[y][x])."""
        arr = np.array([[p.as_tuple() for p in row] for row in rows], dtype=np.int64)
        return cls.from_array(arr)

    @classmethod
    def load(cls, path: str | Path) -> Raster:
        from pixelsmith.io.image import load_raster
        return load_raster(path)

    def save(self, path: str | Path) -> Path:
        from pixelsmith.io.image import save_raster
        return save_raster(self, path)

    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) tuple."""
        return self.width, self.height

    @property
    def array(self) -> np.ndarray:
        """Read-only (H, W, 3) uint8 view of the pixel data."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def to_array(self) -> np.ndarray:
        """Writable copy of the pixel data."""
        return self._data.copy()

    def copy(self) -> Raster:
        return Raster.from_array(self._data)

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Pixel ({x}, {y}) outside {self.width}x{self.height} raster"
            )

    def get_pixel(self, x: int, y: int) -> Pixel:
        self._check_bounds(x, y)
        r, g, b = self._data[y, x]
        return Pixel(int(r), int(g), int(b))

    def set_pixel(self, x: int, y: int, pixel: Pixel) -> None:
        self._check_bounds(x, y)
        self._data[y, x] = pixel.as_tuple()

    def pixels(self) -> Iterator[tuple[int, int, Pixel]]:
        """Yield (x, y, pixel) in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, self.get_pixel(x, y)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Raster):
            return NotImplemented
        return self._data.shape == other._data.shape and bool(np.array_equal(self._data, other._data))

    def __repr__(self) -> str:
        return f"Raster(width={self.width}, height={self.height})"
