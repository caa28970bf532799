"""Image I/O: decode files into rasters and encode rasters to files.

Uses imageio v3 (Pillow plugin) for PNG, JPEG, BMP, TIFF and GIF.
Decoded images are reduced to 8-bit RGB: grayscale is expanded to three
channels, alpha is dropped, and 16-bit or float data is rescaled.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import imageio.v3 as iio
import numpy as np

from pixelsmith.config import IMAGE_EXTENSIONS
from pixelsmith.core.raster import Raster, validate_dimensions
from pixelsmith.errors import DecodeError, EncodeError

logger = logging.getLogger(__name__)


def validate_input_path(filepath: str | Path) -> Path:
    """Validate an input file path.

    Returns:
        Resolved Path object.

    Raises:
        DecodeError: If the file does not exist, is not a regular file,
            or has an unsupported extension.
    """
    path = Path(filepath).resolve()

    if not path.exists():
        raise DecodeError(f"Input file not found: {path}")

    if not path.is_file():
        raise DecodeError(f"Not a regular file: {path}")

    if path.suffix.lower() not in IMAGE_EXTENSIONS:
        raise DecodeError(
            f"Unsupported image format: {path.suffix}. "
            f"Supported: {', '.join(sorted(IMAGE_EXTENSIONS))}"
        )

    return path


def validate_output_path(filepath: str | Path) -> Path:
    """Validate an output file path.

    The output format is derived from the filename suffix.

    Raises:
        EncodeError: If the suffix is unsupported or the parent directory
            is missing or not writable.
    """
    path = Path(filepath).resolve()

    if path.suffix.lower() not in IMAGE_EXTENSIONS:
        raise EncodeError(
            f"Unsupported output format: {path.suffix or '(none)'}. "
            f"Supported: {', '.join(sorted(IMAGE_EXTENSIONS))}"
        )

    if not path.parent.exists():
        raise EncodeError(f"Output directory does not exist: {path.parent}")

    if not os.access(path.parent, os.W_OK):
        raise EncodeError(f"Cannot write to directory: {path.parent}")

    return path


def to_rgb8(raw: np.ndarray) -> np.ndarray:
    """Normalize a decoded array to (H, W, 3) uint8."""
    if raw.dtype == np.uint8:
        data = raw
    elif raw.dtype == np.uint16:
        data = (raw.astype(np.uint32) * 255 + 32767) // 65535
    elif np.issubdtype(raw.dtype, np.floating):
        data = np.rint(np.clip(np.nan_to_num(raw), 0.0, 1.0) * 255.0)
    elif np.issubdtype(raw.dtype, np.integer):
        dinfo = np.iinfo(raw.dtype)
        data = np.clip(raw, 0, None).astype(np.float64) / dinfo.max * 255.0
        data = np.rint(data)
    elif raw.dtype == np.bool_:
        data = raw.astype(np.uint8) * 255
    else:
        raise DecodeError(f"Unsupported pixel type: {raw.dtype}")

    if data.ndim == 2:
        data = np.repeat(data[:, :, np.newaxis], 3, axis=2)
    elif data.ndim == 3 and data.shape[2] == 1:
        data = np.repeat(data, 3, axis=2)
    elif data.ndim == 3 and data.shape[2] == 2:
        data = np.repeat(data[:, :, :1], 3, axis=2)  # gray + alpha
    elif data.ndim == 3 and data.shape[2] == 4:
        data = data[:, :, :3]  # Drop alpha
    elif data.ndim != 3 or data.shape[2] != 3:
        raise DecodeError(f"Unsupported image shape: {data.shape}")

    return np.asarray(data).astype(np.uint8)


def load_raster(filepath: str | Path) -> Raster:
    """Decode an image file into a Raster.

    Args:
        filepath: Path to image file.

    Returns:
        Raster holding the decoded pixels.

    Raises:
        DecodeError: If the file cannot be read or decoded.
    """
    path = validate_input_path(filepath)

    logger.debug("Loading with imageio: %s", path)
    try:
        # index=0 selects the first frame of animated formats
        raw = iio.imread(path, index=0)
    except (OSError, ValueError, SyntaxError) as exc:
        raise DecodeError(f"Failed to decode {path}: {exc}") from exc

    if raw.ndim < 2:
        raise DecodeError(f"Unsupported image shape: {raw.shape}")
    validate_dimensions(raw.shape[1], raw.shape[0])

    raster = Raster.from_array(to_rgb8(raw))
    logger.debug("Loaded %s (%dx%d, %s)", path.name, raster.width, raster.height, raw.dtype)
    return raster


def save_raster(raster: Raster, filepath: str | Path) -> Path:
    """Encode a raster to a file; the format follows the filename suffix.

    Returns:
        Resolved output path.

    Raises:
        EncodeError: On unsupported format or write failure.
    """
    path = validate_output_path(filepath)

    try:
        iio.imwrite(path, raster.to_array(), extension=path.suffix.lower())
    except (OSError, ValueError, KeyError, TypeError) as exc:
        raise EncodeError(f"Failed to write {path}: {exc}") from exc

    logger.info("Saved image: %s (%dx%d)", path, raster.width, raster.height)
    return path


def get_image_dimensions(filepath: str | Path) -> tuple[int, int]:
    """Get image dimensions without converting pixel data.

    Returns:
        (width, height) tuple.
    """
    path = validate_input_path(filepath)
    try:
        props = iio.improps(path, index=0)
    except (OSError, ValueError, SyntaxError) as exc:
        raise DecodeError(f"Failed to read {path}: {exc}") from exc
    return props.shape[1], props.shape[0]
