"""Transform engine: pure functions from Raster to Raster.

``apply_transform`` dispatches by ``TransformName`` so transform chains can
be described as data (CLI, pipeline runner).
"""

from __future__ import annotations

import logging
from typing import Optional

from pixelsmith.core.raster import Raster
from pixelsmith.core.types import TransformName, TransformParams
from pixelsmith.errors import ValidationError
from pixelsmith.overlays import Overlays
from pixelsmith.transforms.adjust import set_hue, set_lightness, set_saturation
from pixelsmith.transforms.bw import (
    apply_threshold,
    compute_luminance,
    median_luminance,
    stylized_bw,
)
from pixelsmith.transforms.color import grayscale, invert, sepia
from pixelsmith.transforms.geometry import rotate_clockwise
from pixelsmith.transforms.instagram import blend_overlay, instagram, sample_nearest, warm

logger = logging.getLogger(__name__)

__all__ = [
    "apply_threshold",
    "apply_transform",
    "blend_overlay",
    "compute_luminance",
    "grayscale",
    "instagram",
    "invert",
    "median_luminance",
    "resolve_transform_name",
    "rotate_clockwise",
    "sample_nearest",
    "sepia",
    "set_hue",
    "set_lightness",
    "set_saturation",
    "stylized_bw",
    "warm",
]

_SIMPLE_TRANSFORMS = {
    TransformName.GRAYSCALE: grayscale,
    TransformName.INVERT: invert,
    TransformName.SEPIA: sepia,
    TransformName.ROTATE: rotate_clockwise,
}


def _require(value: Optional[float], name: TransformName) -> float:
    if value is None:
        raise ValidationError(f"Transform '{name.value}' requires a {name.value} value")
    return value


def resolve_transform_name(name: TransformName | str) -> TransformName:
    """Parse a transform name, raising ValidationError if unknown."""
    try:
        return TransformName(name)
    except ValueError:
        valid = ", ".join(t.value for t in TransformName)
        raise ValidationError(f"Unknown transform '{name}'. Valid: {valid}") from None


def apply_transform(
    image: Raster,
    name: TransformName | str,
    params: Optional[TransformParams] = None,
    overlays: Optional[Overlays] = None,
) -> Raster:
    """Apply a single transform by name.

    Args:
        image: Input raster.
        name: Transform to apply.
        params: Values for hue/saturation/lightness and the B/W median mode.
        overlays: Halo/grain for the Instagram filter (procedural if None).

    Returns:
        Transformed raster.

    Raises:
        ValidationError: Unknown transform or missing parameter.
    """
    name = resolve_transform_name(name)
    params = params or TransformParams()
    logger.debug("Applying %s to %dx%d image", name.value, image.width, image.height)

    if name in _SIMPLE_TRANSFORMS:
        return _SIMPLE_TRANSFORMS[name](image)
    if name is TransformName.BW:
        return stylized_bw(image, params.median_mode)
    if name is TransformName.INSTAGRAM:
        return instagram(image, overlays)
    if name is TransformName.HUE:
        return set_hue(image, _require(params.hue, name))
    if name is TransformName.SATURATION:
        return set_saturation(image, _require(params.saturation, name))
    return set_lightness(image, _require(params.lightness, name))
