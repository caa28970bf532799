"""Pipeline runner: load an image, apply a transform chain, save the result.

This is the single entry point for the CLI.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

from pixelsmith.core.raster import Raster
from pixelsmith.core.types import (
    PipelineConfig,
    PipelineResult,
    ProgressCallback,
    TransformName,
)
from pixelsmith.errors import PipelineError
from pixelsmith.io.image import load_raster, save_raster
from pixelsmith.overlays import Overlays, load_overlays
from pixelsmith.transforms import apply_transform, resolve_transform_name

logger = logging.getLogger(__name__)


def _emit_progress(
    callback: Optional[ProgressCallback],
    stage: str,
    fraction: float,
    message: str = "",
) -> None:
    """Emit progress update if callback is provided."""
    if callback is not None:
        callback(stage, fraction, message)


def apply_chain(
    image: Raster,
    config: PipelineConfig,
    overlays: Optional[Overlays] = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> Raster:
    """Apply ``config.transforms`` in order to an in-memory image."""
    names = [resolve_transform_name(t) for t in config.transforms]
    total = len(names)
    for i, name in enumerate(names):
        _emit_progress(progress_callback, "transform", i / total, name.value)
        image = apply_transform(image, name, config.params, overlays)
    _emit_progress(progress_callback, "transform", 1.0, "Transforms applied")
    return image


def run_pipeline(
    config: PipelineConfig,
    progress_callback: Optional[ProgressCallback] = None,
) -> PipelineResult:
    """Run load -> transforms -> save.

    Stages:
        1. load: decode the input image (and overlays if needed)
        2. transform: apply each transform in order
        3. save: encode the result

    Args:
        config: Full pipeline configuration.
        progress_callback: (stage_name, fraction, message) callback.

    Returns:
        PipelineResult with output dimensions and timing diagnostics.

    Raises:
        PipelineError: Missing paths or empty transform chain.
        DecodeError / EncodeError: From the I/O layer, unchanged.
    """
    if config.input_path is None or config.output_path is None:
        raise PipelineError("Input and output paths are required")
    if not config.transforms:
        raise PipelineError("At least one transform is required")

    names = [resolve_transform_name(t) for t in config.transforms]

    t_start = time.perf_counter()
    diagnostics = {}

    # ---------------------------------------------------------------
    # Stage 1: Load
    # ---------------------------------------------------------------
    _emit_progress(progress_callback, "load", 0.0, "Loading image...")
    t0 = time.perf_counter()
    image = load_raster(config.input_path)

    overlays = None
    if TransformName.INSTAGRAM in names:
        overlays = load_overlays(config.halo_path, config.grain_path)

    diagnostics["load_time"] = time.perf_counter() - t0
    diagnostics["input_size"] = f"{image.width}x{image.height}"
    _emit_progress(progress_callback, "load", 1.0, "Image loaded")
    logger.info("Loaded %s (%dx%d)", config.input_path, image.width, image.height)

    # ---------------------------------------------------------------
    # Stage 2: Transform
    # ---------------------------------------------------------------
    t0 = time.perf_counter()
    image = apply_chain(image, config, overlays, progress_callback)
    diagnostics["transform_time"] = time.perf_counter() - t0
    logger.info(
        "Applied %s in %.2fs",
        ", ".join(name.value for name in names),
        diagnostics["transform_time"],
    )

    # ---------------------------------------------------------------
    # Stage 3: Save
    # ---------------------------------------------------------------
    _emit_progress(progress_callback, "save", 0.0, "Writing image...")
    t0 = time.perf_counter()
    output_path = save_raster(image, config.output_path)
    diagnostics["save_time"] = time.perf_counter() - t0
    _emit_progress(progress_callback, "save", 1.0, "Saved")

    diagnostics["output_size"] = f"{image.width}x{image.height}"
    diagnostics["total_time"] = time.perf_counter() - t_start

    return PipelineResult(
        width=image.width,
        height=image.height,
        applied=names,
        diagnostics=diagnostics,
        output_path=output_path,
    )
