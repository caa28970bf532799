"""Core enums, configuration dataclasses and callback types for PixelSmith."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Optional


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class TransformName(str, Enum):
    """Transforms that can be applied by name."""
    GRAYSCALE = "grayscale"
    INVERT = "invert"
    SEPIA = "sepia"
    BW = "bw"
    ROTATE = "rotate"
    INSTAGRAM = "instagram"
    HUE = "hue"
    SATURATION = "saturation"
    LIGHTNESS = "lightness"


class MedianMode(str, Enum):
    """How the stylized B/W transform picks the median of an even count.

    CONVENTIONAL averages the two middle elements (n/2 - 1 and n/2).
    LEGACY averages n/2 and n/2 + 1, matching older behaviour.
    """
    CONVENTIONAL = "conventional"
    LEGACY = "legacy"


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------

@dataclass
class TransformParams:
    """Parameters consumed by parameterized transforms."""
    hue: Optional[float] = None
    saturation: Optional[float] = None
    lightness: Optional[float] = None
    median_mode: MedianMode = MedianMode.CONVENTIONAL


@dataclass
class PipelineConfig:
    """Configuration for a load -> transform chain -> save run."""
    # Input / output
    input_path: Optional[Path] = None
    output_path: Optional[Path] = None

    # Ordered transform chain
    transforms: list[TransformName] = field(default_factory=list)
    params: TransformParams = field(default_factory=TransformParams)

    # Instagram overlays (None = procedural default)
    halo_path: Optional[Path] = None
    grain_path: Optional[Path] = None


@dataclass
class PipelineResult:
    """Result from a pipeline run."""
    width: int
    height: int
    applied: list[TransformName] = field(default_factory=list)
    diagnostics: dict = field(default_factory=dict)
    output_path: Optional[Path] = None


# ---------------------------------------------------------------------------
# Progress callback type
# ---------------------------------------------------------------------------

ProgressCallback = Callable[[str, float, str], None]
"""Callback signature: (stage_name, fraction_complete, message)."""
