"""Custom exception hierarchy for PixelSmith."""


class PixelSmithError(Exception):
    """Base exception for all PixelSmith errors."""


class ImageError(PixelSmithError):
    """Errors related to image loading, saving or geometry."""


class DecodeError(ImageError):
    """Image file is missing, unreadable or not a supported raster format."""


class EncodeError(ImageError):
    """Unsupported output format or failure while writing the image."""


class ImageDimensionError(ImageError):
    """Image dimensions are invalid or exceed limits."""


class DimensionMismatchError(ImageDimensionError):
    """Two arrays that must share a shape do not (overlay sampling, luminance maps)."""


class ValidationError(PixelSmithError):
    """Input validation failures."""


class PipelineError(PixelSmithError):
    """Errors during pipeline execution."""
