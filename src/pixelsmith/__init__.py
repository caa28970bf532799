"""PixelSmith: pixel-level image transforms."""

__version__ = "0.1.0"
