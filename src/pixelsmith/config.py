"""Default configuration, constants, and limits for PixelSmith."""

# --- Security limits ---
MAX_IMAGE_DIMENSION = 16384  # 16K pixels per side
MAX_IMAGE_PIXELS = 100_000_000  # 100 megapixels

# --- Channel range ---
CHANNEL_MIN = 0
CHANNEL_MAX = 255

# --- Allowed file extensions ---
IMAGE_EXTENSIONS = frozenset({
    ".png", ".jpg", ".jpeg", ".bmp", ".tif", ".tiff", ".gif",
})

# --- Color model ---
HSL_EPSILON = 1e-5  # delta below this is achromatic

# Rows produce (r', g', b') from (r, g, b)
SEPIA_MATRIX = (
    (0.393, 0.769, 0.189),
    (0.349, 0.686, 0.168),
    (0.272, 0.534, 0.131),
)

LUMINANCE_WEIGHTS = (0.299, 0.587, 0.114)

# --- Instagram filter ---
WARM_RED_GAIN = 1.2
WARM_BLUE_DIVISOR = 1.5
HALO_BLEND = (0.65, 0.35)  # (base, halo)
GRAIN_BLEND = (0.95, 0.05)  # (base, grain)

# --- Default procedural overlays ---
DEFAULT_OVERLAY_SIZE = 512
DEFAULT_GRAIN_SEED = 1337
GRAIN_AMPLITUDE = 64  # +/- around mid-gray
HALO_FALLOFF = 1.6  # radial exponent of the vignette
