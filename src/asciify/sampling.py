import logging
import math

import numpy as np
from PIL import Image

from asciify.errors import PreconditionError

logger = logging.getLogger(__name__)

# Terminal cells are roughly twice as tall as they are wide. Squash rows by
# this factor so the rendering keeps the source's visual proportions.
ASPECT_CORRECTION = 0.5

# Modes Pillow uses for 16-bit single channel data (e.g. 16-bit PNG greyscale)
SIXTEEN_BIT_MODES = ("I", "I;16", "I;16B", "I;16L", "I;16N")
# Modes holding 16-bit range samples that to_rgb shifts down to 8 bits
WIDE_MODES = SIXTEEN_BIT_MODES + ("F",)


def compute_dimensions(
    source_width: int,
    source_height: int,
    max_width: int,
    aspect: float = ASPECT_CORRECTION,
) -> tuple[int, int]:
    """Return the (columns, rows) grid for rendering a source image at max_width columns.

    Rows are rounded half up and never drop below 1, so very wide images still
    produce one line of output.
    """
    if source_width <= 0 or source_height <= 0:
        raise PreconditionError(f"Source image must be non-empty, got {source_width}x{source_height}")
    if max_width < 1:
        raise PreconditionError(f"Width must be a positive integer, got {max_width}")
    if not math.isfinite(aspect) or aspect <= 0:
        raise PreconditionError(f"Aspect correction must be a positive number, got {aspect}")

    height = math.floor(max_width * (source_height / source_width) * aspect + 0.5)
    return max_width, max(1, height)


def prepare(image: Image.Image) -> Image.Image:
    """Bring a decoded image into a mode the resampler can filter without losing precision.

    16-bit data becomes a float ("F") image of the same 0-65535 samples so the
    filter runs on full precision values; everything else becomes 8-bit RGB.
    """
    if image.mode in SIXTEEN_BIT_MODES:
        return Image.fromarray(np.asarray(image, dtype=np.float32))
    return to_rgb(image)


def to_rgb(image: Image.Image) -> Image.Image:
    """Normalise an image to 8-bit RGB, returning RGB input unchanged.

    16-bit samples (including "F" images from prepare) are truncated to their
    high byte. Transparent pixels are composited over black, so a fully
    transparent pixel reads as (0, 0, 0) whatever colour it stores.
    """
    if image.mode == "RGB" and "transparency" not in image.info:
        return image

    if image.mode in WIDE_MODES:
        wide = np.clip(np.asarray(image, dtype=np.float64), 0, 0xFFFF).astype(np.int64)
        image = Image.fromarray((wide >> 8).astype(np.uint8))

    if image.mode in ("RGBA", "LA", "PA") or "transparency" in image.info:
        rgba = image.convert("RGBA")
        background = Image.new("RGBA", rgba.size, (0, 0, 0, 255))
        image = Image.alpha_composite(background, rgba)

    return image.convert("RGB")


def resample(image: Image.Image, width: int, height: int) -> Image.Image:
    """Scale to exactly width x height with a Lanczos filter."""
    logger.debug("Resampling %dx%d -> %dx%d", image.width, image.height, width, height)
    return image.resize((width, height), Image.LANCZOS)
