"""Preview rasters of the max-chroma hue wheel.

Pixels are Display P3 encoded (sRGB transfer curve) 8-bit values. No ICC
profile is attached; view them with a Display P3 profile assigned.
"""

import logging

import numpy as np
from PIL import Image

from huedial import defaults
from huedial.colorspace import linear_to_display_p3, max_chroma_colors

logger = logging.getLogger(__name__)


def encode_display_p3_u8(rgb: np.ndarray) -> np.ndarray:
    """Linear Display P3 (..., 3) -> encoded uint8, clipped to [0, 1] first."""
    encoded = linear_to_display_p3(np.clip(rgb, 0.0, 1.0))
    return np.round(encoded * 255.0).astype(np.uint8)


def render_hue_strip(
    width: int = defaults.DEFAULT_STRIP_SIZE[0],
    height: int = defaults.DEFAULT_STRIP_SIZE[1],
) -> Image.Image:
    """Horizontal strip, hue 0 at the left edge increasing to 360 at the right."""
    if width < 1 or height < 1:
        raise ValueError(f"Strip size must be positive, got {width}x{height}")

    hues = (np.arange(width, dtype=np.float64) + 0.5) * (360.0 / width)
    row = encode_display_p3_u8(max_chroma_colors(hues))
    pixels = np.broadcast_to(row[None, :, :], (height, width, 3))

    logger.debug("Rendered %dx%d hue strip", width, height)
    return Image.fromarray(np.ascontiguousarray(pixels))


def render_hue_dial(
    size: int = defaults.DEFAULT_DIAL_SIZE,
    ring_fraction: float = defaults.DEFAULT_DIAL_RING_FRACTION,
) -> Image.Image:
    """Square image with a max-chroma ring on black.

    Hue 0 points right and increases counterclockwise.
    """
    if size < 2:
        raise ValueError(f"Dial size must be at least 2, got {size}")
    if not 0.0 < ring_fraction <= 1.0:
        raise ValueError(f"Ring fraction must be in (0, 1], got {ring_fraction}")

    center = (size - 1) / 2.0
    outer = size / 2.0
    inner = outer * (1.0 - ring_fraction)

    y, x = np.mgrid[0:size, 0:size].astype(np.float64)
    dx = x - center
    dy = center - y
    radius = np.hypot(dx, dy)
    ring = (radius >= inner) & (radius <= outer)

    hues = np.degrees(np.arctan2(dy[ring], dx[ring])) % 360.0
    pixels = np.zeros((size, size, 3), dtype=np.uint8)
    pixels[ring] = encode_display_p3_u8(max_chroma_colors(hues))

    logger.debug("Rendered %dpx hue dial (%d ring pixels)", size, int(ring.sum()))
    return Image.fromarray(pixels)
