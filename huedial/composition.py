"""Compositor-facing record for the hue dial.

The rendering layer owns buffers and geometry; this record only carries
the values it needs from the color core, kept consistent: whenever the hue
changes, the max-chroma color is recomputed.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace

from huedial import defaults
from huedial.colorspace import find_max_chroma_color
from huedial.types import LinearRGBColor

logger = logging.getLogger(__name__)


def normalize_hue(hue: float) -> float:
    """Wrap a hue in degrees into [0, 360)."""
    reduced = math.fmod(hue, 360.0)
    if reduced < 0.0:
        reduced += 360.0
    # tiny negative inputs round up to exactly 360
    return 0.0 if reduced >= 360.0 else reduced


@dataclass(frozen=True)
class Region:
    """Rectangle in grid units."""
    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0


@dataclass(frozen=True)
class CompositionData:
    """Hue-dial state shared with the renderer.

    Attributes:
        grid_size: Layout grid (columns, rows)
        jc_region: Region of the lightness/chroma plane
        gradient_region: Region of the hue gradient
        max_c_region: Region of the max-chroma swatch
        hue: Current hue in degrees, [0, 360)
        max_c_color: Linear Display P3 max-chroma color at hue
    """
    grid_size: tuple[int, int] = defaults.DEFAULT_GRID_SIZE
    jc_region: Region = field(default_factory=lambda: Region(*defaults.DEFAULT_JC_REGION))
    gradient_region: Region = field(default_factory=Region)
    max_c_region: Region = field(default_factory=Region)
    hue: float = defaults.DEFAULT_HUE
    max_c_color: LinearRGBColor = LinearRGBColor(0.0, 0.0, 0.0)

    @classmethod
    def initial(cls) -> CompositionData:
        """Default record with max_c_color computed for the default hue."""
        return cls(max_c_color=find_max_chroma_color(defaults.DEFAULT_HUE))

    def with_hue(self, hue: float) -> CompositionData:
        """Record at a new hue, or self if the normalized hue is unchanged."""
        normalized = normalize_hue(hue)
        if normalized == self.hue:
            return self

        color = find_max_chroma_color(normalized)
        logger.debug("Hue %.4f -> max chroma %s", normalized, tuple(color))
        return replace(self, hue=normalized, max_c_color=color)
