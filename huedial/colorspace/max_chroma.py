"""Max-chroma Display P3 color for a Jzazbz hue.

For a hue h, the gamut boundary table gives the edge whose corners bracket
h. Hue increases monotonically along every edge, so a fixed-count bisection
on the interpolation parameter converges on the boundary point with hue h.
The lower end of the final interval (the last point known not to overshoot
the target hue) is reported.

Hues are in degrees. Internally they are mapped to (-180, 180] and then to
radians, matching the table's tags.
"""

import logging
import math
from math import pi

import numpy as np

from huedial import defaults
from . import _backend as B
from ._backend import Array, PowerFunction
from .gamut import CORNER_VALUES, bracket_edge, bracket_edge_indices
from .jzazbz import from_lms, jzazbz_hue, lms_to_linear_display_p3
from ..types import JzazbzColor, LinearRGBColor, LMSColor

logger = logging.getLogger(__name__)


def _check_steps(steps: int) -> None:
    if steps < 1:
        raise ValueError(f"Bisection steps must be positive, got {steps}")


def _target_radians(hue: float) -> float:
    h = hue % 360.0
    target = h if h < 180.0 else h - 360.0
    return target * (pi / 180)


def _bisect_edge(
    lower: LMSColor,
    upper: LMSColor,
    target: Array,
    steps: int,
    power: PowerFunction,
) -> LMSColor:
    """Bisect the LMS segment lower->upper toward Jzazbz hue == target."""
    for _ in range(steps):
        mid = LMSColor(*(lo + 0.5 * (hi - lo) for lo, hi in zip(lower, upper)))
        test_hue = jzazbz_hue(from_lms(mid, power=power))
        inside = test_hue <= target
        lower = LMSColor(*(B.where(inside, m, lo) for m, lo in zip(mid, lower)))
        upper = LMSColor(*(B.where(inside, hi, m) for m, hi in zip(mid, upper)))
    return lower


def _solve_lms(hue: float, steps: int, power: PowerFunction) -> LMSColor:
    if not math.isfinite(hue):
        raise ValueError(f"Hue must be finite, got {hue}")
    _check_steps(steps)
    if not 0.0 <= hue < 360.0:
        logger.debug("Hue %r outside [0, 360), normalizing", hue)

    target = _target_radians(float(hue))
    edge = bracket_edge(target)
    return _bisect_edge(edge.lower.value, edge.upper.value, target, steps, power)


def find_max_chroma_color(
    hue: float,
    steps: int = defaults.DEFAULT_BISECTION_STEPS,
    power: PowerFunction = B.pow,
) -> LinearRGBColor:
    """Most saturated linear Display P3 color at a Jzazbz hue.

    Args:
        hue: Hue in degrees, nominally [0, 360); other values wrap.
        steps: Bisection iterations along the bracketing edge.
        power: Power-function strategy for the Jzazbz transform.

    Returns:
        LinearRGBColor with float components.
    """
    lms = _solve_lms(hue, steps, power)
    return LinearRGBColor(*(float(c) for c in lms_to_linear_display_p3(lms)))


def find_max_chroma_jzazbz(
    hue: float,
    steps: int = defaults.DEFAULT_BISECTION_STEPS,
    power: PowerFunction = B.pow,
) -> JzazbzColor:
    """Same search as find_max_chroma_color, reported in Jzazbz."""
    lms = _solve_lms(hue, steps, power)
    return JzazbzColor(*(float(c) for c in from_lms(lms, power=power)))


def max_chroma_colors(
    hues: Array,
    steps: int = defaults.DEFAULT_BISECTION_STEPS,
    power: PowerFunction = B.pow,
) -> Array:
    """Vectorized find_max_chroma_color.

    Args:
        hues: Hues in degrees (numpy array or torch tensor, any shape).

    Returns:
        Linear Display P3 array (..., 3) of the same backend as hues.
    """
    _check_steps(steps)

    h = np.asarray(B.to_numpy(hues), dtype=np.float64) % 360.0
    target = np.where(h < 180.0, h, h - 360.0) * (pi / 180)
    j = bracket_edge_indices(target)

    lower = LMSColor(*(B.from_numpy(CORNER_VALUES[j, k], hues) for k in range(3)))
    upper = LMSColor(*(B.from_numpy(CORNER_VALUES[j + 1, k], hues) for k in range(3)))
    target = B.from_numpy(target, hues)

    lms = _bisect_edge(lower, upper, target, steps, power)
    return B.stack(list(lms_to_linear_display_p3(lms)), axis=-1)


def hue_dial_colors(
    samples: int = defaults.DEFAULT_DIAL_SAMPLES,
    steps: int = defaults.DEFAULT_BISECTION_STEPS,
) -> np.ndarray:
    """Max-chroma colors at evenly spaced hues [0, 360), shape (samples, 3)."""
    if samples < 1:
        raise ValueError(f"Dial samples must be positive, got {samples}")
    hues = np.arange(samples, dtype=np.float64) * (360.0 / samples)
    return max_chroma_colors(hues, steps=steps)
