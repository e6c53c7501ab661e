"""Core color value types for huedial - backend-agnostic.

Components may be Python floats, numpy arrays or torch tensors; all
arrays in one color must broadcast against each other.
"""

from typing import Any, NamedTuple


class LMSColor(NamedTuple):
    """Cone-response coordinates (non-negative in valid ranges)."""
    l: Any
    m: Any
    s: Any


class JzazbzColor(NamedTuple):
    """Perceptual coordinates: lightness Jz and chroma axes az, bz."""
    jz: Any
    az: Any
    bz: Any


class LinearRGBColor(NamedTuple):
    """Linear-light Display P3 RGB (no transfer function applied)."""
    r: Any
    g: Any
    b: Any
