"""Jzazbz color transforms and the Display P3 max-chroma solver.

This module provides:
- Jzazbz <-> LMS <-> linear Display P3 conversions
- The Display P3 gamut boundary table (corners tagged by Jzazbz hue)
- Max-chroma search: hue -> most saturated reproducible color
- Backend-agnostic: works with floats, numpy arrays or torch tensors

Example:
    from huedial.colorspace import find_max_chroma_color, linear_to_display_p3

    rgb = find_max_chroma_color(42.79)  # linear Display P3, near pure red
    encoded = [linear_to_display_p3(c) for c in rgb]
"""

from .jzazbz import (
    from_lms,
    to_lms,
    lms_to_linear_display_p3,
    jzazbz_to_linear_display_p3,
    jzazbz_hue,
    jzazbz_to_jzczhz,
    linear_to_display_p3,
    display_p3_to_linear,
)

from .gamut import (
    GamutCorner,
    Edge,
    P3_CORNERS,
    bracket_edge,
    bracket_edge_indices,
)

from .max_chroma import (
    find_max_chroma_color,
    find_max_chroma_jzazbz,
    max_chroma_colors,
    hue_dial_colors,
)

__all__ = [
    # Jzazbz conversions
    'from_lms',
    'to_lms',
    'lms_to_linear_display_p3',
    'jzazbz_to_linear_display_p3',
    'jzazbz_hue',
    'jzazbz_to_jzczhz',
    'linear_to_display_p3',
    'display_p3_to_linear',
    # Gamut boundary
    'GamutCorner',
    'Edge',
    'P3_CORNERS',
    'bracket_edge',
    'bracket_edge_indices',
    # Max chroma
    'find_max_chroma_color',
    'find_max_chroma_jzazbz',
    'max_chroma_colors',
    'hue_dial_colors',
]
