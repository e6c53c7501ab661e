"""Display P3 gamut boundary table in Jzazbz hue.

The outer edge of the Display P3 gamut is approximated by straight LMS
segments between its primaries and secondaries. Each corner carries the
Jzazbz hue (radians) at which it sits; corners are sorted by hue and the
table wraps: the first and last entries are the same color tagged -pi and
+pi, so every hue in [-pi, pi] has a bracketing edge.
"""

from dataclasses import dataclass
from math import pi

import numpy as np

from ._backend import Array
from ..types import LMSColor


@dataclass(frozen=True)
class GamutCorner:
    """An LMS corner color and its Jzazbz hue tag in radians."""
    value: LMSColor
    hue: float
    name: str


@dataclass(frozen=True)
class Edge:
    """Adjacent corners with lower.hue <= target <= upper.hue."""
    lower: GamutCorner
    upper: GamutCorner


_WRAP = LMSColor(0.5160874353648806, 0.6689515188836437, 0.6434469935994587)

P3_CORNERS: tuple[GamutCorner, ...] = (
    GamutCorner(_WRAP, -pi, 'wrap'),
    GamutCorner(LMSColor(0.55608700197488292, 0.73025516799564405, 0.89827700087481577),
                -2.7604618631505451, 'cyan'),
    GamutCorner(LMSColor(0.11431238432553269, 0.17519605565166838, 0.72826353378675235),
                -1.7688992503294745, 'blue'),
    GamutCorner(LMSColor(0.53001160774764933, 0.41718828256028762, 0.8027984639562511),
                -0.60623058828496412, 'magenta'),
    GamutCorner(LMSColor(0.41569922342211668, 0.24199222690861924, 0.074534930169498803),
                0.74690126898001996, 'red'),
    GamutCorner(LMSColor(0.85747384107146684, 0.79705133925259486, 0.24454839725756228),
                1.789331917784555, 'yellow'),
    GamutCorner(LMSColor(0.44177461764935022, 0.55505911234397565, 0.17001346708806347),
                2.3782967581439904, 'green'),
    GamutCorner(_WRAP, pi, 'wrap'),
)

# Sorted hue keys and (8, 3) corner values for vectorized lookups
HUE_TAGS = np.array([c.hue for c in P3_CORNERS])
CORNER_VALUES = np.array([tuple(c.value) for c in P3_CORNERS])

_LAST_EDGE = len(P3_CORNERS) - 2


def bracket_edge_indices(hue: Array) -> np.ndarray:
    """Index j of the edge (corners[j], corners[j+1]) bracketing each hue.

    A hue equal to a tag binds to the edge whose lower corner has that tag;
    hue == pi stays on the last edge.
    """
    j = np.searchsorted(HUE_TAGS, hue, side='right') - 1
    return np.clip(j, 0, _LAST_EDGE)


def bracket_edge(hue: float) -> Edge:
    """Edge of P3_CORNERS bracketing a hue in radians, [-pi, pi]."""
    j = int(bracket_edge_indices(hue))
    return Edge(P3_CORNERS[j], P3_CORNERS[j + 1])
