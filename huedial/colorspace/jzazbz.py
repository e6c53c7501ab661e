"""Jzazbz <-> LMS <-> linear Display P3 conversions.

Reference: Safdar et al., "Perceptually uniform color space for image
signals including high dynamic range and wide gamut", Optics Express 2017.

LMS here is scaled so that Display P3 white (1, 1, 1) is an LMS triple near
unity; the perceptual quantizer works on ``lms / 100``.

All functions accept floats, numpy arrays or torch tensors. The power
function used by the quantizer stages is injectable (``power=``) so the
host path and a GPU-style ``powr`` path share the same math.
"""

from math import pi

from . import _backend as B
from ._backend import Array, PowerFunction
from ..types import JzazbzColor, LinearRGBColor, LMSColor

# === Perceptual quantizer constants ===

C1 = 3424.0 / 4096.0
C2 = 2413.0 / 128.0
C3 = 2392.0 / 128.0
N = 2610.0 / 16384.0
P = 1.7 * 2523.0 / 32.0

# Jz lightness remap
D = -0.56
D0 = 1.6295499532821566e-11

# Decoder domain for quantizer-encoded LMS. MIN_LMSP is c1**p (the decoder's
# zero) rounded up; MAX_LMSP sits just under (c2/c3)**p, where it diverges.
MIN_LMSP = 3.70353e-11
MAX_LMSP = 3.227

# === Matrices (row-major) ===

# Quantizer-encoded LMS -> Iz, az, bz
_LMSP_TO_IZAZBZ = (
    (0.5, 0.5, 0.0),
    (3.524000, -4.066708, 0.542708),
    (0.199076, 1.096799, -1.295875),
)

# Iz, az, bz -> quantizer-encoded LMS
_IZAZBZ_TO_LMSP = (
    (1.0, 0.138605043271539, 0.0580473161561189),
    (1.0, -0.138605043271539, -0.0580473161561189),
    (1.0, -0.0960192420263189, -0.811891896056039),
)

# LMS -> linear Display P3 (XYZ D65 -> P3 composed with LMS -> XYZ)
_LMS_TO_P3 = (
    (4.4820606379518333, -3.6184317541411817, 0.16694496856407345),
    (-1.9532025238860451, 3.5217700975984596, -0.54063532522070301),
    (-0.0027453573623004834, -0.45182653146288487, 1.4822547119502889),
)


def _mat3(M, x: Array, y: Array, z: Array) -> tuple[Array, Array, Array]:
    return (
        M[0][0]*x + M[0][1]*y + M[0][2]*z,
        M[1][0]*x + M[1][1]*y + M[1][2]*z,
        M[2][0]*x + M[2][1]*y + M[2][2]*z,
    )


# === Core Conversions ===

def from_lms(lms: LMSColor, power: PowerFunction = B.pow) -> JzazbzColor:
    """LMS -> Jzazbz (forward transform)."""

    def encode(v):
        valp = power(B.maximum(v / 100.0, 0.0), N)
        fraction = (C1 + C2*valp) / (1.0 + C3*valp)
        return power(fraction, P)

    lp, mp, sp = encode(lms.l), encode(lms.m), encode(lms.s)
    Iz, az, bz = _mat3(_LMSP_TO_IZAZBZ, lp, mp, sp)

    Jz = ((1.0 + D) * Iz) / (1.0 + D*Iz) - D0
    return JzazbzColor(Jz, az, bz)


def to_lms(jab: JzazbzColor, power: PowerFunction = B.pow) -> LMSColor:
    """Jzazbz -> LMS (inverse transform).

    Encoded LMS is clamped to [MIN_LMSP, MAX_LMSP] before decoding, so
    out-of-domain inputs saturate instead of producing NaN.
    """
    Jzp = jab.jz + D0
    Iz = Jzp / (1.0 + D - D*Jzp)

    def decode(v):
        vc = B.clip(v, MIN_LMSP, MAX_LMSP)
        x = power(vc, 1.0 / P)
        ratio = B.maximum((C1 - x) / (C3*x - C2), 0.0)
        return 100.0 * power(ratio, 1.0 / N)

    lp, mp, sp = _mat3(_IZAZBZ_TO_LMSP, Iz, jab.az, jab.bz)
    return LMSColor(decode(lp), decode(mp), decode(sp))


def lms_to_linear_display_p3(lms: LMSColor) -> LinearRGBColor:
    """LMS -> linear Display P3. No clamping, no transfer function."""
    return LinearRGBColor(*_mat3(_LMS_TO_P3, lms.l, lms.m, lms.s))


def jzazbz_to_linear_display_p3(jab: JzazbzColor, power: PowerFunction = B.pow) -> LinearRGBColor:
    """Jzazbz -> linear Display P3 via LMS."""
    return lms_to_linear_display_p3(to_lms(jab, power=power))


# === Polar form and transfer function ===

def jzazbz_hue(jab: JzazbzColor) -> Array:
    """Hue angle atan2(bz, az) in radians, range (-pi, pi]."""
    return B.atan2(jab.bz, jab.az)


def jzazbz_to_jzczhz(jab: JzazbzColor) -> tuple[Array, Array, Array]:
    """Jzazbz -> (Jz, Cz, hz). Returns hz in degrees [0, 360)."""
    Cz = B.sqrt(jab.az**2 + jab.bz**2)
    hz = jzazbz_hue(jab) * (180 / pi)
    return jab.jz, Cz, hz % 360


def linear_to_display_p3(x: Array) -> Array:
    """Linear -> Display P3 encoded (sRGB transfer curve, per channel)."""
    threshold = 0.0031308
    low = x * 12.92
    high = 1.055 * B.pow(B.maximum(x, 1e-10), 1/2.4) - 0.055
    return B.where(x <= threshold, low, high)


def display_p3_to_linear(x: Array) -> Array:
    """Display P3 encoded -> linear (per channel)."""
    threshold = 0.04045
    low = x / 12.92
    high = B.pow(B.maximum((x + 0.055) / 1.055, 0.0), 2.4)
    return B.where(x <= threshold, low, high)
