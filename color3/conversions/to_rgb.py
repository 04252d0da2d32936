import math
import warnings

import numpy as np
from numpy import ndarray as NDArray

from ..errors import SectorWarning
from ..types.channel_types import SECTOR_COUNT, INT32_MIN, INT32_MAX
from ..types.color_types import RGBBytes
from .packing import pack_argb, unpack_rgb, np_pack_argb, np_unpack_rgb

# All HSV arithmetic is single precision.
_ONE = np.float32(1.0)
_HALF = np.float32(0.5)
_BYTE = np.float32(255.0)
_SIX = np.float32(SECTOR_COUNT)

# Indices into (v, p, q, t) for the (r, g, b) of each hexagon sector
_V, _P, _Q, _T = 0, 1, 2, 3
SECTOR_TABLE = (
    (_V, _T, _P),
    (_Q, _V, _P),
    (_P, _V, _T),
    (_P, _Q, _V),
    (_T, _P, _V),
    (_V, _P, _Q),
)

_FALLTHROUGH_MESSAGE = (
    "hue reduced to sector {sector}, outside 0..5; color falls through to black. "
    "Pass wrap_sector=True to fold it back into the hexagon."
)


def _trunc_int(x: float) -> int:
    """float -> int, truncating toward zero; NaN gives 0 and out-of-range values saturate to int32."""
    x = float(x)
    if math.isnan(x):
        return 0
    if x >= INT32_MAX:
        return INT32_MAX
    if x <= INT32_MIN:
        return INT32_MIN
    return int(x)


def _np_trunc_int(x: NDArray) -> NDArray:
    """Vectorized _trunc_int."""
    x = np.asarray(x, dtype=np.float64)
    clipped = np.clip(x, float(INT32_MIN), float(INT32_MAX))
    return np.where(np.isnan(x), 0.0, clipped).astype(np.int64)


def _to_channel(x: np.float32) -> int:
    return _trunc_int(x * _BYTE + _HALF)


def hsv_to_rgb(h: float, s: float, v: float, wrap_sector: bool = False) -> RGBBytes:
    """
    Convert HSV to 8-bit RGB.

    Args:
        h: Hue as a fraction of a full turn. Only the fractional part is used,
            so 0.25 and 1.25 are the same hue.
        s: Saturation in [0, 1]
        v: Value in [0, 1]
        wrap_sector: Fold a sector index of 6 back to 0 instead of falling
            through to black.

    Returns:
        (r, g, b) ints in 0..255

    Notes:
        A hue a hair below an integer (e.g. -1e-9) rounds to a full turn in
        float32, which puts it in sector 6. Without ``wrap_sector`` that color
        comes out black and a SectorWarning is issued.
    """
    with np.errstate(invalid="ignore", over="ignore"):
        hue = np.float32(h)
        saturation = np.float32(s)
        value = np.float32(v)

        if saturation == 0:
            r = g = b = _to_channel(value)
        else:
            h6 = (hue - np.floor(hue)) * _SIX
            f = h6 - np.floor(h6)
            p = value * (_ONE - saturation)
            q = value * (_ONE - saturation * f)
            t = value * (_ONE - saturation * (_ONE - f))

            sector = _trunc_int(h6)
            if wrap_sector:
                sector %= SECTOR_COUNT

            if 0 <= sector < SECTOR_COUNT:
                components = (value, p, q, t)
                r, g, b = (_to_channel(components[i]) for i in SECTOR_TABLE[sector])
            else:
                warnings.warn(_FALLTHROUGH_MESSAGE.format(sector=sector), SectorWarning, stacklevel=2)
                r = g = b = 0

    return unpack_rgb(pack_argb(r, g, b))


def np_hsv_to_rgb(h: NDArray, s: NDArray, v: NDArray, wrap_sector: bool = False) -> NDArray:
    """
    Vectorized HSV to 8-bit RGB. Element-wise identical to :func:`hsv_to_rgb`.

    Args:
        h, s, v: array-like or scalar, broadcast against each other
        wrap_sector: see :func:`hsv_to_rgb`

    Returns:
        uint8 array of shape (..., 3)
    """
    h = np.asarray(h, dtype=np.float32)
    s = np.asarray(s, dtype=np.float32)
    v = np.asarray(v, dtype=np.float32)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    with np.errstate(invalid="ignore", over="ignore"):
        h6 = (h - np.floor(h)) * _SIX
        f = h6 - np.floor(h6)
        p = v * (_ONE - s)
        q = v * (_ONE - s * f)
        t = v * (_ONE - s * (_ONE - f))

        sector = _np_trunc_int(h6)
        if wrap_sector:
            sector = sector % SECTOR_COUNT

        achromatic = s == 0
        in_range = (sector >= 0) & (sector < SECTOR_COUNT)
        table = np.array(SECTOR_TABLE)
        picks = table[np.where(in_range, sector, 0)]

        grey = _np_trunc_int(v * _BYTE + _HALF)
        channels = []
        for c in range(3):
            chosen = np.choose(picks[..., c], [v, p, q, t])
            channel = np.where(in_range, _np_trunc_int(chosen * _BYTE + _HALF), 0)
            channels.append(np.where(achromatic, grey, channel))

    fallthrough = ~in_range & ~achromatic
    if np.any(fallthrough):
        sectors = np.unique(np.asarray(sector)[np.asarray(fallthrough)])
        warnings.warn(_FALLTHROUGH_MESSAGE.format(sector=", ".join(map(str, sectors))), SectorWarning, stacklevel=2)

    return np_unpack_rgb(np_pack_argb(*channels))
