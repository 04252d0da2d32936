"""
color3 Conversions
==================

HSV to 8-bit RGB, scalar and vectorized, plus the 32-bit ARGB packing the
conversion round-trips through.

Conversion Functions
-------------------
HSV → RGB:
    hsv_to_rgb(h, s, v, wrap_sector=False)
        Scalar conversion, returns (r, g, b) ints
    np_hsv_to_rgb(h, s, v, wrap_sector=False)
        Vectorized conversion, returns uint8 array (..., 3)

ARGB packing:
    pack_argb(r, g, b) / unpack_rgb(word)
    np_pack_argb(r, g, b) / np_unpack_rgb(word)

Hue Convention
--------------
Hue is a fraction of a full turn, not degrees: 0.5 is cyan. Only its
fractional part is used. Arithmetic is float32 throughout.

Examples
--------
>>> from color3.conversions import hsv_to_rgb, np_hsv_to_rgb
>>> hsv_to_rgb(0.0, 1.0, 1.0)
(255, 0, 0)
>>> import numpy as np
>>> np_hsv_to_rgb(np.array([0.0, 1 / 3]), 1.0, 1.0)
array([[255,   0,   0],
       [  0, 255,   0]], dtype=uint8)
"""

from .to_rgb import hsv_to_rgb, np_hsv_to_rgb, SECTOR_TABLE
from .packing import pack_argb, unpack_rgb, np_pack_argb, np_unpack_rgb

__all__ = [
    # HSV → RGB
    'hsv_to_rgb',
    'np_hsv_to_rgb',
    'SECTOR_TABLE',

    # Packing
    'pack_argb',
    'unpack_rgb',
    'np_pack_argb',
    'np_unpack_rgb',
]
