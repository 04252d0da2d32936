"""
color3 - RGB color value type with HSV and OpenCV Scalar interop
================================================================

Key Features
------------
- Color3: float R, G, B channels, range checked to [0, 255]
- HSV construction (hue as a fraction of a turn), float32 exact
- OpenCV Scalar interop: to_scalar / from_scalar / equality against 4-tuples
- Vectorized HSV conversion over numpy arrays

Quick Start
-----------
>>> from color3 import Color3
>>>
>>> red = Color3.from_hsv(0.0, 1.0, 1.0)
>>> red.to_scalar()
(255.0, 0.0, 0.0, 0.0)
>>> Color3.from_scalar((12, 34, 56, 255))
Color3(12.0, 34.0, 56.0)

Modules
-------
- colors: the Color3 class
- conversions: HSV to RGB and ARGB packing
- errors: ChannelRangeError, SectorWarning
"""

from .colors import Color3, scalar_to_color3
from .conversions import hsv_to_rgb, np_hsv_to_rgb, pack_argb, unpack_rgb
from .errors import ChannelRangeError, SectorWarning

__version__ = "1.0.0"

__all__ = [
    'Color3',
    'scalar_to_color3',
    'hsv_to_rgb',
    'np_hsv_to_rgb',
    'pack_argb',
    'unpack_rgb',
    'ChannelRangeError',
    'SectorWarning',
]
