"""
color3 Color Classes
====================

The :class:`Color3` value type: three float channels R, G, B in ``[0, 255]``.

Usage
-----
>>> from color3.colors import Color3, scalar_to_color3
>>>
>>> orange = Color3.from_rgb(255, 128, 0)
>>> print(orange)  # Color3(255.0, 128.0, 0.0)
>>>
>>> # HSV hue is a fraction of a turn
>>> yellow = Color3.from_hsv(1 / 6, 1.0, 1.0)
>>>
>>> # OpenCV Scalars are plain 4-tuples
>>> scalar = orange.to_scalar(255)  # (255.0, 128.0, 0.0, 255.0)
>>> scalar_to_color3(scalar) == orange  # True
>>> orange == (255, 128, 0, 17)  # True, alpha is ignored

Notes
-----
- Every channel assignment is range checked; out-of-range values raise
  ChannelRangeError (a ValueError)
- Equality accepts Color3 or a 3/4 component Scalar; anything else is unequal
- Instances are unhashable
"""

from .color3 import Color3, scalar_to_color3

__all__ = ['Color3', 'scalar_to_color3']
