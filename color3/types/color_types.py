from __future__ import annotations
from typing import Sequence, Tuple, Union
from numpy import ndarray

Scalar = int | float
# OpenCV Scalar as handed around by cv2: a 4-tuple (R, G, B, A) of floats
CVScalar = Tuple[float, float, float, float]
ScalarLike = Union[CVScalar, Sequence[Scalar], ndarray]
RGBBytes = Tuple[int, int, int]
