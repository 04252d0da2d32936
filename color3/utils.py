from typing import Any, Tuple
from collections.abc import Sized

import numpy as np
from numpy import ndarray

from .types.color_types import Scalar, ScalarLike

SCALAR_LENGTHS = (3, 4)


def get_dimension(element: Any) -> int:
    if element is None:
        return 0
    if isinstance(element, (str, bytes)):
        return 0
    if isinstance(element, Sized):
        return len(element)
    return 1


def is_scalar_like(element: Any) -> bool:
    """True for an OpenCV-style Scalar: 3 or 4 numbers, alpha last."""
    if isinstance(element, ndarray):
        return element.ndim == 1 and element.shape[0] in SCALAR_LENGTHS \
            and (np.issubdtype(element.dtype, np.integer) or np.issubdtype(element.dtype, np.floating))
    if not isinstance(element, (tuple, list)):
        return False
    if get_dimension(element) not in SCALAR_LENGTHS:
        return False
    return all(isinstance(v, (int, float, np.integer, np.floating)) for v in element)


def scalar_components(scalar: ScalarLike) -> Tuple[Scalar, Scalar, Scalar]:
    """First three components of a Scalar, unconverted. Alpha, if present, is dropped."""
    if not is_scalar_like(scalar):
        raise ValueError(
            f"Expected a Scalar of {SCALAR_LENGTHS[0]} or {SCALAR_LENGTHS[1]} numbers, got {scalar!r}"
        )
    return scalar[0], scalar[1], scalar[2]
