from __future__ import annotations
from typing import Any, Iterator, Tuple

from ..conversions.to_rgb import hsv_to_rgb
from ..errors import ChannelRangeError
from ..types.channel_types import CHANNEL_MIN, CHANNEL_MAX, CHANNEL_NAMES, DEFAULT_ALPHA
from ..types.color_types import CVScalar, ScalarLike, Scalar
from ..utils import is_scalar_like, scalar_components


def _validate_channel(name: str, value: Scalar) -> float:
    try:
        value = float(value)
    except OverflowError:
        raise ChannelRangeError(name, value) from None
    # NaN fails the comparison as well
    if not CHANNEL_MIN <= value <= CHANNEL_MAX:
        raise ChannelRangeError(name, value)
    return value


class Color3:
    """
    An RGB color with three float channels in ``[0, 255]``.

    Channels can be reassigned, but every assignment goes through the same
    range check as the constructor.

    >>> Color3.from_rgb(255, 128, 0)
    Color3(255.0, 128.0, 0.0)
    >>> Color3.from_hsv(0.0, 1.0, 1.0).to_scalar(255)
    (255.0, 0.0, 0.0, 255.0)
    """
    __slots__ = CHANNEL_NAMES

    # let numpy hand `array == color` back to __eq__ instead of broadcasting
    __array_ufunc__ = None

    R: float
    G: float
    B: float

    def __init__(self, R: Scalar = 0.0, G: Scalar = 0.0, B: Scalar = 0.0) -> None:
        self.R = R
        self.G = G
        self.B = B

    def __setattr__(self, name: str, value: Any) -> None:
        if name in CHANNEL_NAMES:
            value = _validate_channel(name, value)
        super().__setattr__(name, value)

    # ------------------ FACTORIES ------------------
    @classmethod
    def from_rgb(cls, r: Scalar, g: Scalar, b: Scalar) -> Color3:
        """Same as ``Color3(r, g, b)``."""
        return cls(r, g, b)

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float, wrap_sector: bool = False) -> Color3:
        """
        Build a color from HSV.

        Args:
            h: Hue as a fraction of a turn (only the fractional part is used)
            s: Saturation in [0, 1]
            v: Value in [0, 1]
            wrap_sector: See :func:`color3.conversions.hsv_to_rgb`

        Returns:
            A Color3 with integral channel values.
        """
        r, g, b = hsv_to_rgb(h, s, v, wrap_sector=wrap_sector)
        return cls(float(r), float(g), float(b))

    @classmethod
    def from_scalar(cls, scalar: ScalarLike) -> Color3:
        """
        Build a color from an OpenCV Scalar.

        The first three components become R, G and B; alpha is discarded.
        """
        return cls(*scalar_components(scalar))

    # ------------------ CONVERSIONS ------------------
    def to_scalar(self, alpha: Scalar = DEFAULT_ALPHA) -> CVScalar:
        """Return ``(R, G, B, alpha)``, usable wherever cv2 takes a Scalar."""
        return (self.R, self.G, self.B, float(alpha))

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.R, self.G, self.B)

    def __iter__(self) -> Iterator[float]:
        yield self.R
        yield self.G
        yield self.B

    # ------------------ COMPARISON ------------------
    def __eq__(self, other: object) -> bool:
        if isinstance(other, Color3):
            return self.as_tuple() == other.as_tuple()
        if is_scalar_like(other):
            return self.as_tuple() == scalar_components(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Color3({self.R}, {self.G}, {self.B})"

    __str__ = __repr__


def scalar_to_color3(scalar: ScalarLike) -> Color3:
    """Convert an OpenCV Scalar to a Color3, dropping alpha."""
    return Color3.from_scalar(scalar)
