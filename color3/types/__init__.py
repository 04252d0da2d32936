from .channel_types import CHANNEL_MIN, CHANNEL_MAX, CHANNEL_NAMES, DEFAULT_ALPHA, SECTOR_COUNT
from .color_types import Scalar, CVScalar, ScalarLike, RGBBytes
