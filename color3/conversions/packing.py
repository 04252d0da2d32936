import numpy as np
from numpy import ndarray as NDArray

from ..types.channel_types import OPAQUE_ALPHA, BYTE_MASK, RED_SHIFT, GREEN_SHIFT, BLUE_SHIFT
from ..types.color_types import RGBBytes


def _to_int32(word: int) -> int:
    word &= 0xFFFFFFFF
    return word - (1 << 32) if word & 0x80000000 else word


def pack_argb(r: int, g: int, b: int) -> int:
    """
    Pack three channels into a signed 32-bit ARGB word with alpha forced to 0xFF.

    Channels are not masked before shifting, so values outside 0..255 bleed into
    their neighbours exactly as they would in 32-bit integer arithmetic.
    """
    return _to_int32(OPAQUE_ALPHA | (r << RED_SHIFT) | (g << GREEN_SHIFT) | (b << BLUE_SHIFT))


def unpack_rgb(word: int) -> RGBBytes:
    """Extract the red, green and blue bytes of an ARGB word."""
    return (
        (word >> RED_SHIFT) & BYTE_MASK,
        (word >> GREEN_SHIFT) & BYTE_MASK,
        (word >> BLUE_SHIFT) & BYTE_MASK,
    )


def np_pack_argb(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized: pack channel arrays into int32 ARGB words."""
    # only the low 32 bits survive, so drop the sign before shifting
    r = np.asarray(r, dtype=np.int64) & 0xFFFFFFFF
    g = np.asarray(g, dtype=np.int64) & 0xFFFFFFFF
    b = np.asarray(b, dtype=np.int64) & 0xFFFFFFFF

    word = OPAQUE_ALPHA | (r << RED_SHIFT) | (g << GREEN_SHIFT) | (b << BLUE_SHIFT)
    # wrap into the int32 range the same way _to_int32 does
    return np.asarray(word & 0xFFFFFFFF).astype(np.uint32).view(np.int32)


def np_unpack_rgb(word: NDArray) -> NDArray:
    """
    Vectorized: extract the RGB bytes of ARGB words.

    Returns:
        uint8 array of shape (..., 3)
    """
    word = np.asarray(word, dtype=np.int32)
    return np.stack([
        (word >> RED_SHIFT) & BYTE_MASK,
        (word >> GREEN_SHIFT) & BYTE_MASK,
        (word >> BLUE_SHIFT) & BYTE_MASK,
    ], axis=-1).astype(np.uint8)
