"""Basic color3 usage examples.

Run directly with:
    python examples/color3_usage.py
"""
import warnings

import numpy as np

from color3 import Color3, ChannelRangeError, SectorWarning, np_hsv_to_rgb, scalar_to_color3


def demonstrate_colors() -> None:
    # Construct colors from RGB and HSV (hue is a fraction of a turn).
    accent = Color3.from_rgb(255, 128, 64)
    print("RGB:", accent)

    teal = Color3.from_hsv(0.5, 0.6, 0.8)
    print("HSV (0.5, 0.6, 0.8) -> RGB:", teal)

    try:
        Color3.from_rgb(256, 0, 0)
    except ChannelRangeError as exc:
        print("Rejected:", exc)


def demonstrate_scalars() -> None:
    # cv2 takes Scalars as plain 4-tuples, e.g. cv2.rectangle(img, p1, p2, color.to_scalar(255))
    accent = Color3.from_rgb(255, 128, 64)
    scalar = accent.to_scalar(255)
    print("As Scalar:", scalar)
    print("Back again:", scalar_to_color3(scalar))
    print("Equal ignoring alpha:", accent == (255, 128, 64, 0))


def demonstrate_arrays() -> None:
    # Vectorized HSV conversion over a hue wheel.
    hues = np.linspace(0.0, 1.0, 6, endpoint=False)
    print("Hue wheel:\n", np_hsv_to_rgb(hues, 1.0, 1.0))

    # A hue just below a full turn falls off the hexagon in float32.
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", SectorWarning)
        print("Fallthrough:", Color3.from_hsv(-1e-9, 1.0, 1.0))
    print("Warnings:", [str(w.message) for w in caught])
    print("Wrapped:", Color3.from_hsv(-1e-9, 1.0, 1.0, wrap_sector=True))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_scalars()
    demonstrate_arrays()
