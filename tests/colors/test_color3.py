import math

import numpy as np
import pytest

from color3 import Color3, ChannelRangeError, SectorWarning, scalar_to_color3
from color3.samples.colors import samples_hsv_rgb, YELLOW_HSV, GREEN_HSV


def test_default_is_black():
    color = Color3()
    assert (color.R, color.G, color.B) == (0.0, 0.0, 0.0)


@pytest.mark.parametrize("r, g, b", [
    (0, 0, 0),
    (255, 255, 255),
    (12.5, 0.25, 254.75),
    (1, 128, 200),
])
def test_from_rgb_keeps_values(r, g, b):
    color = Color3.from_rgb(r, g, b)
    assert color.R == r
    assert color.G == g
    assert color.B == b
    assert isinstance(color.R, float)


def test_from_rgb_equals_constructor():
    assert Color3.from_rgb(1, 2, 3) == Color3(1, 2, 3)


@pytest.mark.parametrize("channels, bad", [
    ((-1, 0, 0), "R"),
    ((256, 0, 0), "R"),
    ((0, -0.001, 0), "G"),
    ((0, 0, 255.5), "B"),
    ((0, 0, math.nan), "B"),
    ((math.inf, 0, 0), "R"),
    ((10 ** 400, 0, 0), "R"),
    ((0, 0, -(10 ** 400)), "B"),
])
def test_out_of_range_raises(channels, bad):
    with pytest.raises(ChannelRangeError) as info:
        Color3.from_rgb(*channels)
    assert info.value.channel == bad
    assert "out of range 0 to 255" in str(info.value)


def test_range_error_is_value_error():
    with pytest.raises(ValueError):
        Color3(300, 0, 0)


def test_non_numeric_channel_raises_type_error():
    with pytest.raises(TypeError):
        Color3(None, 0, 0)


def test_assignment_is_range_checked():
    color = Color3(10, 20, 30)
    color.G = 200
    assert color.G == 200.0
    with pytest.raises(ChannelRangeError):
        color.B = 256
    assert color.B == 30.0


def test_no_extra_attributes():
    color = Color3()
    with pytest.raises(AttributeError):
        color.alpha = 1.0


def test_unhashable():
    with pytest.raises(TypeError):
        hash(Color3())


def test_str_and_repr():
    color = Color3(1.0, 2.0, 3.0)
    assert str(color) == "Color3(1.0, 2.0, 3.0)"
    assert repr(color) == "Color3(1.0, 2.0, 3.0)"
    assert str(Color3(1, 2, 3)) == "Color3(1.0, 2.0, 3.0)"


def test_iteration():
    color = Color3(4, 5, 6)
    assert tuple(color) == (4.0, 5.0, 6.0)
    assert color.as_tuple() == (4.0, 5.0, 6.0)


def test_to_scalar_default_alpha():
    assert Color3(1, 2, 3).to_scalar() == (1.0, 2.0, 3.0, 0.0)


def test_to_scalar_alpha():
    scalar = Color3(1, 2, 3).to_scalar(255)
    assert scalar == (1.0, 2.0, 3.0, 255.0)
    assert all(isinstance(v, float) for v in scalar)


@pytest.mark.parametrize("alpha", [0.0, 1.0, 128, 255.0, -7.5])
def test_scalar_round_trip(alpha):
    color = Color3(17.5, 200, 3)
    assert Color3.from_scalar(color.to_scalar(alpha)) == color
    assert scalar_to_color3(color.to_scalar(alpha)) == color


def test_from_scalar_sequences():
    expected = Color3(10, 20, 30)
    assert Color3.from_scalar((10, 20, 30, 40)) == expected
    assert Color3.from_scalar([10.0, 20.0, 30.0, 0.0]) == expected
    assert Color3.from_scalar(np.array([10, 20, 30, 40], dtype=np.uint8)) == expected
    assert Color3.from_scalar((10, 20, 30)) == expected


def test_from_scalar_range_checked():
    with pytest.raises(ChannelRangeError):
        Color3.from_scalar((0, 0, 300, 0))
    # alpha is not a channel
    assert Color3.from_scalar((0, 0, 0, 300)) == Color3()


@pytest.mark.parametrize("bad", [(1, 2), (1, 2, 3, 4, 5), "rgba", 5, None, np.zeros((2, 4))])
def test_from_scalar_rejects_non_scalars(bad):
    with pytest.raises(ValueError):
        Color3.from_scalar(bad)


def test_from_hsv_samples():
    for (h, s, v), rgb in samples_hsv_rgb.items():
        assert Color3.from_hsv(h, s, v) == Color3(*rgb)


def test_from_hsv_white_and_red():
    assert Color3.from_hsv(0, 0, 1) == Color3(255, 255, 255)
    assert Color3.from_hsv(0, 1, 1) == Color3(255, 0, 0)


def test_from_hsv_sector_boundaries():
    yellow = Color3.from_hsv(*YELLOW_HSV)
    assert abs(yellow.R - 255) <= 1
    assert abs(yellow.G - 255) <= 1
    assert yellow.B <= 1

    green = Color3.from_hsv(*GREEN_HSV)
    assert green.R <= 1
    assert abs(green.G - 255) <= 1
    assert green.B <= 1


def test_from_hsv_channels_are_integral():
    color = Color3.from_hsv(0.1234, 0.56, 0.78)
    assert all(float(c).is_integer() for c in color)


def test_from_hsv_out_of_range_value_is_masked():
    # 2 * 255 + 0.5 truncates to 510, which the ARGB round trip folds into a byte
    color = Color3.from_hsv(0, 0, 2)
    assert all(0 <= c <= 255 for c in color)


def test_from_hsv_sector_fallthrough():
    with pytest.warns(SectorWarning):
        color = Color3.from_hsv(-1e-9, 1, 1)
    assert color == Color3(0, 0, 0)


def test_from_hsv_wrap_sector():
    assert Color3.from_hsv(-1e-9, 1, 1, wrap_sector=True) == Color3(255, 0, 0)


def test_from_scalar_oversized_int_is_range_error():
    with pytest.raises(ChannelRangeError):
        Color3.from_scalar((0, 10 ** 400, 0, 0))


def test_from_scalar_rejects_complex():
    with pytest.raises(ValueError):
        Color3.from_scalar(np.array([1j, 0, 0, 0]))
