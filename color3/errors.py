"""Exceptions and warnings raised by color3."""

RANGE_MESSAGE = "Values cannot be out of range 0 to 255 (inclusive)."


class ChannelRangeError(ValueError):
    """A channel value fell outside ``[0, 255]``."""

    def __init__(self, channel: str, value: float) -> None:
        self.channel = channel
        self.value = value
        super().__init__(f"{channel}={value!r}: {RANGE_MESSAGE}")


class SectorWarning(RuntimeWarning):
    """HSV hue landed outside the six hexagon sectors; the color fell through to black."""
