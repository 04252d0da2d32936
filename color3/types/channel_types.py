# No dependencies
CHANNEL_MIN = 0.0
CHANNEL_MAX = 255.0
CHANNEL_NAMES = ("R", "G", "B")

DEFAULT_ALPHA = 0.0

# HSV hexagon
SECTOR_COUNT = 6

# 32-bit ARGB word, alpha forced to 0xFF
OPAQUE_ALPHA = -0x1000000
BYTE_MASK = 0xFF
RED_SHIFT = 16
GREEN_SHIFT = 8
BLUE_SHIFT = 0

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
