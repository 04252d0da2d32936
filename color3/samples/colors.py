# Reference colors as (hue_turns, saturation, value) -> (r, g, b)
RED_HSV = (0.0, 1.0, 1.0)
RED_RGB = (255, 0, 0)

YELLOW_HSV = (1 / 6, 1.0, 1.0)
YELLOW_RGB = (255, 255, 0)

GREEN_HSV = (1 / 3, 1.0, 1.0)
GREEN_RGB = (0, 255, 0)

CYAN_HSV = (0.5, 1.0, 1.0)
CYAN_RGB = (0, 255, 255)

BLUE_HSV = (2 / 3, 1.0, 1.0)
BLUE_RGB = (0, 0, 255)

MAGENTA_HSV = (5 / 6, 1.0, 1.0)
MAGENTA_RGB = (255, 0, 255)

WHITE_HSV = (0.0, 0.0, 1.0)
WHITE_RGB = (255, 255, 255)

BLACK_HSV = (0.0, 0.0, 0.0)
BLACK_RGB = (0, 0, 0)

GREY_HSV = (0.0, 0.0, 0.5)
GREY_RGB = (128, 128, 128)

samples_hsv_rgb = {
    RED_HSV: RED_RGB,
    YELLOW_HSV: YELLOW_RGB,
    GREEN_HSV: GREEN_RGB,
    CYAN_HSV: CYAN_RGB,
    BLUE_HSV: BLUE_RGB,
    MAGENTA_HSV: MAGENTA_RGB,
    WHITE_HSV: WHITE_RGB,
    BLACK_HSV: BLACK_RGB,
    GREY_HSV: GREY_RGB,
}
