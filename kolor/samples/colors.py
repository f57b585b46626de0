import numpy as np
# RED
RED_FLOAT_RGB = np.array([1.0, 0.0, 0.0])
RED_INT_RGB = np.array([255, 0, 0], dtype=np.uint8)
RED_FLOAT_HSV = np.array([0.0, 1.0, 1.0])

# GREEN
GREEN_FLOAT_RGB = np.array([0.0, 1.0, 0.0])
GREEN_INT_RGB = np.array([0, 255, 0], dtype=np.uint8)
GREEN_FLOAT_HSV = np.array([120.0, 1.0, 1.0])

# BLUE
BLUE_FLOAT_RGB = np.array([0.0, 0.0, 1.0])
BLUE_INT_RGB = np.array([0, 0, 255], dtype=np.uint8)
BLUE_FLOAT_HSV = np.array([240.0, 1.0, 1.0])

# YELLOW
YELLOW_FLOAT_RGB = np.array([1.0, 1.0, 0.0])
YELLOW_INT_RGB = np.array([255, 255, 0], dtype=np.uint8)
YELLOW_FLOAT_HSV = np.array([60.0, 1.0, 1.0])

# MAGENTA
MAGENTA_FLOAT_RGB = np.array([1.0, 0.0, 1.0])
MAGENTA_INT_RGB = np.array([255, 0, 255], dtype=np.uint8)
MAGENTA_FLOAT_HSV = np.array([300.0, 1.0, 1.0])

# CYAN
CYAN_FLOAT_RGB = np.array([0.0, 1.0, 1.0])
CYAN_INT_RGB = np.array([0, 255, 255], dtype=np.uint8)
CYAN_FLOAT_HSV = np.array([180.0, 1.0, 1.0])

# WHITE
WHITE_FLOAT_RGB = np.array([1.0, 1.0, 1.0])
WHITE_INT_RGB = np.array([255, 255, 255], dtype=np.uint8)
WHITE_FLOAT_HSV = np.array([0.0, 0.0, 1.0])

# BLACK
BLACK_FLOAT_RGB = np.array([0.0, 0.0, 0.0])
BLACK_INT_RGB = np.array([0, 0, 0], dtype=np.uint8)
BLACK_FLOAT_HSV = np.array([0.0, 0.0, 0.0])

# ORANGE
ORANGE_FLOAT_RGB = np.array([1.0, 0.5, 0.0])
ORANGE_INT_RGB = np.array([255, 128, 0], dtype=np.uint8)
ORANGE_FLOAT_HSV = np.array([30.0, 1.0, 1.0])

# GREY, hue is undefined and reported as 0
GREY_FLOAT_RGB = np.array([0.5, 0.5, 0.5])
GREY_INT_RGB = np.array([128, 128, 128], dtype=np.uint8)
GREY_FLOAT_HSV = np.array([0.0, 0.0, 0.5])

# NAVY-ish, value below 1
DARK_BLUE_FLOAT_RGB = np.array([0.0, 0.25, 0.5])
DARK_BLUE_INT_RGB = np.array([0, 64, 128], dtype=np.uint8)
DARK_BLUE_FLOAT_HSV = np.array([210.0, 1.0, 0.5])

# ROSE, red is max with g < b so the raw hue ratio is negative
ROSE_FLOAT_RGB = np.array([1.0, 0.0, 0.5])
ROSE_INT_RGB = np.array([255, 0, 128], dtype=np.uint8)
ROSE_FLOAT_HSV = np.array([330.0, 1.0, 1.0])

# (float rgb, float hsv, int rgb)
_SAMPLES = [
    (RED_FLOAT_RGB, RED_FLOAT_HSV, RED_INT_RGB),
    (GREEN_FLOAT_RGB, GREEN_FLOAT_HSV, GREEN_INT_RGB),
    (BLUE_FLOAT_RGB, BLUE_FLOAT_HSV, BLUE_INT_RGB),
    (YELLOW_FLOAT_RGB, YELLOW_FLOAT_HSV, YELLOW_INT_RGB),
    (MAGENTA_FLOAT_RGB, MAGENTA_FLOAT_HSV, MAGENTA_INT_RGB),
    (CYAN_FLOAT_RGB, CYAN_FLOAT_HSV, CYAN_INT_RGB),
    (WHITE_FLOAT_RGB, WHITE_FLOAT_HSV, WHITE_INT_RGB),
    (BLACK_FLOAT_RGB, BLACK_FLOAT_HSV, BLACK_INT_RGB),
    (ORANGE_FLOAT_RGB, ORANGE_FLOAT_HSV, ORANGE_INT_RGB),
    (GREY_FLOAT_RGB, GREY_FLOAT_HSV, GREY_INT_RGB),
    (DARK_BLUE_FLOAT_RGB, DARK_BLUE_FLOAT_HSV, DARK_BLUE_INT_RGB),
    (ROSE_FLOAT_RGB, ROSE_FLOAT_HSV, ROSE_INT_RGB),
]

samples_rgb_hsv = {tuple(rgb.tolist()): tuple(hsv.tolist()) for rgb, hsv, _ in _SAMPLES}
samples_rgb_int = {tuple(rgb.tolist()): tuple(rgb_int.tolist()) for rgb, _, rgb_int in _SAMPLES}
