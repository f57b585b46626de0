import numpy as np
from numpy import ndarray as NDArray
from ..types.color_types import Triple
from ..types.format_type import HUE_360, HUE_SECTOR


def rgb_to_hsv(r: float, g: float, b: float) -> Triple:
    """
    Convert RGB (0..1) to HSV.

    Output:
        h ∈ [0, 360)
        s ∈ [0, 1]
        v ∈ [0, 1]

    Grey inputs (max == min) have no hue and come back as (0, 0, v).
    """
    v = max(r, g, b)
    delta = v - min(r, g, b)

    if delta == 0:
        return 0.0, 0.0, v

    s = 0.0 if v == 0 else delta / v
    if r == v:
        h = (g - b) / delta          # yellow .. magenta
    elif g == v:
        h = 2 + (b - r) / delta      # cyan .. yellow
    else:
        h = 4 + (r - g) / delta      # magenta .. cyan

    # the ratio lies in [-1, 5) whichever branch produced it
    h = (h * HUE_SECTOR + HUE_360) % HUE_360
    return h, s, v


def np_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized RGB (0..1) to HSV.

    Args:
        r, g, b: array-like or scalar, broadcastable against each other

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,1], value [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    v = np.maximum.reduce([r, g, b])
    delta = v - np.minimum.reduce([r, g, b])
    chroma = delta != 0
    safe_delta = np.where(chroma, delta, 1.0)

    # Same branch priority as the scalar version: red, then green, then blue
    h = np.where(
        r == v,
        (g - b) / safe_delta,
        np.where(
            g == v,
            2 + (b - r) / safe_delta,
            4 + (r - g) / safe_delta,
        ),
    )
    h = np.where(chroma, (h * HUE_SECTOR + HUE_360) % HUE_360, 0.0)

    nonzero = v != 0
    s = np.where(chroma & nonzero, delta / np.where(nonzero, v, 1.0), 0.0)

    return np.stack([h, s, v], axis=-1)
