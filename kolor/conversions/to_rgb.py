import math
import numpy as np
from numpy import ndarray as NDArray
from ..types.color_types import Triple
from ..types.format_type import HUE_360, HUE_SECTOR
from ..utils import clamp01, cyclic_wrap_float


def hsv_to_rgb(h: float, s: float, v: float) -> Triple:
    """
    Convert HSV to RGB (0..1).

    Input:
        h: degrees, wrapped into [0, 360)
        s, v: clamped to [0, 1]

    Output:
        r, g, b ∈ [0, 1]
    """
    s = clamp01(s)
    v = clamp01(v)

    # a non-finite hue has no sector; treat it like grey
    if s == 0 or not math.isfinite(h):
        return v, v, v

    h = cyclic_wrap_float(h, 0.0, HUE_360) / HUE_SECTOR
    sector = math.floor(h)
    f = h - sector
    # wrapping a tiny negative hue can land exactly on 360
    sector %= 6
    p = v * (1 - s)
    q = v * (1 - s * f)
    t = v * (1 - s * (1 - f))

    if sector == 0:
        return v, t, p
    if sector == 1:
        return q, v, p
    if sector == 2:
        return p, v, t
    if sector == 3:
        return p, q, v
    if sector == 4:
        return t, p, v
    return v, p, q


def np_hsv_to_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized HSV to RGB (0..1).

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation [0,1]
        v: array-like or scalar, value [0,1]

    Returns:
        rgb: array of shape (..., 3)
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.clip(np.broadcast_to(s, out_shape), 0.0, 1.0)
    v = np.clip(np.broadcast_to(v, out_shape), 0.0, 1.0)

    finite = np.isfinite(h)
    h = np.mod(np.where(finite, h, 0.0), HUE_360) / HUE_SECTOR
    sector = np.floor(h)
    f = h - sector
    sector = sector.astype(int) % 6

    p = v * (1 - s)
    q = v * (1 - s * f)
    t = v * (1 - s * (1 - f))

    conditions = [sector == 0, sector == 1, sector == 2, sector == 3, sector == 4]
    r = np.select(conditions, [v, q, p, p, t], default=v)
    g = np.select(conditions, [t, v, v, q, p], default=p)
    b = np.select(conditions, [p, p, t, v, v], default=q)

    # achromatic or non-finite hue: skip the hue entirely
    grey = (s == 0) | ~finite
    r = np.where(grey, v, r)
    g = np.where(grey, v, g)
    b = np.where(grey, v, b)

    return np.stack([r, g, b], axis=-1)
