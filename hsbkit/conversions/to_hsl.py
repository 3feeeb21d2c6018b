import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from .to_hsv import rgb_hue, np_rgb_hue


def unit_rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB to HSL.

    Returns:
        (h, s, l) with h in [0, 360) and s, l in [0, 1]
    """
    mx = max(r, g, b)
    mn = min(r, g, b)
    delta = mx - mn
    l = (mx + mn) / 2
    if delta == 0:
        return 0.0, 0.0, l
    s = delta / (1 - abs(2 * l - 1))
    return rgb_hue(r, g, b), s, l


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)
    mx = np.maximum(np.maximum(r, g), b)
    mn = np.minimum(np.minimum(r, g), b)
    delta = mx - mn
    l = (mx + mn) / 2
    denom = 1 - np.abs(2 * l - 1)
    s = np.where(delta == 0, 0.0, delta / np.where(denom == 0, 1.0, denom))
    return np.stack([np_rgb_hue(r, g, b), s, l], axis=-1)


def hsv_to_hsl(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """Convert HSV to HSL. Hue passes through unchanged."""
    l = v * (1 - s / 2)
    if l == 0 or l == 1:
        return h, 0.0, l
    return h, (v - l) / min(l, 1 - l), l


def np_hsv_to_hsl(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)
    l = v * (1 - s / 2)
    denom = np.minimum(l, 1 - l)
    sl = np.where(denom == 0, 0.0, (v - l) / np.where(denom == 0, 1.0, denom))
    return np.stack([h, sl, l], axis=-1)
