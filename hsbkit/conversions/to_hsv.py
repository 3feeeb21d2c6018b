"""RGB -> HSV and HSL -> HSV conversions.

All functions take and return unit values (0.0-1.0) except hue, which is
expressed in degrees [0, 360).
"""
import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple


def rgb_hue(r: float, g: float, b: float) -> float:
    """Hue angle in degrees shared by the HSV and HSL models."""
    mx = max(r, g, b)
    mn = min(r, g, b)
    delta = mx - mn
    if delta == 0:
        return 0.0
    if mx == r:
        h = ((g - b) / delta) % 6
    elif mx == g:
        h = (b - r) / delta + 2
    else:
        h = (r - g) / delta + 4
    return (h * 60.0) % 360.0


def np_rgb_hue(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized: hue angle in degrees shared by the HSV and HSL models."""
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)
    mx = np.maximum(np.maximum(r, g), b)
    mn = np.minimum(np.minimum(r, g), b)
    delta = mx - mn
    safe = np.where(delta == 0, 1.0, delta)

    h = np.where(
        mx == r,
        ((g - b) / safe) % 6,
        np.where(mx == g, (b - r) / safe + 2, (r - g) / safe + 4),
    )
    return np.where(delta == 0, 0.0, (h * 60.0) % 360.0)


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB to HSV.

    Args:
        r, g, b: Channels in [0, 1]

    Returns:
        (h, s, v) with h in [0, 360) and s, v in [0, 1]
    """
    v = max(r, g, b)
    delta = v - min(r, g, b)
    s = 0.0 if v == 0 else delta / v
    return rgb_hue(r, g, b), s, v


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized unit RGB to HSV. Returns an array with a trailing channel axis."""
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)
    v = np.maximum(np.maximum(r, g), b)
    delta = v - np.minimum(np.minimum(r, g), b)
    s = np.where(v == 0, 0.0, delta / np.where(v == 0, 1.0, v))
    return np.stack([np_rgb_hue(r, g, b), s, v], axis=-1)


def hsl_to_hsv(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """Convert HSL to HSV. Hue passes through unchanged."""
    v = l + s * min(l, 1 - l)
    sv = 0.0 if v == 0 else 2 * (1 - l / v)
    return h, sv, v


def np_hsl_to_hsv(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """Vectorized HSL to HSV."""
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)
    v = l + s * np.minimum(l, 1 - l)
    sv = np.where(v == 0, 0.0, 2 * (1 - l / np.where(v == 0, 1.0, v)))
    return np.stack([h, sv, v], axis=-1)
