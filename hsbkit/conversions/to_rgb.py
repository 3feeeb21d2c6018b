"""HSV -> RGB and HSL -> RGB conversions.

Both use the piecewise-linear channel functions of the hexcone models, which
vectorize without branching on the hue sector.
"""
import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple


def _hsv_channel(n: float, h: float, s: float, v: float) -> float:
    k = (n + h / 60.0) % 6
    return v - v * s * max(0.0, min(k, 4 - k, 1.0))


def _hsl_channel(n: float, h: float, s: float, l: float) -> float:
    k = (n + h / 30.0) % 12
    a = s * min(l, 1 - l)
    return l - a * max(-1.0, min(k - 3, 9 - k, 1.0))


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Convert HSV to unit RGB.

    Args:
        h: Hue in degrees; any value is wrapped onto [0, 360)
        s, v: Saturation and value in [0, 1]

    Returns:
        (r, g, b) in [0, 1]
    """
    h = h % 360.0
    return _hsv_channel(5, h, s, v), _hsv_channel(3, h, s, v), _hsv_channel(1, h, s, v)


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    h = np.asarray(h, dtype=float) % 360.0
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    def channel(n: int) -> NDArray:
        k = (n + h / 60.0) % 6
        return v - v * s * np.clip(np.minimum(k, 4 - k), 0.0, 1.0)

    return np.stack([channel(5), channel(3), channel(1)], axis=-1)


def hsl_to_unit_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """Convert HSL to unit RGB. Hue is wrapped onto [0, 360)."""
    h = h % 360.0
    return _hsl_channel(0, h, s, l), _hsl_channel(8, h, s, l), _hsl_channel(4, h, s, l)


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    h = np.asarray(h, dtype=float) % 360.0
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)
    a = s * np.minimum(l, 1 - l)

    def channel(n: int) -> NDArray:
        k = (n + h / 30.0) % 12
        return l - a * np.clip(np.minimum(k - 3, 9 - k), -1.0, 1.0)

    return np.stack([channel(0), channel(8), channel(4)], axis=-1)
