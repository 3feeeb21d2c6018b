"""Optional range policies for edited component values.

By default edited values pass through unchanged and are clamped when the
intermediate UnitHSVA is built. Passing one of the boundednumbers functions
re-ranges the value onto [0, 1] before composition; hue always wraps around
the color wheel.
"""
from typing import Any, Callable, Optional
import numpy as np
from boundednumbers.functions import clamp, bounce, cyclic_wrap_float

from .components import HSBComponent, ComponentLike, ComponentValue

OverflowFunction = Callable[[Any, float, float], Any]


def apply_overflow(
    component: ComponentLike,
    value: ComponentValue,
    overflow: Optional[OverflowFunction] = None,
) -> ComponentValue:
    """
    Bring an edited component value back into [0, 1].

    Args:
        component: Component the value belongs to
        value: Edited value or array of values, possibly out of range
        overflow: clamp, bounce, or any fn(values, lo, hi). None passes through.

    Returns:
        The re-ranged value, with the same shape as `value`
    """
    if overflow is None:
        return value
    values = np.asarray(value, dtype=float).reshape(-1)
    if HSBComponent(component) is HSBComponent.HUE:
        result = cyclic_wrap_float(values, 0.0, 1.0)
    else:
        result = overflow(values, 0.0, 1.0)
    result = np.asarray(result, dtype=float).reshape(np.shape(value))
    if np.ndim(value) == 0:
        return float(result)
    return result


__all__ = ["OverflowFunction", "apply_overflow", "clamp", "bounce", "cyclic_wrap_float"]
