"""
HSB component editor.

Every operation decomposes a color into HSBAComponents, changes exactly one
field and composes a new color of the same space and format. Adjustments are
proportional to the current value: increasing a saturation of 0.4 by 0.25
gives 0.5, not 0.65.

Inputs that cannot be decomposed do not raise by default. A
DecompositionWarning is emitted and the edit is applied to zeroed components.
Pass strict=True to get the DecompositionError instead.
"""
from __future__ import annotations
from typing import Any, Callable, Optional

from ..colors.color_base import ColorBase
from .components import (
    HSBAComponents,
    HSBComponent,
    ComponentModification,
    ComponentLike,
    ComponentValue,
    ModificationLike,
)
from .overflow import OverflowFunction, apply_overflow


def _edit(
    color: Any,
    component: ComponentLike,
    new_value: Callable[[ComponentValue], ComponentValue],
    overflow: Optional[OverflowFunction],
    strict: bool,
    stacklevel: int,
) -> ColorBase:
    component = HSBComponent(component)
    components = HSBAComponents.from_color(color, strict=strict, stacklevel=stacklevel)
    value = new_value(components[component])
    components[component] = apply_overflow(component, value, overflow)
    return components.to_color(color, component)


def _adjust(
    color: Any,
    component: ComponentLike,
    modification: ModificationLike,
    percentage: float,
    overflow: Optional[OverflowFunction],
    strict: bool,
    stacklevel: int,
) -> ColorBase:
    modification = ComponentModification(modification)
    return _edit(
        color,
        component,
        lambda current: modification.apply(current, percentage),
        overflow,
        strict,
        stacklevel,
    )


def read_component(color: Any, component: ComponentLike, *, strict: bool = False) -> ComponentValue:
    """
    Return the current value of one HSBA component of `color`.

    Hue is returned as a fraction of a full turn. Array-valued colors return
    an ndarray with one value per color. Undecomposable colors read as 0.0
    (with a DecompositionWarning) unless strict=True.

    Values are read through HSVA. An HSL color with lightness 0 or 1 is
    black or white there, so its saturation reads as 0.0 whatever the HSL
    value stores.
    """
    component = HSBComponent(component)
    return HSBAComponents.from_color(color, strict=strict, stacklevel=2)[component]


def set_component(
    color: Any,
    component: ComponentLike,
    value: float,
    *,
    overflow: Optional[OverflowFunction] = None,
    strict: bool = False,
) -> ColorBase:
    """
    Return a color like `color` with one component set to `value`.

    Args:
        color: The color to edit
        component: "hue", "saturation", "brightness" or "alpha"
        value: New value on the [0, 1] scale (hue as a fraction of a turn).
            For array-valued colors a scalar sets every color; an array
            must broadcast against the colors' leading shape.
        overflow: Optional range policy (see hsbkit.editing.overflow). By
            default the value is passed through and clamped when the
            intermediate UnitHSVA is built.
        strict: Raise DecompositionError instead of falling back to zeroed
            components

    Returns:
        New color instance

    Every edit rebuilds the color from HSVA, so HSL colors with lightness 0
    or 1 come back with saturation 0.0 even when another component was
    edited. The rendered color is unchanged.
    """
    return _edit(color, component, lambda _current: value, overflow, strict, stacklevel=3)


def adjust_component(
    color: Any,
    component: ComponentLike,
    modification: ModificationLike,
    percentage: float,
    *,
    overflow: Optional[OverflowFunction] = None,
    strict: bool = False,
) -> ColorBase:
    """
    Return a color like `color` with one component changed by `percentage`
    of its current value.

    The new value is ``c + c * percentage`` for INCREASE and
    ``c - c * percentage`` for DECREASE. `percentage` is not validated;
    negative or large percentages are allowed.
    """
    return _adjust(color, component, modification, percentage, overflow, strict, stacklevel=4)


def increase_component(
    color: Any,
    component: ComponentLike,
    percentage: float,
    *,
    overflow: Optional[OverflowFunction] = None,
    strict: bool = False,
) -> ColorBase:
    """Shorthand for adjust_component(color, component, INCREASE, percentage)."""
    return _adjust(
        color, component, ComponentModification.INCREASE, percentage, overflow, strict, stacklevel=4
    )


def decrease_component(
    color: Any,
    component: ComponentLike,
    percentage: float,
    *,
    overflow: Optional[OverflowFunction] = None,
    strict: bool = False,
) -> ColorBase:
    """Shorthand for adjust_component(color, component, DECREASE, percentage)."""
    return _adjust(
        color, component, ComponentModification.DECREASE, percentage, overflow, strict, stacklevel=4
    )


ColorBase.component = read_component
ColorBase.with_component = set_component
ColorBase.with_adjusted = adjust_component
ColorBase.with_increased = increase_component
ColorBase.with_decreased = decrease_component
