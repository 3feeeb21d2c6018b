"""HSB component editing: set or proportionally adjust one of hue,
saturation, brightness and alpha on any color."""

from .components import (
    HSBComponent,
    ComponentModification,
    HSBAComponents,
    ComponentValue,
    DecompositionError,
    DecompositionWarning,
    DEFAULT_COLOR_CLASS,
    output_class,
)
from .overflow import apply_overflow, clamp, bounce, cyclic_wrap_float
from .editor import (
    read_component,
    set_component,
    adjust_component,
    increase_component,
    decrease_component,
)

__all__ = [
    "HSBComponent",
    "ComponentModification",
    "HSBAComponents",
    "ComponentValue",
    "DecompositionError",
    "DecompositionWarning",
    "DEFAULT_COLOR_CLASS",
    "output_class",
    "apply_overflow",
    "clamp",
    "bounce",
    "cyclic_wrap_float",
    "read_component",
    "set_component",
    "adjust_component",
    "increase_component",
    "decrease_component",
]
