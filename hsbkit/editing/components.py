"""
HSBA component model used by the component editor.

A color is edited by decomposing it into four unit floats (hue, saturation,
brightness, alpha), changing exactly one of them, and composing a new color
from the result. Hue is stored as a fraction of a full turn so that all four
fields share the [0, 1] scale. Array-valued colors are edited column-wise.
"""
from __future__ import annotations
import warnings
from enum import Enum
from typing import Any, Optional, Tuple, Union
import numpy as np
from numpy import ndarray

from ..colors.color_base import ColorBase
from ..colors.color import unified_tuple_to_class, get_color_class
from ..colors.hsv import UnitHSVA
from ..colors.rgb import ColorUnitRGBA
from ..types.format_type import FormatType, HUE_360
from ..types.color_types import alpha_space


class HSBComponent(str, Enum):
    """Selects one field of an HSBA color."""
    HUE = "hue"
    SATURATION = "saturation"
    BRIGHTNESS = "brightness"
    ALPHA = "alpha"

    @classmethod
    def _missing_(cls, value: object) -> Optional[HSBComponent]:
        if isinstance(value, str):
            for member in cls:
                if member.value == value.lower():
                    return member
        return None


class ComponentModification(str, Enum):
    """Direction of a proportional component adjustment."""
    INCREASE = "increase"
    DECREASE = "decrease"

    @classmethod
    def _missing_(cls, value: object) -> Optional[ComponentModification]:
        if isinstance(value, str):
            for member in cls:
                if member.value == value.lower():
                    return member
        return None

    def apply(self, current: float, percentage: float) -> float:
        """Scale `current` by `percentage` of itself, up or down."""
        if self is ComponentModification.DECREASE:
            return current - current * percentage
        return current + current * percentage


ComponentLike = Union[HSBComponent, str]
ModificationLike = Union[ComponentModification, str]


class DecompositionError(ValueError):
    """The color cannot be expressed as HSBA components."""


class DecompositionWarning(UserWarning):
    """A color could not be decomposed and zeroed components were used instead."""


# Output class for inputs that are not one of the registered color classes.
DEFAULT_COLOR_CLASS: type[ColorBase] = ColorUnitRGBA


def output_class(like: Any, component: Optional[ComponentLike] = None) -> type[ColorBase]:
    """
    Pick the color class an edited color is rebuilt into.

    Args:
        like: The color that was edited
        component: The edited component, if any

    Returns:
        The registered class matching `like`'s space and format, promoted to
        its alpha variant when alpha was edited on an alpha-less color.
        DEFAULT_COLOR_CLASS when `like` is not a registered color.
    """
    if not isinstance(like, ColorBase):
        return DEFAULT_COLOR_CLASS
    cls = unified_tuple_to_class.get((like.mode, like.format_type))
    if cls is None:
        return DEFAULT_COLOR_CLASS
    if component is not None and HSBComponent(component) is HSBComponent.ALPHA and not like.has_alpha:
        return get_color_class(alpha_space(like.mode), like.format_type)
    return cls


ComponentValue = Union[float, ndarray]


def _field(value: Any) -> ComponentValue:
    if isinstance(value, ndarray):
        return value.astype(float)
    return float(value)


class HSBAComponents:
    """
    Mutable scratch value holding the four HSBA fields of a color.

    Fields are floats for a single color. Decomposing an array-valued color
    gives ndarray fields with the array's leading shape instead.
    """

    __slots__ = ("hue", "saturation", "brightness", "alpha")

    def __init__(
        self,
        hue: ComponentValue = 0.0,
        saturation: ComponentValue = 0.0,
        brightness: ComponentValue = 0.0,
        alpha: ComponentValue = 0.0,
    ) -> None:
        self.hue = _field(hue)
        self.saturation = _field(saturation)
        self.brightness = _field(brightness)
        self.alpha = _field(alpha)

    def __getitem__(self, component: ComponentLike) -> ComponentValue:
        return getattr(self, HSBComponent(component).value)

    def __setitem__(self, component: ComponentLike, value: ComponentValue) -> None:
        setattr(self, HSBComponent(component).value, _field(value))

    def __iter__(self):
        return iter(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HSBAComponents):
            return NotImplemented
        return all(
            bool(np.array_equal(mine, theirs))
            for mine, theirs in zip(self.as_tuple(), other.as_tuple())
        )

    def __repr__(self) -> str:
        return (
            f"HSBAComponents(hue={self.hue!r}, saturation={self.saturation!r}, "
            f"brightness={self.brightness!r}, alpha={self.alpha!r})"
        )

    @property
    def is_array(self) -> bool:
        return any(isinstance(field, ndarray) for field in self.as_tuple())

    def as_tuple(self) -> Tuple[ComponentValue, ComponentValue, ComponentValue, ComponentValue]:
        return self.hue, self.saturation, self.brightness, self.alpha

    def copy(self) -> HSBAComponents:
        return HSBAComponents(*self.as_tuple())

    @classmethod
    def decompose(cls, color: Any) -> HSBAComponents:
        """
        Decompose a color into HSBA components.

        Colors without alpha decompose with an opaque alpha of 1.0. An
        array-valued color decomposes into one ndarray per field.

        Raises:
            DecompositionError: `color` is not a color or cannot be
                converted to HSVA.
        """
        if not isinstance(color, ColorBase):
            raise DecompositionError(f"{type(color).__name__} is not a color")
        try:
            hsva = color.convert("hsva", FormatType.FLOAT).value
        except (KeyError, ValueError) as exc:
            raise DecompositionError(f"cannot express {color!r} as hsva: {exc}") from exc
        if isinstance(hsva, ndarray):
            hsva = hsva.astype(float)
            return cls(hsva[..., 0] / HUE_360, hsva[..., 1], hsva[..., 2], hsva[..., 3])
        h, s, b, a = hsva  # type: ignore
        return cls(h / HUE_360, s, b, a)

    @classmethod
    def from_color(cls, color: Any, *, strict: bool = False, stacklevel: int = 2) -> HSBAComponents:
        """
        Decompose `color`, falling back to zeroed components on failure.

        The failure is reported as a DecompositionWarning. With strict=True
        the DecompositionError propagates instead.
        """
        try:
            return cls.decompose(color)
        except DecompositionError as exc:
            if strict:
                raise
            warnings.warn(
                f"Could not decompose color into HSBA components ({exc}); "
                "continuing with zeroed components",
                DecompositionWarning,
                stacklevel=stacklevel + 1,
            )
            return cls()

    def to_color(self, like: Any = None, component: Optional[ComponentLike] = None) -> ColorBase:
        """
        Compose a color from these components.

        The components are first built into a UnitHSVA, which clamps hue to
        [0, 360] degrees and the other fields to [0, 1]. That color is then
        converted to the output class.

        Args:
            like: Color whose class the result should have (see output_class)
            component: The component that was edited

        Returns:
            New color instance, array-valued when any field is an ndarray
        """
        if self.is_array:
            fields = np.broadcast_arrays(
                self.hue * HUE_360, self.saturation, self.brightness, self.alpha
            )
            hsva = UnitHSVA(np.stack(fields, axis=-1))
        else:
            hsva = UnitHSVA((self.hue * HUE_360, self.saturation, self.brightness, self.alpha))
        return output_class(like, component)(hsva)
