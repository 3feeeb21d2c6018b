from __future__ import annotations
from .color_base import ColorBase, ColorValue, WithAlpha
from .hsl import hsl_tuple_to_class
from .rgb import rgb_tuple_to_class
from .hsv import hsv_tuple_to_class
from ..types.format_type import FormatType, max_non_hue
from ..types.color_types import ColorSpace, alpha_space
from ..conversions import convert, np_convert
from typing import Optional
from numpy import ndarray
import numpy as np
unified_tuple_to_class: dict[tuple[ColorSpace, FormatType], type[ColorBase]]  = {**rgb_tuple_to_class, **hsl_tuple_to_class, **hsv_tuple_to_class}

def color_convert(self: ColorBase, to_space: ColorSpace | None = None, to_format: FormatType | None = None) -> ColorBase:
    """
    Convert this color to a different color space and/or format.
    
    Automatically detects whether the value is a scalar or array and uses
    the appropriate conversion function (convert for scalars, np_convert for arrays).
    
    Args:
        to_space: Target color space (e.g., "rgb", "hsv", "hsl")
        to_format: Target format type (INT, FLOAT, PERCENTAGE). Defaults to current format.
        
    Returns:
        New ColorBase instance in the target space/format
    """
    to_space = to_space or self.mode
    to_space = to_space.lower() # type: ignore
    from_format = self.format_type
    to_format = FormatType(to_format or from_format)
    cls = get_color_class(to_space, to_format)

    if isinstance(self.value, ndarray):
        result = np_convert(
            color=self.value,
            from_space=self.mode,
            to_space=to_space,
            input_type=from_format,
            output_type=to_format,
        )
    else:
        result = convert(
            color=self.value,
            from_space=self.mode,
            to_space=to_space,
            input_type=from_format,
            output_type=to_format,
        )

    return cls(result)

def with_alpha(self: ColorBase, alpha: Optional[ColorValue] = None) -> ColorBase:
    """
    Return an RGBA/HSVA/HSLA color with the specified alpha.

    Colors that already carry alpha get their alpha channel replaced
    (left unchanged when alpha is None).

    Args:
        alpha: Alpha value to set. If None, uses maximum alpha for the format.
               Can be a scalar or array matching the shape of the color array.

    Returns:
        New ColorBase instance with alpha channel.
    """
    if self.has_alpha:
        return WithAlpha.with_alpha(self, alpha)  # type: ignore

    if alpha is None:
        alpha = max_non_hue[self.format_type]

    if isinstance(self.value, ndarray):
        if isinstance(alpha, ndarray):
            # Alpha is an array - must match color array shape (excluding channels)
            expected_shape = self.value.shape[:-1]
            if alpha.shape != expected_shape:
                raise ValueError(
                    f"Alpha array shape {alpha.shape} doesn't match color shape {expected_shape}"
                )
            alpha_array = np.expand_dims(alpha, axis=-1).astype(self.value.dtype)
        else:
            # Alpha is scalar - broadcast to all elements
            alpha_array = np.full(self.value.shape[:-1] + (1,), alpha, dtype=self.value.dtype)
        
        new_value = np.concatenate([self.value, alpha_array], axis=-1)
    else:
        if isinstance(alpha, ndarray):
            raise TypeError("Cannot use array alpha with scalar color value")
        new_value = tuple(self.value) + (alpha,)  # type: ignore

    cls = get_color_class(alpha_space(self.mode), self.format_type)
    return cls(new_value) # type: ignore

ColorBase.convert = color_convert
ColorBase.with_alpha = with_alpha


def get_color_class(color_space: str, format_type: FormatType) -> type[ColorBase]:
    color_class = unified_tuple_to_class.get((color_space.lower(), FormatType(format_type)))  # type: ignore
    if color_class is None:
        raise ValueError(
            f"Unsupported color space/format combination: {color_space}/{format_type}"
        )
    return color_class


def convert_color(value, color_space: str, format_type: FormatType) -> ColorBase:
    if isinstance(value, ColorBase):
        return value.convert(color_space, format_type)
    return get_color_class(color_space, format_type)(value)
