"""
hsbkit Color Space Conversions
==============================

Scalar and vectorized (numpy) conversions between the RGB, HSV and HSL
color spaces.

Conversion Functions
-------------------

RGB → HSV:
    unit_rgb_to_hsv(r, g, b)
    np_unit_rgb_to_hsv(r, g, b)

RGB → HSL:
    unit_rgb_to_hsl(r, g, b)
    np_unit_rgb_to_hsl(r, g, b)

HSV → RGB:
    hsv_to_unit_rgb(h, s, v)
    np_hsv_to_unit_rgb(h, s, v)

HSL → RGB:
    hsl_to_unit_rgb(h, s, l)
    np_hsl_to_unit_rgb(h, s, l)

HSV ↔ HSL:
    hsv_to_hsl / hsl_to_hsv
    np_hsv_to_hsl / np_hsl_to_hsv

High-Level API
-------------
    convert(color, from_space, to_space, input_type, output_type)
        Universal converter for a single color, with format and alpha handling
    np_convert(color, from_space, to_space, input_type, output_type)
        Vectorized universal converter

Hue is always expressed in degrees. Saturation, value, lightness and RGB
channels are unit floats at the function level; `convert` scales them to
the requested FormatType.

Examples
--------
>>> from hsbkit.conversions import unit_rgb_to_hsv, hsv_to_unit_rgb
>>> h, s, v = unit_rgb_to_hsv(1.0, 0.5, 0.0)
>>> r, g, b = hsv_to_unit_rgb(h, s, v)
"""

# RGB → HSV conversions
from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv

# RGB → HSL conversions
from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl

# HSV / HSL → RGB conversions
from .to_rgb import hsv_to_unit_rgb, np_hsv_to_unit_rgb, hsl_to_unit_rgb, np_hsl_to_unit_rgb

# HSV ↔ HSL conversions
from .to_hsv import hsl_to_hsv, np_hsl_to_hsv
from .to_hsl import hsv_to_hsl, np_hsv_to_hsl

# High-level API
from .wrapper import convert, np_convert

# Types and enums
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace

__all__ = [
    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',
    'unit_rgb_to_hsl',
    'np_unit_rgb_to_hsl',
    'hsv_to_unit_rgb',
    'np_hsv_to_unit_rgb',
    'hsl_to_unit_rgb',
    'np_hsl_to_unit_rgb',
    'hsv_to_hsl',
    'hsl_to_hsv',
    'np_hsv_to_hsl',
    'np_hsl_to_hsv',
    'convert',
    'np_convert',
    'ColorSpace',
    'FormatType',
]
