"""
hsbkit Color Classes
====================

Immutable color classes for the RGB, HSV and HSL color spaces, for single
colors and for numpy arrays of colors.

Features
--------
- Immutable color instances (frozen after initialization)
- Scalar colors and array colors (last axis holds the channels)
- Automatic dtype validation and enforcement
- Value clamping to valid ranges
- Conversion between color spaces and formats
- Alpha channel support with the WithAlpha mixin
- HSB component editing (see hsbkit.editing)

Usage
-----
>>> from hsbkit.colors.rgb import ColorUnitRGBA
>>> color = ColorUnitRGBA((0.5, 0.0, 1.0, 1.0))
>>> hsva = color.convert("hsva")
>>> hsva.value
(270.0, 1.0, 1.0, 1.0)
>>> faded = color.with_alpha(0.5)

Color Classes
-------------
RGB: ColorRGBINT, ColorRGBAINT, ColorUnitRGB, ColorUnitRGBA,
     ColorPercentageRGB, ColorPercentageRGBA
HSV: ColorHSVINT, ColorHSVAINT, UnitHSV, UnitHSVA, PercentageHSV, PercentageHSVA
HSL: ColorHSLINT, ColorHSLAINT, UnitHSL, UnitHSLA, PercentageHSL, PercentageHSLA

Notes
-----
- Hue is in degrees [0, 360] in every format
- All values are clamped to maxima during initialization
"""

from .color_base import ColorBase, WithAlpha
from .color import color_convert, with_alpha, unified_tuple_to_class, get_color_class, convert_color


__all__ = [
    'ColorBase',
    'WithAlpha',
    'color_convert',
    'with_alpha',
    'unified_tuple_to_class',
    'get_color_class',
    'convert_color',
]
