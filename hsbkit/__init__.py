"""hsbkit: set and adjust the hue, saturation, brightness and alpha of colors."""

from .colors.rgb import (
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
    ColorPercentageRGB,
    ColorPercentageRGBA,
)
from .colors.hsv import (
    ColorHSVINT,
    ColorHSVAINT,
    UnitHSV,
    UnitHSVA,
    PercentageHSV,
    PercentageHSVA,
)
from .colors.hsl import (
    ColorHSLINT,
    ColorHSLAINT,
    UnitHSL,
    UnitHSLA,
    PercentageHSL,
    PercentageHSLA,
)
from .colors.color_base import ColorBase
from .colors.color import color_convert, get_color_class, convert_color
from .types.format_type import FormatType

# Friendly aliases for common integer variants
ColorRGB = ColorRGBINT
ColorRGBA = ColorRGBAINT
ColorHSV = ColorHSVINT
ColorHSL = ColorHSLINT

from .conversions import (
    hsl_to_hsv,
    hsv_to_hsl,
    unit_rgb_to_hsv,
    unit_rgb_to_hsl,
    hsv_to_unit_rgb,
    hsl_to_unit_rgb,
    np_hsl_to_hsv,
    np_hsv_to_hsl,
    np_unit_rgb_to_hsv,
    np_unit_rgb_to_hsl,
    np_hsv_to_unit_rgb,
    np_hsl_to_unit_rgb,
    convert,
    np_convert,
)
from .editing import (
    HSBComponent,
    ComponentModification,
    HSBAComponents,
    DecompositionError,
    DecompositionWarning,
    read_component,
    set_component,
    adjust_component,
    increase_component,
    decrease_component,
)

__all__ = [
    # core color types
    "ColorBase",
    "ColorRGBINT",
    "ColorRGBAINT",
    "ColorUnitRGB",
    "ColorUnitRGBA",
    "ColorPercentageRGB",
    "ColorPercentageRGBA",
    "ColorHSVINT",
    "ColorHSVAINT",
    "UnitHSV",
    "UnitHSVA",
    "PercentageHSV",
    "PercentageHSVA",
    "ColorHSLINT",
    "ColorHSLAINT",
    "UnitHSL",
    "UnitHSLA",
    "PercentageHSL",
    "PercentageHSLA",
    "ColorRGB",
    "ColorRGBA",
    "ColorHSV",
    "ColorHSL",
    "FormatType",
    "color_convert",
    "get_color_class",
    "convert_color",
    # conversions
    "hsl_to_hsv",
    "hsv_to_hsl",
    "unit_rgb_to_hsv",
    "unit_rgb_to_hsl",
    "hsv_to_unit_rgb",
    "hsl_to_unit_rgb",
    "np_hsl_to_hsv",
    "np_hsv_to_hsl",
    "np_unit_rgb_to_hsv",
    "np_unit_rgb_to_hsl",
    "np_hsv_to_unit_rgb",
    "np_hsl_to_unit_rgb",
    "convert",
    "np_convert",
    # component editing
    "HSBComponent",
    "ComponentModification",
    "HSBAComponents",
    "DecompositionError",
    "DecompositionWarning",
    "read_component",
    "set_component",
    "adjust_component",
    "increase_component",
    "decrease_component",
]
