from .format_type import FormatType, max_non_hue, format_classes, default_format_dtypes, format_valid_dtypes, HUE_360
from .color_types import ColorSpace, ColorElement, ColorValue, HUE_SPACES, is_hue_space, alpha_space, element_to_array

__all__ = [
    "FormatType",
    "max_non_hue",
    "format_classes",
    "default_format_dtypes",
    "format_valid_dtypes",
    "HUE_360",
    "ColorSpace",
    "ColorElement",
    "ColorValue",
    "HUE_SPACES",
    "is_hue_space",
    "alpha_space",
    "element_to_array",
]
