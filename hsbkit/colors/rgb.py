"""RGB color classes. Channels are red, green, blue (and alpha)."""
from typing import ClassVar, Tuple
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase, WithAlpha, build_registry


class ColorRGBINT(ColorBase):
    """8-bit RGB, channels in 0-255."""
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "rgb"
    _type: ClassVar[type] = int
    maxima: ClassVar[Tuple[int, int, int]] = (255, 255, 255)
    null_value: ClassVar[Tuple[int, int, int]] = (0, 0, 0)
    format_type: ClassVar[FormatType] = FormatType.INT


class ColorRGBAINT(ColorBase, WithAlpha):
    """8-bit RGBA, channels in 0-255."""
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = "rgba"
    _type: ClassVar[type] = int
    maxima: ClassVar[Tuple[int, int, int, int]] = (255, 255, 255, 255)
    null_value: ClassVar[Tuple[int, int, int, int]] = (0, 0, 0, 0)
    format_type: ClassVar[FormatType] = FormatType.INT


class ColorUnitRGB(ColorBase):
    """Float RGB, channels in 0.0-1.0."""
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "rgb"
    _type: ClassVar[type] = float
    maxima: ClassVar[Tuple[float, float, float]] = (1.0, 1.0, 1.0)
    null_value: ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT


class ColorUnitRGBA(ColorBase, WithAlpha):
    """Float RGBA, channels in 0.0-1.0. Default output of the component editor."""
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = "rgba"
    _type: ClassVar[type] = float
    maxima: ClassVar[Tuple[float, float, float, float]] = (1.0, 1.0, 1.0, 1.0)
    null_value: ClassVar[Tuple[float, float, float, float]] = (0.0, 0.0, 0.0, 0.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT


class ColorPercentageRGB(ColorBase):
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "rgb"
    _type: ClassVar[type] = float
    maxima: ClassVar[Tuple[float, float, float]] = (100.0, 100.0, 100.0)
    null_value: ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)
    format_type: ClassVar[FormatType] = FormatType.PERCENTAGE


class ColorPercentageRGBA(ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = "rgba"
    _type: ClassVar[type] = float
    maxima: ClassVar[Tuple[float, float, float, float]] = (100.0, 100.0, 100.0, 100.0)
    null_value: ClassVar[Tuple[float, float, float, float]] = (0.0, 0.0, 0.0, 0.0)
    format_type: ClassVar[FormatType] = FormatType.PERCENTAGE


RGB = ColorRGBINT
RGBA = ColorRGBAINT


rgb_tuple_to_class = build_registry(
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
    ColorPercentageRGB,
    ColorPercentageRGBA,
)
