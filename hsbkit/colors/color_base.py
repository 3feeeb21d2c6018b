from __future__ import annotations
from typing import Any, ClassVar, Tuple, cast, Self, Callable, Union
from ..conversions import convert, np_convert
from ..types.format_type import FormatType, format_classes, format_valid_dtypes, default_format_dtypes
from ..types.color_types import ColorElement, ColorValue, Scalar, ScalarVector, HUE_SPACES, ColorSpace
from abc import ABC
from collections.abc import Sized
from numpy import ndarray
import numpy as np


def channel_count(value: Any) -> int:
    """Number of channels in a scalar or tuple color value (0 for None)."""
    if value is None:
        return 0
    if isinstance(value, Sized):
        return len(value)
    return 1


class ColorBase:
    __slots__ = ('_value',)  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 1
    mode:       ClassVar[ColorSpace]
    _type:      ClassVar[type]
    maxima:     ClassVar[ColorElement]
    null_value: ClassVar[ColorElement]
    format_type: ClassVar[FormatType]
    _is_frozen: bool = False   # class-level default (instance gets its own slot)

    # attached by colors.color
    convert: Callable[..., ColorBase]
    with_alpha: Callable[..., ColorBase]
    # attached by editing.editor
    component: Callable[..., float]
    with_component: Callable[..., ColorBase]
    with_adjusted: Callable[..., ColorBase]
    with_increased: Callable[..., ColorBase]
    with_decreased: Callable[..., ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorValue) -> None:
        maxima_dim = channel_count(self.maxima)

        if self.num_channels != maxima_dim:
            raise ValueError(f"{self.mode} expects {self.maxima!r}-shaped maxima")
        
        is_array = isinstance(value, ndarray)
        
        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            input_is_array = isinstance(value.value, ndarray)
            
            if value.mode == self.mode and value.format_type == self.format_type:
                value = value.value
                is_array = input_is_array
            elif input_is_array:
                value = np_convert(
                    color=value.value,
                    from_space=value.mode,
                    to_space=self.mode,
                    input_type=value.format_type.value,
                    output_type=self.format_type.value,
                )
                is_array = True
            else:
                value = convert(
                    color=value.value,
                    from_space=value.mode,
                    to_space=self.mode,
                    input_type=value.format_type,
                    output_type=self.format_type,
                )
                is_array = False
        
        # ---- Handle array input ----
        if is_array:
            arr = cast(ndarray, value)
            
            valid_types = format_valid_dtypes[self.format_type]
            if not isinstance(arr.dtype.type(0), valid_types):
                raise TypeError(
                    f"{self.mode} with format {self.format_type} expects dtype compatible with {valid_types}, "
                    f"got {arr.dtype}"
                )
            
            if arr.shape[-1] != self.num_channels:
                raise ValueError(
                    f"{self.mode} expects last dimension to be {self.num_channels}, "
                    f"got shape {arr.shape}"
                )
            
            if isinstance(self.maxima, tuple):
                arr = np.clip(arr, 0, np.array(self.maxima))
            else:
                arr = np.clip(arr, 0, self.maxima)
            
            target_dtype = default_format_dtypes[self.format_type]
            if arr.dtype != target_dtype:
                arr = arr.astype(target_dtype)
            
            value = arr
        
        # ---- Handle scalar/tuple input ----
        else:
            value_dim = channel_count(value)
            if maxima_dim != value_dim:
                raise ValueError(f"{self.mode} expects {self.maxima!r}-shaped value")
            
            # clamp, then enforce the format's type
            cast_to = format_classes[self.format_type]
            if isinstance(self.maxima, tuple):
                value = tuple(
                    cast_to(max(0, min(v, m)))
                    for v, m in zip(cast(Tuple[Any, ...], value), cast(Tuple[Scalar, ...], self.maxima))
                )
            else:
                value = cast_to(max(0, min(cast(Scalar, value), self.maxima)))

        # safe assignment; __setattr__ still allows it during init
        self._value = value

        # freeze instance — no more writes allowed
        super().__setattr__('_is_frozen', True)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        if self.mode != other.mode or self.format_type != other.format_type:
            return False
        if self.is_array or other.is_array:
            return bool(np.array_equal(np.asarray(self._value), np.asarray(other._value)))
        return self._value == other._value

    def __hash__(self) -> int:
        if self.is_array:
            raise TypeError(f"unhashable array-valued {self.__class__.__name__}")
        return hash((self.mode, self.format_type, self._value))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorValue:
        return self._value
    
    @property
    def is_array(self) -> bool:
        """Check if this color contains an array of colors."""
        return isinstance(self._value, ndarray)
    
    @property
    def shape(self) -> Tuple[int, ...] | None:
        """Return shape of the array, or None if scalar."""
        if isinstance(self._value, ndarray):
            return self._value.shape
        return None
    @property
    def has_alpha(self) -> bool:
        """Check if this color space includes an alpha channel."""
        return self.mode.endswith('a')

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.mode in HUE_SPACES

class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.
    
    Note: For array values, alpha operations work on the entire array.
    Use array indexing arr[..., -1] to access alpha channel.
    """

    # Tell static checkers these come from the real subclass (ColorBase)
    num_channels: ClassVar[int]
    maxima: ClassVar[ColorElement]
    mode: ClassVar[ColorSpace]
    value: ColorValue  # Can be scalar tuple or ndarray
    is_array: bool

    alpha_index: ClassVar[int] = -1

    @property
    def alpha_max(self) -> Scalar:
        return cast(Tuple[Scalar, ...], self.maxima)[self.alpha_index]

    @property
    def alpha(self) -> Union[Scalar, ndarray]:
        """
        Get alpha channel value.
        
        Returns:
            Scalar if value is tuple/scalar, ndarray if value is array.
        """
        if isinstance(self.value, ndarray):
            return self.value[..., self.alpha_index]
        return cast(Tuple[Scalar, ...], self.value)[self.alpha_index]

    @classmethod
    def _validate_alpha_shape(cls, vals: Union[ScalarVector, ndarray]) -> None:
        if isinstance(vals, ndarray):
            if vals.shape[-1] != cls.num_channels:
                raise ValueError(f"{cls.mode} expects last dimension to be {cls.num_channels}")
        else:
            if len(vals) != cls.num_channels:
                raise ValueError(f"{cls.mode} expects {cls.num_channels}-channel tuple")

    def with_alpha(self, alpha: Union[Scalar, ndarray, None] = None) -> Self:
        """
        Return a new instance with modified alpha channel.
        
        Args:
            alpha: New alpha value(s). Can be scalar or array matching shape.
                   None leaves the color unchanged.
        
        Returns:
            New color instance with updated alpha.
        """
        if alpha is None:
            return self
        if isinstance(self.value, ndarray):
            if isinstance(alpha, ndarray) and alpha.shape != self.value.shape[:-1]:
                raise ValueError(
                    f"Alpha shape {alpha.shape} doesn't match color shape {self.value.shape[:-1]}"
                )
            a = np.clip(alpha, 0, self.alpha_max)
            
            # Replace last channel with new alpha
            new_vals = np.concatenate([
                self.value[..., :-1],
                np.broadcast_to(a, self.value.shape[:-1])[..., None].astype(self.value.dtype)
            ], axis=-1)
            
        else:
            if isinstance(alpha, ndarray):
                raise TypeError("Cannot use array alpha with scalar color value")
            
            a = max(0, min(alpha, self.alpha_max))
            values = cast(Tuple[Scalar, ...], self.value)
            new_vals = values[:-1] + (a,)
        
        self._validate_alpha_shape(new_vals)
        return self.__class__(new_vals)  # type: ignore
    

def build_registry(*classes: type[ColorBase]):
    return {
        (cls.mode, cls.format_type): cls
        for cls in classes
    }
