import warnings
import numpy as np
import pytest
from hsbkit.colors.color_base import ColorBase
from hsbkit.colors.rgb import ColorRGBINT, ColorRGBAINT, ColorUnitRGB, ColorUnitRGBA
from hsbkit.colors.hsv import UnitHSV, UnitHSVA, ColorHSVINT
from hsbkit.colors.hsl import UnitHSL, UnitHSLA
from hsbkit.types.format_type import FormatType
from hsbkit.editing.components import (
    HSBComponent,
    ComponentModification,
    HSBAComponents,
    DecompositionError,
    DecompositionWarning,
    DEFAULT_COLOR_CLASS,
    output_class,
)


class ColorUnitCMYK(ColorBase):
    """A color the conversions know nothing about."""
    num_channels = 4
    mode = "cmyk"
    _type = float
    maxima = (1.0, 1.0, 1.0, 1.0)
    null_value = (0.0, 0.0, 0.0, 0.0)
    format_type = FormatType.FLOAT


def test_component_accepts_strings():
    assert HSBComponent("hue") is HSBComponent.HUE
    assert HSBComponent("Saturation") is HSBComponent.SATURATION
    assert HSBComponent(HSBComponent.ALPHA) is HSBComponent.ALPHA
    with pytest.raises(ValueError):
        HSBComponent("lightness")


def test_modification_accepts_strings():
    assert ComponentModification("INCREASE") is ComponentModification.INCREASE
    with pytest.raises(ValueError):
        ComponentModification("double")


def test_modification_is_proportional():
    assert ComponentModification.INCREASE.apply(0.4, 0.25) == pytest.approx(0.5)
    assert ComponentModification.DECREASE.apply(0.4, 0.25) == pytest.approx(0.3)
    assert ComponentModification.INCREASE.apply(0.0, 0.5) == 0.0


def test_modification_does_not_validate_percentage():
    assert ComponentModification.INCREASE.apply(0.5, -0.5) == pytest.approx(0.25)
    assert ComponentModification.DECREASE.apply(0.5, 2.0) == pytest.approx(-0.5)
    assert ComponentModification.INCREASE.apply(0.8, 1.0) == pytest.approx(1.6)


def test_components_default_to_zero():
    components = HSBAComponents()
    assert components.as_tuple() == (0.0, 0.0, 0.0, 0.0)


def test_components_index_by_selector():
    components = HSBAComponents(0.1, 0.2, 0.3, 0.4)
    assert components[HSBComponent.HUE] == 0.1
    assert components["brightness"] == 0.3
    components[HSBComponent.ALPHA] = 0.9
    components["saturation"] = 1.5
    assert components.as_tuple() == (0.1, 1.5, 0.3, 0.9)
    with pytest.raises(ValueError):
        components["red"]


def test_components_copy_and_equality():
    components = HSBAComponents(0.1, 0.2, 0.3, 0.4)
    other = components.copy()
    assert other == components
    other.hue = 0.5
    assert other != components
    assert tuple(components) == (0.1, 0.2, 0.3, 0.4)
    assert "saturation=0.2" in repr(components)


def test_decompose_hsva():
    components = HSBAComponents.decompose(UnitHSVA((270.0, 1.0, 1.0, 1.0)))
    assert components.as_tuple() == (0.75, 1.0, 1.0, 1.0)


def test_decompose_rgb_adds_opaque_alpha():
    components = HSBAComponents.decompose(ColorUnitRGB((0.5, 0.0, 1.0)))
    assert components.as_tuple() == pytest.approx((0.75, 1.0, 1.0, 1.0))


def test_decompose_integer_color():
    components = HSBAComponents.decompose(ColorRGBAINT((0, 0, 255, 51)))
    assert components.as_tuple() == pytest.approx((240 / 360, 1.0, 1.0, 0.2))


def test_decompose_hsl():
    components = HSBAComponents.decompose(UnitHSLA((120.0, 1.0, 0.25, 0.5)))
    assert components.as_tuple() == pytest.approx((1 / 3, 1.0, 0.5, 0.5))


@pytest.mark.parametrize("color", [
    (0.5, 0.0, 1.0),
    "violet",
    None,
    ColorUnitCMYK((0.0, 1.0, 0.0, 0.0)),
])
def test_decompose_failures(color):
    with pytest.raises(DecompositionError):
        HSBAComponents.decompose(color)


def test_decomposition_error_is_value_error():
    assert issubclass(DecompositionError, ValueError)


def test_from_color_falls_back_to_zero():
    with pytest.warns(DecompositionWarning):
        components = HSBAComponents.from_color("violet")
    assert components == HSBAComponents()


def test_from_color_strict_raises():
    with pytest.raises(DecompositionError):
        HSBAComponents.from_color("violet", strict=True)


def test_from_color_is_silent_on_success():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        components = HSBAComponents.from_color(ColorUnitRGBA((1.0, 0.0, 0.0, 1.0)))
    assert components.as_tuple() == pytest.approx((0.0, 1.0, 1.0, 1.0))


def test_output_class_keeps_space_and_format():
    assert output_class(ColorRGBINT((1, 2, 3))) is ColorRGBINT
    assert output_class(UnitHSL((0.0, 0.0, 0.0)), HSBComponent.HUE) is UnitHSL
    assert output_class(UnitHSVA((0.0, 0.0, 0.0, 0.0)), "alpha") is UnitHSVA


def test_output_class_promotes_for_alpha_edits():
    assert output_class(ColorRGBINT((1, 2, 3)), HSBComponent.ALPHA) is ColorRGBAINT
    assert output_class(UnitHSV((0.0, 0.0, 0.0)), "alpha") is UnitHSVA


def test_output_class_falls_back_for_foreign_inputs():
    assert DEFAULT_COLOR_CLASS is ColorUnitRGBA
    assert output_class((1, 2, 3)) is ColorUnitRGBA
    assert output_class(ColorUnitCMYK((0.0, 0.0, 0.0, 0.0))) is ColorUnitRGBA


def test_to_color_round_trip():
    color = ColorUnitRGBA((0.25, 0.5, 0.75, 0.5))
    rebuilt = HSBAComponents.decompose(color).to_color(color)
    assert isinstance(rebuilt, ColorUnitRGBA)
    assert np.allclose(rebuilt.value, color.value)


def test_to_color_clamps_while_building_hsva():
    rebuilt = HSBAComponents(0.5, 1.5, -0.5, 2.0).to_color(UnitHSVA((0.0, 0.0, 0.0, 0.0)))
    assert rebuilt.value == (180.0, 1.0, 0.0, 1.0)


def test_to_color_integer_output():
    rebuilt = HSBAComponents(0.0, 1.0, 1.0, 1.0).to_color(ColorHSVINT((0, 0, 0)))
    assert isinstance(rebuilt, ColorHSVINT)
    assert rebuilt.value == (0, 255, 255)


def test_decompose_array_gives_one_field_per_column():
    colors = ColorUnitRGB(np.array([[0.5, 0.0, 1.0], [1.0, 0.0, 0.0]], dtype=np.float32))
    components = HSBAComponents.decompose(colors)
    assert components.is_array
    assert np.allclose(components.hue, [0.75, 0.0])
    assert np.allclose(components.saturation, [1.0, 1.0])
    assert np.allclose(components.brightness, [1.0, 1.0])
    assert np.allclose(components.alpha, [1.0, 1.0])


def test_array_components_equality():
    components = HSBAComponents(np.array([0.1, 0.2]), 0.5, 0.5, 1.0)
    assert components == components.copy()
    assert components != HSBAComponents(np.array([0.1, 0.3]), 0.5, 0.5, 1.0)


def test_to_color_broadcasts_scalar_fields_over_arrays():
    like = UnitHSVA(np.array([[0.0, 0.0, 0.0, 0.0]] * 3, dtype=np.float32))
    rebuilt = HSBAComponents(np.array([0.0, 0.25, 0.5]), 1.0, 0.5, 1.0).to_color(like)
    assert isinstance(rebuilt, UnitHSVA)
    assert rebuilt.shape == (3, 4)
    assert np.allclose(rebuilt.value[:, 0], [0.0, 90.0, 180.0])
    assert np.allclose(rebuilt.value[:, 1:], [1.0, 0.5, 1.0])


def test_to_color_clamps_array_fields():
    like = UnitHSVA(np.zeros((2, 4), dtype=np.float32))
    rebuilt = HSBAComponents(np.array([0.5, 0.5]), np.array([1.5, -0.5]), 1.0, 1.0).to_color(like)
    assert np.allclose(rebuilt.value[:, 1], [1.0, 0.0])


def test_hue_is_clamped_before_leaving_hsva():
    # 1.5 turns clamps to 360 degrees (red) instead of wrapping to 180 (cyan)
    rebuilt = HSBAComponents(1.5, 1.0, 1.0, 1.0).to_color(ColorUnitRGBA((0.0, 0.0, 0.0, 0.0)))
    assert np.allclose(rebuilt.value, (1.0, 0.0, 0.0, 1.0))
