"""Basic hsbkit usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from hsbkit import (
    ColorUnitRGBA,
    ColorRGB,
    HSBComponent,
    ComponentModification,
    set_component,
)


def demonstrate_editing() -> None:
    # A fully saturated violet, built from RGB.
    violet = ColorUnitRGBA((0.5, 0.0, 1.0, 1.0))
    print("Base color as HSVA:", violet.convert("hsva").value)

    shifted = set_component(violet, HSBComponent.HUE, 0.5)
    print("Hue set to half a turn:", shifted.value)

    richer = violet.with_adjusted(HSBComponent.SATURATION, ComponentModification.INCREASE, 0.25)
    print("Saturation +25%:", richer.value)

    brighter = violet.with_increased(HSBComponent.BRIGHTNESS, 0.25)
    print("Brightness +25%:", brighter.value)

    faded = violet.with_decreased(HSBComponent.ALPHA, 0.25)
    print("Alpha -25%:", faded.value)


def demonstrate_formats() -> None:
    # Integer colors stay integer colors; editing alpha adds an alpha channel.
    orange = ColorRGB((255, 128, 0))
    print("Darker orange:", orange.with_decreased("brightness", 0.5).value)
    print("Half-transparent orange:", orange.with_component("alpha", 0.5).value)


if __name__ == "__main__":
    demonstrate_editing()
    demonstrate_formats()
