"""Saturation floor for theme colors."""
from __future__ import annotations

import colorsys

from .colorspace import srgb_components
from .types import Color


def with_minimum_saturation(color: Color, minimum: float) -> Color:
    """Raise the saturation of ``color`` to ``minimum``, keeping hue, brightness and alpha.

    Colors whose space cannot be converted to sRGB are returned unchanged, as are
    colors that already meet the floor.
    """
    components = srgb_components(color)
    if components is None:
        return color
    r, g, b, alpha = components
    # HSV value is HSB brightness
    hue, saturation, brightness = colorsys.rgb_to_hsv(r, g, b)
    if saturation >= minimum:
        return color
    new_r, new_g, new_b = colorsys.hsv_to_rgb(hue, min(minimum, 1.0), brightness)
    return Color(_unit(new_r), _unit(new_g), _unit(new_b), alpha)


def _unit(value: float) -> float:
    return min(max(value, 0.0), 1.0)
