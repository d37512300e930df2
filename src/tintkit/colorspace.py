"""Color space helpers shared by the saturation and luminance stages."""
from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from .types import LINEAR_SRGB, SRGB, Color

SRGB_LINEAR_CUTOFF = 0.03928


def srgb_to_linear(values):
    """sRGB transfer function, decoding to linear light. Works on scalars and arrays."""
    channel = np.asarray(values, dtype=np.float64)
    linear = np.where(
        channel <= SRGB_LINEAR_CUTOFF,
        channel / 12.92,
        np.power((channel + 0.055) / 1.055, 2.4),
    )
    return float(linear) if linear.ndim == 0 else linear


def linear_to_srgb(values):
    channel = np.asarray(values, dtype=np.float64)
    encoded = np.where(
        channel <= SRGB_LINEAR_CUTOFF / 12.92,
        channel * 12.92,
        1.055 * np.power(np.clip(channel, 0.0, None), 1 / 2.4) - 0.055,
    )
    encoded = np.clip(encoded, 0.0, 1.0)
    return float(encoded) if encoded.ndim == 0 else encoded


def srgb_components(color: Color) -> Optional[Tuple[float, float, float, float]]:
    """sRGB-encoded ``(r, g, b, a)`` for ``color``, or None when its space is unknown."""
    if color.space == SRGB:
        return color.r, color.g, color.b, color.a
    if color.space == LINEAR_SRGB:
        r, g, b = linear_to_srgb([color.r, color.g, color.b]).tolist()
        return r, g, b, color.a
    return None
