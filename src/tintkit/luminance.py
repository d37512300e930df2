"""Relative luminance and light/dark classification."""
from __future__ import annotations

from typing import Optional

import numpy as np

from .colorspace import srgb_components, srgb_to_linear
from .types import Color

# ITU-R BT.709 coefficients
LUMA_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)
DEFAULT_LIGHT_THRESHOLD = 0.70


def relative_luminance(color: Color) -> Optional[float]:
    components = srgb_components(color)
    if components is None:
        return None
    linear = srgb_to_linear(components[:3])
    return float(np.dot(LUMA_WEIGHTS, linear))


def is_light(color: Color, threshold: float = DEFAULT_LIGHT_THRESHOLD) -> bool:
    """True when the luminance of ``color`` strictly exceeds ``threshold``."""
    luminance = relative_luminance(color)
    if luminance is None:
        return False
    return luminance > threshold
