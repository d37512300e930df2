"""Runtime configuration for the Tintkit service."""
from __future__ import annotations

import os
from pathlib import Path

_BASE_DIR = Path(os.environ.get("TINTKIT_BASE_DIR", ".")).resolve()

IMAGE_ROOT = Path(os.environ.get("TINTKIT_IMAGE_ROOT", _BASE_DIR)).resolve()

GRID = int(os.environ.get("TINTKIT_GRID", "9"))
SIMILARITY_THRESHOLD = float(os.environ.get("TINTKIT_SIMILARITY_THRESHOLD", "0.1"))
MINIMUM_SATURATION = float(os.environ.get("TINTKIT_MINIMUM_SATURATION", "0.15"))
BOTTOM_HEIGHT = int(os.environ.get("TINTKIT_BOTTOM_HEIGHT", "100"))
LIGHT_THRESHOLD = float(os.environ.get("TINTKIT_LIGHT_THRESHOLD", "0.70"))
AVERAGE_MODE = os.environ.get("TINTKIT_AVERAGE_MODE", "mean").lower()
MAX_SIDE = int(os.environ.get("TINTKIT_MAX_SIDE", "512"))


__all__ = [
    "IMAGE_ROOT",
    "GRID",
    "SIMILARITY_THRESHOLD",
    "MINIMUM_SATURATION",
    "BOTTOM_HEIGHT",
    "LIGHT_THRESHOLD",
    "AVERAGE_MODE",
    "MAX_SIDE",
]
