"""Image capability and the numpy/OpenCV backed implementation."""
from __future__ import annotations

from pathlib import Path
from typing import Sequence, Union

import cv2
import numpy as np

from .types import Rect


class RenderError(RuntimeError):
    """Raised when an image cannot produce a pixel buffer."""


class ImageLoadError(RuntimeError):
    """Raised when an image file cannot be read or decoded."""


class Image:
    """Abstract image able to render itself into an RGBA8 buffer."""

    @property
    def width(self) -> int:
        raise NotImplementedError

    @property
    def height(self) -> int:
        raise NotImplementedError

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def render(self, width: int, height: int) -> np.ndarray:
        """Return a (height, width, 4) uint8 buffer using nearest-neighbor resampling."""
        raise NotImplementedError

    def crop(self, rect: Rect) -> "Image":
        raise NotImplementedError

    def mean(self) -> np.ndarray:
        """Per-channel RGBA mean in [0, 255]."""
        buffer = self.render(self.width, self.height)
        return buffer.reshape(-1, 4).mean(axis=0, dtype=np.float64)


class ArrayImage(Image):
    """In-memory RGBA image backed by a numpy array."""

    def __init__(self, pixels: np.ndarray) -> None:
        self._pixels = _to_rgba(pixels)

    @classmethod
    def solid(cls, width: int, height: int, rgba: Sequence[int]) -> "ArrayImage":
        pixels = np.empty((height, width, 4), dtype=np.uint8)
        pixels[:, :] = np.asarray(rgba, dtype=np.uint8)
        return cls(pixels)

    @property
    def pixels(self) -> np.ndarray:
        return self._pixels

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    def render(self, width: int, height: int) -> np.ndarray:
        if width <= 0 or height <= 0:
            raise RenderError(f"Cannot render to {width}x{height}")
        if self.width == 0 or self.height == 0:
            raise RenderError("Image has no pixels")
        if (width, height) == (self.width, self.height):
            return self._pixels.copy()
        resized = cv2.resize(self._pixels, (width, height), interpolation=cv2.INTER_NEAREST_EXACT)
        return np.ascontiguousarray(resized.reshape(height, width, 4))

    def mean(self) -> np.ndarray:
        if self.width == 0 or self.height == 0:
            raise RenderError("Image has no pixels")
        return np.asarray(cv2.mean(self._pixels), dtype=np.float64)

    def crop(self, rect: Rect) -> "ArrayImage":
        if rect.width <= 0 or rect.height <= 0:
            raise RenderError(f"Empty crop rectangle {rect}")
        if rect.x < 0 or rect.y < 0 or rect.x + rect.width > self.width or rect.y + rect.height > self.height:
            raise RenderError(f"Crop rectangle {rect} exceeds image bounds {self.width}x{self.height}")
        region = self._pixels[rect.y : rect.y + rect.height, rect.x : rect.x + rect.width]
        return ArrayImage(region)


def _to_rgba(pixels: np.ndarray) -> np.ndarray:
    array = np.asarray(pixels)
    if array.dtype != np.uint8:
        raise ValueError(f"Expected uint8 pixels, got {array.dtype}")
    if array.ndim == 2:
        return cv2.cvtColor(array, cv2.COLOR_GRAY2RGBA)
    if array.ndim != 3 or array.shape[2] not in (3, 4):
        raise ValueError(f"Expected an (H, W), (H, W, 3) or (H, W, 4) array, got {array.shape}")
    if array.shape[2] == 3:
        return cv2.cvtColor(array, cv2.COLOR_RGB2RGBA)
    return np.ascontiguousarray(array)


def load_image(path: Union[str, Path]) -> ArrayImage:
    """Decode an image file from disk into an RGBA ``ArrayImage``."""
    source = Path(path)
    if not source.exists():
        raise ImageLoadError(f"Image path does not exist: {source}")
    decoded = cv2.imread(str(source), cv2.IMREAD_UNCHANGED)
    if decoded is None:
        raise ImageLoadError(f"Unable to decode image: {source}")
    if decoded.dtype != np.uint8:
        # 16-bit PNG/TIFF
        decoded = (decoded / 257).astype(np.uint8)
    if decoded.ndim == 2:
        rgba = cv2.cvtColor(decoded, cv2.COLOR_GRAY2RGBA)
    elif decoded.shape[2] == 4:
        rgba = cv2.cvtColor(decoded, cv2.COLOR_BGRA2RGBA)
    else:
        rgba = cv2.cvtColor(decoded, cv2.COLOR_BGR2RGBA)
    return ArrayImage(rgba)


__all__ = ["ArrayImage", "Image", "ImageLoadError", "RenderError", "load_image"]
