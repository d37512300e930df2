"""Pixel-grid sampling for Tintkit."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from .image import ArrayImage, Image, RenderError
from .types import Color, Rect

AVERAGE_MODES = ("mean", "nearest")


@dataclass
class SamplerConfig:
    average_mode: str = "mean"  # mean | nearest
    bottom_height: int = 100
    bottom_max_width: Optional[int] = None


class Sampler:
    """Renders images into small grids and converts the pixels to colors."""

    def __init__(self, config: SamplerConfig | None = None, logger: Optional[logging.Logger] = None) -> None:
        self._config = config or SamplerConfig()
        self._logger = logger or logging.getLogger(__name__)
        if self._config.average_mode not in AVERAGE_MODES:
            raise ValueError(f"Unsupported average mode '{self._config.average_mode}'")

    @property
    def config(self) -> SamplerConfig:
        return self._config

    def sample(self, image: Image, width: int, height: int) -> List[Color]:
        """Return one color per pixel of a ``width`` x ``height`` render, row-major."""
        _require_positive(width=width, height=height)
        try:
            buffer = image.render(width, height)
        except RenderError as error:
            self._logger.warning("Unable to render image to %dx%d: %s", width, height, error)
            return []
        return _buffer_to_colors(buffer, width, height)

    def dominant_colors(self, image: Image, grid: int) -> List[Color]:
        """Candidate colors from a ``grid`` x ``grid`` render."""
        return self.sample(image, grid, grid)

    def average_color(self, image: Image) -> Optional[Color]:
        if self._config.average_mode == "nearest":
            colors = self.sample(image, 1, 1)
            return colors[0] if colors else None
        try:
            channels = image.mean()
        except RenderError as error:
            self._logger.warning("Unable to reduce image for averaging: %s", error)
            return None
        mean = np.clip(np.asarray(channels, dtype=np.float64)[:4] / 255.0, 0.0, 1.0)
        return Color(*(float(value) for value in mean))

    def sample_region(self, image: Image, crop_rect: Rect, width: int = 1, height: int = 1) -> List[Color]:
        _require_positive(width=width, height=height)
        try:
            region = image.crop(crop_rect)
        except RenderError as error:
            self._logger.warning("Unable to crop image to %s: %s", crop_rect, error)
            return []
        if width == 1 and height == 1:
            color = self.average_color(region)
            return [color] if color is not None else []
        return self.sample(region, width, height)

    def bottom_color(
        self,
        image: Image,
        height: Optional[int] = None,
        max_width: Optional[int] = None,
    ) -> Optional[Color]:
        band_height = self._config.bottom_height if height is None else height
        band_width = self._config.bottom_max_width if max_width is None else max_width
        rect = bottom_rect(image, band_height, band_width)
        if rect is None:
            return None
        self._logger.debug("Sampling bottom band %s", rect)
        colors = self.sample_region(image, rect)
        return colors[0] if colors else None

    def scaled_copy(self, image: Image, max_side: int) -> Optional[Image]:
        """Nearest-neighbor copy whose longest side is at most ``max_side``."""
        _require_positive(max_side=max_side)
        longest = max(image.width, image.height)
        if longest <= 0:
            return None
        ratio = min(max_side / longest, 1.0)
        target_width = max(1, int(image.width * ratio))
        target_height = max(1, int(image.height * ratio))
        try:
            buffer = image.render(target_width, target_height)
        except RenderError as error:
            self._logger.warning("Unable to scale image to %dx%d: %s", target_width, target_height, error)
            return None
        return ArrayImage(buffer)


def bottom_rect(image: Image, height: int = 100, max_width: Optional[int] = None) -> Optional[Rect]:
    """Bottom band of ``image``, horizontally centered and clamped to its bounds."""
    if height <= 0 or image.width <= 0 or image.height <= 0:
        return None
    clamped_height = min(height, image.height)
    clamped_width = image.width if max_width is None else min(max_width, image.width)
    if clamped_width <= 0:
        return None
    origin_x = (image.width - clamped_width) // 2
    origin_y = image.height - clamped_height
    return Rect(x=origin_x, y=origin_y, width=clamped_width, height=clamped_height)


def _buffer_to_colors(buffer: np.ndarray, width: int, height: int) -> List[Color]:
    pixels = np.asarray(buffer, dtype=np.uint8).reshape(height * width, 4)
    return [Color.from_rgba8(*pixel) for pixel in pixels.tolist()]


def _require_positive(**values: int) -> None:
    for name, value in values.items():
        if int(value) != value or value <= 0:
            raise ValueError(f"{name} must be a positive integer, got {value!r}")
