"""High-level theming orchestrator."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .clusterer import ClustererConfig, GreedyClusterer, select_winner
from .image import Image
from .luminance import DEFAULT_LIGHT_THRESHOLD, is_light
from .sampler import Sampler, SamplerConfig
from .saturation import with_minimum_saturation
from .types import Color, ThemeResult

DEFAULT_GRID = 9
DEFAULT_MINIMUM_SATURATION = 0.15


@dataclass
class AnalyzerConfig:
    sampler: SamplerConfig = field(default_factory=SamplerConfig)
    cluster: ClustererConfig = field(default_factory=ClustererConfig)
    grid: int = DEFAULT_GRID
    minimum_saturation: float = DEFAULT_MINIMUM_SATURATION
    light_threshold: float = DEFAULT_LIGHT_THRESHOLD
    max_side: Optional[int] = None


class Analyzer:
    """Coordinates sampling, clustering, saturation and luminance checks.

    Every public color operation returns a displayable color: steps that yield
    no value fall back to ``Color.clear()``.
    """

    def __init__(self, config: AnalyzerConfig | None = None, logger: logging.Logger | None = None) -> None:
        self._config = config or AnalyzerConfig()
        self._logger = logger or logging.getLogger(__name__)
        self._sampler = Sampler(self._config.sampler, self._logger)
        self._clusterer = GreedyClusterer(self._config.cluster)
        if self._config.grid <= 0:
            raise ValueError(f"grid must be a positive integer, got {self._config.grid!r}")
        if self._config.max_side is not None and self._config.max_side <= 0:
            raise ValueError(f"max_side must be None or a positive integer, got {self._config.max_side!r}")

    @property
    def config(self) -> AnalyzerConfig:
        return self._config

    def corrected_color(self, image: Image, grid: Optional[int] = None) -> Color:
        color, _stats = self._dominant(self._prepare(image), grid if grid is not None else self._config.grid)
        return color if color is not None else Color.clear()

    def average_color(self, image: Image) -> Color:
        color = self._sampler.average_color(self._prepare(image))
        return color if color is not None else Color.clear()

    def bottom_color(self, image: Image, height: Optional[int] = None, max_width: Optional[int] = None) -> Color:
        color = self._sampler.bottom_color(image, height, max_width)
        return color if color is not None else Color.clear()

    def analyze(self, image: Image) -> ThemeResult:
        fallbacks: List[str] = []
        prepared = self._prepare(image)

        dominant, stats = self._dominant(prepared, self._config.grid)
        if dominant is None:
            fallbacks.append("dominant")
            dominant = Color.clear()

        average = self._sampler.average_color(prepared)
        if average is None:
            fallbacks.append("average")
            average = Color.clear()

        # bottom band heights are in source pixels
        bottom = self._sampler.bottom_color(image)
        if bottom is None:
            fallbacks.append("bottom")
            bottom = Color.clear()

        if fallbacks:
            self._logger.warning("Fell back to clear color for: %s", ", ".join(fallbacks))

        summary: Dict[str, object] = {
            "grid": self._config.grid,
            "width": image.width,
            "height": image.height,
            "sampled_width": prepared.width,
            "sampled_height": prepared.height,
            "average_mode": self._config.sampler.average_mode,
            "fallbacks": fallbacks,
        }
        summary.update(stats)
        return ThemeResult(
            dominant=dominant,
            average=average,
            bottom=bottom,
            dominant_is_light=is_light(dominant, self._config.light_threshold),
            bottom_is_light=is_light(bottom, self._config.light_threshold),
            summary=summary,
        )

    # ------------------------------------------------------------------
    def _prepare(self, image: Image) -> Image:
        if not self._config.max_side:
            return image
        scaled = self._sampler.scaled_copy(image, self._config.max_side)
        if scaled is None:
            self._logger.debug("Scaled copy unavailable; sampling the original image")
            return image
        return scaled

    def _dominant(self, image: Image, grid: int) -> tuple[Optional[Color], Dict[str, int]]:
        samples = self._sampler.dominant_colors(image, grid)
        buckets = self._clusterer.buckets(samples)
        winner = select_winner(buckets)
        stats = {
            "samples": len(samples),
            "buckets": len(buckets),
            "winner_count": winner.count if winner else 0,
        }
        self._logger.debug("Clustered %d samples into %d buckets", len(samples), len(buckets))
        if winner is None:
            return None, stats
        return with_minimum_saturation(winner.representative, self._config.minimum_saturation), stats
