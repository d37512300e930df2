"""Greedy frequency clustering of sampled colors."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .types import Color, ColorBucket


def is_similar(a: Color, b: Color, threshold: float) -> bool:
    """True when every RGB channel differs by at most ``threshold``. Alpha is ignored."""
    return abs(a.r - b.r) <= threshold and abs(a.g - b.g) <= threshold and abs(a.b - b.b) <= threshold


@dataclass
class ClustererConfig:
    threshold: float = 0.1


class Clusterer:
    """Abstract clusterer."""

    def dominant(self, colors: Iterable[Color]) -> Optional[Color]:
        raise NotImplementedError


class GreedyClusterer(Clusterer):
    """Single-pass, first-match bucket clusterer.

    Each color joins the first existing bucket whose representative is similar,
    otherwise it opens a new bucket. The grouping depends on input order.
    """

    def __init__(self, config: ClustererConfig | None = None) -> None:
        self._config = config or ClustererConfig()
        if self._config.threshold < 0:
            raise ValueError("threshold must be non-negative")

    def buckets(self, colors: Iterable[Color]) -> List[ColorBucket]:
        threshold = self._config.threshold
        buckets: List[ColorBucket] = []
        for color in colors:
            for bucket in buckets:
                if is_similar(color, bucket.representative, threshold):
                    bucket.count += 1
                    break
            else:
                buckets.append(ColorBucket(representative=color))
        return buckets

    def dominant(self, colors: Iterable[Color]) -> Optional[Color]:  # noqa: D401
        winner = select_winner(self.buckets(colors))
        return winner.representative if winner else None


def select_winner(buckets: List[ColorBucket]) -> Optional[ColorBucket]:
    # strictly greater keeps the earliest bucket on ties
    best: Optional[ColorBucket] = None
    for bucket in buckets:
        if best is None or bucket.count > best.count:
            best = bucket
    return best


def dominant(colors: Iterable[Color], threshold: float = 0.1) -> Optional[Color]:
    return GreedyClusterer(ClustererConfig(threshold=threshold)).dominant(colors)
