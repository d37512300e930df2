"""Typed primitives for the Tintkit color analysis pipeline."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

SRGB = "srgb"
LINEAR_SRGB = "linear-srgb"


@dataclass(frozen=True)
class Color:
    """RGBA color with normalized components in [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0
    space: str = SRGB

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or not math.isfinite(value):
                raise ValueError(f"Color component {name}={value!r} is not a finite number")
            if value < 0.0 or value > 1.0:
                raise ValueError(f"Color component {name}={value!r} is outside [0, 1]")
            object.__setattr__(self, name, float(value))

    @classmethod
    def clear(cls) -> "Color":
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_rgba8(cls, r: int, g: int, b: int, a: int = 255) -> "Color":
        return cls(int(r) / 255.0, int(g) / 255.0, int(b) / 255.0, int(a) / 255.0)

    def to_rgba8(self) -> Tuple[int, int, int, int]:
        return tuple(int(round(value * 255.0)) for value in (self.r, self.g, self.b, self.a))  # type: ignore[return-value]

    def to_hex(self, include_alpha: bool = False) -> str:
        r, g, b, a = self.to_rgba8()
        text = f"#{r:02x}{g:02x}{b:02x}"
        if include_alpha:
            text += f"{a:02x}"
        return text

    def as_dict(self) -> Dict[str, float]:
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}


@dataclass(frozen=True)
class Rect:
    """Integer pixel rectangle, origin at the top-left corner."""

    x: int
    y: int
    width: int
    height: int


class ColorBucket:
    """A group of samples that matched the same representative color.

    The representative is fixed at creation; only ``count`` changes.
    """

    __slots__ = ("_representative", "count")

    def __init__(self, representative: Color, count: int = 1) -> None:
        self._representative = representative
        self.count = count

    @property
    def representative(self) -> Color:
        return self._representative

    def __repr__(self) -> str:
        return f"ColorBucket(representative={self._representative!r}, count={self.count})"


@dataclass
class ThemeResult:
    """Result bundle produced by the analyzer."""

    dominant: Color
    average: Color
    bottom: Color
    dominant_is_light: bool
    bottom_is_light: bool
    summary: Dict[str, object] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, object]:
        return {
            "dominant": _color_payload(self.dominant),
            "average": _color_payload(self.average),
            "bottom": _color_payload(self.bottom),
            "dominant_is_light": self.dominant_is_light,
            "bottom_is_light": self.bottom_is_light,
            "summary": dict(self.summary),
        }


def _color_payload(color: Color) -> Dict[str, object]:
    payload: Dict[str, object] = dict(color.as_dict())
    payload["hex"] = color.to_hex()
    return payload


__all__: List[str] = ["Color", "ColorBucket", "Rect", "ThemeResult", "SRGB", "LINEAR_SRGB"]
