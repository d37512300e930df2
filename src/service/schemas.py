"""Pydantic models for the Tintkit service."""
from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AverageMode(str, Enum):
    """How the 1x1 average color is reduced."""

    MEAN = "mean"
    NEAREST = "nearest"


class AnalyzeRequest(BaseModel):
    image_path: str = Field(..., description="Path to the image; relative paths resolve against the image root")
    grid: Optional[int] = Field(None, ge=1, le=64, description="Sampling grid for the dominant color")
    threshold: Optional[float] = Field(None, ge=0.0, le=1.0, description="Per-channel similarity threshold")
    minimum_saturation: Optional[float] = Field(None, ge=0.0, le=1.0)
    bottom_height: Optional[int] = Field(None, ge=1, description="Height of the bottom band in pixels")
    bottom_max_width: Optional[int] = Field(None, ge=1, description="Width of the centered bottom band")
    light_threshold: Optional[float] = Field(None, ge=0.0, le=1.0)
    average_mode: Optional[AverageMode] = None


class ColorComponents(BaseModel):
    r: float = Field(..., ge=0.0, le=1.0)
    g: float = Field(..., ge=0.0, le=1.0)
    b: float = Field(..., ge=0.0, le=1.0)
    a: float = Field(1.0, ge=0.0, le=1.0)


class ColorPayload(ColorComponents):
    hex: Optional[str] = None


class ThemeSummary(BaseModel):
    grid: int
    width: int
    height: int
    sampled_width: int
    sampled_height: int
    average_mode: str
    samples: int
    buckets: int
    winner_count: int
    fallbacks: List[str] = Field(default_factory=list)


class ThemeResponse(BaseModel):
    image_path: str
    dominant: ColorPayload
    average: ColorPayload
    bottom: ColorPayload
    dominant_is_light: bool
    bottom_is_light: bool
    summary: ThemeSummary


class LuminanceRequest(ColorComponents):
    model_config = ConfigDict(extra="forbid")

    threshold: float = Field(0.70, ge=0.0, le=1.0)


class LuminanceResponse(BaseModel):
    luminance: float
    is_light: bool


class HealthResponse(BaseModel):
    status: str
    version: str
    defaults: Dict[str, object] = Field(default_factory=dict)
