"""FastAPI theming service for Tintkit."""
from __future__ import annotations

import logging
import time
from pathlib import Path

from fastapi import FastAPI, HTTPException

from src.tintkit import (
    Analyzer,
    AnalyzerConfig,
    ClustererConfig,
    Color,
    ImageLoadError,
    SamplerConfig,
    __version__,
    load_image,
    relative_luminance,
)
from src.tintkit.types import ThemeResult

from .config import (
    AVERAGE_MODE,
    BOTTOM_HEIGHT,
    GRID,
    IMAGE_ROOT,
    LIGHT_THRESHOLD,
    MAX_SIDE,
    MINIMUM_SATURATION,
    SIMILARITY_THRESHOLD,
)
from .schemas import (
    AnalyzeRequest,
    ColorPayload,
    HealthResponse,
    LuminanceRequest,
    LuminanceResponse,
    ThemeResponse,
    ThemeSummary,
)

logger = logging.getLogger("tintkit.service")

app = FastAPI(title="Tintkit Theming Service", version=__version__)


def _create_analyzer(payload: AnalyzeRequest) -> Analyzer:
    sampler_cfg = SamplerConfig(average_mode=AVERAGE_MODE, bottom_height=BOTTOM_HEIGHT)
    cluster_cfg = ClustererConfig(threshold=SIMILARITY_THRESHOLD)
    grid = GRID
    minimum_saturation = MINIMUM_SATURATION
    light_threshold = LIGHT_THRESHOLD

    if payload.average_mode is not None:
        sampler_cfg.average_mode = payload.average_mode.value
    if payload.bottom_height is not None:
        sampler_cfg.bottom_height = payload.bottom_height
    if payload.bottom_max_width is not None:
        sampler_cfg.bottom_max_width = payload.bottom_max_width
    if payload.threshold is not None:
        cluster_cfg.threshold = payload.threshold
    if payload.grid is not None:
        grid = payload.grid
    if payload.minimum_saturation is not None:
        minimum_saturation = payload.minimum_saturation
    if payload.light_threshold is not None:
        light_threshold = payload.light_threshold

    analyzer_config = AnalyzerConfig(
        sampler=sampler_cfg,
        cluster=cluster_cfg,
        grid=grid,
        minimum_saturation=minimum_saturation,
        light_threshold=light_threshold,
        max_side=MAX_SIDE if MAX_SIDE > 0 else None,
    )
    return Analyzer(analyzer_config, logger)


def _resolve_path(raw_path: str) -> Path:
    path = Path(raw_path).expanduser()
    if not path.is_absolute():
        path = IMAGE_ROOT / path
    return path


def _color_payload(color: Color) -> ColorPayload:
    return ColorPayload(r=color.r, g=color.g, b=color.b, a=color.a, hex=color.to_hex())


def _theme_response(image_path: str, result: ThemeResult) -> ThemeResponse:
    return ThemeResponse(
        image_path=image_path,
        dominant=_color_payload(result.dominant),
        average=_color_payload(result.average),
        bottom=_color_payload(result.bottom),
        dominant_is_light=result.dominant_is_light,
        bottom_is_light=result.bottom_is_light,
        summary=ThemeSummary(**result.summary),
    )


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        defaults={
            "grid": GRID,
            "threshold": SIMILARITY_THRESHOLD,
            "minimum_saturation": MINIMUM_SATURATION,
            "bottom_height": BOTTOM_HEIGHT,
            "light_threshold": LIGHT_THRESHOLD,
            "average_mode": AVERAGE_MODE,
            "max_side": MAX_SIDE,
        },
    )


@app.post("/analyze", response_model=ThemeResponse)
def analyze(payload: AnalyzeRequest) -> ThemeResponse:
    """Derive theme colors for an image on disk."""

    started = time.perf_counter()
    path = _resolve_path(payload.image_path)
    if not path.exists():
        raise HTTPException(status_code=404, detail=f"Image not found: {payload.image_path}")
    try:
        image = load_image(path)
    except ImageLoadError as error:
        logger.warning("Unable to load %s: %s", path, error)
        raise HTTPException(status_code=422, detail=str(error)) from error

    try:
        analyzer = _create_analyzer(payload)
    except ValueError as error:
        raise HTTPException(status_code=422, detail=str(error)) from error

    result = analyzer.analyze(image)
    logger.info(
        "Analyzed %s (%dx%d) in %.3fs",
        path,
        image.width,
        image.height,
        time.perf_counter() - started,
    )
    return _theme_response(payload.image_path, result)


@app.post("/luminance", response_model=LuminanceResponse)
def luminance(payload: LuminanceRequest) -> LuminanceResponse:
    color = Color(payload.r, payload.g, payload.b, payload.a)
    value = relative_luminance(color)
    if value is None:  # pragma: no cover - request colors are always sRGB
        raise HTTPException(status_code=422, detail="Color cannot be converted to sRGB")
    return LuminanceResponse(luminance=value, is_light=value > payload.threshold)
