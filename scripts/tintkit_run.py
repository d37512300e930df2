#!/usr/bin/env python3
"""Command line entry point: print theme colors for an image as JSON."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.tintkit import (  # noqa: E402
    Analyzer,
    AnalyzerConfig,
    ClustererConfig,
    ImageLoadError,
    SamplerConfig,
    load_image,
)
from src.tintkit.analyzer import DEFAULT_GRID, DEFAULT_MINIMUM_SATURATION  # noqa: E402
from src.tintkit.luminance import DEFAULT_LIGHT_THRESHOLD  # noqa: E402


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Derive UI theme colors from an image.")
    parser.add_argument("image", help="Path to the image file")
    parser.add_argument("--grid", type=int, default=DEFAULT_GRID, help="Dominant color sampling grid")
    parser.add_argument("--threshold", type=float, default=0.1, help="Per-channel similarity threshold")
    parser.add_argument("--minimum-saturation", type=float, default=DEFAULT_MINIMUM_SATURATION)
    parser.add_argument("--bottom-height", type=int, default=100, help="Height of the bottom band in pixels")
    parser.add_argument("--bottom-width", type=int, default=None, help="Width of the centered bottom band")
    parser.add_argument("--light-threshold", type=float, default=DEFAULT_LIGHT_THRESHOLD)
    parser.add_argument("--average-mode", choices=("mean", "nearest"), default="mean")
    parser.add_argument("--max-side", type=int, default=None, help="Downscale so the longest side fits")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def build_config(args: argparse.Namespace) -> AnalyzerConfig:
    return AnalyzerConfig(
        sampler=SamplerConfig(
            average_mode=args.average_mode,
            bottom_height=args.bottom_height,
            bottom_max_width=args.bottom_width,
        ),
        cluster=ClustererConfig(threshold=args.threshold),
        grid=args.grid,
        minimum_saturation=args.minimum_saturation,
        light_threshold=args.light_threshold,
        max_side=args.max_side,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger = logging.getLogger("tintkit.cli")

    try:
        image = load_image(args.image)
    except ImageLoadError as error:
        logger.error("%s", error)
        return 1
    try:
        analyzer = Analyzer(build_config(args), logger)
    except ValueError as error:
        logger.error("Invalid configuration: %s", error)
        return 2

    result = analyzer.analyze(image)
    print(json.dumps(result.as_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
