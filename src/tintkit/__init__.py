"""Color analysis pipeline components for Tintkit."""

from .analyzer import Analyzer, AnalyzerConfig
from .clusterer import Clusterer, ClustererConfig, GreedyClusterer, dominant, is_similar
from .image import ArrayImage, Image, ImageLoadError, RenderError, load_image
from .luminance import is_light, relative_luminance
from .sampler import Sampler, SamplerConfig, bottom_rect
from .saturation import with_minimum_saturation
from .types import Color, ColorBucket, Rect, ThemeResult

__version__ = "0.1.0"

__all__ = [
    "Analyzer",
    "AnalyzerConfig",
    "Clusterer",
    "ClustererConfig",
    "GreedyClusterer",
    "dominant",
    "is_similar",
    "ArrayImage",
    "Image",
    "ImageLoadError",
    "RenderError",
    "load_image",
    "is_light",
    "relative_luminance",
    "Sampler",
    "SamplerConfig",
    "bottom_rect",
    "with_minimum_saturation",
    "Color",
    "ColorBucket",
    "Rect",
    "ThemeResult",
]
