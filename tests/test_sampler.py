from __future__ import annotations

from typing import List

import numpy as np
import pytest

from src.tintkit.image import ArrayImage, Image, RenderError
from src.tintkit.sampler import Sampler, SamplerConfig, bottom_rect
from src.tintkit.types import Color, Rect

RED = (220, 20, 20, 255)
BLUE = (20, 40, 200, 255)


class FailingImage(Image):
    @property
    def width(self) -> int:
        return 10

    @property
    def height(self) -> int:
        return 10

    def render(self, width: int, height: int) -> np.ndarray:
        raise RenderError("unsupported backing format")

    def crop(self, rect: Rect) -> Image:
        raise RenderError("cannot crop")


class RecordingImage(ArrayImage):
    def __init__(self, pixels: np.ndarray) -> None:
        super().__init__(pixels)
        self.crops: List[Rect] = []

    def crop(self, rect: Rect) -> ArrayImage:
        self.crops.append(rect)
        return super().crop(rect)


def _two_band_image(width: int = 200, height: int = 300, split: int = 200) -> np.ndarray:
    pixels = np.empty((height, width, 4), dtype=np.uint8)
    pixels[:split] = RED
    pixels[split:] = BLUE
    return pixels


def _assert_close(color: Color, rgba) -> None:
    expected = [value / 255.0 for value in rgba]
    np.testing.assert_allclose([color.r, color.g, color.b, color.a], expected, atol=1 / 255)


@pytest.mark.parametrize("mode", ["mean", "nearest"])
@pytest.mark.parametrize("size", [(1, 1), (7, 3), (64, 48)])
def test_average_of_solid_image_is_that_color(mode: str, size) -> None:
    image = ArrayImage.solid(size[0], size[1], (12, 200, 99, 255))
    sampler = Sampler(SamplerConfig(average_mode=mode))

    _assert_close(sampler.average_color(image), (12, 200, 99, 255))


def test_mean_average_blends_pixels() -> None:
    pixels = np.zeros((2, 2, 4), dtype=np.uint8)
    pixels[:, :, 3] = 255
    pixels[0, 0, :3] = 255
    pixels[1, 1, :3] = 255

    color = Sampler().average_color(ArrayImage(pixels))

    assert color.r == pytest.approx(0.5)
    assert color.a == pytest.approx(1.0)


def test_sample_returns_row_major_grid() -> None:
    pixels = np.zeros((4, 4, 4), dtype=np.uint8)
    pixels[:2, :2] = (255, 0, 0, 255)
    pixels[:2, 2:] = (0, 255, 0, 255)
    pixels[2:, :2] = (0, 0, 255, 255)
    pixels[2:, 2:] = (255, 255, 255, 255)

    colors = Sampler().sample(ArrayImage(pixels), 2, 2)

    assert [color.to_rgba8() for color in colors] == [
        (255, 0, 0, 255),
        (0, 255, 0, 255),
        (0, 0, 255, 255),
        (255, 255, 255, 255),
    ]


def test_dominant_colors_yields_grid_squared_samples() -> None:
    image = ArrayImage.solid(40, 30, (1, 2, 3, 255))

    assert len(Sampler().dominant_colors(image, 9)) == 81


@pytest.mark.parametrize("grid", [0, -3])
def test_non_positive_grid_is_rejected(grid: int) -> None:
    with pytest.raises(ValueError):
        Sampler().dominant_colors(ArrayImage.solid(4, 4, (0, 0, 0, 255)), grid)


def test_unknown_average_mode_is_rejected() -> None:
    with pytest.raises(ValueError):
        Sampler(SamplerConfig(average_mode="bilinear"))


def test_render_failures_become_absent_values() -> None:
    sampler = Sampler()
    image = FailingImage()

    assert sampler.sample(image, 4, 4) == []
    assert sampler.average_color(image) is None
    assert Sampler(SamplerConfig(average_mode="nearest")).average_color(image) is None
    assert sampler.sample_region(image, Rect(0, 0, 5, 5)) == []
    assert sampler.bottom_color(image) is None
    assert sampler.scaled_copy(image, 4) is None


def test_bottom_band_reads_only_bottom_rows() -> None:
    image = RecordingImage(_two_band_image())

    for mode in ("mean", "nearest"):
        color = Sampler(SamplerConfig(average_mode=mode)).bottom_color(image, height=100)
        _assert_close(color, BLUE)

    assert image.crops[0] == Rect(x=0, y=200, width=200, height=100)


def test_bottom_band_taller_than_image_clamps() -> None:
    image = ArrayImage(_two_band_image())

    assert bottom_rect(image, height=500) == Rect(x=0, y=0, width=200, height=300)
    color = Sampler().bottom_color(image, height=500)
    assert color is not None
    # 2/3 red, 1/3 blue
    assert color.r == pytest.approx((220 * 2 + 20) / 3 / 255, abs=1 / 255)


def test_bottom_band_is_horizontally_centered() -> None:
    image = ArrayImage.solid(200, 300, (0, 0, 0, 255))

    assert bottom_rect(image, height=100, max_width=50) == Rect(x=75, y=200, width=50, height=100)
    assert bottom_rect(image, height=100, max_width=900) == Rect(x=0, y=200, width=200, height=100)
    assert bottom_rect(image, height=0) is None


def test_bottom_color_uses_config_defaults() -> None:
    image = ArrayImage(_two_band_image(split=250))
    sampler = Sampler(SamplerConfig(bottom_height=50))

    _assert_close(sampler.bottom_color(image), BLUE)


def test_sample_region_grid() -> None:
    image = ArrayImage(_two_band_image())

    colors = Sampler().sample_region(image, Rect(0, 150, 200, 100), width=1, height=2)

    assert len(colors) == 2
    _assert_close(colors[0], RED)
    _assert_close(colors[1], BLUE)


def test_scaled_copy_caps_longest_side() -> None:
    sampler = Sampler()
    wide = ArrayImage.solid(400, 200, (10, 10, 10, 255))
    small = ArrayImage.solid(50, 20, (10, 10, 10, 255))

    scaled = sampler.scaled_copy(wide, 100)
    assert scaled.size == (100, 50)
    assert sampler.scaled_copy(small, 100).size == (50, 20)
    assert sampler.scaled_copy(ArrayImage.solid(1000, 3, (0, 0, 0, 255)), 10).size == (10, 1)


class CountingImage(ArrayImage):
    def __init__(self, pixels: np.ndarray) -> None:
        super().__init__(pixels)
        self.renders: List[tuple] = []

    def render(self, width: int, height: int) -> np.ndarray:
        self.renders.append((width, height))
        return super().render(width, height)


def test_mean_average_does_not_render_full_image() -> None:
    image = CountingImage(np.full((300, 400, 4), (40, 80, 120, 255), dtype=np.uint8))

    color = Sampler().average_color(image)

    assert image.renders == []
    _assert_close(color, (40, 80, 120, 255))


def test_nearest_average_picks_center_pixel() -> None:
    pixels = np.zeros((3, 3, 4), dtype=np.uint8)
    pixels[:, :, 3] = 255
    pixels[1, 1] = (250, 10, 10, 255)

    color = Sampler(SamplerConfig(average_mode="nearest")).average_color(ArrayImage(pixels))

    assert color.to_rgba8() == (250, 10, 10, 255)
