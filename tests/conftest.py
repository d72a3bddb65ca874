import numpy as np
import pytest

from canvas_dup.models.pixel_buffer import PixelBuffer


def solid(width, height, rgba):
    pixels = np.empty((height, width, 4), dtype=np.uint8)
    pixels[:, :] = rgba
    return PixelBuffer(pixels)


def gradient(width, height, seed=0):
    """Buffer whose pixels are all different enough to catch misplaced rows."""
    rng = np.random.default_rng(seed)
    return PixelBuffer(rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8))


@pytest.fixture
def blank_4x4():
    return PixelBuffer(np.zeros((4, 4, 4), dtype=np.uint8))


@pytest.fixture
def red_2x2():
    return solid(2, 2, (0xFF, 0, 0, 0xFF))
