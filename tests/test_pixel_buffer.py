import numpy as np
import pytest

from canvas_dup.models.pixel_buffer import PixelBuffer


def test_dimensions_follow_array_shape():
    buf = PixelBuffer(np.zeros((3, 5, 4), dtype=np.uint8))
    assert (buf.width, buf.height) == (5, 3)
    assert buf.data.shape == (5 * 3 * 4,)


def test_data_is_a_view_of_pixels():
    buf = PixelBuffer(np.zeros((2, 2, 4), dtype=np.uint8))
    buf.data[4:8] = [1, 2, 3, 4]
    assert tuple(buf.pixels[0, 1]) == (1, 2, 3, 4)


def test_rejects_non_rgba_shape():
    with pytest.raises(ValueError):
        PixelBuffer(np.zeros((2, 2, 3), dtype=np.uint8))


def test_rejects_wrong_dtype():
    with pytest.raises(ValueError):
        PixelBuffer(np.zeros((2, 2, 4), dtype=np.float32))


def test_non_contiguous_pixels_are_copied():
    base = np.arange(4 * 6 * 4, dtype=np.uint8).reshape(4, 6, 4)
    buf = PixelBuffer(base[:, ::2])
    assert buf.pixels.flags['C_CONTIGUOUS']
    assert buf.width == 3
    assert np.array_equal(buf.pixels, base[:, ::2])
