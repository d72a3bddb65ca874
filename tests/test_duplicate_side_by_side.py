import numpy as np
import pytest

from canvas_dup.models.errors import OutOfBoundsError
from canvas_dup.pipeline.duplicate_side_by_side import duplicate_side_by_side, process_file
from canvas_dup.services.canvas_service import CanvasService
from conftest import gradient


def test_second_copy_is_cropped_by_offsets():
    w, h = 60, 70
    src = gradient(w, h)

    canvas = duplicate_side_by_side(src, offset_x=50, offset_y=50)

    assert (canvas.width, canvas.height) == (2 * w, h)
    assert np.array_equal(canvas.pixels[:, :w], src.pixels)
    # second copy: (W-50) x (H-50) from the source's top-left
    assert np.array_equal(canvas.pixels[50:, w + 50:], src.pixels[:h - 50, :w - 50])
    assert not canvas.pixels[:50, w:].any()
    assert not canvas.pixels[:, w:w + 50].any()


def test_default_offsets_are_fifty():
    src = gradient(80, 90, seed=5)
    canvas = duplicate_side_by_side(src)
    assert np.array_equal(canvas.pixels[50:, 130:], src.pixels[:40, :30])


def test_source_is_left_untouched():
    src = gradient(60, 60)
    before = src.pixels.copy()
    duplicate_side_by_side(src)
    assert np.array_equal(src.pixels, before)


@pytest.mark.parametrize("width, height", [(50, 80), (80, 50), (10, 10)])
def test_small_images_put_second_copy_out_of_bounds(width, height):
    with pytest.raises(OutOfBoundsError):
        duplicate_side_by_side(gradient(width, height), offset_x=50, offset_y=50)


def test_process_file_round_trip(tmp_path):
    service = CanvasService()
    src = gradient(64, 64)
    infile, outfile = tmp_path / "in.png", tmp_path / "out.png"
    service.save(src, infile)

    process_file(infile, outfile, canvas_service=service)

    result = service.load(outfile)
    assert service.get_dimensions(result) == (128, 64)
    assert np.array_equal(result.pixels[:, :64], src.pixels)
    assert np.array_equal(result.pixels[50:, 114:], src.pixels[:14, :14])
