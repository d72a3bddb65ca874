# pipeline/duplicate_side_by_side.py
import os
import logging

from dotenv import load_dotenv

from ..models.pixel_buffer import PixelBuffer
from ..services.canvas_service import CanvasService

# ------------------------------------------------------------------
# env‑vars
load_dotenv()
DUP_OFFSET_X = int(os.getenv("DUP_OFFSET_X", "50"))   # gap after the first copy
DUP_OFFSET_Y = int(os.getenv("DUP_OFFSET_Y", "50"))   # drop of the second copy

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
def duplicate_side_by_side(
    img: PixelBuffer,
    *,
    canvas_service: CanvasService = CanvasService(),
    offset_x: int                 = DUP_OFFSET_X,
    offset_y: int                 = DUP_OFFSET_Y,
) -> PixelBuffer:
    """
    Build a canvas twice as wide as *img*:
        • the original at (0, 0)
        • a second copy at (W + offset_x, offset_y), cropped to what fits
    Returns the new canvas; *img* is left untouched.
    """
    width, height = canvas_service.get_dimensions(img)
    canvas = canvas_service.create_canvas(width * 2, height)
    logger.debug(f"Canvas {width * 2}x{height} for {width}x{height} source")

    canvas_service.blit(canvas, img, 0, 0)
    canvas_service.blit(canvas, img, width + offset_x, offset_y)
    return canvas


def process_file(
    infile,
    outfile,
    *,
    canvas_service: CanvasService = CanvasService(),
) -> None:
    """Load → duplicate → save.  Raises CanvasDupError subclasses on failure."""
    img = canvas_service.load(infile)
    canvas = duplicate_side_by_side(img, canvas_service=canvas_service)
    canvas_service.save(canvas, outfile)
