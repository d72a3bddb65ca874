import logging
from ..models.pixel_buffer import PixelBuffer
from ..models.blit_request import BlitRequest
from ..models.errors import OutOfBoundsError

logger = logging.getLogger(__name__)


class BlitterService:
    """
    Copies one PixelBuffer into another at a top-left offset.

    • Offsets outside the destination raise OutOfBoundsError and leave it untouched.
    • A source larger than the space left is cropped at its bottom/right edge.
    • Pure overwrite: no scaling, no alpha blending.
    """

    @staticmethod
    def blit(dest: PixelBuffer, src: PixelBuffer, x: int, y: int) -> None:
        """
        Args:
            dest (PixelBuffer): Buffer mutated in place.
            src (PixelBuffer): Buffer read from; must not be *dest*.
            x (int): Destination column of the source's top-left pixel.
            y (int): Destination row of the source's top-left pixel.

        Raises:
            OutOfBoundsError: (x, y) does not lie inside *dest*.
        """
        request = BlitRequest(src=src, dest=dest, x=x, y=y)
        if not request.in_bounds():
            raise OutOfBoundsError("Invalid position")

        if request.is_degenerate():
            logger.debug(f"Nothing to copy at ({x},{y})")
            return

        logger.debug(
            f"Blit {src.width}x{src.height} → ({x},{y}) of {dest.width}x{dest.height}: "
            f"copying {request.copy_width}x{request.copy_height}"
        )

        row_bytes = request.row_bytes
        src_data, dest_data = src.data, dest.data
        for src_off, dest_off in request.row_offsets():
            # numpy rejects the assignment if either slice were short
            dest_data[dest_off:dest_off + row_bytes] = src_data[src_off:src_off + row_bytes]
