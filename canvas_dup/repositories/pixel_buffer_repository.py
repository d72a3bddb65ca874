from io import BytesIO
from pathlib import Path
from typing import Union
import logging
import numpy as np
from PIL import Image as PILImage
from ..models.pixel_buffer import PixelBuffer
from ..models.errors import DecodeError, EncodeError

logger = logging.getLogger(__name__)

# Pillow raises a mix of these for unreadable / unsupported data
_CODEC_ERRORS = (OSError, ValueError, KeyError, SyntaxError, PILImage.DecompressionBombError)

# Single-channel modes wider than 8 bits; scaled down, not clipped
_WIDE_GRAY_MODES = {"I", "I;16", "I;16L", "I;16B", "I;16N"}
# Formats with no alpha channel; alpha is dropped before encoding
_OPAQUE_FORMATS = {"JPEG"}


class PixelBufferRepository:
    """
    Handles codec I/O (Pillow) and allocation for PixelBuffer entities.
    """

    @staticmethod
    def create(pixels: np.ndarray, path: Union[str, Path] = None) -> PixelBuffer:
        if path is None:
            return PixelBuffer(pixels)
        return PixelBuffer(pixels=pixels, path=Path(path))

    @staticmethod
    def create_blank(width: int, height: int) -> PixelBuffer:
        """All-zero (transparent black) RGBA8 buffer."""
        if width < 1 or height < 1:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        return PixelBuffer(np.zeros((height, width, 4), dtype=np.uint8))

    def retrieve_dimensions(self, buf: PixelBuffer):
        return buf.width, buf.height

    @staticmethod
    def _narrow_gray(pil_obj: PILImage.Image) -> PILImage.Image:
        """16-bit (or 32-bit int) grey → 8-bit L keeping the high byte."""
        wide = np.asarray(pil_obj).astype(np.int64)
        return PILImage.fromarray(np.clip(wide >> 8, 0, 255).astype(np.uint8))

    @staticmethod
    def decode(raw: bytes, path: Union[str, Path] = None) -> PixelBuffer:
        try:
            with PILImage.open(BytesIO(raw)) as pil_obj:
                src_mode = pil_obj.mode
                if src_mode in _WIDE_GRAY_MODES:
                    rgba = PixelBufferRepository._narrow_gray(pil_obj).convert("RGBA")
                else:
                    rgba = pil_obj.convert("RGBA")
        except _CODEC_ERRORS as err:
            raise DecodeError("Could not decode image") from err

        pixels = np.array(rgba, dtype=np.uint8)
        logger.debug(f"Decoded {rgba.width}x{rgba.height} image (source mode {src_mode})")
        return PixelBufferRepository.create(pixels, path)

    @staticmethod
    def encode(buf: PixelBuffer, fmt: str) -> bytes:
        out = BytesIO()
        try:
            pil_obj = PILImage.fromarray(buf.pixels)
            if fmt in _OPAQUE_FORMATS:
                pil_obj = pil_obj.convert("RGB")
            pil_obj.save(out, format=fmt)
        except _CODEC_ERRORS as err:
            raise EncodeError("Could not save image") from err
        return out.getvalue()

    @staticmethod
    def format_for(path: Union[str, Path]) -> str:
        """Pillow format name registered for the file extension of *path*."""
        ext = Path(path).suffix.lower()
        fmt = PILImage.registered_extensions().get(ext)
        if fmt is None:
            raise EncodeError("Could not save image")
        return fmt

    def load(self, path: Union[str, Path]) -> PixelBuffer:
        path = Path(path)
        try:
            raw = path.read_bytes()
        except OSError as err:
            raise DecodeError("Could not load file") from err

        logger.debug(f"Loading: {path} ({len(raw)} bytes)")
        return self.decode(raw, path)

    def save(self, buf: PixelBuffer, path: Union[str, Path] = None) -> None:
        """
        Encode fully in memory before touching the file, so a codec failure
        never leaves a half-written output behind.
        """
        path = Path(path) if path is not None else buf.path
        if path is None:
            raise EncodeError("Could not save image")

        encoded = self.encode(buf, self.format_for(path))
        try:
            path.write_bytes(encoded)
        except OSError as err:
            raise EncodeError("Could not save image") from err
        logger.debug(f"Saved: {path} ({len(encoded)} bytes)")
