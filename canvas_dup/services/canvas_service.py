from pathlib import Path
from typing import Tuple, Union
from ..models.pixel_buffer import PixelBuffer
from ..repositories.pixel_buffer_repository import PixelBufferRepository
from .blitter_service import BlitterService


class CanvasService:
    """Business facade over codec I/O and the blitter.  No pixel math here."""

    def __init__(self):
        self.repository = PixelBufferRepository()
        self.blitter = BlitterService()

    def create_canvas(self, width: int, height: int) -> PixelBuffer:
        """Blank (all-zero) canvas of the given size."""
        return self.repository.create_blank(width, height)

    def load(self, path: Union[str, Path]) -> PixelBuffer:
        """Load a single image from disk as RGBA8."""
        return self.repository.load(path)

    def save(self, buf: PixelBuffer, path: Union[str, Path] = None) -> None:
        """
        Save *buf* to *path* (or to buf.path); the format follows the extension.
        """
        self.repository.save(buf, path)

    def blit(self, dest: PixelBuffer, src: PixelBuffer, x: int, y: int) -> None:
        self.blitter.blit(dest, src, x, y)

    def get_dimensions(self, buf: PixelBuffer) -> Tuple[int, int]:
        return self.repository.retrieve_dimensions(buf)
