from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import numpy as np


@dataclass
class PixelBuffer:
    """
    Simple data object: RGBA8 pixels (+ optional source path for bookkeeping).
    Width and height come from the array shape and never change.
    """
    pixels: np.ndarray  # Shape (H, W, 4), dtype uint8, RGBA order, C-contiguous.
    path: Path | None = None  # Source of the image.

    def __post_init__(self):
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 4:
            raise ValueError(f"Expected (H, W, 4) RGBA pixels, got shape {self.pixels.shape}")
        if self.pixels.dtype != np.uint8:
            raise ValueError(f"Expected uint8 pixels, got {self.pixels.dtype}")
        if not self.pixels.flags['C_CONTIGUOUS']:
            self.pixels = np.ascontiguousarray(self.pixels)

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def data(self) -> np.ndarray:
        """Flat row-major byte view (width * height * 4) sharing memory with pixels."""
        return self.pixels.reshape(-1)
