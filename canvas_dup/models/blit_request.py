from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Tuple
from .pixel_buffer import PixelBuffer


def clamp(val, lo, hi):
    if val < lo:
        return lo
    if val > hi:
        return hi
    return val


@dataclass(frozen=True)
class BlitRequest:
    """
    Value-object for one copy of *src* into *dest* at (x, y).
    Never stored; the blitter builds one per call.
    """
    src: PixelBuffer
    dest: PixelBuffer
    x: int
    y: int

    def in_bounds(self) -> bool:
        return 0 <= self.x < self.dest.width and 0 <= self.y < self.dest.height

    # ── Clamped copy region (only meaningful when in_bounds()) ──────
    @property
    def row_bytes(self) -> int:
        return clamp(self.src.width * 4, 0, (self.dest.width - self.x) * 4)

    @property
    def copy_width(self) -> int:
        return self.row_bytes // 4

    @property
    def copy_height(self) -> int:
        return clamp(self.src.height, 0, self.dest.height - self.y)

    def is_degenerate(self) -> bool:
        return self.copy_width < 1 or self.copy_height < 1

    def row_offsets(self) -> Iterator[Tuple[int, int]]:
        """
        Yield (src_offset, dest_offset) byte offsets for every copied row.
        """
        for i in range(self.copy_height):
            src_off = i * self.src.width * 4
            dest_off = ((self.y + i) * self.dest.width + self.x) * 4
            yield src_off, dest_off
