"""Vertical flipping for uncompressed and packed formats"""
import numpy as np
from .base import SurfaceFlipper
from ..errors import DDSFormatError


class UncompressedFlipper(SurfaceFlipper):
    """Naive row swap: each scanline is width * (bits_per_pixel // 8) bytes.

    Packed formats are flipped the same way, which is not verified for the
    more obscure layouts.
    """

    def __init__(self, bits_per_pixel: int) -> None:
        self.bytes_per_pixel = bits_per_pixel // 8

    def flip(self, data: np.ndarray, width: int, height: int) -> np.ndarray:
        row_bytes = width * self.bytes_per_pixel
        if row_bytes == 0 or height < 2:
            return data

        required = row_bytes * height
        if len(data) < required:
            raise DDSFormatError(
                f"Surface data too small to flip: expected {required} bytes for {width}x{height}, got {len(data)}"
            )

        rows = data[:required].reshape(height, row_bytes)
        rows[:] = rows[::-1].copy()
        return data
