"""Base classes for vertical surface flipping"""
from abc import ABC, abstractmethod
import numpy as np
from numba import jit

from ..errors import DDSFormatError


@jit(nopython=True, cache=True)
def swap_blocks(data, source, target, size):
    """Swap two equally sized byte ranges of a surface in place"""
    for i in range(size):
        tmp = data[source + i]
        data[source + i] = data[target + i]
        data[target + i] = tmp


class SurfaceFlipper(ABC):
    """Base class for vertical flipping of one 2D slice of pixel data"""
    @abstractmethod
    def flip(self, data: np.ndarray, width: int, height: int) -> np.ndarray:
        """
        Flip a slice upside down in place

        Args:
            data: uint8 view of the slice's pixel data, modified in place
            width: Slice width in pixels
            height: Slice height in pixels

        Returns:
            The same array, flipped
        """
        pass


class BlockFlipper(SurfaceFlipper):
    """Flips block-compressed data: mirrored block rows are flipped internally, then swapped"""
    BYTES_PER_BLOCK: int = 16

    @staticmethod
    @abstractmethod
    def _flip_rows_jit(data, blocks_x, blocks_y):
        """
        Flip every block internally and swap mirrored block rows, in place

        Args:
            data: uint8 view of the slice's block data
            blocks_x: Blocks per row
            blocks_y: Rows of blocks
        """
        pass

    def flip(self, data: np.ndarray, width: int, height: int) -> np.ndarray:
        blocks_x = max(1, (width + 3) // 4)
        blocks_y = max(1, (height + 3) // 4)

        required = blocks_x * blocks_y * self.BYTES_PER_BLOCK
        if len(data) < required:
            raise DDSFormatError(
                f"Surface data too small to flip: expected {required} bytes for {width}x{height}, got {len(data)}"
            )

        # A single row of blocks is left as is, its rows stay inside each block
        self._flip_rows_jit(data, blocks_x, blocks_y)
        return data
