"""BC4 (ATI1) block flipping"""
import numpy as np
from numba import jit
from .base import BlockFlipper, swap_blocks


@jit(nopython=True, cache=True)
def flip_bc4_block(data, offset):
    """
    Flip a BC4 block vertically in place

    BC4 stores 4x4 pixel blocks in 8 bytes each:
    - 1 byte: value0 endpoint
    - 1 byte: value1 endpoint
    - 6 bytes: 16 3-bit indices, 12 bits per pixel row

    The index bytes don't map to rows, so they are read as two 24-bit halves
    (rows 0-1 and rows 2-3). Each half swaps its two rows and the halves
    trade places.
    """
    line01 = (np.int64(data[offset + 2])
              | (np.int64(data[offset + 3]) << 8)
              | (np.int64(data[offset + 4]) << 16))
    line23 = (np.int64(data[offset + 5])
              | (np.int64(data[offset + 6]) << 8)
              | (np.int64(data[offset + 7]) << 16))

    line10 = ((line01 & 0x000fff) << 12) | ((line01 & 0xfff000) >> 12)
    line32 = ((line23 & 0x000fff) << 12) | ((line23 & 0xfff000) >> 12)

    data[offset + 2] = line32 & 0xff
    data[offset + 3] = (line32 >> 8) & 0xff
    data[offset + 4] = (line32 >> 16) & 0xff
    data[offset + 5] = line10 & 0xff
    data[offset + 6] = (line10 >> 8) & 0xff
    data[offset + 7] = (line10 >> 16) & 0xff


class BC4Flipper(BlockFlipper):
    """BC4 vertical flip - Numba JIT"""
    BYTES_PER_BLOCK = 8

    @staticmethod
    @jit(nopython=True, cache=True)
    def _flip_rows_jit(data, blocks_x, blocks_y):
        """JIT-compiled block row processing for BC4"""
        for source_row in range(blocks_y // 2):
            target_row = blocks_y - source_row - 1
            for column in range(blocks_x):
                source = (source_row * blocks_x + column) * 8
                target = (target_row * blocks_x + column) * 8
                flip_bc4_block(data, source)
                flip_bc4_block(data, target)
                swap_blocks(data, source, target, 8)
