"""BC1 (DXT1) block flipping"""
from numba import jit
from .base import BlockFlipper, swap_blocks


@jit(nopython=True, cache=True)
def flip_bc1_block(data, offset):
    """
    Flip a BC1 block vertically in place

    BC1 stores 4x4 pixel blocks in 8 bytes each:
    - 2 bytes: color0 (RGB565)
    - 2 bytes: color1 (RGB565)
    - 4 bytes: 2-bit indices, one byte per pixel row
    """
    tmp = data[offset + 4]
    data[offset + 4] = data[offset + 7]
    data[offset + 7] = tmp

    tmp = data[offset + 5]
    data[offset + 5] = data[offset + 6]
    data[offset + 6] = tmp


class BC1Flipper(BlockFlipper):
    """BC1 (DXT1) vertical flip - Numba JIT"""
    BYTES_PER_BLOCK = 8

    @staticmethod
    @jit(nopython=True, cache=True)
    def _flip_rows_jit(data, blocks_x, blocks_y):
        """JIT-compiled block row processing for BC1"""
        for source_row in range(blocks_y // 2):
            target_row = blocks_y - source_row - 1
            for column in range(blocks_x):
                source = (source_row * blocks_x + column) * 8
                target = (target_row * blocks_x + column) * 8
                flip_bc1_block(data, source)
                flip_bc1_block(data, target)
                swap_blocks(data, source, target, 8)
