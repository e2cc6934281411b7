"""BC5 (ATI2) block flipping"""
from numba import jit
from .base import BlockFlipper, swap_blocks
from .bc4 import flip_bc4_block


@jit(nopython=True, cache=True)
def flip_bc5_block(data, offset):
    """
    Flip a BC5 block vertically in place

    BC5 stores two independent BC4 blocks per 16 bytes (red, then green).
    """
    flip_bc4_block(data, offset)
    flip_bc4_block(data, offset + 8)


class BC5Flipper(BlockFlipper):
    """BC5 (ATI2) vertical flip - Numba JIT"""
    BYTES_PER_BLOCK = 16

    @staticmethod
    @jit(nopython=True, cache=True)
    def _flip_rows_jit(data, blocks_x, blocks_y):
        """JIT-compiled block row processing for BC5"""
        for source_row in range(blocks_y // 2):
            target_row = blocks_y - source_row - 1
            for column in range(blocks_x):
                source = (source_row * blocks_x + column) * 16
                target = (target_row * blocks_x + column) * 16
                flip_bc5_block(data, source)
                flip_bc5_block(data, target)
                swap_blocks(data, source, target, 16)
