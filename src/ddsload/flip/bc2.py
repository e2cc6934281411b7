"""BC2 (DXT2/DXT3) block flipping"""
from numba import jit
from .base import BlockFlipper, swap_blocks
from .bc1 import flip_bc1_block


@jit(nopython=True, cache=True)
def flip_bc2_block(data, offset):
    """
    Flip a BC2 block vertically in place

    BC2 stores 4x4 pixel blocks in 16 bytes each:
    - 8 bytes: explicit 4-bit alpha, two bytes per pixel row
    - 8 bytes: BC1 color block
    """
    tmp = data[offset + 0]
    data[offset + 0] = data[offset + 6]
    data[offset + 6] = tmp

    tmp = data[offset + 1]
    data[offset + 1] = data[offset + 7]
    data[offset + 7] = tmp

    tmp = data[offset + 2]
    data[offset + 2] = data[offset + 4]
    data[offset + 4] = tmp

    tmp = data[offset + 3]
    data[offset + 3] = data[offset + 5]
    data[offset + 5] = tmp

    flip_bc1_block(data, offset + 8)


class BC2Flipper(BlockFlipper):
    """BC2 (DXT2/DXT3) vertical flip - Numba JIT"""
    BYTES_PER_BLOCK = 16

    @staticmethod
    @jit(nopython=True, cache=True)
    def _flip_rows_jit(data, blocks_x, blocks_y):
        """JIT-compiled block row processing for BC2"""
        for source_row in range(blocks_y // 2):
            target_row = blocks_y - source_row - 1
            for column in range(blocks_x):
                source = (source_row * blocks_x + column) * 16
                target = (target_row * blocks_x + column) * 16
                flip_bc2_block(data, source)
                flip_bc2_block(data, target)
                swap_blocks(data, source, target, 16)
