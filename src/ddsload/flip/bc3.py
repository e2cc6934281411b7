"""BC3 (DXT4/DXT5) block flipping"""
from numba import jit
from .base import BlockFlipper, swap_blocks
from .bc1 import flip_bc1_block
from .bc4 import flip_bc4_block


@jit(nopython=True, cache=True)
def flip_bc3_block(data, offset):
    """
    Flip a BC3 block vertically in place

    BC3 stores 4x4 pixel blocks in 16 bytes each:
    - 8 bytes: interpolated alpha, laid out exactly like a BC4 block
    - 8 bytes: BC1 color block
    """
    flip_bc4_block(data, offset)
    flip_bc1_block(data, offset + 8)


class BC3Flipper(BlockFlipper):
    """BC3 (DXT4/DXT5) vertical flip - Numba JIT"""
    BYTES_PER_BLOCK = 16

    @staticmethod
    @jit(nopython=True, cache=True)
    def _flip_rows_jit(data, blocks_x, blocks_y):
        """JIT-compiled block row processing for BC3"""
        for source_row in range(blocks_y // 2):
            target_row = blocks_y - source_row - 1
            for column in range(blocks_x):
                source = (source_row * blocks_x + column) * 16
                target = (target_row * blocks_x + column) * 16
                flip_bc3_block(data, source)
                flip_bc3_block(data, target)
                swap_blocks(data, source, target, 16)
