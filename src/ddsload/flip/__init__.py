"""Vertical flip implementations"""
import numpy as np

from .base import SurfaceFlipper, BlockFlipper
from .bc1 import BC1Flipper
from .bc2 import BC2Flipper
from .bc3 import BC3Flipper
from .bc4 import BC4Flipper
from .bc5 import BC5Flipper
from .uncompressed import UncompressedFlipper
from ..enums import DXGI_FORMAT
from ..errors import UnsupportedFlipError
from ..formats import d3d_to_dxgi, get_bits_per_pixel, is_block_compressed

__all__ = [
    'SurfaceFlipper',
    'BlockFlipper',
    'BC1Flipper',
    'BC2Flipper',
    'BC3Flipper',
    'BC4Flipper',
    'BC5Flipper',
    'UncompressedFlipper',
    'get_flipper',
    'flip_surface',
]


def get_flipper(format_d3d: int, format_dxgi: int) -> SurfaceFlipper:
    """
    Select the flipper for a format pair

    Raises:
        UnsupportedFlipError: For BC6H and BC7, whose blocks can't be flipped
    """
    if not is_block_compressed(format_d3d, format_dxgi):
        return UncompressedFlipper(get_bits_per_pixel(format_d3d, format_dxgi))

    # Every D3D block format has a DXGI counterpart
    block_format = format_dxgi if format_dxgi != DXGI_FORMAT.UNKNOWN else d3d_to_dxgi(format_d3d)

    if block_format in (DXGI_FORMAT.BC1_UNORM, DXGI_FORMAT.BC1_UNORM_SRGB, DXGI_FORMAT.BC1_TYPELESS):
        return BC1Flipper()
    if block_format in (DXGI_FORMAT.BC2_UNORM, DXGI_FORMAT.BC2_UNORM_SRGB, DXGI_FORMAT.BC2_TYPELESS):
        return BC2Flipper()
    if block_format in (DXGI_FORMAT.BC3_UNORM, DXGI_FORMAT.BC3_UNORM_SRGB, DXGI_FORMAT.BC3_TYPELESS):
        return BC3Flipper()
    if block_format in (DXGI_FORMAT.BC4_UNORM, DXGI_FORMAT.BC4_SNORM, DXGI_FORMAT.BC4_TYPELESS):
        return BC4Flipper()
    if block_format in (DXGI_FORMAT.BC5_UNORM, DXGI_FORMAT.BC5_SNORM, DXGI_FORMAT.BC5_TYPELESS):
        return BC5Flipper()

    name = getattr(block_format, 'name', block_format)
    raise UnsupportedFlipError(f"Unsupported format for flip: {name}")


def flip_surface(data: bytearray, width: int, height: int, format_d3d: int, format_dxgi: int,
                 depth: int = 1) -> bytearray:
    """
    Vertically flip a surface's pixel data in place.

    Block-compressed surfaces of 2 pixels or less in either direction are left
    untouched. Volume surfaces flip each of their depth slices separately.

    Args:
        data: Pixel data of the whole surface, modified in place
        width: Surface width in pixels
        height: Surface height in pixels
        format_d3d: Legacy D3D format, can be used instead of format_dxgi
        format_dxgi: DXGI format, can be used instead of format_d3d
        depth: Number of depth slices stored in data

    Returns:
        The same buffer, flipped

    Raises:
        UnsupportedFlipError: For BC6H and BC7 surfaces
        DDSFormatError: If data is too small for the given dimensions
    """
    if not data:
        return data
    if is_block_compressed(format_d3d, format_dxgi) and (width <= 2 or height <= 2):
        return data

    flipper = get_flipper(format_d3d, format_dxgi)
    pixels = np.frombuffer(data, dtype=np.uint8)
    slice_size = len(pixels) // max(1, depth)
    for index in range(max(1, depth)):
        flipper.flip(pixels[index * slice_size:(index + 1) * slice_size], width, height)

    return data
