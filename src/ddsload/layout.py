"""Surface size arithmetic: pitch, linear size and row counts"""
from .formats import (
    bytes_per_block,
    d3d_to_dxgi,
    get_bits_per_pixel,
    is_block_compressed,
    is_block_compressed_d3d,
    is_packed_d3d,
    is_packed_dxgi,
)


def _block_size(format_d3d: int, format_dxgi: int) -> int:
    # The legacy format wins when both are set
    if is_block_compressed_d3d(format_d3d):
        return bytes_per_block(d3d_to_dxgi(format_d3d))
    return bytes_per_block(format_dxgi)


def compute_bc_pitch(dimension: int, block_size: int) -> int:
    """Bytes per row of 4x4 blocks"""
    return max(1, (dimension + 3) // 4) * block_size


def compute_bc_linear_size(width: int, height: int, block_size: int) -> int:
    """Bytes needed to hold a block-compressed surface"""
    return compute_bc_pitch(width, block_size) * max(1, (height + 3) // 4)


def compute_uncompressed_pitch(dimension: int, bits_per_pixel: int) -> int:
    """Bytes per scanline of a generic uncompressed format, rounded up to whole bytes"""
    return max(1, (dimension * bits_per_pixel + 7) // 8)


def compute_uncompressed_linear_size(width: int, height: int, bits_per_pixel: int) -> int:
    return compute_uncompressed_pitch(width, bits_per_pixel) * height


def compute_pitch(dimension: int, format_d3d: int, format_dxgi: int, default_pitch_or_linear_size: int = 0) -> int:
    """
    Compute the pitch (bytes per scanline) for a dimension in the given format.
    For block-compressed formats this is the amount of bytes per row of blocks.

    The dwPitchOrLinearSize header field is not used directly because writers
    fill it in unreliably; it is only trusted for packed formats whose layout
    cannot be derived here.

    Args:
        dimension: Width (or height) in pixels, must be positive
        format_d3d: Legacy D3D format, can be used instead of format_dxgi
        format_dxgi: DXGI format, can be used instead of format_d3d
        default_pitch_or_linear_size: Value returned for unhandled packed formats

    Returns:
        Pitch in bytes
    """
    if dimension <= 0:
        raise ValueError(f"Dimension must be positive, got {dimension}")

    if is_block_compressed(format_d3d, format_dxgi):
        return compute_bc_pitch(dimension, _block_size(format_d3d, format_dxgi))

    if is_packed_d3d(format_d3d):
        return max(1, (dimension + 1) >> 1) * 4

    # Best effort: other packed layouts are untested, trust the header
    if is_packed_dxgi(format_dxgi):
        return default_pitch_or_linear_size

    return compute_uncompressed_pitch(dimension, get_bits_per_pixel(format_d3d, format_dxgi))


def compute_linear_size(width: int, height: int, format_d3d: int, format_dxgi: int,
                        default_pitch_or_linear_size: int = 0) -> int:
    """
    Compute the amount of bytes occupied by one surface of the given dimensions.

    Args:
        width: Surface width in pixels
        height: Surface height in pixels
        format_d3d: Legacy D3D format, can be used instead of format_dxgi
        format_dxgi: DXGI format, can be used instead of format_d3d
        default_pitch_or_linear_size: Pitch used for unhandled packed formats

    Returns:
        Linear size in bytes
    """
    if is_block_compressed(format_d3d, format_dxgi):
        return compute_bc_linear_size(width, height, _block_size(format_d3d, format_dxgi))

    if is_packed_d3d(format_d3d):
        return ((width + 1) >> 1) * 4 * height

    if is_packed_dxgi(format_dxgi):
        return default_pitch_or_linear_size * height

    return compute_uncompressed_linear_size(width, height, get_bits_per_pixel(format_d3d, format_dxgi))


def compute_row_count(height: int, format_d3d: int, format_dxgi: int) -> int:
    """Number of rows in a surface: rows of blocks for block-compressed formats, scanlines otherwise"""
    if is_block_compressed(format_d3d, format_dxgi):
        return max(1, (height + 3) // 4)
    return height
