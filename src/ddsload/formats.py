"""Pixel format catalog: bits per pixel, classification and legacy format mapping"""
from typing import Dict, Iterable, Tuple

from .enums import DDPF, D3DFORMAT, DXGI_FORMAT
from .errors import InvalidFormatError


def _build_table(groups: Iterable[Tuple[int, Iterable[int]]]) -> Dict[int, int]:
    """Flatten (bits per pixel, formats) groups into a format -> bits per pixel table"""
    table = {}
    for bits, formats in groups:
        for fmt in formats:
            table[fmt] = bits
    return table


_DXGI_BITS_PER_PIXEL = _build_table((
    (0, (DXGI_FORMAT.UNKNOWN,)),
    (1, (DXGI_FORMAT.R1_UNORM,)),
    # Nominal values for block formats; doubled they give bytes per 4x4 block
    (4, (
        DXGI_FORMAT.BC1_TYPELESS, DXGI_FORMAT.BC1_UNORM, DXGI_FORMAT.BC1_UNORM_SRGB,
        DXGI_FORMAT.BC4_TYPELESS, DXGI_FORMAT.BC4_UNORM, DXGI_FORMAT.BC4_SNORM,
    )),
    (8, (
        DXGI_FORMAT.R8_TYPELESS, DXGI_FORMAT.R8_UNORM, DXGI_FORMAT.R8_UINT,
        DXGI_FORMAT.R8_SNORM, DXGI_FORMAT.R8_SINT, DXGI_FORMAT.A8_UNORM,
        DXGI_FORMAT.P8, DXGI_FORMAT.AI44, DXGI_FORMAT.IA44,
        DXGI_FORMAT.BC2_TYPELESS, DXGI_FORMAT.BC2_UNORM, DXGI_FORMAT.BC2_UNORM_SRGB,
        DXGI_FORMAT.BC3_TYPELESS, DXGI_FORMAT.BC3_UNORM, DXGI_FORMAT.BC3_UNORM_SRGB,
        DXGI_FORMAT.BC5_TYPELESS, DXGI_FORMAT.BC5_UNORM, DXGI_FORMAT.BC5_SNORM,
        DXGI_FORMAT.BC6H_TYPELESS, DXGI_FORMAT.BC6H_UF16, DXGI_FORMAT.BC6H_SF16,
        DXGI_FORMAT.BC7_TYPELESS, DXGI_FORMAT.BC7_UNORM, DXGI_FORMAT.BC7_UNORM_SRGB,
    )),
    (12, (DXGI_FORMAT.NV12, DXGI_FORMAT.OPAQUE_420, DXGI_FORMAT.NV11)),
    (16, (
        DXGI_FORMAT.R8G8_TYPELESS, DXGI_FORMAT.R8G8_UNORM, DXGI_FORMAT.R8G8_UINT,
        DXGI_FORMAT.R8G8_SNORM, DXGI_FORMAT.R8G8_SINT,
        DXGI_FORMAT.R16_TYPELESS, DXGI_FORMAT.R16_FLOAT, DXGI_FORMAT.D16_UNORM,
        DXGI_FORMAT.R16_UNORM, DXGI_FORMAT.R16_UINT, DXGI_FORMAT.R16_SNORM,
        DXGI_FORMAT.R16_SINT,
        DXGI_FORMAT.B5G6R5_UNORM, DXGI_FORMAT.B5G5R5A1_UNORM, DXGI_FORMAT.B4G4R4A4_UNORM,
        DXGI_FORMAT.R8G8_B8G8_UNORM, DXGI_FORMAT.G8R8_G8B8_UNORM,
        DXGI_FORMAT.A8P8, DXGI_FORMAT.YUY2, DXGI_FORMAT.P208, DXGI_FORMAT.V208,
    )),
    (24, (DXGI_FORMAT.P010, DXGI_FORMAT.P016, DXGI_FORMAT.V408)),
    (32, (
        DXGI_FORMAT.R10G10B10A2_TYPELESS, DXGI_FORMAT.R10G10B10A2_UNORM,
        DXGI_FORMAT.R10G10B10A2_UINT, DXGI_FORMAT.R11G11B10_FLOAT,
        DXGI_FORMAT.R8G8B8A8_TYPELESS, DXGI_FORMAT.R8G8B8A8_UNORM,
        DXGI_FORMAT.R8G8B8A8_UNORM_SRGB, DXGI_FORMAT.R8G8B8A8_UINT,
        DXGI_FORMAT.R8G8B8A8_SNORM, DXGI_FORMAT.R8G8B8A8_SINT,
        DXGI_FORMAT.R16G16_TYPELESS, DXGI_FORMAT.R16G16_FLOAT, DXGI_FORMAT.R16G16_UNORM,
        DXGI_FORMAT.R16G16_UINT, DXGI_FORMAT.R16G16_SNORM, DXGI_FORMAT.R16G16_SINT,
        DXGI_FORMAT.R32_TYPELESS, DXGI_FORMAT.D32_FLOAT, DXGI_FORMAT.R32_FLOAT,
        DXGI_FORMAT.R32_UINT, DXGI_FORMAT.R32_SINT,
        DXGI_FORMAT.R24G8_TYPELESS, DXGI_FORMAT.D24_UNORM_S8_UINT,
        DXGI_FORMAT.R24_UNORM_X8_TYPELESS, DXGI_FORMAT.X24_TYPELESS_G8_UINT,
        DXGI_FORMAT.R9G9B9E5_SHAREDEXP, DXGI_FORMAT.R10G10B10_XR_BIAS_A2_UNORM,
        DXGI_FORMAT.B8G8R8A8_TYPELESS, DXGI_FORMAT.B8G8R8A8_UNORM,
        DXGI_FORMAT.B8G8R8A8_UNORM_SRGB, DXGI_FORMAT.B8G8R8X8_TYPELESS,
        DXGI_FORMAT.B8G8R8X8_UNORM, DXGI_FORMAT.B8G8R8X8_UNORM_SRGB,
        DXGI_FORMAT.AYUV, DXGI_FORMAT.Y410, DXGI_FORMAT.Y210, DXGI_FORMAT.Y216,
    )),
    (64, (
        DXGI_FORMAT.R16G16B16A16_TYPELESS, DXGI_FORMAT.R16G16B16A16_FLOAT,
        DXGI_FORMAT.R16G16B16A16_UNORM, DXGI_FORMAT.R16G16B16A16_UINT,
        DXGI_FORMAT.R16G16B16A16_SNORM, DXGI_FORMAT.R16G16B16A16_SINT,
        DXGI_FORMAT.R32G32_TYPELESS, DXGI_FORMAT.R32G32_FLOAT,
        DXGI_FORMAT.R32G32_UINT, DXGI_FORMAT.R32G32_SINT,
        DXGI_FORMAT.R32G8X24_TYPELESS, DXGI_FORMAT.D32_FLOAT_S8X24_UINT,
        DXGI_FORMAT.R32_FLOAT_X8X24_TYPELESS, DXGI_FORMAT.X32_TYPELESS_G8X24_UINT,
        DXGI_FORMAT.Y416,
    )),
    (96, (
        DXGI_FORMAT.R32G32B32_TYPELESS, DXGI_FORMAT.R32G32B32_FLOAT,
        DXGI_FORMAT.R32G32B32_UINT, DXGI_FORMAT.R32G32B32_SINT,
    )),
    (128, (
        DXGI_FORMAT.R32G32B32A32_TYPELESS, DXGI_FORMAT.R32G32B32A32_FLOAT,
        DXGI_FORMAT.R32G32B32A32_UINT, DXGI_FORMAT.R32G32B32A32_SINT,
    )),
))

_D3D_BITS_PER_PIXEL = _build_table((
    # Sentinels that name no pixel layout
    (0, (D3DFORMAT.UNKNOWN, D3DFORMAT.VERTEXDATA, D3DFORMAT.BINARYBUFFER, D3DFORMAT.FORCE_DWORD)),
    (1, (D3DFORMAT.A1,)),
    (4, (D3DFORMAT.DXT1, D3DFORMAT.BC4U, D3DFORMAT.BC4S, D3DFORMAT.ATI1)),
    (8, (
        D3DFORMAT.R3G3B2, D3DFORMAT.A8, D3DFORMAT.P8, D3DFORMAT.L8, D3DFORMAT.A4L4,
        D3DFORMAT.S8_LOCKABLE,
        D3DFORMAT.DXT2, D3DFORMAT.DXT3, D3DFORMAT.DXT4, D3DFORMAT.DXT5,
        D3DFORMAT.BC5U, D3DFORMAT.BC5S, D3DFORMAT.ATI2,
    )),
    (16, (
        D3DFORMAT.R5G6B5, D3DFORMAT.X1R5G5B5, D3DFORMAT.A1R5G5B5, D3DFORMAT.A4R4G4B4,
        D3DFORMAT.A8R3G3B2, D3DFORMAT.X4R4G4B4, D3DFORMAT.A8P8, D3DFORMAT.A8L8,
        D3DFORMAT.V8U8, D3DFORMAT.L6V5U5, D3DFORMAT.UYVY, D3DFORMAT.YUY2,
        D3DFORMAT.R8G8_B8G8, D3DFORMAT.G8R8_G8B8, D3DFORMAT.D16, D3DFORMAT.D16_LOCKABLE,
        D3DFORMAT.D15S1, D3DFORMAT.L16, D3DFORMAT.INDEX16, D3DFORMAT.R16F, D3DFORMAT.CxV8U8,
    )),
    (24, (D3DFORMAT.R8G8B8,)),
    (32, (
        D3DFORMAT.A8R8G8B8, D3DFORMAT.X8R8G8B8, D3DFORMAT.A2B10G10R10, D3DFORMAT.A8B8G8R8,
        D3DFORMAT.X8B8G8R8, D3DFORMAT.G16R16, D3DFORMAT.A2R10G10B10, D3DFORMAT.X8L8V8U8,
        D3DFORMAT.Q8W8V8U8, D3DFORMAT.V16U16, D3DFORMAT.A2W10V10U10,
        D3DFORMAT.D32, D3DFORMAT.D32_LOCKABLE, D3DFORMAT.D32F_LOCKABLE, D3DFORMAT.D24S8,
        D3DFORMAT.D24X8, D3DFORMAT.D24X4S4, D3DFORMAT.D24FS8, D3DFORMAT.INDEX32,
        D3DFORMAT.G16R16F, D3DFORMAT.R32F, D3DFORMAT.A2B10G10R10_XR_BIAS,
        D3DFORMAT.MULTI2_ARGB8,
    )),
    (64, (
        D3DFORMAT.A16B16G16R16, D3DFORMAT.A16B16G16R16F, D3DFORMAT.Q16W16V16U16,
        D3DFORMAT.G32R32F,
    )),
    (128, (D3DFORMAT.A32B32G32R32F,)),
))

_DXGI_BLOCK_COMPRESSED = frozenset((
    DXGI_FORMAT.BC1_TYPELESS, DXGI_FORMAT.BC1_UNORM, DXGI_FORMAT.BC1_UNORM_SRGB,
    DXGI_FORMAT.BC2_TYPELESS, DXGI_FORMAT.BC2_UNORM, DXGI_FORMAT.BC2_UNORM_SRGB,
    DXGI_FORMAT.BC3_TYPELESS, DXGI_FORMAT.BC3_UNORM, DXGI_FORMAT.BC3_UNORM_SRGB,
    DXGI_FORMAT.BC4_TYPELESS, DXGI_FORMAT.BC4_UNORM, DXGI_FORMAT.BC4_SNORM,
    DXGI_FORMAT.BC5_TYPELESS, DXGI_FORMAT.BC5_UNORM, DXGI_FORMAT.BC5_SNORM,
    DXGI_FORMAT.BC6H_TYPELESS, DXGI_FORMAT.BC6H_UF16, DXGI_FORMAT.BC6H_SF16,
    DXGI_FORMAT.BC7_TYPELESS, DXGI_FORMAT.BC7_UNORM, DXGI_FORMAT.BC7_UNORM_SRGB,
))

_D3D_BLOCK_COMPRESSED = frozenset((
    D3DFORMAT.DXT1, D3DFORMAT.DXT2, D3DFORMAT.DXT3, D3DFORMAT.DXT4, D3DFORMAT.DXT5,
    D3DFORMAT.BC4U, D3DFORMAT.BC4S, D3DFORMAT.ATI1,
    D3DFORMAT.BC5U, D3DFORMAT.BC5S, D3DFORMAT.ATI2,
))

# Packed is not block-compressed: several pixels share one multi-byte element
_DXGI_PACKED = frozenset((
    DXGI_FORMAT.YUY2, DXGI_FORMAT.Y210, DXGI_FORMAT.Y216, DXGI_FORMAT.Y410,
    DXGI_FORMAT.Y416, DXGI_FORMAT.OPAQUE_420, DXGI_FORMAT.AI44, DXGI_FORMAT.AYUV,
    DXGI_FORMAT.IA44, DXGI_FORMAT.NV11, DXGI_FORMAT.NV12, DXGI_FORMAT.P010,
    DXGI_FORMAT.P016, DXGI_FORMAT.P208, DXGI_FORMAT.V208, DXGI_FORMAT.V408,
    DXGI_FORMAT.R8G8_B8G8_UNORM, DXGI_FORMAT.G8R8_G8B8_UNORM,
))

# Legacy 4:2:2 layouts: two pixels per 32-bit element
D3D_PACKED_422 = frozenset((
    D3DFORMAT.R8G8_B8G8, D3DFORMAT.G8R8_G8B8, D3DFORMAT.UYVY, D3DFORMAT.YUY2,
))

_D3D_TO_DXGI = {
    D3DFORMAT.A8: DXGI_FORMAT.A8_UNORM,
    D3DFORMAT.A8R8G8B8: DXGI_FORMAT.B8G8R8A8_UNORM,
    D3DFORMAT.X8R8G8B8: DXGI_FORMAT.B8G8R8X8_UNORM,
    D3DFORMAT.R5G6B5: DXGI_FORMAT.B5G6R5_UNORM,
    D3DFORMAT.A1R5G5B5: DXGI_FORMAT.B5G5R5A1_UNORM,
    D3DFORMAT.A4R4G4B4: DXGI_FORMAT.B4G4R4A4_UNORM,
    D3DFORMAT.A2B10G10R10: DXGI_FORMAT.R10G10B10A2_UNORM,
    D3DFORMAT.A8B8G8R8: DXGI_FORMAT.R8G8B8A8_UNORM,
    D3DFORMAT.G16R16: DXGI_FORMAT.R16G16_UNORM,
    D3DFORMAT.A16B16G16R16: DXGI_FORMAT.R16G16B16A16_UNORM,
    D3DFORMAT.L8: DXGI_FORMAT.R8_UNORM,
    D3DFORMAT.A8L8: DXGI_FORMAT.R8G8_UNORM,
    D3DFORMAT.V8U8: DXGI_FORMAT.R8G8_SNORM,
    D3DFORMAT.Q8W8V8U8: DXGI_FORMAT.R8G8B8A8_SNORM,
    D3DFORMAT.V16U16: DXGI_FORMAT.R16G16_SNORM,
    # The byte order names are swapped between the two APIs
    D3DFORMAT.R8G8_B8G8: DXGI_FORMAT.G8R8_G8B8_UNORM,
    D3DFORMAT.G8R8_G8B8: DXGI_FORMAT.R8G8_B8G8_UNORM,
    D3DFORMAT.YUY2: DXGI_FORMAT.YUY2,
    D3DFORMAT.D16: DXGI_FORMAT.D16_UNORM,
    D3DFORMAT.D16_LOCKABLE: DXGI_FORMAT.D16_UNORM,
    D3DFORMAT.D32F_LOCKABLE: DXGI_FORMAT.D32_FLOAT,
    D3DFORMAT.D24S8: DXGI_FORMAT.D24_UNORM_S8_UINT,
    D3DFORMAT.L16: DXGI_FORMAT.R16_UNORM,
    D3DFORMAT.INDEX16: DXGI_FORMAT.R16_UINT,
    D3DFORMAT.INDEX32: DXGI_FORMAT.R32_UINT,
    D3DFORMAT.Q16W16V16U16: DXGI_FORMAT.R16G16B16A16_SNORM,
    D3DFORMAT.R16F: DXGI_FORMAT.R16_FLOAT,
    D3DFORMAT.G16R16F: DXGI_FORMAT.R16G16_FLOAT,
    D3DFORMAT.A16B16G16R16F: DXGI_FORMAT.R16G16B16A16_FLOAT,
    D3DFORMAT.R32F: DXGI_FORMAT.R32_FLOAT,
    D3DFORMAT.G32R32F: DXGI_FORMAT.R32G32_FLOAT,
    D3DFORMAT.A32B32G32R32F: DXGI_FORMAT.R32G32B32A32_FLOAT,

    D3DFORMAT.DXT1: DXGI_FORMAT.BC1_UNORM,
    D3DFORMAT.DXT2: DXGI_FORMAT.BC2_UNORM,  # Premultiplied alpha
    D3DFORMAT.DXT3: DXGI_FORMAT.BC2_UNORM,
    D3DFORMAT.DXT4: DXGI_FORMAT.BC3_UNORM,  # Premultiplied alpha
    D3DFORMAT.DXT5: DXGI_FORMAT.BC3_UNORM,
    D3DFORMAT.BC4U: DXGI_FORMAT.BC4_UNORM,
    D3DFORMAT.ATI1: DXGI_FORMAT.BC4_UNORM,
    D3DFORMAT.BC4S: DXGI_FORMAT.BC4_SNORM,
    D3DFORMAT.BC5U: DXGI_FORMAT.BC5_UNORM,
    D3DFORMAT.ATI2: DXGI_FORMAT.BC5_UNORM,
    D3DFORMAT.BC5S: DXGI_FORMAT.BC5_SNORM,
}

# Exact (R, G, B, A) masks per DDPF family and bit count, most specific first.
# None matches any mask value.
_MASKS_RGBA = {
    32: (
        ((0xff, 0xff00, 0xff0000, 0xff000000), D3DFORMAT.A8B8G8R8),
        ((0xffff, 0xffff0000, None, None), D3DFORMAT.G16R16),
        ((0x3ff, 0xffc00, 0x3ff00000, None), D3DFORMAT.A2B10G10R10),
        ((0xff0000, 0xff00, 0xff, 0xff000000), D3DFORMAT.A8R8G8B8),
        ((0x3ff00000, 0xffc00, 0x3ff, 0xc0000000), D3DFORMAT.A2R10G10B10),
    ),
    16: (
        ((0x7c00, 0x3e0, 0x1f, 0x8000), D3DFORMAT.A1R5G5B5),
        ((0xf00, 0xf0, 0xf, 0xf000), D3DFORMAT.A4R4G4B4),
        ((0xe0, 0x1c, 0x3, 0xff00), D3DFORMAT.A8R3G3B2),
    ),
}

_MASKS_RGB = {
    32: (
        ((0xffff, 0xffff0000, None, None), D3DFORMAT.G16R16),
        ((0xff0000, 0xff00, 0xff, None), D3DFORMAT.X8R8G8B8),
        ((0xff, 0xff00, 0xff0000, None), D3DFORMAT.X8B8G8R8),
    ),
    24: (
        ((0xff0000, 0xff00, 0xff, None), D3DFORMAT.R8G8B8),
    ),
    16: (
        ((0xf800, 0x7e0, 0x1f, None), D3DFORMAT.R5G6B5),
        ((0x7c00, 0x3e0, 0x1f, None), D3DFORMAT.X1R5G5B5),
        ((0xf00, 0xf0, 0xf, None), D3DFORMAT.X4R4G4B4),
    ),
}

_MASKS_ALPHA = {
    8: (
        ((None, None, None, 0xff), D3DFORMAT.A8),
    ),
}

_MASKS_LUMINANCE = {
    16: (
        ((0xff, None, None, 0xff00), D3DFORMAT.A8L8),
        ((0xffff, None, None, None), D3DFORMAT.L16),
    ),
    8: (
        ((0xf, None, None, 0xf0), D3DFORMAT.A4L4),
        ((0xff, None, None, None), D3DFORMAT.L8),
    ),
}


def get_bits_per_pixel_dxgi(format: int) -> int:
    """
    Get the amount of bits per pixel for a DXGI format.

    Block-compressed formats report their nominal value (4 or 8), which doubled
    gives the amount of bytes per 4x4 block.

    Raises:
        InvalidFormatError: If the value is not a known DXGI format
    """
    bits = _DXGI_BITS_PER_PIXEL.get(format)
    if bits is None:
        raise InvalidFormatError(f"Can't get bpp for unknown DXGI format {format!r}")
    return bits


def get_bits_per_pixel_d3d(format: int) -> int:
    """
    Get the amount of bits per pixel for a legacy D3D format.

    Raises:
        InvalidFormatError: If the value is not a known D3D format
    """
    bits = _D3D_BITS_PER_PIXEL.get(format)
    if bits is None:
        raise InvalidFormatError(f"Can't get bpp for unknown D3D format {format!r}")
    return bits


def get_bits_per_pixel(format_d3d: int, format_dxgi: int) -> int:
    """
    Pick bits per pixel from a format pair, prioritizing the legacy D3D format.

    Raises:
        InvalidFormatError: If neither format gives an answer
    """
    if format_d3d != D3DFORMAT.UNKNOWN:
        try:
            return get_bits_per_pixel_d3d(format_d3d)
        except InvalidFormatError:
            pass
    if format_dxgi != DXGI_FORMAT.UNKNOWN:
        return get_bits_per_pixel_dxgi(format_dxgi)
    raise InvalidFormatError(
        f"Both formats were unknown (D3D {format_d3d!r}, DXGI {format_dxgi!r})"
    )


def is_block_compressed_dxgi(format: int) -> bool:
    """Check if a DXGI format stores 4x4 compressed blocks"""
    return format in _DXGI_BLOCK_COMPRESSED


def is_block_compressed_d3d(format: int) -> bool:
    """Check if a D3D format stores 4x4 compressed blocks"""
    return format in _D3D_BLOCK_COMPRESSED


def is_block_compressed(format_d3d: int, format_dxgi: int) -> bool:
    return is_block_compressed_d3d(format_d3d) or is_block_compressed_dxgi(format_dxgi)


def is_packed_dxgi(format: int) -> bool:
    """Check if a DXGI format is packed (video and 4:2:2 layouts, not block-compressed)"""
    return format in _DXGI_PACKED


def is_packed_d3d(format: int) -> bool:
    """Check if a D3D format is one of the 4:2:2 packed layouts"""
    return format in D3D_PACKED_422


def bytes_per_block(format: int) -> int:
    """Bytes per 4x4 block for a block-compressed DXGI format"""
    if not is_block_compressed_dxgi(format):
        raise InvalidFormatError(f"{format!r} is not a block-compressed DXGI format")
    return get_bits_per_pixel_dxgi(format) * 2


def d3d_to_dxgi(format: int) -> DXGI_FORMAT:
    """
    Map a legacy D3D format to its closest DXGI format.

    Returns:
        The DXGI equivalent, or DXGI_FORMAT.UNKNOWN if there is none
    """
    return _D3D_TO_DXGI.get(format, DXGI_FORMAT.UNKNOWN)


def _match_masks(table, pixelformat) -> D3DFORMAT:
    candidates = table.get(pixelformat.dwRGBBitCount, ())
    masks = (
        pixelformat.dwRBitMask,
        pixelformat.dwGBitMask,
        pixelformat.dwBBitMask,
        pixelformat.dwABitMask,
    )
    for expected, fmt in candidates:
        if all(want is None or want == got for want, got in zip(expected, masks)):
            return fmt
    return D3DFORMAT.UNKNOWN


def resolve_d3d_format(pixelformat) -> D3DFORMAT:
    """
    Resolve the legacy D3D format described by a DDS_PIXELFORMAT.

    Flag families are tested most specific first (RGBA, RGB, ALPHA, LUMINANCE,
    FOURCC), then the bit count, then the exact channel masks.

    Returns:
        The matching format, or D3DFORMAT.UNKNOWN when nothing matches
    """
    flags = pixelformat.dwFlags

    if flags & DDPF.RGBA == DDPF.RGBA:
        return _match_masks(_MASKS_RGBA, pixelformat)
    if flags & DDPF.RGB:
        return _match_masks(_MASKS_RGB, pixelformat)
    if flags & DDPF.ALPHA:
        return _match_masks(_MASKS_ALPHA, pixelformat)
    if flags & DDPF.LUMINANCE:
        return _match_masks(_MASKS_LUMINANCE, pixelformat)
    if flags & DDPF.FOURCC:
        try:
            return D3DFORMAT(pixelformat.dwFourCC)
        except ValueError:
            # DX10 and vendor-specific codes have no D3D counterpart
            return D3DFORMAT.UNKNOWN

    return D3DFORMAT.UNKNOWN
