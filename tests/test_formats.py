"""Tests for the pixel format catalog."""

import pytest

from ddsload.enums import DDPF, D3DFORMAT, DXGI_FORMAT, FourCC
from ddsload.errors import InvalidFormatError
from ddsload.formats import (
    bytes_per_block,
    d3d_to_dxgi,
    get_bits_per_pixel,
    get_bits_per_pixel_d3d,
    get_bits_per_pixel_dxgi,
    is_block_compressed,
    is_block_compressed_d3d,
    is_block_compressed_dxgi,
    is_packed_d3d,
    is_packed_dxgi,
    resolve_d3d_format,
)
from ddsload.headers import DDS_PIXELFORMAT


def _pixelformat(flags, bit_count=0, masks=(0, 0, 0, 0), fourcc=0):
    pf = DDS_PIXELFORMAT()
    pf.dwFlags = DDPF(flags)
    pf.dwRGBBitCount = bit_count
    pf.dwRBitMask, pf.dwGBitMask, pf.dwBBitMask, pf.dwABitMask = masks
    pf.dwFourCC = fourcc
    return pf


class TestBitsPerPixel:
    def test_every_dxgi_member_is_known(self):
        for fmt in DXGI_FORMAT:
            assert get_bits_per_pixel_dxgi(fmt) >= 0

    def test_every_d3d_member_is_known(self):
        for fmt in D3DFORMAT:
            assert get_bits_per_pixel_d3d(fmt) >= 0

    @pytest.mark.parametrize("fmt, bits", [
        (DXGI_FORMAT.UNKNOWN, 0),
        (DXGI_FORMAT.R1_UNORM, 1),
        (DXGI_FORMAT.BC1_UNORM, 4),
        (DXGI_FORMAT.BC4_SNORM, 4),
        (DXGI_FORMAT.BC3_UNORM, 8),
        (DXGI_FORMAT.BC7_UNORM_SRGB, 8),
        (DXGI_FORMAT.R8_UNORM, 8),
        (DXGI_FORMAT.NV12, 12),
        (DXGI_FORMAT.B5G6R5_UNORM, 16),
        (DXGI_FORMAT.B8G8R8A8_UNORM, 32),
        (DXGI_FORMAT.R16G16B16A16_UNORM, 64),
        (DXGI_FORMAT.R32G32B32_FLOAT, 96),
        (DXGI_FORMAT.R32G32B32A32_FLOAT, 128),
    ])
    def test_dxgi_values(self, fmt, bits):
        assert get_bits_per_pixel_dxgi(fmt) == bits

    @pytest.mark.parametrize("fmt, bits", [
        (D3DFORMAT.UNKNOWN, 0),
        (D3DFORMAT.VERTEXDATA, 0),
        (D3DFORMAT.BINARYBUFFER, 0),
        (D3DFORMAT.FORCE_DWORD, 0),
        (D3DFORMAT.A1, 1),
        (D3DFORMAT.DXT1, 4),
        (D3DFORMAT.DXT5, 8),
        (D3DFORMAT.L8, 8),
        (D3DFORMAT.YUY2, 16),
        (D3DFORMAT.R8G8B8, 24),
        (D3DFORMAT.A8R8G8B8, 32),
        (D3DFORMAT.A16B16G16R16F, 64),
        (D3DFORMAT.A32B32G32R32F, 128),
    ])
    def test_d3d_values(self, fmt, bits):
        assert get_bits_per_pixel_d3d(fmt) == bits

    def test_values_outside_enumeration_raise(self):
        with pytest.raises(InvalidFormatError):
            get_bits_per_pixel_dxgi(999)
        with pytest.raises(InvalidFormatError):
            get_bits_per_pixel_d3d(12345)

    def test_combined_lookup_prefers_legacy(self):
        assert get_bits_per_pixel(D3DFORMAT.R8G8B8, DXGI_FORMAT.R8G8B8A8_UNORM) == 24
        assert get_bits_per_pixel(D3DFORMAT.UNKNOWN, DXGI_FORMAT.R8G8B8A8_UNORM) == 32

    def test_combined_lookup_with_both_unknown_raises(self):
        with pytest.raises(InvalidFormatError):
            get_bits_per_pixel(D3DFORMAT.UNKNOWN, DXGI_FORMAT.UNKNOWN)


class TestClassification:
    def test_block_compressed(self):
        assert is_block_compressed_dxgi(DXGI_FORMAT.BC7_UNORM)
        assert is_block_compressed_d3d(D3DFORMAT.ATI2)
        assert not is_block_compressed_dxgi(DXGI_FORMAT.R8G8B8A8_UNORM)
        assert not is_block_compressed_d3d(D3DFORMAT.A8R8G8B8)
        assert is_block_compressed(D3DFORMAT.DXT1, DXGI_FORMAT.UNKNOWN)
        assert is_block_compressed(D3DFORMAT.UNKNOWN, DXGI_FORMAT.BC5_SNORM)
        assert not is_block_compressed(D3DFORMAT.UNKNOWN, DXGI_FORMAT.UNKNOWN)

    def test_packed(self):
        assert is_packed_dxgi(DXGI_FORMAT.YUY2)
        assert is_packed_dxgi(DXGI_FORMAT.NV12)
        assert not is_packed_dxgi(DXGI_FORMAT.BC1_UNORM)
        assert is_packed_d3d(D3DFORMAT.UYVY)
        assert not is_packed_d3d(D3DFORMAT.A8R8G8B8)

    @pytest.mark.parametrize("fmt, size", [
        (DXGI_FORMAT.BC1_UNORM, 8),
        (DXGI_FORMAT.BC4_UNORM, 8),
        (DXGI_FORMAT.BC2_UNORM, 16),
        (DXGI_FORMAT.BC3_UNORM_SRGB, 16),
        (DXGI_FORMAT.BC5_UNORM, 16),
        (DXGI_FORMAT.BC6H_UF16, 16),
        (DXGI_FORMAT.BC7_UNORM, 16),
    ])
    def test_bytes_per_block(self, fmt, size):
        assert bytes_per_block(fmt) == size


class TestLegacyToDxgi:
    @pytest.mark.parametrize("legacy, modern", [
        (D3DFORMAT.DXT1, DXGI_FORMAT.BC1_UNORM),
        (D3DFORMAT.DXT2, DXGI_FORMAT.BC2_UNORM),
        (D3DFORMAT.DXT3, DXGI_FORMAT.BC2_UNORM),
        (D3DFORMAT.DXT4, DXGI_FORMAT.BC3_UNORM),
        (D3DFORMAT.DXT5, DXGI_FORMAT.BC3_UNORM),
        (D3DFORMAT.ATI1, DXGI_FORMAT.BC4_UNORM),
        (D3DFORMAT.BC4U, DXGI_FORMAT.BC4_UNORM),
        (D3DFORMAT.BC4S, DXGI_FORMAT.BC4_SNORM),
        (D3DFORMAT.ATI2, DXGI_FORMAT.BC5_UNORM),
        (D3DFORMAT.A8R8G8B8, DXGI_FORMAT.B8G8R8A8_UNORM),
        (D3DFORMAT.A8B8G8R8, DXGI_FORMAT.R8G8B8A8_UNORM),
        (D3DFORMAT.L8, DXGI_FORMAT.R8_UNORM),
    ])
    def test_mapping(self, legacy, modern):
        assert d3d_to_dxgi(legacy) == modern

    def test_formats_without_equivalent(self):
        assert d3d_to_dxgi(D3DFORMAT.R8G8B8) == DXGI_FORMAT.UNKNOWN
        assert d3d_to_dxgi(D3DFORMAT.UNKNOWN) == DXGI_FORMAT.UNKNOWN


class TestResolveD3DFormat:
    def test_rgba_masks(self):
        pf = _pixelformat(DDPF.RGB | DDPF.ALPHAPIXELS, 32, (0xFF0000, 0xFF00, 0xFF, 0xFF000000))
        assert resolve_d3d_format(pf) == D3DFORMAT.A8R8G8B8

        pf = _pixelformat(DDPF.RGB | DDPF.ALPHAPIXELS, 32, (0xFF, 0xFF00, 0xFF0000, 0xFF000000))
        assert resolve_d3d_format(pf) == D3DFORMAT.A8B8G8R8

    def test_rgb_masks(self):
        assert resolve_d3d_format(_pixelformat(DDPF.RGB, 24, (0xFF0000, 0xFF00, 0xFF, 0))) == D3DFORMAT.R8G8B8
        assert resolve_d3d_format(_pixelformat(DDPF.RGB, 16, (0xF800, 0x7E0, 0x1F, 0))) == D3DFORMAT.R5G6B5
        assert resolve_d3d_format(_pixelformat(DDPF.RGB, 32, (0xFF0000, 0xFF00, 0xFF, 0))) == D3DFORMAT.X8R8G8B8

    def test_alpha_and_luminance(self):
        assert resolve_d3d_format(_pixelformat(DDPF.ALPHA, 8, (0, 0, 0, 0xFF))) == D3DFORMAT.A8
        assert resolve_d3d_format(_pixelformat(DDPF.LUMINANCE, 8, (0xFF, 0, 0, 0))) == D3DFORMAT.L8
        pf = _pixelformat(DDPF.LUMINANCE | DDPF.ALPHAPIXELS, 16, (0xFF, 0, 0, 0xFF00))
        assert resolve_d3d_format(pf) == D3DFORMAT.A8L8

    def test_fourcc(self):
        assert resolve_d3d_format(_pixelformat(DDPF.FOURCC, fourcc=FourCC.DXT5)) == D3DFORMAT.DXT5
        assert resolve_d3d_format(_pixelformat(DDPF.FOURCC, fourcc=FourCC.ATI2)) == D3DFORMAT.ATI2

    def test_fourcc_outside_d3d_formats_is_unknown(self):
        assert resolve_d3d_format(_pixelformat(DDPF.FOURCC, fourcc=FourCC.DX10)) == D3DFORMAT.UNKNOWN
        assert resolve_d3d_format(_pixelformat(DDPF.FOURCC, fourcc=0x12345678)) == D3DFORMAT.UNKNOWN

    def test_unmatched_masks_are_unknown(self):
        assert resolve_d3d_format(_pixelformat(DDPF.RGB, 32, (1, 2, 4, 0))) == D3DFORMAT.UNKNOWN
        assert resolve_d3d_format(_pixelformat(DDPF.RGB, 12, (0xF00, 0xF0, 0xF, 0))) == D3DFORMAT.UNKNOWN
        assert resolve_d3d_format(_pixelformat(0)) == D3DFORMAT.UNKNOWN
