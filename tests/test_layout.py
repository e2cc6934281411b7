"""Tests for pitch, linear size and row count arithmetic."""

import pytest

from ddsload.enums import D3DFORMAT, DXGI_FORMAT
from ddsload.layout import compute_linear_size, compute_pitch, compute_row_count

UNKNOWN_D3D = D3DFORMAT.UNKNOWN
UNKNOWN_DXGI = DXGI_FORMAT.UNKNOWN


class TestBlockCompressed:
    def test_bc1_pitch_and_size(self):
        assert compute_pitch(16, UNKNOWN_D3D, DXGI_FORMAT.BC1_UNORM) == 32
        assert compute_linear_size(16, 16, UNKNOWN_D3D, DXGI_FORMAT.BC1_UNORM) == 128

    def test_bc3_pitch_and_size(self):
        assert compute_pitch(16, D3DFORMAT.DXT5, UNKNOWN_DXGI) == 64
        assert compute_linear_size(16, 16, D3DFORMAT.DXT5, UNKNOWN_DXGI) == 256

    def test_small_levels_use_one_block(self):
        for size in (1, 2, 3, 4):
            assert compute_pitch(size, UNKNOWN_D3D, DXGI_FORMAT.BC1_UNORM) == 8
            assert compute_linear_size(size, size, UNKNOWN_D3D, DXGI_FORMAT.BC7_UNORM) == 16

    def test_partial_blocks_round_up(self):
        assert compute_pitch(5, UNKNOWN_D3D, DXGI_FORMAT.BC1_UNORM) == 16
        assert compute_linear_size(8, 2, UNKNOWN_D3D, DXGI_FORMAT.BC2_UNORM) == 32

    def test_header_value_is_ignored(self):
        assert compute_pitch(16, UNKNOWN_D3D, DXGI_FORMAT.BC1_UNORM, 9999) == 32

    @pytest.mark.parametrize("fmt, block_size", [
        (D3DFORMAT.DXT1, 8), (D3DFORMAT.DXT3, 16), (D3DFORMAT.ATI1, 8),
        (D3DFORMAT.BC4S, 8), (D3DFORMAT.ATI2, 16), (D3DFORMAT.BC5S, 16),
    ])
    def test_legacy_block_sizes(self, fmt, block_size):
        assert compute_pitch(4, fmt, UNKNOWN_DXGI) == block_size

    def test_legacy_block_format_wins(self):
        assert compute_pitch(8, D3DFORMAT.DXT1, DXGI_FORMAT.BC3_UNORM) == 16

    def test_zero_height_level_still_takes_a_block_row(self):
        assert compute_linear_size(4, 0, UNKNOWN_D3D, DXGI_FORMAT.BC1_UNORM) == 8


class TestPacked422:
    @pytest.mark.parametrize("fmt", [
        D3DFORMAT.R8G8_B8G8, D3DFORMAT.G8R8_G8B8, D3DFORMAT.UYVY, D3DFORMAT.YUY2,
    ])
    def test_two_pixels_per_element(self, fmt):
        assert compute_pitch(4, fmt, UNKNOWN_DXGI) == 8
        assert compute_pitch(5, fmt, UNKNOWN_DXGI) == 12
        assert compute_pitch(1, fmt, UNKNOWN_DXGI) == 4
        assert compute_linear_size(5, 3, fmt, UNKNOWN_DXGI) == 36

    def test_legacy_layout_wins_over_mapped_dxgi(self):
        assert compute_pitch(4, D3DFORMAT.YUY2, DXGI_FORMAT.YUY2, 1000) == 8


class TestPackedDxgi:
    def test_header_value_is_trusted(self):
        assert compute_pitch(64, UNKNOWN_D3D, DXGI_FORMAT.NV12, 96) == 96
        assert compute_linear_size(64, 10, UNKNOWN_D3D, DXGI_FORMAT.NV12, 96) == 960

    def test_missing_header_value_gives_zero(self):
        assert compute_linear_size(64, 10, UNKNOWN_D3D, DXGI_FORMAT.Y210) == 0


class TestUncompressed:
    def test_rgba8(self):
        assert compute_pitch(4, D3DFORMAT.A8R8G8B8, UNKNOWN_DXGI) == 16
        assert compute_linear_size(4, 4, D3DFORMAT.A8R8G8B8, UNKNOWN_DXGI) == 64

    def test_rgb8(self):
        assert compute_pitch(3, D3DFORMAT.R8G8B8, UNKNOWN_DXGI) == 9

    def test_sub_byte_rows_round_up(self):
        assert compute_pitch(1, UNKNOWN_D3D, DXGI_FORMAT.R1_UNORM) == 1
        assert compute_pitch(9, UNKNOWN_D3D, DXGI_FORMAT.R1_UNORM) == 2
        assert compute_linear_size(9, 3, UNKNOWN_D3D, DXGI_FORMAT.R1_UNORM) == 6

    def test_zero_axis_levels(self):
        assert compute_linear_size(2, 0, D3DFORMAT.A8R8G8B8, UNKNOWN_DXGI) == 0
        # Scanlines are never shorter than one byte
        assert compute_linear_size(0, 2, D3DFORMAT.A8R8G8B8, UNKNOWN_DXGI) == 2

    def test_wide_formats(self):
        assert compute_pitch(2, UNKNOWN_D3D, DXGI_FORMAT.R32G32B32A32_FLOAT) == 32
        assert compute_pitch(2, UNKNOWN_D3D, DXGI_FORMAT.R16G16B16A16_UNORM) == 16


class TestValidation:
    @pytest.mark.parametrize("dimension", [0, -4])
    def test_non_positive_dimension_raises(self, dimension):
        with pytest.raises(ValueError):
            compute_pitch(dimension, D3DFORMAT.A8R8G8B8, UNKNOWN_DXGI)


@pytest.mark.parametrize("d3d, dxgi", [
    (D3DFORMAT.DXT1, UNKNOWN_DXGI),
    (UNKNOWN_D3D, DXGI_FORMAT.BC3_UNORM),
    (UNKNOWN_D3D, DXGI_FORMAT.BC7_UNORM),
    (D3DFORMAT.A8R8G8B8, UNKNOWN_DXGI),
    (D3DFORMAT.R8G8B8, UNKNOWN_DXGI),
    (UNKNOWN_D3D, DXGI_FORMAT.R1_UNORM),
    (UNKNOWN_D3D, DXGI_FORMAT.R32G32B32_FLOAT),
])
@pytest.mark.parametrize("width, height", [(1, 1), (4, 4), (5, 3), (16, 8), (640, 480)])
def test_linear_size_is_pitch_times_rows(d3d, dxgi, width, height):
    expected = compute_pitch(width, d3d, dxgi) * compute_row_count(height, d3d, dxgi)
    assert compute_linear_size(width, height, d3d, dxgi) == expected


def test_row_count():
    assert compute_row_count(16, UNKNOWN_D3D, DXGI_FORMAT.BC1_UNORM) == 4
    assert compute_row_count(2, UNKNOWN_D3D, DXGI_FORMAT.BC1_UNORM) == 1
    assert compute_row_count(16, D3DFORMAT.A8R8G8B8, UNKNOWN_DXGI) == 16
