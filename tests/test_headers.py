"""Tests for header structures and their predicates."""

import struct

import pytest

from conftest import build_dds
from ddsload.enums import (
    DDPF,
    DDSCAPS,
    DDSCAPS2,
    DDSD,
    D3D10_RESOURCE_DIMENSION,
    DDS_RESOURCE_MISC,
    DXGI_FORMAT,
    FourCC,
    SurfaceType,
)
from ddsload.errors import DDSStructureError
from ddsload.headers import DDS_HEADER, DDS_HEADER_DXT10, DDS_PIXELFORMAT


def _header(**kwargs):
    data = build_dds(4, 4, **kwargs)
    return DDS_HEADER.from_bytes(data[4:128])


class TestHeaderReading:
    def test_fields_at_fixed_offsets(self):
        header = _header(pitch_or_linear_size=64, depth=3, mipmap_count=2,
                         pf_flags=DDPF.FOURCC, fourcc=FourCC.DXT1, caps2=DDSCAPS2.VOLUME)
        assert header.dwSize == 124
        assert header.dwWidth == 4
        assert header.dwHeight == 4
        assert header.dwPitchOrLinearSize == 64
        assert header.dwDepth == 3
        assert header.dwMipMapCount == 2
        assert header.ddspf.dwSize == 32
        assert header.ddspf.dwFourCC == FourCC.DXT1
        assert header.dwCaps & DDSCAPS.TEXTURE
        assert header.dwCaps2 == DDSCAPS2.VOLUME

    def test_short_data_raises(self):
        with pytest.raises(DDSStructureError):
            DDS_HEADER.from_bytes(b"\x00" * 100)
        with pytest.raises(DDSStructureError):
            DDS_PIXELFORMAT.from_bytes(b"\x00" * 31)
        with pytest.raises(DDSStructureError):
            DDS_HEADER_DXT10.from_bytes(b"\x00" * 19)


class TestValidity:
    def test_valid_header(self):
        assert _header().is_valid()
        assert _header().is_valid(strict=True)

    def test_wrong_sizes(self):
        assert not _header(header_size=100).is_valid()
        assert not _header(pf_size=24).is_valid()

    def test_pitch_and_linear_size_conflict(self):
        flags = DDSD.CAPS | DDSD.HEIGHT | DDSD.WIDTH | DDSD.PIXELFORMAT | DDSD.PITCH | DDSD.LINEARSIZE
        assert not _header(flags=flags).is_valid()

    def test_strict_requires_capability_flags(self):
        header = _header(flags=DDSD.HEIGHT | DDSD.WIDTH, caps=0)
        assert header.is_valid()
        assert not header.is_valid(strict=True)

    def test_dimensions_set(self):
        assert _header().are_dimensions_set()
        assert not _header(flags=DDSD.CAPS | DDSD.WIDTH).are_dimensions_set()


class TestPredicates:
    def test_dxt10_requires_exact_fourcc_flags(self):
        assert _header(pf_flags=DDPF.FOURCC, fourcc=FourCC.DX10).should_have_dxt10_header()
        assert not _header(pf_flags=DDPF.FOURCC | DDPF.ALPHAPIXELS,
                           fourcc=FourCC.DX10).should_have_dxt10_header()
        assert not _header(pf_flags=DDPF.FOURCC, fourcc=FourCC.DXT5).should_have_dxt10_header()

    def test_mipmaps_need_caps_and_count_flag(self):
        assert _header(mipmap_count=3).has_mipmaps
        assert not _header(mipmap_count=3, flags=DDSD.CAPS | DDSD.HEIGHT | DDSD.WIDTH).has_mipmaps
        assert not _header().has_mipmaps

    def test_alpha(self):
        assert _header(pf_flags=DDPF.RGB | DDPF.ALPHAPIXELS).has_alpha
        assert not _header(pf_flags=DDPF.RGB).has_alpha

    def test_partial_cubemap_faces_in_order(self):
        caps2 = (DDSCAPS2.CUBEMAP | DDSCAPS2.CUBEMAP_NEGATIVEZ
                 | DDSCAPS2.CUBEMAP_POSITIVEX | DDSCAPS2.CUBEMAP_POSITIVEY)
        header = _header(caps2=caps2)
        assert header.existing_cubemap_faces() == (
            SurfaceType.CUBEMAP_POSITIVE_X,
            SurfaceType.CUBEMAP_POSITIVE_Y,
            SurfaceType.CUBEMAP_NEGATIVE_Z,
        )
        assert header.compute_depth() == 3

    def test_cubemap_without_faces(self):
        header = _header(caps2=DDSCAPS2.CUBEMAP)
        assert header.is_cubemap
        assert header.existing_cubemap_faces() == ()
        assert header.compute_depth() == 0

    def test_face_bits_without_cubemap_flag(self):
        assert _header(caps2=DDSCAPS2.CUBEMAP_POSITIVEX).existing_cubemap_faces() == ()

    def test_depth(self):
        assert _header(caps2=DDSCAPS2.VOLUME, depth=8).compute_depth() == 8
        assert _header(caps2=DDSCAPS2.VOLUME, depth=0).compute_depth() == 1
        assert _header(depth=8).compute_depth() == 1


class TestDX10Header:
    def test_read(self):
        data = struct.pack("<5I", DXGI_FORMAT.BC7_UNORM, D3D10_RESOURCE_DIMENSION.TEXTURE2D,
                           DDS_RESOURCE_MISC.TEXTURECUBE, 2, 0)
        header10 = DDS_HEADER_DXT10.from_bytes(data)
        assert header10.dxgiFormat == DXGI_FORMAT.BC7_UNORM
        assert header10.resourceDimension == D3D10_RESOURCE_DIMENSION.TEXTURE2D
        assert header10.arraySize == 2
        assert header10.is_cubemap

    def test_unknown_format_is_kept_raw(self):
        header10 = DDS_HEADER_DXT10.from_bytes(struct.pack("<5I", 500, 3, 0, 1, 0))
        assert header10.dxgiFormat == 500
        assert not isinstance(header10.dxgiFormat, DXGI_FORMAT)
        assert "Format=500" in str(header10)

    def test_unknown_dimension_raises(self):
        with pytest.raises(DDSStructureError):
            DDS_HEADER_DXT10.from_bytes(struct.pack("<5I", DXGI_FORMAT.BC1_UNORM, 9, 0, 1, 0))
