"""Shared test fixtures: DDS byte streams built in memory."""

import struct

import pytest

from ddsload.enums import DDPF, DDSCAPS, DDSD, FourCC


def build_dds(
    width,
    height,
    *,
    payload=b"",
    flags=None,
    pitch_or_linear_size=0,
    depth=0,
    mipmap_count=0,
    pf_flags=DDPF.FOURCC,
    fourcc=0,
    rgb_bit_count=0,
    masks=(0, 0, 0, 0),
    caps=DDSCAPS.TEXTURE,
    caps2=0,
    dx10=None,
    header_size=124,
    pf_size=32,
    magic=b"DDS ",
):
    """Assemble a DDS file.

    dx10 is a (dxgiFormat, resourceDimension, miscFlag, arraySize) tuple; when
    given the pixel format is set to the DX10 FourCC.
    """
    if flags is None:
        flags = DDSD.CAPS | DDSD.HEIGHT | DDSD.WIDTH | DDSD.PIXELFORMAT
        if mipmap_count:
            flags |= DDSD.MIPMAPCOUNT
    if mipmap_count:
        caps |= DDSCAPS.MIPMAP | DDSCAPS.COMPLEX
    if dx10 is not None:
        pf_flags = DDPF.FOURCC
        fourcc = FourCC.DX10

    data = bytearray(magic)
    data += struct.pack(
        "<7I", header_size, flags, height, width, pitch_or_linear_size, depth, mipmap_count
    )
    data += struct.pack("<11I", *([0] * 11))
    data += struct.pack("<8I", pf_size, pf_flags, fourcc, rgb_bit_count, *masks)
    data += struct.pack("<5I", caps, caps2, 0, 0, 0)
    if dx10 is not None:
        dxgi_format, dimension, misc_flag, array_size = dx10
        data += struct.pack("<5I", dxgi_format, dimension, misc_flag, array_size, 0)
    data += payload
    return bytes(data)


def rgba8_payload(width, height, seed=0):
    """Distinct bytes for a 32-bit uncompressed surface"""
    return bytes((seed + i) % 256 for i in range(width * height * 4))


A8R8G8B8_MASKS = (0x00FF0000, 0x0000FF00, 0x000000FF, 0xFF000000)


@pytest.fixture
def dds_builder():
    return build_dds


@pytest.fixture
def a8r8g8b8_4x4():
    """The 4x4 A8R8G8B8 file with a single surface"""
    return build_dds(
        4, 4,
        pf_flags=DDPF.RGB | DDPF.ALPHAPIXELS,
        rgb_bit_count=32,
        masks=A8R8G8B8_MASKS,
        payload=rgba8_payload(4, 4),
    )
