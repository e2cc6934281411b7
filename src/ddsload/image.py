"""Conversion of 8-bit uncompressed surfaces to numpy images"""
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .enums import D3DFORMAT, DXGI_FORMAT
from .surface import Surface


@dataclass
class ChannelLayout:
    """Byte layout of an 8-bit per channel format"""
    channels: str  # Byte order in memory: 'BGRA', 'BGRX', 'RGBA', 'BGR' or 'R'


_DXGI_LAYOUTS = {
    DXGI_FORMAT.B8G8R8A8_UNORM: ChannelLayout('BGRA'),
    DXGI_FORMAT.B8G8R8A8_UNORM_SRGB: ChannelLayout('BGRA'),
    DXGI_FORMAT.B8G8R8A8_TYPELESS: ChannelLayout('BGRA'),
    DXGI_FORMAT.B8G8R8X8_UNORM: ChannelLayout('BGRX'),
    DXGI_FORMAT.B8G8R8X8_UNORM_SRGB: ChannelLayout('BGRX'),
    DXGI_FORMAT.B8G8R8X8_TYPELESS: ChannelLayout('BGRX'),
    DXGI_FORMAT.R8G8B8A8_UNORM: ChannelLayout('RGBA'),
    DXGI_FORMAT.R8G8B8A8_UNORM_SRGB: ChannelLayout('RGBA'),
    DXGI_FORMAT.R8G8B8A8_TYPELESS: ChannelLayout('RGBA'),
    DXGI_FORMAT.R8G8B8A8_UINT: ChannelLayout('RGBA'),
    DXGI_FORMAT.R8_UNORM: ChannelLayout('R'),
    DXGI_FORMAT.R8_UINT: ChannelLayout('R'),
    DXGI_FORMAT.R8_TYPELESS: ChannelLayout('R'),
    DXGI_FORMAT.A8_UNORM: ChannelLayout('R'),
}

# Legacy formats that have no DXGI equivalent
_D3D_LAYOUTS = {
    D3DFORMAT.R8G8B8: ChannelLayout('BGR'),
}


def get_channel_layout(format_d3d: int, format_dxgi: int) -> Optional[ChannelLayout]:
    """Get the byte layout of a format pair, or None if it can't be exported"""
    if format_d3d in _D3D_LAYOUTS:
        return _D3D_LAYOUTS[format_d3d]
    return _DXGI_LAYOUTS.get(format_dxgi)


def surface_to_image(surface: Surface, format_d3d: int, format_dxgi: int, depth_index: int = 0) -> np.ndarray:
    """
    Convert a surface to an image array suitable for imageio.

    Args:
        surface: Surface to convert
        format_d3d: Legacy D3D format of the surface
        format_dxgi: DXGI format of the surface
        depth_index: Slice to convert for volume surfaces

    Returns:
        numpy array of shape (height, width, 4) with dtype uint8 (RGBA) for color
        formats, (height, width) for single channel formats

    Raises:
        NotImplementedError: If the format is not an 8-bit uncompressed layout
        ValueError: If depth_index is out of range or the data is too small
    """
    layout = get_channel_layout(format_d3d, format_dxgi)
    if layout is None:
        name = getattr(format_dxgi, 'name', format_dxgi)
        raise NotImplementedError(f"Image export not supported for format: {name}")

    if not 0 <= depth_index < surface.depth:
        raise ValueError(f"Depth index {depth_index} out of range (depth: {surface.depth})")

    channels = len(layout.channels)
    required = surface.width * surface.height * channels
    start = depth_index * surface.slice_size
    pixels = np.frombuffer(surface.data, dtype=np.uint8, count=surface.slice_size, offset=start)
    if len(pixels) < required:
        raise ValueError(f"Surface data too small for {surface.width}x{surface.height}: "
                         f"expected {required} bytes, got {len(pixels)}")

    pixels = pixels[:required].reshape(surface.height, surface.width, channels)
    if channels == 1:
        return pixels[:, :, 0].copy()

    rgba = np.empty((surface.height, surface.width, 4), dtype=np.uint8)
    for index, channel in enumerate('RGB'):
        rgba[:, :, index] = pixels[:, :, layout.channels.index(channel)]
    if 'A' in layout.channels:
        rgba[:, :, 3] = pixels[:, :, layout.channels.index('A')]
    else:
        rgba[:, :, 3] = 255

    return rgba
