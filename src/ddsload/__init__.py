"""ddsload - DDS texture file decoder producing surfaces ready for GPU upload"""

__version__ = "0.1.0"

# Main DDS class
from .dds import DDS, load
from .config import DecodeOptions
from .surface import Surface, TextureResource

# Header structures
from .headers import (
    DDS_HEADER,
    DDS_HEADER_DXT10,
    DDS_PIXELFORMAT,
)

# Enumerations and flags
from .enums import (
    DDSD,
    DDPF,
    DDSCAPS,
    DDSCAPS2,
    FourCC,
    D3DFORMAT,
    DXGI_FORMAT,
    D3D10_RESOURCE_DIMENSION,
    DDS_RESOURCE_MISC,
    SurfaceType,
)

# Errors
from .errors import (
    DDSError,
    DDSStructureError,
    DDSFormatError,
    UnsupportedFlipError,
    InvalidFormatError,
)

# Format catalog, layout and flip
from .formats import (
    get_bits_per_pixel,
    get_bits_per_pixel_d3d,
    get_bits_per_pixel_dxgi,
    is_block_compressed,
    d3d_to_dxgi,
    resolve_d3d_format,
)
from .layout import compute_pitch, compute_linear_size, compute_row_count
from .flip import flip_surface

__all__ = [
    '__version__',
    'DDS',
    'load',
    'DecodeOptions',
    'Surface',
    'TextureResource',
    'DDS_HEADER',
    'DDS_HEADER_DXT10',
    'DDS_PIXELFORMAT',
    'DDSD',
    'DDPF',
    'DDSCAPS',
    'DDSCAPS2',
    'FourCC',
    'D3DFORMAT',
    'DXGI_FORMAT',
    'D3D10_RESOURCE_DIMENSION',
    'DDS_RESOURCE_MISC',
    'SurfaceType',
    'DDSError',
    'DDSStructureError',
    'DDSFormatError',
    'UnsupportedFlipError',
    'InvalidFormatError',
    'get_bits_per_pixel',
    'get_bits_per_pixel_d3d',
    'get_bits_per_pixel_dxgi',
    'is_block_compressed',
    'd3d_to_dxgi',
    'resolve_d3d_format',
    'compute_pitch',
    'compute_linear_size',
    'compute_row_count',
    'flip_surface',
]
