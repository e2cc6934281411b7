"""DDS header structures"""
import struct
from typing import List, Tuple, Union

from .enums import (
    CUBEMAP_FACES,
    DDPF,
    DDSD,
    DDSCAPS,
    DDSCAPS2,
    DXGI_FORMAT,
    D3D10_RESOURCE_DIMENSION,
    DDS_RESOURCE_MISC,
    FourCC,
    SurfaceType,
)
from .errors import DDSStructureError

DDS_MAGIC = b'DDS '
DDS_HEADER_SIZE = 124
DDS_PIXELFORMAT_SIZE = 32
DDS_HEADER_DXT10_SIZE = 20


def _fourcc_str(value: int) -> str:
    return value.to_bytes(4, 'little').decode('ascii', errors='replace')


class DDS_PIXELFORMAT:
    """DDS Pixel Format structure (32 bytes)"""
    def __init__(self) -> None:
        self.dwSize: int = 32  # Size of structure (always 32)
        self.dwFlags: DDPF = DDPF(0)  # Flags to indicate which members are valid
        self.dwFourCC: int = 0  # FourCC code (can be any FourCC value)
        self.dwRGBBitCount: int = 0  # Number of bits per pixel
        self.dwRBitMask: int = 0  # Red (or luminance) bit mask
        self.dwGBitMask: int = 0  # Green bit mask
        self.dwBBitMask: int = 0  # Blue bit mask
        self.dwABitMask: int = 0  # Alpha bit mask

    @classmethod
    def from_bytes(cls, data: bytes) -> 'DDS_PIXELFORMAT':
        """Read DDS_PIXELFORMAT from 32 bytes of data"""
        if len(data) < DDS_PIXELFORMAT_SIZE:
            raise DDSStructureError(f"Expected 32 bytes for DDS_PIXELFORMAT, got {len(data)}")

        pixelformat = cls()
        values = struct.unpack('<8I', data[:32])
        pixelformat.dwSize = values[0]
        pixelformat.dwFlags = DDPF(values[1])
        pixelformat.dwFourCC = values[2]
        pixelformat.dwRGBBitCount = values[3]
        pixelformat.dwRBitMask = values[4]
        pixelformat.dwGBitMask = values[5]
        pixelformat.dwBBitMask = values[6]
        pixelformat.dwABitMask = values[7]

        return pixelformat

    def __str__(self) -> str:
        return (
            f"DDS_PIXELFORMAT: Size={self.dwSize}; Flags={self.dwFlags!r}; "
            f"FourCC='{_fourcc_str(self.dwFourCC)}' (0x{self.dwFourCC:08X}); "
            f"RGBBitCount={self.dwRGBBitCount}; RBitMask=0x{self.dwRBitMask:X}; "
            f"GBitMask=0x{self.dwGBitMask:X}; BBitMask=0x{self.dwBBitMask:X}; "
            f"ABitMask=0x{self.dwABitMask:X}"
        )


class DDS_HEADER:
    """DDS Header structure (124 bytes)"""
    def __init__(self) -> None:
        self.dwSize: int = 124  # Size of structure (always 124)
        self.dwFlags: DDSD = DDSD(0)  # Flags to indicate which members are valid
        self.dwHeight: int = 0  # Height of surface in pixels
        self.dwWidth: int = 0  # Width of surface in pixels
        self.dwPitchOrLinearSize: int = 0  # Pitch or linear size of data
        self.dwDepth: int = 0  # Depth of volume texture
        self.dwMipMapCount: int = 0  # Number of mipmap levels
        self.dwReserved1: List[int] = [0] * 11  # Reserved (11 DWORDs)
        self.ddspf: DDS_PIXELFORMAT = DDS_PIXELFORMAT()  # Pixel format
        self.dwCaps: DDSCAPS = DDSCAPS(0)  # Surface complexity flags
        self.dwCaps2: DDSCAPS2 = DDSCAPS2(0)  # Additional surface flags
        self.dwCaps3: int = 0  # Reserved
        self.dwCaps4: int = 0  # Reserved
        self.dwReserved2: int = 0  # Reserved

    @classmethod
    def from_bytes(cls, data: bytes) -> 'DDS_HEADER':
        """Read DDS_HEADER from 124 bytes of data"""
        if len(data) < DDS_HEADER_SIZE:
            raise DDSStructureError(f"Expected 124 bytes for DDS_HEADER, got {len(data)}")

        header = cls()

        # Read the first part (7 DWORDs + 11 reserved DWORDs)
        values = struct.unpack('<18I', data[:72])
        header.dwSize = values[0]
        header.dwFlags = DDSD(values[1])
        header.dwHeight = values[2]
        header.dwWidth = values[3]
        header.dwPitchOrLinearSize = values[4]
        header.dwDepth = values[5]
        header.dwMipMapCount = values[6]
        header.dwReserved1 = list(values[7:18])

        # Read pixel format (32 bytes starting at offset 72)
        header.ddspf = DDS_PIXELFORMAT.from_bytes(data[72:104])

        # Read caps (5 DWORDs starting at offset 104)
        caps = struct.unpack('<5I', data[104:124])
        header.dwCaps = DDSCAPS(caps[0])
        header.dwCaps2 = DDSCAPS2(caps[1])
        header.dwCaps3 = caps[2]
        header.dwCaps4 = caps[3]
        header.dwReserved2 = caps[4]

        return header

    @property
    def is_cubemap(self) -> bool:
        return bool(self.dwCaps2 & DDSCAPS2.CUBEMAP)

    @property
    def is_volume(self) -> bool:
        return bool(self.dwCaps2 & DDSCAPS2.VOLUME)

    @property
    def has_alpha(self) -> bool:
        return bool(self.ddspf.dwFlags & DDPF.ALPHAPIXELS)

    @property
    def has_mipmaps(self) -> bool:
        return bool(self.dwCaps & DDSCAPS.MIPMAP) and bool(self.dwFlags & DDSD.MIPMAPCOUNT)

    def is_valid(self, strict: bool = False) -> bool:
        """
        Check the structural validity of the header.

        Args:
            strict: Also require the DDSD_CAPS, DDSD_PIXELFORMAT and DDSCAPS_TEXTURE
                flags, which many writers omit

        Returns:
            True if the header can be decoded
        """
        correct_size = self.dwSize == DDS_HEADER_SIZE and self.ddspf.dwSize == DDS_PIXELFORMAT_SIZE
        invalid_compression = bool(self.dwFlags & DDSD.PITCH) and bool(self.dwFlags & DDSD.LINEARSIZE)
        if not correct_size or invalid_compression:
            return False

        if strict:
            return (
                bool(self.dwFlags & DDSD.CAPS)
                and bool(self.dwFlags & DDSD.PIXELFORMAT)
                and bool(self.dwCaps & DDSCAPS.TEXTURE)
            )
        return True

    def are_dimensions_set(self) -> bool:
        return bool(self.dwFlags & DDSD.WIDTH) and bool(self.dwFlags & DDSD.HEIGHT)

    def should_have_dxt10_header(self) -> bool:
        """A DX10 header follows when the pixel format is exactly FOURCC with the 'DX10' code"""
        return self.ddspf.dwFlags == DDPF.FOURCC and self.ddspf.dwFourCC == FourCC.DX10

    def existing_cubemap_faces(self) -> Tuple[SurfaceType, ...]:
        """
        Get the cube map faces stored in the file, in on-disk order.

        Partial cube maps are not allowed by Direct3D 11 but legacy files may
        still contain them.

        Returns:
            Face types from +X to -Z; empty if this is not a cube map or no face bit is set
        """
        if not self.is_cubemap:
            return ()
        return tuple(face for flag, face in CUBEMAP_FACES if self.dwCaps2 & flag)

    def compute_depth(self) -> int:
        """Depth of a volume texture, face count of a cube map, 1 otherwise"""
        if self.is_volume:
            return self.dwDepth if self.dwDepth > 0 else 1
        if self.is_cubemap:
            return len(self.existing_cubemap_faces())
        return 1

    def __str__(self) -> str:
        return (
            f"DDS_HEADER: Size={self.dwSize}; Flags={self.dwFlags!r}; "
            f"Width={self.dwWidth}; Height={self.dwHeight}; "
            f"PitchOrLinearSize={self.dwPitchOrLinearSize}; Depth={self.dwDepth}; "
            f"MipMapCount={self.dwMipMapCount}; Caps={self.dwCaps!r}, {self.dwCaps2!r}\n"
            f"{self.ddspf}"
        )


class DDS_HEADER_DXT10:
    """DDS DX10 Extended Header structure (20 bytes)"""
    def __init__(self) -> None:
        self.dxgiFormat: Union[DXGI_FORMAT, int] = DXGI_FORMAT.UNKNOWN  # Raw int when not a known DXGI format
        self.resourceDimension: D3D10_RESOURCE_DIMENSION = D3D10_RESOURCE_DIMENSION.UNKNOWN  # Resource dimension
        self.miscFlag: DDS_RESOURCE_MISC = DDS_RESOURCE_MISC(0)  # Miscellaneous flags
        self.arraySize: int = 0  # Array size
        self.miscFlags2: int = 0  # Additional miscellaneous flags

    @classmethod
    def from_bytes(cls, data: bytes) -> 'DDS_HEADER_DXT10':
        """Read DDS_HEADER_DXT10 from 20 bytes of data"""
        if len(data) < DDS_HEADER_DXT10_SIZE:
            raise DDSStructureError(f"Expected 20 bytes for DDS_HEADER_DXT10, got {len(data)}")

        header10 = cls()
        values = struct.unpack('<5I', data[:20])
        # Unknown formats are kept as plain ints and rejected during format resolution
        try:
            header10.dxgiFormat = DXGI_FORMAT(values[0])
        except ValueError:
            header10.dxgiFormat = values[0]
        try:
            header10.resourceDimension = D3D10_RESOURCE_DIMENSION(values[1])
        except ValueError as e:
            raise DDSStructureError(f"Invalid DDS_HEADER_DXT10: {e}") from e
        header10.miscFlag = DDS_RESOURCE_MISC(values[2])
        header10.arraySize = values[3]
        header10.miscFlags2 = values[4]

        return header10

    @property
    def is_cubemap(self) -> bool:
        return bool(self.miscFlag & DDS_RESOURCE_MISC.TEXTURECUBE)

    def __str__(self) -> str:
        return (
            f"DDS_HEADER_DXT10: Format={getattr(self.dxgiFormat, 'name', self.dxgiFormat)}; "
            f"ResourceDimension={self.resourceDimension.name}; "
            f"MiscFlag={self.miscFlag!r}; ArraySize={self.arraySize}"
        )
