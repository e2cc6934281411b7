"""Main DDS file handler"""
import dataclasses
import io
import logging
import os
from typing import BinaryIO, Iterator, List, Optional, Tuple, Union

from .config import DecodeOptions
from .enums import (
    CUBEMAP_FACES,
    DDPF,
    DDSCAPS,
    DDSCAPS2,
    DDSD,
    DDS_RESOURCE_MISC,
    D3D10_RESOURCE_DIMENSION,
    D3DFORMAT,
    DXGI_FORMAT,
    SurfaceType,
)
from .errors import DDSFormatError, DDSStructureError, InvalidFormatError
from .flip import flip_surface
from .formats import (
    d3d_to_dxgi,
    get_bits_per_pixel_d3d,
    get_bits_per_pixel_dxgi,
    is_block_compressed,
    is_packed_dxgi,
    resolve_d3d_format,
)
from .headers import DDS_HEADER, DDS_HEADER_DXT10, DDS_HEADER_SIZE, DDS_HEADER_DXT10_SIZE, DDS_MAGIC
from .layout import compute_linear_size, compute_pitch
from .surface import Surface, TextureResource

logger = logging.getLogger(__name__)


def _format_flags(value: int, flag_enum) -> str:
    """
    Format an integer flag value as a list of flag names separated by ' | '.

    Args:
        value: The integer flag value
        flag_enum: The IntFlag enum class to use for decoding

    Returns:
        String with flag names separated by ' | ', or '0' if no flags are set
    """
    if value == 0:
        return '0'

    flags = [flag.name for flag in flag_enum if flag.name and value & flag == flag]
    if not flags:
        return f'0x{value:X}'

    return ' | '.join(flags)


def _read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    data = stream.read(size)
    if data is None or len(data) < size:
        got = 0 if data is None else len(data)
        raise DDSStructureError(f"Not enough data for {what}: expected {size} bytes, got {got}")
    return data


def _resolve_options(options: Optional[DecodeOptions], vertical_flip: Optional[bool],
                     strict: Optional[bool]) -> DecodeOptions:
    options = options if options is not None else DecodeOptions()
    overrides = {}
    if vertical_flip is not None:
        overrides['vertical_flip'] = vertical_flip
    if strict is not None:
        overrides['strict'] = strict
    return dataclasses.replace(options, **overrides) if overrides else options


class DDS:
    """DirectDraw Surface container, decoded into texture resources ready for upload"""
    def __init__(self) -> None:
        self.magic: bytes = DDS_MAGIC  # Magic number (always "DDS ")
        self.header: DDS_HEADER = DDS_HEADER()
        self.header10: Optional[DDS_HEADER_DXT10] = None  # Optional DX10 extended header
        self.options: DecodeOptions = DecodeOptions()
        self.format_d3d: D3DFORMAT = D3DFORMAT.UNKNOWN
        self.format_dxgi: Union[DXGI_FORMAT, int] = DXGI_FORMAT.UNKNOWN
        self.bits_per_pixel: int = 0
        self.pitch: int = 0  # Pitch of the top level surface
        self.linear_size: int = 0  # Size of the top level surface
        self.depth: int = 1  # Volume depth or cube map face count
        self.mipmap_count: int = 0  # 0 when the file has no mip chain
        self.total_resource_size: int = 0
        self.textures: List[TextureResource] = []

    @property
    def width(self) -> int:
        return self.header.dwWidth

    @property
    def height(self) -> int:
        return self.header.dwHeight

    @property
    def is_dx10(self) -> bool:
        return self.header10 is not None

    @property
    def is_cubemap(self) -> bool:
        return self.header.is_cubemap or (self.header10 is not None and self.header10.is_cubemap)

    @property
    def is_volume(self) -> bool:
        """Check if the texture is a volume texture (3D)"""
        if self.header.is_volume:
            return True
        return (self.header10 is not None
                and self.header10.resourceDimension == D3D10_RESOURCE_DIMENSION.TEXTURE3D)

    @property
    def is_block_compressed(self) -> bool:
        return is_block_compressed(self.format_d3d, self.format_dxgi)

    @property
    def has_alpha(self) -> bool:
        return self.header.has_alpha

    @property
    def resource_count(self) -> int:
        """Number of array elements stored in the file"""
        if self.header10 is not None and self.header10.arraySize > 0:
            return self.header10.arraySize
        return 1

    def iter_surfaces(self) -> Iterator[Tuple[int, Surface]]:
        """Iterate over (resource index, surface) pairs in file order"""
        for index, texture in enumerate(self.textures):
            for surface in texture:
                yield index, surface

    def get_format_str(self) -> str:
        """Get a human-readable name of the resolved format"""
        dxgi_name = getattr(self.format_dxgi, 'name', str(self.format_dxgi))
        if self.format_d3d != D3DFORMAT.UNKNOWN:
            return f"{self.format_d3d.name} (DXGI {dxgi_name})"
        return dxgi_name

    def __str__(self) -> str:
        """Return debug string representation of DDS file"""
        lines = ["DDS File Information:"]
        lines.append(f"  Magic: {self.magic}")
        lines.append(f"  Dimensions: {self.width}x{self.height}")
        lines.append(f"  Depth: {self.depth}")

        if self.mipmap_count > 0:
            lines.append(f"  Mipmap Levels: {self.mipmap_count}")

        lines.append(f"  Flags: {_format_flags(self.header.dwFlags, DDSD)}")
        lines.append(f"  Pixel Format Flags: {_format_flags(self.header.ddspf.dwFlags, DDPF)}")

        if self.header10:
            lines.append("  Format: DX10")
            dxgi_format = self.header10.dxgiFormat
            lines.append(f"    DXGI Format: {getattr(dxgi_format, 'name', 'UNKNOWN')} ({int(dxgi_format)})")
            lines.append(f"    Resource Dimension: {self.header10.resourceDimension.name}")
            if self.header10.arraySize > 1:
                lines.append(f"    Array Size: {self.header10.arraySize}")
            if self.header10.miscFlag:
                lines.append(f"    Misc Flags: {_format_flags(self.header10.miscFlag, DDS_RESOURCE_MISC)}")
        else:
            lines.append(f"  Format: {self.get_format_str()}")

        lines.append(f"  Bits Per Pixel: {self.bits_per_pixel}")
        lines.append(f"  Pitch: {self.pitch}")
        lines.append(f"  Linear Size: {self.linear_size}")
        if self.has_alpha:
            lines.append("  With Alpha")

        lines.append(f"  Caps: {_format_flags(self.header.dwCaps, DDSCAPS)}")
        if self.header.dwCaps2:
            lines.append(f"  Caps2: {_format_flags(self.header.dwCaps2, DDSCAPS2)}")

        lines.append(f"  Textures: {len(self.textures)}")
        lines.append(f"  Surfaces: {sum(len(texture) for texture in self.textures)}")
        lines.append(f"  Total Data Size: {self.total_resource_size} bytes")

        return "\n".join(lines)

    @classmethod
    def from_stream(cls, stream: BinaryIO, options: Optional[DecodeOptions] = None, *,
                    vertical_flip: Optional[bool] = None, strict: Optional[bool] = None) -> 'DDS':
        """
        Read a DDS file from a binary stream positioned at its magic number.

        The stream is left open and positioned after the last surface read.

        Args:
            stream: Readable binary stream
            options: Decode options, defaults to DecodeOptions()
            vertical_flip: Overrides options.vertical_flip
            strict: Overrides options.strict

        Returns:
            The decoded file

        Raises:
            DDSStructureError: If the file is malformed or truncated
            DDSFormatError: If the pixel format is unknown or can't be processed
        """
        dds = cls()
        dds.options = _resolve_options(options, vertical_flip, strict)
        dds._read_header(stream)
        dds._read_format()
        dds._read_surfaces(stream)
        return dds

    @classmethod
    def from_bytes(cls, data: bytes, options: Optional[DecodeOptions] = None, **kwargs) -> 'DDS':
        """Read DDS from bytes"""
        return cls.from_stream(io.BytesIO(data), options, **kwargs)

    @classmethod
    def from_file(cls, path: Union[str, os.PathLike], options: Optional[DecodeOptions] = None, **kwargs) -> 'DDS':
        """Read DDS from a file path"""
        with open(path, 'rb') as f:
            return cls.from_stream(f, options, **kwargs)

    def _read_header(self, stream: BinaryIO) -> None:
        magic = stream.read(len(DDS_MAGIC))
        if magic != DDS_MAGIC:
            raise DDSStructureError("Trying to read a non-DDS file")
        self.magic = magic

        self.header = DDS_HEADER.from_bytes(_read_exact(stream, DDS_HEADER_SIZE, "DDS_HEADER"))
        if not self.header.is_valid(self.options.strict):
            raise DDSStructureError("DDS header is invalid")
        if not self.header.are_dimensions_set() or self.header.dwWidth == 0 or self.header.dwHeight == 0:
            raise DDSStructureError("DDS header does not contain texture dimensions")

        if self.header.should_have_dxt10_header():
            self.header10 = DDS_HEADER_DXT10.from_bytes(
                _read_exact(stream, DDS_HEADER_DXT10_SIZE, "DDS_HEADER_DXT10"))

        logger.debug("Read header %dx%d, flags %s, caps %s",
                     self.header.dwWidth, self.header.dwHeight,
                     _format_flags(self.header.dwFlags, DDSD), _format_flags(self.header.dwCaps2, DDSCAPS2))

    def _read_format(self) -> None:
        """Resolve the format pair and the sizes of the top level surface"""
        self.format_d3d = resolve_d3d_format(self.header.ddspf)
        if self.header10 is not None:
            self.format_dxgi = self.header10.dxgiFormat

        try:
            if self.format_d3d != D3DFORMAT.UNKNOWN:
                self.bits_per_pixel = get_bits_per_pixel_d3d(self.format_d3d)
                if self.format_dxgi == DXGI_FORMAT.UNKNOWN:
                    self.format_dxgi = d3d_to_dxgi(self.format_d3d)
            elif self.format_dxgi != DXGI_FORMAT.UNKNOWN:
                self.bits_per_pixel = get_bits_per_pixel_dxgi(self.format_dxgi)
        except InvalidFormatError as e:
            raise DDSFormatError(f"DDS texture is in an unknown format: {e}") from e

        # Sentinels like VERTEXDATA have no pixel size
        if self.bits_per_pixel == 0:
            raise DDSFormatError("DDS texture is in an unknown format")

        if self.is_block_compressed and (self.width % 4 != 0 or self.height % 4 != 0):
            raise DDSFormatError("Dimensions of the compressed formats must be divisible by 4")

        if self.format_d3d == D3DFORMAT.UNKNOWN and is_packed_dxgi(self.format_dxgi):
            logger.warning("Packed format %s is not fully supported, trusting the header pitch of %d bytes",
                           self.format_dxgi.name, self.header.dwPitchOrLinearSize)

        fallback = self.header.dwPitchOrLinearSize
        self.pitch = compute_pitch(self.width, self.format_d3d, self.format_dxgi, fallback)
        self.linear_size = compute_linear_size(self.width, self.height, self.format_d3d, self.format_dxgi, fallback)

        if self.header.has_mipmaps:
            self.mipmap_count = self.header.dwMipMapCount

        self.depth = self.header.compute_depth()
        # The DX10 header can mark a volume or a complete cube map on its own
        if self.is_volume and not self.header.is_volume:
            self.depth = max(1, self.header.dwDepth)
        elif not self.is_volume and self.is_cubemap and not self.header.is_cubemap:
            self.depth = len(CUBEMAP_FACES)

        logger.debug("Resolved format %s, %d bpp, pitch %d, linear size %d",
                     self.get_format_str(), self.bits_per_pixel, self.pitch, self.linear_size)

    def _read_surfaces(self, stream: BinaryIO) -> None:
        if self.is_volume:
            reader = self._read_volume
        elif self.is_cubemap:
            reader = self._read_cubemap
        else:
            reader = self._read_flat

        for index in range(self.resource_count):
            texture = reader(stream, index)
            if texture is not None:
                self.textures.append(texture)

    def _read_flat(self, stream: BinaryIO, index: int) -> TextureResource:
        surface_type = SurfaceType.TEXTURE_2D if self.height > 1 else SurfaceType.TEXTURE_1D
        return TextureResource(list(self._read_mipmap_surfaces(stream, index, surface_type)))

    def _read_volume(self, stream: BinaryIO, index: int) -> TextureResource:
        return TextureResource(list(self._read_mipmap_surfaces(
            stream, index, SurfaceType.TEXTURE_3D, depth=self.depth)))

    def _read_cubemap(self, stream: BinaryIO, index: int) -> Optional[TextureResource]:
        # DX10 cube maps are always complete; legacy ones list their faces in caps2
        if self.header.is_cubemap:
            faces = self.header.existing_cubemap_faces()
        else:
            faces = tuple(face for _, face in CUBEMAP_FACES)
        if not faces:
            logger.warning("Cube map without any face, skipping resource %d", index)
            return None

        surfaces = []
        for face in faces:
            surfaces.extend(self._read_mipmap_surfaces(stream, index, face))
        return TextureResource(surfaces)

    def _read_mipmap_surfaces(self, stream: BinaryIO, index: int, surface_type: SurfaceType,
                              depth: int = 1) -> Iterator[Surface]:
        """
        Read every mip level of one face or texture.

        Width and height halve by floor division, so one axis of a non-square
        chain can reach 0 before the other; the chain ends once both are 0.
        Depth never drops below 1.
        """
        width, height = self.width, self.height
        fallback = self.header.dwPitchOrLinearSize
        for level in range(max(1, self.mipmap_count)):
            if width == 0 and height == 0:
                break

            level_depth = max(1, depth)
            size = compute_linear_size(width, height, self.format_d3d, self.format_dxgi,
                                       fallback) * level_depth
            data = stream.read(size)
            if data is None or len(data) < size:
                got = 0 if data is None else len(data)
                raise DDSStructureError(
                    f"Not enough data for surface (resource={index}, face={surface_type.name}, mip={level}). "
                    f"Expected {size} bytes, got {got}"
                )

            data = bytearray(data)
            # A level with a 0 axis has no rows to swap
            if self.options.vertical_flip and width > 0 and height > 0:
                flip_surface(data, width, height, self.format_d3d, self.format_dxgi, depth=level_depth)

            logger.debug("Read %s level %d of resource %d: %dx%dx%d, %d bytes",
                         surface_type.name, level, index, width, height, level_depth, size)
            self.total_resource_size += size
            yield Surface(surface_type, level, width, height, data, level_depth)

            width //= 2
            height //= 2
            depth //= 2


def load(source: Union[bytes, bytearray, memoryview, str, os.PathLike, BinaryIO],
         options: Optional[DecodeOptions] = None, **kwargs) -> DDS:
    """
    Decode a DDS file from bytes, a path or a readable binary stream.

    Keyword arguments vertical_flip and strict override the given options.
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        return DDS.from_bytes(bytes(source), options, **kwargs)
    if isinstance(source, (str, os.PathLike)):
        return DDS.from_file(source, options, **kwargs)
    return DDS.from_stream(source, options, **kwargs)
