"""Decoded surfaces and the texture resources that own them"""
from dataclasses import dataclass, field
from typing import Iterator, List

from .enums import SurfaceType


@dataclass
class Surface:
    """A single image plane with its own pixel data.

    For volume textures a surface holds every depth slice of one mip level,
    stored one after another.
    """
    type: SurfaceType
    level: int  # Mip level, 0 is the full resolution image
    width: int
    height: int
    data: bytearray = field(repr=False)  # Owned pixel data, already flipped if requested
    depth: int = 1

    @property
    def size(self) -> int:
        """Size of the pixel data in bytes"""
        return len(self.data)

    @property
    def slice_size(self) -> int:
        """Size of a single depth slice in bytes"""
        return len(self.data) // self.depth


@dataclass
class TextureResource:
    """A single texture of any kind: all faces and mip levels of one array element.

    Files are not required to provide full mip chains, so the surface count is
    whatever the file declares.
    """
    surfaces: List[Surface] = field(default_factory=list)

    def __iter__(self) -> Iterator[Surface]:
        return iter(self.surfaces)

    def __len__(self) -> int:
        return len(self.surfaces)

    def __getitem__(self, index: int) -> Surface:
        return self.surfaces[index]

    @property
    def size(self) -> int:
        """Total size of all surfaces in bytes"""
        return sum(surface.size for surface in self.surfaces)

    def __str__(self) -> str:
        return f"Texture with {len(self.surfaces)} surfaces"
