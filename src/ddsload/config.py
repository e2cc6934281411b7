"""Decode options"""
from dataclasses import dataclass


@dataclass(frozen=True)
class DecodeOptions:
    """Settings for a single decode.

    Attributes:
        vertical_flip: Flip every surface upside down while reading, as OpenGL
            expects the first row at the bottom
        strict: Reject headers that omit the DDSD_CAPS, DDSD_PIXELFORMAT or
            DDSCAPS_TEXTURE flags; off by default since many writers leave them out
    """
    vertical_flip: bool = False
    strict: bool = False
