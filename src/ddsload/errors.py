"""Exceptions raised while decoding DDS files"""


class DDSError(ValueError):
    """Base class for every failure to decode a DDS stream"""


class DDSStructureError(DDSError):
    """The container itself is malformed: magic, header sizes, flags or truncated data"""


class DDSFormatError(DDSError):
    """The pixel format cannot be decoded as declared"""


class UnsupportedFlipError(DDSFormatError, NotImplementedError):
    """Vertical flip was requested for a block format that cannot be flipped (BC6H, BC7)"""


class InvalidFormatError(ValueError):
    """A format value outside the known enumerations was passed to a catalog lookup"""
