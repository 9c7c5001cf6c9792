"""
mcregion is a library for reading Minecraft region files (.mca / .mcr) for Python 3.
It answers cheap questions about a region (which chunks exist, when they were last saved) from the 8 KiB header alone,
and decodes individual chunks into plain Python values, reporting a status for each chunk instead of failing the whole file.
"""

#Constants, Exceptions
from mcregion.shared import (
    SECTOR_SIZE, SLOT_COUNT,
    COMPRESSION_GZIP, COMPRESSION_ZLIB, COMPRESSION_NONE,
    CHUNK_OK, CHUNK_DOES_NOT_EXIST, CHUNK_INVALID, CHUNK_NBT_ERROR,
    NBTFormatError, WrongTagError, UnknownTagTypeError, OutOfBoundsError, TruncatedDataError,
    RegionError, FilenameError, RegionIOError, RegionFormatError, CompressionError, UnknownCompressionError
)

#Coordinates
from mcregion.pos import RegionPos, ChunkPos

#Region reading
from mcregion.header import HeaderTable, decodeLocation
from mcregion.chunk  import Chunk
from mcregion.region import RegionFile, openRegion

#Configuration
from mcregion.util import setDefaultDecompressor, getDefaultDecompressor


#Export everything we imported above
__all__ = [
    "SECTOR_SIZE", "SLOT_COUNT",
    "COMPRESSION_GZIP", "COMPRESSION_ZLIB", "COMPRESSION_NONE",
    "CHUNK_OK", "CHUNK_DOES_NOT_EXIST", "CHUNK_INVALID", "CHUNK_NBT_ERROR",
    "NBTFormatError", "WrongTagError", "UnknownTagTypeError", "OutOfBoundsError", "TruncatedDataError",
    "RegionError", "FilenameError", "RegionIOError", "RegionFormatError", "CompressionError", "UnknownCompressionError",
    "RegionPos", "ChunkPos",
    "HeaderTable", "decodeLocation",
    "Chunk",
    "RegionFile", "openRegion",
    "setDefaultDecompressor", "getDefaultDecompressor"
]
