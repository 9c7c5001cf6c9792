#Chunk payloads are stored compressed. The byte following a chunk's length says how:
#    1 = gzip (unused by the game, but valid)
#    2 = zlib (what the game writes)
#    3 = uncompressed
#
#A decompressor is any callable taking ( scheme, data ) and returning the uncompressed bytes.
#It signals bad input by raising a RegionFormatError.

import gzip
import zlib

from mcregion.shared import (
    COMPRESSION_GZIP, COMPRESSION_ZLIB, COMPRESSION_NONE,
    CompressionError, UnknownCompressionError
)

#Maps COMPRESSION_* enums to names
COMPRESSION_NAMES = {
    COMPRESSION_GZIP: "gzip",
    COMPRESSION_ZLIB: "zlib",
    COMPRESSION_NONE: "none",
}

def decompress( scheme, data ):
    """
    Returns the uncompressed form of data, a bytes-like object compressed with the given scheme (a COMPRESSION_* enum).
    Raises UnknownCompressionError if scheme isn't recognized.
    Raises CompressionError if data is not valid for its scheme.
    """
    if scheme == COMPRESSION_ZLIB:
        try:
            return zlib.decompress( data )
        except zlib.error as e:
            raise CompressionError( "Corrupt zlib stream: {}".format( e ) ) from e
    elif scheme == COMPRESSION_GZIP:
        try:
            return gzip.decompress( bytes( data ) )
        except ( OSError, EOFError, zlib.error ) as e:
            raise CompressionError( "Corrupt gzip stream: {}".format( e ) ) from e
    elif scheme == COMPRESSION_NONE:
        return bytes( data )
    raise UnknownCompressionError( scheme )

def passthrough( scheme, data ):
    """
    Returns data unchanged, whatever the scheme.
    Use this when the decoder handles compression itself, or to inspect the stored bytes.
    """
    return bytes( data )
