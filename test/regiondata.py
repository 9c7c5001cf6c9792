#Builders for synthetic region files and NBT documents used by the tests.

import itertools
import os.path
import struct
import zlib

PAGE_SIZE = 4096
EMPTY_HEADER = bytes( 2 * PAGE_SIZE )

TAG_END, TAG_BYTE, TAG_SHORT, TAG_INT, TAG_LONG, TAG_FLOAT, TAG_DOUBLE = range( 7 )
TAG_BYTE_ARRAY, TAG_STRING, TAG_LIST, TAG_COMPOUND, TAG_INT_ARRAY, TAG_LONG_ARRAY = range( 7, 13 )

def STRING( s ):
    b = s.encode() if isinstance( s, str ) else s
    return struct.pack( ">H", len( b ) ) + b

def NAMED( tagType, name, payload ):
    return bytes( ( tagType, ) ) + STRING( name ) + payload

def COMPOUND( *tags ):
    return b"".join( tags ) + b"\x00"

def LIST( tagType, payloads ):
    return struct.pack( ">bi", tagType, len( payloads ) ) + b"".join( payloads )

def INT( v ):
    return struct.pack( ">i", v )

def DOCUMENT( *tags, name="" ):
    return NAMED( TAG_COMPOUND, name, COMPOUND( *tags ) )

def NESTED_LISTS( depth ):
    """A document holding depth TAG_Lists, each containing the next."""
    return DOCUMENT( NAMED( TAG_LIST, "x", struct.pack( ">bi", TAG_LIST, 1 ) * depth + struct.pack( ">bi", TAG_END, 0 ) ) )

def LEVEL( x, z, *tags ):
    """A pre-1.18 style chunk document recording its own position."""
    return DOCUMENT(
        NAMED( TAG_COMPOUND, "Level", COMPOUND(
            NAMED( TAG_INT, "xPos", INT( x ) ),
            NAMED( TAG_INT, "zPos", INT( z ) ),
            *tags
        ) )
    )

def CHUNK_DATA( data, *, length=None, compression=3 ):
    """Chunk header + payload. length defaults to len( data ) + 1 (the compression byte is counted)."""
    if length is None:
        length = len( data ) + 1
    return length.to_bytes( 4, "big" ) + bytes( ( compression, ) ) + data

def ZLIB_CHUNK_DATA( document ):
    return CHUNK_DATA( zlib.compress( document ), compression=2 )

def CHUNK( x, z, *, pageaddr, pagecount=None, timestamp=0, data ):
    """
    Returns { offset: bytes } entries placing a chunk at local coordinates (x, z).
    pageaddr is in sectors, not bytes.
    """
    if pagecount is None:
        pagecount = ( len( data ) + PAGE_SIZE - 1 ) // PAGE_SIZE

    idx = z * 32 + x

    return {
        idx * 4:             ( pageaddr << 8 | pagecount ).to_bytes( 4, "big" ),
        idx * 4 + PAGE_SIZE: timestamp.to_bytes( 4, "big" ),
        pageaddr * PAGE_SIZE: data
    }

def RAW( offset, data ):
    return { offset: data }

def REGION( size_in_bytes, *chunks ):
    region = bytearray( size_in_bytes )

    for offset, data in itertools.chain( *( chunk.items() for chunk in chunks ) ):
        end = offset + len( data )
        region[ offset : end ] = data

    assert len( region ) == size_in_bytes
    return bytes( region )

def writeRegion( directory, rx, rz, data, ext="mca" ):
    """Writes data to "r.{rx}.{rz}.{ext}" in directory and returns the path."""
    path = os.path.join( directory, "r.{:d}.{:d}.{}".format( rx, rz, ext ) )
    with open( path, "wb" ) as file:
        file.write( data )
    return path

class RecordingChunk:
    """Stands in for Chunk; remembers what loadChunk() handed to readNBT()."""
    def __init__( self, result=True ):
        self.result = result
        self.calls  = []
    def readNBT( self, data, length ):
        self.calls.append( ( bytes( data ), length ) )
        return self.result
