from struct import Struct

#Region files are divided into 4KiB blocks called sectors.
#Region files start with an 8 KiB large header.
#The first 4 KiB consists of 1024 locations.
#Each location is a 4-byte, big-endian word: the top 3 bytes hold the offset of the chunk in sectors, the low byte holds its size in sectors.
#If a location is 0, the chunk has not been generated yet.
#The remaining 4 KiB consists of 1024 timestamps (4-byte, big-endian, seconds since the unix epoch).
#At the start of each chunk is a 5 byte header:
#    * Length: 4-byte, big-endian integer; counts the compression byte plus the payload.
#    * Compression: 1-byte unsigned integer; see COMPRESSION_* enums below.
SECTOR_SIZE   = 4096
REGION_WIDTH  = 32
SLOT_COUNT    = REGION_WIDTH * REGION_WIDTH
HEADER_SIZE   = 2 * SECTOR_SIZE
CHUNK_HEADER_SIZE = 5

#Compression types
COMPRESSION_GZIP = 1
COMPRESSION_ZLIB = 2
COMPRESSION_NONE = 3

#Results of RegionFile.loadChunk()
CHUNK_OK             = 0
CHUNK_DOES_NOT_EXIST = 1
CHUNK_INVALID        = 2
CHUNK_NBT_ERROR      = 3

#Tag Types
TAG_END        = 0
TAG_BYTE       = 1  #1-byte signed integer.
TAG_SHORT      = 2  #2-byte big-endian signed integer.
TAG_INT        = 3  #4-byte big-endian signed integer.
TAG_LONG       = 4  #8-byte big-endian signed integer.
TAG_FLOAT      = 5  #big-endian binary32.
TAG_DOUBLE     = 6  #big-endian binary64.
TAG_BYTE_ARRAY = 7  #4-byte signed length followed by that many bytes.
TAG_STRING     = 8  #2-byte unsigned length followed by that many bytes of UTF-8.
TAG_LIST       = 9  #1-byte tag type, 4-byte signed length, then that many payloads.
TAG_COMPOUND   = 10 #Named tags terminated by a TAG_End (null byte).
TAG_INT_ARRAY  = 11 #4-byte signed length followed by that many 4-byte signed integers.
TAG_LONG_ARRAY = 12 #4-byte signed length followed by that many 8-byte signed integers.

#Internal names of tags (indexed by tag type)
TAG_NAMES = (
    "TAG_End",
    "TAG_Byte",
    "TAG_Short",
    "TAG_Int",
    "TAG_Long",
    "TAG_Float",
    "TAG_Double",
    "TAG_Byte_Array",
    "TAG_String",
    "TAG_List",
    "TAG_Compound",
    "TAG_Int_Array",
    "TAG_Long_Array"
)

TAG_COUNT = len( TAG_NAMES )

#Structs. Every multi-byte integer in a region file is big-endian.
_B  = Struct( ">b"  )       #Signed byte (1 byte)
_S  = Struct( ">h"  )       #Signed big-endian short (2 bytes)
_US = Struct( ">H"  )       #Unsigned big-endian short (2 bytes)
_I  = Struct( ">i"  )       #Signed big-endian int (4 bytes)
_L  = Struct( ">q"  )       #Signed big-endian long (8 bytes)
_F  = Struct( ">f"  )       #Big-endian float (4 bytes)
_D  = Struct( ">d"  )       #Big-endian double (8 bytes)
_UI = Struct( ">I"  )       #Unsigned big-endian int (4 bytes)
_TL = Struct( ">bi" )       #Tag list info
_HT = Struct( ">{:d}I".format( SLOT_COUNT ) )   #One half of the region header




class NBTFormatError( Exception ):
    """This exception is raised when parsing data that violates the NBT format."""
    pass

class WrongTagError( NBTFormatError ):
    """
    WrongTagError( expected, given )

    This exception is raised when the root tag of an NBT document is not a TAG_Compound.
    """
    def __str__( self ):
        return "Expected {}, but received {} instead.".format( describeTag( self.args[0] ), describeTag( self.args[1] ) )

class UnknownTagTypeError( NBTFormatError ):
    """
    UnknownTagTypeError( tagType )

    This exception is raised when a tag with an invalid or unrecognized type is parsed.
    """
    def __str__( self ):
        return "Unknown or unsupported tag type: {:d}".format( self.args[0] )

class OutOfBoundsError( NBTFormatError ):
    """
    OutOfBoundsError( value, min, max )

    This exception is raised when a length read from the data is negative.
    """
    def __str__( self ):
        return "Value {:d} is outside of expected range [{:d},{:d}].".format( *self.args )

class TruncatedDataError( NBTFormatError ):
    """
    TruncatedDataError( offset, wanted, available )

    This exception is raised when the data ends in the middle of a tag.
    """
    def __str__( self ):
        return "Data ended prematurely at offset {:d}: wanted {:d} bytes, {:d} available.".format( *self.args )




class RegionError( Exception ):
    """Base class for errors concerning region files."""
    pass

class FilenameError( RegionError, ValueError ):
    """
    FilenameError( filename )

    This exception is raised when a filename does not follow the "r.{x}.{z}.mca" pattern.
    """
    def __str__( self ):
        return "\"{}\" is not a region filename.".format( self.args[0] )

class RegionIOError( RegionError ):
    """This exception is raised when a region file cannot be opened or read."""
    pass

class RegionFormatError( RegionError ):
    """This exception is raised when a chunk's stored bytes are structurally unusable."""
    pass

class UnknownCompressionError( RegionFormatError ):
    """
    UnknownCompressionError( scheme )

    This exception is raised when a chunk header names a compression type we don't recognize.
    """
    def __str__( self ):
        return "Unrecognized compression type: {:d}.".format( self.args[0] )

class CompressionError( RegionFormatError ):
    """This exception is raised when a chunk payload fails to decompress."""
    pass




def describeTag( tagType ):
    """
    Returns a short description of a tag with the given tagType, including the internal name and numeric type (e.g. TAG_Compound (10) ).
    If tagType does not represent a valid tag, returns "Unknown (<tagType>)".
    """
    if tagType <= 0 or tagType >= TAG_COUNT:
        return "Unknown ({:d})".format( tagType )
    return "{} ({:d})".format( TAG_NAMES[tagType], tagType )

#_avtt
def assertValidTagType( tagType ):
    """Raises UnknownTagTypeError if the given tagType is unrecognized"""
    if tagType < 0 or tagType >= TAG_COUNT:
        raise UnknownTagTypeError( tagType )

#_rui
def readUnsignedInt( buffer, offset ):
    """
    Decodes a 4-byte, big-endian unsigned integer starting at the given offset in buffer.
    The caller is responsible for checking that 4 bytes are available.
    """
    return _UI.unpack_from( buffer, offset )[0]
