"""
Reads Named Binary Tag (NBT) data from an in-memory buffer into plain Python values.

Tags are converted like so:
    TAG_Byte, TAG_Short, TAG_Int, TAG_Long -> int
    TAG_Float, TAG_Double                  -> float
    TAG_Byte_Array                         -> bytes
    TAG_String                             -> str
    TAG_List                               -> list
    TAG_Compound                           -> dict
    TAG_Int_Array, TAG_Long_Array          -> list of int

Chunk payloads are small enough to decompress completely before decoding, so unlike a streaming parser
this reader works on a bytes-like object and keeps track of how much of it was used.
"""
from mcregion.shared import (
    WrongTagError, OutOfBoundsError, TruncatedDataError, NBTFormatError,
    assertValidTagType as _avtt,
    _B, _S, _US, _I, _L, _F, _D, _TL,
    TAG_END, TAG_COMPOUND
)

class _Input:
    """Read cursor over a bytes-like object."""
    __slots__ = ( "data", "pos" )

    def __init__( self, data ):
        self.data = memoryview( data ).cast( "B" )
        self.pos  = 0

    def take( self, n ):
        """Returns the next n bytes as a memoryview and advances past them."""
        pos = self.pos
        available = len( self.data ) - pos
        if n > available:
            raise TruncatedDataError( pos, n, available )
        self.pos = pos + n
        return self.data[ pos : pos + n ]

    def unpack( self, struct ):
        return struct.unpack( self.take( struct.size ) )[0]

def read( data ):
    """
    Reads a named root TAG_Compound from data, a bytes-like object.

    Returns a tuple, ( name, value, consumed ).
    name is the name of the root tag (usually "").
    value is a dict holding the root compound's contents.
    consumed is the number of bytes of data that make up the document. Bytes after it are ignored.

    Raises an NBTFormatError (or one of its subclasses) if data is not a valid NBT document.
    """
    input = _Input( data )
    tagType = input.unpack( _B )
    if tagType != TAG_COMPOUND:
        raise WrongTagError( TAG_COMPOUND, tagType )
    name = parseTagString( input )
    try:
        value = parseTagCompound( input )
    except RecursionError as e:
        raise NBTFormatError( "Tags are nested too deeply." ) from e
    return ( name, value, input.pos )

def parseTagByte( input ):
    return input.unpack( _B )

def parseTagShort( input ):
    return input.unpack( _S )

def parseTagInt( input ):
    return input.unpack( _I )

def parseTagLong( input ):
    return input.unpack( _L )

def parseTagFloat( input ):
    return input.unpack( _F )

def parseTagDouble( input ):
    return input.unpack( _D )

def _readArrayLength( input ):
    length = input.unpack( _I )
    if length < 0:
        raise OutOfBoundsError( length, 0, 2147483647 )
    return length

def parseTagByteArray( input ):
    return bytes( input.take( _readArrayLength( input ) ) )

def parseTagString( input ):
    """Reads a TAG_String payload: an unsigned 2-byte length followed by (modified) UTF-8."""
    raw = bytes( input.take( input.unpack( _US ) ) )
    try:
        return raw.decode( "utf-8" )
    except UnicodeDecodeError:
        #Java's modified UTF-8 encodes supplementary characters as surrogate pairs
        try:
            return raw.decode( "utf-8", "surrogatepass" ).encode( "utf-16", "surrogatepass" ).decode( "utf-16" )
        except UnicodeError as e:
            raise NBTFormatError( "Invalid string at offset {:d}: {}".format( input.pos - len( raw ), e ) ) from e

def parseTagList( input ):
    tagType, length = _TL.unpack( input.take( _TL.size ) )
    _avtt( tagType )
    if length < 0:
        raise OutOfBoundsError( length, 0, 2147483647 )
    if tagType == TAG_END:
        #An empty list may have any length recorded alongside TAG_End; no payloads follow.
        return []
    parser = TAG_PARSERS[ tagType ]
    return [ parser( input ) for i in range( length ) ]

def parseTagCompound( input ):
    value = {}
    tagType = input.unpack( _B )
    while tagType != TAG_END:
        _avtt( tagType )
        name = parseTagString( input )
        value[ name ] = TAG_PARSERS[ tagType ]( input )
        tagType = input.unpack( _B )
    return value

def parseTagIntArray( input ):
    length = _readArrayLength( input )
    raw = input.take( 4 * length )
    return [ _I.unpack_from( raw, 4 * i )[0] for i in range( length ) ]

def parseTagLongArray( input ):
    length = _readArrayLength( input )
    raw = input.take( 8 * length )
    return [ _L.unpack_from( raw, 8 * i )[0] for i in range( length ) ]

#List of functions (indexed by tag type) that parse the payloads for their respective tags.
TAG_PARSERS = (
    None,               #TAG_END
    parseTagByte,       #TAG_BYTE
    parseTagShort,      #TAG_SHORT
    parseTagInt,        #TAG_INT
    parseTagLong,       #TAG_LONG
    parseTagFloat,      #TAG_FLOAT
    parseTagDouble,     #TAG_DOUBLE
    parseTagByteArray,  #TAG_BYTE_ARRAY
    parseTagString,     #TAG_STRING
    parseTagList,       #TAG_LIST
    parseTagCompound,   #TAG_COMPOUND
    parseTagIntArray,   #TAG_INT_ARRAY
    parseTagLongArray   #TAG_LONG_ARRAY
)
