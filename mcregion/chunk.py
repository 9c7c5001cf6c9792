from mcregion import nbt as _nbt
from mcregion.pos import ChunkPos

#Chunks are (typically zlib compressed) NBT documents stored in region files.
#Each chunk stores detailed information about a 16 block wide column of the world.
#Before Minecraft 1.18 everything lives in a TAG_Compound named "Level"; later versions put the same tags at the root.
class Chunk:
    """
    A decoded chunk.
    Create an empty Chunk and pass it to RegionFile.loadChunk(), which fills it in.
    """
    __slots__ = ( "pos", "timestamp", "size", "compression", "name", "nbt", "consumed" )

    def __init__( self ):
        self.pos         = None     #Absolute ChunkPos the chunk was loaded from
        self.timestamp   = None     #Timestamp (seconds since unix epoch)
        self.size        = None     #Size of stored (compressed) chunk contents in bytes
        self.compression = None     #Compression type (see COMPRESSION_* enums)
        self.name        = None     #Name of the root tag
        self.nbt         = None     #A dict containing the contents of the chunk
        self.consumed    = None     #Number of decompressed bytes the NBT document occupied

    def readNBT( self, data, length ):
        """
        Decodes the first length bytes of data as an NBT document and stores the result in this chunk.
        Returns False if the document ended before length bytes were used.
        Raises an NBTFormatError if the bytes are not a valid NBT document.
        """
        name, value, consumed = _nbt.read( memoryview( data )[ : length ] )
        self.name     = name
        self.nbt      = value
        self.consumed = consumed
        return consumed == length

    def getLevel( self ):
        """Returns the compound holding the chunk's data: "Level" if there is one, otherwise the root."""
        root = self.nbt
        if root is None:
            return None
        level = root.get( "Level" )
        return level if isinstance( level, dict ) else root
    level = property( getLevel )

    def getDataPos( self ):
        """
        Returns the ChunkPos recorded inside the chunk's own data (xPos / zPos), or None if it doesn't record one.
        This normally equals pos; a mismatch means the chunk was copied from elsewhere.
        """
        level = self.getLevel()
        if level is None:
            return None
        try:
            return ChunkPos( int( level["xPos"] ), int( level["zPos"] ) )
        except ( KeyError, TypeError, ValueError ):
            return None
    dataPos = property( getDataPos )

    def isLoaded( self ):
        return self.nbt is not None

    def __repr__( self ):
        if self.pos is None:
            return "Chunk()"
        return "Chunk({:d}, {:d})".format( *self.pos )
