"""
Reader for region files ("r.{x}.{z}.mca" / "r.{x}.{z}.mcr").

A RegionFile can be loaded two ways:
    * loadHeaders() reads only the 8 KiB header. This is enough to know which chunks exist and when they were last modified.
    * loadAll() reads the header and the entire file. This is required before chunks can be decoded with loadChunk().

Loading never raises for I/O problems; it returns False and leaves the region as it was.
Decoding never raises for bad chunk data; loadChunk() returns one of the CHUNK_* enums instead.
"""
import logging

from mcregion.shared import (
    CHUNK_HEADER_SIZE,
    CHUNK_OK, CHUNK_DOES_NOT_EXIST, CHUNK_INVALID, CHUNK_NBT_ERROR,
    NBTFormatError, RegionFormatError, RegionIOError,
    readUnsignedInt as _rui
)
from mcregion.pos    import RegionPos
from mcregion.header import HeaderTable
from mcregion.chunk  import Chunk
from mcregion.util   import getDefaultDecompressor

logger = logging.getLogger( __name__ )

#Contents are None until loadAll() succeeds
_EMPTY = ( HeaderTable(), None )

class RegionFile:
    """
    Represents a single region file.
    A region consists of a sparsely populated 32x32 grid of chunks.

    Once loaded, the query methods and loadChunk() only read from the region, so a loaded region can be shared between threads.
    loadHeaders() and loadAll() must not run concurrently with anything else on the same instance.
    """
    __slots__ = ( "filename", "position", "decompressor", "_state" )

    def __init__( self, filename, decompressor=None ):
        """
        Constructor. Does not touch the disk.
        filename is the path to the region file. Its name must be of the form "r.{x}.{z}.mca" (or ".mcr");
            FilenameError is raised otherwise.
        decompressor is an optional callable taking ( scheme, data ) that turns stored chunk payloads into raw NBT.
            Defaults to mcregion.getDefaultDecompressor() at the time a chunk is loaded.
            See mcregion.compression for the built-in choices.
        """
        self.filename     = filename
        self.position     = RegionPos.byFilename( filename )
        self.decompressor = decompressor

        #( HeaderTable, file contents ). Replaced as a whole so readers never see a header and buffer from different loads.
        self._state = _EMPTY

    def _open( self, content ):
        """
        Reads the header (and, if content is True, the whole file) and returns the new state.
        Raises OSError if the file can't be read.
        """
        with open( self.filename, "rb" ) as file:
            header = HeaderTable.read( file, self.position )
            if not content:
                return ( header, None )
            file.seek( 0 )
            return ( header, file.read() )

    def _load( self, content ):
        try:
            state = self._open( content )
        except ( OSError, RegionIOError ) as e:
            logger.warning( "Unable to read region file %s: %s", self.filename, e )
            return False
        self._state = state
        logger.debug( "Loaded %s: %d chunks, %d bytes", self.filename, len( state[0] ), len( state[1] or b"" ) )
        return True

    def loadHeaders( self ):
        """
        Reads the region's header, replacing any previously loaded header.
        Any previously loaded file contents are dropped, so loadAll() is needed again before decoding chunks.
        Returns True on success, or False if the file couldn't be read (in which case nothing changes).
        """
        return self._load( False )

    def loadAll( self ):
        """
        Reads the region's header and the entire file into memory, replacing anything previously loaded.
        Returns True on success, or False if the file couldn't be read (in which case nothing changes).
        """
        return self._load( True )

    def getFilename( self ):
        return self.filename

    def getPosition( self ):
        """Returns the RegionPos of this region."""
        return self.position

    def getPresentChunks( self ):
        """Returns a frozenset with the absolute ChunkPos of every chunk stored in this region."""
        return self._state[0].present
    presentChunks = property( getPresentChunks )

    def hasContent( self ):
        """Returns True if the file contents have been loaded with loadAll()."""
        return self._state[1] is not None

    def hasChunk( self, pos ):
        """
        Returns True if the region stores a chunk for pos.
        Only the region-local part of pos is used; callers are expected to pass chunks belonging to this region.
        """
        return self._state[0].hasChunk( pos )

    def getChunkTimestamp( self, pos ):
        """Returns the last modification time of the chunk at pos (seconds since the unix epoch), or 0 if there is no such chunk."""
        return self._state[0].getTimestamp( pos )

    def getChunkOffset( self, pos ):
        """Returns the byte offset of the chunk at pos within the file, or 0 if there is no such chunk."""
        return self._state[0].getOffset( pos )

    def getChunkSectorCount( self, pos ):
        """Returns the number of 4 KiB sectors the header allocates to the chunk at pos."""
        return self._state[0].getSectorCount( pos )

    def loadChunk( self, pos, chunk ):
        """
        Decodes the chunk at pos into chunk (normally an empty Chunk).
        Requires a prior successful loadAll().

        Returns one of:
            CHUNK_OK             - chunk was filled in.
            CHUNK_DOES_NOT_EXIST - the region has no chunk at pos.
            CHUNK_INVALID        - the stored length runs past the end of the file, the compression type is unknown,
                                   the payload doesn't decompress, or the NBT document is shorter than the payload.
            CHUNK_NBT_ERROR      - the payload is not a valid NBT document.
        """
        header, data = self._state
        offset = header.getOffset( pos )
        if offset == 0:
            return CHUNK_DOES_NOT_EXIST
        if data is None:
            logger.debug( "Chunk %d:%d in %s requested before loadAll()", pos.x, pos.z, self.filename )
            return CHUNK_INVALID

        #Read chunk header
        end = len( data )
        if offset + CHUNK_HEADER_SIZE > end:
            logger.debug( "Chunk %d:%d in %s starts past the end of the file", pos.x, pos.z, self.filename )
            return CHUNK_INVALID
        length      = _rui( data, offset )
        compression = data[ offset + 4 ]
        if length < 1 or offset + 4 + length > end:
            logger.debug( "Chunk %d:%d in %s has an invalid length %d", pos.x, pos.z, self.filename, length )
            return CHUNK_INVALID

        #Length includes the compression byte
        size = length - 1
        payload = memoryview( data )[ offset + CHUNK_HEADER_SIZE : offset + CHUNK_HEADER_SIZE + size ]

        decompressor = self.decompressor or getDefaultDecompressor()
        try:
            raw = decompressor( compression, payload )
        except RegionFormatError as e:
            logger.debug( "Chunk %d:%d in %s: %s", pos.x, pos.z, self.filename, e )
            return CHUNK_INVALID

        try:
            if not chunk.readNBT( raw, len( raw ) ):
                logger.debug( "Chunk %d:%d in %s has trailing data", pos.x, pos.z, self.filename )
                return CHUNK_INVALID
        except NBTFormatError as e:
            logger.warning( "Unable to read chunk at %d:%d in %s: %s", pos.x, pos.z, self.filename, e )
            return CHUNK_NBT_ERROR

        chunk.pos         = pos
        chunk.timestamp   = header.getTimestamp( pos )
        chunk.size        = size
        chunk.compression = compression
        return CHUNK_OK

    def iterChunks( self ):
        """
        Iterates over every chunk in this region in the order they're stored in the file.
        Requires a prior successful loadAll().
        For each chunk, yields a tuple ( pos, status, chunk ) where status is the CHUNK_* result of loadChunk().
        A chunk that fails to load is yielded with its status and iteration carries on.
        """
        header = self._state[0]
        for pos in sorted( header.present, key=header.getOffset ):
            chunk = Chunk()
            yield ( pos, self.loadChunk( pos, chunk ), chunk )

    def __len__( self ):
        """Returns the number of chunks in this region, an int in the range [0, 1024]."""
        return len( self._state[0] )

    #Handles "pos in region". Equivalent to region.hasChunk( pos ).
    __contains__ = hasChunk

    def __repr__( self ):
        return "RegionFile('{}')".format( self.filename )

def openRegion( filename, content=False, decompressor=None ):
    """
    Returns a RegionFile for filename with its header loaded, or None if the file can't be read.
    If content is True, the whole file is loaded so chunks can be decoded straight away.
    Raises FilenameError if filename isn't a region filename.
    """
    region = RegionFile( filename, decompressor )
    ok = region.loadAll() if content else region.loadHeaders()
    return region if ok else None
