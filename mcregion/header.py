#The 8 KiB table at the start of every region file.
#
#Slots are stored on disk in ZX order (index = x + 32*z). Every lookup in this package uses
#ChunkPos.getIndex(), which computes the same localZ*32 + localX key, so the parsed tables can be
#indexed directly without any further translation.

from array import array

from mcregion.shared import (
    SECTOR_SIZE, REGION_WIDTH, SLOT_COUNT, HEADER_SIZE,
    RegionIOError,
    _HT
)

def decodeLocation( word ):
    """
    Splits a location word into ( offset, sectors ).
    The top 3 bytes of the word are the chunk's position in sectors; this is converted to an offset in bytes.
    The low byte is the number of sectors allocated to the chunk.
        decodeLocation( 0x00000201 ) -> ( 8192, 1 )
    """
    return ( SECTOR_SIZE * ( ( word & 0xFFFFFF00 ) >> 8 ), word & 0x000000FF )

def _emptySlots():
    #"L" is guaranteed to hold at least 4 bytes, which fits any location or timestamp.
    return array( "L", [ 0 ] ) * SLOT_COUNT


class HeaderTable:
    """
    Parsed region header.
    offsets, sectors and timestamps are parallel 1024-slot arrays indexed by ChunkPos.getIndex().
    An offset of 0 means the chunk is absent; present holds the ChunkPos of every slot with a non-zero offset.

    Tables are never modified after construction. Reloading a region builds a new table.
    """
    __slots__ = ( "offsets", "sectors", "timestamps", "present" )

    def __init__( self, offsets=None, sectors=None, timestamps=None, present=None ):
        self.offsets    = _emptySlots() if offsets    is None else offsets
        self.sectors    = _emptySlots() if sectors    is None else sectors
        self.timestamps = _emptySlots() if timestamps is None else timestamps
        self.present    = frozenset() if present is None else frozenset( present )

    @classmethod
    def read( cls, file, regionpos ):
        """
        Reads a header table from file, a readable binary file-like object positioned anywhere.
        regionpos is the RegionPos of the file; it's used to convert slots to absolute chunk coordinates.

        Raises RegionIOError if file is closed or unreadable.
        A file shorter than 8 KiB is not an error: the missing words are treated as absent slots.
        """
        if file.closed or not file.readable():
            raise RegionIOError( "Region stream is not readable." )

        file.seek( 0 )
        data = file.read( HEADER_SIZE )
        if len( data ) < HEADER_SIZE:
            data = data.ljust( HEADER_SIZE, b"\x00" )

        locations  = _HT.unpack_from( data, 0 )
        stamps     = _HT.unpack_from( data, SECTOR_SIZE )

        offsets    = _emptySlots()
        sectors    = _emptySlots()
        timestamps = _emptySlots()
        present    = set()

        for x in range( REGION_WIDTH ):
            for z in range( REGION_WIDTH ):
                i = x + z * REGION_WIDTH
                loc = locations[i]
                if loc == 0:
                    continue

                offset, count = decodeLocation( loc )
                #A location with a zero sector offset points into the header itself; treat it as absent
                if offset == 0:
                    continue
                key = z * REGION_WIDTH + x
                offsets[key]    = offset
                sectors[key]    = count
                timestamps[key] = stamps[i]
                present.add( regionpos.getChunk( x, z ) )

        return cls( offsets, sectors, timestamps, present )

    def hasChunk( self, pos ):
        return self.offsets[ pos.getIndex() ] != 0

    def getOffset( self, pos ):
        """Returns the byte offset of the chunk's header within the region file, or 0 if it is absent."""
        return self.offsets[ pos.getIndex() ]

    def getSectorCount( self, pos ):
        return self.sectors[ pos.getIndex() ]

    def getTimestamp( self, pos ):
        """Returns the chunk's last modification time (seconds since the unix epoch), or 0 if it is absent."""
        return self.timestamps[ pos.getIndex() ]

    def __len__( self ):
        return len( self.present )

    def __repr__( self ):
        return "HeaderTable({:d} chunks)".format( len( self.present ) )
