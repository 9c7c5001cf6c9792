#Coordinate arithmetic for regions and chunks.
#
#A region is a 32x32 grid of chunks. The region containing a chunk, and the chunk's position within that region,
#are found with floor division / floor modulo, so negative coordinates behave:
#    rx, lx = divmod( cx, 32 )
#    -1 -> region -1, local 31
#    -32 -> region -1, local 0
#    -33 -> region -2, local 31

import os.path
import re
from collections import namedtuple

from mcregion.shared import REGION_WIDTH, FilenameError

#Regular expression that matches region filenames; i.e. filenames of the form "r.{x}.{z}.mca" or "r.{x}.{z}.mcr" (where x and z are region coordinates)
RE_FILENAME  = re.compile( r"^r\.(-?\d+)\.(-?\d+)\.(mca|mcr)$", re.IGNORECASE )
FMT_FILENAME = "r.{:d}.{:d}.{}"


class RegionPos( namedtuple( "RegionPos", ( "x", "z" ) ) ):
    """
    Position of a region in the grid of regions.
    Instances are immutable and hashable.
    """
    __slots__ = ()

    @classmethod
    def byFilename( cls, filename ):
        """
        Returns the RegionPos encoded in the given filename.
        Only the last path component is examined, so full paths are accepted.
        Raises FilenameError if the name isn't of the form "r.{x}.{z}.mca" (or ".mcr").
        """
        name = os.path.basename( filename )
        match = RE_FILENAME.fullmatch( name )
        if match is None:
            raise FilenameError( name )
        return cls( int( match.group( 1 ) ), int( match.group( 2 ) ) )

    def getFilename( self, ext="mca" ):
        """Returns the filename a region at this position is stored under, e.g. "r.-1.2.mca"."""
        return FMT_FILENAME.format( self.x, self.z, ext )

    def getChunk( self, lx, lz ):
        """
        Returns the absolute ChunkPos of the chunk at region-local coordinates (lx, lz).
        lx and lz are expected to be in the range [0,31].
        """
        return ChunkPos( REGION_WIDTH * self.x + lx, REGION_WIDTH * self.z + lz )

    def iterChunks( self ):
        """Iterates over the ChunkPos of every slot in this region in z-major order, i.e. header slot order."""
        for lz in range( REGION_WIDTH ):
            for lx in range( REGION_WIDTH ):
                yield self.getChunk( lx, lz )

    def __repr__( self ):
        return "RegionPos({:d}, {:d})".format( self.x, self.z )


class ChunkPos( namedtuple( "ChunkPos", ( "x", "z" ) ) ):
    """
    Absolute position of a chunk.
    Instances are immutable and hashable.
    """
    __slots__ = ()

    def getLocalX( self ):
        return self.x % REGION_WIDTH
    localX = property( getLocalX )

    def getLocalZ( self ):
        return self.z % REGION_WIDTH
    localZ = property( getLocalZ )

    def toLocal( self ):
        """Returns ( localX, localZ ), both in the range [0,31]."""
        return ( self.x % REGION_WIDTH, self.z % REGION_WIDTH )

    def getIndex( self ):
        """Returns the index of this chunk's slot in the region header tables, localZ*32 + localX."""
        return ( self.z % REGION_WIDTH ) * REGION_WIDTH + ( self.x % REGION_WIDTH )

    def getRegion( self ):
        """Returns the RegionPos of the region containing this chunk."""
        return RegionPos( self.x // REGION_WIDTH, self.z // REGION_WIDTH )

    def __repr__( self ):
        return "ChunkPos({:d}, {:d})".format( self.x, self.z )
