import os.path
import unittest

from mcregion import RegionPos, ChunkPos, FilenameError

class TestRegionPos( unittest.TestCase ):
    def test_byFilename( self ):
        self.assertEqual( RegionPos.byFilename( "r.3.-7.mca" ), RegionPos( 3, -7 ) )
        self.assertEqual( RegionPos.byFilename( "r.-12.0.mcr" ), RegionPos( -12, 0 ) )
        self.assertEqual( RegionPos.byFilename( "R.1.2.MCA" ), RegionPos( 1, 2 ) )

    def test_byFilename_path( self ):
        path = os.path.join( "world", "region", "r.5.6.mca" )
        self.assertEqual( RegionPos.byFilename( path ), RegionPos( 5, 6 ) )

    def test_byFilename_rejects( self ):
        for name in ( "r.1.mca", "r.a.b.mca", "r.1.2.dat", "region.1.2.mca", "r.1.2.mca.bak", "r.1.2", "" ):
            with self.subTest( name=name ):
                with self.assertRaises( FilenameError ):
                    RegionPos.byFilename( name )

    def test_filenameError_is_valueError( self ):
        with self.assertRaises( ValueError ):
            RegionPos.byFilename( "level.dat" )

    def test_getFilename( self ):
        self.assertEqual( RegionPos( -1, 2 ).getFilename(), "r.-1.2.mca" )
        self.assertEqual( RegionPos( 0, 0 ).getFilename( "mcr" ), "r.0.0.mcr" )

    def test_getChunk( self ):
        self.assertEqual( RegionPos( 2, -1 ).getChunk( 5, 31 ), ChunkPos( 69, -1 ) )

    def test_iterChunks( self ):
        chunks = list( RegionPos( -1, 0 ).iterChunks() )
        self.assertEqual( len( chunks ), 1024 )
        self.assertEqual( len( set( chunks ) ), 1024 )
        self.assertEqual( chunks[0], ChunkPos( -32, 0 ) )
        self.assertEqual( chunks[1], ChunkPos( -31, 0 ) )
        self.assertEqual( [ c.getIndex() for c in chunks ], list( range( 1024 ) ) )

class TestChunkPos( unittest.TestCase ):
    def test_toLocal( self ):
        self.assertEqual( ChunkPos( 0, 0 ).toLocal(), ( 0, 0 ) )
        self.assertEqual( ChunkPos( 33, 64 ).toLocal(), ( 1, 0 ) )

    def test_toLocal_negative( self ):
        self.assertEqual( ChunkPos( -1, -32 ).toLocal(), ( 31, 0 ) )
        self.assertEqual( ChunkPos( -33, -31 ).toLocal(), ( 31, 1 ) )
        for v in range( -100, 100 ):
            pos = ChunkPos( v, -v )
            self.assertTrue( 0 <= pos.localX < 32 )
            self.assertTrue( 0 <= pos.localZ < 32 )

    def test_getRegion( self ):
        self.assertEqual( ChunkPos( 31, 32 ).getRegion(), RegionPos( 0, 1 ) )
        self.assertEqual( ChunkPos( -1, -32 ).getRegion(), RegionPos( -1, -1 ) )
        self.assertEqual( ChunkPos( -33, 0 ).getRegion(), RegionPos( -2, 0 ) )

    def test_region_roundtrip( self ):
        for pos in ( ChunkPos( 5, 7 ), ChunkPos( -40, 100 ), ChunkPos( -1, -1 ) ):
            self.assertEqual( pos.getRegion().getChunk( *pos.toLocal() ), pos )

    def test_getIndex( self ):
        self.assertEqual( ChunkPos( 3, 2 ).getIndex(), 2 * 32 + 3 )
        self.assertEqual( ChunkPos( -1, -1 ).getIndex(), 1023 )

    def test_hashable( self ):
        self.assertEqual( len( { ChunkPos( 1, 2 ), ChunkPos( 1, 2 ), ChunkPos( 2, 1 ) } ), 2 )
        self.assertEqual( repr( ChunkPos( 1, -2 ) ), "ChunkPos(1, -2)" )

if __name__ == "__main__":
    unittest.main()
