from mcregion.compression import decompress

#Decompressor used by regions that weren't given one explicitly
_defaultDecompressor = None

def setDefaultDecompressor( fn ):
    """
    Sets the decompressor returned by getDefaultDecompressor().
    fn should be a callable taking ( scheme, data ) and returning bytes; see mcregion.compression.
    Passing None restores the built-in default, mcregion.compression.decompress.
    """
    global _defaultDecompressor
    _defaultDecompressor = fn

def getDefaultDecompressor():
    """
    Return the decompressor used by RegionFile instances created without a decompressor argument.
    If this has not manually been set with setDefaultDecompressor(), returns mcregion.compression.decompress.
    For example, to hand the stored bytes straight to the decoder:
        mcregion.setDefaultDecompressor( mcregion.compression.passthrough )
    """
    if _defaultDecompressor is None:
        return decompress
    return _defaultDecompressor
