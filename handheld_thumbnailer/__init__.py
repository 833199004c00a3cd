"""
# Handheld thumbnailer

Extract the icon embedded into Nintendo 3DS files so that it can be used as
a thumbnail by a file manager.

The formats are described declaratively: a Chunk is a sequence of fields
(integers, strings, arrays of other chunks) that are unpacked one after the
other from a Stream, checking magic values and enumerations on the way.

The chain of the formats is

    CCI -> CXI -> ExeFS -> SMDH
           CIA -> meta  -> SMDH
                   3DSX -> SMDH

and at the end the large icon of the SMDH is decoded into a 48x48 image.
"""
__version__ = '0.1.0'
