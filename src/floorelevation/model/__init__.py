"""
The MODEL layer contains pure data structures and file formats.
It has NO knowledge of a CAD host or of the command flow.
It deals with Geometry, spot parameter naming, and I/O.
"""
