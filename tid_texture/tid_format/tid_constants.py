"""Constants for the TID texture container."""

# Magic bytes at offset 0x00
TID_MAGIC = b"TID"

# Header field offsets (absolute, the format has no variable preamble)
OFFSET_MAGIC = 0x00
OFFSET_TYPE_CODE = 0x03
OFFSET_FILE_SIZE = 0x04
OFFSET_NAME = 0x20
OFFSET_DIMENSIONS = 0x44
OFFSET_FOURCC = 0x64

NAME_FIELD_SIZE = 32
FOURCC_SIZE = 4

# Header size in bytes; the payload starts right after it
HEADER_SIZE = 0x80

# Type code byte -> data type name.
# 0x84, 0x94 and 0x9C all mean "block compressed"; the variant itself is
# carried by the FourCC at OFFSET_FOURCC.
TYPE_CODE_RGBA = 0x90
TYPE_CODE_ARGB = 0x92
TYPE_CODES_BLOCK_COMPRESSION = (0x84, 0x94, 0x9C)

# FourCC tags
FOURCC_NONE = b"\x00\x00\x00\x00"
FOURCC_DXT1 = b"DXT1"
FOURCC_DXT5 = b"DXT5"

# Pixel / block sizes
BYTES_PER_PIXEL = 4
BLOCK_DIM = 4                # BC1 tiles are 4x4 pixels
BC1_BLOCK_SIZE = 8           # bytes per encoded BC1 tile
