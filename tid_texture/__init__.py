"""Decoder for TID texture containers.

Parses the fixed TID header and converts RGBA, ARGB and Z-ordered DXT1
payloads to a flat RGBA8888 pixel buffer.
"""

from .config import DecodeOptions
from .tid_format.tid_errors import (
    TIDError, FormatError, BadMagic, UnknownDataType, UnknownFourCC,
    MissingCompressionTag, NameDecodeError, InvalidDimensions,
    TruncatedDataError, UnsupportedFeature,
)
from .tid_format.tid_header import parse, parse_header, read_tid
from .tid_format.tid_reader import TIDReader
from .tid_format.tid_types import (
    DataType, BlockCompressionType, ImageSize, ImageDescriptor,
)
from .utils.image_convert import decode_pixels, decode_dxt1_block
from .utils.morton import tile_position

__version__ = "0.1.0"
