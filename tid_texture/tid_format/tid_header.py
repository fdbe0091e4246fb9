"""TID file header parser."""

import logging
import struct

from .tid_constants import (
    TID_MAGIC, HEADER_SIZE,
    OFFSET_MAGIC, OFFSET_TYPE_CODE, OFFSET_FILE_SIZE,
    OFFSET_NAME, OFFSET_DIMENSIONS, OFFSET_FOURCC,
    NAME_FIELD_SIZE, FOURCC_SIZE,
    TYPE_CODE_RGBA, TYPE_CODE_ARGB, TYPE_CODES_BLOCK_COMPRESSION,
    FOURCC_NONE, FOURCC_DXT1, FOURCC_DXT5,
)
from .tid_errors import (
    BadMagic, UnknownDataType, UnknownFourCC, NameDecodeError,
    TruncatedDataError,
)
from .tid_types import DataType, BlockCompressionType, ImageSize, ImageDescriptor


_log = logging.getLogger("tid_texture.header")


DATA_TYPES = {
    TYPE_CODE_RGBA: DataType.RGBA,
    TYPE_CODE_ARGB: DataType.ARGB,
}
DATA_TYPES.update({code: DataType.BLOCK_COMPRESSION
                   for code in TYPE_CODES_BLOCK_COMPRESSION})

FOURCC_TYPES = {
    FOURCC_NONE: BlockCompressionType.NONE,
    FOURCC_DXT1: BlockCompressionType.DXT1,
    FOURCC_DXT5: BlockCompressionType.DXT5,
}


def parse_data_type(code):
    """Map the type code byte to a DataType.

    Raises:
        UnknownDataType: for any byte not in the type code table
    """
    try:
        return DATA_TYPES[code]
    except KeyError:
        raise UnknownDataType(code) from None


def parse_fourcc(tag):
    """Map the 4-byte compression tag to a BlockCompressionType.

    Raises:
        UnknownFourCC: if the tag is neither all-zero, DXT1 nor DXT5
    """
    try:
        return FOURCC_TYPES[bytes(tag)]
    except KeyError:
        raise UnknownFourCC(tag) from None


def parse_name(field):
    """Decode the name field: bytes up to the first NUL, as UTF-8."""
    raw = bytes(field[:NAME_FIELD_SIZE]).split(b"\x00", 1)[0]
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise NameDecodeError(raw, e.reason) from e


def parse_header(data):
    """Parse a TID header from an in-memory buffer.

    Args:
        data: bytes or memoryview holding at least HEADER_SIZE bytes

    Returns:
        ImageDescriptor

    Raises:
        TruncatedDataError: if data is shorter than the header
        FormatError: bad magic, unknown type code, unknown FourCC or a
            name that is not valid UTF-8
    """
    if len(data) < HEADER_SIZE:
        raise TruncatedDataError("TID header", HEADER_SIZE, len(data))

    magic = bytes(data[OFFSET_MAGIC:OFFSET_MAGIC + len(TID_MAGIC)])
    if magic != TID_MAGIC:
        raise BadMagic(magic)

    data_type = parse_data_type(data[OFFSET_TYPE_CODE])
    file_size = struct.unpack_from("<I", data, OFFSET_FILE_SIZE)[0]
    name = parse_name(data[OFFSET_NAME:OFFSET_NAME + NAME_FIELD_SIZE])
    width, height = struct.unpack_from("<II", data, OFFSET_DIMENSIONS)
    bc_type = parse_fourcc(data[OFFSET_FOURCC:OFFSET_FOURCC + FOURCC_SIZE])

    descriptor = ImageDescriptor(
        name=name,
        data_type=data_type,
        bc_type=bc_type,
        dimensions=ImageSize(width, height),
        file_size=file_size,
    )
    _log.debug(f"Parsed header: {descriptor}")
    return descriptor


def parse(stream):
    """Read the header from a binary stream and parse it.

    The stream is left positioned at the start of the payload.
    """
    return parse_header(stream.read(HEADER_SIZE))


def read_tid(stream):
    """Read a whole TID file from a binary stream.

    Returns:
        (ImageDescriptor, payload bytes)
    """
    descriptor = parse(stream)
    payload = stream.read()
    actual_size = HEADER_SIZE + len(payload)
    if descriptor.file_size != actual_size:
        _log.warning(
            f"'{descriptor.name}': header declares {descriptor.file_size} bytes, "
            f"file has {actual_size}"
        )
    return descriptor, payload
