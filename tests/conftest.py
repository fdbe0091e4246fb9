import struct

import pytest


HEADER_SIZE = 0x80


def build_tid(type_code=0x90, width=4, height=4, name=b"texture", fourcc=b"\x00" * 4,
              payload=b"", file_size=None, magic=b"TID"):
    """Assemble a TID file image in memory."""
    header = bytearray(HEADER_SIZE)
    header[0x00:0x03] = magic
    header[0x03] = type_code
    if file_size is None:
        file_size = HEADER_SIZE + len(payload)
    struct.pack_into("<I", header, 0x04, file_size)
    header[0x20:0x20 + len(name)] = name
    struct.pack_into("<II", header, 0x44, width, height)
    header[0x64:0x68] = fourcc
    return bytes(header) + bytes(payload)


def bc1_block(c0, c1, lut):
    return struct.pack("<HHI", c0, c1, lut)


@pytest.fixture
def make_tid():
    return build_tid


@pytest.fixture
def make_block():
    return bc1_block
