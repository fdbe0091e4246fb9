"""Minimal RGBA PNG writer (pure stdlib, no PIL)."""

import struct
import zlib


PNG_SIGNATURE = b'\x89PNG\r\n\x1a\n'


def _chunk(kind, body):
    crc = zlib.crc32(body, zlib.crc32(kind))
    return struct.pack(">I4s", len(body), kind) + body + struct.pack(">I", crc)


def encode_png(rgba_data, width, height, level=9):
    """Encode RGBA8888 pixel data as PNG file bytes.

    Uses unfiltered rows with zlib deflate.
    """
    expected = width * height * 4
    if len(rgba_data) < expected:
        raise ValueError(f"RGBA data too small: {len(rgba_data)} < {expected}")

    # IHDR: bit_depth=8, color_type=6 (RGBA), compression=0, filter=0, interlace=0
    ihdr = _chunk(b'IHDR', struct.pack(">IIBBBBB", width, height, 8, 6, 0, 0, 0))

    # Each scanline is prefixed with filter type 0
    row_size = width * 4
    pixels = memoryview(rgba_data)
    scanlines = b"".join(
        b"\x00" + pixels[start:start + row_size].tobytes()
        for start in range(0, height * row_size, row_size)
    )

    idat = _chunk(b'IDAT', zlib.compress(scanlines, level))
    iend = _chunk(b'IEND', b'')
    return PNG_SIGNATURE + ihdr + idat + iend


def write_png(rgba_data, width, height, path):
    """Write RGBA pixel data as a PNG file."""
    png = encode_png(rgba_data, width, height)
    with open(path, 'wb') as f:
        f.write(png)
