"""Pixel payload conversion for TID textures.

Handles every pixel format a TID header can declare:
- RGBA8888 -> RGBA8888 (copied as-is)
- ARGB8888 -> RGBA8888 (channel reorder)
- BC1/DXT1 in Z-order tiles -> RGBA8888

DXT5 payloads are recognised but not decoded.
"""

import logging
import struct
from concurrent.futures import ThreadPoolExecutor

import numpy as np

from ..config import DEBUG, DecodeOptions
from ..tid_format.tid_constants import BYTES_PER_PIXEL, BLOCK_DIM, BC1_BLOCK_SIZE
from ..tid_format.tid_errors import (
    InvalidDimensions, MissingCompressionTag, TruncatedDataError,
    UnsupportedFeature,
)
from ..tid_format.tid_types import DataType, BlockCompressionType
from .morton import is_power_of_two, tile_position


_log = logging.getLogger("tid_texture.decode")


def _expand_5bit(value):
    return (value << 3) | (value >> 2)


def _expand_6bit(value):
    return (value << 2) | (value >> 4)


def _rgb565_to_rgba(val):
    """Convert an RGB565 value to (R, G, B, A) with 8-bit components.

    The high bits of each field are repeated into the low bits, so 0x1F
    expands to 0xFF and 0 stays 0.
    """
    r = _expand_5bit((val >> 11) & 0x1F)
    g = _expand_6bit((val >> 5) & 0x3F)
    b = _expand_5bit(val & 0x1F)
    return (r, g, b, 255)


def decode_dxt1_block(data, offset=0):
    """Decode a single DXT1 4x4 pixel block (8 bytes) to 16 RGBA pixels.

    DXT1 block format:
        2 bytes: RGB565 color0 (little-endian)
        2 bytes: RGB565 color1 (little-endian)
        4 bytes: 4x4 2-bit index table, pixel 0 in the lowest bits

    Returns:
        list of 16 tuples (R, G, B, A) as 0-255 integers, row by row

    Raises:
        TruncatedDataError: if fewer than 8 bytes are available at offset
    """
    available = len(data) - offset
    if available < BC1_BLOCK_SIZE:
        raise TruncatedDataError("DXT1 block", BC1_BLOCK_SIZE, max(available, 0))

    c0_raw, c1_raw, indices = struct.unpack_from("<HHI", data, offset)

    c0 = _rgb565_to_rgba(c0_raw)
    c1 = _rgb565_to_rgba(c1_raw)

    # Mode is chosen on the packed values, not the expanded colors
    if c0_raw > c1_raw:
        c2 = tuple((2 * a + b) // 3 for a, b in zip(c0[:3], c1[:3])) + (255,)
        c3 = tuple((a + 2 * b) // 3 for a, b in zip(c0[:3], c1[:3])) + (255,)
    else:
        c2 = tuple((a + b) // 2 for a, b in zip(c0[:3], c1[:3])) + (255,)
        c3 = (0, 0, 0, 0)

    palette = [c0, c1, c2, c3]

    return [palette[(indices >> (i * 2)) & 0x03] for i in range(16)]


def argb_to_rgba(data, width, height):
    """Reorder ARGB8888 pixels to RGBA8888.

    Args:
        data: bytes holding at least width*height*4 ARGB bytes

    Returns:
        bytearray of width*height*4 RGBA bytes
    """
    pixel_count = width * height
    if pixel_count == 0:
        return bytearray()
    pixels = np.frombuffer(data, dtype=np.uint8, count=pixel_count * BYTES_PER_PIXEL)
    pixels = pixels.reshape(pixel_count, BYTES_PER_PIXEL)
    return bytearray(pixels[:, [1, 2, 3, 0]].tobytes())


def check_block_dimensions(dimensions):
    """Validate that a size can be covered by Z-ordered 4x4 tiles.

    Raises:
        InvalidDimensions: if width/height are not multiples of 4, or the
            shorter side of the tile grid is not a power of two
    """
    width, height = dimensions.width, dimensions.height
    if width % BLOCK_DIM or height % BLOCK_DIM:
        raise InvalidDimensions(width, height, "not a multiple of 4")
    grid = dimensions.tile_grid()
    side = min(grid.width, grid.height)
    if not is_power_of_two(side):
        raise InvalidDimensions(
            width, height,
            f"shorter tile-grid side {side} is not a power of two",
        )


def _decode_tile_range(image, payload, tile_grid, start, stop):
    """Decode tiles [start, stop) into their Z-order positions in image."""
    for index in range(start, stop):
        pixels = decode_dxt1_block(payload, index * BC1_BLOCK_SIZE)
        tx, ty = tile_position(index, tile_grid)
        px = tx * BLOCK_DIM
        py = ty * BLOCK_DIM
        image[py:py + BLOCK_DIM, px:px + BLOCK_DIM] = np.asarray(
            pixels, dtype=np.uint8).reshape(BLOCK_DIM, BLOCK_DIM, BYTES_PER_PIXEL)
        if DEBUG:
            _log.debug(f"tile {index} -> ({tx}, {ty})")


def decompress_dxt1(payload, dimensions, options=None):
    """Decompress a Z-ordered DXT1 payload to RGBA8888.

    Args:
        payload: compressed bytes, one 8-byte block per 4x4 tile
        dimensions: ImageSize in pixels
        options: DecodeOptions; workers > 1 decodes tiles on a thread pool

    Returns:
        bytearray of width*height*4 RGBA bytes
    """
    options = options or DecodeOptions()
    check_block_dimensions(dimensions)

    tile_grid = dimensions.tile_grid()
    tile_count = tile_grid.width * tile_grid.height
    expected_size = tile_count * BC1_BLOCK_SIZE
    if len(payload) < expected_size:
        raise TruncatedDataError("DXT1 payload", expected_size, len(payload))

    image = np.zeros((dimensions.height, dimensions.width, BYTES_PER_PIXEL), dtype=np.uint8)

    if options.workers == 1 or tile_count <= options.tiles_per_task:
        _decode_tile_range(image, payload, tile_grid, 0, tile_count)
    else:
        # Each task owns a contiguous range of tile indices and therefore a
        # disjoint set of 4x4 regions of the output.
        step = options.tiles_per_task
        ranges = [(start, min(start + step, tile_count))
                  for start in range(0, tile_count, step)]
        _log.debug(f"Decoding {tile_count} tiles in {len(ranges)} tasks "
                   f"on {options.workers} threads")
        with ThreadPoolExecutor(max_workers=options.workers) as pool:
            futures = [pool.submit(_decode_tile_range, image, payload, tile_grid, start, stop)
                       for start, stop in ranges]
            for future in futures:
                future.result()

    return bytearray(image.tobytes())


def decode_pixels(descriptor, payload, options=None):
    """Convert a TID payload to RGBA8888 according to its header.

    Args:
        descriptor: ImageDescriptor from the header parser
        payload: bytes following the header
        options: optional DecodeOptions

    Returns:
        bytearray of width*height*4 RGBA bytes, row-major

    Raises:
        TruncatedDataError: payload shorter than the format requires
        MissingCompressionTag: block-compressed image without a FourCC
        UnsupportedFeature: DXT5 payloads
        InvalidDimensions: compressed image whose size cannot be tiled
    """
    dimensions = descriptor.dimensions
    data_type = descriptor.data_type

    if descriptor.is_compressed:
        bc_type = descriptor.bc_type
        if bc_type is BlockCompressionType.DXT1:
            return decompress_dxt1(payload, dimensions, options)
        if bc_type is BlockCompressionType.DXT5:
            raise UnsupportedFeature(
                f"'{descriptor.name}': DXT5 block compression is not implemented")
        raise MissingCompressionTag()

    if data_type in (DataType.RGBA, DataType.ARGB):
        expected_size = dimensions.pixel_count * BYTES_PER_PIXEL
        if len(payload) < expected_size:
            raise TruncatedDataError(f"{data_type} payload", expected_size, len(payload))
        if data_type is DataType.RGBA:
            return bytearray(payload[:expected_size])
        return argb_to_rgba(payload, dimensions.width, dimensions.height)

    raise ValueError(f"Unhandled data type: {data_type!r}")

