"""Z-order (Morton) tile placement for block-compressed TID payloads.

Compressed tiles are not stored row by row. Within a square region whose side
is the shorter tile-grid axis, tiles follow the Z-order curve; the longer axis
is covered by consecutive such regions. This module maps a tile's storage
index back to its (x, y) position in the tile grid.
"""


def is_power_of_two(value):
    return value > 0 and (value & (value - 1)) == 0


def compact_1_by_1(code):
    """Gather the even bits of code into a contiguous field."""
    x = code & 0x55555555
    x = (x ^ (x >> 1)) & 0x33333333
    x = (x ^ (x >> 2)) & 0x0F0F0F0F
    x = (x ^ (x >> 4)) & 0x00FF00FF
    x = (x ^ (x >> 8)) & 0x0000FFFF
    return x


def decode_morton_x(code):
    return compact_1_by_1(code)


def decode_morton_y(code):
    return compact_1_by_1(code >> 1)


def tile_position(linear_index, tile_grid):
    """Return the (x, y) tile coordinates for a storage-order tile index.

    Args:
        linear_index: index of the tile in the payload, 0 <= i < w * h
        tile_grid: ImageSize-like object with width/height in tiles

    Returns:
        (x, y) tuple

    Raises:
        ValueError: if min(width, height) is not a power of two, or
            linear_index is outside the grid
    """
    width = tile_grid.width
    height = tile_grid.height
    side = min(width, height)
    if not is_power_of_two(side):
        raise ValueError(
            f"Tile grid {width}x{height}: shorter side {side} is not a power of two"
        )
    if not 0 <= linear_index < width * height:
        raise ValueError(
            f"Tile index {linear_index} out of range for a {width}x{height} grid"
        )
    bits = side.bit_length() - 1
    mask = side - 1

    region = linear_index >> (2 * bits) << (2 * bits)
    raw_x = decode_morton_x(linear_index) & mask
    raw_y = decode_morton_y(linear_index) & mask

    if height < width:
        j = region | (raw_y << bits) | raw_x
        return j // height, j % height

    j = region | (raw_x << bits) | raw_y
    return j % width, j // width
