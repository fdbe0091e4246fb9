import pytest

from tid_texture.tid_format.tid_types import ImageSize
from tid_texture.utils.morton import (
    compact_1_by_1, decode_morton_x, decode_morton_y, is_power_of_two,
    tile_position,
)


@pytest.mark.parametrize("width, height", [
    (8, 8), (16, 16), (4, 16), (16, 4), (2, 2), (1, 1), (1, 8), (8, 1), (2, 32),
])
def test_tile_position_is_bijection(width, height):
    grid = ImageSize(width, height)
    positions = [tile_position(i, grid) for i in range(width * height)]
    assert len(set(positions)) == width * height
    assert set(positions) == {(x, y) for x in range(width) for y in range(height)}


def test_square_grid_order():
    grid = ImageSize(2, 2)
    assert [tile_position(i, grid) for i in range(4)] == [(0, 0), (0, 1), (1, 0), (1, 1)]


def test_tall_grid_sweeps_regions_down():
    grid = ImageSize(2, 4)
    # second 2x2 region starts at index 4, one region further down
    assert tile_position(4, grid) == (0, 2)
    assert tile_position(7, grid) == (1, 3)


def test_wide_grid_sweeps_regions_right():
    grid = ImageSize(4, 2)
    assert tile_position(4, grid) == (2, 0)
    assert tile_position(7, grid) == (3, 1)


def test_non_power_of_two_side_rejected():
    with pytest.raises(ValueError):
        tile_position(0, ImageSize(3, 3))


def test_compact_gathers_even_bits():
    assert compact_1_by_1(0b0101) == 0b11
    assert compact_1_by_1(0b1010) == 0
    assert compact_1_by_1(0x55555555) == 0xFFFF
    assert decode_morton_x(0b100111) == 0b011
    assert decode_morton_y(0b100111) == 0b101


def test_is_power_of_two():
    assert [n for n in range(20) if is_power_of_two(n)] == [1, 2, 4, 8, 16]


@pytest.mark.parametrize("index", [-1, 64, 1000])
def test_index_outside_grid_rejected(index):
    with pytest.raises(ValueError):
        tile_position(index, ImageSize(4, 16))
