import pytest

from maze import FULL_WALLS, Direction, Grid


def test_fresh_grid_is_fully_walled_and_unvisited():
    grid = Grid(4, 3)
    grid.cell(1, 1).walls = 0
    grid.cell(2, 0).visited = True

    grid.reset()

    for _, _, cell in grid.cells():
        assert cell.walls == FULL_WALLS == 15
        assert cell.visited is False
    assert grid.passage_count() == 0


def test_direction_bits_and_opposites():
    assert [d.bit for d in Direction] == [1, 2, 4, 8]
    for d in Direction:
        assert d.opposite.opposite is d
        dx, dy = d.delta
        ox, oy = d.opposite.delta
        assert (dx + ox, dy + oy) == (0, 0)
    assert Direction.from_delta(0, -1) is Direction.N
    assert Direction.from_delta(1, 1) is None


def test_in_bounds():
    grid = Grid(3, 2)
    assert grid.in_bounds(0, 0)
    assert grid.in_bounds(2, 1)
    assert not grid.in_bounds(3, 0)
    assert not grid.in_bounds(0, 2)
    assert not grid.in_bounds(-1, 0)


@pytest.mark.parametrize(
    "nx, ny, side, other",
    [
        (1, 0, Direction.N, Direction.S),
        (2, 1, Direction.E, Direction.W),
        (1, 2, Direction.S, Direction.N),
        (0, 1, Direction.W, Direction.E),
    ],
)
def test_knock_clears_reciprocal_bits(nx, ny, side, other):
    grid = Grid(3, 3)
    grid.knock(1, 1, nx, ny)

    assert not grid.wall(1, 1, side)
    assert not grid.wall(nx, ny, other)
    assert grid.cell(1, 1).walls == FULL_WALLS & ~side.bit
    assert grid.cell(nx, ny).walls == FULL_WALLS & ~other.bit
    assert grid.passage_count() == 1


def test_knock_rejects_non_adjacent_cells():
    grid = Grid(3, 3)
    with pytest.raises(ValueError):
        grid.knock(0, 0, 1, 1)
    with pytest.raises(ValueError):
        grid.knock(0, 0, 2, 0)
    assert grid.passage_count() == 0


def test_out_of_bounds_access_is_rejected():
    grid = Grid(2, 2)
    with pytest.raises(ValueError):
        grid.cell(2, 0)
    with pytest.raises(ValueError):
        grid.knock(1, 1, 2, 1)


def test_grid_dimensions_must_be_positive():
    with pytest.raises(ValueError):
        Grid(0, 5)


def test_wall_masks_snapshot_is_row_major():
    grid = Grid(2, 2)
    grid.knock(0, 1, 1, 1)
    assert grid.wall_masks() == bytes([15, 15, 15 & ~2, 15 & ~8])
