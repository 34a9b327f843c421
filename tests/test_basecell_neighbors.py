import pytest

from hexgrid.basecell_neighbors import (
    INVALID_BASE_CELL,
    NUM_BASE_CELLS,
    base_cell_direction,
    base_cell_neighbor,
    base_cell_neighbor_rotations,
)
from hexgrid.coordijk import Direction

PENTAGONS = {4, 14, 24, 38, 49, 58, 63, 72, 83, 97, 107, 117}
DIRECTIONS = range(Direction.CENTER_DIGIT, Direction.NUM_DIGITS)


@pytest.mark.parametrize("cell", range(NUM_BASE_CELLS))
def test_center_direction_is_self(cell):
    assert base_cell_neighbor(cell, Direction.CENTER_DIGIT) == cell
    assert base_cell_neighbor_rotations(cell, Direction.CENTER_DIGIT) == 0
    assert base_cell_direction(cell, cell) == Direction.CENTER_DIGIT


def test_pinned_neighbors_from_table():
    assert base_cell_neighbor(0, Direction.K_AXES_DIGIT) == 1
    assert base_cell_neighbor(121, Direction.IJ_AXES_DIGIT) == 118
    assert base_cell_neighbor_rotations(4, Direction.IJ_AXES_DIGIT) == 2


def test_invalid_neighbor_only_at_pentagon_k_axis():
    missing = {
        (cell, d)
        for cell in range(NUM_BASE_CELLS)
        for d in DIRECTIONS
        if base_cell_neighbor(cell, d) == INVALID_BASE_CELL
    }
    assert missing == {(cell, Direction.K_AXES_DIGIT) for cell in PENTAGONS}


def test_rotations_negative_exactly_where_no_neighbor():
    for cell in range(NUM_BASE_CELLS):
        for d in DIRECTIONS:
            rot = base_cell_neighbor_rotations(cell, d)
            if base_cell_neighbor(cell, d) == INVALID_BASE_CELL:
                assert rot == -1
            else:
                assert 0 <= rot < 6


def test_neighbors_are_distinct():
    for cell in range(NUM_BASE_CELLS):
        others = [
            base_cell_neighbor(cell, d)
            for d in DIRECTIONS
            if d != Direction.CENTER_DIGIT
            and base_cell_neighbor(cell, d) != INVALID_BASE_CELL
        ]
        expected = 5 if cell in PENTAGONS else 6
        assert len(set(others)) == expected
        assert cell not in others


def test_adjacency_is_symmetric():
    for cell in range(NUM_BASE_CELLS):
        for d in DIRECTIONS:
            other = base_cell_neighbor(cell, d)
            if other == INVALID_BASE_CELL:
                continue
            back = base_cell_direction(other, cell)
            assert base_cell_neighbor(other, back) == cell


def test_direction_round_trips_with_neighbor():
    for cell in range(NUM_BASE_CELLS):
        for d in DIRECTIONS:
            other = base_cell_neighbor(cell, d)
            if other == INVALID_BASE_CELL:
                continue
            assert base_cell_direction(cell, other) == d


def test_direction_between_non_neighbors_is_invalid():
    assert base_cell_direction(0, 121) == Direction.INVALID_DIGIT


@pytest.mark.parametrize("cell", [-1, NUM_BASE_CELLS])
def test_out_of_range_base_cell_raises(cell):
    with pytest.raises(ValueError):
        base_cell_neighbor(cell, Direction.CENTER_DIGIT)
    with pytest.raises(ValueError):
        base_cell_neighbor_rotations(cell, Direction.CENTER_DIGIT)
    with pytest.raises(ValueError):
        base_cell_direction(cell, 0)


@pytest.mark.parametrize("direction", [-1, Direction.INVALID_DIGIT])
def test_out_of_range_direction_raises(direction):
    with pytest.raises(ValueError):
        base_cell_neighbor(0, direction)
    with pytest.raises(ValueError):
        base_cell_neighbor_rotations(0, direction)