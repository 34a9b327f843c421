import pytest

from hexgrid.coordijk import CoordIJK, Direction
from hexgrid.kring import NEXT_RING_DIRECTION, max_kring_size, ring_directions


def test_max_kring_size_origin_only():
    assert max_kring_size(0) == 1


def test_max_kring_size_first_ring():
    assert max_kring_size(1) == 7


@pytest.mark.parametrize("k", range(1, 20))
def test_each_ring_adds_six_k_cells(k):
    assert max_kring_size(k) - max_kring_size(k - 1) == 6 * k


def test_max_kring_size_rejects_negative():
    with pytest.raises(ValueError):
        max_kring_size(-1)


def test_ring_directions_cover_all_non_center_digits():
    directions = ring_directions()
    assert len(directions) == 6
    assert set(directions) == {
        Direction.K_AXES_DIGIT,
        Direction.J_AXES_DIGIT,
        Direction.JK_AXES_DIGIT,
        Direction.I_AXES_DIGIT,
        Direction.IK_AXES_DIGIT,
        Direction.IJ_AXES_DIGIT,
    }


def test_ring_directions_start_with_j_axis():
    assert ring_directions()[0] == Direction.J_AXES_DIGIT


def test_next_ring_direction_steps_along_i_axis():
    step = CoordIJK(0, 0, 0).neighbor(NEXT_RING_DIRECTION)
    assert step == CoordIJK(1, 0, 0)
    assert step.to_digit() == Direction.I_AXES_DIGIT


@pytest.mark.parametrize("k", [1, 2, 3, 4])
def test_walking_a_ring_visits_distinct_cells_at_distance_k(k):
    origin = CoordIJK(0, 0, 0)
    current = origin
    for _ in range(k):
        current = current.neighbor(NEXT_RING_DIRECTION)
    start = current
    visited = []
    for direction in ring_directions():
        for _ in range(k):
            current = current.neighbor(direction)
            visited.append(current)
    assert current == start
    assert len(set(visited)) == 6 * k
    assert all(cell.distance(origin) == k for cell in visited)


def test_ring_cells_fill_kring_size():
    origin = CoordIJK(0, 0, 0)
    k = 3
    cells = {origin}
    current = origin
    for ring in range(1, k + 1):
        current = current.neighbor(NEXT_RING_DIRECTION)
        for direction in ring_directions():
            for _ in range(ring):
                current = current.neighbor(direction)
                cells.add(current)
    assert len(cells) == max_kring_size(k)