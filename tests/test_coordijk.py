import itertools

import pytest

from hexgrid.coordijk import (
    UNIT_VECS,
    CoordIJ,
    CoordIJK,
    Direction,
    Vec2d,
    hex2d_to_ijk,
    ij_to_ijk,
    rotate_digit_60ccw,
    rotate_digit_60cw,
)

RAW = list(itertools.product(range(-3, 4), repeat=3))

VALID_DIGITS = [d for d in Direction if 0 < d < 7]


def test_add_and_sub_round_trip():
    a = CoordIJK(1, 2, 3)
    b = CoordIJK(4, 0, 1)
    assert (a + b) - b == a


def test_scale_matches_repeated_addition():
    a = CoordIJK(1, 0, 2)
    assert a.scale(3) == a + a + a


def test_normalize_equal_components_is_origin():
    assert CoordIJK(2, 2, 2).normalize() == UNIT_VECS[0]


@pytest.mark.parametrize("raw", RAW)
def test_normalize_invariants(raw):
    c = CoordIJK(*raw).normalize()
    assert min(c.i, c.j, c.k) == 0
    assert c.i >= 0 and c.j >= 0 and c.k >= 0
    assert c.normalize() == c


@pytest.mark.parametrize("raw", RAW)
def test_hex2d_round_trip(raw):
    c = CoordIJK(*raw).normalize()
    assert hex2d_to_ijk(c.to_hex2d()) == c


def test_hex2d_origin():
    assert hex2d_to_ijk(Vec2d(0.0, 0.0)) == UNIT_VECS[0]


@pytest.mark.parametrize("digit", list(range(7)))
def test_unit_vectors_map_to_digits(digit):
    assert UNIT_VECS[digit].to_digit() == Direction(digit)


def test_non_unit_vector_is_invalid_digit():
    assert CoordIJK(2, 0, 0).to_digit() == Direction.INVALID_DIGIT


def test_non_unit_vector_digit_is_num_digits():
    assert CoordIJK(0, 3, 1).to_digit() is Direction.NUM_DIGITS


@pytest.mark.parametrize("raw", RAW)
def test_up_ap7_inverts_down_ap7(raw):
    c = CoordIJK(*raw).normalize()
    assert c.down_ap7().up_ap7() == c


@pytest.mark.parametrize("raw", RAW)
def test_up_ap7r_inverts_down_ap7r(raw):
    c = CoordIJK(*raw).normalize()
    assert c.down_ap7r().up_ap7r() == c


def test_down_ap7_unit_vectors():
    assert CoordIJK(1, 0, 0).down_ap7() == CoordIJK(3, 0, 1)
    assert CoordIJK(0, 1, 0).down_ap7r() == CoordIJK(0, 3, 1)


def test_down_ap3_unit_vectors():
    assert CoordIJK(1, 0, 0).down_ap3() == CoordIJK(2, 0, 1)
    assert CoordIJK(0, 0, 1).down_ap3r() == CoordIJK(1, 0, 2)


@pytest.mark.parametrize("raw", RAW)
def test_down_ap3_twice_stays_normalized(raw):
    c = CoordIJK(*raw).normalize()
    result = c.down_ap3().down_ap3r()
    assert result.normalize() == result


@pytest.mark.parametrize("digit", VALID_DIGITS)
def test_neighbor_of_origin_is_unit_vector(digit):
    assert UNIT_VECS[0].neighbor(digit) == UNIT_VECS[digit]


@pytest.mark.parametrize("raw", RAW[:40])
@pytest.mark.parametrize("digit", VALID_DIGITS)
def test_neighbor_is_distance_one(raw, digit):
    c = CoordIJK(*raw).normalize()
    assert c.distance(c.neighbor(digit)) == 1


def test_neighbor_center_and_invalid_unchanged():
    c = CoordIJK(1, 0, 2)
    assert c.neighbor(Direction.CENTER_DIGIT) == c
    assert c.neighbor(Direction.INVALID_DIGIT) == c


def test_rotate_unit_vector():
    assert CoordIJK(1, 0, 0).rotate60ccw() == CoordIJK(1, 1, 0)
    assert CoordIJK(1, 0, 0).rotate60cw() == CoordIJK(1, 0, 1)


@pytest.mark.parametrize("raw", RAW)
def test_rotation_round_trips(raw):
    c = CoordIJK(*raw).normalize()
    assert c.rotate60ccw().rotate60cw() == c
    rotated = c
    for _ in range(6):
        rotated = rotated.rotate60ccw()
    assert rotated == c


@pytest.mark.parametrize("raw", RAW)
def test_rotation_preserves_distance_from_origin(raw):
    c = CoordIJK(*raw).normalize()
    origin = CoordIJK(0, 0, 0)
    assert c.rotate60ccw().distance(origin) == c.distance(origin)


@pytest.mark.parametrize("digit", VALID_DIGITS)
def test_rotating_unit_vector_matches_digit_rotation(digit):
    assert UNIT_VECS[digit].rotate60ccw().to_digit() == rotate_digit_60ccw(digit)
    assert UNIT_VECS[digit].rotate60cw().to_digit() == rotate_digit_60cw(digit)


def test_digit_rotation_values():
    assert rotate_digit_60ccw(Direction.K_AXES_DIGIT) == Direction.IK_AXES_DIGIT
    assert rotate_digit_60cw(Direction.K_AXES_DIGIT) == Direction.JK_AXES_DIGIT
    assert rotate_digit_60ccw(Direction.CENTER_DIGIT) == Direction.CENTER_DIGIT
    assert rotate_digit_60cw(Direction.INVALID_DIGIT) == Direction.INVALID_DIGIT


@pytest.mark.parametrize("digit", VALID_DIGITS)
def test_digit_rotation_inverse(digit):
    assert rotate_digit_60cw(rotate_digit_60ccw(digit)) == digit


@pytest.mark.parametrize("raw_a", RAW[::7])
@pytest.mark.parametrize("raw_b", RAW[::11])
def test_distance_symmetric(raw_a, raw_b):
    a = CoordIJK(*raw_a).normalize()
    b = CoordIJK(*raw_b).normalize()
    assert a.distance(b) == b.distance(a)
    assert a.distance(a) == 0


@pytest.mark.parametrize("raw", RAW)
def test_ij_round_trip(raw):
    c = CoordIJK(*raw).normalize()
    assert ij_to_ijk(c.to_ij()) == c


def test_to_ij_value():
    assert CoordIJK(1, 0, 1).to_ij() == CoordIJ(0, -1)


@pytest.mark.parametrize("raw", RAW)
def test_cube_round_trip(raw):
    c = CoordIJK(*raw).normalize()
    cube = c.to_cube()
    assert cube.i + cube.j + cube.k == 0
    assert cube.cube_to_ijk() == c