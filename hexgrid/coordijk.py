"""IJK hexagon coordinates and conversions to and from 2D cartesian space."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

M_SQRT3_2 = math.sqrt(3.0) / 2.0
M_SIN60 = M_SQRT3_2


@dataclass(frozen=True)
class Vec2d:
    """2D floating-point vector."""

    x: float
    y: float


@dataclass(frozen=True)
class CoordIJ:
    """IJ hexagon coordinates (two axes, 120 degrees apart)."""

    i: int
    j: int


class Direction(IntEnum):
    """Hexagon digit representing an ijk+ axes direction."""

    CENTER_DIGIT = 0
    K_AXES_DIGIT = 1
    J_AXES_DIGIT = 2
    JK_AXES_DIGIT = 3
    I_AXES_DIGIT = 4
    IK_AXES_DIGIT = 5
    IJ_AXES_DIGIT = 6
    INVALID_DIGIT = 7
    NUM_DIGITS = 7


def _round_div(numerator: int, denominator: int) -> int:
    """Integer division rounded to nearest, halves away from zero."""
    sign = -1 if (numerator < 0) != (denominator < 0) else 1
    quotient, remainder = divmod(abs(numerator), abs(denominator))
    if 2 * remainder >= abs(denominator):
        quotient += 1
    return sign * quotient


@dataclass(frozen=True)
class CoordIJK:
    """IJK hexagon coordinates; each axis is spaced 120 degrees apart."""

    i: int
    j: int
    k: int

    def __add__(self, other: CoordIJK) -> CoordIJK:
        if not isinstance(other, CoordIJK):
            return NotImplemented
        return CoordIJK(self.i + other.i, self.j + other.j, self.k + other.k)

    def __sub__(self, other: CoordIJK) -> CoordIJK:
        if not isinstance(other, CoordIJK):
            return NotImplemented
        return CoordIJK(self.i - other.i, self.j - other.j, self.k - other.k)

    def scale(self, factor: int) -> CoordIJK:
        """Uniformly scale every component by an integer factor."""
        return CoordIJK(self.i * factor, self.j * factor, self.k * factor)

    def normalize(self) -> CoordIJK:
        """Return the equivalent coordinates with the smallest non-negative components."""
        i, j, k = self.i, self.j, self.k
        if i < 0:
            j -= i
            k -= i
            i = 0
        if j < 0:
            i -= j
            k -= j
            j = 0
        if k < 0:
            i -= k
            j -= k
            k = 0
        smallest = min(i, j, k)
        if smallest > 0:
            i -= smallest
            j -= smallest
            k -= smallest
        return CoordIJK(i, j, k)

    def to_hex2d(self) -> Vec2d:
        """Center point of the hex in 2D cartesian coordinates."""
        i = self.i - self.k
        j = self.j - self.k
        return Vec2d(i - 0.5 * j, j * M_SQRT3_2)

    def to_digit(self) -> Direction:
        """Digit of a unit vector, or INVALID_DIGIT if this is not one."""
        normalized = self.normalize()
        for digit, vec in enumerate(UNIT_VECS):
            if normalized == vec:
                return Direction(digit)
        return Direction.INVALID_DIGIT

    def _combine(self, i_vec: CoordIJK, j_vec: CoordIJK, k_vec: CoordIJK) -> CoordIJK:
        return (
            i_vec.scale(self.i) + j_vec.scale(self.j) + k_vec.scale(self.k)
        ).normalize()

    def up_ap7(self) -> CoordIJK:
        """Indexing parent in a counter-clockwise aperture 7 grid."""
        i = self.i - self.k
        j = self.j - self.k
        return CoordIJK(
            _round_div(3 * i - j, 7), _round_div(i + 2 * j, 7), 0
        ).normalize()

    def up_ap7r(self) -> CoordIJK:
        """Indexing parent in a clockwise aperture 7 grid."""
        i = self.i - self.k
        j = self.j - self.k
        return CoordIJK(
            _round_div(2 * i + j, 7), _round_div(3 * j - i, 7), 0
        ).normalize()

    def down_ap7(self) -> CoordIJK:
        """Center hex at the next finer counter-clockwise aperture 7 resolution."""
        return self._combine(CoordIJK(3, 0, 1), CoordIJK(1, 3, 0), CoordIJK(0, 1, 3))

    def down_ap7r(self) -> CoordIJK:
        """Center hex at the next finer clockwise aperture 7 resolution."""
        return self._combine(CoordIJK(3, 1, 0), CoordIJK(0, 3, 1), CoordIJK(1, 0, 3))

    def down_ap3(self) -> CoordIJK:
        """Center hex at the next finer counter-clockwise aperture 3 resolution."""
        return self._combine(CoordIJK(2, 0, 1), CoordIJK(1, 2, 0), CoordIJK(0, 1, 2))

    def down_ap3r(self) -> CoordIJK:
        """Center hex at the next finer clockwise aperture 3 resolution."""
        return self._combine(CoordIJK(2, 1, 0), CoordIJK(0, 2, 1), CoordIJK(1, 0, 2))

    def neighbor(self, digit: int) -> CoordIJK:
        """Neighboring hex in the given digit direction; unchanged for center or invalid."""
        if Direction.CENTER_DIGIT < digit < Direction.NUM_DIGITS:
            return (self + UNIT_VECS[digit]).normalize()
        return self

    def rotate60ccw(self) -> CoordIJK:
        """Rotate 60 degrees counter-clockwise."""
        return self._combine(CoordIJK(1, 1, 0), CoordIJK(0, 1, 1), CoordIJK(1, 0, 1))

    def rotate60cw(self) -> CoordIJK:
        """Rotate 60 degrees clockwise."""
        return self._combine(CoordIJK(1, 0, 1), CoordIJK(1, 1, 0), CoordIJK(0, 1, 1))

    def distance(self, other: CoordIJK) -> int:
        """Grid distance between two coordinates."""
        diff = (self - other).normalize()
        return max(abs(diff.i), abs(diff.j), abs(diff.k))

    def to_ij(self) -> CoordIJ:
        """Convert to the IJ coordinate system."""
        return CoordIJ(self.i - self.k, self.j - self.k)

    def to_cube(self) -> CoordIJK:
        """Convert these IJK coordinates to cube coordinates."""
        i = -self.i + self.k
        j = self.j - self.k
        return CoordIJK(i, j, -i - j)

    def cube_to_ijk(self) -> CoordIJK:
        """Treat these as cube coordinates and convert them to IJK coordinates."""
        return CoordIJK(-self.i, self.j, 0).normalize()


UNIT_VECS: tuple[CoordIJK, ...] = (
    CoordIJK(0, 0, 0),
    CoordIJK(0, 0, 1),
    CoordIJK(0, 1, 0),
    CoordIJK(0, 1, 1),
    CoordIJK(1, 0, 0),
    CoordIJK(1, 0, 1),
    CoordIJK(1, 1, 0),
)


def hex2d_to_ijk(v: Vec2d) -> CoordIJK:
    """Containing hex in ijk+ coordinates for a 2D cartesian vector."""
    a1 = abs(v.x)
    a2 = abs(v.y)

    x2 = a2 / M_SIN60
    x1 = a1 + x2 / 2.0

    m1 = int(x1)
    m2 = int(x2)

    r1 = x1 - m1
    r2 = x2 - m2

    if r1 < 0.5:
        if r1 < 1.0 / 3.0:
            i = m1
            j = m2 if r2 < (1.0 + r1) / 2.0 else m2 + 1
        else:
            j = m2 if r2 < (1.0 - r1) else m2 + 1
            i = m1 + 1 if (1.0 - r1) <= r2 < (2.0 * r1) else m1
    else:
        if r1 < 2.0 / 3.0:
            j = m2 if r2 < (1.0 - r1) else m2 + 1
            i = m1 if (2.0 * r1 - 1.0) < r2 < (1.0 - r1) else m1 + 1
        else:
            i = m1 + 1
            j = m2 if r2 < (r1 / 2.0) else m2 + 1

    if v.x < 0.0:
        if j % 2 == 0:
            diff = i - j // 2
            i = i - 2 * diff
        else:
            diff = i - (j + 1) // 2
            i = i - (2 * diff + 1)

    if v.y < 0.0:
        i = i - (2 * j + 1) // 2
        j = -j

    return CoordIJK(i, j, 0).normalize()


def ij_to_ijk(ij: CoordIJ) -> CoordIJK:
    """Convert IJ coordinates to normalized IJK+ coordinates."""
    return CoordIJK(ij.i, ij.j, 0).normalize()


_CCW = {
    Direction.K_AXES_DIGIT: Direction.IK_AXES_DIGIT,
    Direction.IK_AXES_DIGIT: Direction.I_AXES_DIGIT,
    Direction.I_AXES_DIGIT: Direction.IJ_AXES_DIGIT,
    Direction.IJ_AXES_DIGIT: Direction.J_AXES_DIGIT,
    Direction.J_AXES_DIGIT: Direction.JK_AXES_DIGIT,
    Direction.JK_AXES_DIGIT: Direction.K_AXES_DIGIT,
}
_CW = {after: before for before, after in _CCW.items()}


def rotate_digit_60ccw(digit: int) -> Direction:
    """Rotate an indexing digit 60 degrees counter-clockwise."""
    digit = Direction(digit)
    return _CCW.get(digit, digit)


def rotate_digit_60cw(digit: int) -> Direction:
    """Rotate an indexing digit 60 degrees clockwise."""
    digit = Direction(digit)
    return _CW.get(digit, digit)