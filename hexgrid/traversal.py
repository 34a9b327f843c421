"""Digit lookup tables for stepping from one cell to a neighbor.

Moving from a cell in some direction changes the indexing digit at the
cell's resolution. It may also carry an adjustment move up to the next
coarser resolution. Which table applies depends on the resolution's class.
"""

from __future__ import annotations

from hexgrid.coordijk import Direction

_C = Direction.CENTER_DIGIT
_K = Direction.K_AXES_DIGIT
_J = Direction.J_AXES_DIGIT
_JK = Direction.JK_AXES_DIGIT
_I = Direction.I_AXES_DIGIT
_IK = Direction.IK_AXES_DIGIT
_IJ = Direction.IJ_AXES_DIGIT

# Current digit -> direction -> new digit, along class II grids.
_NEW_DIGIT_II: tuple[tuple[Direction, ...], ...] = (
    (_C, _K, _J, _JK, _I, _IK, _IJ),
    (_K, _I, _JK, _IJ, _IK, _J, _C),
    (_J, _JK, _K, _I, _IJ, _C, _IK),
    (_JK, _IJ, _I, _IK, _C, _K, _J),
    (_I, _IK, _IJ, _C, _J, _JK, _K),
    (_IK, _J, _C, _K, _JK, _IJ, _I),
    (_IJ, _C, _IK, _J, _K, _I, _JK),
)

# Current digit -> direction -> move at the coarser level, along class II grids.
_NEW_ADJUSTMENT_II: tuple[tuple[Direction, ...], ...] = (
    (_C, _C, _C, _C, _C, _C, _C),
    (_C, _K, _C, _K, _C, _IK, _C),
    (_C, _C, _J, _JK, _C, _C, _J),
    (_C, _K, _JK, _JK, _C, _C, _C),
    (_C, _C, _C, _C, _I, _I, _IJ),
    (_C, _IK, _C, _C, _I, _IK, _C),
    (_C, _C, _J, _C, _IJ, _C, _IJ),
)

# Current digit -> direction -> new digit, along class III grids.
_NEW_DIGIT_III: tuple[tuple[Direction, ...], ...] = (
    (_C, _K, _J, _JK, _I, _IK, _IJ),
    (_K, _J, _JK, _I, _IK, _IJ, _C),
    (_J, _JK, _I, _IK, _IJ, _C, _K),
    (_JK, _I, _IK, _IJ, _C, _K, _J),
    (_I, _IK, _IJ, _C, _K, _J, _JK),
    (_IK, _IJ, _C, _K, _J, _JK, _I),
    (_IJ, _C, _K, _J, _JK, _I, _IK),
)

# Current digit -> direction -> move at the coarser level, along class III grids.
_NEW_ADJUSTMENT_III: tuple[tuple[Direction, ...], ...] = (
    (_C, _C, _C, _C, _C, _C, _C),
    (_C, _K, _C, _JK, _C, _K, _C),
    (_C, _C, _J, _J, _C, _C, _IJ),
    (_C, _JK, _J, _JK, _C, _C, _C),
    (_C, _C, _C, _C, _I, _IK, _I),
    (_C, _K, _C, _C, _IK, _IK, _C),
    (_C, _C, _IJ, _C, _I, _C, _IJ),
)


def _check(digit: int, direction: int) -> None:
    if not Direction.CENTER_DIGIT <= digit < Direction.NUM_DIGITS:
        raise ValueError(f"digit out of range: {digit}")
    if not Direction.CENTER_DIGIT <= direction < Direction.NUM_DIGITS:
        raise ValueError(f"direction out of range: {direction}")


def next_digit(class_iii: bool, digit: int, direction: int) -> Direction:
    """New indexing digit after moving one cell in the given direction.

    ``class_iii`` says whether the digit belongs to a Class III resolution;
    such digits are stepped with the class II tables, and the others with
    the class III tables.
    """
    _check(digit, direction)
    table = _NEW_DIGIT_II if class_iii else _NEW_DIGIT_III
    return table[digit][direction]


def next_adjustment(class_iii: bool, digit: int, direction: int) -> Direction:
    """Move to carry to the next coarser resolution, or CENTER_DIGIT if none.

    ``class_iii`` has the same meaning as for :func:`next_digit`.
    """
    _check(digit, direction)
    table = _NEW_ADJUSTMENT_II if class_iii else _NEW_ADJUSTMENT_III
    return table[digit][direction]