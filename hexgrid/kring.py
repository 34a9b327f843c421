"""Sizes and traversal directions for k-rings of hexagons."""

from __future__ import annotations

from hexgrid.coordijk import Direction

#: Directions for walking a hexagonal ring counter-clockwise.
_DIRECTIONS: tuple[Direction, ...] = (
    Direction.J_AXES_DIGIT,
    Direction.JK_AXES_DIGIT,
    Direction.K_AXES_DIGIT,
    Direction.IK_AXES_DIGIT,
    Direction.I_AXES_DIGIT,
    Direction.IJ_AXES_DIGIT,
)

#: Direction used to step out to the next ring.
NEXT_RING_DIRECTION = Direction.I_AXES_DIGIT


def max_kring_size(k: int) -> int:
    """Maximum number of cells within grid distance k of an origin."""
    if k < 0:
        raise ValueError(f"k must be non-negative: {k}")
    return 3 * k * (k + 1) + 1


def ring_directions() -> tuple[Direction, ...]:
    """The six directions, in order, that walk a ring counter-clockwise."""
    return _DIRECTIONS