# hexgrid

Building blocks for a hierarchical hexagonal grid laid over an icosahedron.
The package is pure Python and has no runtime dependencies.

## Installation

```
pip install hexgrid
```

The test suite uses pytest, available through the `test` extra:

```
pip install "hexgrid[test]"
pytest
```

## Modules

### `hexgrid.coordijk`

- `CoordIJK(i, j, k)`: frozen IJK hexagon coordinates. It supports `+` and `-`,
  `scale(factor)`, `normalize()`, `to_hex2d()`, `to_digit()`, `neighbor(digit)`,
  `rotate60ccw()`, `rotate60cw()`, `distance(other)`, `to_ij()`, `to_cube()` and
  `cube_to_ijk()`. It also covers parent and child steps: `up_ap7()`,
  `up_ap7r()`, `down_ap7()`, `down_ap7r()`, `down_ap3()` and `down_ap3r()`.
  Every method returns a new coordinate and leaves the original unchanged.
- `CoordIJ(i, j)` and `Vec2d(x, y)`: IJ coordinates and 2D cartesian vectors.
- `Direction`: an `IntEnum` of the indexing digits, from `CENTER_DIGIT` (0)
  through `IJ_AXES_DIGIT` (6), plus `INVALID_DIGIT` (7).
- `UNIT_VECS`: the unit vector for each digit.
- `hex2d_to_ijk(v)`: returns the hex that contains a 2D point.
- `ij_to_ijk(ij)`: converts IJ coordinates to normalized IJK coordinates.
- `rotate_digit_60ccw(digit)` and `rotate_digit_60cw(digit)`: rotate a digit by
  60 degrees.

### `hexgrid.basecell_neighbors`

- `base_cell_neighbor(base_cell, direction)`: the neighbour of each of the 122
  base cells in each direction. For the deleted k-axes direction of a pentagon
  it returns `INVALID_BASE_CELL` (127).
- `base_cell_neighbor_rotations(base_cell, direction)`: the number of 60° ccw
  rotations needed to enter that neighbour, or -1 where there is none.
- `base_cell_direction(origin_base_cell, neighboring_base_cell)`: the direction
  from one base cell to another, or `Direction.INVALID_DIGIT` when the two are
  not neighbours.

### `hexgrid.basecells`

- `FaceIJK(face, coord)` and `BaseCellData(home_fijk, is_pentagon,
  cw_offset_pent)`.
- `base_cell_data(base_cell)`, `base_cell_to_face_ijk(base_cell)`,
  `is_base_cell_pentagon(base_cell)`, `is_base_cell_polar_pentagon(base_cell)`
  and `base_cell_is_cw_offset(base_cell, test_face)`.
- `face_ijk_to_base_cell(h)` and `face_ijk_to_base_cell_ccw_rot60(h)`: look up
  the base cell at a resolution 0 coordinate on a face, and the rotation into
  it. Each component must be between 0 and 2.
- `res0_index_count()`: 122.

### `hexgrid.bbox`

- `GeoCoord(lat, lon)`: a point in radians.
- `BBox(north, south, east, west)`: a box in radians, with `is_transmeridian()`
  and `contains(point)`. A box whose east edge lies west of its west edge
  crosses the antimeridian. Points on an edge count as inside.

### `hexgrid.kring`

- `max_kring_size(k)`: `3k(k+1) + 1`, the largest number of cells within grid
  distance `k`.
- `ring_directions()`: the six directions that walk a ring counter-clockwise.
- `NEXT_RING_DIRECTION`: the direction that steps out to the next ring.

### `hexgrid.traversal`

- `next_digit(class_iii, digit, direction)` and
  `next_adjustment(class_iii, digit, direction)`: give the new digit, and the
  move carried to the next coarser resolution, when a cell steps one place in a
  direction. Digits at a Class III resolution use the class II tables. All
  other digits use the class III tables.

A base cell, face, digit or direction outside its range raises `ValueError`.

## Example

```python
from hexgrid.coordijk import CoordIJK, Direction
from hexgrid.basecells import is_base_cell_pentagon
from hexgrid.basecell_neighbors import base_cell_neighbor
from hexgrid.kring import max_kring_size

c = CoordIJK(2, 0, 0)
print(c.up_ap7())                           # CoordIJK(i=1, j=0, k=0)
print(c.neighbor(Direction.K_AXES_DIGIT))   # CoordIJK(i=2, j=0, k=1)
print(c.distance(CoordIJK(0, 0, 0)))        # 2

print(is_base_cell_pentagon(4))             # True
print(base_cell_neighbor(0, Direction.I_AXES_DIGIT))  # 4
print(max_kring_size(2))                    # 19
```

## What it does not do

The package provides the coordinate types, lookup tables and bounding box
checks. It does not build on them to work with geographic cells. It cannot
convert a latitude and longitude to a cell index, or an index back to a
centre or boundary. It has no 64-bit cell index type. It does not compute
k-rings, hex rings, polygon fills or outlines of cell sets. It has no command
line tool.