"""Resolution 0 base cell data: home faces, pentagons and face lookups."""

from __future__ import annotations

from dataclasses import dataclass

from hexgrid.basecell_neighbors import NUM_BASE_CELLS
from hexgrid.coordijk import CoordIJK

NUM_ICOSA_FACES = 20

#: Maximum input for any component to the face-to-base-cell lookups.
MAX_FACE_COORD = 2


@dataclass(frozen=True)
class FaceIJK:
    """Icosahedron face number together with ijk coordinates on that face."""

    face: int
    coord: CoordIJK


@dataclass(frozen=True)
class BaseCellData:
    """Information on a single base cell."""

    home_fijk: FaceIJK
    is_pentagon: bool
    cw_offset_pent: tuple[int, int]


# Resolution 0 lookup: face -> i -> j -> k -> (base cell, ccw 60 rotations).
_FACE_IJK_BASE_CELLS: tuple = (
    (  # face 0
        (((16, 0), (18, 0), (24, 0)), ((33, 0), (30, 0), (32, 3)), ((49, 1), (48, 3), (50, 3))),
        (((8, 0), (5, 5), (10, 5)), ((22, 0), (16, 0), (18, 0)), ((41, 1), (33, 0), (30, 0))),
        (((4, 0), (0, 5), (2, 5)), ((15, 1), (8, 0), (5, 5)), ((31, 1), (22, 0), (16, 0))),
    ),
    (  # face 1
        (((2, 0), (6, 0), (14, 0)), ((10, 0), (11, 0), (17, 3)), ((24, 1), (23, 3), (25, 3))),
        (((0, 0), (1, 5), (9, 5)), ((5, 0), (2, 0), (6, 0)), ((18, 1), (10, 0), (11, 0))),
        (((4, 1), (3, 5), (7, 5)), ((8, 1), (0, 0), (1, 5)), ((16, 1), (5, 0), (2, 0))),
    ),
    (  # face 2
        (((7, 0), (21, 0), (38, 0)), ((9, 0), (19, 0), (34, 3)), ((14, 1), (20, 3), (36, 3))),
        (((3, 0), (13, 5), (29, 5)), ((1, 0), (7, 0), (21, 0)), ((6, 1), (9, 0), (19, 0))),
        (((4, 2), (12, 5), (26, 5)), ((0, 1), (3, 0), (13, 5)), ((2, 1), (1, 0), (7, 0))),
    ),
    (  # face 3
        (((26, 0), (42, 0), (58, 0)), ((29, 0), (43, 0), (62, 3)), ((38, 1), (47, 3), (64, 3))),
        (((12, 0), (28, 5), (44, 5)), ((13, 0), (26, 0), (42, 0)), ((21, 1), (29, 0), (43, 0))),
        (((4, 3), (15, 5), (31, 5)), ((3, 1), (12, 0), (28, 5)), ((7, 1), (13, 0), (26, 0))),
    ),
    (  # face 4
        (((31, 0), (41, 0), (49, 0)), ((44, 0), (53, 0), (61, 3)), ((58, 1), (65, 3), (75, 3))),
        (((15, 0), (22, 5), (33, 5)), ((28, 0), (31, 0), (41, 0)), ((42, 1), (44, 0), (53, 0))),
        (((4, 4), (8, 5), (16, 5)), ((12, 1), (15, 0), (22, 5)), ((26, 1), (28, 0), (31, 0))),
    ),
    (  # face 5
        (((50, 0), (48, 0), (49, 3)), ((32, 0), (30, 3), (33, 3)), ((24, 3), (18, 3), (16, 3))),
        (((70, 0), (67, 0), (66, 3)), ((52, 3), (50, 0), (48, 0)), ((37, 3), (32, 0), (30, 3))),
        (((83, 0), (87, 3), (85, 3)), ((74, 3), (70, 0), (67, 0)), ((57, 1), (52, 3), (50, 0))),
    ),
    (  # face 6
        (((25, 0), (23, 0), (24, 3)), ((17, 0), (11, 3), (10, 3)), ((14, 3), (6, 3), (2, 3))),
        (((45, 0), (39, 0), (37, 3)), ((35, 3), (25, 0), (23, 0)), ((27, 3), (17, 0), (11, 3))),
        (((63, 0), (59, 3), (57, 3)), ((56, 3), (45, 0), (39, 0)), ((46, 3), (35, 3), (25, 0))),
    ),
    (  # face 7
        (((36, 0), (20, 0), (14, 3)), ((34, 0), (19, 3), (9, 3)), ((38, 3), (21, 3), (7, 3))),
        (((55, 0), (40, 0), (27, 3)), ((54, 3), (36, 0), (20, 0)), ((51, 3), (34, 0), (19, 3))),
        (((72, 0), (60, 3), (46, 3)), ((73, 3), (55, 0), (40, 0)), ((71, 3), (54, 3), (36, 0))),
    ),
    (  # face 8
        (((64, 0), (47, 0), (38, 3)), ((62, 0), (43, 3), (29, 3)), ((58, 3), (42, 3), (26, 3))),
        (((84, 0), (69, 0), (51, 3)), ((82, 3), (64, 0), (47, 0)), ((76, 3), (62, 0), (43, 3))),
        (((97, 0), (89, 3), (71, 3)), ((98, 3), (84, 0), (69, 0)), ((96, 3), (82, 3), (64, 0))),
    ),
    (  # face 9
        (((75, 0), (65, 0), (58, 3)), ((61, 0), (53, 3), (44, 3)), ((49, 3), (41, 3), (31, 3))),
        (((94, 0), (86, 0), (76, 3)), ((81, 3), (75, 0), (65, 0)), ((66, 3), (61, 0), (53, 3))),
        (((107, 0), (104, 3), (96, 3)), ((101, 3), (94, 0), (86, 0)), ((85, 3), (81, 3), (75, 0))),
    ),
    (  # face 10
        (((57, 0), (59, 0), (63, 3)), ((74, 0), (78, 3), (79, 3)), ((83, 3), (92, 3), (95, 3))),
        (((37, 0), (39, 3), (45, 3)), ((52, 0), (57, 0), (59, 0)), ((70, 3), (74, 0), (78, 3))),
        (((24, 0), (23, 3), (25, 3)), ((32, 3), (37, 0), (39, 3)), ((50, 3), (52, 0), (57, 0))),
    ),
    (  # face 11
        (((46, 0), (60, 0), (72, 3)), ((56, 0), (68, 3), (80, 3)), ((63, 3), (77, 3), (90, 3))),
        (((27, 0), (40, 3), (55, 3)), ((35, 0), (46, 0), (60, 0)), ((45, 3), (56, 0), (68, 3))),
        (((14, 0), (20, 3), (36, 3)), ((17, 3), (27, 0), (40, 3)), ((25, 3), (35, 0), (46, 0))),
    ),
    (  # face 12
        (((71, 0), (89, 0), (97, 3)), ((73, 0), (91, 3), (103, 3)), ((72, 3), (88, 3), (105, 3))),
        (((51, 0), (69, 3), (84, 3)), ((54, 0), (71, 0), (89, 0)), ((55, 3), (73, 0), (91, 3))),
        (((38, 0), (47, 3), (64, 3)), ((34, 3), (51, 0), (69, 3)), ((36, 3), (54, 0), (71, 0))),
    ),
    (  # face 13
        (((96, 0), (104, 0), (107, 3)), ((98, 0), (110, 3), (115, 3)), ((97, 3), (111, 3), (119, 3))),
        (((76, 0), (86, 3), (94, 3)), ((82, 0), (96, 0), (104, 0)), ((84, 3), (98, 0), (110, 3))),
        (((58, 0), (65, 3), (75, 3)), ((62, 3), (76, 0), (86, 3)), ((64, 3), (82, 0), (96, 0))),
    ),
    (  # face 14
        (((85, 0), (87, 0), (83, 3)), ((101, 0), (102, 3), (100, 3)), ((107, 3), (112, 3), (114, 3))),
        (((66, 0), (67, 3), (70, 3)), ((81, 0), (85, 0), (87, 0)), ((94, 3), (101, 0), (102, 3))),
        (((49, 0), (48, 3), (50, 3)), ((61, 3), (66, 0), (67, 3)), ((75, 3), (81, 0), (85, 0))),
    ),
    (  # face 15
        (((95, 0), (92, 0), (83, 0)), ((79, 0), (78, 0), (74, 3)), ((63, 1), (59, 3), (57, 3))),
        (((109, 0), (108, 0), (100, 5)), ((93, 1), (95, 0), (92, 0)), ((77, 1), (79, 0), (78, 0))),
        (((117, 4), (118, 5), (114, 5)), ((106, 1), (109, 0), (108, 0)), ((90, 1), (93, 1), (95, 0))),
    ),
    (  # face 16
        (((90, 0), (77, 0), (63, 0)), ((80, 0), (68, 0), (56, 3)), ((72, 1), (60, 3), (46, 3))),
        (((106, 0), (93, 0), (79, 5)), ((99, 1), (90, 0), (77, 0)), ((88, 1), (80, 0), (68, 0))),
        (((117, 3), (109, 5), (95, 5)), ((113, 1), (106, 0), (93, 0)), ((105, 1), (99, 1), (90, 0))),
    ),
    (  # face 17
        (((105, 0), (88, 0), (72, 0)), ((103, 0), (91, 0), (73, 3)), ((97, 1), (89, 3), (71, 3))),
        (((113, 0), (99, 0), (80, 5)), ((116, 1), (105, 0), (88, 0)), ((111, 1), (103, 0), (91, 0))),
        (((117, 2), (106, 5), (90, 5)), ((121, 1), (113, 0), (99, 0)), ((119, 1), (116, 1), (105, 0))),
    ),
    (  # face 18
        (((119, 0), (111, 0), (97, 0)), ((115, 0), (110, 0), (98, 3)), ((107, 1), (104, 3), (96, 3))),
        (((121, 0), (116, 0), (103, 5)), ((120, 1), (119, 0), (111, 0)), ((112, 1), (115, 0), (110, 0))),
        (((117, 1), (113, 5), (105, 5)), ((118, 1), (121, 0), (116, 0)), ((114, 1), (120, 1), (119, 0))),
    ),
    (  # face 19
        (((114, 0), (112, 0), (107, 0)), ((100, 0), (102, 0), (101, 3)), ((83, 1), (87, 3), (85, 3))),
        (((118, 0), (120, 0), (115, 5)), ((108, 1), (114, 0), (112, 0)), ((92, 1), (100, 0), (102, 0))),
        (((117, 0), (121, 5), (119, 5)), ((109, 1), (118, 0), (120, 0)), ((95, 1), (108, 1), (114, 0))),
    ),
)

# Home face and ijk+ coordinates of each base cell, indexed by base cell.
_HOMES: tuple[tuple[int, int, int, int], ...] = (
    (1, 1, 0, 0), (2, 1, 1, 0), (1, 0, 0, 0), (2, 1, 0, 0), (0, 2, 0, 0),
    (1, 1, 1, 0), (1, 0, 0, 1), (2, 0, 0, 0), (0, 1, 0, 0), (2, 0, 1, 0),
    (1, 0, 1, 0), (1, 0, 1, 1), (3, 1, 0, 0), (3, 1, 1, 0), (11, 2, 0, 0),
    (4, 1, 0, 0), (0, 0, 0, 0), (6, 0, 1, 0), (0, 0, 0, 1), (2, 0, 1, 1),
    (7, 0, 0, 1), (2, 0, 0, 1), (0, 1, 1, 0), (6, 0, 0, 1), (10, 2, 0, 0),
    (6, 0, 0, 0), (3, 0, 0, 0), (11, 1, 0, 0), (4, 1, 1, 0), (3, 0, 1, 0),
    (0, 0, 1, 1), (4, 0, 0, 0), (5, 0, 1, 0), (0, 0, 1, 0), (7, 0, 1, 0),
    (11, 1, 1, 0), (7, 0, 0, 0), (10, 1, 0, 0), (12, 2, 0, 0), (6, 1, 0, 1),
    (7, 1, 0, 1), (4, 0, 0, 1), (3, 0, 0, 1), (3, 0, 1, 1), (4, 0, 1, 0),
    (6, 1, 0, 0), (11, 0, 0, 0), (8, 0, 0, 1), (5, 0, 0, 1), (14, 2, 0, 0),
    (5, 0, 0, 0), (12, 1, 0, 0), (10, 1, 1, 0), (4, 0, 1, 1), (12, 1, 1, 0),
    (7, 1, 0, 0), (11, 0, 1, 0), (10, 0, 0, 0), (13, 2, 0, 0), (10, 0, 0, 1),
    (11, 0, 0, 1), (9, 0, 1, 0), (8, 0, 1, 0), (6, 2, 0, 0), (8, 0, 0, 0),
    (9, 0, 0, 1), (14, 1, 0, 0), (5, 1, 0, 1), (16, 0, 1, 1), (8, 1, 0, 1),
    (5, 1, 0, 0), (12, 0, 0, 0), (7, 2, 0, 0), (12, 0, 1, 0), (10, 0, 1, 0),
    (9, 0, 0, 0), (13, 1, 0, 0), (16, 0, 0, 1), (15, 0, 1, 1), (15, 0, 1, 0),
    (16, 0, 1, 0), (14, 1, 1, 0), (13, 1, 1, 0), (5, 2, 0, 0), (8, 1, 0, 0),
    (14, 0, 0, 0), (9, 1, 0, 1), (14, 0, 0, 1), (17, 0, 0, 1), (12, 0, 0, 1),
    (16, 0, 0, 0), (17, 0, 1, 1), (15, 0, 0, 1), (16, 1, 0, 1), (9, 1, 0, 0),
    (15, 0, 0, 0), (13, 0, 0, 0), (8, 2, 0, 0), (13, 0, 1, 0), (17, 1, 0, 1),
    (19, 0, 1, 0), (14, 0, 1, 0), (19, 0, 1, 1), (17, 0, 1, 0), (13, 0, 0, 1),
    (17, 0, 0, 0), (16, 1, 0, 0), (9, 2, 0, 0), (15, 1, 0, 1), (15, 1, 0, 0),
    (18, 0, 1, 1), (18, 0, 0, 1), (19, 0, 0, 1), (17, 1, 0, 0), (19, 0, 0, 0),
    (18, 0, 1, 0), (18, 1, 0, 1), (19, 2, 0, 0), (19, 1, 0, 0), (18, 0, 0, 0),
    (19, 1, 0, 1), (18, 1, 0, 0),
)

# Pentagon base cells and their two clockwise offset faces (-1 for none).
_PENTAGON_CW_OFFSETS: dict[int, tuple[int, int]] = {
    4: (-1, -1),
    14: (2, 6),
    24: (1, 5),
    38: (3, 7),
    49: (0, 9),
    58: (4, 8),
    63: (11, 15),
    72: (12, 16),
    83: (10, 19),
    97: (13, 17),
    107: (14, 18),
    117: (-1, -1),
}

_BASE_CELL_DATA: tuple[BaseCellData, ...] = tuple(
    BaseCellData(
        home_fijk=FaceIJK(face, CoordIJK(i, j, k)),
        is_pentagon=base_cell in _PENTAGON_CW_OFFSETS,
        cw_offset_pent=_PENTAGON_CW_OFFSETS.get(base_cell, (0, 0)),
    )
    for base_cell, (face, i, j, k) in enumerate(_HOMES)
)


def _check_base_cell(base_cell: int) -> None:
    if not 0 <= base_cell < NUM_BASE_CELLS:
        raise ValueError(f"base cell out of range: {base_cell}")


def _lookup(h: FaceIJK) -> tuple[int, int]:
    if not 0 <= h.face < NUM_ICOSA_FACES:
        raise ValueError(f"face out of range: {h.face}")
    c = h.coord
    if not all(0 <= v <= MAX_FACE_COORD for v in (c.i, c.j, c.k)):
        raise ValueError(f"face coordinates out of range: {c}")
    return _FACE_IJK_BASE_CELLS[h.face][c.i][c.j][c.k]


def base_cell_data(base_cell: int) -> BaseCellData:
    """Data record for a base cell."""
    _check_base_cell(base_cell)
    return _BASE_CELL_DATA[base_cell]


def is_base_cell_pentagon(base_cell: int) -> bool:
    """Whether the base cell is a pentagon."""
    return base_cell_data(base_cell).is_pentagon


def is_base_cell_polar_pentagon(base_cell: int) -> bool:
    """Whether the base cell is a pentagon whose neighbors all face toward it."""
    return base_cell in (4, 117)


def face_ijk_to_base_cell(h: FaceIJK) -> int:
    """Base cell at a resolution 0 ijk+ coordinate on a face."""
    return _lookup(h)[0]


def face_ijk_to_base_cell_ccw_rot60(h: FaceIJK) -> int:
    """Number of 60 degree ccw rotations into the base cell's coordinate system."""
    return _lookup(h)[1]


def base_cell_to_face_ijk(base_cell: int) -> FaceIJK:
    """Home face and ijk+ coordinates of a base cell."""
    return base_cell_data(base_cell).home_fijk


def base_cell_is_cw_offset(base_cell: int, test_face: int) -> bool:
    """Whether the tested face is a clockwise offset face of the base cell."""
    return test_face in base_cell_data(base_cell).cw_offset_pent


def res0_index_count() -> int:
    """Number of resolution 0 cells."""
    return NUM_BASE_CELLS