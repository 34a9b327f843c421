"""Hexagonal grid primitives: IJK coordinates, base cell tables, bounding boxes and traversal tables."""

__version__ = "0.1.0"

__all__ = [
    "coordijk",
    "basecell_neighbors",
    "basecells",
    "bbox",
    "kring",
    "traversal",
]