"""Geographic coordinates and bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoCoord:
    """Latitude and longitude, in radians."""

    lat: float
    lon: float


@dataclass(frozen=True)
class BBox:
    """Geographic bounding box with edges in radians.

    A box whose east edge lies west of its west edge crosses the antimeridian.
    """

    north: float
    south: float
    east: float
    west: float

    def is_transmeridian(self) -> bool:
        """Whether the box crosses the antimeridian."""
        return self.east < self.west

    def contains(self, point: GeoCoord) -> bool:
        """Whether the point lies inside the box, edges included."""
        if not self.south <= point.lat <= self.north:
            return False
        if self.is_transmeridian():
            return point.lon >= self.west or point.lon <= self.east
        return self.west <= point.lon <= self.east