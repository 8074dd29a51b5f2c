from __future__ import annotations

import math
from dataclasses import dataclass

EARTH_RADIUS_M = 6371000.0


@dataclass(frozen=True, slots=True)
class GeoPoint:
    lat: float
    lon: float

    def __post_init__(self) -> None:
        if not (-90.0 <= self.lat <= 90.0):
            raise ValueError(f"Invalid latitude: {self.lat}")
        if not (-180.0 <= self.lon <= 180.0):
            raise ValueError(f"Invalid longitude: {self.lon}")


def great_circle_distance_m(a: GeoPoint, b: GeoPoint) -> float:
    """Distance in meters on a spherical Earth (spherical law of cosines)."""

    if a == b:
        return 0.0

    dr = math.pi / 180.0
    cos_angle = math.sin(a.lat * dr) * math.sin(b.lat * dr) + math.cos(
        a.lat * dr
    ) * math.cos(b.lat * dr) * math.cos(abs(a.lon - b.lon) * dr)
    # Rounding can push nearly identical points just outside acos' domain.
    cos_angle = max(-1.0, min(1.0, cos_angle))
    return math.acos(cos_angle) * EARTH_RADIUS_M
