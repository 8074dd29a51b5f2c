from __future__ import annotations

from dataclasses import dataclass, field

from .geo import GeoPoint


@dataclass(slots=True)
class Stop:
    """Stop data keyed by its registry handle.

    Road distances are stored on whichever stop declared them; see
    TransportCatalogue.get_distance for the two-way lookup.
    """

    handle: int
    location: GeoPoint
    road_distances: dict[int, int] = field(default_factory=dict)  # meters
