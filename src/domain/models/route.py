from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class LegType(str, Enum):
    WAIT = "Wait"
    BUS = "Bus"


@dataclass(frozen=True, slots=True)
class RouteLeg:
    """One itinerary item: either waiting at a stop or riding a bus."""

    type: LegType
    time: float  # minutes
    stop_name: str | None = None
    bus: str | None = None
    span_count: int | None = None


@dataclass(frozen=True, slots=True)
class Route:
    origin: str
    destination: str
    total_time: float  # minutes, as recorded in the shortest-path table
    legs: tuple[RouteLeg, ...] = field(default_factory=tuple)

    @property
    def legs_time(self) -> float:
        return float(sum(leg.time for leg in self.legs))

    @property
    def bus_count(self) -> int:
        return sum(1 for leg in self.legs if leg.type is LegType.BUS)
