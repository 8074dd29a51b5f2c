from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .geo import GeoPoint
from .settings import RoutingSettings


@dataclass(frozen=True, slots=True)
class StopDefinition:
    name: str
    location: GeoPoint
    road_distances: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class BusDefinition:
    name: str
    stops: tuple[str, ...]
    is_roundtrip: bool


@dataclass(frozen=True, slots=True)
class BaseInput:
    """Network definition consumed by the BUILD phase."""

    stops: tuple[StopDefinition, ...]
    buses: tuple[BusDefinition, ...]
    settings: RoutingSettings


class RequestType(str, Enum):
    BUS = "Bus"
    STOP = "Stop"
    ROUTE = "Route"
    MAP = "Map"


@dataclass(frozen=True, slots=True)
class StatRequest:
    id: int
    type: RequestType
    name: str | None = None
    stop_from: str | None = None
    stop_to: str | None = None
