from .bus import Bus, BusStats
from .catalogue import TransportCatalogue
from .geo import GeoPoint, great_circle_distance_m
from .registry import StopRegistry
from .requests import (
    BaseInput,
    BusDefinition,
    RequestType,
    StatRequest,
    StopDefinition,
)
from .route import LegType, Route, RouteLeg
from .settings import RoutingSettings
from .snapshot import Snapshot, TableRows
from .stop import Stop

__all__ = [
    "BaseInput",
    "Bus",
    "BusDefinition",
    "BusStats",
    "GeoPoint",
    "LegType",
    "RequestType",
    "Route",
    "RouteLeg",
    "RoutingSettings",
    "Snapshot",
    "StatRequest",
    "Stop",
    "StopDefinition",
    "StopRegistry",
    "TableRows",
    "TransportCatalogue",
    "great_circle_distance_m",
]
