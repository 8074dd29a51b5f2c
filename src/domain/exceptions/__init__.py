from .catalogue import CatalogueError, MissingDistance, SnapshotError
from .routing import (
    InconsistentTable,
    NoPathFound,
    RoutingError,
    UnknownBus,
    UnknownStop,
)

__all__ = [
    "CatalogueError",
    "InconsistentTable",
    "MissingDistance",
    "NoPathFound",
    "RoutingError",
    "SnapshotError",
    "UnknownBus",
    "UnknownStop",
]
