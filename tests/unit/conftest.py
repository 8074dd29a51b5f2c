from __future__ import annotations

import pytest

from src.app.services.route_resolver import RouteResolver
from src.domain.models import (
    GeoPoint,
    RoutingSettings,
    Snapshot,
    TransportCatalogue,
)


@pytest.fixture
def ring_catalogue() -> TransportCatalogue:
    """Ring R1 over S1, S2, S3 with 1000 m hops."""

    catalogue = TransportCatalogue()
    catalogue.add_stop("S1", GeoPoint(lat=55.60, lon=37.20), {"S2": 1000})
    catalogue.add_stop("S2", GeoPoint(lat=55.61, lon=37.21), {"S3": 1000})
    catalogue.add_stop("S3", GeoPoint(lat=55.62, lon=37.22))
    catalogue.add_bus("R1", ["S1", "S2", "S3"], is_roundtrip=True)
    return catalogue


@pytest.fixture
def city_catalogue() -> TransportCatalogue:
    """Two connected lines plus an isolated one.

    A - B - C - D   bus "14" (linear)
        B - E - C   bus "ring" (ring, returns to B)
    X - Y           bus "far" (linear, disjoint)
    Z               registered stop without any bus
    """

    catalogue = TransportCatalogue()
    catalogue.add_stop("A", GeoPoint(lat=43.58, lon=39.72), {"B": 600})
    catalogue.add_stop("B", GeoPoint(lat=43.59, lon=39.73), {"C": 1200, "E": 300})
    catalogue.add_stop("C", GeoPoint(lat=43.60, lon=39.74), {"D": 900, "B": 1500})
    catalogue.add_stop("D", GeoPoint(lat=43.61, lon=39.75))
    catalogue.add_stop("E", GeoPoint(lat=43.595, lon=39.735), {"C": 300})
    catalogue.add_stop("X", GeoPoint(lat=44.00, lon=40.00), {"Y": 1800})
    catalogue.add_stop("Y", GeoPoint(lat=44.01, lon=40.01))
    catalogue.add_stop("Z", GeoPoint(lat=45.00, lon=41.00))

    catalogue.add_bus("14", ["A", "B", "C", "D"], is_roundtrip=False)
    catalogue.add_bus("ring", ["B", "E", "C", "B"], is_roundtrip=True)
    catalogue.add_bus("far", ["X", "Y"], is_roundtrip=False)
    return catalogue


@pytest.fixture
def minute_per_km_settings() -> RoutingSettings:
    # 60 km/h covers 1000 m in one minute.
    return RoutingSettings(bus_wait_time=5, bus_velocity=60.0)


@pytest.fixture
def walking_pace_settings() -> RoutingSettings:
    # 3.6 km/h is exactly 1 m/s, which keeps hop times exact (600 m -> 10 min).
    return RoutingSettings(bus_wait_time=2, bus_velocity=3.6)


@pytest.fixture
def city_snapshot(
    city_catalogue: TransportCatalogue, walking_pace_settings: RoutingSettings
) -> Snapshot:
    resolver = RouteResolver.cold(city_catalogue, walking_pace_settings)
    return Snapshot(
        catalogue=city_catalogue,
        settings=walking_pace_settings,
        table_rows=resolver.table.rows(),
        vertex_count=resolver.network.graph.vertex_count,
        edge_count=resolver.network.graph.edge_count,
    )
