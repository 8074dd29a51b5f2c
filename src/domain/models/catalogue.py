from __future__ import annotations

from typing import Iterable, Mapping

from src.domain.exceptions import MissingDistance, UnknownBus, UnknownStop

from .bus import Bus, BusStats
from .geo import GeoPoint, great_circle_distance_m
from .registry import StopRegistry
from .stop import Stop


class TransportCatalogue:
    """Stops and bus routes of one transit network.

    Mutated only while ingesting base requests; afterwards it is treated as
    immutable by the router and the request handler.
    """

    def __init__(self, registry: StopRegistry | None = None) -> None:
        self.registry = registry if registry is not None else StopRegistry()
        self._stops: dict[int, Stop] = {}
        self._buses: dict[str, Bus] = {}

    def add_stop(
        self,
        name: str,
        location: GeoPoint,
        road_distances: Mapping[str, int] | None = None,
    ) -> Stop:
        handle = self.registry.intern(name)
        distances = {
            self.registry.intern(other): int(meters)
            for other, meters in (road_distances or {}).items()
        }

        stop = self._stops.get(handle)
        if stop is None:
            stop = Stop(handle=handle, location=location, road_distances=distances)
            self._stops[handle] = stop
        else:
            # Re-definition replaces the data but keeps the same object/handle.
            stop.location = location
            stop.road_distances = distances
        return stop

    def add_bus(self, name: str, stop_names: Iterable[str], is_roundtrip: bool) -> Bus:
        stops = tuple(self.registry.intern(s) for s in stop_names)
        bus = Bus(name=name, stops=stops, is_roundtrip=bool(is_roundtrip))
        self._buses[name] = bus
        return bus

    def get_stop(self, name: str) -> Stop | None:
        handle = self.registry.handle_of(name)
        if handle is None:
            return None
        return self._stops.get(handle)

    def get_bus(self, name: str) -> Bus | None:
        return self._buses.get(name)

    def stops(self) -> list[Stop]:
        return [self._stops[h] for h in sorted(self._stops)]

    def buses(self) -> list[Bus]:
        return list(self._buses.values())

    def get_distance(self, stop_from: int, stop_to: int) -> int:
        """Road distance in meters, checking both directions of storage."""

        origin = self._stops.get(stop_from)
        if origin is not None and stop_to in origin.road_distances:
            return origin.road_distances[stop_to]

        target = self._stops.get(stop_to)
        if target is not None and stop_from in target.road_distances:
            return target.road_distances[stop_from]

        raise MissingDistance(
            self.registry.name_of(stop_from), self.registry.name_of(stop_to)
        )

    def stops_in_routes(self) -> list[int]:
        """Handles of every stop referenced by at least one bus, in handle order."""

        seen: set[int] = set()
        for bus in self._buses.values():
            seen.update(bus.stops)
        return sorted(seen)

    def buses_through(self, stop_name: str) -> list[str]:
        if self.get_stop(stop_name) is None:
            raise UnknownStop(f"Unknown stop: {stop_name}")

        handle = self.registry.handle_of(stop_name)
        return sorted(b.name for b in self._buses.values() if handle in b.stops)

    def bus_stats(self, bus_name: str) -> BusStats:
        bus = self._buses.get(bus_name)
        if bus is None:
            raise UnknownBus(f"Unknown bus: {bus_name}")

        stops = bus.stops
        stop_count = len(stops) if bus.is_roundtrip else len(stops) * 2 - 1

        road_length = 0
        for direction in bus.directions():
            for a, b in zip(direction, direction[1:]):
                road_length += self.get_distance(a, b)

        geo_length = 0.0
        for a, b in zip(stops, stops[1:]):
            geo_length += great_circle_distance_m(
                self._location(a), self._location(b)
            )
        if not bus.is_roundtrip:
            geo_length *= 2

        curvature = road_length / geo_length if geo_length > 0 else 0.0

        return BusStats(
            stop_count=max(stop_count, 0),
            unique_stop_count=len(set(stops)),
            route_length=road_length,
            curvature=curvature,
        )

    def _location(self, handle: int) -> GeoPoint:
        stop = self._stops.get(handle)
        if stop is None:
            raise UnknownStop(f"Unknown stop: {self.registry.name_of(handle)}")
        return stop.location
