from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable

from src.app.ports.output import ISnapshotRepository
from src.domain.exceptions import (
    CatalogueError,
    InconsistentTable,
    NoPathFound,
    SnapshotError,
)
from src.domain.models import (
    BusStats,
    LegType,
    RequestType,
    Route,
    Snapshot,
    StatRequest,
    TransportCatalogue,
)

from .route_resolver import RouteResolver

logger = logging.getLogger(__name__)

NOT_FOUND = "not found"
MAP_UNSUPPORTED = "map rendering is not supported"


@dataclass(slots=True)
class RequestHandler:
    """SERVE phase use case: answers stat requests against a loaded snapshot.

    Each request is independent; "not found" outcomes become an
    ``error_message`` entry instead of an exception.
    """

    catalogue: TransportCatalogue
    resolver: RouteResolver

    @classmethod
    def from_snapshot(cls, snapshot: Snapshot) -> RequestHandler:
        try:
            resolver = RouteResolver.warm(
                snapshot.catalogue, snapshot.settings, snapshot.table_rows
            )
        except (CatalogueError, InconsistentTable) as exc:
            raise SnapshotError(
                f"Snapshot does not match its catalogue: {exc}"
            ) from exc

        graph = resolver.network.graph
        if (graph.vertex_count, graph.edge_count) != (
            snapshot.vertex_count,
            snapshot.edge_count,
        ):
            raise SnapshotError(
                "Rebuilt routing graph does not match the snapshot "
                f"({graph.vertex_count}/{graph.edge_count} vs "
                f"{snapshot.vertex_count}/{snapshot.edge_count} vertices/edges)"
            )
        return cls(catalogue=snapshot.catalogue, resolver=resolver)

    @classmethod
    def from_repository(cls, repository: ISnapshotRepository) -> RequestHandler:
        snapshot = repository.load()
        handler = cls.from_snapshot(snapshot)
        logger.info(
            "Snapshot loaded: %d vertices, %d edges",
            snapshot.vertex_count,
            snapshot.edge_count,
        )
        return handler

    def process(self, requests: Iterable[StatRequest]) -> list[dict[str, Any]]:
        return [self.process_one(r) for r in requests]

    def process_one(self, request: StatRequest) -> dict[str, Any]:
        response: dict[str, Any] = {"request_id": request.id}

        if request.type is RequestType.MAP:
            response["error_message"] = MAP_UNSUPPORTED
            return response

        try:
            if request.type is RequestType.BUS:
                response.update(bus_to_dict(self.bus_stats(request.name or "")))
            elif request.type is RequestType.STOP:
                response["buses"] = self.buses_through(request.name or "")
            else:
                route = self.route(request.stop_from or "", request.stop_to or "")
                response.update(route_to_dict(route))
        except NoPathFound as exc:
            logger.debug("Request %s not found: %s", request.id, exc)
            response["error_message"] = NOT_FOUND

        return response

    def bus_stats(self, bus_name: str) -> BusStats:
        return self.catalogue.bus_stats(bus_name)

    def buses_through(self, stop_name: str) -> list[str]:
        return self.catalogue.buses_through(stop_name)

    def route(self, stop_from: str, stop_to: str) -> Route:
        return self.resolver.resolve(stop_from, stop_to)


def bus_to_dict(stats: BusStats) -> dict[str, Any]:
    return {
        "curvature": stats.curvature,
        "route_length": stats.route_length,
        "stop_count": stats.stop_count,
        "unique_stop_count": stats.unique_stop_count,
    }


def route_to_dict(route: Route) -> dict[str, Any]:
    items: list[dict[str, Any]] = []
    for leg in route.legs:
        if leg.type is LegType.WAIT:
            # Boarding wait is a whole number of minutes.
            items.append(
                {"type": "Wait", "stop_name": leg.stop_name, "time": int(leg.time)}
            )
        else:
            items.append(
                {
                    "type": "Bus",
                    "bus": leg.bus,
                    "span_count": leg.span_count,
                    "time": leg.time,
                }
            )
    return {"total_time": route.total_time, "items": items}
