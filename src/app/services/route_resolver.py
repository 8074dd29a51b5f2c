from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from src.domain.algorithms.edge_generation import TransportNetwork, build_network
from src.domain.algorithms.shortest_paths import ShortestPathTable
from src.domain.exceptions import NoPathFound, UnknownStop
from src.domain.models import (
    LegType,
    Route,
    RouteLeg,
    RoutingSettings,
    TableRows,
    TransportCatalogue,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RouteResolver:
    """Answers stop-to-stop queries from a precomputed shortest-path table.

    Use ``cold`` during BUILD (runs the graph search) and ``warm`` during
    SERVE (adopts persisted rows, no search).
    """

    catalogue: TransportCatalogue
    network: TransportNetwork
    table: ShortestPathTable

    @classmethod
    def cold(
        cls, catalogue: TransportCatalogue, settings: RoutingSettings
    ) -> RouteResolver:
        network = build_network(catalogue, settings)

        started = time.perf_counter()
        table = ShortestPathTable.build(network.graph)
        logger.info(
            "Shortest-path table computed for %d vertices in %.3fs",
            table.vertex_count,
            time.perf_counter() - started,
        )
        return cls(catalogue=catalogue, network=network, table=table)

    @classmethod
    def warm(
        cls,
        catalogue: TransportCatalogue,
        settings: RoutingSettings,
        rows: TableRows,
    ) -> RouteResolver:
        network = build_network(catalogue, settings)
        table = ShortestPathTable.adopt(network.graph, rows)
        return cls(catalogue=catalogue, network=network, table=table)

    @property
    def settings(self) -> RoutingSettings:
        return self.network.settings

    def resolve(self, stop_from: str, stop_to: str) -> Route:
        """Fastest itinerary between two stop names.

        Raises UnknownStop for unregistered names and NoPathFound when no
        bus connects the two stops. Both mean "not found" to the caller.
        """

        registry = self.catalogue.registry
        handle_from = registry.handle_of(stop_from)
        handle_to = registry.handle_of(stop_to)
        if handle_from is None:
            raise UnknownStop(f"Unknown stop: {stop_from}")
        if handle_to is None:
            raise UnknownStop(f"Unknown stop: {stop_to}")

        if handle_from == handle_to:
            return Route(origin=stop_from, destination=stop_to, total_time=0.0)

        vertex_from = self.network.vertex_of(handle_from)
        vertex_to = self.network.vertex_of(handle_to)
        if vertex_from is None or vertex_to is None:
            raise NoPathFound(f"No bus serves {stop_from!r} or {stop_to!r}")

        info = self.table.shortest_path(vertex_from, vertex_to)
        if info is None:
            raise NoPathFound(f"No route from {stop_from!r} to {stop_to!r}")

        wait = float(self.settings.bus_wait_time)
        legs: list[RouteLeg] = []
        for edge_id in info.edges:
            edge = self.network.graph.get_edge(edge_id)
            meta = self.network.edge_info[edge_id]
            stop_handle = self.network.stop_by_vertex[edge.source]

            legs.append(
                RouteLeg(
                    type=LegType.WAIT,
                    time=wait,
                    stop_name=registry.name_of(stop_handle),
                )
            )
            legs.append(
                RouteLeg(
                    type=LegType.BUS,
                    time=edge.weight - wait,
                    bus=meta.bus_name,
                    span_count=meta.span_count,
                )
            )

        return Route(
            origin=stop_from,
            destination=stop_to,
            total_time=info.weight,
            legs=tuple(legs),
        )
