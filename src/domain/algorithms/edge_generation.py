from __future__ import annotations

import logging
from dataclasses import dataclass

from src.domain.models import Bus, RoutingSettings, TransportCatalogue

from .routing_graph import DirectedWeightedGraph, Edge

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EdgeInfo:
    bus_name: str
    span_count: int  # stop-to-stop hops covered by the edge


@dataclass(frozen=True, slots=True)
class TransportNetwork:
    """Routing graph plus the metadata needed to turn a path into legs."""

    graph: DirectedWeightedGraph
    settings: RoutingSettings
    vertex_by_stop: dict[int, int]  # registry handle -> vertex
    stop_by_vertex: tuple[int, ...]  # vertex -> registry handle
    edge_info: tuple[EdgeInfo, ...]  # indexed by edge handle

    def vertex_of(self, stop_handle: int) -> int | None:
        return self.vertex_by_stop.get(stop_handle)


def build_network(
    catalogue: TransportCatalogue, settings: RoutingSettings
) -> TransportNetwork:
    """Derive the routing graph from every bus of the catalogue.

    Each direction of a bus contributes one edge per ordered pair of stops
    (i < j) on it, so riding k stops is a single edge whose weight carries
    exactly one boarding wait. Edge count is quadratic in route length.

    Raises MissingDistance when two consecutive stops have no road distance.
    """

    stop_by_vertex = tuple(catalogue.stops_in_routes())
    vertex_by_stop = {stop: vertex for vertex, stop in enumerate(stop_by_vertex)}

    graph = DirectedWeightedGraph(len(stop_by_vertex))
    edge_info: list[EdgeInfo] = []

    for bus in catalogue.buses():
        for direction in bus.directions():
            _add_direction_edges(
                catalogue,
                settings,
                graph,
                edge_info,
                vertex_by_stop,
                bus=bus,
                stops=direction,
            )

    logger.info(
        "Routing graph built: %d vertices, %d edges from %d buses",
        graph.vertex_count,
        graph.edge_count,
        len(catalogue.buses()),
    )

    return TransportNetwork(
        graph=graph,
        settings=settings,
        vertex_by_stop=vertex_by_stop,
        stop_by_vertex=stop_by_vertex,
        edge_info=tuple(edge_info),
    )


def _add_direction_edges(
    catalogue: TransportCatalogue,
    settings: RoutingSettings,
    graph: DirectedWeightedGraph,
    edge_info: list[EdgeInfo],
    vertex_by_stop: dict[int, int],
    *,
    bus: Bus,
    stops: tuple[int, ...],
) -> None:
    hop_minutes = [
        settings.travel_minutes(catalogue.get_distance(a, b))
        for a, b in zip(stops, stops[1:])
    ]

    for i in range(len(stops) - 1):
        weight = float(settings.bus_wait_time)
        source = vertex_by_stop[stops[i]]
        for j in range(i + 1, len(stops)):
            weight += hop_minutes[j - 1]
            graph.add_edge(
                Edge(source=source, target=vertex_by_stop[stops[j]], weight=weight)
            )
            edge_info.append(EdgeInfo(bus_name=bus.name, span_count=j - i))
