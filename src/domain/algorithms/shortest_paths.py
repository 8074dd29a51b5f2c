from __future__ import annotations

import heapq
import math
from dataclasses import dataclass
from typing import NamedTuple, Sequence

from src.domain.exceptions import InconsistentTable

from .routing_graph import DirectedWeightedGraph


class RouteEntry(NamedTuple):
    weight: float
    prev_edge: int | None  # None only for the source itself


@dataclass(frozen=True, slots=True)
class RouteInfo:
    weight: float
    edges: tuple[int, ...]


Row = tuple[RouteEntry | None, ...]


class ShortestPathTable:
    """All-pairs shortest paths over a fixed graph, computed once.

    Build it either cold (``build``, runs one Dijkstra per source vertex) or
    warm (``adopt``, takes rows computed earlier). The table is never
    mutated afterwards, so readers need no locking.
    """

    __slots__ = ("_graph", "_rows")

    def __init__(self, graph: DirectedWeightedGraph, rows: tuple[Row, ...]) -> None:
        self._graph = graph
        self._rows = rows

    @classmethod
    def build(cls, graph: DirectedWeightedGraph) -> ShortestPathTable:
        rows = tuple(
            _single_source(graph, source) for source in range(graph.vertex_count)
        )
        return cls(graph, rows)

    @classmethod
    def adopt(
        cls,
        graph: DirectedWeightedGraph,
        rows: Sequence[Sequence[tuple[float, int | None] | None]],
    ) -> ShortestPathTable:
        """Wrap precomputed rows after checking they fit the graph."""

        n = graph.vertex_count
        if len(rows) != n:
            raise InconsistentTable(
                f"Table has {len(rows)} rows, graph has {n} vertices"
            )

        adopted: list[Row] = []
        for source, raw_row in enumerate(rows):
            if len(raw_row) != n:
                raise InconsistentTable(
                    f"Row {source} has {len(raw_row)} entries, expected {n}"
                )
            row: list[RouteEntry | None] = []
            for target, raw in enumerate(raw_row):
                if raw is None:
                    row.append(None)
                    continue
                weight, prev_edge = raw
                entry = RouteEntry(float(weight), prev_edge)
                _check_entry(graph, source, target, entry)
                row.append(entry)
            adopted.append(tuple(row))

        return cls(graph, tuple(adopted))

    @property
    def vertex_count(self) -> int:
        return len(self._rows)

    def entry(self, source: int, target: int) -> RouteEntry | None:
        return self._rows[source][target]

    def rows(self) -> tuple[Row, ...]:
        return self._rows

    def shortest_path(self, source: int, target: int) -> RouteInfo | None:
        """Path from source to target, or None when target is unreachable."""

        entry = self._rows[source][target]
        if entry is None:
            return None

        edges: list[int] = []
        current = entry
        vertex = target
        while current.prev_edge is not None:
            if len(edges) >= self._graph.edge_count:
                raise InconsistentTable(
                    f"Predecessor chain {source}->{target} does not terminate"
                )
            edge = self._graph.get_edge(current.prev_edge)
            if edge.target != vertex:
                raise InconsistentTable(
                    f"Edge {current.prev_edge} does not end at vertex {vertex}"
                )
            edges.append(current.prev_edge)
            vertex = edge.source
            next_entry = self._rows[source][vertex]
            if next_entry is None:
                raise InconsistentTable(
                    f"Vertex {vertex} on path {source}->{target} is unreachable"
                )
            current = next_entry

        if vertex != source:
            raise InconsistentTable(
                f"Predecessor chain {source}->{target} stops at {vertex}"
            )

        edges.reverse()
        return RouteInfo(weight=entry.weight, edges=tuple(edges))


def _single_source(graph: DirectedWeightedGraph, source: int) -> Row:
    """Dijkstra from one vertex.

    Ties keep the first predecessor found: an entry is replaced only by a
    strictly smaller weight, and edges are relaxed in insertion order.
    """

    dist: list[float] = [math.inf] * graph.vertex_count
    prev: list[int | None] = [None] * graph.vertex_count
    settled = [False] * graph.vertex_count

    dist[source] = 0.0
    heap: list[tuple[float, int]] = [(0.0, source)]

    while heap:
        d, u = heapq.heappop(heap)
        if settled[u]:
            continue
        settled[u] = True

        for edge_id in graph.incident_edges(u):
            edge = graph.get_edge(edge_id)
            candidate = d + edge.weight
            if candidate < dist[edge.target]:
                dist[edge.target] = candidate
                prev[edge.target] = edge_id
                heapq.heappush(heap, (candidate, edge.target))

    return tuple(
        RouteEntry(dist[v], prev[v]) if dist[v] != math.inf else None
        for v in range(graph.vertex_count)
    )


def _check_entry(
    graph: DirectedWeightedGraph, source: int, target: int, entry: RouteEntry
) -> None:
    if not math.isfinite(entry.weight) or entry.weight < 0:
        raise InconsistentTable(f"Invalid weight {entry.weight} for {source}->{target}")

    if entry.prev_edge is None:
        if source != target:
            raise InconsistentTable(f"Missing predecessor for {source}->{target}")
        return

    if not 0 <= entry.prev_edge < graph.edge_count:
        raise InconsistentTable(
            f"Predecessor edge {entry.prev_edge} out of range for {source}->{target}"
        )
    if graph.get_edge(entry.prev_edge).target != target:
        raise InconsistentTable(
            f"Predecessor edge {entry.prev_edge} does not end at vertex {target}"
        )
