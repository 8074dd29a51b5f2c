from __future__ import annotations

from dataclasses import dataclass

import networkx as nx


@dataclass(frozen=True, slots=True)
class Edge:
    source: int
    target: int
    weight: float  # minutes


class DirectedWeightedGraph:
    """Append-only adjacency-list graph addressed by dense integer handles.

    Vertices are fixed at construction; edges get handles in insertion order
    and are never removed.
    """

    __slots__ = ("_edges", "_incidence")

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError(f"Invalid vertex count: {vertex_count}")
        self._edges: list[Edge] = []
        self._incidence: list[list[int]] = [[] for _ in range(vertex_count)]

    @property
    def vertex_count(self) -> int:
        return len(self._incidence)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def add_edge(self, edge: Edge) -> int:
        if not 0 <= edge.source < len(self._incidence):
            raise IndexError(f"Source vertex out of range: {edge.source}")
        if not 0 <= edge.target < len(self._incidence):
            raise IndexError(f"Target vertex out of range: {edge.target}")

        self._edges.append(edge)
        edge_id = len(self._edges) - 1
        self._incidence[edge.source].append(edge_id)
        return edge_id

    def get_edge(self, edge_id: int) -> Edge:
        if not 0 <= edge_id < len(self._edges):
            raise IndexError(f"Edge handle out of range: {edge_id}")
        return self._edges[edge_id]

    def incident_edges(self, vertex: int) -> tuple[int, ...]:
        """Outgoing edge handles of a vertex, in insertion order."""

        return tuple(self._incidence[vertex])

    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges)

    def to_networkx(self) -> nx.MultiDiGraph:
        """Export as a MultiDiGraph keyed by edge handle (weight in minutes)."""

        g = nx.MultiDiGraph()
        g.add_nodes_from(range(self.vertex_count))
        for edge_id, e in enumerate(self._edges):
            g.add_edge(e.source, e.target, key=edge_id, weight=e.weight)
        return g
