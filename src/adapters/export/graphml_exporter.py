from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import networkx as nx

from src.app.ports.output import IGraphExporter
from src.domain.algorithms.edge_generation import TransportNetwork
from src.domain.models import TransportCatalogue


@dataclass(slots=True)
class GraphMLExporter(IGraphExporter):
    """Writes the routing graph as GraphML for inspection in external tools.

    Nodes carry the stop name; edges carry weight (minutes), bus and
    span_count. Edge keys are the routing graph's edge handles.
    """

    catalogue: TransportCatalogue
    path: str | Path

    def to_graph(self, network: TransportNetwork) -> nx.MultiDiGraph:
        graph = network.graph.to_networkx()

        registry = self.catalogue.registry
        for vertex, stop_handle in enumerate(network.stop_by_vertex):
            graph.nodes[vertex]["stop_name"] = registry.name_of(stop_handle)

        for _, _, key, data in graph.edges(keys=True, data=True):
            info = network.edge_info[key]
            data["bus"] = info.bus_name
            data["span_count"] = info.span_count
        return graph

    def export(self, network: TransportNetwork) -> None:
        path = Path(self.path)
        path.parent.mkdir(parents=True, exist_ok=True)
        nx.write_graphml(self.to_graph(network), path)
