from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.algorithms.edge_generation import TransportNetwork


class IGraphExporter(ABC):
    """Port for writing the routing graph in an external format."""

    @abstractmethod
    def export(self, network: TransportNetwork) -> None:
        raise NotImplementedError
