from __future__ import annotations

import logging
from dataclasses import dataclass

from src.app.ports.output import ISnapshotRepository
from src.domain.models import BaseInput, Snapshot, TransportCatalogue

from .route_resolver import RouteResolver

logger = logging.getLogger(__name__)


def populate_catalogue(base_input: BaseInput) -> TransportCatalogue:
    """Fill a fresh catalogue: every stop first, then every bus."""

    catalogue = TransportCatalogue()
    for stop in base_input.stops:
        catalogue.add_stop(stop.name, stop.location, stop.road_distances)
    for bus in base_input.buses:
        catalogue.add_bus(bus.name, bus.stops, bus.is_roundtrip)
    return catalogue


@dataclass(slots=True)
class BaseBuilder:
    """BUILD phase use case: catalogue -> graph -> table -> snapshot."""

    snapshot_repository: ISnapshotRepository

    def build(self, base_input: BaseInput) -> Snapshot:
        catalogue = populate_catalogue(base_input)
        logger.info(
            "Catalogue loaded: %d stops, %d buses",
            len(catalogue.stops()),
            len(catalogue.buses()),
        )

        resolver = RouteResolver.cold(catalogue, base_input.settings)
        snapshot = Snapshot(
            catalogue=catalogue,
            settings=base_input.settings,
            table_rows=resolver.table.rows(),
            vertex_count=resolver.network.graph.vertex_count,
            edge_count=resolver.network.graph.edge_count,
        )

        self.snapshot_repository.save(snapshot)
        return snapshot
