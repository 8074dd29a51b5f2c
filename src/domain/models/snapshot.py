from __future__ import annotations

from dataclasses import dataclass

from .catalogue import TransportCatalogue
from .settings import RoutingSettings

# One row per source vertex; None marks an unreachable target.
TableRows = tuple[tuple[tuple[float, int | None] | None, ...], ...]


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Everything the SERVE phase needs, as produced by the BUILD phase."""

    catalogue: TransportCatalogue
    settings: RoutingSettings
    table_rows: TableRows
    vertex_count: int
    edge_count: int
