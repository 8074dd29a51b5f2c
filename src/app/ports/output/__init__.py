from .graph_exporter import IGraphExporter
from .snapshot_repository import ISnapshotRepository

__all__ = [
    "IGraphExporter",
    "ISnapshotRepository",
]
