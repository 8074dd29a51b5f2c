from .local_snapshot_repository import LocalSnapshotRepository
from .s3_snapshot_repository import S3SnapshotRepository

__all__ = [
    "LocalSnapshotRepository",
    "S3SnapshotRepository",
]
