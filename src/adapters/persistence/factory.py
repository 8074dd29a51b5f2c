from __future__ import annotations

from pathlib import Path

from src.app.ports.output import ISnapshotRepository
from src.config import AppConfig

from .local_snapshot_repository import LocalSnapshotRepository
from .s3_snapshot_repository import S3SnapshotRepository


def snapshot_repository(
    config: AppConfig, *, path: str | Path | None = None
) -> ISnapshotRepository:
    """Pick the snapshot backend; an explicit path wins over SNAPSHOT_PATH."""

    if config.snapshot_backend == "s3":
        return S3SnapshotRepository(
            bucket=config.s3_bucket, key=config.s3_snapshot_key
        )
    return LocalSnapshotRepository(path=path or config.snapshot_path)
