from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from src.app.ports.output import ISnapshotRepository
from src.domain.exceptions import SnapshotError
from src.domain.models import Snapshot

from .snapshot_codec import decode_snapshot, encode_snapshot


@dataclass(slots=True)
class LocalSnapshotRepository(ISnapshotRepository):
    """Stores the snapshot in a single local file.

    Env vars:
      - SNAPSHOT_PATH: file path (default: data/transport_catalogue.db)
    """

    path: str | Path | None = None

    def _path(self) -> Path:
        value = self.path or os.getenv("SNAPSHOT_PATH") or "data/transport_catalogue.db"
        return Path(value)

    def location(self) -> str:
        return str(self._path())

    def save(self, snapshot: Snapshot) -> None:
        path = self._path()
        path.parent.mkdir(parents=True, exist_ok=True)

        # Write next to the target then rename, so readers never see a partial file.
        tmp = path.with_name(path.name + ".tmp")
        tmp.write_bytes(encode_snapshot(snapshot))
        tmp.replace(path)

    def load(self) -> Snapshot:
        path = self._path()
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise SnapshotError(f"Cannot read snapshot {path}: {exc}") from exc
        return decode_snapshot(data)
