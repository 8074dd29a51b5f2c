from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Literal

SnapshotBackend = Literal["local", "s3"]


class ConfigError(RuntimeError):
    """Required configuration is missing or has an unsupported value."""


def env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Process-wide settings, read from the environment.

    Env vars:
      - SNAPSHOT_BACKEND: local|s3 (default: local)
      - SNAPSHOT_PATH: snapshot file for the local backend
      - S3_BUCKET / S3_SNAPSHOT_KEY: snapshot location for the s3 backend
      - LOG_LEVEL: logging level name (default: INFO)
      - TRANSIT_REVEAL_ERRORS: 1|true to return exception text from the API
    """

    snapshot_backend: SnapshotBackend
    snapshot_path: str | None
    s3_bucket: str | None
    s3_snapshot_key: str | None
    log_level: str
    reveal_errors: bool

    @staticmethod
    def from_env() -> "AppConfig":
        backend = (os.getenv("SNAPSHOT_BACKEND") or "local").strip().lower()
        if backend not in {"local", "s3"}:
            raise ConfigError(f"Unsupported SNAPSHOT_BACKEND: {backend}")

        return AppConfig(
            snapshot_backend=backend,  # type: ignore[arg-type]
            snapshot_path=os.getenv("SNAPSHOT_PATH") or None,
            s3_bucket=os.getenv("S3_BUCKET") or None,
            s3_snapshot_key=os.getenv("S3_SNAPSHOT_KEY") or None,
            log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
            reveal_errors=env_bool("TRANSIT_REVEAL_ERRORS", False),
        )


def configure_logging(level: str) -> None:
    """Log to stderr; stdout is reserved for JSON responses."""

    resolved = logging.getLevelName(level.upper())
    logging.basicConfig(
        level=resolved if isinstance(resolved, int) else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
