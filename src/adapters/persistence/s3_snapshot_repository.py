from __future__ import annotations

import os
from dataclasses import dataclass

from botocore.exceptions import BotoCoreError, ClientError

from src.adapters.aws import s3_client
from src.app.ports.output import ISnapshotRepository
from src.config import ConfigError
from src.domain.exceptions import SnapshotError
from src.domain.models import Snapshot

from .snapshot_codec import decode_snapshot, encode_snapshot


@dataclass(slots=True)
class S3SnapshotRepository(ISnapshotRepository):
    """Snapshot repository backed by S3.

    Env vars:
      - S3_BUCKET: bucket name
      - S3_SNAPSHOT_KEY: object key (default: snapshots/transport_catalogue.db)
      - ENDPOINT_URL: preferred LocalStack endpoint (e.g. http://localhost:4566)
      - AWS_REGION: defaults to eu-west-1
    """

    bucket: str | None = None
    key: str | None = None

    def _bucket(self) -> str:
        value = self.bucket or os.getenv("S3_BUCKET")
        if not value:
            raise ConfigError("Missing S3_BUCKET")
        return value

    def _key(self) -> str:
        return (
            self.key
            or os.getenv("S3_SNAPSHOT_KEY")
            or "snapshots/transport_catalogue.db"
        )

    def location(self) -> str:
        return f"s3://{self._bucket()}/{self._key()}"

    def save(self, snapshot: Snapshot) -> None:
        bucket = self._bucket()
        s3 = s3_client()
        s3.put_object(Bucket=bucket, Key=self._key(), Body=encode_snapshot(snapshot))

    def load(self) -> Snapshot:
        bucket = self._bucket()
        key = self._key()
        s3 = s3_client()

        try:
            obj = s3.get_object(Bucket=bucket, Key=key)
            body = obj["Body"].read()
        except (BotoCoreError, ClientError) as exc:
            raise SnapshotError(f"Cannot read s3://{bucket}/{key}: {exc}") from exc

        return decode_snapshot(body)
