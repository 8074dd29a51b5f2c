from __future__ import annotations

import gzip
import math
import pickle
from pathlib import Path

import pytest

from src.adapters.persistence import LocalSnapshotRepository, S3SnapshotRepository
from src.adapters.persistence.snapshot_codec import (
    FORMAT_VERSION,
    decode_snapshot,
    encode_snapshot,
)
from src.app.services.request_handler import RequestHandler
from src.domain.exceptions import NoPathFound, SnapshotError
from src.domain.models import Snapshot

STOPS = ("A", "B", "C", "D", "E", "X", "Y", "Z")


def _payload(snapshot: Snapshot) -> dict:
    return pickle.loads(gzip.decompress(encode_snapshot(snapshot)))


def _encode_payload(payload: object) -> bytes:
    return gzip.compress(pickle.dumps(payload))


def test_decoded_snapshot_answers_like_the_built_one(city_snapshot: Snapshot) -> None:
    built = RequestHandler.from_snapshot(city_snapshot)
    restored = RequestHandler.from_snapshot(
        decode_snapshot(encode_snapshot(city_snapshot))
    )

    for a in STOPS:
        for b in STOPS:
            try:
                expected = built.route(a, b)
            except NoPathFound:
                expected = None
            try:
                got = restored.route(a, b)
            except NoPathFound:
                got = None
            assert got == expected, (a, b)

    assert restored.bus_stats("14") == built.bus_stats("14")
    assert restored.buses_through("C") == ["14", "ring"]


def test_decoding_keeps_handles_and_settings(city_snapshot: Snapshot) -> None:
    restored = decode_snapshot(encode_snapshot(city_snapshot))

    assert list(restored.catalogue.registry.names()) == list(
        city_snapshot.catalogue.registry.names()
    )
    assert restored.settings == city_snapshot.settings
    assert restored.vertex_count == city_snapshot.vertex_count
    assert restored.edge_count == city_snapshot.edge_count
    assert restored.table_rows == city_snapshot.table_rows


def test_unreachable_entries_are_stored_as_none(city_snapshot: Snapshot) -> None:
    payload = _payload(city_snapshot)

    assert payload["format_version"] == FORMAT_VERSION
    assert any(entry is None for row in payload["routes"] for entry in row)


def test_truncated_snapshot_is_rejected(city_snapshot: Snapshot) -> None:
    data = encode_snapshot(city_snapshot)

    with pytest.raises(SnapshotError):
        decode_snapshot(data[: len(data) // 2])


@pytest.mark.parametrize(
    "data",
    [b"", b"not a snapshot", gzip.compress(b"not a pickle")],
    ids=["empty", "garbage", "gzip-garbage"],
)
def test_garbage_is_rejected(data: bytes) -> None:
    with pytest.raises(SnapshotError):
        decode_snapshot(data)


def test_unknown_format_version_is_rejected(city_snapshot: Snapshot) -> None:
    payload = _payload(city_snapshot)
    payload["format_version"] = FORMAT_VERSION + 1

    with pytest.raises(SnapshotError, match="format version"):
        decode_snapshot(_encode_payload(payload))


def test_non_mapping_payload_is_rejected() -> None:
    with pytest.raises(SnapshotError):
        decode_snapshot(_encode_payload([1, 2, 3]))


def test_missing_section_is_rejected(city_snapshot: Snapshot) -> None:
    payload = _payload(city_snapshot)
    del payload["routes"]

    with pytest.raises(SnapshotError):
        decode_snapshot(_encode_payload(payload))


def test_out_of_range_stop_handle_is_rejected(city_snapshot: Snapshot) -> None:
    payload = _payload(city_snapshot)
    payload["buses"][0]["stops"][0] = 999

    with pytest.raises(SnapshotError, match="stop handle"):
        decode_snapshot(_encode_payload(payload))


@pytest.mark.parametrize("road_distances", [[1, 2], "B:600", None])
def test_non_mapping_road_distances_are_rejected(
    city_snapshot: Snapshot, road_distances: object
) -> None:
    payload = _payload(city_snapshot)
    payload["stops"][0]["road_distances"] = road_distances

    with pytest.raises(SnapshotError, match="road distances"):
        decode_snapshot(_encode_payload(payload))


def test_infinite_table_weight_is_rejected_on_load(city_snapshot: Snapshot) -> None:
    payload = _payload(city_snapshot)
    row = payload["routes"][0]
    target = next(i for i, e in enumerate(row) if e is not None and e[1] is not None)
    row[target] = (math.inf, row[target][1])

    snapshot = decode_snapshot(_encode_payload(payload))
    with pytest.raises(SnapshotError):
        RequestHandler.from_snapshot(snapshot)


def test_local_repository_round_trip(tmp_path: Path, city_snapshot: Snapshot) -> None:
    path = tmp_path / "nested" / "base.db"
    repo = LocalSnapshotRepository(path=path)

    repo.save(city_snapshot)
    loaded = repo.load()

    assert path.exists()
    assert not path.with_name("base.db.tmp").exists()
    assert loaded.table_rows == city_snapshot.table_rows


def test_local_repository_uses_env_path(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, city_snapshot: Snapshot
) -> None:
    path = tmp_path / "from-env.db"
    monkeypatch.setenv("SNAPSHOT_PATH", str(path))

    LocalSnapshotRepository().save(city_snapshot)

    assert path.exists()


def test_local_repository_missing_file(tmp_path: Path) -> None:
    repo = LocalSnapshotRepository(path=tmp_path / "missing.db")

    with pytest.raises(SnapshotError, match="Cannot read snapshot"):
        repo.load()


def test_repositories_report_their_location(tmp_path: Path) -> None:
    assert LocalSnapshotRepository(path=tmp_path / "a.db").location() == str(
        tmp_path / "a.db"
    )
    assert (
        S3SnapshotRepository(bucket="b", key="snapshots/a.db").location()
        == "s3://b/snapshots/a.db"
    )
