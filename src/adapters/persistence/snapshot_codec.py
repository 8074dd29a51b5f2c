from __future__ import annotations

import gzip
import pickle
import zlib
from typing import Any

from src.domain.exceptions import SnapshotError
from src.domain.models import (
    GeoPoint,
    RoutingSettings,
    Snapshot,
    StopRegistry,
    TableRows,
    TransportCatalogue,
)

FORMAT_VERSION = 1


def encode_snapshot(snapshot: Snapshot) -> bytes:
    """Serialize a snapshot as gzip-compressed pickle of plain Python values.

    Only primitives are pickled (no project classes), so the payload does not
    depend on module paths. Unreachable table entries are stored as None.
    """

    catalogue = snapshot.catalogue
    payload: dict[str, Any] = {
        "format_version": FORMAT_VERSION,
        "names": list(catalogue.registry.names()),
        "stops": [
            {
                "handle": s.handle,
                "lat": s.location.lat,
                "lon": s.location.lon,
                "road_distances": dict(s.road_distances),
            }
            for s in catalogue.stops()
        ],
        "buses": [
            {"name": b.name, "stops": list(b.stops), "is_roundtrip": b.is_roundtrip}
            for b in catalogue.buses()
        ],
        "routing_settings": {
            "bus_wait_time": snapshot.settings.bus_wait_time,
            "bus_velocity": snapshot.settings.bus_velocity,
        },
        "graph": {
            "vertex_count": snapshot.vertex_count,
            "edge_count": snapshot.edge_count,
        },
        "routes": [
            [None if e is None else (float(e[0]), e[1]) for e in row]
            for row in snapshot.table_rows
        ],
    }
    return gzip.compress(pickle.dumps(payload, protocol=pickle.HIGHEST_PROTOCOL))


def decode_snapshot(data: bytes) -> Snapshot:
    """Inverse of encode_snapshot.

    Raises SnapshotError for truncated, corrupted or incompatible payloads.
    Notes:
      - pickle loading is only safe for trusted inputs.
    """

    try:
        payload = pickle.loads(gzip.decompress(data))
    except (
        OSError,
        EOFError,
        zlib.error,
        pickle.UnpicklingError,
        AttributeError,
        ImportError,
        IndexError,
        TypeError,
        ValueError,
    ) as exc:
        raise SnapshotError(f"Unreadable snapshot: {exc}") from exc

    if not isinstance(payload, dict):
        raise SnapshotError("Snapshot payload is not a mapping")
    version = payload.get("format_version")
    if version != FORMAT_VERSION:
        raise SnapshotError(f"Unsupported snapshot format version: {version!r}")

    try:
        return _snapshot_from_payload(payload)
    except SnapshotError:
        raise
    except (AttributeError, KeyError, IndexError, TypeError, ValueError) as exc:
        raise SnapshotError(f"Malformed snapshot: {exc!r}") from exc


def _snapshot_from_payload(payload: dict[str, Any]) -> Snapshot:
    registry = StopRegistry()
    for name in payload["names"]:
        if not isinstance(name, str):
            raise SnapshotError(f"Invalid stop name: {name!r}")
        registry.intern(name)

    catalogue = TransportCatalogue(registry)
    for raw in payload["stops"]:
        if not isinstance(raw["road_distances"], dict):
            raise SnapshotError(f"Invalid road distances: {raw['road_distances']!r}")
        catalogue.add_stop(
            registry.name_of(_handle(registry, raw["handle"])),
            GeoPoint(lat=float(raw["lat"]), lon=float(raw["lon"])),
            {
                registry.name_of(_handle(registry, h)): int(m)
                for h, m in raw["road_distances"].items()
            },
        )
    for raw in payload["buses"]:
        catalogue.add_bus(
            str(raw["name"]),
            [registry.name_of(_handle(registry, h)) for h in raw["stops"]],
            bool(raw["is_roundtrip"]),
        )

    if len(registry) != len(payload["names"]):
        raise SnapshotError("Stop names are not unique")

    settings_raw = payload["routing_settings"]
    settings = RoutingSettings(
        bus_wait_time=int(settings_raw["bus_wait_time"]),
        bus_velocity=float(settings_raw["bus_velocity"]),
    )

    return Snapshot(
        catalogue=catalogue,
        settings=settings,
        table_rows=_table_rows(payload["routes"]),
        vertex_count=int(payload["graph"]["vertex_count"]),
        edge_count=int(payload["graph"]["edge_count"]),
    )


def _handle(registry: StopRegistry, value: Any) -> int:
    if not isinstance(value, int) or not 0 <= value < len(registry):
        raise SnapshotError(f"Invalid stop handle: {value!r}")
    return value


def _table_rows(raw_rows: Any) -> TableRows:
    rows = []
    for raw_row in raw_rows:
        row = []
        for entry in raw_row:
            if entry is None:
                row.append(None)
                continue
            weight, prev_edge = entry
            if prev_edge is not None and not isinstance(prev_edge, int):
                raise SnapshotError(f"Invalid predecessor edge: {prev_edge!r}")
            row.append((float(weight), prev_edge))
        rows.append(tuple(row))
    return tuple(rows)
