from __future__ import annotations

import io

import pytest

from src.adapters.ingest import (
    DocumentError,
    parse_base_document,
    parse_stat_document,
    read_json,
)
from src.domain.models import RequestType

BASE_DOCUMENT = {
    "serialization_settings": {"file": "transport_catalogue.db"},
    "routing_settings": {"bus_wait_time": 6, "bus_velocity": 40},
    "render_settings": {"width": 1200},
    "base_requests": [
        {"type": "Bus", "name": "14", "stops": ["A", "B"], "is_roundtrip": False},
        {
            "type": "Stop",
            "name": "A",
            "latitude": 43.58,
            "longitude": 39.72,
            "road_distances": {"B": 600},
        },
        {"type": "Stop", "name": "B", "latitude": 43.59, "longitude": 39.73},
    ],
}


def test_base_document_splits_stops_and_buses() -> None:
    doc = parse_base_document(BASE_DOCUMENT)

    assert doc.snapshot_path == "transport_catalogue.db"
    assert [s.name for s in doc.base_input.stops] == ["A", "B"]
    assert doc.base_input.stops[0].road_distances == {"B": 600}
    assert doc.base_input.stops[1].road_distances == {}
    assert doc.base_input.buses[0].stops == ("A", "B")
    assert doc.base_input.buses[0].is_roundtrip is False
    assert doc.base_input.settings.bus_wait_time == 6
    assert doc.base_input.settings.bus_velocity == 40.0


@pytest.mark.parametrize(
    "mutate",
    [
        lambda d: d.pop("routing_settings"),
        lambda d: d["routing_settings"].update(bus_velocity=0),
        lambda d: d["routing_settings"].update(bus_wait_time=-1),
        lambda d: d["base_requests"].append({"type": "Tram", "name": "T"}),
        lambda d: d["base_requests"][1].update(latitude=91),
    ],
    ids=["no-settings", "zero-velocity", "negative-wait", "unknown-type", "bad-lat"],
)
def test_invalid_base_document(mutate) -> None:
    raw = {
        **BASE_DOCUMENT,
        "routing_settings": dict(BASE_DOCUMENT["routing_settings"]),
        "base_requests": [dict(r) for r in BASE_DOCUMENT["base_requests"]],
    }
    mutate(raw)

    with pytest.raises(DocumentError):
        parse_base_document(raw)


def test_stat_document_maps_request_kinds() -> None:
    doc = parse_stat_document(
        {
            "serialization_settings": {"file": "transport_catalogue.db"},
            "stat_requests": [
                {"id": 1, "type": "Bus", "name": "14"},
                {"id": 2, "type": "Stop", "name": "A"},
                {"id": 3, "type": "Route", "from": "A", "to": "B"},
                {"id": 4, "type": "Map"},
            ],
        }
    )

    assert doc.snapshot_path == "transport_catalogue.db"
    assert [r.type for r in doc.requests] == [
        RequestType.BUS,
        RequestType.STOP,
        RequestType.ROUTE,
        RequestType.MAP,
    ]
    assert doc.requests[0].name == "14"
    assert (doc.requests[2].stop_from, doc.requests[2].stop_to) == ("A", "B")


def test_stat_document_without_serialization_settings() -> None:
    doc = parse_stat_document({"stat_requests": []})

    assert doc.snapshot_path is None
    assert doc.requests == ()


def test_route_request_requires_endpoints() -> None:
    with pytest.raises(DocumentError):
        parse_stat_document({"stat_requests": [{"id": 1, "type": "Route"}]})


def test_read_json_rejects_malformed_input() -> None:
    with pytest.raises(DocumentError, match="Invalid JSON"):
        read_json(io.StringIO("{not json"))
