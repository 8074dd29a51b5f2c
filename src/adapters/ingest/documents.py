from __future__ import annotations

import json
from dataclasses import dataclass
from typing import IO, Any

from pydantic import ValidationError

from src.domain.models import (
    BaseInput,
    BusDefinition,
    GeoPoint,
    RequestType,
    RoutingSettings,
    StatRequest,
    StopDefinition,
)

from .schemas import (
    BaseDocumentSchema,
    BusRequestSchema,
    MapStatRequestSchema,
    NamedStatRequestSchema,
    RouteStatRequestSchema,
    StatDocumentSchema,
    StatRequestSchema,
    StopRequestSchema,
)


class DocumentError(ValueError):
    """Input document is not valid JSON or does not match its schema."""


@dataclass(frozen=True, slots=True)
class BaseDocument:
    base_input: BaseInput
    snapshot_path: str


@dataclass(frozen=True, slots=True)
class StatDocument:
    requests: tuple[StatRequest, ...]
    snapshot_path: str | None


def read_json(stream: IO[str]) -> Any:
    try:
        return json.load(stream)
    except json.JSONDecodeError as exc:
        raise DocumentError(f"Invalid JSON: {exc}") from exc


def parse_base_document(raw: Any) -> BaseDocument:
    try:
        doc = BaseDocumentSchema.model_validate(raw)
    except ValidationError as exc:
        raise DocumentError(str(exc)) from exc

    stops: list[StopDefinition] = []
    buses: list[BusDefinition] = []
    for request in doc.base_requests:
        if isinstance(request, StopRequestSchema):
            stops.append(
                StopDefinition(
                    name=request.name,
                    location=GeoPoint(lat=request.latitude, lon=request.longitude),
                    road_distances=dict(request.road_distances),
                )
            )
        elif isinstance(request, BusRequestSchema):
            buses.append(
                BusDefinition(
                    name=request.name,
                    stops=tuple(request.stops),
                    is_roundtrip=request.is_roundtrip,
                )
            )

    settings = RoutingSettings(
        bus_wait_time=doc.routing_settings.bus_wait_time,
        bus_velocity=doc.routing_settings.bus_velocity,
    )
    return BaseDocument(
        base_input=BaseInput(stops=tuple(stops), buses=tuple(buses), settings=settings),
        snapshot_path=doc.serialization_settings.file,
    )


def parse_stat_document(raw: Any) -> StatDocument:
    try:
        doc = StatDocumentSchema.model_validate(raw)
    except ValidationError as exc:
        raise DocumentError(str(exc)) from exc

    return StatDocument(
        requests=tuple(stat_request_from_schema(r) for r in doc.stat_requests),
        snapshot_path=(
            doc.serialization_settings.file if doc.serialization_settings else None
        ),
    )


def stat_request_from_schema(request: StatRequestSchema) -> StatRequest:
    if isinstance(request, RouteStatRequestSchema):
        return StatRequest(
            id=request.id,
            type=RequestType.ROUTE,
            stop_from=request.stop_from,
            stop_to=request.stop_to,
        )
    if isinstance(request, NamedStatRequestSchema):
        return StatRequest(
            id=request.id, type=RequestType(request.type), name=request.name
        )
    if isinstance(request, MapStatRequestSchema):
        return StatRequest(id=request.id, type=RequestType.MAP)
    raise TypeError(f"Unsupported stat request: {request!r}")
