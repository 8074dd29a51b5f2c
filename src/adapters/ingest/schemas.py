from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class SerializationSettingsSchema(BaseModel):
    file: str


class RoutingSettingsSchema(BaseModel):
    bus_wait_time: int = Field(..., ge=0, le=1000)
    bus_velocity: float = Field(..., gt=0.0, le=1000.0)


class StopRequestSchema(BaseModel):
    type: Literal["Stop"]
    name: str
    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)
    road_distances: dict[str, int] = Field(default_factory=dict)


class BusRequestSchema(BaseModel):
    type: Literal["Bus"]
    name: str
    stops: list[str]
    is_roundtrip: bool


BaseRequestSchema = Annotated[
    Union[StopRequestSchema, BusRequestSchema], Field(discriminator="type")
]


class BaseDocumentSchema(BaseModel):
    """Input of ``make_base``."""

    serialization_settings: SerializationSettingsSchema
    routing_settings: RoutingSettingsSchema
    base_requests: list[BaseRequestSchema] = Field(default_factory=list)
    # Map drawing is not implemented; the section is accepted and ignored.
    render_settings: dict[str, Any] | None = None


class NamedStatRequestSchema(BaseModel):
    id: int
    type: Literal["Bus", "Stop"]
    name: str


class RouteStatRequestSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    type: Literal["Route"]
    stop_from: str = Field(..., alias="from")
    stop_to: str = Field(..., alias="to")


class MapStatRequestSchema(BaseModel):
    id: int
    type: Literal["Map"]


StatRequestSchema = Annotated[
    Union[NamedStatRequestSchema, RouteStatRequestSchema, MapStatRequestSchema],
    Field(discriminator="type"),
]


class StatDocumentSchema(BaseModel):
    """Input of ``process_requests``."""

    serialization_settings: SerializationSettingsSchema | None = None
    stat_requests: list[StatRequestSchema] = Field(default_factory=list)
