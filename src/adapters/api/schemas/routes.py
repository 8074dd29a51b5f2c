from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class RouteRequestSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    stop_from: str = Field(..., alias="from", min_length=1)
    stop_to: str = Field(..., alias="to", min_length=1)


class RouteItemSchema(BaseModel):
    type: Literal["Wait", "Bus"]
    time: float
    stop_name: str | None = None
    bus: str | None = None
    span_count: int | None = None


class RouteSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    stop_from: str = Field(..., serialization_alias="from")
    stop_to: str = Field(..., serialization_alias="to")
    total_time: float
    items: list[RouteItemSchema] = []


class BusStatsSchema(BaseModel):
    name: str
    stop_count: int
    unique_stop_count: int
    route_length: int
    curvature: float


class StopBusesSchema(BaseModel):
    name: str
    buses: list[str]
