from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from src.adapters.api.dependencies import get_request_handler
from src.adapters.api.schemas.routes import BusStatsSchema, StopBusesSchema
from src.app.services.request_handler import NOT_FOUND, RequestHandler
from src.domain.exceptions import NoPathFound

router = APIRouter(tags=["catalogue"])


@router.get("/buses/{name}", response_model=BusStatsSchema)
def get_bus(
    name: str,
    handler: RequestHandler = Depends(get_request_handler),
) -> BusStatsSchema:
    try:
        stats = handler.bus_stats(name)
    except NoPathFound as exc:
        raise HTTPException(status_code=404, detail=NOT_FOUND) from exc

    return BusStatsSchema(
        name=name,
        stop_count=stats.stop_count,
        unique_stop_count=stats.unique_stop_count,
        route_length=stats.route_length,
        curvature=stats.curvature,
    )


@router.get("/stops/{name}", response_model=StopBusesSchema)
def get_stop(
    name: str,
    handler: RequestHandler = Depends(get_request_handler),
) -> StopBusesSchema:
    try:
        buses = handler.buses_through(name)
    except NoPathFound as exc:
        raise HTTPException(status_code=404, detail=NOT_FOUND) from exc
    return StopBusesSchema(name=name, buses=buses)
