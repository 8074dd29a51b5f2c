from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from src.adapters.api.dependencies import get_request_handler
from src.adapters.api.schemas.routes import (
    RouteItemSchema,
    RouteRequestSchema,
    RouteSchema,
)
from src.adapters.ingest.documents import stat_request_from_schema
from src.adapters.ingest.schemas import StatDocumentSchema
from src.app.services.request_handler import NOT_FOUND, RequestHandler
from src.domain.exceptions import NoPathFound
from src.domain.models import Route

router = APIRouter(tags=["routes"])


def _route_to_schema(route: Route) -> RouteSchema:
    return RouteSchema(
        stop_from=route.origin,
        stop_to=route.destination,
        total_time=route.total_time,
        items=[
            RouteItemSchema(
                type=leg.type.value,
                time=leg.time,
                stop_name=leg.stop_name,
                bus=leg.bus,
                span_count=leg.span_count,
            )
            for leg in route.legs
        ],
    )


@router.post("/routes", response_model=RouteSchema)
def calculate_route(
    req: RouteRequestSchema,
    handler: RequestHandler = Depends(get_request_handler),
) -> RouteSchema:
    try:
        route = handler.route(req.stop_from, req.stop_to)
    except NoPathFound as exc:
        raise HTTPException(status_code=404, detail=NOT_FOUND) from exc
    return _route_to_schema(route)


@router.post("/requests", response_model=list[dict[str, Any]])
def process_requests(
    doc: StatDocumentSchema,
    handler: RequestHandler = Depends(get_request_handler),
) -> list[dict[str, Any]]:
    """Batch endpoint mirroring ``process_requests`` on the command line."""

    return handler.process(stat_request_from_schema(r) for r in doc.stat_requests)
