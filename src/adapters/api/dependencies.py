from __future__ import annotations

from functools import lru_cache

from src.adapters.persistence.factory import snapshot_repository
from src.app.services.request_handler import RequestHandler
from src.config import AppConfig


@lru_cache(maxsize=1)
def get_request_handler() -> RequestHandler:
    """Load the snapshot once per process; queries only read it afterwards."""

    repository = snapshot_repository(AppConfig.from_env())
    return RequestHandler.from_repository(repository)
