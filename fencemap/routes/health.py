"""
Health check endpoint.

Used by:
  - Docker HEALTHCHECK instruction
  - Load balancers / orchestrators
  - Front-end to decide between the map and its loading state

Returns status + dataset state so callers can distinguish between
"API down" and "API up but no data loaded".
"""

import logging
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from fencemap.core import dataset as dataset_module

logger = logging.getLogger(__name__)
router = APIRouter()


class HealthResponse(BaseModel):
    status: str  # Always "ok" if the API process is alive
    version: str
    dataset: str  # "loaded" | "empty"
    divisions: int
    source: Optional[str] = None
    environment: str


@router.get("", response_model=HealthResponse, summary="API health check")
async def health_check() -> HealthResponse:
    """
    Returns the liveness status of the API and the dataset it serves.

    The API is considered healthy (HTTP 200) even with no dataset loaded —
    that lets upstream systems distinguish between a total API failure and
    a bad DATASET_PATH.
    """
    from fencemap.core.config import settings

    # Access via module reference so tests can patch dataset_module.dataset_store
    store = dataset_module.dataset_store
    count = len(store.divisions)
    if count == 0:
        logger.debug("Health check: dataset empty")

    return HealthResponse(
        status="ok",
        version="0.1.0",
        dataset="loaded" if count else "empty",
        divisions=count,
        source=store.source,
        environment=settings.environment,
    )
