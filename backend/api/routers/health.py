"""
Health check API endpoints.

Routes: GET /health, GET /health/store

Dependencies: backend.boundary.store, backend.configs
System role: Health check HTTP API
"""

import logging
import time

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from backend.api.deps.dependencies import get_key_value_store, get_settings_dependency
from backend.boundary.store import KeyValueStore
from backend.configs import Settings
from backend.core.exceptions import CourseStoreError

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/store", response_model=HealthResponse)
async def health_check_store(
    kv: KeyValueStore = Depends(get_key_value_store),
    settings: Settings = Depends(get_settings_dependency),
):
    """
    Key-value store round trip: write a scratch value, read it back, remove it.

    Returns:
        HealthResponse: healthy, or 500 with status "unhealthy"
    """
    key = settings.store.health_check_key
    value = f"test-{int(time.time() * 1000)}"
    try:
        await kv.set(key, value)
        retrieved = await kv.get(key)
        await kv.delete(key)
    except CourseStoreError as e:
        logger.error("Store health check failed", extra={"error": str(e)})
        return JSONResponse(
            status_code=500,
            content={"status": "unhealthy", "message": e.message},
        )

    if retrieved != value:
        logger.error("Store health check read back a different value", extra={"key": key})
        return JSONResponse(
            status_code=500,
            content={"status": "unhealthy", "message": "Retrieved value does not match"},
        )

    return HealthResponse(status="healthy", message="Key-value store connection OK")
