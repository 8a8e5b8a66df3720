"""Health check endpoints.

/health answers without touching storage; /ready proves the record
store can serve a query.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from catalog_api.api.products import get_product_store
from catalog_api.catalog.store import ProductStore
from catalog_api.infrastructure.config import settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Liveness response."""

    status: str
    service: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness response naming the active record store."""

    status: str
    store: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report that the process is up."""
    return HealthResponse(
        status="healthy",
        service="catalog-api",
        version=settings.api_version,
    )


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    store: Annotated[ProductStore, Depends(get_product_store)],
) -> ReadinessResponse:
    """Run a keyed lookup against the record store.

    A store failure surfaces as the 503 STORE_ERROR response.
    """
    await store.exists_by_id(0)
    return ReadinessResponse(status="ready", store=settings.store_backend)
