"""Product API endpoints.

CRUD, search, and category listing over the catalog service.
"""

from collections.abc import AsyncGenerator
from decimal import Decimal
from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from catalog_api.api.schemas import (
    ErrorResponse,
    ProductCreateRequest,
    ProductPageResponse,
    ProductResponse,
)
from catalog_api.catalog.ids import RandomIdGenerator
from catalog_api.catalog.memory import get_memory_store
from catalog_api.catalog.repository import SqlAlchemyProductStore
from catalog_api.catalog.service import CatalogService
from catalog_api.catalog.store import ProductStore
from catalog_api.domain.value_objects import PageRequest, Sort, SortDirection
from catalog_api.infrastructure.config import settings
from catalog_api.infrastructure.database import session_scope

logger = structlog.get_logger()

router = APIRouter(prefix="/api/v1/products", tags=["Products"])


# ============================================================================
# Dependencies
# ============================================================================


async def get_product_store() -> AsyncGenerator[ProductStore, None]:
    """Get the record store for one request.

    The database backend opens a session that commits when the request
    succeeds and rolls back when it fails.
    """
    if settings.store_backend == "memory":
        yield get_memory_store()
        return
    async with session_scope() as session:
        yield SqlAlchemyProductStore(session)


def get_catalog_service(
    store: Annotated[ProductStore, Depends(get_product_store)],
) -> CatalogService:
    """Get catalog service bound to the request's store."""
    return CatalogService(store, RandomIdGenerator(settings.id_allocation_attempts))


CatalogServiceDep = Annotated[CatalogService, Depends(get_catalog_service)]


def product_not_found(product_id: int) -> HTTPException:
    """Build the 404 raised when a lookup or update finds nothing."""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={
            "error_code": "PRODUCT_NOT_FOUND",
            "message": f"Product not found with id : '{product_id}'",
        },
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "",
    response_model=ProductResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Create product",
)
async def create_product(
    body: ProductCreateRequest,
    service: CatalogServiceDep,
) -> ProductResponse:
    """Create a product under a newly allocated ID."""
    logger.info("Creating new product", name=body.name)
    product = await service.create(body.to_domain())
    return ProductResponse.from_domain(product)


@router.get(
    "",
    response_model=ProductPageResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Search products",
    description=(
        "Runs one filter chosen by precedence: name, then category, then "
        "the price range (only when both bounds are given), else none."
    ),
)
async def search_products(
    service: CatalogServiceDep,
    name: Annotated[str | None, Query(description="Name substring, case-insensitive")] = None,
    category: Annotated[str | None, Query(description="Exact category")] = None,
    min_price: Annotated[Decimal | None, Query(description="Inclusive lower price bound")] = None,
    max_price: Annotated[Decimal | None, Query(description="Inclusive upper price bound")] = None,
    page: Annotated[int, Query(ge=0, description="Zero-based page index")] = 0,
    page_size: Annotated[
        int, Query(ge=1, le=settings.max_page_size, description="Items per page")
    ] = settings.default_page_size,
    sort_by: Annotated[str, Query(description="Product field to sort by")] = settings.default_sort_by,
    sort_order: Annotated[SortDirection, Query(description="asc or desc")] = SortDirection.ASC,
) -> ProductPageResponse:
    """Search products with filters, pagination, and sorting."""
    logger.info(
        "Searching products",
        name=name,
        category=category,
        min_price=str(min_price) if min_price is not None else None,
        max_price=str(max_price) if max_price is not None else None,
        page=page,
        page_size=page_size,
        sort_by=sort_by,
        sort_order=sort_order.value,
    )
    page_request = PageRequest(
        page=page,
        size=page_size,
        sort=Sort.by(sort_by, sort_order),
    )
    result = await service.search(
        page_request,
        name=name,
        category=category,
        min_price=min_price,
        max_price=max_price,
    )
    return ProductPageResponse.from_page(result)


@router.get(
    "/categories",
    response_model=list[str],
    summary="List categories",
)
async def list_categories(service: CatalogServiceDep) -> list[str]:
    """List distinct categories in ascending order."""
    logger.info("Fetching all product categories")
    return await service.list_categories()


@router.get(
    "/all",
    response_model=list[ProductResponse],
    summary="List all products",
)
async def list_all_products(service: CatalogServiceDep) -> list[ProductResponse]:
    """List every product without paging, ordered by ID."""
    logger.info("Fetching all products")
    return [ProductResponse.from_domain(p) for p in await service.list_all()]


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get product",
)
async def get_product(product_id: int, service: CatalogServiceDep) -> ProductResponse:
    """Get a product by ID."""
    logger.info("Fetching product", product_id=product_id)
    product = await service.get_by_id(product_id)
    if product is None:
        raise product_not_found(product_id)
    return ProductResponse.from_domain(product)


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Replace product",
)
async def update_product(
    product_id: int,
    body: ProductCreateRequest,
    service: CatalogServiceDep,
) -> ProductResponse:
    """Fully replace a product. Omitted optional fields are reset."""
    logger.info("Updating product", product_id=product_id)
    product = await service.update(product_id, body.to_domain())
    if product is None:
        raise product_not_found(product_id)
    return ProductResponse.from_domain(product)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
    summary="Delete product",
)
async def delete_product(product_id: int, service: CatalogServiceDep) -> Response:
    """Delete a product. Deleting a missing product is a 404."""
    logger.info("Deleting product", product_id=product_id)
    await service.delete(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
