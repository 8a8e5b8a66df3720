"""Domain layer for the catalog.

Contains the catalog records, paging value objects, and domain errors.
Nothing in this package performs I/O.
"""

from catalog_api.domain.entities import Product, ProductRequest
from catalog_api.domain.exceptions import (
    DomainError,
    IdAllocationError,
    InvalidPageRequestError,
    ProductNotFoundError,
    ProductValidationError,
    ValidationFailure,
)
from catalog_api.domain.value_objects import (
    SORTABLE_FIELDS,
    Page,
    PageRequest,
    Sort,
    SortDirection,
)

__all__ = [
    # Entities
    "Product",
    "ProductRequest",
    # Paging
    "SORTABLE_FIELDS",
    "Page",
    "PageRequest",
    "Sort",
    "SortDirection",
    # Exceptions
    "DomainError",
    "IdAllocationError",
    "InvalidPageRequestError",
    "ProductNotFoundError",
    "ProductValidationError",
    "ValidationFailure",
]
