"""Product Catalog Service.

Provides the record store interface and its SQL and in-memory
implementations, search filter dispatch, category aggregation, and the
catalog service that composes them.
"""

from catalog_api.catalog.aggregation import CategoryAggregator
from catalog_api.catalog.dispatch import (
    CategoryFilter,
    FilterDispatcher,
    NameFilter,
    NoFilter,
    PriceRangeFilter,
    ProductFilter,
    resolve_filter,
)
from catalog_api.catalog.ids import IdGenerator, RandomIdGenerator, SequentialIdGenerator
from catalog_api.catalog.memory import InMemoryProductStore
from catalog_api.catalog.repository import SqlAlchemyProductStore
from catalog_api.catalog.service import CatalogService
from catalog_api.catalog.store import ProductStore

__all__ = [
    # Store
    "ProductStore",
    "InMemoryProductStore",
    "SqlAlchemyProductStore",
    # Dispatch
    "CategoryFilter",
    "FilterDispatcher",
    "NameFilter",
    "NoFilter",
    "PriceRangeFilter",
    "ProductFilter",
    "resolve_filter",
    # Aggregation
    "CategoryAggregator",
    # Ids
    "IdGenerator",
    "RandomIdGenerator",
    "SequentialIdGenerator",
    # Service
    "CatalogService",
]
