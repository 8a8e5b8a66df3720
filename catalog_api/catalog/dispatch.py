"""Search filter resolution and dispatch.

A search request carries up to four optional filter parameters, but
exactly one query runs. resolve_filter picks it by fixed precedence:

    1. name                      -> case-insensitive substring on name
    2. category                  -> exact match on category
    3. min_price AND max_price   -> inclusive price range
    4. anything else             -> unfiltered

Filters are never combined. A single price bound does not qualify for
the range branch and falls through to the unfiltered query.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from catalog_api.catalog.store import ProductStore
from catalog_api.domain.base import ValueObject
from catalog_api.domain.entities import Product
from catalog_api.domain.exceptions import ValidationFailure
from catalog_api.domain.value_objects import Page, PageRequest


# ============================================================================
# Filter Variants
# ============================================================================


@dataclass(frozen=True)
class NameFilter(ValueObject):
    """Case-insensitive substring match on product name."""

    text: str

    async def run(self, store: ProductStore, page_request: PageRequest) -> Page[Product]:
        return await store.find_by_name_containing(self.text, page_request)


@dataclass(frozen=True)
class CategoryFilter(ValueObject):
    """Exact match on product category."""

    category: str

    async def run(self, store: ProductStore, page_request: PageRequest) -> Page[Product]:
        return await store.find_by_category(self.category, page_request)


@dataclass(frozen=True)
class PriceRangeFilter(ValueObject):
    """Closed interval on price: min_price <= price <= max_price.

    An inverted interval (min_price > max_price) matches nothing.
    """

    min_price: Decimal
    max_price: Decimal

    async def run(self, store: ProductStore, page_request: PageRequest) -> Page[Product]:
        return await store.find_by_price_between(
            self.min_price, self.max_price, page_request
        )


@dataclass(frozen=True)
class NoFilter(ValueObject):
    """The whole collection."""

    async def run(self, store: ProductStore, page_request: PageRequest) -> Page[Product]:
        return await store.find_all(page_request)


ProductFilter = NameFilter | CategoryFilter | PriceRangeFilter | NoFilter


def _to_decimal(field: str, value: Any) -> Decimal:
    try:
        bound = value if isinstance(value, Decimal) else Decimal(str(value))
    except ArithmeticError:
        raise ValidationFailure(field, "Price bound must be a number", value) from None
    if not bound.is_finite():
        raise ValidationFailure(field, "Price bound must be a finite number", value)
    return bound


def resolve_filter(
    name: str | None = None,
    category: str | None = None,
    min_price: Decimal | float | None = None,
    max_price: Decimal | float | None = None,
) -> ProductFilter:
    """Pick the single filter a search runs.

    Presence means "not None": an empty name is present and matches
    every product.

    Args:
        name: Name substring.
        category: Exact category.
        min_price: Inclusive lower price bound.
        max_price: Inclusive upper price bound.

    Returns:
        The filter selected by precedence.
    """
    if name is not None:
        return NameFilter(name)
    if category is not None:
        return CategoryFilter(category)
    if min_price is not None and max_price is not None:
        return PriceRangeFilter(
            _to_decimal("min_price", min_price),
            _to_decimal("max_price", max_price),
        )
    return NoFilter()


# ============================================================================
# Dispatcher
# ============================================================================


class FilterDispatcher:
    """Runs exactly one store query per search request.

    Page index, size, and sort are forwarded untouched. Store errors
    propagate; nothing is retried.
    """

    def __init__(self, store: ProductStore) -> None:
        """Initialize dispatcher.

        Args:
            store: Record store to query.
        """
        self.store = store

    async def search(
        self,
        page_request: PageRequest,
        name: str | None = None,
        category: str | None = None,
        min_price: Decimal | float | None = None,
        max_price: Decimal | float | None = None,
    ) -> Page[Product]:
        """Resolve the filter and run it.

        Args:
            page_request: Page index, size and sort.
            name: Name substring.
            category: Exact category.
            min_price: Inclusive lower price bound.
            max_price: Inclusive upper price bound.

        Returns:
            Page of matching products.
        """
        product_filter = resolve_filter(name, category, min_price, max_price)
        return await self.dispatch(product_filter, page_request)

    async def dispatch(
        self, product_filter: ProductFilter, page_request: PageRequest
    ) -> Page[Product]:
        """Run an already resolved filter.

        Args:
            product_filter: Filter variant.
            page_request: Page index, size and sort.

        Returns:
            Page of matching products.
        """
        return await product_filter.run(self.store, page_request)
