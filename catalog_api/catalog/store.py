"""Record store interface.

The catalog core only talks to storage through this protocol. Any
failure an implementation raises reaches the caller unchanged.
"""

from decimal import Decimal
from typing import Protocol

from catalog_api.domain.entities import Product
from catalog_api.domain.value_objects import Page, PageRequest


class ProductStore(Protocol):
    """Durable product collection keyed by integer id.

    Every paged query orders by page_request.sort and then by id, so
    consecutive pages are disjoint for any sort field.
    """

    async def find_by_id(self, product_id: int) -> Product | None:
        """Return the product with this id, or None."""
        ...

    async def exists_by_id(self, product_id: int) -> bool:
        """Check whether a product with this id is stored."""
        ...

    async def save(self, product: Product) -> Product:
        """Insert the product, or fully replace the one with the same id."""
        ...

    async def delete_by_id(self, product_id: int) -> None:
        """Remove the product with this id. No-op when absent."""
        ...

    async def list_all(self) -> list[Product]:
        """Return every product, ordered by id."""
        ...

    async def find_all(self, page_request: PageRequest) -> Page[Product]:
        """Return one page of the unfiltered collection."""
        ...

    async def find_by_name_containing(
        self, text: str, page_request: PageRequest
    ) -> Page[Product]:
        """Return products whose name contains text, ignoring case."""
        ...

    async def find_by_category(
        self, category: str, page_request: PageRequest
    ) -> Page[Product]:
        """Return products whose category equals category exactly."""
        ...

    async def find_by_price_between(
        self, min_price: Decimal, max_price: Decimal, page_request: PageRequest
    ) -> Page[Product]:
        """Return products with min_price <= price <= max_price."""
        ...

    async def find_distinct_categories(self) -> list[str]:
        """Return each stored category value once, ascending."""
        ...
