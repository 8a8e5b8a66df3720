"""In-memory product store.

Dict-backed ProductStore used by the memory backend and by tests.
Products are immutable, so stored values are shared without copying.
"""

from collections.abc import Callable
from decimal import Decimal

from catalog_api.domain.entities import Product
from catalog_api.domain.value_objects import Page, PageRequest


class InMemoryProductStore:
    """In-memory ProductStore.

    Each method completes without awaiting, so a save or delete is
    atomic with respect to other coroutines on the same event loop.
    """

    def __init__(self, products: list[Product] | None = None) -> None:
        """Initialize product store.

        Args:
            products: Optional initial products.
        """
        self._products: dict[int, Product] = {}
        for product in products or []:
            self._products[product.id] = product

    def __len__(self) -> int:
        return len(self._products)

    async def find_by_id(self, product_id: int) -> Product | None:
        return self._products.get(product_id)

    async def exists_by_id(self, product_id: int) -> bool:
        return product_id in self._products

    async def save(self, product: Product) -> Product:
        self._products[product.id] = product
        return product

    async def delete_by_id(self, product_id: int) -> None:
        self._products.pop(product_id, None)

    async def list_all(self) -> list[Product]:
        return sorted(self._products.values(), key=lambda p: p.id)

    async def find_all(self, page_request: PageRequest) -> Page[Product]:
        return self._find_page(lambda p: True, page_request)

    async def find_by_name_containing(
        self, text: str, page_request: PageRequest
    ) -> Page[Product]:
        needle = text.casefold()
        return self._find_page(lambda p: needle in p.name.casefold(), page_request)

    async def find_by_category(
        self, category: str, page_request: PageRequest
    ) -> Page[Product]:
        return self._find_page(lambda p: p.category == category, page_request)

    async def find_by_price_between(
        self, min_price: Decimal, max_price: Decimal, page_request: PageRequest
    ) -> Page[Product]:
        return self._find_page(
            lambda p: min_price <= p.price <= max_price, page_request
        )

    async def find_distinct_categories(self) -> list[str]:
        return sorted({p.category for p in self._products.values()})

    def _find_page(
        self,
        predicate: Callable[[Product], bool],
        page_request: PageRequest,
    ) -> Page[Product]:
        """Filter, sort, and slice the collection.

        Args:
            predicate: Row filter.
            page_request: Page index, size and sort.

        Returns:
            Page of matching products.
        """
        filtered = [p for p in self._products.values() if predicate(p)]

        # Two stable sorts: id first, then the requested field
        field = page_request.sort.field
        filtered.sort(key=lambda p: p.id)
        filtered.sort(
            key=lambda p: getattr(p, field),
            reverse=page_request.sort.descending,
        )

        start = page_request.offset
        content = filtered[start : start + page_request.limit]
        return Page.of(content, page_request, len(filtered))


# ============================================================================
# Store Singleton
# ============================================================================


_store: InMemoryProductStore | None = None


def get_memory_store() -> InMemoryProductStore:
    """Get the process-wide in-memory store."""
    global _store
    if _store is None:
        _store = InMemoryProductStore()
    return _store


def reset_memory_store() -> None:
    """Reset the in-memory store (for testing)."""
    global _store
    _store = None
