"""Catalog service for product operations.

High-level service that combines record store operations with the
catalog's rules: id allocation, full-replace updates, the delete
not-found check, filter precedence, and category aggregation.

The service holds no product state of its own. Every call is a round
trip to the store, and store errors propagate unchanged.
"""

from decimal import Decimal

from catalog_api.catalog.aggregation import CategoryAggregator
from catalog_api.catalog.dispatch import FilterDispatcher
from catalog_api.catalog.ids import IdGenerator, RandomIdGenerator
from catalog_api.catalog.store import ProductStore
from catalog_api.domain.entities import Product, ProductRequest
from catalog_api.domain.exceptions import ProductNotFoundError
from catalog_api.domain.value_objects import Page, PageRequest


class CatalogService:
    """Service for catalog operations.

    Example usage:
        service = CatalogService(InMemoryProductStore())

        product = await service.create(
            ProductRequest(name="Nike Shoes", price=Decimal("79.99"), category="Footwear")
        )
        page = await service.search(
            PageRequest(page=0, size=10, sort=Sort.by("price", "desc")),
            category="Footwear",
        )
    """

    def __init__(
        self,
        store: ProductStore,
        id_generator: IdGenerator | None = None,
    ) -> None:
        """Initialize service with a record store.

        Args:
            store: Record store owning the product collection.
            id_generator: ID source for create. Defaults to RandomIdGenerator.
        """
        self.store = store
        self.id_generator = id_generator if id_generator is not None else RandomIdGenerator()
        self.dispatcher = FilterDispatcher(store)
        self.aggregator = CategoryAggregator(store)

    async def create(self, request: ProductRequest) -> Product:
        """Create a product under a newly allocated ID.

        Args:
            request: Validated product request.

        Returns:
            The persisted product.
        """
        product_id = await self.id_generator.next_id(self.store)
        product = Product.from_request(product_id, request)
        return await self.store.save(product)

    async def update(self, product_id: int, request: ProductRequest) -> Product | None:
        """Fully replace an existing product.

        Every field comes from the request; nothing is merged from the
        stored product. Concurrent updates of one ID are last-writer-wins.

        Args:
            product_id: ID of the product to replace.
            request: Validated product request.

        Returns:
            The new product, or None if no product has this ID
            (nothing is written in that case).
        """
        existing = await self.store.find_by_id(product_id)
        if existing is None:
            return None
        return await self.store.save(Product.from_request(product_id, request))

    async def delete(self, product_id: int) -> None:
        """Delete a product.

        Unlike get_by_id and update, a missing product is an error here.

        Args:
            product_id: ID of the product to delete.

        Raises:
            ProductNotFoundError: If no product has this ID.
        """
        if not await self.store.exists_by_id(product_id):
            raise ProductNotFoundError(product_id)
        await self.store.delete_by_id(product_id)

    async def get_by_id(self, product_id: int) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product ID.

        Returns:
            Product if found, None otherwise.
        """
        return await self.store.find_by_id(product_id)

    async def list_all(self) -> list[Product]:
        """Get every product, unpaged, ordered by ID."""
        return await self.store.list_all()

    async def search(
        self,
        page_request: PageRequest,
        name: str | None = None,
        category: str | None = None,
        min_price: Decimal | float | None = None,
        max_price: Decimal | float | None = None,
    ) -> Page[Product]:
        """Search products with a single precedence-selected filter.

        Args:
            page_request: Page index, size and sort.
            name: Name substring (highest precedence).
            category: Exact category.
            min_price: Inclusive lower price bound, used only with max_price.
            max_price: Inclusive upper price bound, used only with min_price.

        Returns:
            Page of matching products.
        """
        return await self.dispatcher.search(
            page_request,
            name=name,
            category=category,
            min_price=min_price,
            max_price=max_price,
        )

    async def list_categories(self) -> list[str]:
        """Get distinct categories in ascending order."""
        return await self.aggregator.list_categories()
