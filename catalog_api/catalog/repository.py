"""Product repository for database operations.

SQLAlchemy implementation of the ProductStore protocol: keyed lookups,
the three filtered paged queries, and category aggregation.
"""

from decimal import Decimal
from typing import Any

from sqlalchemy import ColumnElement, Select, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.catalog.models import ProductRecord
from catalog_api.domain.entities import Product
from catalog_api.domain.value_objects import Page, PageRequest


class SqlAlchemyProductStore:
    """Repository for Product database operations.

    Handles all database interactions for products including
    filtering, sorting, and pagination. Writes are flushed, not
    committed; the session owner decides when to commit.

    Example usage:
        async with async_session_factory() as session:
            store = SqlAlchemyProductStore(session)
            page = await store.find_by_category(
                "Electronics",
                PageRequest(page=0, size=20, sort=Sort.by("price")),
            )
            await session.commit()
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def find_by_id(self, product_id: int) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product ID.

        Returns:
            Product if found, None otherwise.
        """
        record = await self.session.get(ProductRecord, product_id)
        return record.to_domain() if record is not None else None

    async def exists_by_id(self, product_id: int) -> bool:
        """Check whether a product ID is taken.

        Args:
            product_id: Product ID.

        Returns:
            True if a row with this ID exists.
        """
        query = select(ProductRecord.id).where(ProductRecord.id == product_id).limit(1)
        result = await self.session.execute(query)
        return result.scalar_one_or_none() is not None

    async def save(self, product: Product) -> Product:
        """Insert a product or fully replace the row with the same ID.

        Args:
            product: Product to save.

        Returns:
            Saved product.
        """
        record = await self.session.merge(ProductRecord.from_domain(product))
        await self.session.flush()
        await self.session.refresh(record)
        return record.to_domain()

    async def delete_by_id(self, product_id: int) -> None:
        """Delete a product by ID. Deleting a missing ID is a no-op.

        Args:
            product_id: Product ID.
        """
        await self.session.execute(
            delete(ProductRecord).where(ProductRecord.id == product_id)
        )
        await self.session.flush()

    async def list_all(self) -> list[Product]:
        """Get every product ordered by ID.

        Returns:
            All stored products.
        """
        result = await self.session.execute(select(ProductRecord).order_by(ProductRecord.id))
        return [record.to_domain() for record in result.scalars().all()]

    async def find_all(self, page_request: PageRequest) -> Page[Product]:
        """Get one page of all products.

        Args:
            page_request: Page index, size and sort.

        Returns:
            Page of products.
        """
        return await self._find_page(None, page_request)

    async def find_by_name_containing(
        self, text: str, page_request: PageRequest
    ) -> Page[Product]:
        """Find products whose name contains text, case-insensitively.

        LIKE wildcards in text are escaped, so '%' and '_' match literally.
        Case folding is Unicode-aware on SQLite too (see build_engine).

        Args:
            text: Substring to look for.
            page_request: Page index, size and sort.

        Returns:
            Page of matching products.
        """
        condition = ProductRecord.name.icontains(text, autoescape=True)
        return await self._find_page(condition, page_request)

    async def find_by_category(
        self, category: str, page_request: PageRequest
    ) -> Page[Product]:
        """Find products in exactly this category.

        Args:
            category: Category value, compared case-sensitively.
            page_request: Page index, size and sort.

        Returns:
            Page of matching products.
        """
        return await self._find_page(ProductRecord.category == category, page_request)

    async def find_by_price_between(
        self, min_price: Decimal, max_price: Decimal, page_request: PageRequest
    ) -> Page[Product]:
        """Find products priced within a closed interval.

        Args:
            min_price: Inclusive lower bound.
            max_price: Inclusive upper bound.
            page_request: Page index, size and sort.

        Returns:
            Page of matching products. Empty when min_price > max_price.
        """
        condition = ProductRecord.price.between(min_price, max_price)
        return await self._find_page(condition, page_request)

    async def find_distinct_categories(self) -> list[str]:
        """Get list of unique categories.

        Returns:
            Category values, each once, ascending.
        """
        query = (
            select(ProductRecord.category)
            .distinct()
            .order_by(ProductRecord.category)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def _find_page(
        self,
        condition: ColumnElement[bool] | None,
        page_request: PageRequest,
    ) -> Page[Product]:
        """Run a filtered, sorted, paged query plus its count.

        Args:
            condition: WHERE clause, or None for the whole table.
            page_request: Page index, size and sort.

        Returns:
            Page of products with total count.
        """
        query: Select[Any] = select(ProductRecord)
        count_query = select(func.count()).select_from(ProductRecord)
        if condition is not None:
            query = query.where(condition)
            count_query = count_query.where(condition)

        # Sorting, with id as tie-breaker so pages never overlap
        sort_column = self._get_sort_column(page_request.sort.field)
        if page_request.sort.descending:
            query = query.order_by(sort_column.desc())
        else:
            query = query.order_by(sort_column.asc())
        if page_request.sort.field != "id":
            query = query.order_by(ProductRecord.id.asc())

        # Pagination
        query = query.limit(page_request.limit).offset(page_request.offset)

        result = await self.session.execute(query)
        content = [record.to_domain() for record in result.scalars().all()]

        total = (await self.session.execute(count_query)).scalar_one()

        return Page.of(content, page_request, total)

    def _get_sort_column(self, sort_by: str) -> Any:
        """Get SQLAlchemy column for sorting.

        Args:
            sort_by: Sort field name, already checked by Sort.

        Returns:
            SQLAlchemy column.
        """
        columns = {
            "id": ProductRecord.id,
            "name": ProductRecord.name,
            "description": ProductRecord.description,
            "price": ProductRecord.price,
            "category": ProductRecord.category,
            "stock": ProductRecord.stock,
            "image_url": ProductRecord.image_url,
        }
        return columns[sort_by]
