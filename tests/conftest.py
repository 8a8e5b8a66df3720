"""Shared fixtures for catalog tests."""

from collections.abc import AsyncGenerator
from decimal import Decimal

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from catalog_api.catalog.memory import InMemoryProductStore
from catalog_api.catalog.models import ProductRecord
from catalog_api.catalog.repository import SqlAlchemyProductStore
from catalog_api.catalog.store import ProductStore
from catalog_api.domain.entities import Product, ProductRequest
from catalog_api.infrastructure.database import build_engine, create_tables


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_products() -> list[Product]:
    """Four products across two categories with distinct prices."""
    return [
        Product(1, "Apple iPhone", Decimal("999.99"), "Latest smartphone", "Electronics", 5, "url1"),
        Product(2, "Samsung TV", Decimal("499.99"), "LED TV", "Electronics", 10, "url2"),
        Product(3, "Nike Shoes", Decimal("79.99"), "Running shoes", "Footwear", 20, "url3"),
        Product(4, "Samsung Phone", Decimal("699.99"), "Android smartphone", "Electronics", 15, "url4"),
    ]


@pytest.fixture
def product_request() -> ProductRequest:
    """A valid create/update payload."""
    return ProductRequest(
        name="Apple iPhone",
        description="Smartphone",
        price=Decimal("999.99"),
        category="Electronics",
        stock=5,
        image_url="url1",
    )


# ============================================================================
# Store Fixtures
# ============================================================================


@pytest_asyncio.fixture
async def sql_session() -> AsyncGenerator[AsyncSession, None]:
    """Session on a fresh in-memory SQLite database."""
    engine = build_engine("sqlite+aiosqlite:///:memory:")
    await create_tables(engine)

    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()


@pytest_asyncio.fixture
async def sql_store(
    sql_session: AsyncSession, sample_products: list[Product]
) -> SqlAlchemyProductStore:
    """SQL store seeded with the sample products."""
    sql_session.add_all(ProductRecord.from_domain(p) for p in sample_products)
    await sql_session.commit()
    return SqlAlchemyProductStore(sql_session)


@pytest.fixture
def memory_store(sample_products: list[Product]) -> InMemoryProductStore:
    """In-memory store seeded with the sample products."""
    return InMemoryProductStore(sample_products)


@pytest.fixture(params=["memory", "sql"])
def store(
    request: pytest.FixtureRequest,
    memory_store: InMemoryProductStore,
    sql_store: SqlAlchemyProductStore,
) -> ProductStore:
    """Each store implementation, seeded with the sample products."""
    if request.param == "memory":
        return memory_store
    return sql_store
