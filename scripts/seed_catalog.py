#!/usr/bin/env python3
"""Seed product catalog script.

Loads a small sample catalog into the configured database through the
catalog service, so seeded products get the same validation and id
allocation as API-created ones.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --clear
    python scripts/seed_catalog.py --sequential-ids
"""

import argparse
import asyncio
from decimal import Decimal

from sqlalchemy import delete

from catalog_api.catalog.ids import RandomIdGenerator, SequentialIdGenerator
from catalog_api.catalog.models import ProductRecord
from catalog_api.catalog.repository import SqlAlchemyProductStore
from catalog_api.catalog.service import CatalogService
from catalog_api.domain.entities import ProductRequest
from catalog_api.infrastructure.database import create_tables, engine, session_scope

SAMPLE_PRODUCTS = [
    ProductRequest(
        name="Apple iPhone",
        description="Latest smartphone",
        price=Decimal("999.99"),
        category="Electronics",
        stock=5,
        image_url="https://picsum.photos/seed/iphone/400/400",
    ),
    ProductRequest(
        name="Samsung TV",
        description="LED TV",
        price=Decimal("499.99"),
        category="Electronics",
        stock=10,
        image_url="https://picsum.photos/seed/tv/400/400",
    ),
    ProductRequest(
        name="Nike Shoes",
        description="Running shoes",
        price=Decimal("79.99"),
        category="Footwear",
        stock=20,
        image_url="https://picsum.photos/seed/shoes/400/400",
    ),
    ProductRequest(
        name="Samsung Phone",
        description="Android smartphone",
        price=Decimal("699.99"),
        category="Electronics",
        stock=15,
        image_url="https://picsum.photos/seed/phone/400/400",
    ),
    ProductRequest(
        name="Adidas Socks",
        description="Sports socks",
        price=Decimal("9.99"),
        category="Footwear",
        stock=50,
    ),
]


async def seed(clear: bool, sequential_ids: bool) -> dict:
    """Seed the sample catalog.

    Args:
        clear: Whether to delete existing products first.
        sequential_ids: Use IDs 1, 2, 3, ... instead of random IDs.

    Returns:
        Seeding result.
    """
    id_generator = SequentialIdGenerator() if sequential_ids else RandomIdGenerator()

    async with session_scope() as session:
        deleted = 0
        if clear:
            result = await session.execute(delete(ProductRecord))
            deleted = result.rowcount

        service = CatalogService(SqlAlchemyProductStore(session), id_generator)
        created = [await service.create(request) for request in SAMPLE_PRODUCTS]
        categories = await service.list_categories()

    return {
        "deleted": deleted,
        "products_created": len(created),
        "categories": categories,
    }


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed the product catalog with sample products",
    )
    parser.add_argument(
        "--clear",
        action="store_true",
        help="Delete existing products before seeding",
    )
    parser.add_argument(
        "--sequential-ids",
        action="store_true",
        help="Assign IDs 1, 2, 3, ... (skipping taken IDs)",
    )

    args = parser.parse_args()

    print("=" * 60)
    print("Catalog Seeder")
    print("=" * 60)

    print("Creating database tables...")
    await create_tables()
    print("Tables ready.")
    print()

    try:
        result = await seed(clear=args.clear, sequential_ids=args.sequential_ids)
    finally:
        await engine.dispose()

    print(f"  ✓ Deleted: {result['deleted']} existing products")
    print(f"  ✓ Created: {result['products_created']} products")
    print(f"  ✓ Categories: {', '.join(result['categories'])}")
    print()
    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
