"""Tests for product ID allocation."""

import random
from decimal import Decimal

import pytest

from catalog_api.catalog.ids import MAX_PRODUCT_ID, RandomIdGenerator, SequentialIdGenerator
from catalog_api.catalog.memory import InMemoryProductStore
from catalog_api.domain import IdAllocationError, Product


class TestRandomIdGenerator:
    """Tests for RandomIdGenerator."""

    @pytest.mark.asyncio
    async def test_id_in_range(self) -> None:
        generator = RandomIdGenerator(rng=random.Random(7))
        store = InMemoryProductStore()

        for _ in range(20):
            product_id = await generator.next_id(store)
            assert 1 <= product_id <= MAX_PRODUCT_ID

    @pytest.mark.asyncio
    async def test_skips_taken_id(self) -> None:
        """A colliding candidate is discarded and the next one used."""
        taken = random.Random(42).randint(1, MAX_PRODUCT_ID)
        store = InMemoryProductStore([Product(taken, "Taken", Decimal("1"))])
        generator = RandomIdGenerator(rng=random.Random(42))

        product_id = await generator.next_id(store)

        assert product_id != taken
        assert not await store.exists_by_id(product_id)

    @pytest.mark.asyncio
    async def test_gives_up_after_max_attempts(self) -> None:
        class AlwaysTaken:
            calls = 0

            async def exists_by_id(self, product_id: int) -> bool:
                AlwaysTaken.calls += 1
                return True

        generator = RandomIdGenerator(max_attempts=3)

        with pytest.raises(IdAllocationError):
            await generator.next_id(AlwaysTaken())  # type: ignore[arg-type]

        assert AlwaysTaken.calls == 3


class TestSequentialIdGenerator:
    """Tests for SequentialIdGenerator."""

    @pytest.mark.asyncio
    async def test_counts_up(self) -> None:
        generator = SequentialIdGenerator()
        store = InMemoryProductStore()

        first = await generator.next_id(store)
        second = await generator.next_id(store)

        assert (first, second) == (1, 2)

    @pytest.mark.asyncio
    async def test_skips_existing_ids(self, memory_store: InMemoryProductStore) -> None:
        generator = SequentialIdGenerator()

        assert await generator.next_id(memory_store) == 5
