"""Product ID allocation.

IDs are assigned by the service, not the store. Each candidate is
checked against the store before use, so a stored ID is never reused.
Two concurrent creates can still draw the same free candidate; the
store's primary key rejects the second insert.
"""

import itertools
import random
from typing import Protocol

from catalog_api.catalog.store import ProductStore
from catalog_api.domain.exceptions import IdAllocationError

# Largest id a signed 32-bit integer column can hold.
MAX_PRODUCT_ID = 2**31 - 1


class IdGenerator(Protocol):
    """Source of unused product IDs."""

    async def next_id(self, store: ProductStore) -> int:
        """Return an ID not currently used in store."""
        ...


class RandomIdGenerator:
    """Collision-checked random IDs in [1, MAX_PRODUCT_ID].

    Draws from the OS entropy source and retries on collision up to
    max_attempts times.
    """

    def __init__(self, max_attempts: int = 16, rng: random.Random | None = None) -> None:
        """Initialize generator.

        Args:
            max_attempts: Candidates to try before giving up.
            rng: Random source. Defaults to random.SystemRandom().
        """
        self.max_attempts = max_attempts
        self._rng = rng or random.SystemRandom()

    async def next_id(self, store: ProductStore) -> int:
        """Draw candidates until one is free.

        Args:
            store: Store to check candidates against.

        Returns:
            Unused product ID.

        Raises:
            IdAllocationError: If every attempt collided.
        """
        for _ in range(self.max_attempts):
            candidate = self._rng.randint(1, MAX_PRODUCT_ID)
            if not await store.exists_by_id(candidate):
                return candidate
        raise IdAllocationError(self.max_attempts)


class SequentialIdGenerator:
    """Counts up from start, skipping IDs already in the store."""

    def __init__(self, start: int = 1) -> None:
        """Initialize generator.

        Args:
            start: First candidate ID.
        """
        self._counter = itertools.count(start)

    async def next_id(self, store: ProductStore) -> int:
        """Return the next counter value not taken in store.

        Args:
            store: Store to check candidates against.

        Returns:
            Unused product ID.

        Raises:
            IdAllocationError: If the counter passed MAX_PRODUCT_ID.
        """
        for candidate in self._counter:
            if candidate > MAX_PRODUCT_ID:
                break
            if not await store.exists_by_id(candidate):
                return candidate
        raise IdAllocationError(MAX_PRODUCT_ID)
