"""Category aggregation."""

from catalog_api.catalog.store import ProductStore


class CategoryAggregator:
    """Lists the categories currently in use.

    The result is deduplicated and sorted by code point here, whatever
    collation the store used. An empty category is a valid value.
    """

    def __init__(self, store: ProductStore) -> None:
        self.store = store

    async def list_categories(self) -> list[str]:
        """Get distinct categories, ascending and case-sensitive.

        Returns:
            Category values, each once.
        """
        categories = await self.store.find_distinct_categories()
        return sorted(set(categories))
