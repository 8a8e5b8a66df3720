"""Value objects for paged, sorted queries.

A PageRequest says which slice of an ordered result set to return;
a Page is that slice plus the counts needed to navigate the rest.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Self, TypeVar

from catalog_api.domain.base import ValueObject
from catalog_api.domain.exceptions import InvalidPageRequestError

T = TypeVar("T")

# Product attributes a result set may be ordered by.
SORTABLE_FIELDS = frozenset(
    {"id", "name", "description", "price", "category", "stock", "image_url"}
)


# ============================================================================
# Sorting
# ============================================================================


class SortDirection(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: "str | SortDirection") -> "SortDirection":
        """Parse a direction, case-insensitively.

        Args:
            value: 'asc', 'desc' or a SortDirection.

        Returns:
            SortDirection member.

        Raises:
            InvalidPageRequestError: If the value is not a known direction.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise InvalidPageRequestError(
                "sort_order", "Sort order must be 'asc' or 'desc'", value
            ) from None


@dataclass(frozen=True)
class Sort(ValueObject):
    """Ordering of a result set by a single product field.

    Attributes:
        field: Product attribute name (see SORTABLE_FIELDS).
        direction: Ascending or descending.
    """

    field: str = "name"
    direction: SortDirection = SortDirection.ASC

    def __post_init__(self) -> None:
        """Validate sort field and normalize direction."""
        if self.field not in SORTABLE_FIELDS:
            raise InvalidPageRequestError(
                "sort_by",
                f"Cannot sort by '{self.field}'. Allowed: {sorted(SORTABLE_FIELDS)}",
                self.field,
            )
        object.__setattr__(self, "direction", SortDirection.parse(self.direction))

    @property
    def descending(self) -> bool:
        """Check if the sort is descending."""
        return self.direction is SortDirection.DESC

    @classmethod
    def by(cls, field: str, direction: str | SortDirection = SortDirection.ASC) -> Self:
        """Create a sort from a field and a direction string.

        Args:
            field: Product attribute name.
            direction: 'asc' or 'desc'.

        Returns:
            Sort instance.
        """
        return cls(field=field, direction=SortDirection.parse(direction))


# ============================================================================
# Paging
# ============================================================================


@dataclass(frozen=True)
class PageRequest(ValueObject):
    """Request for one page of an ordered result set.

    Attributes:
        page: Zero-based page index.
        size: Items per page, at least 1.
        sort: Ordering applied before slicing.
    """

    page: int = 0
    size: int = 10
    sort: Sort = field(default_factory=Sort)

    def __post_init__(self) -> None:
        """Validate page bounds."""
        if self.page < 0:
            raise InvalidPageRequestError("page", "Page index must not be negative", self.page)
        if self.size < 1:
            raise InvalidPageRequestError("page_size", "Page size must be at least 1", self.size)

    @property
    def offset(self) -> int:
        """Calculate offset from page index."""
        return self.page * self.size

    @property
    def limit(self) -> int:
        """Get limit (alias for size)."""
        return self.size


@dataclass
class Page(Generic[T]):
    """A bounded slice of a larger ordered result set.

    An empty result set has zero total elements and zero total pages.

    Attributes:
        content: Items on this page, in sort order.
        page_index: Zero-based index of this page.
        page_size: Requested page size.
        total_elements: Number of items across all pages.
    """

    content: list[T]
    page_index: int
    page_size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        """Calculate total pages as ceil(total_elements / page_size)."""
        return math.ceil(self.total_elements / self.page_size)

    @property
    def has_next(self) -> bool:
        """Check if there's a next page."""
        return self.page_index + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        """Check if there's a previous page."""
        return self.page_index > 0

    @property
    def number_of_elements(self) -> int:
        """Number of items on this page."""
        return len(self.content)

    @classmethod
    def of(cls, content: list[T], request: PageRequest, total_elements: int) -> "Page[T]":
        """Build a page for a page request.

        Args:
            content: Items on the page.
            request: The page request that produced them.
            total_elements: Total matching items.

        Returns:
            Page instance.
        """
        return cls(
            content=list(content),
            page_index=request.page,
            page_size=request.size,
            total_elements=total_elements,
        )
