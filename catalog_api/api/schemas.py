"""API schemas for the catalog API.

Pydantic models for request/response validation and serialization.
"""

from decimal import Decimal

from pydantic import BaseModel, Field, field_serializer

from catalog_api.domain.entities import (
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
    Product,
    ProductRequest,
)
from catalog_api.domain.value_objects import Page


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


# ============================================================================
# Product Schemas
# ============================================================================


class ProductCreateRequest(BaseModel):
    """Request body to create or replace a product."""

    name: str = Field(..., min_length=1, max_length=500, description="Product name")
    description: str | None = Field(default=None, description="Product description")
    price: Decimal = Field(
        ...,
        ge=0,
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        description="Unit price",
    )
    category: str | None = Field(default=None, max_length=200, description="Category")
    stock: int = Field(default=0, ge=0, description="Units available")
    image_url: str | None = Field(default=None, max_length=1000, description="Image URL")

    def to_domain(self) -> ProductRequest:
        """Convert to a domain product request.

        Raises:
            ProductValidationError: If a domain constraint fails, e.g. a
                whitespace-only name.
        """
        return ProductRequest(
            name=self.name,
            description=self.description,
            price=self.price,
            category=self.category,
            stock=self.stock,
            image_url=self.image_url,
        )


class ProductResponse(BaseModel):
    """A catalog product."""

    id: int = Field(..., description="Product identifier")
    name: str = Field(..., description="Product name")
    description: str = Field(..., description="Product description")
    price: Decimal = Field(..., description="Unit price")
    category: str = Field(..., description="Category")
    stock: int = Field(..., description="Units available")
    image_url: str = Field(..., description="Image URL")

    @field_serializer("price", when_used="json")
    def serialize_price(self, price: Decimal) -> float:
        """Emit price as a JSON number."""
        return float(price)

    @classmethod
    def from_domain(cls, product: Product) -> "ProductResponse":
        """Convert Product entity to response schema."""
        return cls(**product.to_dict())


class ProductPageResponse(BaseModel):
    """One page of products."""

    content: list[ProductResponse] = Field(..., description="Products on this page")
    page: int = Field(..., description="Zero-based page index")
    page_size: int = Field(..., description="Requested page size")
    total_elements: int = Field(..., description="Matching products across all pages")
    total_pages: int = Field(..., description="Number of pages")
    has_next: bool = Field(..., description="Whether a later page exists")

    @classmethod
    def from_page(cls, page: Page[Product]) -> "ProductPageResponse":
        """Convert a domain page to response schema."""
        return cls(
            content=[ProductResponse.from_domain(p) for p in page.content],
            page=page.page_index,
            page_size=page.page_size,
            total_elements=page.total_elements,
            total_pages=page.total_pages,
            has_next=page.has_next,
        )
