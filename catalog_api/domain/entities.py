"""Catalog records.

Product is the stored catalog entity; ProductRequest is the payload that
creates or fully replaces one. Both validate and normalize their fields
at construction time, so an instance that exists is always valid.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Self

from catalog_api.domain.base import ValueObject
from catalog_api.domain.exceptions import ProductValidationError

PRICE_MAX_DIGITS = 12
PRICE_DECIMAL_PLACES = 2
PRICE_QUANTUM = Decimal(1).scaleb(-PRICE_DECIMAL_PLACES)
MAX_PRICE_EXCLUSIVE = Decimal(10) ** (PRICE_MAX_DIGITS - PRICE_DECIMAL_PLACES)


# ============================================================================
# Field Normalizers
# ============================================================================


def _text_or_empty(value: str | None) -> str:
    """Normalize an optional text field, mapping None to ''."""
    return "" if value is None else value


def _require_name(value: str | None) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ProductValidationError("name", "Product name is required", value)
    return value


def _require_price(value: Any) -> Decimal:
    """Coerce a price to Decimal and enforce price >= 0.

    Floats go through str() so 999.99 stays 999.99 instead of its
    binary expansion.
    """
    if value is None:
        raise ProductValidationError("price", "Product price is required", value)
    if isinstance(value, bool):
        raise ProductValidationError("price", "Price must be a number", value)
    try:
        price = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        raise ProductValidationError("price", "Price must be a number", value) from None
    if not price.is_finite():
        raise ProductValidationError("price", "Price must be a finite number", value)
    if price < 0:
        raise ProductValidationError(
            "price", "Price must be greater than or equal to 0", value
        )
    # Stored as NUMERIC(12, 2): anything finer or larger would not round-trip.
    if price >= MAX_PRICE_EXCLUSIVE:
        raise ProductValidationError(
            "price", f"Price must have at most {PRICE_MAX_DIGITS} digits", value
        )
    if price != price.quantize(PRICE_QUANTUM):
        raise ProductValidationError(
            "price",
            f"Price must have at most {PRICE_DECIMAL_PLACES} decimal places",
            value,
        )
    return price


def _require_stock(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ProductValidationError("stock", "Stock must be an integer", value)
    if value < 0:
        raise ProductValidationError(
            "stock", "Stock must be greater than or equal to 0", value
        )
    return value


# ============================================================================
# Product Request
# ============================================================================


@dataclass(frozen=True)
class ProductRequest(ValueObject):
    """Input payload for creating or replacing a product.

    Constructed once per request and consumed once by the catalog
    service. Absent optional text is normalized to an empty string.

    Attributes:
        name: Product name, required and non-blank.
        price: Unit price, required, >= 0.
        description: Free text description.
        category: Free text category.
        stock: Units available, >= 0.
        image_url: Product image URL.

    Raises:
        ProductValidationError: If any field violates its constraint.
    """

    name: str
    price: Decimal
    description: str = ""
    category: str = ""
    stock: int = 0
    image_url: str = ""

    def __post_init__(self) -> None:
        """Validate and normalize fields."""
        object.__setattr__(self, "name", _require_name(self.name))
        object.__setattr__(self, "price", _require_price(self.price))
        object.__setattr__(self, "stock", _require_stock(self.stock))
        object.__setattr__(self, "description", _text_or_empty(self.description))
        object.__setattr__(self, "category", _text_or_empty(self.category))
        object.__setattr__(self, "image_url", _text_or_empty(self.image_url))


# ============================================================================
# Product
# ============================================================================


@dataclass(frozen=True)
class Product(ValueObject):
    """A catalog product.

    Products are immutable. An update produces a new Product carrying
    the same id (see from_request); fields are never changed in place.

    Attributes:
        id: Unique integer identifier (primary key).
        name: Product name, never empty.
        price: Unit price, never negative.
        description: Description, '' when absent.
        category: Category, '' when absent. Not a fixed enumeration.
        stock: Units available, never negative.
        image_url: Image URL, '' when absent.
    """

    id: int
    name: str
    price: Decimal
    description: str = ""
    category: str = ""
    stock: int = 0
    image_url: str = ""

    def __post_init__(self) -> None:
        """Validate and normalize fields."""
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise ProductValidationError("id", "Product id must be an integer", self.id)
        object.__setattr__(self, "name", _require_name(self.name))
        object.__setattr__(self, "price", _require_price(self.price))
        object.__setattr__(self, "stock", _require_stock(self.stock))
        object.__setattr__(self, "description", _text_or_empty(self.description))
        object.__setattr__(self, "category", _text_or_empty(self.category))
        object.__setattr__(self, "image_url", _text_or_empty(self.image_url))

    @classmethod
    def from_request(cls, product_id: int, request: ProductRequest) -> Self:
        """Build a product from a request, taking every field from it.

        Used for both create and full replace: fields the request leaves
        at their defaults overwrite whatever was stored before.

        Args:
            product_id: ID to assign.
            request: Validated product request.

        Returns:
            New Product.
        """
        return cls(
            id=product_id,
            name=request.name,
            price=request.price,
            description=request.description,
            category=request.category,
            stock=request.stock,
            image_url=request.image_url,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary.

        Returns:
            Dictionary representation.
        """
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "category": self.category,
            "stock": self.stock,
            "image_url": self.image_url,
        }
