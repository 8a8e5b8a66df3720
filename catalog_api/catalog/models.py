"""SQLAlchemy models for product catalog.

Defines the products table. Rows are converted to and from the
immutable domain Product at the repository boundary.
"""

from decimal import Decimal

from sqlalchemy import Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.domain.entities import PRICE_DECIMAL_PLACES, PRICE_MAX_DIGITS, Product
from catalog_api.infrastructure.database import Base


class ProductRecord(Base):
    """Stored product row.

    Attributes:
        id: Product identifier, assigned by the service (no autoincrement).
        name: Product name.
        description: Product description ('' when absent).
        price: Unit price, indexed for range queries.
        category: Free text category, indexed for exact match and grouping.
        stock: Units available.
        image_url: Product image URL ('' when absent).
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(500), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    price: Mapped[Decimal] = mapped_column(
        Numeric(PRICE_MAX_DIGITS, PRICE_DECIMAL_PLACES), nullable=False, index=True
    )
    category: Mapped[str] = mapped_column(String(200), nullable=False, default="", index=True)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    image_url: Mapped[str] = mapped_column(String(1000), nullable=False, default="")

    def __repr__(self) -> str:
        """String representation."""
        return f"<ProductRecord(id={self.id}, name={self.name[:30]})>"

    @classmethod
    def from_domain(cls, product: Product) -> "ProductRecord":
        """Create a row from a domain product.

        Args:
            product: Domain product.

        Returns:
            Unattached row carrying every field.
        """
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            category=product.category,
            stock=product.stock,
            image_url=product.image_url,
        )

    def to_domain(self) -> Product:
        """Convert to a domain product.

        Returns:
            Immutable Product.
        """
        return Product(
            id=self.id,
            name=self.name,
            description=self.description,
            price=Decimal(str(self.price)),
            category=self.category,
            stock=self.stock,
            image_url=self.image_url,
        )
