"""Domain exceptions.

All domain-level errors raised by the catalog core. Store failures are
not wrapped here: whatever the record store raises reaches the caller
unchanged.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the API layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Validation Errors
# ============================================================================


class ValidationFailure(DomainError):
    """Base class for input that violates a field or query constraint.

    Raised before any record store call, so nothing is partially applied.
    """

    def __init__(self, field: str, reason: str, value: Any = None) -> None:
        """Initialize validation failure.

        Args:
            field: Name of the offending field.
            reason: Explanation of the violated constraint.
            value: The rejected value.
        """
        super().__init__(
            f"Invalid {field}: {reason}",
            details={"field": field, "reason": reason, "value": value},
        )
        self.field = field
        self.reason = reason


class ProductValidationError(ValidationFailure):
    """Raised when product fields violate their constraints."""

    pass


class InvalidPageRequestError(ValidationFailure):
    """Raised for a bad page index, page size, or sort specification."""

    pass


# ============================================================================
# Lookup Errors
# ============================================================================


class ProductNotFoundError(DomainError):
    """Raised when deleting a product that does not exist."""

    def __init__(self, product_id: int) -> None:
        """Initialize product not found error.

        Args:
            product_id: ID that has no stored product.
        """
        super().__init__(
            f"Product not found with id : '{product_id}'",
            details={"resource": "Product", "field": "id", "value": product_id},
        )
        self.product_id = product_id


class IdAllocationError(DomainError):
    """Raised when no free product ID could be found."""

    def __init__(self, attempts: int) -> None:
        """Initialize id allocation error.

        Args:
            attempts: Number of candidates that collided.
        """
        super().__init__(
            f"Could not allocate a free product id after {attempts} attempts",
            details={"attempts": attempts},
        )
