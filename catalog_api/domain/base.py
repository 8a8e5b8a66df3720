"""Base classes for domain layer.

Provides the value object abstraction shared by catalog records and
query parameters.
"""

from abc import ABC
from dataclasses import dataclass


@dataclass(frozen=True)
class ValueObject(ABC):
    """Base class for value objects.

    Value objects are immutable and compared by their attributes,
    not by identity. Changing a value means constructing a new one.

    Example:
        @dataclass(frozen=True)
        class Sort(ValueObject):
            field: str
            direction: SortDirection
    """

    pass
