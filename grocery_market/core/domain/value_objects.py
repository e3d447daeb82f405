"""
Base Value Object Classes for Domain-Driven Design

Value Objects are immutable domain primitives that have no identity.
They are compared by their values, not by reference.
"""

from abc import ABC
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for all value objects.

    Value objects are:
    - Immutable (frozen=True)
    - Compared by value (dataclass equality)
    - Have no identity
    """

    def __post_init__(self):
        """Override to add validation logic."""
        self._validate()

    def _validate(self) -> None:
        """Validate the value object. Override in subclasses."""
        pass


@dataclass(frozen=True)
class Quantity(ValueObject):
    """
    Quantity value object for stock/inventory.

    Represents a non-negative integer quantity.
    """

    value: int

    def _validate(self) -> None:
        if self.value < 0:
            raise ValueError("Quantity cannot be negative")

    def is_available(self, required: int = 1) -> bool:
        """Check if required quantity is available."""
        return self.value >= required

    def __str__(self) -> str:
        return str(self.value)

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True)
class Email(ValueObject):
    """
    Email address value object.

    Validates and normalizes email addresses.
    """

    address: str

    def _validate(self) -> None:
        if not self.address or "@" not in self.address:
            raise ValueError(f"Invalid email address: {self.address}")
        object.__setattr__(self, "address", self.address.lower().strip())

    def __str__(self) -> str:
        return self.address


class StatusEnum(str, Enum):
    """Base class for the string-valued tags stored in the database."""
