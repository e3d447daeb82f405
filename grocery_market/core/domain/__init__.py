"""
Domain Layer - Core DDD building blocks

This module provides base classes for Domain-Driven Design:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects compared by value
- Exceptions: Domain-specific error handling
"""

from grocery_market.core.domain.entities import Entity
from grocery_market.core.domain.exceptions import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateEntityException,
    EntityNotFoundException,
    InsufficientStockException,
    InvalidOperationException,
    ValidationException,
)
from grocery_market.core.domain.value_objects import (
    Email,
    Quantity,
    StatusEnum,
    ValueObject,
)

__all__ = [
    # Entities
    "Entity",
    # Value Objects
    "ValueObject",
    "Quantity",
    "Email",
    "StatusEnum",
    # Exceptions
    "DomainException",
    "ValidationException",
    "EntityNotFoundException",
    "BusinessRuleViolationException",
    "InsufficientStockException",
    "InvalidOperationException",
    "DuplicateEntityException",
]
