"""
User Entity for the Marketplace Domain

Customers and sellers share one entity; the role never changes after creation.
"""

from dataclasses import dataclass
from typing import Any

from grocery_market.core.domain import Entity

from ..value_objects.catalog import UserRole


@dataclass
class User(Entity[int]):
    """Marketplace participant, either a customer or a seller."""

    email: str = ""
    full_name: str = ""
    phone: str = ""
    address: str | None = None
    role: UserRole = UserRole.CUSTOMER

    def is_customer(self) -> bool:
        return self.role is UserRole.CUSTOMER

    def is_seller(self) -> bool:
        return self.role is UserRole.SELLER

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "email": self.email,
            "full_name": self.full_name,
            "phone": self.phone,
            "address": self.address,
            "role": self.role.value,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
