"""
User Repository Implementation

SQLAlchemy implementation of IUserRepository.
"""

import logging
from datetime import datetime
from typing import cast

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from grocery_market.domains.marketplace.application.ports import IUserRepository
from grocery_market.domains.marketplace.domain.entities import User
from grocery_market.domains.marketplace.domain.value_objects import UserRole
from grocery_market.models.db.users import User as UserModel

logger = logging.getLogger(__name__)


class SQLAlchemyUserRepository(IUserRepository):
    """
    SQLAlchemy implementation of user repository.

    Handles customer and seller persistence.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def get_by_id(self, user_id: int) -> User | None:
        """Get user by ID."""
        result = await self.session.execute(select(UserModel).where(UserModel.id == user_id))
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_by_id_and_role(self, user_id: int, role: UserRole) -> User | None:
        """Get user by ID, only if it has the given role."""
        result = await self.session.execute(
            select(UserModel).where(UserModel.id == user_id, UserModel.role == role.value)
        )
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_by_email(self, email: str) -> User | None:
        """Get user by email."""
        result = await self.session.execute(select(UserModel).where(UserModel.email == email.lower()))
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_sellers(self) -> list[User]:
        """Get all sellers ordered by ID."""
        result = await self.session.execute(
            select(UserModel).where(UserModel.role == UserRole.SELLER.value).order_by(UserModel.id)
        )
        return [self._to_entity(m) for m in result.scalars().all()]

    async def create(self, user: User) -> User:
        """Insert a user. The caller commits."""
        model = self._to_model(user)
        self.session.add(model)
        await self.session.flush()
        return self._to_entity(model)

    # Mapping methods

    def _to_entity(self, model: UserModel) -> User:
        """Convert model to entity."""
        return User(
            id=cast(int, model.id),
            email=cast(str, model.email),
            full_name=cast(str, model.full_name),
            phone=cast(str, model.phone),
            address=cast(str | None, model.address),
            role=UserRole(cast(str, model.role)),
            created_at=cast(datetime, model.created_at),
            updated_at=cast(datetime, model.updated_at),
        )

    def _to_model(self, user: User) -> UserModel:
        """Convert entity to model."""
        return UserModel(
            email=user.email.lower(),
            full_name=user.full_name,
            phone=user.phone,
            address=user.address,
            role=user.role.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
