"""
Create User Use Case
"""

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from grocery_market.core.domain import (
    DomainException,
    DuplicateEntityException,
    Email,
    ValidationException,
)
from grocery_market.domains.marketplace.application.ports import IUserRepository
from grocery_market.domains.marketplace.domain.entities import User
from grocery_market.domains.marketplace.domain.value_objects import UserRole

logger = logging.getLogger(__name__)


@dataclass
class CreateUserRequest:
    """Request for registering a customer or seller."""

    email: str
    full_name: str
    phone: str
    role: UserRole
    address: str | None = None


class CreateUserUseCase:
    """
    Use Case: Create User

    Registers a customer or seller. Emails are stored lower-cased and must be unique.
    """

    def __init__(self, session: AsyncSession, user_repository: IUserRepository):
        self.session = session
        self.user_repository = user_repository

    async def execute(self, request: CreateUserRequest) -> User:
        """
        Create a user.

        Raises:
            ValidationException: Malformed email
            DuplicateEntityException: Email already registered
        """
        try:
            email = str(Email(request.email))
        except ValueError as e:
            raise ValidationException(str(e), field="email") from e

        try:
            if await self.user_repository.get_by_email(email) is not None:
                raise DuplicateEntityException("User", "email", email)

            user = await self.user_repository.create(
                User(
                    email=email,
                    full_name=request.full_name,
                    phone=request.phone,
                    address=request.address,
                    role=request.role,
                )
            )
            await self.session.commit()

            logger.info(f"User {user.id} created with role {user.role.value}")
            return user

        except DomainException:
            await self.session.rollback()
            raise
        except Exception as e:
            logger.error(f"Error creating user {email}: {e}")
            await self.session.rollback()
            raise


__all__ = ["CreateUserUseCase", "CreateUserRequest"]
