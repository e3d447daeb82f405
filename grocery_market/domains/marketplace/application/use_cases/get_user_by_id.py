"""
Get User By ID Use Case
"""

import logging

from grocery_market.domains.marketplace.application.ports import IUserRepository
from grocery_market.domains.marketplace.domain.entities import User

logger = logging.getLogger(__name__)


class GetUserByIdUseCase:
    """Use case for retrieving a single user by its ID."""

    def __init__(self, user_repository: IUserRepository):
        self.user_repository = user_repository

    async def execute(self, user_id: int) -> User | None:
        try:
            return await self.user_repository.get_by_id(user_id)
        except Exception as e:
            logger.error(f"Error getting user by ID {user_id}: {e}", exc_info=True)
            raise


__all__ = ["GetUserByIdUseCase"]
