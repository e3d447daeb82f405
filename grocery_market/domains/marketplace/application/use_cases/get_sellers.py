"""
Get Sellers Use Case
"""

import logging

from grocery_market.domains.marketplace.application.ports import IUserRepository
from grocery_market.domains.marketplace.domain.entities import User

logger = logging.getLogger(__name__)


class GetSellersUseCase:
    """Lists every user with the seller role, ordered by ID."""

    def __init__(self, user_repository: IUserRepository):
        self.user_repository = user_repository

    async def execute(self) -> list[User]:
        sellers = await self.user_repository.get_sellers()
        logger.debug(f"Found {len(sellers)} sellers")
        return sellers


__all__ = ["GetSellersUseCase"]
