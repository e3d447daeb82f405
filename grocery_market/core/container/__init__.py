"""
Dependency container for the marketplace service.
"""

from .marketplace import MarketplaceContainer

__all__ = ["MarketplaceContainer"]
