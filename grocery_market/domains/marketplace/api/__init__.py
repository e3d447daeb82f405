"""
Marketplace API

FastAPI routes, schemas and dependencies for users, products and orders.
"""

from .routes import router

__all__ = ["router"]
