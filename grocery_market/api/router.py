from fastapi import APIRouter

from grocery_market.domains.marketplace.api import router as marketplace_router

api_router = APIRouter()

# API routes (all have /api/v1 prefix from the app factory)
api_router.include_router(marketplace_router)
