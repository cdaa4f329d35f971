"""
Store HTTP API routers.
"""

from fastapi import APIRouter

from .auth_routes import router as auth_router
from .financial_routes import router as financial_router
from .user_routes import router as user_router

api_router = APIRouter()
api_router.include_router(auth_router)
api_router.include_router(financial_router)
api_router.include_router(user_router)

__all__ = ["api_router"]
