"""API routes."""
from fastapi import APIRouter

from catalog.api.auth import router as auth_router
from catalog.api.authors import router as authors_router
from catalog.api.books import router as books_router
from catalog.api.publishers import router as publishers_router

# Create main API router
api_router = APIRouter(prefix="/api/v1")

# Include all route modules
api_router.include_router(auth_router)
api_router.include_router(authors_router)
api_router.include_router(publishers_router)
api_router.include_router(books_router)

__all__ = ["api_router"]
