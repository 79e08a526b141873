"""API endpoints for fuse_search."""

from .health import router as health_router
from .search import router as search_router

__all__ = [
    "search_router",
    "health_router",
]
