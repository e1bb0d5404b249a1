"""FastAPI routers for API endpoints."""

from .feed import router as feed_router
from .health import router as health_router
from .search import router as search_router

__all__ = [
    "feed_router",
    "health_router",
    "search_router",
]
