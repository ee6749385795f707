"""
FastAPI web surface: the users page and the health check.
"""

from .main import app, create_app
from .routes import health_router, page_router

__all__ = [
    "app",
    "create_app",
    "health_router",
    "page_router",
]
