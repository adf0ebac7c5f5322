"""JSON API (health and service metadata)."""

from .routes import router as api_router

__all__ = ["api_router"]
