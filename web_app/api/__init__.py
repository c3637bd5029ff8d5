"""API routes for the applog web app."""

from .routes import router as api_router

__all__ = ["api_router"]
