"""Short link create/redirect routes."""

from .routes import router as web_router

__all__ = ["web_router"]
