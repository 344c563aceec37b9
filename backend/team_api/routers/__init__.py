"""Routers exposed by the FastAPI application."""

from .meta import router as meta_router

__all__ = ["meta_router"]
