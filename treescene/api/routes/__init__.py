"""API route modules."""

from fastapi import FastAPI

from . import scene


def register_routes(app: FastAPI):
    """Register all API routers."""
    app.include_router(scene.router, prefix="/api/scene", tags=["scene"])
