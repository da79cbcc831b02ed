"""
API module - routes and schemas.
"""

from .routes import register_routes

__all__ = ["register_routes"]
