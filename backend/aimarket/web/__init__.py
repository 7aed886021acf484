"""
Storefront page package: HTML rendering and static assets.
"""
from .routes import router

__all__ = ["router"]
