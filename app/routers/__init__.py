"""
Routers module for CineCatalog.
"""
from . import category_router
from . import film_router

__all__ = [
    "category_router",
    "film_router",
]
