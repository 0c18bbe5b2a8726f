"""
Core module for CineCatalog application setup.
"""
from .app import create_app
from .dependencies import get_category_controller, get_film_controller

__all__ = [
    "create_app",
    "get_category_controller",
    "get_film_controller",
]
