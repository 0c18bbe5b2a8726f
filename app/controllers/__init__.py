"""
Controllers module for CineCatalog.
"""
from .category_controller import CategoryController
from .film_controller import FilmController

__all__ = [
    "CategoryController",
    "FilmController",
]
