"""
Repositories module for CineCatalog.
"""
from .base import CatalogStore, save_versioned
from .category_repository import CategoryRepository
from .film_repository import FilmRepository

__all__ = [
    "CatalogStore",
    "save_versioned",
    "CategoryRepository",
    "FilmRepository",
]
