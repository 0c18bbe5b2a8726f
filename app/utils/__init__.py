"""
Utilities module for CineCatalog.
"""
from .links import film_link, category_link, film_list_link
from .exceptions import (
    CineCatalogException,
    FilmNotFoundError,
    CategoryNotFoundError,
    DuplicateAssociationError,
    ConcurrentUpdateError,
    StoreError,
    RetrievalError,
    AuthenticationError,
    AuthorizationError,
)

__all__ = [
    "film_link",
    "category_link",
    "film_list_link",
    "CineCatalogException",
    "FilmNotFoundError",
    "CategoryNotFoundError",
    "DuplicateAssociationError",
    "ConcurrentUpdateError",
    "StoreError",
    "RetrievalError",
    "AuthenticationError",
    "AuthorizationError",
]
