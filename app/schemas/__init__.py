"""
Schemas module for CineCatalog.
"""
from .common import (
    UpdatePolicy,
    CatalogModel,
    UpdateRequest,
    Link,
    AssociationRequest,
    FilmLinks,
    PageLinks,
)
from .category import (
    Category,
    CategorySummary,
    CategoryCreate,
    CategoryUpdate,
    CategoryAssociationResponse,
)
from .film import Film, FilmCreate, FilmUpdate, FilmAssociationResponse
from .listing import FilmEntry, FilmPage, CategoryDetail

__all__ = [
    # Common
    "UpdatePolicy",
    "CatalogModel",
    "UpdateRequest",
    "Link",
    "AssociationRequest",
    "FilmLinks",
    "PageLinks",
    # Category
    "Category",
    "CategorySummary",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryAssociationResponse",
    # Film
    "Film",
    "FilmCreate",
    "FilmUpdate",
    "FilmAssociationResponse",
    # Listing
    "FilmEntry",
    "FilmPage",
    "CategoryDetail",
]
