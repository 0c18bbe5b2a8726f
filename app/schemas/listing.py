"""
Listing schemas: films and categories with their references resolved.
"""
from pydantic import Field
from typing import List

from .common import CatalogModel, FilmLinks, PageLinks
from .category import Category, CategorySummary
from .film import Film


class FilmEntry(Film):
    """A film in a listing, with resolved categories and links."""
    categories: List[CategorySummary] = Field(default_factory=list)
    links: FilmLinks = Field(..., alias="_links")


class FilmPage(CatalogModel):
    """One page of films matching a search."""
    links: PageLinks = Field(..., alias="_links")
    total: int
    page: int
    total_pages: int = Field(..., alias="totalPages")
    films: List[FilmEntry]


class CategoryDetail(Category):
    """A category with its films resolved to full records."""
    films: List[Film] = Field(default_factory=list)
