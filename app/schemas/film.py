"""
Film schemas.
"""
from pydantic import Field
from typing import ClassVar, List, Optional
from datetime import date, datetime, timezone

from .common import CatalogModel, UpdatePolicy, UpdateRequest


class Film(CatalogModel):
    """A film as stored in the catalog."""
    film_id: str = Field(..., alias="id")
    name: Optional[str] = None
    description: Optional[str] = None
    release_date: Optional[date] = Field(default=None, alias="releaseDate")
    rating: Optional[int] = None
    categories: List[str] = Field(default_factory=list)
    version: int = 0
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), alias="createdAt"
    )


class FilmCreate(CatalogModel):
    """Request to create a film."""
    name: str = Field(..., min_length=1, max_length=128)
    description: str = Field(..., max_length=2048)
    release_date: date = Field(..., alias="releaseDate")
    rating: Optional[int] = Field(default=None, ge=0, le=5)
    category_ids: List[str] = Field(default_factory=list, alias="categoryIds")


class FilmUpdate(UpdateRequest):
    """
    Request to update a film.

    Full replace: a description or rating left out of the body is
    written as null, it does not keep the stored value.
    """
    policy: ClassVar[UpdatePolicy] = UpdatePolicy.FULL_REPLACE

    name: str = Field(..., min_length=1, max_length=128)
    description: Optional[str] = Field(default=None, max_length=2048)
    release_date: date = Field(..., alias="releaseDate")
    rating: Optional[int] = Field(default=None, ge=0, le=5)


class FilmAssociationResponse(CatalogModel):
    """Response for adding a category to a film."""
    message: str
    film: Film
