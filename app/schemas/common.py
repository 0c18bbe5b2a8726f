"""
Common schemas and enums used across the application.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, ClassVar, Dict, List, Optional
from enum import Enum


class UpdatePolicy(str, Enum):
    """How an update request is applied to a stored entity."""
    FULL_REPLACE = "full_replace"
    PARTIAL_MERGE = "partial_merge"


class CatalogModel(BaseModel):
    """Base model accepting both field names and their camelCase aliases."""
    model_config = ConfigDict(populate_by_name=True)


class UpdateRequest(CatalogModel):
    """
    Base class for update request bodies.

    Subclasses set ``policy``. Under FULL_REPLACE every field is written,
    omitted ones as null. Under PARTIAL_MERGE fields that are None or an
    empty string keep the stored value.
    """
    policy: ClassVar[UpdatePolicy]

    def changes(self) -> Dict[str, Any]:
        """Return the stored-field values this request writes."""
        data = self.model_dump(mode="json")
        if self.policy is UpdatePolicy.FULL_REPLACE:
            return data
        return {key: value for key, value in data.items() if value is not None and value != ""}


class Link(BaseModel):
    """A hyperlink to a related resource."""
    href: str


class AssociationRequest(CatalogModel):
    """Request to associate one film with one category."""
    film_id: str = Field(..., min_length=1, alias="filmId")
    category_id: str = Field(..., min_length=1, alias="categoryId")


class FilmLinks(CatalogModel):
    """Links attached to a film in a listing."""
    self_link: Link = Field(..., alias="self")
    categories: List[Link] = Field(default_factory=list)


class PageLinks(CatalogModel):
    """Navigation links for a page of results."""
    self_link: Link = Field(..., alias="self")
    next: Link
    prev: Optional[Link] = None
