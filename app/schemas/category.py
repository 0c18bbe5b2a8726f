"""
Category schemas.
"""
from pydantic import Field
from typing import ClassVar, List, Optional
from datetime import datetime, timezone

from .common import CatalogModel, UpdatePolicy, UpdateRequest


class Category(CatalogModel):
    """Category grouping films."""
    category_id: str = Field(..., alias="id")
    name: str
    description: Optional[str] = None
    films: List[str] = Field(default_factory=list)
    version: int = 0
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), alias="createdAt"
    )


class CategorySummary(CatalogModel):
    """Category fields shown alongside a film."""
    category_id: str = Field(..., alias="id")
    name: str
    description: Optional[str] = None


class CategoryCreate(CatalogModel):
    """Request to create a category."""
    name: str = Field(..., min_length=1, max_length=128)
    description: str = Field(..., max_length=2048)
    films: List[str] = Field(default_factory=list)


class CategoryUpdate(UpdateRequest):
    """Request to update a category. Only supplied fields are written."""
    policy: ClassVar[UpdatePolicy] = UpdatePolicy.PARTIAL_MERGE

    name: Optional[str] = Field(default=None, max_length=128)
    description: Optional[str] = Field(default=None, max_length=2048)
    films: Optional[List[str]] = None


class CategoryAssociationResponse(CatalogModel):
    """Response for adding a film to a category."""
    message: str
    category: Category
