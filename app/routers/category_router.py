"""
Category API router.

Thin router that delegates to CategoryController. Every route needs a
bearer token; changes additionally need one of the editor roles.
"""
from fastapi import APIRouter, Depends, status
from typing import List

from app.config.settings import get_settings
from app.core.dependencies import get_category_controller
from app.core.security import get_current_user, require_roles
from app.controllers import CategoryController
from app.schemas import (
    AssociationRequest,
    Category,
    CategoryAssociationResponse,
    CategoryCreate,
    CategoryDetail,
    CategoryUpdate,
)
from app.utils.exceptions import CategoryNotFoundError

router = APIRouter(
    prefix="/categories",
    tags=["Categories"],
    dependencies=[Depends(get_current_user)],
)

editor_only = [Depends(require_roles(*get_settings().editor_roles))]


@router.get("", response_model=List[CategoryDetail])
async def list_categories(
    controller: CategoryController = Depends(get_category_controller)
):
    """List all categories with their films."""
    return await controller.list_categories()


@router.post("/add-film", response_model=CategoryAssociationResponse, dependencies=editor_only)
async def add_film_to_category(
    request: AssociationRequest,
    controller: CategoryController = Depends(get_category_controller)
):
    """Add a film to a category's film list."""
    category = await controller.add_film_to_category(request.film_id, request.category_id)
    return CategoryAssociationResponse(message="Film added to category", category=category)


@router.get("/{category_id}", response_model=Category)
async def get_category(
    category_id: str,
    controller: CategoryController = Depends(get_category_controller)
):
    """Get a specific category."""
    category = await controller.get_category(category_id)
    if category is None:
        raise CategoryNotFoundError(category_id)
    return category


@router.post("", response_model=Category, status_code=status.HTTP_201_CREATED, dependencies=editor_only)
async def add_category(
    request: CategoryCreate,
    controller: CategoryController = Depends(get_category_controller)
):
    """Create a new category."""
    return await controller.add_category(request)


@router.put("/{category_id}", response_model=Category, dependencies=editor_only)
async def update_category(
    category_id: str,
    request: CategoryUpdate,
    controller: CategoryController = Depends(get_category_controller)
):
    """Update a category. Fields left out keep their stored value."""
    return await controller.update_category(category_id, request)


@router.delete("/{category_id}", response_model=Category, dependencies=editor_only)
async def delete_category(
    category_id: str,
    controller: CategoryController = Depends(get_category_controller)
):
    """Delete a category and return it."""
    category = await controller.delete_category(category_id)
    if category is None:
        raise CategoryNotFoundError(category_id)
    return category
