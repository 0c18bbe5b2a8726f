"""
Film API router.

Thin router that delegates to FilmController. Absent films are turned
into FilmNotFoundError here; the controller reports them as None.
"""
from fastapi import APIRouter, Depends, Query, status
from typing import Optional

from app.config.settings import get_settings
from app.core.dependencies import get_film_controller
from app.controllers import FilmController
from app.schemas import (
    AssociationRequest,
    Film,
    FilmAssociationResponse,
    FilmCreate,
    FilmPage,
    FilmUpdate,
)
from app.utils.exceptions import FilmNotFoundError

router = APIRouter(prefix="/films", tags=["Films"])

_settings = get_settings()


@router.get("", response_model=FilmPage)
async def list_films(
    search: Optional[str] = Query(None, description="Case-insensitive text matched against name and description."),
    page: int = Query(1, ge=1),
    limit: int = Query(_settings.default_page_size, ge=1, le=_settings.max_page_size),
    controller: FilmController = Depends(get_film_controller)
):
    """List films, one page at a time."""
    return await controller.list_films(search=search, page=page, limit=limit)


@router.post("/add-category", response_model=FilmAssociationResponse)
async def add_category_to_film(
    request: AssociationRequest,
    controller: FilmController = Depends(get_film_controller)
):
    """Add a category to a film's category list."""
    film = await controller.add_category_to_film(request.film_id, request.category_id)
    return FilmAssociationResponse(message="Category added to film", film=film)


@router.get("/{film_id}", response_model=Film)
async def get_film(
    film_id: str,
    controller: FilmController = Depends(get_film_controller)
):
    """Get a specific film."""
    film = await controller.get_film(film_id)
    if film is None:
        raise FilmNotFoundError(film_id)
    return film


@router.post("", response_model=Film, status_code=status.HTTP_201_CREATED)
async def add_film(
    request: FilmCreate,
    controller: FilmController = Depends(get_film_controller)
):
    """Create a new film."""
    return await controller.add_film(request)


@router.put("/{film_id}", response_model=Film)
async def update_film(
    film_id: str,
    request: FilmUpdate,
    controller: FilmController = Depends(get_film_controller)
):
    """Replace a film's name, description, release date and rating."""
    film = await controller.update_film(film_id, request)
    if film is None:
        raise FilmNotFoundError(film_id)
    return film


@router.delete("/{film_id}", response_model=Film)
async def delete_film(
    film_id: str,
    controller: FilmController = Depends(get_film_controller)
):
    """Delete a film and return it."""
    film = await controller.delete_film(film_id)
    if film is None:
        raise FilmNotFoundError(film_id)
    return film
