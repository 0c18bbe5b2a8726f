"""
Category controller with business logic.
"""
from typing import List, Optional
import logging

from app.repositories import CategoryRepository, FilmRepository
from app.schemas import Category, CategoryCreate, CategoryDetail, CategoryUpdate
from app.utils.exceptions import CategoryNotFoundError, DuplicateAssociationError

logger = logging.getLogger(__name__)


class CategoryController:
    """Controller for category operations."""

    def __init__(self, category_repo: CategoryRepository, film_repo: FilmRepository):
        self.category_repo = category_repo
        self.film_repo = film_repo

    async def list_categories(self) -> List[CategoryDetail]:
        """Get all categories with their films resolved."""
        categories = await self.category_repo.get_all()
        film_ids = {fid for cat in categories for fid in cat.films}
        films = {film.film_id: film for film in await self.film_repo.get_many(list(film_ids))}

        return [
            CategoryDetail(
                **cat.model_dump(exclude={"films"}),
                films=[films[fid] for fid in cat.films if fid in films],
            )
            for cat in categories
        ]

    async def get_category(self, category_id: str) -> Optional[Category]:
        """Get a category by ID, or None."""
        return await self.category_repo.get_by_id(category_id)

    async def add_category(self, request: CategoryCreate) -> Category:
        """Create a new category."""
        return await self.category_repo.create(request)

    async def delete_category(self, category_id: str) -> Optional[Category]:
        """Delete a category and return it, or None if it did not exist."""
        return await self.category_repo.delete(category_id)

    async def update_category(self, category_id: str, request: CategoryUpdate) -> Category:
        """Update a category, keeping any field the request leaves empty."""
        category = await self.category_repo.get_by_id(category_id)
        if not category:
            raise CategoryNotFoundError(category_id)

        changes = request.changes()
        if not changes:
            return category

        return await self.category_repo.save(category, changes)

    async def add_film_to_category(self, film_id: str, category_id: str) -> Category:
        """
        Append a film to a category's film list.

        The film's own ``categories`` list is not updated.
        """
        category = await self.category_repo.get_by_id(category_id)
        if not category:
            raise CategoryNotFoundError(category_id)

        if film_id in category.films:
            raise DuplicateAssociationError("category", category_id, film_id)

        return await self.category_repo.save(
            category, {"films": category.films + [film_id]}
        )
