"""
Film controller with business logic.

Film and category memberships are stored as two independent lists.
``add_category_to_film`` only appends to the film's ``categories``; the
category's ``films`` list is left untouched, so the two sides can
disagree until the matching category operation is called.
"""
from typing import Dict, Optional
import logging
import math

from pymongo.errors import PyMongoError

from app.repositories import CategoryRepository, FilmRepository
from app.schemas import (
    CategorySummary,
    Film,
    FilmCreate,
    FilmEntry,
    FilmLinks,
    FilmPage,
    FilmUpdate,
    PageLinks,
)
from app.utils.exceptions import DuplicateAssociationError, FilmNotFoundError, RetrievalError
from app.utils.links import category_link, film_link, film_list_link

logger = logging.getLogger(__name__)


class FilmController:
    """Controller for film operations."""

    def __init__(
        self,
        film_repo: FilmRepository,
        category_repo: CategoryRepository,
        api_prefix: str = "/api",
    ):
        self.film_repo = film_repo
        self.category_repo = category_repo
        self.api_prefix = api_prefix

    async def list_films(
        self,
        search: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> FilmPage:
        """
        Get one page of films whose name or description contains ``search``.

        Categories referenced by the page are resolved to summaries and
        every film is annotated with links. Pages past the end come back
        empty with a ``next`` link still pointing one page further.
        """
        try:
            total = await self.film_repo.count(search)
            films = await self.film_repo.search(search, skip=(page - 1) * limit, limit=limit)
            category_ids = {cid for film in films for cid in film.categories}
            categories = await self.category_repo.get_many(list(category_ids))
        except PyMongoError as e:
            logger.error(f"Film listing failed (search={search!r}, page={page}): {e}")
            raise RetrievalError("Error retrieving films", e) from e

        summaries: Dict[str, CategorySummary] = {
            cat.category_id: CategorySummary(
                category_id=cat.category_id,
                name=cat.name,
                description=cat.description,
            )
            for cat in categories
        }

        entries = []
        for film in films:
            resolved = [summaries[cid] for cid in film.categories if cid in summaries]
            entries.append(FilmEntry(
                **film.model_dump(exclude={"categories"}),
                categories=resolved,
                links=FilmLinks(
                    self_link=film_link(self.api_prefix, film.film_id),
                    categories=[category_link(self.api_prefix, c.category_id) for c in resolved],
                ),
            ))

        links = PageLinks(
            self_link=film_list_link(self.api_prefix, page, limit, search),
            next=film_list_link(self.api_prefix, page + 1, limit, search),
            prev=film_list_link(self.api_prefix, page - 1, limit, search) if page > 1 else None,
        )

        return FilmPage(
            links=links,
            total=total,
            page=page,
            total_pages=math.ceil(total / limit),
            films=entries,
        )

    async def get_film(self, film_id: str) -> Optional[Film]:
        """Get a film by ID, or None."""
        return await self.film_repo.get_by_id(film_id)

    async def add_film(self, request: FilmCreate) -> Film:
        """Create a film. Category IDs are stored as given."""
        return await self.film_repo.create(request)

    async def update_film(self, film_id: str, request: FilmUpdate) -> Optional[Film]:
        """Replace a film's fields, or return None if it does not exist."""
        return await self.film_repo.replace_fields(film_id, request.changes())

    async def delete_film(self, film_id: str) -> Optional[Film]:
        """Delete a film and return it, or None if it did not exist."""
        return await self.film_repo.delete(film_id)

    async def add_category_to_film(self, film_id: str, category_id: str) -> Film:
        """Append a category to a film's category list."""
        film = await self.film_repo.get_by_id(film_id)
        if not film:
            raise FilmNotFoundError(film_id)

        if category_id in film.categories:
            raise DuplicateAssociationError("film", film_id, category_id)

        return await self.film_repo.save(
            film, {"categories": film.categories + [category_id]}
        )
