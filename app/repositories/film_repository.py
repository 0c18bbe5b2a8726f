"""
Film repository for database operations.
"""
from typing import Any, Dict, List, Optional
import logging
import re
import uuid

from pymongo import ReturnDocument

from app.schemas import Film, FilmCreate
from .base import save_versioned

logger = logging.getLogger(__name__)


def _to_film(doc: dict) -> Film:
    doc["film_id"] = doc.pop("_id")
    return Film(**doc)


def build_search_filter(search: Optional[str]) -> Dict[str, Any]:
    """
    Build a filter matching films whose name or description contains
    ``search``, ignoring case. An empty search matches every film.
    """
    if not search:
        return {}
    pattern = re.escape(search)
    return {
        "$or": [
            {"name": {"$regex": pattern, "$options": "i"}},
            {"description": {"$regex": pattern, "$options": "i"}},
        ]
    }


class FilmRepository:
    """Repository for film CRUD operations."""

    def __init__(self, db):
        self.db = db
        self.settings = None

    def set_settings(self, settings):
        self.settings = settings

    @property
    def collection(self):
        return self.db[self.settings.films_collection]

    async def create(self, request: FilmCreate) -> Film:
        """Create a new film."""
        film_id = f"film_{uuid.uuid4().hex[:12]}"

        film = Film(
            film_id=film_id,
            name=request.name,
            description=request.description,
            release_date=request.release_date,
            rating=request.rating,
            categories=list(request.category_ids),
        )

        doc = film.model_dump(exclude={"film_id"})
        doc["release_date"] = film.release_date.isoformat()
        await self.collection.insert_one({"_id": film_id, **doc})

        logger.info(f"Created film: {film_id} - {film.name}")
        return film

    async def get_by_id(self, film_id: str) -> Optional[Film]:
        """Get a film by ID."""
        doc = await self.collection.find_one({"_id": film_id})
        if doc:
            return _to_film(doc)
        return None

    async def get_many(self, film_ids: List[str]) -> List[Film]:
        """Get the films with the given IDs; unknown IDs are skipped."""
        if not film_ids:
            return []
        cursor = self.collection.find({"_id": {"$in": list(film_ids)}})
        films = []
        async for doc in cursor:
            films.append(_to_film(doc))
        return films

    async def search(self, search: Optional[str], skip: int, limit: int) -> List[Film]:
        """Get one page of films matching ``search``, in store order."""
        cursor = self.collection.find(build_search_filter(search), skip=skip, limit=limit)
        films = []
        async for doc in cursor:
            films.append(_to_film(doc))
        return films

    async def count(self, search: Optional[str]) -> int:
        """Count films matching ``search``."""
        return await self.collection.count_documents(build_search_filter(search))

    async def replace_fields(self, film_id: str, changes: Dict[str, Any]) -> Optional[Film]:
        """Overwrite fields in a single write and return the updated film."""
        doc = await self.collection.find_one_and_update(
            {"_id": film_id},
            {"$set": changes, "$inc": {"version": 1}},
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            return None
        logger.info(f"Updated film: {film_id}")
        return _to_film(doc)

    async def save(self, film: Film, changes: Dict[str, Any]) -> Film:
        """Persist ``changes`` on a loaded film, guarded by its version."""
        doc = await save_versioned(
            self.collection, "Film", film.film_id, film.version, changes
        )
        logger.info(f"Updated film: {film.film_id} -> version {doc['version']}")
        return _to_film(doc)

    async def delete(self, film_id: str) -> Optional[Film]:
        """Delete a film and return it, or None if it did not exist."""
        doc = await self.collection.find_one_and_delete({"_id": film_id})
        if doc:
            logger.info(f"Deleted film: {film_id}")
            return _to_film(doc)
        return None
