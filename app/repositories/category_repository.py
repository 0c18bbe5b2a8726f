"""
Category repository for database operations.
"""
from typing import Any, Dict, List, Optional
import logging
import uuid

from app.schemas import Category, CategoryCreate
from .base import save_versioned

logger = logging.getLogger(__name__)


def _to_category(doc: dict) -> Category:
    doc["category_id"] = doc.pop("_id")
    return Category(**doc)


class CategoryRepository:
    """Repository for category CRUD operations."""

    def __init__(self, db):
        self.db = db
        self.settings = None

    def set_settings(self, settings):
        self.settings = settings

    @property
    def collection(self):
        return self.db[self.settings.categories_collection]

    async def create(self, request: CategoryCreate) -> Category:
        """Create a new category."""
        category_id = f"cat_{uuid.uuid4().hex[:12]}"

        category = Category(
            category_id=category_id,
            name=request.name,
            description=request.description,
            films=list(request.films),
        )

        await self.collection.insert_one({
            "_id": category_id,
            **category.model_dump(exclude={"category_id"})
        })

        logger.info(f"Created category: {category_id} - {category.name}")
        return category

    async def get_by_id(self, category_id: str) -> Optional[Category]:
        """Get a category by ID."""
        doc = await self.collection.find_one({"_id": category_id})
        if doc:
            return _to_category(doc)
        return None

    async def get_all(self) -> List[Category]:
        """Get all categories."""
        cursor = self.collection.find()
        categories = []
        async for doc in cursor:
            categories.append(_to_category(doc))
        return categories

    async def get_many(self, category_ids: List[str]) -> List[Category]:
        """Get the categories with the given IDs; unknown IDs are skipped."""
        if not category_ids:
            return []
        cursor = self.collection.find({"_id": {"$in": list(category_ids)}})
        categories = []
        async for doc in cursor:
            categories.append(_to_category(doc))
        return categories

    async def save(self, category: Category, changes: Dict[str, Any]) -> Category:
        """Persist ``changes`` on a loaded category, guarded by its version."""
        doc = await save_versioned(
            self.collection, "Category", category.category_id, category.version, changes
        )
        logger.info(f"Updated category: {category.category_id} -> version {doc['version']}")
        return _to_category(doc)

    async def delete(self, category_id: str) -> Optional[Category]:
        """Delete a category and return it, or None if it did not exist."""
        doc = await self.collection.find_one_and_delete({"_id": category_id})
        if doc:
            logger.info(f"Deleted category: {category_id}")
            return _to_category(doc)
        return None
