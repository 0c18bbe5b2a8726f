"""
Catalog store owning the MongoDB connection, plus helpers shared by repositories.
"""
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ReturnDocument
from typing import Any, Dict, Optional
import logging

from app.config.settings import Settings, get_settings
from app.utils.exceptions import ConcurrentUpdateError

logger = logging.getLogger(__name__)


class CatalogStore:
    """Handle on the catalog database with an explicit connect/disconnect lifecycle."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.client: Optional[AsyncIOMotorClient] = None
        self.db: Optional[AsyncIOMotorDatabase] = None

    async def connect(self) -> None:
        """Establish connection to MongoDB."""
        try:
            self.client = AsyncIOMotorClient(self.settings.mongodb_uri)
            self.db = self.client[self.settings.mongodb_database]
            await self.client.admin.command('ping')
            logger.info(f"Connected to MongoDB: {self.settings.mongodb_database}")
        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            raise

    async def disconnect(self) -> None:
        """Close MongoDB connection."""
        if self.client:
            self.client.close()
            self.client = None
            self.db = None
            logger.info("Disconnected from MongoDB")

    @property
    def is_connected(self) -> bool:
        """Check if connected to MongoDB."""
        return self.client is not None and self.db is not None


async def save_versioned(
    collection,
    entity: str,
    entity_id: str,
    version: int,
    changes: Dict[str, Any],
) -> Dict[str, Any]:
    """
    Write ``changes`` only if the stored document still has ``version``.

    The version is incremented on success and the updated document is
    returned. A document that was modified or removed since it was
    loaded raises ConcurrentUpdateError.
    """
    doc = await collection.find_one_and_update(
        {"_id": entity_id, "version": version},
        {"$set": changes, "$inc": {"version": 1}},
        return_document=ReturnDocument.AFTER,
    )
    if doc is None:
        logger.warning(f"Stale save rejected: {entity} {entity_id} at version {version}")
        raise ConcurrentUpdateError(entity, entity_id, version)
    return doc
