"""
Dependency injection container wiring the store, repositories and controllers.
"""
from typing import Optional
import logging

from app.config.settings import get_settings
from app.repositories import (
    CatalogStore,
    CategoryRepository,
    FilmRepository,
)
from app.controllers import (
    CategoryController,
    FilmController,
)


logger = logging.getLogger(__name__)


class Container:
    """Dependency injection container."""

    def __init__(self):
        self.settings = get_settings()
        self.store = CatalogStore(self.settings)

        # Repositories
        self.film_repo: Optional[FilmRepository] = None
        self.category_repo: Optional[CategoryRepository] = None

        # Controllers
        self.film_controller: Optional[FilmController] = None
        self.category_controller: Optional[CategoryController] = None

    def wire(self, db) -> None:
        """Build repositories and controllers on top of a database handle."""
        self.film_repo = FilmRepository(db)
        self.film_repo.set_settings(self.settings)

        self.category_repo = CategoryRepository(db)
        self.category_repo.set_settings(self.settings)

        self.film_controller = FilmController(
            film_repo=self.film_repo,
            category_repo=self.category_repo,
            api_prefix=self.settings.api_prefix,
        )
        self.category_controller = CategoryController(
            category_repo=self.category_repo,
            film_repo=self.film_repo,
        )

    async def initialize(self) -> None:
        """Initialize all components (called at startup)."""
        logger.info("Initializing dependency container...")
        self.settings.ensure_directories()

        await self.store.connect()
        self.wire(self.store.db)

        logger.info("Dependency container initialized")

    async def shutdown(self) -> None:
        """Cleanup on shutdown."""
        logger.info("Shutting down dependency container...")
        await self.store.disconnect()
        logger.info("Dependency container shutdown complete")


# Global container instance
container = Container()


# Dependency functions for FastAPI
def get_film_controller() -> FilmController:
    """Dependency for film controller."""
    return container.film_controller


def get_category_controller() -> CategoryController:
    """Dependency for category controller."""
    return container.category_controller
