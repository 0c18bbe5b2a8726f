"""Shared test fixtures: in-memory Mongo database, repositories and controllers.

Invariants:
    - Every test gets its own mongomock database; nothing touches a real server
    - Repositories and controllers are the real classes, wired the way
      Container.wire() wires them
"""

import os
import uuid

# Settings are cached on first use, so the environment is fixed before any app import
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-cinecatalog-0123456789")
os.environ.setdefault("LOG_JSON", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from mongomock_motor import AsyncMongoMockClient

from app.config.settings import get_settings
from app.controllers import CategoryController, FilmController
from app.repositories import CategoryRepository, FilmRepository
from app.schemas import CategoryCreate, FilmCreate


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def mongo_db():
    client = AsyncMongoMockClient()
    return client[f"cine_catalog_test_{uuid.uuid4().hex[:8]}"]


@pytest.fixture
def film_repo(mongo_db, settings):
    repo = FilmRepository(mongo_db)
    repo.set_settings(settings)
    return repo


@pytest.fixture
def category_repo(mongo_db, settings):
    repo = CategoryRepository(mongo_db)
    repo.set_settings(settings)
    return repo


@pytest.fixture
def film_controller(film_repo, category_repo, settings):
    return FilmController(film_repo, category_repo, api_prefix=settings.api_prefix)


@pytest.fixture
def category_controller(category_repo, film_repo):
    return CategoryController(category_repo, film_repo)


@pytest.fixture
def make_film(film_controller):
    """Create a film through the controller; keyword arguments override defaults."""
    async def _make(**overrides):
        data = {
            "name": "Inception",
            "description": "A thriller about dreams.",
            "release_date": "2010-07-16",
            "rating": 5,
            "category_ids": [],
        }
        data.update(overrides)
        return await film_controller.add_film(FilmCreate(**data))
    return _make


@pytest.fixture
def make_category(category_controller):
    """Create a category through the controller; keyword arguments override defaults."""
    async def _make(**overrides):
        data = {"name": "Science Fiction", "description": "Films about the future.", "films": []}
        data.update(overrides)
        return await category_controller.add_category(CategoryCreate(**data))
    return _make
