"""Router fixtures: ASGI test client with controllers overridden.

Design Decisions:
    - ASGITransport does not run the lifespan, so no MongoDB connection is
      attempted; controllers come from the in-memory fixtures instead
    - Tokens are minted with the same helper the API verifies with
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.core.dependencies import get_category_controller, get_film_controller
from app.core.security import create_access_token
from app.main import app


@pytest.fixture
async def client(film_controller, category_controller):
    app.dependency_overrides[get_film_controller] = lambda: film_controller
    app.dependency_overrides[get_category_controller] = lambda: category_controller

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    token = create_access_token({"sub": "admin@example.com", "role": "ROLE_ADMIN"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def viewer_headers():
    token = create_access_token({"sub": "viewer@example.com", "role": "ROLE_USER"})
    return {"Authorization": f"Bearer {token}"}
