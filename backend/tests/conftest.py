"""Root conftest: shared test configuration and fixtures.

Invariants:
    - Every test gets a fresh app with its own seeded UserStore
    - No test touches the module-level app in mockapi.main

Design Decisions:
    - httpx AsyncClient over ASGITransport: exercises routing, dependencies
      and error handlers in-process, no socket
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient

# Keep test output readable
os.environ.setdefault("LOG_FORMAT", "text")

from mockapi.config import Settings  # noqa: E402
from mockapi.core.seed_data import SEED_USERS  # noqa: E402
from mockapi.main import create_app  # noqa: E402


@pytest.fixture
def settings():
    return Settings(host="testserver", port=7000, log_format="text")


@pytest.fixture
def app(settings):
    return create_app(settings, seed=SEED_USERS)


@pytest.fixture
async def client(app):
    """FastAPI test client bound to a fresh app."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
