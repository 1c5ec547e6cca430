"""Service test fixtures: stores seeded from the fixed dataset.

Invariants:
    - Every test gets its own UserStore (no shared state between tests)
"""

import pytest

from mockapi.core.seed_data import SEED_USERS
from mockapi.services.handle_users import UserHandlers
from mockapi.services.user_store import UserStore


@pytest.fixture
def store():
    return UserStore(SEED_USERS)


@pytest.fixture
def handlers(store):
    return UserHandlers(store)
