"""User Handlers: list, get, create semantics over an injected store.

Tests cover:
    - parse_user_id accepts ASCII decimal strings only (no Unicode digits, no huge runs)
    - get_user returns the record, raises UserNotFoundError otherwise
    - Malformed ids become not-found with the raw segment in the message
    - create_user answers {"message": "user created", "id": n}
    - Two handler instances over separate stores never interfere
"""

import pytest

from mockapi.core.errors import UserNotFoundError
from mockapi.core.seed_data import SEED_USERS
from mockapi.services.handle_users import UserHandlers, parse_user_id
from mockapi.services.user_store import UserStore


@pytest.mark.parametrize("raw, expected", [
    ("15", 15),
    ("007", 7),
    (" 3 ", 3),
    ("0", 0),
])
def test_parse_user_id_accepts_decimal(raw, expected):
    assert parse_user_id(raw) == expected


@pytest.mark.parametrize("raw", [
    "abc", "12abc", "-1", "1.5", "1_000", "", "0x1f",
    "١", "１", "9" * 19, "9" * 5000,
])
def test_parse_user_id_rejects_non_decimal(raw):
    assert parse_user_id(raw) is None


def test_list_users_returns_seed(handlers):
    users = handlers.list_users()
    assert len(users) == 14
    assert users[0] == SEED_USERS[0]


def test_get_user_found(handlers):
    assert handlers.get_user("4") == SEED_USERS[3]


def test_get_user_missing_raises(handlers):
    with pytest.raises(UserNotFoundError) as exc_info:
        handlers.get_user("999")
    assert exc_info.value.message == "id 999 not found"
    assert exc_info.value.http_status == 400


def test_get_user_malformed_is_not_found(handlers):
    with pytest.raises(UserNotFoundError) as exc_info:
        handlers.get_user("abc")
    assert exc_info.value.message == "id abc not found"


def test_create_user_confirms_new_id(handlers):
    result = handlers.create_user({"first_name": "Ada", "country": "UK"})
    assert result == {"message": "user created", "id": 15}
    assert handlers.get_user("15") == {"id": 15, "first_name": "Ada", "country": "UK"}


def test_separate_stores_do_not_interfere():
    a = UserHandlers(UserStore(SEED_USERS))
    b = UserHandlers(UserStore(SEED_USERS))
    a.create_user({"first_name": "Ada", "country": "UK"})
    assert len(a.list_users()) == 15
    assert len(b.list_users()) == 14
    assert b.create_user({"first_name": "Bob", "country": "US"})["id"] == 15
