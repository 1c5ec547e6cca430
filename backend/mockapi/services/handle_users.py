"""User Handlers: list, get-by-id and create over an injected UserStore.

Invariants:
    - Handlers never touch store internals, only its public surface
    - get_user: unknown or malformed id -> UserNotFoundError (HTTP 400)
    - create_user expects fields that already passed validate_payload
    - create_user answers {"message": "user created", "id": <new id>}

Design Decisions:
    - Strict ASCII decimal coercion for path ids: "12abc", "١" and
      oversized digit runs are not users
    - Malformed ids reported as not-found with the raw segment echoed back,
      never a crash or a 500
"""

import logging
import re

from mockapi.core.domain_types import UserId, UserRecord
from mockapi.core.errors import UserNotFoundError
from mockapi.services.user_store import UserStore

logger = logging.getLogger(__name__)

# ASCII digits only; 18 digits keeps every id inside a signed 64-bit range
_DECIMAL_ID = re.compile(r"\s*([0-9]{1,18})\s*", re.ASCII)

USER_CREATED_MESSAGE = "user created"


def parse_user_id(raw: str) -> UserId | None:
    """Coerce a path segment to a user id; None when it is not a decimal integer."""
    match = _DECIMAL_ID.fullmatch(raw)
    if not match:
        return None
    return UserId(int(match.group(1)))


class UserHandlers:
    """Request handlers for the user resource."""

    def __init__(self, store: UserStore):
        self.store = store

    def list_users(self) -> list[UserRecord]:
        return self.store.list_all()

    def get_user(self, raw_id: str) -> UserRecord:
        """Fetch one user by its path id."""
        user_id = parse_user_id(raw_id)
        record = self.store.find_by_id(user_id) if user_id is not None else None
        if record is None:
            raise UserNotFoundError(raw_id)
        return record

    def create_user(self, fields: dict) -> dict:
        """Persist a validated payload and confirm with the new id."""
        record = self.store.create(fields)
        logger.info(
            f"User {record['id']} created", extra={"user_id": record["id"]},
        )
        return {"message": USER_CREATED_MESSAGE, "id": record["id"]}
