"""User Store: in-memory, ordered, uniquely keyed collection of user records.

Invariants:
    - Seed loaded wholesale at construction; next id starts at len(seed) + 1
    - Ids are unique and monotonic: the counter only ever increases
    - Insertion order preserved for listing
    - create() is the only mutator; allocation + append + increment happen under one lock
    - Callers only ever receive copies: no record reference escapes the store

Design Decisions:
    - Explicitly owned instance, no module-level singleton: each app (and each
      test) builds its own store, so instances never interfere
    - threading.Lock over asyncio.Lock: the store is plain synchronous code and
      may be driven from several threads at once (threadpool routes, workers)
    - Reads take the lock too: a snapshot never contains a half-appended record
    - Records indexed by id alongside the ordered list: O(1) find_by_id
"""

import logging
import threading
from collections.abc import Iterable, Mapping

from mockapi.core.domain_types import UserId, UserRecord

logger = logging.getLogger(__name__)


class UserStore:
    """Authoritative in-memory user collection plus its id counter."""

    def __init__(self, seed: Iterable[Mapping] = ()):
        self._lock = threading.Lock()
        self._records: list[UserRecord] = []
        self._by_id: dict[int, UserRecord] = {}
        for row in seed:
            record = dict(row)
            user_id = record.get("id")
            if not isinstance(user_id, int) or isinstance(user_id, bool):
                raise ValueError(f"seed record has no integer id: {record!r}")
            if user_id in self._by_id:
                raise ValueError(f"duplicate seed id {user_id}")
            self._records.append(record)
            self._by_id[user_id] = record

        self._next_id = len(self._records) + 1
        if self._by_id and max(self._by_id) >= self._next_id:
            raise ValueError(
                f"seed id {max(self._by_id)} would collide with "
                f"counter start {self._next_id}",
            )
        logger.debug(f"User store seeded with {len(self._records)} records")

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    @property
    def next_id(self) -> UserId:
        """Id the next create() will assign."""
        with self._lock:
            return UserId(self._next_id)

    def list_all(self) -> list[UserRecord]:
        """All records in insertion order."""
        with self._lock:
            return [dict(r) for r in self._records]

    def find_by_id(self, user_id: int) -> UserRecord | None:
        """Record with this id, or None. Absence is a normal outcome."""
        with self._lock:
            record = self._by_id.get(user_id)
            return dict(record) if record is not None else None

    def create(self, fields: Mapping) -> UserRecord:
        """Allocate the next id, append the record, return a copy of it.

        Any "id" key in fields is overridden: ids are server-assigned.
        """
        with self._lock:
            user_id = UserId(self._next_id)
            record: UserRecord = {"id": user_id}
            record.update((k, v) for k, v in fields.items() if k != "id")
            self._records.append(record)
            self._by_id[user_id] = record
            self._next_id += 1
            return dict(record)
