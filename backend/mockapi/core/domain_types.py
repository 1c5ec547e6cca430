"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps int: ids are server-assigned, never client-supplied
    - UserField enumerates every client-writable field; "id" is not one of them

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
    - Records stay plain dicts: they are JSON documents, not behaviour carriers
"""

from enum import Enum
from typing import Any, NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)


# ─── Record Types ────────────────────────────────────────────────

UserRecord = dict[str, Any]


# ─── Enums ───────────────────────────────────────────────────────

class UserField(str, Enum):
    """Client-writable user fields, in schema order."""
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    CITY = "city"
    COUNTRY = "country"
