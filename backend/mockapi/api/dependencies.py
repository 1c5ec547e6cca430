"""Route Dependencies: store injection and pre-handler payload validation.

Invariants:
    - The store is read from app.state, never from a module global
    - validated_user_payload runs BEFORE the route body: an invalid payload
      never reaches a handler, so no mutation is attempted
    - Failures raise PayloadValidationError (400) with the rule's message verbatim

Design Decisions:
    - Raw body parsed here instead of a pydantic body parameter: FastAPI's own
      body validation would answer with its own wording and field list
"""

import json

from fastapi import Depends, Request

from mockapi.core.errors import PayloadValidationError
from mockapi.core.validation import INVALID_JSON_MESSAGE, validate_payload
from mockapi.services.handle_users import UserHandlers
from mockapi.services.user_store import UserStore


def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store


def get_user_handlers(store: UserStore = Depends(get_user_store)) -> UserHandlers:
    return UserHandlers(store)


async def validated_user_payload(request: Request) -> dict:
    """Parse the JSON body and check it against the user rule table."""
    body = await request.body()
    if not body.strip():
        payload = None
    else:
        try:
            payload = json.loads(body)
        except ValueError:
            raise PayloadValidationError(INVALID_JSON_MESSAGE)
    return validate_payload(payload)
