"""User Routes: GET /user, GET /user/{id}, POST /user.

Invariants:
    - Routes never contain business logic (delegate to UserHandlers)
    - POST payload validated by dependency before the route body runs
    - Optional fields absent from a record stay absent in the response
    - Missing user answers 400 {"message": "id <id> not found"}, not 404

Design Decisions:
    - Path id declared as str: coercion (and its not-found fallback) belongs to
      the handler, not to FastAPI's int converter which would answer 422/400
      with its own wording
    - Successful POST answers 200, matching the mocked API
"""

import logging

from fastapi import APIRouter, Depends

from mockapi.api.dependencies import get_user_handlers, validated_user_payload
from mockapi.schemas.user import ErrorResponse, UserCreated, UserResponse
from mockapi.services.handle_users import UserHandlers

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/user", tags=["user"])

_BAD_REQUEST = {400: {"model": ErrorResponse}}


@router.get(
    "", response_model=list[UserResponse], response_model_exclude_unset=True,
)
async def list_users(handlers: UserHandlers = Depends(get_user_handlers)):
    """All users in insertion order."""
    return handlers.list_users()


@router.get(
    "/{user_id}", response_model=UserResponse,
    response_model_exclude_unset=True, responses=_BAD_REQUEST,
)
async def get_user(
    user_id: str, handlers: UserHandlers = Depends(get_user_handlers),
):
    """One user by id."""
    return handlers.get_user(user_id)


@router.post("", response_model=UserCreated, responses=_BAD_REQUEST)
async def create_user(
    fields: dict = Depends(validated_user_payload),
    handlers: UserHandlers = Depends(get_user_handlers),
):
    """Create a user from a validated payload."""
    return handlers.create_user(fields)
