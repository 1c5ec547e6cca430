"""User Schemas: pydantic response contracts for the user resource.

Invariants:
    - UserResponse never invents fields: optional fields absent from the record
      stay absent in the JSON (routes serialize with exclude_unset)
    - UserCreated carries exactly message + id

Design Decisions:
    - Request bodies are NOT modelled here: create payloads are checked by the
      rule table in core/validation.py so the wording of failures stays ours
    - Separate from store records: schemas are API contracts (ADR: DDD boundary)
"""

from pydantic import BaseModel


class UserResponse(BaseModel):
    """One user record as returned by GET /user and GET /user/{id}."""
    id: int
    first_name: str
    last_name: str | None = None
    city: str | None = None
    country: str


class UserCreated(BaseModel):
    """Confirmation returned by POST /user."""
    message: str
    id: int


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    """Error envelope shared by every 4xx/5xx answer."""
    statusCode: int
    error: str
    message: str
