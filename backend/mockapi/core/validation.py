"""Schema Validation: declarative rule table evaluated by one generic validator.

Invariants:
    - USER_CREATE_RULES is the single source of create-payload constraints
    - check_payload is pure: same payload, same answer, no side effects
    - Only the FIRST violated rule is reported, in rule-table order
    - Unknown keys never cause a rejection; validate_payload drops them
    - Strings are strict: numbers, booleans and null are not coerced

Design Decisions:
    - Rule table compiled into a pydantic model (cached per table): pydantic
      enforces the constraints, this module owns the wording
    - Messages mirror the Joi wording the mocked API answers with, so
      front-end error displays stay unchanged
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, create_model

from mockapi.core.domain_types import UserField
from mockapi.core.errors import PayloadValidationError


@dataclass(frozen=True)
class FieldRule:
    """One row of a rule table: field name, length bounds, presence."""
    name: str
    min_length: int
    max_length: int
    required: bool = False
    value_type: type = str


USER_CREATE_RULES: tuple[FieldRule, ...] = (
    FieldRule(UserField.FIRST_NAME.value, 3, 64, required=True),
    FieldRule(UserField.LAST_NAME.value, 3, 64),
    FieldRule(UserField.CITY.value, 1, 64),
    FieldRule(UserField.COUNTRY.value, 1, 64, required=True),
)

INVALID_JSON_MESSAGE = "Invalid request payload JSON format"


@lru_cache
def build_payload_model(
    rules: tuple[FieldRule, ...], name: str = "UserPayload",
) -> type[BaseModel]:
    """Compile a rule table into a strict pydantic model."""
    fields: dict[str, Any] = {}
    for rule in rules:
        constraints = Field(
            ... if rule.required else None,
            min_length=rule.min_length,
            max_length=rule.max_length,
        )
        fields[rule.name] = (rule.value_type, constraints)
    return create_model(
        name,
        __config__=ConfigDict(strict=True, extra="ignore"),
        **fields,
    )


def check_payload(
    payload: Any, rules: tuple[FieldRule, ...] = USER_CREATE_RULES,
) -> str | None:
    """Return None if payload satisfies every rule, else the first violation."""
    try:
        build_payload_model(rules).model_validate(payload)
    except ValidationError as exc:
        return describe_error(exc.errors()[0])
    return None


def validate_payload(
    payload: Any, rules: tuple[FieldRule, ...] = USER_CREATE_RULES,
) -> dict:
    """Validate and return only the rule-table fields actually supplied.

    Raises PayloadValidationError carrying the first violation message.
    """
    message = check_payload(payload, rules)
    if message is not None:
        raise PayloadValidationError(message)
    return {rule.name: payload[rule.name] for rule in rules if rule.name in payload}


def describe_error(error: dict) -> str:
    """Render one pydantic error entry as a single human-readable sentence."""
    loc = error.get("loc") or ()
    label = f'"{loc[0]}"' if loc else '"value"'
    ctx = error.get("ctx") or {}
    kind = error.get("type")

    if kind == "missing":
        return f"{label} is required"
    if kind == "string_type":
        return f"{label} must be a string"
    if kind == "string_too_short" and error.get("input") == "":
        return f"{label} is not allowed to be empty"
    if kind == "string_too_short":
        return f"{label} length must be at least {ctx['min_length']} characters long"
    if kind == "string_too_long":
        return (
            f"{label} length must be less than or equal to "
            f"{ctx['max_length']} characters long"
        )
    if kind in ("model_type", "model_attributes_type", "dict_type"):
        return f"{label} must be of type object"
    return f"{label} {error.get('msg', 'is invalid')}"
