"""
Roster Backend — Request Validation
=====================================

What:  Explicit validation functions, one per input shape.
How:   Route handlers call these with the raw path parameter or decoded JSON
       body before touching the store. Body checks are done by the Pydantic
       request models; this module turns Pydantic's errors into readable
       messages and raises them together as one ValidationError (→ 400).

Functions:
    parse_user_id(raw)            → int
    validate_create_user(payload) → CreateUserRequest
    validate_update_user(payload) → UpdateUserRequest
"""

import logging
import re
from typing import Any, Dict, List, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from roster.exceptions import ValidationError
from roster.models.user import Role
from roster.schemas.user import CreateUserRequest, UpdateUserRequest

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Optional minus sign followed by ASCII digits only
_INTEGER_PATTERN = re.compile(r"-?[0-9]+")

ROLE_VALUES = ", ".join(role.value for role in Role)


def parse_user_id(raw: str) -> int:
    """
    Parse a user id path parameter.

    Raises:
        ValidationError: raw is not a plain decimal integer ("abc", "1.5", "")
                         or has too many digits to convert.
    """
    if _INTEGER_PATTERN.fullmatch(raw):
        try:
            return int(raw)
        except ValueError:
            # Longer than the interpreter's int string conversion limit
            pass
    raise ValidationError(
        "Validation failed (numeric string is expected)",
        context={"value": raw[:50]},
    )


def validate_create_user(payload: Any) -> CreateUserRequest:
    """Validate a POST /users body. Every field is required."""
    return _validate(CreateUserRequest, payload)


def validate_update_user(payload: Any) -> UpdateUserRequest:
    """Validate a PATCH /users/{id} body. Every field is optional."""
    return _validate(UpdateUserRequest, payload)


def _validate(model: Type[ModelT], payload: Any) -> ModelT:
    if not isinstance(payload, dict):
        raise ValidationError(["request body must be a JSON object"])

    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        messages = _collect_messages(exc.errors())
        logger.debug("%s rejected: %s", model.__name__, messages)
        raise ValidationError(messages, context={"shape": model.__name__})


def _collect_messages(errors: List[Dict[str, Any]]) -> List[str]:
    messages: List[str] = []
    for error in errors:
        message = _describe(error)
        if message not in messages:
            messages.append(message)
    return messages


def _describe(error: Dict[str, Any]) -> str:
    """Turn one Pydantic error dict into a sentence naming the field."""
    loc = error.get("loc") or ()
    field = str(loc[0]) if loc else "body"
    kind = error.get("type", "")
    ctx = error.get("ctx") or {}

    if kind == "missing":
        return f"{field} should not be empty"
    if kind == "string_type":
        return f"{field} must be a string"
    if kind == "string_too_short":
        return f"{field} must be longer than or equal to {ctx.get('min_length', 1)} characters"
    if kind in ("int_type", "int_parsing", "int_from_float"):
        return f"{field} must be an integer number"
    if kind == "greater_than_equal":
        return f"{field} must not be less than {ctx.get('ge')}"
    if kind == "enum":
        return f"{field} must be one of the following values: {ROLE_VALUES}"
    return f"{field}: {error.get('msg', 'is invalid')}"
