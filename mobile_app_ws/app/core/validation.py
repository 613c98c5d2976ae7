"""
Request body validation.

Handlers call ``validate_payload`` before touching storage.  It runs
the pydantic model over the decoded body and, instead of raising,
returns the list of violations found, each named by its wire field and
carrying a readable message.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..schemas.user import PASSWORD_MAX, PASSWORD_MIN

ModelT = TypeVar("ModelT", bound=BaseModel)

_LABELS = {
    "firstName": "First name",
    "lastName": "Last name",
    "email": "Email",
    "password": "Password",
}

_SIZE_MESSAGES = {
    "firstName": "First name must not be less than 2 characters",
    "lastName": "Last name must not be less than 2 characters",
    "password": (
        f"Password must be equal or greater than {PASSWORD_MIN} characters "
        f"and less than {PASSWORD_MAX} characters"
    ),
}

_NULL_TYPES = {"missing", "none_required"}
_SIZE_TYPES = {"string_too_short", "string_too_long"}


@dataclass(frozen=True)
class FieldViolation:
    field: str
    message: str


def _message_for(field: str, error: Dict[str, Any]) -> str:
    label = _LABELS.get(field, field)
    error_type = error["type"]
    if error_type in _NULL_TYPES or (error_type == "string_type" and error.get("input") is None):
        return f"{label} cannot be null"
    if error_type in _SIZE_TYPES and field in _SIZE_MESSAGES:
        return _SIZE_MESSAGES[field]
    if field == "email" and error_type == "value_error":
        return "Email must be a valid email address"
    if error_type == "string_type":
        return f"{label} must be a string"
    return error["msg"]


def validate_payload(
    model: Type[ModelT], data: Any
) -> Tuple[Optional[ModelT], List[FieldViolation]]:
    """Validate ``data`` against ``model``.

    Returns ``(instance, [])`` on success and ``(None, violations)``
    otherwise.  Only the first problem per field is reported.
    """
    if not isinstance(data, dict):
        return None, [FieldViolation("body", "Request body must be an object")]
    try:
        return model.model_validate(data), []
    except ValidationError as exc:
        violations: List[FieldViolation] = []
        seen = set()
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"]) or "body"
            if field in seen:
                continue
            seen.add(field)
            violations.append(FieldViolation(field, _message_for(field, error)))
        return None, violations


def violations_to_dict(violations: List[FieldViolation]) -> Dict[str, str]:
    return {v.field: v.message for v in violations}
