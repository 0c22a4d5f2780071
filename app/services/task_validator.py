"""Task Validator."""
from typing import Any, Dict, List, Sequence

from pydantic import BaseModel, ValidationError

from app.schemas.task import TITLE_MAX_LENGTH, TaskCreate, TaskUpdate

BODY_FIELD = "body"


def _field_name(loc: Sequence[Any]) -> str:
    """Name of the top-level field an error location points at."""
    # Errors raised while parsing a request carry a leading "body" segment
    if len(loc) > 1 and loc[0] == BODY_FIELD and isinstance(loc[1], str):
        return loc[1]
    if loc and isinstance(loc[0], str):
        return loc[0]
    return BODY_FIELD


def _reason(field: str, error: Dict[str, Any]) -> str:
    """Human-readable reason for a single pydantic error."""
    error_type = error.get("type")

    if field == "status":
        return "The selected status is invalid."
    if error_type in ("missing", "string_too_short") or (
        error_type == "string_type" and error.get("input") is None
    ):
        return f"The {field} field is required."
    if error_type == "string_type":
        return f"The {field} field must be a string."
    if error_type == "string_too_long":
        return f"The {field} field must not be greater than {TITLE_MAX_LENGTH} characters."
    if error_type in ("dict_type", "model_type", "model_attributes_type"):
        return "The request body must be a JSON object."
    if error_type == "json_invalid":
        return "The request body must be valid JSON."
    return str(error.get("msg", f"The {field} field is invalid."))


def format_validation_errors(errors: Sequence[Dict[str, Any]]) -> Dict[str, List[str]]:
    """
    Group pydantic errors by field.

    Args:
        errors: Errors as returned by ValidationError.errors()

    Returns:
        Mapping of field name to the list of reasons it was rejected
    """
    formatted: Dict[str, List[str]] = {}
    for error in errors:
        field = _field_name(error.get("loc", ()))
        reason = _reason(field, error)
        reasons = formatted.setdefault(field, [])
        if reason not in reasons:
            reasons.append(reason)
    return formatted


class TaskValidator:
    """Validate task payloads for create and update requests."""

    @staticmethod
    def _validate(schema: type[BaseModel], payload: Any, exclude_unset: bool) -> Dict[str, Any]:
        result = {
            "valid": True,
            "errors": {},
            "data": {}
        }

        if not isinstance(payload, dict):
            result["valid"] = False
            result["errors"] = {BODY_FIELD: ["The request body must be a JSON object."]}
            return result

        try:
            validated = schema.model_validate(payload)
        except ValidationError as e:
            result["valid"] = False
            result["errors"] = format_validation_errors(e.errors())
            return result

        result["data"] = validated.model_dump(mode="json", exclude_unset=exclude_unset)
        return result

    @staticmethod
    def validate_create(payload: Any) -> Dict[str, Any]:
        """
        Validate a task creation payload.

        Args:
            payload: Decoded JSON request body

        Returns:
            Dict with validation result; "data" holds title, description and
            status with defaults applied
        """
        return TaskValidator._validate(TaskCreate, payload, exclude_unset=False)

    @staticmethod
    def validate_update(payload: Any) -> Dict[str, Any]:
        """
        Validate a partial task update payload.

        Args:
            payload: Decoded JSON request body

        Returns:
            Dict with validation result; "data" holds only the fields that
            were supplied
        """
        return TaskValidator._validate(TaskUpdate, payload, exclude_unset=True)
