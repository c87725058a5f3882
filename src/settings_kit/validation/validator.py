"""Apply the settings schema to a decoded JSON value."""

from typing import Any

from pydantic import ValidationError
from pydantic_core import ErrorDetails

from settings_kit.models.settings import ClaudeSettings
from settings_kit.models.violations import (
    ValidationErr,
    ValidationOk,
    ValidationResult,
    Violation,
    format_path,
    json_type_name,
)

# pydantic error type -> JSON type name the field expects
_EXPECTED_TYPES = {
    "string_type": "string",
    "bool_type": "boolean",
    "list_type": "array",
    "dict_type": "object",
    "model_type": "object",
    "model_attributes_type": "object",
}


def violation_from_error(error: ErrorDetails) -> Violation:
    """Translate one pydantic error into a Violation."""
    path = format_path(error["loc"])
    error_type = error["type"]

    expected = _EXPECTED_TYPES.get(error_type)
    if expected is not None:
        actual = json_type_name(error["input"])
        return Violation(
            path=path,
            message=f"Expected {expected}, received {actual}",
            expected=expected,
            actual=actual,
        )

    if error_type == "missing":
        return Violation(path=path, message="Required")

    # Field validators raise ValueError; keep their message without pydantic's prefix
    if error_type == "value_error":
        ctx = error.get("ctx") or {}
        cause = ctx.get("error")
        if cause is not None:
            return Violation(path=path, message=str(cause))

    return Violation(path=path, message=error["msg"])


def validate_settings(raw: Any) -> ValidationResult:
    """Validate decoded JSON against the settings schema.

    All fields are checked in one pass, so the result lists every problem
    rather than the first one found. Unknown top-level keys are not
    violations; they are kept on the returned settings.

    Args:
        raw: Value produced by json.loads

    Returns:
        ValidationOk with typed settings, or ValidationErr with all violations
    """
    try:
        settings = ClaudeSettings.model_validate(raw)
    except ValidationError as e:
        violations = tuple(violation_from_error(error) for error in e.errors())
        return ValidationErr(violations=violations)
    return ValidationOk(settings=settings)
