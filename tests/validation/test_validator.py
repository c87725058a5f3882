"""Tests for schema validation of decoded settings."""

from typing import Any

from settings_kit.models.violations import ValidationErr, ValidationOk, Violation
from settings_kit.validation.validator import validate_settings


def _violations(raw: Any) -> dict[str, Violation]:
    result = validate_settings(raw)
    assert isinstance(result, ValidationErr)
    return {v.path: v for v in result.violations}


def test_valid_settings() -> None:
    """Test valid settings produce ValidationOk with typed settings."""
    result = validate_settings({"model": "claude-opus", "env": {"DEBUG": "true"}})

    assert isinstance(result, ValidationOk)
    assert result.settings.model == "claude-opus"
    assert result.settings.env == {"DEBUG": "true"}


def test_unknown_keys_are_not_violations() -> None:
    """Test unrecognized top-level keys pass validation."""
    result = validate_settings({"someNewSetting": [1, 2, 3]})

    assert isinstance(result, ValidationOk)
    assert result.settings.other == {"someNewSetting": [1, 2, 3]}


def test_type_mismatch_names_json_types() -> None:
    """Test a wrong type reports expected and actual JSON type names."""
    violations = _violations({"permissions": {"allow": "not-array"}})

    violation = violations["permissions.allow"]
    assert violation.expected == "array"
    assert violation.actual == "string"
    assert violation.message == "Expected array, received string"


def test_collects_every_violation() -> None:
    """Test all fields are checked rather than stopping at the first failure."""
    violations = _violations(
        {
            "model": "",
            "env": "DEBUG=true",
            "permissions": {"allow": ["Bash", ""], "deny": "WebFetch"},
            "hooks": {"PreToolUse": [{"matcher": "", "hooks": []}]},
            "enableAllProjectMcpServers": "yes",
            "includeCoAuthoredBy": 1,
        }
    )

    assert set(violations) == {
        "model",
        "env",
        "permissions.allow.1",
        "permissions.deny",
        "hooks.PreToolUse.0.matcher",
        "hooks.PreToolUse.0.hooks",
        "enableAllProjectMcpServers",
        "includeCoAuthoredBy",
    }


def test_empty_string_messages() -> None:
    """Test empty strings get field-specific messages."""
    violations = _violations(
        {
            "model": "",
            "permissions": {"allow": [""]},
            "hooks": {
                "PreToolUse": [
                    {"matcher": "", "hooks": [{"type": "", "command": ""}]},
                ]
            },
        }
    )

    assert violations["model"].message == "Model name cannot be empty"
    assert violations["permissions.allow.0"].message == "Tool name cannot be empty"
    assert violations["hooks.PreToolUse.0.matcher"].message == "Matcher pattern cannot be empty"
    assert violations["hooks.PreToolUse.0.hooks.0.type"].message == "Hook type cannot be empty"
    assert violations["hooks.PreToolUse.0.hooks.0.command"].message == "Command cannot be empty"
    assert not violations["model"].is_type_mismatch


def test_empty_hooks_list() -> None:
    """Test a matcher group must define at least one hook."""
    violations = _violations({"hooks": {"PreToolUse": [{"matcher": "Bash", "hooks": []}]}})

    assert violations["hooks.PreToolUse.0.hooks"].message == "At least one hook must be defined"


def test_missing_required_field() -> None:
    """Test a missing matcher is reported as required."""
    violations = _violations({"hooks": {"PreToolUse": [{"hooks": [{"type": "command"}]}]}})

    assert violations["hooks.PreToolUse.0.matcher"].message == "Required"


def test_env_values_must_be_strings() -> None:
    """Test env values are not coerced to strings."""
    violations = _violations({"env": {"PORT": 8080}})

    violation = violations["env.PORT"]
    assert violation.expected == "string"
    assert violation.actual == "number"


def test_boolean_fields_are_strict() -> None:
    """Test boolean fields reject string spellings of booleans."""
    violations = _violations({"includeCoAuthoredBy": "true"})

    violation = violations["includeCoAuthoredBy"]
    assert violation.expected == "boolean"
    assert violation.actual == "string"


def test_non_object_document_is_root_violation() -> None:
    """Test a document that is not an object reports the root path."""
    violations = _violations(["model", "claude-opus"])

    violation = violations["root"]
    assert violation.expected == "object"
    assert violation.actual == "array"


def test_null_document_is_root_violation() -> None:
    """Test a JSON null document is reported at the root."""
    violations = _violations(None)

    assert violations["root"].actual == "null"
