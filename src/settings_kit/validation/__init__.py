from settings_kit.validation.resolver import resolve_settings_input
from settings_kit.validation.settings import (
    load_and_validate_settings_file,
    parse_and_validate_settings_json,
    validate_existing_settings,
)
from settings_kit.validation.validator import validate_settings
from settings_kit.models.violations import (
    ValidationErr,
    ValidationOk,
    ValidationResult,
    Violation,
)

__all__ = [
    "ValidationErr",
    "ValidationOk",
    "ValidationResult",
    "Violation",
    "load_and_validate_settings_file",
    "parse_and_validate_settings_json",
    "resolve_settings_input",
    "validate_existing_settings",
    "validate_settings",
]
