"""Parse and validate settings JSON from text or a file."""

import json
import logging
from typing import Any

from settings_kit.errors import JsonSyntaxError, SchemaViolationError
from settings_kit.formatting.diagnostics import format_json_syntax_error, format_schema_violations
from settings_kit.integrations.files.abc import SettingsFileReader
from settings_kit.models.settings import ClaudeSettings
from settings_kit.models.violations import ValidationErr
from settings_kit.validation.validator import validate_settings

logger = logging.getLogger(__name__)

EXISTING_SETTINGS_SOURCE = "existing settings.json"


def _reject_constant(doc: str, constant: str) -> Any:
    raise json.JSONDecodeError(f"Unexpected token {constant}", doc, doc.find(constant))


def decode_settings_json(settings_json: str) -> Any:
    """Decode strict JSON text.

    NaN, Infinity and -Infinity are rejected like any other invalid token.

    Raises:
        json.JSONDecodeError: If the text is not well-formed JSON
    """
    return json.loads(
        settings_json, parse_constant=lambda constant: _reject_constant(settings_json, constant)
    )


def parse_and_validate_settings_json(
    settings_json: str, source: str = "settings"
) -> ClaudeSettings:
    """Parse and validate settings from a JSON string.

    Args:
        settings_json: JSON text containing settings
        source: Source description for error messages

    Returns:
        Validated settings

    Raises:
        JsonSyntaxError: If the text is not well-formed JSON
        SchemaViolationError: If the JSON does not match the settings schema
    """
    try:
        parsed = decode_settings_json(settings_json)
    except json.JSONDecodeError as e:
        raise JsonSyntaxError(format_json_syntax_error(e, settings_json, source)) from None

    result = validate_settings(parsed)
    if isinstance(result, ValidationErr):
        message = format_schema_violations(result.violations, source)
        raise SchemaViolationError(message, result.violations)

    return result.settings


def load_and_validate_settings_file(path: str, reader: SettingsFileReader) -> ClaudeSettings:
    """Load and validate settings from a file path.

    The path is used as the source in error messages.

    Raises:
        FileNotFoundError: If the file does not exist
        OSError: If the file exists but cannot be read
        JsonSyntaxError: If the file is not well-formed JSON
        SchemaViolationError: If the file does not match the settings schema
    """
    content = reader.read_text(path)
    return parse_and_validate_settings_json(content, path)


def validate_existing_settings(settings_json: str, strict: bool = False) -> ClaudeSettings | Any:
    """Validate settings already on disk.

    JSON syntax errors are always fatal. Schema violations are fatal only in
    strict mode; otherwise they are logged as a warning and the parsed value
    is returned unchanged, so settings written before the schema was
    tightened keep working.

    Args:
        settings_json: Contents of the existing settings file
        strict: Whether schema violations are fatal

    Returns:
        Validated settings, or the raw parsed value in lenient mode when
        validation fails

    Raises:
        JsonSyntaxError: If the text is not well-formed JSON
        SchemaViolationError: If strict and the JSON does not match the schema
    """
    try:
        parsed = decode_settings_json(settings_json)
    except json.JSONDecodeError as e:
        diagnostic = format_json_syntax_error(e, settings_json, EXISTING_SETTINGS_SOURCE)
        logger.error("Error parsing existing settings file:\n%s", diagnostic)
        raise JsonSyntaxError(
            f"{diagnostic}\n\n"
            "Cannot proceed with invalid existing settings file. Please fix the JSON syntax."
        ) from None

    result = validate_settings(parsed)
    if isinstance(result, ValidationErr):
        message = format_schema_violations(result.violations, EXISTING_SETTINGS_SOURCE)
        if strict:
            raise SchemaViolationError(message, result.violations)

        logger.warning(
            "Existing settings file has validation issues:\n%s\n"
            "Using existing settings as-is for backward compatibility.",
            message,
        )
        return parsed

    return result.settings
