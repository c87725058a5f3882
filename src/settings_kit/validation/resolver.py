"""Resolve a settings input string to validated settings.

The input may be inline JSON or a path to a settings file. Inline JSON is
tried first. Only a JSON syntax error moves on to reading a file: inline
JSON that decodes but fails the schema is reported as is, never retried as
a path, so a real config bug does not turn into a "file not found".

When the file does not exist either, the first character decides which
error the user sees. Input starting with "{" or "[" was meant as JSON, so
the original syntax error is raised. Anything else gets an error saying it
is neither JSON nor a readable file.
"""

import logging

from settings_kit.errors import AmbiguousInputError, JsonSyntaxError
from settings_kit.integrations.files.abc import SettingsFileReader
from settings_kit.models.settings import ClaudeSettings
from settings_kit.validation.settings import (
    load_and_validate_settings_file,
    parse_and_validate_settings_json,
)

logger = logging.getLogger(__name__)

INPUT_SETTINGS_SOURCE = "input settings"

_JSON_LEADING_CHARS = ("{", "[")


def resolve_settings_input(settings_input: str, reader: SettingsFileReader) -> ClaudeSettings:
    """Resolve settings input given as JSON text or a file path.

    Args:
        settings_input: JSON string or path to a settings file
        reader: File reader used when the input is not valid JSON

    Returns:
        Validated settings

    Raises:
        JsonSyntaxError: If inline JSON (or the file's JSON) is malformed
        SchemaViolationError: If the JSON does not match the settings schema
        AmbiguousInputError: If the input is neither JSON nor an existing file
        OSError: If the file exists but cannot be read
    """
    trimmed = settings_input.strip()

    try:
        settings = parse_and_validate_settings_json(trimmed, INPUT_SETTINGS_SOURCE)
    except JsonSyntaxError as syntax_error:
        logger.info("Settings input is not valid JSON, treating as file path: %s", trimmed)
        return _resolve_settings_file(trimmed, syntax_error, reader)

    logger.info("Parsed and validated settings input as JSON")
    return settings


def _resolve_settings_file(
    path: str, syntax_error: JsonSyntaxError, reader: SettingsFileReader
) -> ClaudeSettings:
    try:
        settings = load_and_validate_settings_file(path, reader)
    except FileNotFoundError as file_error:
        if path.startswith(_JSON_LEADING_CHARS):
            logger.error("Input appears to be malformed JSON rather than a file path.")
            raise syntax_error from None

        raise AmbiguousInputError(
            "Settings input is neither valid JSON nor a readable file path.\n\n"
            f"Failed to read settings file: {file_error}\n\n"
            f"Input was also not valid JSON:\n{syntax_error}"
        ) from None

    logger.info("Successfully read and validated settings from file: %s", path)
    return settings
