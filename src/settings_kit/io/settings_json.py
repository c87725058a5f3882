"""I/O operations for Claude Code settings.json files.

This module writes the settings file Claude Code reads at startup, merging
existing settings with the action's settings input, with atomic writes.
"""

import json
import logging
from pathlib import Path
from typing import Any

from settings_kit.integrations.files.abc import SettingsFileReader
from settings_kit.models.settings import ClaudeSettings
from settings_kit.validation.resolver import resolve_settings_input
from settings_kit.validation.settings import validate_existing_settings

logger = logging.getLogger(__name__)


def get_settings_path(home_dir: Path) -> Path:
    """Get settings.json path under a home directory.

    Returns:
        Path to <home_dir>/.claude/settings.json
    """
    return home_dir / ".claude" / "settings.json"


def save_settings(settings_path: Path, data: dict[str, Any]) -> None:
    """Save settings.json to disk atomically.

    Writes to a temporary file first, then renames to avoid corruption.
    Creates parent directories if they don't exist.

    Args:
        settings_path: Path to settings.json file
        data: Settings mapping to save
    """
    settings_path.parent.mkdir(parents=True, exist_ok=True)

    temp_path = settings_path.with_suffix(".json.tmp")

    with temp_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, allow_nan=False)
        f.write("\n")

    temp_path.replace(settings_path)


def load_existing_settings(settings_path: Path, strict: bool) -> dict[str, Any]:
    """Load the settings file already on disk.

    Returns an empty mapping when the file does not exist. In lenient mode a
    file that fails schema validation is returned as parsed.

    Raises:
        JsonSyntaxError: If the file is not well-formed JSON
        SchemaViolationError: If strict and the file does not match the schema
    """
    if not settings_path.exists():
        logger.info("No existing settings file found, creating new one")
        return {}

    existing = validate_existing_settings(settings_path.read_text(encoding="utf-8"), strict)
    if isinstance(existing, ClaudeSettings):
        return existing.to_dict()
    if not isinstance(existing, dict):
        raise ValueError(
            f"Existing settings file {settings_path} must contain a JSON object, "
            f"found {type(existing).__name__}"
        )
    return existing


def setup_claude_settings(
    settings_input: str | None,
    home_dir: Path,
    reader: SettingsFileReader,
    strict_existing: bool = False,
) -> dict[str, Any]:
    """Write settings.json for a Claude Code run.

    Existing settings are kept, project MCP servers are enabled, and the
    settings input (inline JSON or a file path) is layered on top.

    Args:
        settings_input: JSON string or settings file path, or None
        home_dir: Home directory containing .claude/settings.json
        reader: File reader for settings given as a path
        strict_existing: Whether schema violations in the existing file are fatal

    Returns:
        The settings mapping that was written
    """
    settings_path = get_settings_path(home_dir)
    logger.info("Setting up Claude settings at: %s", settings_path)

    settings = load_existing_settings(settings_path, strict_existing)
    settings = {**settings, "enableAllProjectMcpServers": True}

    if settings_input is not None and settings_input.strip():
        logger.info("Processing settings input...")
        input_settings = resolve_settings_input(settings_input, reader)
        settings = {**settings, **input_settings.to_dict()}
        logger.info("Merged settings with input settings")

    save_settings(settings_path, settings)
    logger.info("Settings saved successfully")
    return settings
