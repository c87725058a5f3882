"""Violation and result types for settings validation.

Validation never raises for structurally wrong input. It returns either
ValidationOk with the typed settings or ValidationErr carrying every
violation found.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from settings_kit.models.settings import ClaudeSettings

ROOT_PATH = "root"


@dataclass(frozen=True)
class Violation:
    """A single field-level validation failure."""

    path: str  # Dot-joined field path, or "root"
    message: str
    expected: str | None = None
    actual: str | None = None

    @property
    def is_type_mismatch(self) -> bool:
        return self.expected is not None and self.actual is not None


@dataclass(frozen=True)
class ValidationOk:
    settings: ClaudeSettings


@dataclass(frozen=True)
class ValidationErr:
    violations: tuple[Violation, ...]


ValidationResult = ValidationOk | ValidationErr


def json_type_name(value: Any) -> str:
    """Name the JSON type of a decoded value."""
    if value is None:
        return "null"
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int | float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def format_path(loc: Sequence[int | str]) -> str:
    """Dot-join a location, or return "root" for the document itself."""
    if not loc:
        return ROOT_PATH
    return ".".join(str(part) for part in loc)
