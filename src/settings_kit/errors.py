"""Exceptions raised at the settings validation boundary.

Each exception message is display-ready: it names its source and carries
every hint or violation, so callers only need to surface str(error).

File errors are not wrapped: a missing file is the builtin FileNotFoundError
and any other read failure is the OSError the reader raised.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from settings_kit.models.violations import Violation


class SettingsError(ValueError):
    """Base class for settings input that cannot be used."""


class JsonSyntaxError(SettingsError):
    """Settings text is not well-formed JSON."""


class SchemaViolationError(SettingsError):
    """Settings JSON is well-formed but does not match the schema."""

    def __init__(self, message: str, violations: "tuple[Violation, ...]") -> None:
        super().__init__(message)
        self.violations = violations


class AmbiguousInputError(SettingsError):
    """Settings input is neither valid JSON nor a readable file path."""
