from settings_kit.models.settings import (
    ClaudeSettings,
    HookCommand,
    HooksConfig,
    MatcherGroup,
    Permissions,
)
from settings_kit.models.violations import (
    ValidationErr,
    ValidationOk,
    ValidationResult,
    Violation,
)

__all__ = [
    "ClaudeSettings",
    "HookCommand",
    "HooksConfig",
    "MatcherGroup",
    "Permissions",
    "ValidationErr",
    "ValidationOk",
    "ValidationResult",
    "Violation",
]
