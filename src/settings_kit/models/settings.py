"""Models for Claude Code settings.json structure.

Only the fields the action relies on are declared. Every model keeps unknown
keys (extra="allow") so settings written for newer Claude Code versions pass
through untouched.
"""

from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    field_validator,
)


def _require_tool_name(v: str) -> str:
    if not v:
        raise ValueError("Tool name cannot be empty")
    return v


ToolName = Annotated[StrictStr, AfterValidator(_require_tool_name)]


class _SettingsModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")


class HookCommand(_SettingsModel):
    """A single hook to run for a matched tool."""

    type: StrictStr  # e.g. "command", "log"
    command: StrictStr | None = None

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: str) -> str:
        """Validate hook type is non-empty."""
        if not v:
            raise ValueError("Hook type cannot be empty")
        return v

    @field_validator("command")
    @classmethod
    def validate_command(cls, v: str | None) -> str | None:
        """Validate command is non-empty when given."""
        if v is not None and not v:
            raise ValueError("Command cannot be empty")
        return v


class MatcherGroup(_SettingsModel):
    """Hooks that share the same tool-name matcher pattern."""

    matcher: StrictStr  # Tool name pattern (e.g., "Bash", "Write|Edit")
    hooks: list[HookCommand]

    @field_validator("matcher")
    @classmethod
    def validate_matcher(cls, v: str) -> str:
        """Validate matcher is non-empty."""
        if not v:
            raise ValueError("Matcher pattern cannot be empty")
        return v

    @field_validator("hooks")
    @classmethod
    def validate_hooks(cls, v: list[HookCommand]) -> list[HookCommand]:
        """Validate at least one hook is defined."""
        if not v:
            raise ValueError("At least one hook must be defined")
        return v


class HooksConfig(_SettingsModel):
    """Hook configurations keyed by lifecycle event."""

    pre_tool_use: list[MatcherGroup] | None = Field(default=None, alias="PreToolUse")


class Permissions(_SettingsModel):
    """Tool usage permissions."""

    allow: list[ToolName] | None = None
    deny: list[ToolName] | None = None


class ClaudeSettings(_SettingsModel):
    """Claude Code settings.json structure.

    Declared fields are validated; any other top-level key is preserved
    verbatim and available through ``other``.
    """

    model: StrictStr | None = None
    env: dict[StrictStr, StrictStr] | None = None
    permissions: Permissions | None = None
    hooks: HooksConfig | None = None
    enable_all_project_mcp_servers: StrictBool | None = Field(
        default=None, alias="enableAllProjectMcpServers"
    )
    include_co_authored_by: StrictBool | None = Field(default=None, alias="includeCoAuthoredBy")

    @field_validator("model")
    @classmethod
    def validate_model(cls, v: str | None) -> str | None:
        """Validate model name is non-empty when given."""
        if v is not None and not v:
            raise ValueError("Model name cannot be empty")
        return v

    @property
    def other(self) -> dict[str, Any]:
        """Get top-level keys that are not declared fields."""
        # Pydantic stores extra fields in __pydantic_extra__
        return dict(self.__pydantic_extra__ or {})

    def to_dict(self) -> dict[str, Any]:
        """Convert to settings.json format.

        Uses JSON key names, omits optional fields that were never given and
        merges the preserved extra fields back in.
        """
        return self.model_dump(by_alias=True, exclude_unset=True)
