"""Validate command for settings input."""

import click

from settings_kit.context import SettingsKitContext
from settings_kit.error_boundary import cli_error_boundary
from settings_kit.models.settings import ClaudeSettings
from settings_kit.validation.resolver import resolve_settings_input


def describe_settings(settings: ClaudeSettings) -> list[str]:
    """Summarize the recognized fields of validated settings, one line each."""
    lines: list[str] = []

    if settings.model is not None:
        lines.append(f"model: {settings.model}")

    if settings.env is not None:
        lines.append(f"env: {len(settings.env)} variable(s)")

    if settings.permissions is not None:
        allow = settings.permissions.allow or []
        deny = settings.permissions.deny or []
        lines.append(f"permissions: {len(allow)} allowed, {len(deny)} denied")

    if settings.hooks is not None and settings.hooks.pre_tool_use is not None:
        lines.append(f"hooks.PreToolUse: {len(settings.hooks.pre_tool_use)} matcher group(s)")

    if settings.enable_all_project_mcp_servers is not None:
        lines.append(f"enableAllProjectMcpServers: {settings.enable_all_project_mcp_servers}")

    if settings.include_co_authored_by is not None:
        lines.append(f"includeCoAuthoredBy: {settings.include_co_authored_by}")

    other = settings.other
    if other:
        lines.append(f"other keys (passed through): {', '.join(sorted(other))}")

    return lines


@click.command(name="validate")
@click.argument("settings_input")
@click.pass_obj
@cli_error_boundary
def validate(ctx: SettingsKitContext, settings_input: str) -> None:
    """Validate SETTINGS_INPUT, given as inline JSON or a settings file path."""
    settings = resolve_settings_input(settings_input, ctx.reader)

    click.echo("✓ Settings are valid")
    for line in describe_settings(settings):
        click.echo(f"  {line}")
