"""Check command for the settings.json already on disk."""

from pathlib import Path

import click

from settings_kit.context import SettingsKitContext
from settings_kit.error_boundary import cli_error_boundary
from settings_kit.io.settings_json import get_settings_path
from settings_kit.models.settings import ClaudeSettings
from settings_kit.validation.settings import validate_existing_settings


@click.command(name="check")
@click.argument("path", required=False, type=click.Path(path_type=Path, dir_okay=False))
@click.option(
    "--strict/--lenient",
    default=None,
    help="Treat schema violations as errors (default from config, lenient if unset)",
)
@click.pass_obj
@cli_error_boundary
def check(ctx: SettingsKitContext, path: Path | None, strict: bool | None) -> None:
    """Check an existing settings.json (default: ~/.claude/settings.json)."""
    settings_path = path if path is not None else get_settings_path(ctx.config.claude_home)
    strict_mode = ctx.config.strict_existing if strict is None else strict

    try:
        content = ctx.reader.read_text(str(settings_path))
    except FileNotFoundError:
        click.echo(f"✓ No settings file at {settings_path} (nothing to check)")
        return

    result = validate_existing_settings(content, strict=strict_mode)

    if isinstance(result, ClaudeSettings):
        click.echo(f"✓ {settings_path} is valid")
    else:
        click.echo(f"⚠ {settings_path} has validation issues; it will be used as-is")
