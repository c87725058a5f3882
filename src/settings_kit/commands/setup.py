"""Setup command that writes settings.json for a Claude Code run."""

from pathlib import Path

import click

from settings_kit.context import SettingsKitContext
from settings_kit.error_boundary import cli_error_boundary
from settings_kit.io.settings_json import get_settings_path, setup_claude_settings


@click.command(name="setup")
@click.option(
    "--settings",
    "settings_input",
    envvar="INPUT_SETTINGS",
    default=None,
    help="Settings as inline JSON or a path to a settings file",
)
@click.option(
    "--home",
    "home_dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Home directory containing .claude/ (default from config)",
)
@click.option(
    "--strict/--lenient",
    default=None,
    help="Treat schema violations in the existing settings.json as errors",
)
@click.pass_obj
@cli_error_boundary
def setup(
    ctx: SettingsKitContext,
    settings_input: str | None,
    home_dir: Path | None,
    strict: bool | None,
) -> None:
    """Merge settings input into ~/.claude/settings.json."""
    home = home_dir if home_dir is not None else ctx.config.claude_home
    strict_mode = ctx.config.strict_existing if strict is None else strict

    settings = setup_claude_settings(settings_input, home, ctx.reader, strict_existing=strict_mode)

    click.echo(f"✓ Wrote {get_settings_path(home)} ({len(settings)} top-level key(s))")
