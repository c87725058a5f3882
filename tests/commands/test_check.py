"""Tests for the check command."""

from pathlib import Path

from click.testing import CliRunner

from settings_kit.cli import cli
from settings_kit.config import KitConfig
from settings_kit.context import SettingsKitContext
from settings_kit.integrations.files.fake import FakeSettingsFileReader

DEFAULT_PATH = "/fake/home/.claude/settings.json"


def _context(files: dict[str, str], strict_existing: bool = False) -> SettingsKitContext:
    return SettingsKitContext.for_test(
        reader=FakeSettingsFileReader(files=files),
        config=KitConfig(claude_home=Path("/fake/home"), strict_existing=strict_existing),
    )


def test_check_valid_default_path() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["check"], obj=_context({DEFAULT_PATH: '{"model": "x"}'}))

    assert result.exit_code == 0, result.output
    assert f"✓ {DEFAULT_PATH} is valid" in result.output


def test_check_missing_file() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["check"], obj=_context({}))

    assert result.exit_code == 0
    assert "No settings file" in result.output


def test_check_explicit_path() -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli, ["check", "/repo/settings.json"], obj=_context({"/repo/settings.json": "{}"})
    )

    assert result.exit_code == 0, result.output
    assert "✓ /repo/settings.json is valid" in result.output


def test_check_lenient_invalid() -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli, ["check"], obj=_context({DEFAULT_PATH: '{"permissions": {"allow": "Bash"}}'})
    )

    assert result.exit_code == 0, result.output
    assert "has validation issues" in result.output


def test_check_strict_invalid() -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["check", "--strict"],
        obj=_context({DEFAULT_PATH: '{"permissions": {"allow": "Bash"}}'}),
    )

    assert result.exit_code == 1
    assert "Invalid existing settings.json configuration" in result.output


def test_check_strict_from_config() -> None:
    runner = CliRunner()
    ctx = _context({DEFAULT_PATH: '{"model": ""}'}, strict_existing=True)

    assert runner.invoke(cli, ["check"], obj=ctx).exit_code == 1
    assert runner.invoke(cli, ["check", "--lenient"], obj=ctx).exit_code == 0


def test_check_syntax_error_is_fatal_when_lenient() -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli, ["check", "--lenient"], obj=_context({DEFAULT_PATH: '{"model": "x",}'})
    )

    assert result.exit_code == 1
    assert "Cannot proceed with invalid existing settings file" in result.output
