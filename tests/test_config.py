"""Tests for settings-kit configuration loading."""

from pathlib import Path

import pytest

from settings_kit.config import FilesystemConfigOps, InMemoryConfigOps, KitConfig


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


def _write_config(home: Path, content: str) -> None:
    config_path = home / ".settings-kit" / "config.toml"
    config_path.parent.mkdir(parents=True)
    config_path.write_text(content, encoding="utf-8")


def test_path_is_under_home(home: Path) -> None:
    assert FilesystemConfigOps().path() == home / ".settings-kit" / "config.toml"


def test_missing_config_uses_defaults(home: Path) -> None:
    ops = FilesystemConfigOps()

    assert not ops.exists()
    assert ops.load_or_defaults() == KitConfig(claude_home=home, strict_existing=False)


def test_load_missing_config_raises(home: Path) -> None:
    with pytest.raises(FileNotFoundError):
        FilesystemConfigOps().load()


def test_load_config_values(home: Path) -> None:
    _write_config(home, 'claude_home = "/opt/runner"\nstrict_existing = true\n')

    config = FilesystemConfigOps().load_or_defaults()

    assert config == KitConfig(claude_home=Path("/opt/runner"), strict_existing=True)


def test_load_partial_config(home: Path) -> None:
    _write_config(home, "strict_existing = true\n")

    config = FilesystemConfigOps().load()

    assert config.claude_home == home
    assert config.strict_existing is True


def test_claude_home_expands_user(home: Path) -> None:
    _write_config(home, 'claude_home = "~/runner"\n')

    assert FilesystemConfigOps().load().claude_home == home / "runner"


def test_invalid_strict_existing(home: Path) -> None:
    _write_config(home, 'strict_existing = "yes"\n')

    with pytest.raises(ValueError, match="strict_existing"):
        FilesystemConfigOps().load()


def test_invalid_claude_home(home: Path) -> None:
    _write_config(home, "claude_home = 42\n")

    with pytest.raises(ValueError, match="claude_home"):
        FilesystemConfigOps().load()


def test_invalid_toml(home: Path) -> None:
    _write_config(home, "strict_existing = \n")

    with pytest.raises(ValueError, match="Invalid TOML"):
        FilesystemConfigOps().load()


def test_in_memory_config() -> None:
    config = KitConfig(claude_home=Path("/fake/home"), strict_existing=True)

    assert InMemoryConfigOps(config).load_or_defaults() == config
    assert not InMemoryConfigOps().exists()

    with pytest.raises(FileNotFoundError):
        InMemoryConfigOps().load()
