"""Configuration data structures and loading.

Provides immutable config data loaded from ~/.settings-kit/config.toml.
Loaded once at the CLI entry point; a missing file means defaults.
"""

import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class KitConfig:
    """Immutable settings-kit configuration.

    All fields are read-only after construction.
    """

    claude_home: Path  # Directory containing .claude/settings.json
    strict_existing: bool  # Schema violations in existing settings are fatal

    @staticmethod
    def defaults() -> "KitConfig":
        return KitConfig(claude_home=Path.home(), strict_existing=False)


class ConfigOps(ABC):
    """Abstract interface for config access.

    Provides dependency injection for config loading, enabling in-memory
    implementations for tests without touching filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if config exists."""
        ...

    @abstractmethod
    def load(self) -> KitConfig:
        """Load config.

        Returns:
            KitConfig instance with loaded values

        Raises:
            FileNotFoundError: If config doesn't exist
            ValueError: If config values are malformed
        """
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the config file.

        Returns:
            Path to config file (for error messages and debugging)
        """
        ...

    def load_or_defaults(self) -> KitConfig:
        """Load config, falling back to defaults when there is none."""
        if not self.exists():
            return KitConfig.defaults()
        return self.load()


class FilesystemConfigOps(ConfigOps):
    """Production implementation that reads ~/.settings-kit/config.toml."""

    def exists(self) -> bool:
        return self.path().exists()

    def load(self) -> KitConfig:
        """Load config from ~/.settings-kit/config.toml.

        Keys not present fall back to their defaults.

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If the file is not valid TOML or a value has the wrong type
        """
        config_path = self.path()

        if not config_path.exists():
            raise FileNotFoundError(f"Config not found at {config_path}")

        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {config_path}: {e}") from None

        defaults = KitConfig.defaults()

        claude_home = data.get("claude_home", str(defaults.claude_home))
        if not isinstance(claude_home, str) or not claude_home:
            raise ValueError(f"'claude_home' in {config_path} must be a non-empty string")

        strict_existing = data.get("strict_existing", defaults.strict_existing)
        if not isinstance(strict_existing, bool):
            raise ValueError(f"'strict_existing' in {config_path} must be true or false")

        return KitConfig(
            claude_home=Path(claude_home).expanduser(),
            strict_existing=strict_existing,
        )

    def path(self) -> Path:
        """Get the path to the config file.

        Returns:
            Path to ~/.settings-kit/config.toml
        """
        return Path.home() / ".settings-kit" / "config.toml"


class InMemoryConfigOps(ConfigOps):
    """Test implementation that stores config in memory without touching filesystem."""

    def __init__(self, config: KitConfig | None = None) -> None:
        """Initialize in-memory config ops.

        Args:
            config: Initial config state (None = config doesn't exist)
        """
        self._config = config

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> KitConfig:
        if self._config is None:
            raise FileNotFoundError(f"Config not found at {self.path()}")
        return self._config

    def path(self) -> Path:
        """Get fake path for error messages."""
        return Path("/fake/settings-kit/config.toml")
