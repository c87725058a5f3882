"""Application context with dependency injection.

The SettingsKitContext dataclass holds the dependencies commands need (file
reader, config) and is created once at CLI entry point, then threaded through
the application via Click's context system.
"""

from dataclasses import dataclass
from pathlib import Path

from settings_kit.config import ConfigOps, FilesystemConfigOps, KitConfig
from settings_kit.integrations.files.abc import SettingsFileReader


@dataclass(frozen=True)
class SettingsKitContext:
    """Immutable context holding all dependencies for settings-kit commands.

    Attributes:
        reader: File reader used to resolve settings given as a path
        config: Loaded configuration
        debug: Whether debug logging was requested
    """

    reader: SettingsFileReader
    config: KitConfig
    debug: bool

    @staticmethod
    def for_test(
        reader: SettingsFileReader | None = None,
        config: KitConfig | None = None,
        debug: bool = False,
    ) -> "SettingsKitContext":
        """Create test context with a fake reader and fake home by default.

        Example:
            >>> from settings_kit.integrations.files.fake import FakeSettingsFileReader
            >>> reader = FakeSettingsFileReader(files={"/tmp/s.json": "{}"})
            >>> ctx = SettingsKitContext.for_test(reader=reader)
        """
        from settings_kit.integrations.files.fake import FakeSettingsFileReader

        resolved_reader: SettingsFileReader = (
            reader if reader is not None else FakeSettingsFileReader()
        )
        resolved_config: KitConfig = (
            config
            if config is not None
            else KitConfig(claude_home=Path("/fake/home"), strict_existing=False)
        )

        return SettingsKitContext(reader=resolved_reader, config=resolved_config, debug=debug)


def create_context(*, debug: bool, config_ops: ConfigOps | None = None) -> SettingsKitContext:
    """Create production context with real implementations.

    Called once at CLI entry point. Loads config from disk, or defaults when
    there is no config file.

    Args:
        debug: If True, enable debug mode (full stack traces in error handling)
        config_ops: Config source (defaults to ~/.settings-kit/config.toml)

    Raises:
        ValueError: If the config file is malformed
    """
    from settings_kit.integrations.files.real import RealSettingsFileReader

    ops = config_ops if config_ops is not None else FilesystemConfigOps()

    return SettingsKitContext(
        reader=RealSettingsFileReader(),
        config=ops.load_or_defaults(),
        debug=debug,
    )
