from settings_kit.io.settings_json import (
    get_settings_path,
    save_settings,
    setup_claude_settings,
)

__all__ = [
    "get_settings_path",
    "save_settings",
    "setup_claude_settings",
]
