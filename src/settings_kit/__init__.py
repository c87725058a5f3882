"""settings-kit: validation and diagnostics for Claude Code settings.json.

Import from submodules:
- version: __version__
- validation: resolve_settings_input, parse_and_validate_settings_json, validate_existing_settings
- io.settings_json: setup_claude_settings, save_settings
"""

from settings_kit.version import __version__ as __version__
