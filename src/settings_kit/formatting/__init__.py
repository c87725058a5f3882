from settings_kit.formatting.diagnostics import (
    format_json_syntax_error,
    format_schema_violations,
)

__all__ = [
    "format_json_syntax_error",
    "format_schema_violations",
]
