"""Human-readable diagnostics for unusable settings input.

Two independent paths: JSON syntax errors get heuristic hints, schema
violations get one line per violation plus example snippets for the
settings people most often get wrong.
"""

import json
from collections.abc import Iterable

from settings_kit.models.violations import Violation

SETTINGS_DOCS_URL = "https://docs.anthropic.com/en/docs/claude-code/settings"

TRAILING_COMMA_HINT = "Hint: Remove the trailing comma before the closing bracket or brace."
PROPERTY_NAME_HINT = "Hint: Property names must be enclosed in double quotes."
UNTERMINATED_STRING_HINT = "Hint: Make sure all strings are properly closed with matching quotes."
UNBALANCED_HINT = "Hint: Check that all braces {} and brackets [] are properly closed."
SINGLE_QUOTES_HINT = (
    "Hint: Use double quotes (\") instead of single quotes (') for strings in JSON."
)

PERMISSIONS_EXAMPLE = """  "permissions": {
    "allow": ["Bash", "Read", "Write"],
    "deny": ["WebFetch"]
  }"""

HOOKS_EXAMPLE = """  "hooks": {
    "PreToolUse": [{
      "matcher": "Bash",
      "hooks": [{ "type": "command", "command": "echo Starting..." }]
    }]
  }"""

ENV_EXAMPLE = """  "env": {
    "DEBUG": "true",
    "API_URL": "https://example.com"
  }"""

# Both spellings: the stdlib decoder and JavaScript-style parsers
_PROPERTY_NAME_MESSAGES = ("Property name must be a string", "Expecting property name")
_UNEXPECTED_END_MESSAGES = ("Unexpected end", "Unexpected EOF")


def get_json_syntax_hints(error_message: str, content: str, at_end: bool = False) -> list[str]:
    """Collect hints for common JSON mistakes.

    Every check is independent, so several hints may apply to one error.

    Args:
        error_message: Message reported by the JSON decoder
        content: The text that failed to decode
        at_end: Whether the decoder failed at the end of the text

    Returns:
        List of hint lines, possibly empty
    """
    hints: list[str] = []
    has_trailing_comma = ",]" in content or ",}" in content

    if has_trailing_comma or "comma" in error_message:
        hints.append(TRAILING_COMMA_HINT)

    if not has_trailing_comma and any(m in error_message for m in _PROPERTY_NAME_MESSAGES):
        hints.append(PROPERTY_NAME_HINT)

    if "Unterminated string" in error_message:
        hints.append(UNTERMINATED_STRING_HINT)

    if at_end or any(m in error_message for m in _UNEXPECTED_END_MESSAGES):
        hints.append(UNBALANCED_HINT)

    if "Single quotes" in error_message or "'" in content:
        hints.append(SINGLE_QUOTES_HINT)

    return hints


def format_json_syntax_error(
    error: json.JSONDecodeError, content: str, source: str = "JSON"
) -> str:
    """Format a JSON decode failure with hints.

    Args:
        error: The error raised by json.loads
        content: The text that failed to decode
        source: Where the text came from (e.g. "input settings", a file path)

    Returns:
        Multi-line message naming the source and any matching hints
    """
    at_end = error.pos >= len(content.rstrip())
    message = f"{source} JSON syntax error: {error}"

    hints = get_json_syntax_hints(error.msg, content, at_end=at_end)
    if hints:
        message += "\n\n" + "\n".join(hints)

    return message


def format_violation(violation: Violation) -> str:
    line = f"  • {violation.path}: {violation.message}"
    if violation.is_type_mismatch:
        line += f" (expected {violation.expected}, got {violation.actual})"
    return line


def _example_for_path(path: str) -> str | None:
    if path in ("permissions.allow", "permissions.deny"):
        return PERMISSIONS_EXAMPLE
    if path.startswith("hooks"):
        return HOOKS_EXAMPLE
    if path == "env":
        return ENV_EXAMPLE
    return None


def get_validation_examples(violations: Iterable[Violation]) -> list[str]:
    """Pick example snippets for the problem areas in a violation list.

    Each path is considered once and each snippet appears at most once.
    """
    examples: list[str] = []
    seen_paths: set[str] = set()

    for violation in violations:
        if violation.path in seen_paths:
            continue
        seen_paths.add(violation.path)

        example = _example_for_path(violation.path)
        # allow and deny share one snippet, so it is shown once
        if example is not None and example not in examples:
            examples.append(example)

    return examples


def format_schema_violations(violations: Iterable[Violation], source: str = "settings") -> str:
    """Format schema violations as a display-ready message.

    Args:
        violations: Every violation found for the document
        source: Where the settings came from (e.g. "input settings")

    Returns:
        Message listing each violation, examples of the correct format for
        recognized problem areas, and a pointer to the documentation
    """
    violations = list(violations)
    lines = [format_violation(v) for v in violations]

    message = f"Invalid {source} configuration:\n\n" + "\n".join(lines)

    examples = get_validation_examples(violations)
    if examples:
        message += "\n\nExamples of correct format:\n" + "\n".join(examples)

    message += f"\n\nPlease check the documentation for valid settings options: {SETTINGS_DOCS_URL}"

    return message
