"""Helper functions for CLI - choice parsing and loading."""

import json
from pathlib import Path

from selectprompt.core.choices import Choice, Entry, Separator
from selectprompt.utils.exceptions import ConfigurationError

SEPARATOR_TOKEN = "::"
DISABLED_MARK = "!"
CHOICE_FIELDS = ("value", "name", "description", "disabled", "short")


def parse_choice_token(token: str) -> Entry:
    """Parse a command-line choice token.

    Formats:
        value           choice labelled with its value
        value=Name      choice with a display name
        !value[=Name]   disabled choice
        ::[Label]       separator, default rule when no label

    Raises:
        ConfigurationError: If the token has no value
    """
    if token.startswith(SEPARATOR_TOKEN):
        label = token[len(SEPARATOR_TOKEN) :].strip()
        return Separator(label) if label else Separator()

    disabled = token.startswith(DISABLED_MARK)
    if disabled:
        token = token[len(DISABLED_MARK) :]

    value, sep, name = token.partition("=")
    if not value:
        raise ConfigurationError(f"Choice token has no value: {token!r}")
    return Choice(value=value, name=name if sep else None, disabled=disabled)


def parse_choice_tokens(tokens: list[str]) -> list[Entry]:
    """Parse all command-line choice tokens in order."""
    return [parse_choice_token(token) for token in tokens]


def _entry_from_json(item, position: int) -> Entry:
    if isinstance(item, str):
        return Choice(value=item)
    if not isinstance(item, dict):
        raise ConfigurationError(f"Entry {position}: expected object or string")

    if "separator" in item:
        label = item["separator"]
        return Separator(label) if label else Separator()

    value = item.get("value")
    if not isinstance(value, str) or not value:
        raise ConfigurationError(f"Entry {position}: 'value' must be a non-empty string")

    unknown = set(item) - set(CHOICE_FIELDS)
    if unknown:
        raise ConfigurationError(
            f"Entry {position}: unknown fields {', '.join(sorted(unknown))}"
        )
    return Choice(**item)


def load_choices_file(path: Path) -> list[Entry]:
    """Load choices from a JSON file.

    The file holds a list whose items are strings, choice objects
    ({"value", "name", "description", "disabled", "short"}) or
    separator objects ({"separator": "label"}).

    Raises:
        ConfigurationError: If the file is unreadable or malformed
    """
    try:
        data = json.loads(Path(path).read_text())
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read choices file {path}: {e}") from e

    if not isinstance(data, list):
        raise ConfigurationError(f"Choices file {path} must contain a JSON list")
    return [_entry_from_json(item, i + 1) for i, item in enumerate(data)]
