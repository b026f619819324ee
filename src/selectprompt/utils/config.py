"""Configuration management."""

import json
import os
from pathlib import Path
from typing import Optional

DEFAULT_PAGE_SIZE = 7
DEFAULT_POINTER = "❯"


def _as_page_size(value) -> int:
    """Coerce a page size read from config.json, falling back to the default."""
    try:
        size = int(value)
    except (TypeError, ValueError):
        return DEFAULT_PAGE_SIZE
    return size if size >= 1 else DEFAULT_PAGE_SIZE


def get_selectprompt_dir() -> Path:
    """Get the selectprompt data directory (XDG-compliant)."""
    if env_dir := os.environ.get("SELECTPROMPT_DIR"):
        return Path(env_dir)
    return Path.home() / ".config" / "selectprompt"


class Config:
    """Application configuration."""

    # Known settings with descriptions (attr_name -> description)
    # These are listed by the `config` command
    SETTINGS: dict[str, str] = {
        "page_size": "Visible rows when no page size is given",
        "pointer": "Glyph drawn in front of the active choice",
        "hint": "Show navigation hint on the first frame",
        "debug": "Log to ~/.config/selectprompt/debug.log",
    }

    def __init__(self, selectprompt_dir: Optional[Path] = None):
        """Load config from directory."""
        self.selectprompt_dir = selectprompt_dir or get_selectprompt_dir()
        self._config_file = self.selectprompt_dir / "config.json"
        self._load()

    def _load(self):
        """Load config from file."""
        # Set defaults
        self.page_size = DEFAULT_PAGE_SIZE
        self.pointer = DEFAULT_POINTER
        self.hint = True
        self.debug = False

        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text())
                self.page_size = _as_page_size(data.get("page_size"))
                self.pointer = data.get("pointer", DEFAULT_POINTER)
                self.hint = data.get("hint", True)
                self.debug = data.get("debug", False)
            except (json.JSONDecodeError, IOError):
                pass

        self._apply_env_overrides()

    def _apply_env_overrides(self):
        """Apply shell SELECTPROMPT_* vars on top of file values."""
        prefix = "SELECTPROMPT_"
        for key, value in os.environ.items():
            if not key.startswith(prefix):
                continue
            attr_name = key[len(prefix) :].lower()
            if attr_name not in self.SETTINGS:
                continue
            try:
                self.set_value(attr_name, value)
            except ValueError:
                pass

    def set_value(self, attr: str, value: str) -> None:
        """Set a setting from its string form, converting to the current type.

        Raises:
            KeyError: If attr is not a known setting
            ValueError: If value cannot be converted
        """
        if attr not in self.SETTINGS:
            raise KeyError(attr)
        current = getattr(self, attr)
        if isinstance(current, bool):
            setattr(self, attr, value.lower() in ("true", "1", "yes"))
        elif isinstance(current, int):
            setattr(self, attr, int(value))
        else:
            setattr(self, attr, value)

    def get_settings(self) -> list[tuple[str, str, object]]:
        """Get all settings with current values.

        Returns list of (attr_name, description, value).
        """
        return [(attr, desc, getattr(self, attr)) for attr, desc in self.SETTINGS.items()]

    def save(self):
        """Save config to file."""
        self.selectprompt_dir.mkdir(parents=True, exist_ok=True)
        data = {attr: getattr(self, attr) for attr in self.SETTINGS}
        self._config_file.write_text(json.dumps(data, indent=2, ensure_ascii=False))
