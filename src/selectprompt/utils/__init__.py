"""Utilities for selectprompt."""

from selectprompt.utils.config import Config, get_selectprompt_dir
from selectprompt.utils.exceptions import (
    ConfigurationError,
    PromptCancelled,
    SelectPromptError,
)

__all__ = [
    "Config",
    "ConfigurationError",
    "PromptCancelled",
    "SelectPromptError",
    "get_selectprompt_dir",
]
