"""selectprompt - Interactive single-select list prompt for the terminal."""

from importlib.metadata import version

__version__ = version("selectprompt")

from selectprompt.cli.ui.prompt import select, select_async
from selectprompt.core import Choice, PromptConfig, SelectPrompt, Separator
from selectprompt.utils.exceptions import (
    ConfigurationError,
    PromptCancelled,
    SelectPromptError,
)

__all__ = [
    "Choice",
    "ConfigurationError",
    "PromptCancelled",
    "PromptConfig",
    "SelectPrompt",
    "SelectPromptError",
    "Separator",
    "select",
    "select_async",
]
