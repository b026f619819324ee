"""Terminal adapters for the select prompt."""

from selectprompt.cli.ui.keys import KeyReader, key_to_event
from selectprompt.cli.ui.panels import (
    ScreenDisplay,
    WindowPaginator,
    calculate_visible_range,
    console,
    format_scroll_indicator,
)
from selectprompt.cli.ui.prompt import build_renderer, select, select_async
from selectprompt.cli.ui.theme import RichTheme

__all__ = [
    "KeyReader",
    "RichTheme",
    "ScreenDisplay",
    "WindowPaginator",
    "build_renderer",
    "calculate_visible_range",
    "console",
    "format_scroll_indicator",
    "key_to_event",
    "select",
    "select_async",
]
