"""Programmatic entry points for the select prompt."""

import asyncio
from functools import partial
from typing import Optional

from selectprompt.cli.ui.keys import KeyReader
from selectprompt.cli.ui.panels import ScreenDisplay, WindowPaginator
from selectprompt.cli.ui.theme import RichTheme
from selectprompt.core.base import Display, EventSource
from selectprompt.core.render import HINT, render_frame
from selectprompt.core.state import PromptConfig, RenderFn, SelectPrompt
from selectprompt.utils.config import Config


def build_renderer(settings: Config) -> RenderFn:
    """Frame renderer wired to the rich theme and user settings."""
    theme = RichTheme()
    return partial(
        render_frame,
        decorate=theme,
        paginate=WindowPaginator(settings.page_size, theme),
        pointer=settings.pointer,
        hint=HINT if settings.hint else "",
    )


async def select_async(
    config: PromptConfig,
    events: Optional[EventSource] = None,
    display: Optional[Display] = None,
    settings: Optional[Config] = None,
) -> str:
    """Run the prompt and return the value of the confirmed choice.

    Args:
        config: Message, choices and options
        events: Event channel, defaults to reading the terminal
        display: Frame sink, defaults to in-place redraw on stderr
        settings: User settings, defaults to the config file

    Raises:
        ConfigurationError: If no choice is selectable, before drawing
        PromptCancelled: If the user presses Ctrl+C
    """
    settings = settings or Config()
    prompt = SelectPrompt(config, render=build_renderer(settings))

    if events is None:
        events = KeyReader()
    if display is None:
        display = ScreenDisplay()
    try:
        return await prompt.run(events, display)
    finally:
        display.close()


def select(
    config: PromptConfig,
    settings: Optional[Config] = None,
) -> str:
    """Blocking wrapper around select_async for non-async callers."""
    return asyncio.run(select_async(config, settings=settings))
