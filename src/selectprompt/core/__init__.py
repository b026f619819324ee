"""Core prompt logic, independent of any terminal."""

from selectprompt.core.base import (
    Decorator,
    Display,
    EventSource,
    Paginator,
    StyleIntent,
)
from selectprompt.core.choices import Choice, EntryKind, Separator, is_selectable
from selectprompt.core.navigation import first_selectable, jump, step
from selectprompt.core.render import HIDE_CURSOR, render_frame
from selectprompt.core.state import (
    Confirm,
    Event,
    EventKind,
    Jump,
    PromptConfig,
    PromptState,
    SelectPrompt,
    Status,
    Step,
)

__all__ = [
    "Choice",
    "Confirm",
    "Decorator",
    "Display",
    "EventSource",
    "EntryKind",
    "Event",
    "EventKind",
    "HIDE_CURSOR",
    "Jump",
    "Paginator",
    "PromptConfig",
    "PromptState",
    "SelectPrompt",
    "Separator",
    "Status",
    "Step",
    "StyleIntent",
    "first_selectable",
    "is_selectable",
    "jump",
    "render_frame",
    "step",
]
