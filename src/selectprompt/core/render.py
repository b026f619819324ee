"""Frame renderer.

Pure functions from prompt configuration and state to the text of one
frame. Styling and windowing are injected so the output never depends
on a terminal.
"""

from typing import cast

from selectprompt.core.base import (
    Decorator,
    Paginator,
    StyleIntent,
    full_page,
    plain_decorator,
)
from selectprompt.core.choices import Choice, Entry, EntryKind
from selectprompt.core.state import PromptConfig, PromptState, Status
from selectprompt.utils.config import DEFAULT_POINTER

HIDE_CURSOR = "\033[?25l"
HINT = "(↑↓ navigate • 1-9 jump • Enter select)"
PENDING_PREFIX = "?"
DONE_PREFIX = "✔"
DISABLED_MARKER = "(disabled)"


def _header(config: PromptConfig, state: PromptState, decorate: Decorator) -> str:
    prefix = PENDING_PREFIX if state.status is Status.PENDING else DONE_PREFIX
    return (
        f"{decorate(prefix, StyleIntent.PREFIX)} "
        f"{decorate(config.message, StyleIntent.EMPHASIS)}"
    )


def render_entry(
    entry: Entry, active: bool, decorate: Decorator, pointer: str
) -> str:
    """Render one list line."""
    if entry.kind is EntryKind.SEPARATOR:
        return decorate(f" {entry.label}", StyleIntent.DIMMED)

    if entry.disabled:
        reason = entry.disabled if isinstance(entry.disabled, str) else DISABLED_MARKER
        return decorate(f"- {entry.label} {reason}", StyleIntent.DIMMED)

    if active:
        return decorate(f"{pointer} {entry.label}", StyleIntent.HIGHLIGHTED)

    return decorate(f"  {entry.label}", StyleIntent.PLAIN)


def render_frame(
    config: PromptConfig,
    state: PromptState,
    is_first_render: bool,
    decorate: Decorator = plain_decorator,
    paginate: Paginator = full_page,
    pointer: str = DEFAULT_POINTER,
    hint: str = HINT,
) -> str:
    """Render the frame for the current state.

    Args:
        config: Prompt message, choices and page size
        state: Current status and cursor
        is_first_render: Append the hint to the header when True
        decorate: Style intent to markup
        paginate: Windowing of the rendered list body
        pointer: Glyph in front of the active choice
        hint: One-time navigation hint, empty to disable

    Returns:
        Frame text. Pending frames end with HIDE_CURSOR.
    """
    header = _header(config, state, decorate)
    chosen = cast(Choice, config.choices[state.cursor])

    if state.status is Status.DONE:
        return f"{header} {decorate(chosen.short_label, StyleIntent.ANSWER)}"

    if is_first_render and hint:
        header = f"{header} {decorate(hint, StyleIntent.DIMMED)}"

    body = [
        render_entry(entry, index == state.cursor, decorate, pointer)
        for index, entry in enumerate(config.choices)
    ]
    lines = [header, *paginate(body, state.cursor, config.page_size)]

    if chosen.description:
        lines.append(decorate(chosen.description, StyleIntent.PLAIN))

    return "\n".join(lines) + HIDE_CURSOR
