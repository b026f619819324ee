"""Base protocols for prompt collaborators.

Allows swapping the terminal, styling and windowing backends, and
driving the prompt from tests without a real terminal.
"""

from enum import Enum
from typing import Any, Optional, Protocol


class StyleIntent(Enum):
    """Semantic styles the renderer asks for."""

    PLAIN = "plain"
    EMPHASIS = "emphasis"
    DIMMED = "dimmed"
    HIGHLIGHTED = "highlighted"
    PREFIX = "prefix"
    ANSWER = "answer"


class Decorator(Protocol):
    """Apply a style intent to a piece of text."""

    def __call__(self, text: str, style: StyleIntent) -> str: ...


class Paginator(Protocol):
    """Return the visible slice of rendered lines around the active line."""

    def __call__(
        self, lines: list[str], active: int, page_size: Optional[int] = None
    ) -> list[str]: ...


class Display(Protocol):
    """Receives rendered frames."""

    def show(self, frame: str) -> None:
        """Draw frame, replacing the previous one."""
        ...

    def close(self) -> None:
        """Restore the terminal after the prompt ends."""
        ...


def plain_decorator(text: str, style: StyleIntent) -> str:
    """Decorator that leaves text unstyled."""
    return text


def full_page(lines: list[str], active: int, page_size: Optional[int] = None) -> list[str]:
    """Paginator that shows every line."""
    return list(lines)


class EventSource(Protocol):
    """Channel the prompt pulls input events from, one at a time.

    asyncio.Queue satisfies this protocol.
    """

    async def get(self) -> Any: ...
