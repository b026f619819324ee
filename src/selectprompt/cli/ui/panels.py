"""Terminal output: shared console, list windowing and in-place redraw."""

from typing import Optional

from rich.console import Console
from rich.text import Text

from selectprompt.core.base import Decorator, StyleIntent, plain_decorator
from selectprompt.core.render import HIDE_CURSOR
from selectprompt.utils.config import DEFAULT_PAGE_SIZE

SHOW_CURSOR = "\033[?25h"
# Erase from cursor to end of screen
ERASE_DOWN = "\033[J"

# Interactive frames go to stderr so the chosen value can be captured from stdout
console = Console(stderr=True)


def calculate_visible_range(
    cursor: int,
    total_items: int,
    max_visible: int,
    scroll_offset: int = 0,
) -> tuple[int, int, int]:
    """Calculate visible window for scrolling list.

    Args:
        cursor: Current cursor position
        total_items: Total number of items
        max_visible: Maximum items that fit on screen
        scroll_offset: Current scroll offset

    Returns:
        Tuple of (start_idx, end_idx, new_scroll_offset)
    """
    if total_items <= max_visible:
        return 0, total_items, 0

    # Adjust scroll to keep cursor visible
    if cursor < scroll_offset:
        scroll_offset = cursor
    elif cursor >= scroll_offset + max_visible:
        scroll_offset = cursor - max_visible + 1

    start = scroll_offset
    end = min(start + max_visible, total_items)

    return start, end, scroll_offset


def format_scroll_indicator(hidden_above: int, hidden_below: int) -> tuple[str, str]:
    """Format scroll indicators.

    Returns:
        Tuple of (top_indicator, bottom_indicator)
    """
    top = f"↑ {hidden_above} more" if hidden_above > 0 else ""
    bottom = f"↓ {hidden_below} more" if hidden_below > 0 else ""
    return top, bottom


class WindowPaginator:
    """Window a rendered list into a fixed-height viewport.

    The window is centered on the active line and clamped to the list
    bounds, so the same inputs always give the same slice.
    """

    def __init__(
        self,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        decorate: Decorator = plain_decorator,
    ):
        self.default_page_size = max(1, default_page_size)
        self.decorate = decorate

    def __call__(
        self, lines: list[str], active: int, page_size: Optional[int] = None
    ) -> list[str]:
        size = page_size or self.default_page_size
        total = len(lines)
        if total <= size:
            return list(lines)

        centered = min(max(0, active - size // 2), total - size)
        start, end, _ = calculate_visible_range(active, total, size, centered)

        top, bottom = format_scroll_indicator(start, total - end)
        window = list(lines[start:end])
        if top:
            window.insert(0, self.decorate(top, StyleIntent.DIMMED))
        if bottom:
            window.append(self.decorate(bottom, StyleIntent.DIMMED))
        return window


class ScreenDisplay:
    """Draw frames in place, replacing the previous frame.

    Frames are rich markup, optionally ending with HIDE_CURSOR which is
    written as a raw control sequence after the frame.
    """

    def __init__(self, target: Optional[Console] = None):
        self.console = target or console
        self._height = 0

    def _write(self, sequence: str) -> None:
        self.console.file.write(sequence)
        self.console.file.flush()

    def show(self, frame: str) -> None:
        hide = frame.endswith(HIDE_CURSOR)
        markup = frame[: -len(HIDE_CURSOR)] if hide else frame
        text = Text.from_markup(markup)

        if self._height:
            # Move to the first line of the previous frame and clear it
            self._write(f"\033[{self._height}F{ERASE_DOWN}")

        self.console.print(text)
        self._height = len(self.console.render_lines(text, pad=False))

        if hide:
            self._write(HIDE_CURSOR)

    def close(self) -> None:
        """Show the cursor again."""
        self._write(SHOW_CURSOR)
