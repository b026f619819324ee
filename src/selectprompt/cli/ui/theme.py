"""Rich markup for style intents."""

from typing import Optional

from rich.markup import escape

from selectprompt.core.base import StyleIntent

DEFAULT_STYLES: dict[StyleIntent, Optional[str]] = {
    StyleIntent.PLAIN: None,
    StyleIntent.EMPHASIS: "bold",
    StyleIntent.DIMMED: "dim",
    StyleIntent.HIGHLIGHTED: "bold cyan",
    StyleIntent.PREFIX: "green",
    StyleIntent.ANSWER: "cyan",
}


class RichTheme:
    """Decorator producing rich markup.

    Text is escaped so labels containing brackets print literally.
    """

    def __init__(self, styles: Optional[dict[StyleIntent, Optional[str]]] = None):
        self.styles = {**DEFAULT_STYLES, **(styles or {})}

    def __call__(self, text: str, style: StyleIntent) -> str:
        markup = self.styles.get(style)
        if not markup:
            return escape(text)
        return f"[{markup}]{escape(text)}[/{markup}]"
