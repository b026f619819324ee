"""Prompt state machine.

Owns the prompt status and cursor, applies input events one at a time,
and re-renders after every accepted event.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Optional, Union, cast

from selectprompt.core.base import Display, EventSource
from selectprompt.core.choices import Choice, ChoiceList, Entry, is_selectable
from selectprompt.core.navigation import first_selectable, jump, step
from selectprompt.utils.debug import debug_render, debug_state
from selectprompt.utils.exceptions import ConfigurationError


class Status(Enum):
    PENDING = "pending"
    DONE = "done"


class EventKind(Enum):
    CONFIRM = "confirm"
    STEP = "step"
    JUMP = "jump"


@dataclass(frozen=True)
class Confirm:
    """Accept key pressed."""

    kind: EventKind = field(default=EventKind.CONFIRM, init=False)


@dataclass(frozen=True)
class Step:
    """Directional key pressed: -1 for up, +1 for down."""

    offset: int
    kind: EventKind = field(default=EventKind.STEP, init=False)


@dataclass(frozen=True)
class Jump:
    """Digit key pressed, 1-indexed as shown to the user."""

    number: int
    kind: EventKind = field(default=EventKind.JUMP, init=False)


Event = Union[Confirm, Step, Jump]


@dataclass(frozen=True)
class PromptConfig:
    """What to ask and which entries to offer.

    Attributes:
        message: Question shown in the header
        choices: Entries in display order
        page_size: Visible rows, None for the paginator default
        default: Value of the choice the cursor starts on, if selectable
        loop: Wrap around the list ends on directional steps
    """

    message: str
    choices: tuple[Entry, ...]
    page_size: Optional[int] = None
    default: Optional[str] = None
    loop: bool = True

    def __post_init__(self):
        # Freeze caller-provided lists
        object.__setattr__(self, "choices", tuple(self.choices))
        if self.page_size is not None and self.page_size < 1:
            raise ConfigurationError(f"page_size must be at least 1, got {self.page_size}")


@dataclass(frozen=True)
class PromptState:
    status: Status
    cursor: int


RenderFn = Callable[[PromptConfig, PromptState, bool], str]


def initial_cursor(config: PromptConfig) -> int:
    """Cursor position for a new prompt.

    Raises:
        ConfigurationError: If no entry is selectable
    """
    start = first_selectable(config.choices)
    if start is None:
        raise ConfigurationError("No selectable choices. All choices are disabled.")

    if config.default is not None:
        for index, entry in enumerate(config.choices):
            if is_selectable(entry) and entry.value == config.default:
                return index
    return start


class SelectPrompt:
    """Single-select prompt driven by discrete input events."""

    def __init__(self, config: PromptConfig, render: Optional[RenderFn] = None):
        if render is None:
            from selectprompt.core.render import render_frame

            render = render_frame

        self.config = config
        self.state = PromptState(Status.PENDING, initial_cursor(config))
        self._render = render
        self.renders = 0

    @property
    def choices(self) -> ChoiceList:
        return self.config.choices

    @property
    def done(self) -> bool:
        return self.state.status is Status.DONE

    @property
    def value(self) -> Optional[str]:
        """Confirmed value, or None while pending."""
        if not self.done:
            return None
        chosen = cast(Choice, self.choices[self.state.cursor])
        return chosen.value

    def dispatch(self, event: Event) -> bool:
        """Apply an event.

        Returns:
            True if the event was accepted and the frame must be redrawn
        """
        if self.done:
            return False

        cursor = self.state.cursor
        if event.kind is EventKind.CONFIRM:
            self.state = replace(self.state, status=Status.DONE)
            debug_state("confirmed", cursor=cursor, value=self.value)
            return True

        if event.kind is EventKind.STEP:
            new_cursor = step(self.choices, cursor, event.offset, self.config.loop)
        else:
            new_cursor = jump(self.choices, cursor, event.number)
            if new_cursor != event.number - 1:
                debug_state("jump ignored", number=event.number)
                return False

        self.state = replace(self.state, cursor=new_cursor)
        debug_state("moved", kind=event.kind.value, cursor=new_cursor)
        return True

    def render(self) -> str:
        """Render the current frame, counting renders for the first-frame hint."""
        frame = self._render(self.config, self.state, self.renders == 0)
        debug_render("frame", number=self.renders, status=self.state.status.value)
        self.renders += 1
        return frame

    async def run(self, events: EventSource, display: Display) -> str:
        """Consume events until confirmed and return the chosen value.

        Draws the first frame immediately and a new one after each
        accepted event.
        """
        display.show(self.render())
        while not self.done:
            event = await events.get()
            if self.dispatch(event):
                display.show(self.render())
        return self.value
