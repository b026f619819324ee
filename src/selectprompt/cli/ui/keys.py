"""Keypress decoding for the prompt event channel."""

import asyncio
from typing import Callable, Optional

import readchar

from selectprompt.core.state import Confirm, Event, Jump, Step
from selectprompt.utils.debug import debug_keys
from selectprompt.utils.exceptions import PromptCancelled

UP_KEYS = (readchar.key.UP, "k")
DOWN_KEYS = (readchar.key.DOWN, "j")
CONFIRM_KEYS = (readchar.key.ENTER, readchar.key.CR, readchar.key.LF)
DIGIT_KEYS = tuple("123456789")


def key_to_event(pressed: str) -> Optional[Event]:
    """Decode a readchar key into a prompt event.

    Returns None for keys the prompt ignores.

    Raises:
        PromptCancelled: On Ctrl+C
    """
    if pressed == readchar.key.CTRL_C:
        raise PromptCancelled("Prompt cancelled")
    if pressed in UP_KEYS:
        return Step(-1)
    if pressed in DOWN_KEYS:
        return Step(1)
    if pressed in CONFIRM_KEYS:
        return Confirm()
    if pressed in DIGIT_KEYS:
        return Jump(int(pressed))
    return None


class KeyReader:
    """Event channel reading keys from the terminal on demand.

    A key is read only while the prompt waits for an event, so nothing is
    left blocking on stdin once the prompt resolves.
    """

    def __init__(self, readkey: Callable[[], str] = readchar.readkey):
        self._readkey = readkey

    async def get(self) -> Event:
        while True:
            try:
                pressed = await asyncio.to_thread(self._readkey)
            except KeyboardInterrupt:
                raise PromptCancelled("Prompt cancelled") from None
            event = key_to_event(pressed)
            debug_keys("key", key=repr(pressed), event=event)
            if event is not None:
                return event
