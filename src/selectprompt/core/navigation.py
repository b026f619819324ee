"""Cursor navigation over a choice list."""

from typing import Optional

from selectprompt.core.choices import ChoiceList, entry_at, is_selectable


def first_selectable(choices: ChoiceList) -> Optional[int]:
    """Return the index of the first selectable entry, or None."""
    for index, entry in enumerate(choices):
        if is_selectable(entry):
            return index
    return None


def step(choices: ChoiceList, cursor: int, offset: int, loop: bool = True) -> int:
    """Move the cursor by offset until it rests on a selectable entry.

    With loop=True the search wraps around both ends of the list. Callers
    must guarantee at least one selectable entry exists.

    With loop=False the search stops at the list edge; if nothing
    selectable lies in that direction the cursor is returned unchanged.
    """
    total = len(choices)
    candidate = cursor
    while True:
        candidate += offset
        if loop:
            candidate %= total
        elif not 0 <= candidate < total:
            return cursor
        if is_selectable(choices[candidate]):
            return candidate


def jump(choices: ChoiceList, cursor: int, number: int) -> int:
    """Move the cursor to the 1-indexed entry number.

    Absent or non-selectable targets leave the cursor where it is.
    """
    target = number - 1
    if is_selectable(entry_at(choices, target)):
        return target
    return cursor
