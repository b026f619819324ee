"""Choice model and selectability predicate."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence, Union

DEFAULT_SEPARATOR = "──────────────"


class EntryKind(Enum):
    """Discriminant for list entries."""

    CHOICE = "choice"
    SEPARATOR = "separator"


@dataclass(frozen=True)
class Choice:
    """A selectable list entry.

    Attributes:
        value: Returned when the choice is confirmed
        name: Display label, falls back to value
        description: Shown beneath the list while the choice is active
        disabled: True, or a reason string shown next to the label
        short: Label for the confirmation line, falls back to the display label
    """

    value: str
    name: Optional[str] = None
    description: Optional[str] = None
    disabled: Union[bool, str] = False
    short: Optional[str] = None
    kind: EntryKind = field(default=EntryKind.CHOICE, init=False)

    @property
    def label(self) -> str:
        return self.name if self.name is not None else self.value

    @property
    def short_label(self) -> str:
        return self.short if self.short is not None else self.label


@dataclass(frozen=True)
class Separator:
    """A non-selectable entry used to group choices visually."""

    label: str = DEFAULT_SEPARATOR
    kind: EntryKind = field(default=EntryKind.SEPARATOR, init=False)


Entry = Union[Choice, Separator]
ChoiceList = Sequence[Entry]


def is_selectable(entry: Optional[Entry]) -> bool:
    """Return True if entry is a defined, enabled Choice."""
    if entry is None:
        return False
    if entry.kind is EntryKind.SEPARATOR:
        return False
    return not entry.disabled


def entry_at(choices: ChoiceList, index: int) -> Optional[Entry]:
    """Return the entry at index, or None when out of range.

    Negative indexes are out of range rather than counted from the end.
    """
    if 0 <= index < len(choices):
        return choices[index]
    return None
