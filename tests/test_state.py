"""Tests for the prompt state machine."""

import asyncio
import itertools

import pytest

from selectprompt.core.choices import Choice, Separator, is_selectable
from selectprompt.core.state import (
    Confirm,
    EventKind,
    Jump,
    PromptConfig,
    SelectPrompt,
    Status,
    Step,
)
from selectprompt.utils.exceptions import ConfigurationError


def make_prompt(choices, **kwargs):
    return SelectPrompt(PromptConfig(message="Pick", choices=choices, **kwargs))


def test_events_carry_kind():
    assert Confirm().kind is EventKind.CONFIRM
    assert Step(1).kind is EventKind.STEP
    assert Jump(3).kind is EventKind.JUMP


def test_config_freezes_choices():
    """Caller's list should be copied to a tuple."""
    choices = [Choice("a")]
    config = PromptConfig(message="Pick", choices=choices)
    choices.append(Choice("b"))
    assert config.choices == (Choice("a"),)


def test_config_rejects_bad_page_size():
    with pytest.raises(ConfigurationError):
        PromptConfig(message="Pick", choices=[Choice("a")], page_size=0)


class TestConstruction:
    """Tests for initial state."""

    def test_starts_pending_on_first_selectable(self, mixed_choices):
        prompt = make_prompt(mixed_choices)
        assert prompt.state.status is Status.PENDING
        assert prompt.state.cursor == 0

    def test_skips_leading_disabled(self):
        prompt = make_prompt([Choice("a", disabled=True), Choice("b")])
        assert prompt.state.cursor == 1

    def test_empty_list_fails(self):
        with pytest.raises(ConfigurationError):
            make_prompt([])

    def test_nothing_selectable_fails(self):
        with pytest.raises(ConfigurationError, match="No selectable choices"):
            make_prompt([Separator(), Choice("a", disabled="nope")])

    def test_construction_failure_renders_nothing(self):
        frames = []

        def render(config, state, first):
            frames.append(state)
            return ""

        with pytest.raises(ConfigurationError):
            SelectPrompt(PromptConfig(message="Pick", choices=[]), render=render)
        assert frames == []

    def test_default_value_sets_cursor(self, mixed_choices):
        prompt = make_prompt(mixed_choices, default="c")
        assert prompt.state.cursor == 3

    def test_default_on_disabled_choice_is_ignored(self, mixed_choices):
        prompt = make_prompt(mixed_choices, default="b")
        assert prompt.state.cursor == 0

    def test_unknown_default_is_ignored(self, mixed_choices):
        prompt = make_prompt(mixed_choices, default="zzz")
        assert prompt.state.cursor == 0


class TestDispatch:
    """Tests for event handling."""

    def test_down_skips_to_c_then_wraps(self, mixed_choices):
        prompt = make_prompt(mixed_choices)
        assert prompt.dispatch(Step(1)) is True
        assert prompt.state.cursor == 3
        assert prompt.dispatch(Step(1)) is True
        assert prompt.state.cursor == 0

    def test_jump_to_selectable(self):
        prompt = make_prompt([Choice("a"), Choice("b"), Choice("c")])
        assert prompt.dispatch(Jump(2)) is True
        assert prompt.state.cursor == 1

    def test_jump_out_of_range_is_rejected(self):
        prompt = make_prompt([Choice("a"), Choice("b"), Choice("c")])
        assert prompt.dispatch(Jump(9)) is False
        assert prompt.state.cursor == 0

    def test_jump_to_separator_is_rejected(self, mixed_choices):
        prompt = make_prompt(mixed_choices)
        assert prompt.dispatch(Jump(2)) is False
        assert prompt.state.cursor == 0

    def test_jump_to_current_entry_is_accepted(self):
        prompt = make_prompt([Choice("a"), Choice("b")])
        assert prompt.dispatch(Jump(1)) is True
        assert prompt.state.cursor == 0

    def test_confirm_resolves_value_not_name(self, mixed_choices):
        prompt = make_prompt(mixed_choices)
        prompt.dispatch(Step(1))
        assert prompt.value is None
        assert prompt.dispatch(Confirm()) is True
        assert prompt.done
        assert prompt.value == "c"

    def test_events_after_done_are_ignored(self, mixed_choices):
        prompt = make_prompt(mixed_choices)
        prompt.dispatch(Confirm())
        state = prompt.state

        assert prompt.dispatch(Step(1)) is False
        assert prompt.dispatch(Jump(4)) is False
        assert prompt.dispatch(Confirm()) is False
        assert prompt.state == state
        assert prompt.value == "a"

    def test_no_loop_step_at_edge_keeps_cursor(self, mixed_choices):
        prompt = make_prompt(mixed_choices, loop=False)
        prompt.dispatch(Step(-1))
        assert prompt.state.cursor == 0


@pytest.mark.parametrize(
    "choices",
    [
        [Choice("a"), Separator(), Choice("b", disabled=True), Choice("c")],
        [Separator(), Choice("a", disabled=True), Choice("b"), Separator()],
        [Choice("a"), Choice("b"), Choice("c")],
        [Choice("x", disabled="why"), Choice("y"), Separator("group"), Choice("z")],
    ],
)
def test_cursor_always_on_selectable(choices):
    """Every reachable pending state should have the cursor on a selectable choice."""
    events = [Step(1), Step(-1), Jump(1), Jump(2), Jump(3), Jump(4), Jump(7)]
    for sequence in itertools.product(events, repeat=3):
        prompt = make_prompt(choices)
        for event in sequence:
            prompt.dispatch(event)
            assert is_selectable(choices[prompt.state.cursor])


def test_render_counts_first_frame():
    """Only the first render should be flagged as first."""
    flags = []

    def render(config, state, first):
        flags.append(first)
        return ""

    prompt = SelectPrompt(
        PromptConfig(message="Pick", choices=[Choice("a"), Choice("b")]), render=render
    )
    prompt.render()
    prompt.render()
    prompt.render()
    assert flags == [True, False, False]


@pytest.mark.asyncio
async def test_run_consumes_queue_until_confirm(mixed_choices, display):
    """run() should redraw after accepted events and return the value."""
    prompt = make_prompt(mixed_choices)
    events = asyncio.Queue()
    for event in (Step(1), Jump(2), Step(1), Confirm(), Step(1)):
        events.put_nowait(event)

    value = await prompt.run(events, display)

    assert value == "a"
    # first frame + 2 steps + confirm, the rejected jump draws nothing
    assert len(display.frames) == 4
    # the event after confirm is never consumed
    assert events.qsize() == 1
