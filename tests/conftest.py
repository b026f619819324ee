"""Shared pytest fixtures."""

import tempfile
from pathlib import Path

import pytest

from selectprompt.core import Choice, Separator
from selectprompt.utils.debug import reload_config


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture(autouse=True)
def mock_selectprompt_dir(temp_dir, monkeypatch):
    """Point every test at a throwaway ~/.config/selectprompt."""
    selectprompt_dir = temp_dir / ".selectprompt"
    selectprompt_dir.mkdir()
    monkeypatch.setenv("SELECTPROMPT_DIR", str(selectprompt_dir))
    for key in ("PAGE_SIZE", "POINTER", "HINT", "DEBUG"):
        monkeypatch.delenv(f"SELECTPROMPT_{key}", raising=False)
    reload_config()
    yield selectprompt_dir
    reload_config()


@pytest.fixture
def mixed_choices():
    """A, separator, disabled B, C."""
    return [
        Choice("a", name="Alpha"),
        Separator(),
        Choice("b", name="Beta", disabled=True),
        Choice("c", name="Gamma", description="Third letter"),
    ]


class FakeDisplay:
    """Records frames instead of drawing them."""

    def __init__(self):
        self.frames: list[str] = []
        self.closed = False

    def show(self, frame: str) -> None:
        self.frames.append(frame)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def display():
    return FakeDisplay()
