"""CLI entry point for selectprompt.

Uses Typer for command routing with lazy loading for performance.
"""

from pathlib import Path
from typing import List, Optional

import typer

__all__ = ["app", "main"]

app = typer.Typer(
    name="selectprompt",
    help="Interactive single-select list prompt",
    no_args_is_help=True,
)


@app.callback()
def main() -> None:
    """Pick one entry from a list in the terminal."""


@app.command()
def pick(
    message: str = typer.Argument(..., help="Question shown above the list"),
    choices: Optional[List[str]] = typer.Argument(
        None,
        help="Choices: value, value=Name, !value (disabled), :: (separator)",
    ),
    page_size: Optional[int] = typer.Option(
        None, "--page-size", "-n", help="Visible rows"
    ),
    default: Optional[str] = typer.Option(
        None, "--default", "-d", help="Value the cursor starts on"
    ),
    loop: bool = typer.Option(
        True, "--loop/--no-loop", help="Wrap around the list ends"
    ),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", help="JSON list of choices, appended after arguments"
    ),
) -> None:
    """Show a prompt and print the chosen value."""
    from selectprompt.cli.commands import cmd_pick

    class Args:
        def __init__(self):
            self.message = message
            self.choices = choices or []
            self.page_size = page_size
            self.default = default
            self.loop = loop
            self.file = file

    cmd_pick(Args())


# Config subcommand group
config_app = typer.Typer(help="Manage settings")
app.add_typer(config_app, name="config")


@config_app.command("show")
def config_show() -> None:
    """Show current settings."""
    from selectprompt.cli.commands import cmd_config_show

    cmd_config_show(None)


@config_app.command("set")
def config_set(key: str, value: str) -> None:
    """Set a setting (page_size, pointer, hint, debug)."""
    from selectprompt.cli.commands import cmd_config_set

    class Args:
        def __init__(self):
            self.key = key
            self.value = value

    cmd_config_set(Args())


def cli_main() -> None:
    """Entry point for pyproject.toml scripts."""
    app()


if __name__ == "__main__":
    cli_main()
