"""CLI command handlers."""

import typer

from selectprompt.cli.helpers import load_choices_file, parse_choice_tokens
from selectprompt.core.state import PromptConfig
from selectprompt.utils.config import Config, get_selectprompt_dir
from selectprompt.utils.debug import log_error, reload_config
from selectprompt.utils.exceptions import ConfigurationError, PromptCancelled

# Exit codes
EXIT_CONFIG_ERROR = 2
EXIT_CANCELLED = 130


def cmd_pick(args):
    """Show the prompt and print the chosen value to stdout."""
    from selectprompt.cli.ui import console
    from selectprompt.cli.ui.prompt import select

    try:
        entries = parse_choice_tokens(args.choices)
        if args.file is not None:
            entries.extend(load_choices_file(args.file))
        config = PromptConfig(
            message=args.message,
            choices=entries,
            page_size=args.page_size,
            default=args.default,
            loop=args.loop,
        )
        value = select(config)
    except ConfigurationError as e:
        log_error("cli", "invalid prompt configuration", e)
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(EXIT_CONFIG_ERROR)
    except PromptCancelled:
        console.print("[dim]Cancelled[/dim]")
        raise typer.Exit(EXIT_CANCELLED)

    typer.echo(value)


def cmd_config_show(args):
    """Show current settings."""
    from selectprompt.cli.ui import console

    config = Config(get_selectprompt_dir())
    for attr, desc, value in config.get_settings():
        console.print(f"[bold]{attr}:[/bold] [cyan]{value}[/cyan] [dim]{desc}[/dim]")
    console.print(f"[bold]Config:[/bold] [dim]{config.selectprompt_dir}[/dim]")


def cmd_config_set(args):
    """Set and persist one setting."""
    from selectprompt.cli.ui import console

    config = Config(get_selectprompt_dir())
    try:
        config.set_value(args.key, args.value)
    except KeyError:
        known = ", ".join(Config.SETTINGS)
        console.print(f"[red]Unknown setting:[/red] {args.key} [dim]({known})[/dim]")
        raise typer.Exit(1)
    except ValueError:
        console.print(f"[red]Invalid value for {args.key}:[/red] {args.value}")
        raise typer.Exit(1)

    config.save()
    reload_config()
    console.print(f"[green]Set {args.key} = {getattr(config, args.key)}[/green]")
