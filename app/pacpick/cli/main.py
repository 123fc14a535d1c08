"""Main CLI application entry point.

Defines the Typer application, global options and the default action:
check the required tools, then run the interactive session.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from pacpick import __version__
from pacpick.cli.commands import config, hook
from pacpick.cli.display import print_keybindings
from pacpick.core.config import ConfigError, load_config
from pacpick.core.deps import MissingDependencyError, check_dependencies
from pacpick.core.selector import SelectorError
from pacpick.core.session import Session
from pacpick.utils.formatting import console, err_console, print_error

app = typer.Typer(
    name="pacpick",
    help="Browse native and AUR packages in fzf and update, remove or reinstall them.",
    invoke_without_command=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"pacpick version {__version__}")
        raise typer.Exit()


def keys_help_callback(value: bool) -> None:
    """Print the keybinding legend and exit."""
    if value:
        print_keybindings(console)
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route log records to stderr through Rich.

    Args:
        verbose: Log at DEBUG instead of WARNING.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    keys_help: Annotated[
        bool | None,
        typer.Option(
            "--keys-help",
            callback=keys_help_callback,
            is_eager=True,
            hidden=True,
        ),
    ] = None,
    once: Annotated[
        bool,
        typer.Option(
            "--once",
            help="Exit after a single action instead of returning to the list.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
) -> None:
    """pacpick - browse installed packages with fzf.

    Lists explicitly installed native (pacman) or AUR packages. Press
    [bold]?[/bold] inside the list for the keybindings.
    """
    configure_logging(verbose)

    # Skip if a subcommand is being invoked
    if ctx.invoked_subcommand is not None:
        return

    try:
        settings = load_config()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    try:
        check_dependencies(settings)
    except MissingDependencyError as e:
        print_error(str(e))
        err_console.print(e.dependency.hint, markup=False)
        raise typer.Exit(code=1) from e

    session = Session(settings, persistent=False if once else None)
    try:
        session.run()
    except SelectorError as e:
        # fzf already printed its own diagnostic to the terminal
        print_error(str(e))
        raise typer.Exit(code=1) from e


app.add_typer(config.app, name="config")
app.add_typer(hook.app, name="hook", hidden=True)


if __name__ == "__main__":
    app()
