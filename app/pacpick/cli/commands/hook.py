"""Hidden fzf callback commands.

fzf runs key bindings and the preview as shell commands. Tab, ? and
the preview re-invoke pacpick with one of these subcommands; they share
the session state through the scratch file named by PACPICK_STATE.
Not part of the public CLI.
"""

from pathlib import Path

import typer

from pacpick.cli.display import print_preview, render_header
from pacpick.core.config import ConfigError, PacpickConfig, load_config
from pacpick.core.state import (
    SessionState,
    StateError,
    load_state,
    save_state,
    state_path_from_env,
)
from pacpick.scanners import get_scanner
from pacpick.scanners.pacman import PacmanScanner
from pacpick.utils.formatting import preview_console, print_error, print_warning

app = typer.Typer(
    help="Internal selector callbacks.",
    no_args_is_help=True,
)


def _state_path() -> Path:
    """Resolve the scratch state file or exit with a usage error."""
    try:
        return state_path_from_env()
    except StateError as e:
        print_error(str(e))
        raise typer.Exit(code=2) from e


def _load() -> tuple[Path, SessionState]:
    """Load the scratch state or exit with a usage error."""
    path = _state_path()
    try:
        return path, load_state(path)
    except StateError as e:
        print_error(str(e))
        raise typer.Exit(code=2) from e


def _config() -> PacpickConfig:
    """Load the configuration or exit with an error."""
    try:
        return load_config()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


@app.command("switch-source")
def switch_source() -> None:
    """Toggle between native and foreign packages."""
    path, state = _load()
    state.toggle_source()
    save_state(state, path)


@app.command("list")
def list_packages() -> None:
    """Print the package list for the current source."""
    _, state = _load()
    scanner = get_scanner(state.source, _config())
    try:
        typer.echo(scanner.list_text(), nl=False)
    except RuntimeError as e:
        print_warning(str(e))


@app.command()
def header() -> None:
    """Print the selector header for the current source."""
    _, state = _load()
    scanner = get_scanner(state.source, _config())
    typer.echo(render_header(scanner.label))


@app.command()
def preview(
    line: str = typer.Argument("", help="Highlighted selector line."),
) -> None:
    """Print the preview pane content."""
    _, state = _load()
    config = _config()
    label = get_scanner(state.source, config).label
    print_preview(
        preview_console(),
        state.preview_mode,
        label,
        line,
        PacmanScanner(config.native_command),
    )


@app.command("toggle-preview")
def toggle_preview() -> None:
    """Toggle the preview pane between package info and help."""
    path, state = _load()
    state.toggle_preview()
    save_state(state, path)
