"""Configuration inspection commands.

Shows where pacpick looks for its configuration and which settings are
in effect.
"""

import typer
from rich.syntax import Syntax

from pacpick.core.config import ConfigError, dump_config, load_config
from pacpick.core.paths import get_config_path
from pacpick.utils.formatting import console, print_error, print_info

app = typer.Typer(
    help="Inspect pacpick configuration.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Print the effective configuration as TOML."""
    path = get_config_path()
    try:
        config = load_config(path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not path.exists():
        print_info(f"No config file at {path}; showing defaults.")
    console.print(Syntax(dump_config(config), "toml", background_color="default"))


@app.command("path")
def config_path() -> None:
    """Print the configuration file path."""
    typer.echo(str(get_config_path()))
