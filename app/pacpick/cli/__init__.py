"""CLI package for pacpick.

This package contains the Typer application and its subcommands. The
application object lives in pacpick.cli.main.
"""
