"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from rich.console import Console

from pacpick.core.theme import get_theme

# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme())
err_console = Console(theme=get_theme(), stderr=True)


def preview_console() -> Console:
    """Create a console for output rendered inside the fzf preview pane.

    fzf captures preview output through a pipe and renders ANSI itself
    (``--ansi``), so color is forced on.
    """
    return Console(theme=get_theme(), force_terminal=True, color_system="truecolor")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
