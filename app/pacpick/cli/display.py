"""Shared Rich display functions for the selector and its hooks.

Provides the header line, the keybinding legend and the package info
preview. The same functions back the hidden --keys-help flag and the
fzf preview hook, so both always render identical text.
"""

from rich.console import Console
from rich.table import Table

from pacpick.models.package import PreviewMode, extract_package_name
from pacpick.scanners.pacman import PacmanScanner

HEADER_HINT = "TAB: Switch | ?: Help"

# (key, description) pairs of the keybinding legend
KEYBINDINGS: list[tuple[str, str]] = [
    ("Tab", "Switch between native (pacman) and AUR packages"),
    ("?", "Toggle this help view"),
    ("Up/Down", "Navigate packages (resets to info view)"),
    ("Enter", "View full details of the package"),
    ("u", "Update the selected package"),
    ("d", "Remove the selected package (asks first)"),
    ("r", "Reinstall the selected package"),
    ("Esc", "Exit the application"),
]


def render_header(label: str) -> str:
    """Build the selector header for a source.

    Args:
        label: Command name of the listed source (e.g. "pacman").

    Returns:
        Header text such as "PACMAN PACKAGES | TAB: Switch | ?: Help".
    """
    return f"{label.upper()} PACKAGES | {HEADER_HINT}"


def create_keybindings_table() -> Table:
    """Create the keybinding legend as a borderless two-column table."""
    table = Table(
        title="KEYBINDINGS",
        title_style="warning",
        title_justify="left",
        show_header=False,
        box=None,
        padding=(0, 2),
    )
    table.add_column("Key", style="key", no_wrap=True)
    table.add_column("Action", style="text")
    for key, description in KEYBINDINGS:
        table.add_row(key, description)
    return table


def print_keybindings(console: Console) -> None:
    """Print the keybinding legend."""
    console.print()
    console.print(create_keybindings_table())
    console.print()
    console.print("[muted]The preview pane shows detailed package information.[/]")


def print_package_info(console: Console, label: str, line: str, scanner: PacmanScanner) -> None:
    """Print the info preview for a highlighted selector line.

    Args:
        console: Console to print to.
        label: Command name of the listed source.
        line: Highlighted line as passed by the selector.
        scanner: Native scanner used for the detail query.
    """
    console.print(f"[source]SOURCE: {label.upper()}[/]")
    console.print("---")

    name = extract_package_name(line)
    if name is None:
        return

    result = scanner.info(name)
    # Verbatim output; package metadata may contain square brackets
    console.print(
        result.stdout if result.success else result.stderr,
        markup=False,
        highlight=False,
        end="",
    )


def print_preview(
    console: Console,
    mode: PreviewMode,
    label: str,
    line: str,
    scanner: PacmanScanner,
) -> None:
    """Print the preview pane content for the current preview mode."""
    if mode is PreviewMode.HELP:
        print_keybindings(console)
    else:
        print_package_info(console, label, line, scanner)
