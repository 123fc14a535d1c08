"""fzf-backed package selector.

Builds the fzf command line, runs it on the package list and turns its
output into a SelectionResult. Tab and ? run hidden ``pacpick hook``
subcommands, which read and write the scratch state file named by
PACPICK_STATE. Up/Down edit that file directly.
"""

import logging
import shlex
import sys
from pathlib import Path

from pacpick.core.config import PacpickConfig
from pacpick.core.paths import STATE_ENV_VAR
from pacpick.core.state import reset_preview_command
from pacpick.models.action import ActionKey, SelectionResult
from pacpick.models.package import extract_package_name
from pacpick.utils.shell import run_filter

logger = logging.getLogger(__name__)

# fzf exit code when the user aborts with Esc or Ctrl-C
FZF_ABORTED = 130

# fzf exit codes for a completed run: a selection, or no match
FZF_COMPLETED = (0, 1)


class SelectorError(Exception):
    """Raised when the selector itself fails (bad option, unsupported action)."""


def parse_output(stdout: str) -> SelectionResult:
    """Interpret fzf output produced with --expect.

    The first line holds the pressed expect key (empty for Enter), the
    second line the chosen entry. No output at all means the user
    cancelled.

    Args:
        stdout: Captured fzf output.

    Returns:
        SelectionResult for the pass.
    """
    if not stdout.strip():
        return SelectionResult()

    lines = stdout.split("\n")
    key_text = lines[0].strip()
    line = lines[1] if len(lines) > 1 else ""

    key: ActionKey | None = None
    if key_text:
        try:
            key = ActionKey(key_text)
        except ValueError:
            logger.warning("Ignoring unexpected key from selector: %r", key_text)

    return SelectionResult(key=key, name=extract_package_name(line))


class FzfSelector:
    """Runs fzf with the pacpick bindings.

    Attributes:
        config: Active configuration (selector executable and layout).
    """

    def __init__(self, config: PacpickConfig, program: list[str] | None = None) -> None:
        """Initialize the selector.

        Args:
            config: Active configuration.
            program: Command line that re-invokes pacpick from a binding.
                Defaults to the running interpreter with ``-m pacpick``.
        """
        self.config = config
        self._program = program or [sys.executable, "-m", "pacpick"]

    def hook(self, name: str) -> str:
        """Shell command running a hidden hook subcommand."""
        return shlex.join([*self._program, "hook", name])

    def build_command(self, header: str) -> list[str]:
        """Build the fzf argv.

        Args:
            header: Initial header text.

        Returns:
            Command line for the selector.
        """
        expect = ",".join(key.value for key in ActionKey)
        return [
            self.config.selector,
            "--header",
            header,
            f"--height={self.config.height}",
            "--layout=reverse",
            "--border=rounded",
            "--ansi",
            "--preview",
            f"{self.hook('preview')} {{}}",
            f"--preview-window={self.config.preview_window}",
            f"--expect={expect}",
            "--bind",
            (
                f"tab:execute-silent({self.hook('switch-source')})"
                f"+reload({self.hook('list')})"
                f"+transform-header({self.hook('header')})"
            ),
            "--bind",
            f"?:execute-silent({self.hook('toggle-preview')})+refresh-preview",
            "--bind",
            f"up:execute-silent({reset_preview_command()})+refresh-preview+up",
            "--bind",
            f"down:execute-silent({reset_preview_command()})+refresh-preview+down",
        ]

    def select(self, entries: str, state_path: Path, header: str) -> SelectionResult:
        """Show the selector and wait for the user.

        Args:
            entries: Newline-delimited package lines.
            state_path: Scratch state file for the hooks.
            header: Initial header text.

        Returns:
            SelectionResult describing what the user chose.

        Raises:
            SelectorError: If the selector exits with an error code.
        """
        args = self.build_command(header)
        logger.debug("Running selector: %s", shlex.join(args))
        result = run_filter(args, entries, env={STATE_ENV_VAR: str(state_path)})

        if result.returncode == FZF_ABORTED:
            return SelectionResult()
        if result.returncode not in FZF_COMPLETED:
            msg = f"{self.config.selector} failed with exit code {result.returncode}"
            raise SelectorError(msg)
        return parse_output(result.stdout)
