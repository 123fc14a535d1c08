"""Session state and the scratch cell shared with fzf hooks.

The session owns two pieces of state: which package source is listed
and what the preview pane shows. fzf runs as a child process and its key
bindings re-invoke pacpick, so while the selector is open the state lives
in a JSON file inside a temporary directory. The directory exists only
for the duration of one selector pass.
"""

import json
import logging
import os
import shlex
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

from pacpick.core.paths import STATE_ENV_VAR
from pacpick.models.package import PackageSource, PreviewMode

logger = logging.getLogger(__name__)

STATE_FILENAME = "state.json"


class StateError(Exception):
    """Raised when the scratch state cannot be read."""


@dataclass(slots=True)
class SessionState:
    """Mutable state of one interactive session.

    Attributes:
        source: Package source currently listed.
        preview_mode: Content of the preview pane.
    """

    source: PackageSource = field(default=PackageSource.NATIVE)
    preview_mode: PreviewMode = field(default=PreviewMode.INFO)

    def toggle_source(self) -> PackageSource:
        """Switch between native and foreign packages.

        The preview mode is left untouched.
        """
        self.source = self.source.toggled()
        return self.source

    def toggle_preview(self) -> PreviewMode:
        """Switch the preview pane between info and help."""
        self.preview_mode = self.preview_mode.toggled()
        return self.preview_mode

    def to_dict(self) -> dict[str, str]:
        """Serialize to a JSON-compatible dictionary."""
        return {"source": self.source.value, "preview_mode": self.preview_mode.value}

    @classmethod
    def from_dict(cls, data: dict[str, str]) -> "SessionState":
        """Deserialize from a dictionary.

        Raises:
            StateError: If a value is not a known source or preview mode.
        """
        try:
            return cls(
                source=PackageSource(data["source"]),
                preview_mode=PreviewMode(data["preview_mode"]),
            )
        except (KeyError, ValueError, TypeError) as e:
            raise StateError(f"Invalid session state: {e}") from e


def save_state(state: SessionState, path: Path) -> None:
    """Write the state to the scratch file.

    The file is replaced atomically so a hook never reads a partial write.

    Args:
        state: State to persist.
        path: Scratch file path.
    """
    tmp_path = path.with_suffix(".tmp")
    tmp_path.write_text(json.dumps(state.to_dict()), encoding="utf-8")
    os.replace(tmp_path, path)


def load_state(path: Path) -> SessionState:
    """Read the state from the scratch file.

    Args:
        path: Scratch file path.

    Returns:
        The stored SessionState.

    Raises:
        StateError: If the file is missing or malformed.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise StateError(f"Cannot read session state {path}: {e}") from e
    if not isinstance(data, dict):
        raise StateError(f"Invalid session state in {path}")
    return SessionState.from_dict(data)


def _preview_field(mode: PreviewMode) -> str:
    """Serialized preview_mode member as save_state() writes it."""
    return json.dumps({"preview_mode": mode.value})[1:-1]


def reset_preview_command() -> str:
    """Shell command forcing the scratch file's preview mode back to info.

    Navigation keys run it on every keystroke, so it edits the file named
    by PACPICK_STATE in place with sed instead of starting a new
    interpreter. The source is left untouched.
    """
    expression = f"s/{_preview_field(PreviewMode.HELP)}/{_preview_field(PreviewMode.INFO)}/"
    return f'sed -i -e {shlex.quote(expression)} "${STATE_ENV_VAR}"'


def state_path_from_env() -> Path:
    """Locate the scratch file named by the environment.

    Raises:
        StateError: If the variable is not set.
    """
    value = os.environ.get(STATE_ENV_VAR)
    if not value:
        raise StateError(f"{STATE_ENV_VAR} is not set")
    return Path(value)


@contextmanager
def scratch_state(state: SessionState) -> Iterator[Path]:
    """Expose the state to out-of-process hooks for the duration of a block.

    The state is written to a fresh temporary directory on entry; the
    directory is removed on exit, whether the block returns or raises.

    Args:
        state: Current session state.

    Yields:
        Path of the scratch file.
    """
    with tempfile.TemporaryDirectory(prefix="pacpick-") as tmp_dir:
        path = Path(tmp_dir) / STATE_FILENAME
        save_state(state, path)
        logger.debug("Scratch state at %s", path)
        yield path
