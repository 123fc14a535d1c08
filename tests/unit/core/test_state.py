"""Unit tests for session state.

Tests for SessionState and the scratch cell shared with fzf hooks.
"""

import json
import os
import shutil
import subprocess
from itertools import pairwise
from pathlib import Path

import pytest
from pacpick.core.state import (
    SessionState,
    StateError,
    load_state,
    reset_preview_command,
    save_state,
    scratch_state,
    state_path_from_env,
)
from pacpick.models.package import PackageSource, PreviewMode


class TestSessionState:
    """Tests for SessionState transitions."""

    def test_initial_values(self) -> None:
        """A new session lists native packages with the info preview."""
        state = SessionState()
        assert state.source is PackageSource.NATIVE
        assert state.preview_mode is PreviewMode.INFO

    @pytest.mark.parametrize("presses", [1, 2, 3, 7])
    def test_toggle_source_alternates(self, presses: int) -> None:
        """Tab presses alternate strictly between native and foreign."""
        state = SessionState()
        seen = [state.source]
        for _ in range(presses):
            seen.append(state.toggle_source())

        assert all(a is not b for a, b in pairwise(seen))
        expected = PackageSource.FOREIGN if presses % 2 else PackageSource.NATIVE
        assert state.source is expected

    def test_toggle_source_keeps_preview_mode(self) -> None:
        """Switching the source leaves the help view open."""
        state = SessionState(preview_mode=PreviewMode.HELP)
        state.toggle_source()
        assert state.preview_mode is PreviewMode.HELP

    @pytest.mark.parametrize("presses", [1, 2, 5])
    def test_toggle_preview_alternates(self, presses: int) -> None:
        """? presses alternate strictly between info and help."""
        state = SessionState()
        for _ in range(presses):
            state.toggle_preview()
        expected = PreviewMode.HELP if presses % 2 else PreviewMode.INFO
        assert state.preview_mode is expected

    def test_dict_round_trip(self) -> None:
        """to_dict/from_dict preserve both fields."""
        state = SessionState(source=PackageSource.FOREIGN, preview_mode=PreviewMode.HELP)
        assert SessionState.from_dict(state.to_dict()) == state

    def test_from_dict_invalid(self) -> None:
        """Unknown values raise StateError."""
        with pytest.raises(StateError):
            SessionState.from_dict({"source": "snap", "preview_mode": "info"})

    def test_from_dict_missing_key(self) -> None:
        """Missing keys raise StateError."""
        with pytest.raises(StateError):
            SessionState.from_dict({"source": "native"})


class TestStateFile:
    """Tests for save_state/load_state."""

    def test_save_and_load(self, tmp_path: Path) -> None:
        """State written by save_state is read back by load_state."""
        path = tmp_path / "state.json"
        state = SessionState(source=PackageSource.FOREIGN)

        save_state(state, path)

        assert load_state(path) == state
        assert json.loads(path.read_text()) == {"source": "foreign", "preview_mode": "info"}
        assert not path.with_suffix(".tmp").exists()

    def test_load_missing_file(self, tmp_path: Path) -> None:
        """A missing scratch file raises StateError."""
        with pytest.raises(StateError, match="Cannot read"):
            load_state(tmp_path / "missing.json")

    def test_load_corrupt_file(self, tmp_path: Path) -> None:
        """A corrupt scratch file raises StateError."""
        path = tmp_path / "state.json"
        path.write_text("{not json")
        with pytest.raises(StateError):
            load_state(path)

    def test_load_non_object(self, tmp_path: Path) -> None:
        """A JSON value that is not an object raises StateError."""
        path = tmp_path / "state.json"
        path.write_text("[]")
        with pytest.raises(StateError, match="Invalid"):
            load_state(path)


class TestScratchState:
    """Tests for the scratch_state context manager."""

    def test_writes_initial_state(self) -> None:
        """The scratch file holds the state on entry."""
        state = SessionState(preview_mode=PreviewMode.HELP)
        with scratch_state(state) as path:
            assert load_state(path) == state

    def test_removed_after_normal_exit(self) -> None:
        """The scratch directory is removed after the block."""
        with scratch_state(SessionState()) as path:
            assert path.exists()
        assert not path.exists()
        assert not path.parent.exists()

    def test_removed_after_error(self) -> None:
        """The scratch directory is removed when the block raises."""
        captured: list[Path] = []
        with pytest.raises(RuntimeError), scratch_state(SessionState()) as path:
            captured.append(path)
            raise RuntimeError("selector crashed")

        assert not captured[0].parent.exists()


class TestStatePathFromEnv:
    """Tests for state_path_from_env."""

    def test_reads_variable(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Returns the path named by PACPICK_STATE."""
        monkeypatch.setenv("PACPICK_STATE", str(tmp_path / "state.json"))
        assert state_path_from_env() == tmp_path / "state.json"

    def test_missing_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Raises StateError when PACPICK_STATE is unset."""
        monkeypatch.delenv("PACPICK_STATE", raising=False)
        with pytest.raises(StateError, match="PACPICK_STATE"):
            state_path_from_env()


@pytest.mark.skipif(shutil.which("sed") is None, reason="sed not installed")
class TestResetPreviewCommand:
    """Tests for the navigation reset run by the selector's shell."""

    def run_reset(self, path: Path) -> None:
        """Run the reset command the way a key binding does."""
        subprocess.run(  # nosec: B602
            reset_preview_command(),
            shell=True,
            check=True,
            env={**os.environ, "PACPICK_STATE": str(path)},
        )

    @pytest.mark.parametrize("source", list(PackageSource))
    @pytest.mark.parametrize("mode", list(PreviewMode))
    def test_resets_to_info(self, tmp_path: Path, source: PackageSource, mode: PreviewMode) -> None:
        """Navigation resets the preview to info from any mode, keeping the source."""
        path = tmp_path / "state.json"
        save_state(SessionState(source=source, preview_mode=mode), path)

        self.run_reset(path)

        assert load_state(path) == SessionState(source=source, preview_mode=PreviewMode.INFO)

    def test_path_with_spaces(self, tmp_path: Path) -> None:
        """The scratch path is quoted in the shell command."""
        path = tmp_path / "scratch dir" / "state.json"
        path.parent.mkdir()
        save_state(SessionState(preview_mode=PreviewMode.HELP), path)

        self.run_reset(path)

        assert load_state(path).preview_mode is PreviewMode.INFO
