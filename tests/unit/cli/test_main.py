"""Unit tests for the main CLI entry point.

Tests for global options, startup checks and session launch.
"""

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from pacpick import __version__
from pacpick.cli.main import app
from pacpick.core.selector import SelectorError
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture
def mock_session() -> Iterator[MagicMock]:
    """Patch the Session class used by the default action."""
    with patch("pacpick.cli.main.Session") as session_cls:
        yield session_cls


class TestGlobalOptions:
    """Tests for options that exit before any check."""

    def test_version(self) -> None:
        """--version prints the version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help(self) -> None:
        """--help lists the public options only."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "--once" in result.output
        assert "--keys-help" not in result.output

    def test_keys_help(self, mock_session: MagicMock) -> None:
        """--keys-help prints the legend and exits without checks."""
        with patch("pacpick.core.deps.command_exists") as mock_exists:
            result = runner.invoke(app, ["--keys-help"])

        assert result.exit_code == 0
        assert "KEYBINDINGS" in result.output
        assert "Switch between native (pacman) and AUR packages" in result.output
        mock_exists.assert_not_called()
        mock_session.assert_not_called()


class TestStartup:
    """Tests for the checks before the session starts."""

    def test_missing_fzf(self, mock_session: MagicMock) -> None:
        """A missing fzf exits 1 with an install hint."""
        with patch("pacpick.core.deps.command_exists", side_effect=lambda c: c != "fzf"):
            result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "'fzf' command not found" in result.output
        assert "sudo pacman -S fzf" in result.output
        mock_session.assert_not_called()

    def test_missing_aur_helper(self, mock_session: MagicMock) -> None:
        """A missing yay exits 1 and points at its project page."""
        with patch("pacpick.core.deps.command_exists", side_effect=lambda c: c != "yay"):
            result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "'yay' command not found" in result.output
        assert "https://github.com/Jguer/yay" in result.output
        mock_session.assert_not_called()

    def test_invalid_config(self, isolated_config_home: Path, mock_session: MagicMock) -> None:
        """An invalid config file exits 1."""
        config_dir = isolated_config_home / "pacpick"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text("unknown_key = 1\n")

        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "Invalid config content" in result.output
        mock_session.assert_not_called()


class TestSessionLaunch:
    """Tests for starting the interactive session."""

    def test_runs_session(self, mock_session: MagicMock) -> None:
        """With all tools present the session runs with configured looping."""
        with patch("pacpick.core.deps.command_exists", return_value=True):
            result = runner.invoke(app, [])

        assert result.exit_code == 0
        mock_session.assert_called_once()
        assert mock_session.call_args.kwargs["persistent"] is None
        mock_session.return_value.run.assert_called_once()

    def test_once_disables_looping(self, mock_session: MagicMock) -> None:
        """--once runs a single pass."""
        with patch("pacpick.core.deps.command_exists", return_value=True):
            result = runner.invoke(app, ["--once"])

        assert result.exit_code == 0
        assert mock_session.call_args.kwargs["persistent"] is False

    def test_selector_failure_exits_nonzero(self, mock_session: MagicMock) -> None:
        """A failing selector is reported and exits 1."""
        mock_session.return_value.run.side_effect = SelectorError("fzf failed with exit code 2")
        with patch("pacpick.core.deps.command_exists", return_value=True):
            result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "fzf failed with exit code 2" in result.output

    def test_uses_loaded_config(self, isolated_config_home: Path, mock_session: MagicMock) -> None:
        """Settings from the config file reach the session."""
        config_dir = isolated_config_home / "pacpick"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text('aur_helper = "paru"\n')

        with patch("pacpick.core.deps.command_exists", return_value=True):
            result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert mock_session.call_args.args[0].aur_helper == "paru"

    def test_subcommand_skips_session(self, mock_session: MagicMock) -> None:
        """Subcommands do not start the session."""
        result = runner.invoke(app, ["config", "path"])

        assert result.exit_code == 0
        mock_session.assert_not_called()
