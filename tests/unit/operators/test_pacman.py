"""Unit tests for PacmanOperator.

Tests for the native package operator implementation.
"""

from unittest.mock import patch

import pytest
from pacpick.models.action import ActionKey, ActionType, create_action
from pacpick.models.package import PackageSource
from pacpick.operators.pacman import PacmanOperator


class TestPacmanOperator:
    """Tests for PacmanOperator class."""

    @pytest.fixture
    def operator(self) -> PacmanOperator:
        """Create PacmanOperator instance."""
        return PacmanOperator()

    def test_source_is_native(self, operator: PacmanOperator) -> None:
        """Operator returns NATIVE as source."""
        assert operator.source == PackageSource.NATIVE

    def test_requires_elevation(self, operator: PacmanOperator) -> None:
        """Native actions need elevated credentials."""
        assert operator.requires_elevation is True

    def test_is_available(self, operator: PacmanOperator) -> None:
        """is_available follows command_exists."""
        with patch("pacpick.operators.base.command_exists", return_value=False):
            assert operator.is_available() is False

    def test_install_success(self, operator: PacmanOperator) -> None:
        """install() runs sudo pacman -S for the exact name."""
        with patch("pacpick.operators.base.run_interactive", return_value=0) as mock_run:
            result = operator.install("vim")

        mock_run.assert_called_once_with(["sudo", "pacman", "-S", "vim"])
        assert result.success
        assert result.action.action_type == ActionType.INSTALL
        assert result.action.package == "vim"
        assert result.action.label == "update"

    def test_install_reinstall_label(self, operator: PacmanOperator) -> None:
        """Reinstall runs the same command under a different label."""
        with patch("pacpick.operators.base.run_interactive", return_value=0) as mock_run:
            result = operator.install("vim", label="reinstall")

        mock_run.assert_called_once_with(["sudo", "pacman", "-S", "vim"])
        assert result.action.label == "reinstall"

    def test_install_failure(self, operator: PacmanOperator) -> None:
        """A failing pacman run yields a failed result with its exit code."""
        with patch("pacpick.operators.base.run_interactive", return_value=1):
            result = operator.install("doesnotexist")

        assert not result.success
        assert result.returncode == 1

    def test_remove_uses_recursive_cleanup(self, operator: PacmanOperator) -> None:
        """remove() runs pacman -Rns."""
        with patch("pacpick.operators.base.run_interactive", return_value=0) as mock_run:
            result = operator.remove("vim")

        mock_run.assert_called_once_with(["sudo", "pacman", "-Rns", "vim"])
        assert result.action.action_type == ActionType.REMOVE

    def test_custom_elevation_command(self) -> None:
        """The elevation command is configurable."""
        operator = PacmanOperator("pacman", elevation_command="doas")
        assert operator.install_args("vim") == ["doas", "pacman", "-S", "vim"]

    def test_missing_executable_reports_failure(self, operator: PacmanOperator) -> None:
        """An executable that cannot start is reported as exit code 127."""
        with patch(
            "pacpick.operators.base.run_interactive",
            side_effect=FileNotFoundError("sudo"),
        ):
            result = operator.install("vim")

        assert result.returncode == 127

    def test_execute_dispatches_remove(self, operator: PacmanOperator) -> None:
        """execute() sends remove actions to remove()."""
        action = create_action(ActionKey.REMOVE, "vim", PackageSource.NATIVE)
        with patch("pacpick.operators.base.run_interactive", return_value=0) as mock_run:
            operator.execute(action)

        assert "-Rns" in mock_run.call_args[0][0]

    def test_execute_rejects_other_source(self, operator: PacmanOperator) -> None:
        """execute() refuses actions for foreign packages."""
        action = create_action(ActionKey.UPDATE, "yay-bin", PackageSource.FOREIGN)
        with pytest.raises(ValueError, match="doesn't match"):
            operator.execute(action)
