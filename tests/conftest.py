"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest
from pacpick.core.config import PacpickConfig


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory for every test."""
    config_home = tmp_path / "config-home"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def config() -> PacpickConfig:
    """Default configuration."""
    return PacpickConfig()


@pytest.fixture
def mock_pacman_output() -> str:
    """Sample pacman -Qen output for testing."""
    return """base 3-2
git 2.40.1-1
linux 6.3.1.arch1-1
vim 9.0.1499-1
"""


@pytest.fixture
def mock_aur_output() -> str:
    """Sample yay -Qem output for testing."""
    return """google-chrome 113.0.5672.92-1
visual-studio-code-bin 1.78.2-1
"""


@pytest.fixture
def mock_pacman_info() -> str:
    """Sample pacman -Qi output for testing."""
    return """Name            : git
Version         : 2.40.1-1
Description     : the fast distributed version control system
Architecture    : x86_64
URL             : https://git-scm.com/
Licenses        : GPL2
Depends On      : curl  expat  perl  perl-error  perl-mailtools  openssl  pcre2  grep  shadow  zlib
Installed Size  : 25.94 MiB
Install Date    : Tue 02 May 2023 10:12:41 AM CEST
Install Reason  : Explicitly installed
"""
