"""
Pytest fixtures and configuration for Sysfetch Core tests.

Provides sample /etc and /proc contents, source files written to a
temporary directory, and a patched identity lookup.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from sysfetch_core.config import Config
from sysfetch_core.identity import IdentityKind


# Test Data Fixtures - File Contents
@pytest.fixture
def sample_os_release_content():
    """Sample content for /etc/os-release file (Arch Linux)."""
    return """NAME="Arch Linux"
PRETTY_NAME="Arch Linux"
ID=arch
BUILD_ID=rolling
ANSI_COLOR="38;2;23;147;209"
HOME_URL="https://archlinux.org/"
DOCUMENTATION_URL="https://wiki.archlinux.org/"
SUPPORT_URL="https://bbs.archlinux.org/"
BUG_REPORT_URL="https://bugs.archlinux.org/"
LOGO=archlinux-logo"""


@pytest.fixture
def sample_ubuntu_os_release_content():
    """Sample /etc/os-release where VERSION_ID precedes ID."""
    return """PRETTY_NAME="Ubuntu 22.04.3 LTS"
NAME="Ubuntu"
VERSION_ID="22.04"
VERSION="22.04.3 LTS (Jammy Jellyfish)"
VERSION_CODENAME=jammy
ID=ubuntu
ID_LIKE=debian
HOME_URL="https://www.ubuntu.com/"
UBUNTU_CODENAME=jammy"""


@pytest.fixture
def sample_meminfo_content():
    """Sample content for /proc/meminfo file."""
    return """MemTotal:       16303856 kB
MemFree:         2048000 kB
MemAvailable:    8200000 kB
Buffers:          512000 kB
Cached:          4110000 kB
SwapCached:        10240 kB
Active:          6144000 kB
Inactive:        4096000 kB
SwapTotal:       8388604 kB
SwapFree:        8378364 kB"""


@pytest.fixture
def sample_uptime_content():
    """Sample content for /proc/uptime file (91234 seconds since boot)."""
    return "91234.56 180000.12\n"


@pytest.fixture
def source_config(tmp_path, sample_os_release_content, sample_meminfo_content, sample_uptime_content):
    """Config pointing at sample source files in a temporary directory."""
    os_release = tmp_path / "os-release"
    meminfo = tmp_path / "meminfo"
    uptime = tmp_path / "uptime"
    os_release.write_text(sample_os_release_content)
    meminfo.write_text(sample_meminfo_content)
    uptime.write_text(sample_uptime_content)

    return Config(
        os_release_path=str(os_release),
        meminfo_path=str(meminfo),
        uptime_path=str(uptime),
        shell_path="/usr/bin/zsh",
    )


@pytest.fixture
def mock_identity():
    """Patch identity lookups in the gathering module with fixed values."""
    values = {
        IdentityKind.USERNAME: "max",
        IdentityKind.HOSTNAME: "archbox",
        IdentityKind.KERNEL_VERSION: "6.5.9-arch2-1",
    }

    with patch("sysfetch_core.core.get_identity", side_effect=values.__getitem__) as mock:
        yield mock


# Pytest Configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
