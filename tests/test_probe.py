"""Tests for environment probing (infra/probe.py).

All tests mock :func:`shutil.which` and :mod:`platform`: no system
dependency.

Coverage:
* ``check_binary`` / ``detect_binary`` found and missing.
* ``require_binary`` happy path and typed failures.
* Platform-specific install commands.
* ``detect_platform`` for Linux, macOS and unsupported systems.
* ``check_daemon_running`` through a fake docker tool.
* ``BinaryStatus`` frozen dataclass.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from conftest import FakeTool

from crc_wrap.exceptions import (
    ClusterToolNotFoundError,
    MissingDependencyError,
    UnsupportedPlatformError,
)
from crc_wrap.infra.probe import (
    BinaryStatus,
    _platform_install_commands,
    check_binary,
    check_daemon_running,
    detect_binary,
    detect_platform,
    require_binary,
)


# ---------------------------------------------------------------------------
# check_binary / detect_binary
# ---------------------------------------------------------------------------

class TestDetectBinary:
    @patch("crc_wrap.infra.probe.shutil.which", return_value="/usr/bin/curl")
    def test_found(self, _mock_which: MagicMock) -> None:
        status = detect_binary("curl")

        assert status.found is True
        assert isinstance(status.path, Path)
        assert status.install_commands == ()

    @patch("crc_wrap.infra.probe.platform.system", return_value="Linux")
    @patch("crc_wrap.infra.probe.shutil.which", return_value=None)
    def test_not_found(self, _mock_which: MagicMock, _mock_sys: MagicMock) -> None:
        status = detect_binary("tar")

        assert status.found is False
        assert status.path is None
        assert len(status.install_commands) > 0

    @patch("crc_wrap.infra.probe.shutil.which", return_value=None)
    def test_check_binary_false(self, mock_which: MagicMock) -> None:
        assert check_binary("crc") is False
        mock_which.assert_called_once_with("crc")

    @patch("crc_wrap.infra.probe.shutil.which", return_value="/usr/local/bin/crc")
    def test_check_binary_true(self, _mock_which: MagicMock) -> None:
        assert check_binary("crc") is True


# ---------------------------------------------------------------------------
# require_binary
# ---------------------------------------------------------------------------

class TestRequireBinary:
    @patch("crc_wrap.infra.probe.shutil.which", return_value="/usr/bin/tar")
    def test_found_returns_path(self, _mock_which: MagicMock) -> None:
        assert isinstance(require_binary("tar"), Path)

    @patch("crc_wrap.infra.probe.platform.system", return_value="Linux")
    @patch("crc_wrap.infra.probe.shutil.which", return_value=None)
    def test_missing_raises_with_hint(
        self, _mock_which: MagicMock, _mock_sys: MagicMock,
    ) -> None:
        with pytest.raises(MissingDependencyError, match="curl is not installed") as exc_info:
            require_binary("curl")
        assert exc_info.value.hint is not None
        assert "Install curl" in exc_info.value.hint

    @patch("crc_wrap.infra.probe.shutil.which", return_value=None)
    def test_missing_crc_points_to_download(self, _mock_which: MagicMock) -> None:
        with pytest.raises(ClusterToolNotFoundError) as exc_info:
            require_binary("crc")
        assert exc_info.value.hint is not None
        assert "console.redhat.com" in exc_info.value.hint


# ---------------------------------------------------------------------------
# Platform install commands
# ---------------------------------------------------------------------------

class TestPlatformInstallCommands:
    @patch("crc_wrap.infra.probe.platform.system", return_value="Linux")
    def test_linux_commands(self, _mock_sys: MagicMock) -> None:
        cmds = _platform_install_commands("curl")
        assert "sudo dnf install curl" in cmds
        assert any("apt" in c for c in cmds)

    @patch("crc_wrap.infra.probe.platform.system", return_value="Darwin")
    def test_darwin_commands(self, _mock_sys: MagicMock) -> None:
        assert _platform_install_commands("tar") == ("brew install tar",)

    @patch("crc_wrap.infra.probe.platform.system", return_value="Darwin")
    def test_brew_bootstrap(self, _mock_sys: MagicMock) -> None:
        (cmd,) = _platform_install_commands("brew")
        assert "Homebrew/install" in cmd


# ---------------------------------------------------------------------------
# detect_platform
# ---------------------------------------------------------------------------

class TestDetectPlatform:
    @patch("crc_wrap.infra.probe.platform.system", return_value="Darwin")
    def test_macos_requires_brew(self, _mock_sys: MagicMock) -> None:
        host = detect_platform()
        assert host.display_name == "macOS"
        assert host.package_manager == "brew"

    @patch(
        "crc_wrap.infra.probe.platform.freedesktop_os_release",
        return_value={"NAME": "Fedora Linux"},
    )
    @patch("crc_wrap.infra.probe.platform.system", return_value="Linux")
    def test_linux_distribution(self, _mock_sys: MagicMock, _mock_rel: MagicMock) -> None:
        host = detect_platform()
        assert host.display_name == "Linux"
        assert host.distribution == "Fedora Linux"
        assert host.package_manager is None

    @patch(
        "crc_wrap.infra.probe.platform.freedesktop_os_release",
        side_effect=OSError("no os-release"),
    )
    @patch("crc_wrap.infra.probe.platform.system", return_value="Linux")
    def test_linux_without_os_release(
        self, _mock_sys: MagicMock, _mock_rel: MagicMock,
    ) -> None:
        assert detect_platform().distribution is None

    @patch("crc_wrap.infra.probe.platform.system", return_value="Windows")
    def test_windows_unsupported(self, _mock_sys: MagicMock) -> None:
        with pytest.raises(UnsupportedPlatformError, match="Windows"):
            detect_platform()


# ---------------------------------------------------------------------------
# check_daemon_running
# ---------------------------------------------------------------------------

class TestCheckDaemonRunning:
    def test_running(self) -> None:
        docker = FakeTool("docker")
        assert check_daemon_running(docker) is True
        assert docker.calls == [("info",)]

    def test_not_running(self) -> None:
        docker = FakeTool("docker")
        docker.respond("info", returncode=1, stderr="Cannot connect to the Docker daemon")
        assert check_daemon_running(docker) is False

    def test_binary_missing_skips_invocation(self) -> None:
        docker = FakeTool("docker", available=False)
        assert check_daemon_running(docker) is False
        assert docker.calls == []

    def test_launch_failure_is_not_running(self) -> None:
        docker = MagicMock()
        docker.is_available.return_value = True
        docker.run.side_effect = MissingDependencyError("docker vanished")
        assert check_daemon_running(docker) is False


# ---------------------------------------------------------------------------
# BinaryStatus dataclass
# ---------------------------------------------------------------------------

class TestBinaryStatus:
    def test_frozen(self) -> None:
        status = BinaryStatus(
            name="curl",
            found=True,
            path=Path("/usr/bin/curl"),
            install_commands=(),
        )
        with pytest.raises(AttributeError):
            status.found = False  # type: ignore[misc]
