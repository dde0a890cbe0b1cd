"""Infrastructure: environment probing and platform guidance.

This module is responsible for locating host binaries on the system
PATH, checking whether the Docker daemon answers, identifying the host
operating system, and providing platform-specific installation guidance
when a required utility is missing.

Rules
-----
* Binary detection via :func:`shutil.which` only: no subprocess.
* Daemon liveness goes through an injected
  :class:`~crc_wrap.core.protocols.ExternalTool`.
* No automatic installation.
* No ``print()``: callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from crc_wrap.core.models import HostPlatform
from crc_wrap.core.protocols import ExternalTool
from crc_wrap.exceptions import (
    ClusterToolNotFoundError,
    CrcWrapError,
    MissingDependencyError,
    UnsupportedPlatformError,
)


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class BinaryStatus:
    """Result of a PATH lookup for one executable.

    Attributes
    ----------
    name : str
        Executable name that was searched for.
    found : bool
        Whether the executable was located on PATH.
    path : Path | None
        Absolute path to the binary, or ``None``.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing the binary on the current
        platform.  Empty when it is already present.
    """

    name: str
    found: bool
    path: Path | None
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Binary detection
# ---------------------------------------------------------------------------

def check_binary(name: str) -> bool:
    """Return ``True`` when *name* resolves on PATH."""
    return shutil.which(name) is not None


def detect_binary(name: str) -> BinaryStatus:
    """Probe the system for *name*.

    Returns a :class:`BinaryStatus` regardless of whether the binary is
    present: the caller decides whether to abort or merely warn.
    """
    result = shutil.which(name)

    if result is not None:
        return BinaryStatus(
            name=name,
            found=True,
            path=Path(result).resolve(),
            install_commands=(),
        )

    return BinaryStatus(
        name=name,
        found=False,
        path=None,
        install_commands=_platform_install_commands(name),
    )


def require_binary(name: str) -> Path:
    """Locate *name* or raise :class:`MissingDependencyError`.

    ``crc`` itself is reported as :class:`ClusterToolNotFoundError` so
    that callers get the download link rather than a package command.
    """
    status = detect_binary(name)
    if status.found and status.path is not None:
        return status.path

    if name == "crc":
        raise ClusterToolNotFoundError()

    hint_lines: list[str] = []
    if status.install_commands:
        hint_lines.append(f"Install {name} using one of:")
        hint_lines.extend(f"  {cmd}" for cmd in status.install_commands)
    raise MissingDependencyError(
        f"{name} is not installed. Please install it and try again.",
        hint="\n".join(hint_lines) if hint_lines else None,
    )


# ---------------------------------------------------------------------------
# Daemon liveness
# ---------------------------------------------------------------------------

def check_daemon_running(docker: ExternalTool) -> bool:
    """Return ``True`` when ``docker info`` succeeds.

    A missing ``docker`` binary counts as "not running"; this check
    never raises.
    """
    if not docker.is_available():
        return False
    try:
        result = docker.run("info")
    except CrcWrapError:
        return False
    return result.ok


# ---------------------------------------------------------------------------
# Host platform
# ---------------------------------------------------------------------------

def detect_platform() -> HostPlatform:
    """Identify the host OS.

    Raises
    ------
    UnsupportedPlatformError
        For anything other than Linux and macOS.
    """
    system = platform.system()
    if system == "Darwin":
        return HostPlatform(
            system=system,
            display_name="macOS",
            package_manager="brew",
        )
    if system == "Linux":
        return HostPlatform(
            system=system,
            display_name="Linux",
            distribution=_linux_distribution(),
        )
    raise UnsupportedPlatformError(
        f"Unsupported operating system: {system or 'unknown'}",
        hint="OpenShift Local management is supported on Linux and macOS only.",
    )


def _linux_distribution() -> str | None:
    """Return the os-release ``NAME`` field, or ``None`` if unreadable."""
    try:
        release = platform.freedesktop_os_release()
    except OSError:
        return None
    return release.get("NAME") or None


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def _platform_install_commands(name: str) -> tuple[str, ...]:
    """Return install commands for *name* appropriate for the current OS."""
    system = platform.system().lower()
    if name == "brew":
        return (
            '/bin/bash -c "$(curl -fsSL '
            'https://raw.githubusercontent.com/Homebrew/install/HEAD/install.sh)"',
        )
    if name == "docker":
        if system == "darwin":
            return ("brew install --cask docker",)
        return (
            "sudo dnf install docker",
            "sudo apt install docker.io",
        )
    if system == "linux":
        return (
            f"sudo dnf install {name}",
            f"sudo apt install {name}",
            f"sudo pacman -S {name}",
        )
    if system == "darwin":
        return (f"brew install {name}",)
    return ()
