"""Domain models for crc-wrap.

All models are **frozen** dataclasses: immutable value objects with no
behaviour beyond data access.  They carry zero I/O, zero dependencies on
external packages, and are passed by value between handlers rather than
held in process-wide variables.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path


# ---------------------------------------------------------------------------
# VM resource configuration
# ---------------------------------------------------------------------------

DEFAULT_MEMORY_MB: int = 16384
DEFAULT_CPUS: int = 6
DEFAULT_DISK_SIZE_GB: int = 100


@dataclass(frozen=True, slots=True)
class Configuration:
    """Resource settings applied to the OpenShift Local VM."""

    memory: int = DEFAULT_MEMORY_MB
    """Memory in MiB."""

    cpus: int = DEFAULT_CPUS
    """Number of virtual CPUs."""

    disk_size: int = DEFAULT_DISK_SIZE_GB
    """Disk size in GiB."""

    @classmethod
    def defaults(cls) -> Configuration:
        return cls()

    def describe(self) -> str:
        """Render as ``"6 CPUs, 16384MB RAM, 100GB disk"``."""
        return f"{self.cpus} CPUs, {self.memory}MB RAM, {self.disk_size}GB disk"


@dataclass(frozen=True, slots=True)
class ConfigLoadResult:
    """Outcome of reading the optional JSON configuration file."""

    configuration: Configuration

    source: Path | None = None
    """Path the values were read from, or ``None`` when the file is absent."""

    warnings: tuple[str, ...] = ()
    """Degraded-loading notes (malformed JSON, invalid field values)."""


# ---------------------------------------------------------------------------
# External command results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandResult:
    """Exit status and captured output of one external command."""

    args: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


# ---------------------------------------------------------------------------
# Prerequisite report
# ---------------------------------------------------------------------------

class Severity(enum.Enum):
    """How a failed check affects the invoking handler."""

    REQUIRED = "required"
    OPTIONAL = "optional"


@dataclass(frozen=True, slots=True)
class CheckResult:
    """One row of the prerequisite report."""

    label: str
    ok: bool
    detail: str
    severity: Severity = Severity.REQUIRED


@dataclass(frozen=True, slots=True)
class PrerequisiteReport:
    """Ordered collection of :class:`CheckResult` rows for one invocation."""

    checks: tuple[CheckResult, ...] = field(default_factory=tuple)

    @property
    def missing_required(self) -> tuple[CheckResult, ...]:
        return tuple(
            check
            for check in self.checks
            if not check.ok and check.severity is Severity.REQUIRED
        )

    @property
    def warnings(self) -> tuple[CheckResult, ...]:
        return tuple(
            check
            for check in self.checks
            if not check.ok and check.severity is Severity.OPTIONAL
        )

    def __len__(self) -> int:
        return len(self.checks)


# ---------------------------------------------------------------------------
# Host platform
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class HostPlatform:
    """Operating system facts relevant to OpenShift Local."""

    system: str
    """Raw ``platform.system()`` value (``"Linux"``, ``"Darwin"``)."""

    display_name: str
    """Human-readable OS name (``"macOS"`` for Darwin)."""

    distribution: str | None = None
    """Linux distribution name from os-release, when known."""

    package_manager: str | None = None
    """Package tool that must be present on this OS, if any."""


# ---------------------------------------------------------------------------
# Handler outcome
# ---------------------------------------------------------------------------

class ActionResult(enum.Enum):
    """Outcome returned by an action handler.

    Fatal failures are not represented here: they are raised as
    :class:`~crc_wrap.exceptions.CrcWrapError` subclasses and only the
    CLI error boundary turns them into a process exit.
    """

    SUCCESS = "success"
    RECOVERABLE = "recoverable"
    """The action did not complete but the caller may retry or continue."""
