"""Custom exception hierarchy for crc-wrap.

All exceptions that cross layer boundaries must inherit from
:class:`CrcWrapError`.  Raw ``subprocess``/``OSError`` failures must
NEVER propagate beyond the infrastructure layer: they must be caught
and re-raised as a typed subclass defined here.

Every subclass is *fatal*: raising one ends the current action and,
once it reaches :func:`crc_wrap.cli.app.cli`, the process.

Hierarchy
---------
CrcWrapError
├── MissingDependencyError
├── ClusterToolNotFoundError
├── UnsupportedPlatformError
├── ClusterCommandError
├── UnknownActionError
├── PromptCancelledError
└── EnvironmentError
"""

from __future__ import annotations

from crc_wrap.utils.constants import CRC_DOWNLOAD_URL


class CrcWrapError(Exception):
    """Base exception for all crc-wrap errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Host environment ------------------------------------------------------

class MissingDependencyError(CrcWrapError):
    """Raised when a required host utility (curl, tar, brew) is missing."""


class ClusterToolNotFoundError(CrcWrapError):
    """Raised when the ``crc`` binary is required but not on PATH."""

    def __init__(self, message: str | None = None, *, hint: str | None = None) -> None:
        super().__init__(
            message or "OpenShift Local (CRC) is not installed.",
            hint=hint or f"Please download it from: {CRC_DOWNLOAD_URL}",
        )


class UnsupportedPlatformError(CrcWrapError):
    """Raised when the host operating system is neither Linux nor macOS."""


# --- External commands -----------------------------------------------------

class ClusterCommandError(CrcWrapError):
    """Raised when a ``crc`` subcommand exits with a non-zero status."""

    def __init__(
        self,
        message: str,
        *,
        returncode: int | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.returncode: int | None = returncode


# --- Dispatch / interaction ------------------------------------------------

class UnknownActionError(CrcWrapError):
    """Raised when the single-shot action argument is not recognised."""


class PromptCancelledError(CrcWrapError):
    """Raised when an interactive prompt is dismissed (Esc / Ctrl+D)."""


class EnvironmentError(CrcWrapError):
    """Raised when a required Python runtime dependency is not available."""
