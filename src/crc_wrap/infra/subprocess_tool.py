"""``subprocess``-backed implementation of :class:`~crc_wrap.core.protocols.ExternalTool`.

This module is the **only** place in the codebase that launches child
processes.  ``OSError`` from the launch is caught here and re-raised as
a typed :class:`~crc_wrap.exceptions.CrcWrapError` subclass: nothing
raw escapes the infrastructure boundary.

Calls block until the child exits; no timeout is applied, so a hung
``crc`` hangs this tool as well.
"""

from __future__ import annotations

import shutil
import subprocess

from crc_wrap.core.models import CommandResult
from crc_wrap.exceptions import ClusterToolNotFoundError, MissingDependencyError


class SubprocessTool:
    """Concrete :class:`ExternalTool` running a PATH executable.

    Usage::

        crc = SubprocessTool("crc")
        if crc.is_available():
            result = crc.run("status")

    This class satisfies the :class:`~crc_wrap.core.protocols.ExternalTool`
    protocol structurally: no explicit inheritance required.
    """

    def __init__(self, name: str) -> None:
        self.name: str = name

    def __repr__(self) -> str:
        return f"SubprocessTool({self.name!r})"

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def is_available(self) -> bool:
        return shutil.which(self.name) is not None

    def run(self, *args: str, capture: bool = True) -> CommandResult:
        """Run ``<name> *args`` and return its exit status.

        Raises
        ------
        ClusterToolNotFoundError
            When ``crc`` cannot be executed.
        MissingDependencyError
            When any other executable cannot be executed.
        """
        argv = [self.name, *args]
        try:
            completed = subprocess.run(
                argv,
                capture_output=capture,
                text=True,
                errors="replace",
                check=False,
            )
        except FileNotFoundError as exc:
            self._raise_missing(exc)
        except OSError as exc:
            raise MissingDependencyError(
                f"Could not execute {self.name}: {exc}",
            ) from exc

        return CommandResult(
            args=tuple(argv),
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )

    # ------------------------------------------------------------------
    # Exception mapping
    # ------------------------------------------------------------------

    def _raise_missing(self, exc: Exception) -> None:
        """Translate a ``FileNotFoundError`` into a domain exception."""
        if self.name == "crc":
            raise ClusterToolNotFoundError() from exc
        raise MissingDependencyError(
            f"{self.name} is not installed. Please install it and try again.",
        ) from exc
