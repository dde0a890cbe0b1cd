"""Core cluster service: typed access to ``crc`` subcommands.

This service delegates every invocation to an
:class:`~crc_wrap.core.protocols.ExternalTool` injected at construction
time.  It is responsible for:

* Building ``crc`` argument lists.
* Inspecting every exit status and raising
  :class:`~crc_wrap.exceptions.ClusterCommandError` on failure.
* Extracting the interesting bits of ``crc`` output (version line,
  credentials).

Guarantees
----------
* Pure orchestration: no ``print()``, no filesystem access.
* No ``subprocess`` import.
"""

from __future__ import annotations

import re

from crc_wrap.core.models import CommandResult, Configuration
from crc_wrap.core.protocols import ExternalTool
from crc_wrap.exceptions import ClusterCommandError, ClusterToolNotFoundError

_OPENSHIFT_VERSION_RE = re.compile(r"OpenShift version:.*")


class ClusterService:
    """Stateless facade over the ``crc`` command line.

    Parameters
    ----------
    tool:
        Any object satisfying the :class:`ExternalTool` protocol, bound
        to the ``crc`` executable.
    """

    def __init__(self, tool: ExternalTool) -> None:
        self._tool: ExternalTool = tool

    # ------------------------------------------------------------------
    # Presence
    # ------------------------------------------------------------------

    def is_installed(self) -> bool:
        return self._tool.is_available()

    def require_installed(self) -> None:
        """Raise :class:`ClusterToolNotFoundError` unless ``crc`` is on PATH."""
        if not self._tool.is_available():
            raise ClusterToolNotFoundError()

    # ------------------------------------------------------------------
    # Version (pure parsing + one query)
    # ------------------------------------------------------------------

    @staticmethod
    def parse_version(output: str) -> str | None:
        """Pick the most useful line out of ``crc version`` output.

        Rules
        -----
        * Prefer the first ``OpenShift version: ...`` fragment.
        * Otherwise fall back to the first non-empty line.
        * ``None`` when the output is blank.
        """
        match = _OPENSHIFT_VERSION_RE.search(output)
        if match is not None:
            return match.group(0).strip()
        for line in output.splitlines():
            if line.strip():
                return line.strip()
        return None

    def version(self) -> str | None:
        """Return the installed version string, or ``None`` if unknown."""
        result = self._tool.run("version")
        if not result.ok:
            return None
        return self.parse_version(result.stdout)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def setup(self) -> None:
        """Run ``crc setup`` (streams output)."""
        self._check(
            self._tool.run("setup", capture=False),
            "CRC setup failed.",
            hint="Review the output above; 'crc setup' may need to be re-run.",
        )

    def set_config(self, key: str, value: str | int) -> None:
        """Run ``crc config set <key> <value>``."""
        self._check(
            self._tool.run("config", "set", key, str(value)),
            f"Failed to set CRC config '{key}' to '{value}'.",
        )

    def apply_configuration(self, configuration: Configuration) -> None:
        """Persist *configuration* via three ``crc config set`` calls."""
        self.set_config("memory", configuration.memory)
        self.set_config("cpus", configuration.cpus)
        self.set_config("disk-size", configuration.disk_size)

    def disable_telemetry(self) -> None:
        self.set_config("consent-telemetry", "no")

    def start(self) -> None:
        """Run ``crc start`` (streams output, blocks until done)."""
        self._check(
            self._tool.run("start", capture=False),
            "Failed to start OpenShift cluster.",
            hint="Run 'crc status' or 'crc start --log-level debug' for details.",
        )

    def stop(self) -> None:
        self._check(
            self._tool.run("stop", capture=False),
            "Failed to stop OpenShift cluster.",
        )

    def status(self) -> CommandResult:
        """Run ``crc status`` and return the raw result unchecked.

        A stopped or missing VM makes ``crc status`` exit non-zero; the
        caller decides how loudly to report that.
        """
        return self._tool.run("status")

    def open_console(self) -> None:
        self._check(
            self._tool.run("console", capture=False),
            "Failed to open the OpenShift web console.",
            hint="Make sure the cluster is running ('crc status').",
        )

    def credentials(self) -> str:
        """Return the output of ``crc console --credentials``."""
        result = self._check(
            self._tool.run("console", "--credentials"),
            "Failed to retrieve cluster credentials.",
            hint="Make sure the cluster is running ('crc status').",
        )
        return result.stdout

    # ------------------------------------------------------------------
    # Exit status mapping
    # ------------------------------------------------------------------

    @staticmethod
    def _check(
        result: CommandResult,
        message: str,
        *,
        hint: str | None = None,
    ) -> CommandResult:
        if result.ok:
            return result
        detail = (result.stderr or result.stdout).strip()
        if detail:
            message = f"{message} {detail}"
        raise ClusterCommandError(
            message,
            returncode=result.returncode,
            hint=hint,
        )
