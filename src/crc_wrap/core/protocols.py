"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols, never on concrete
implementations, so that tests can substitute fakes for ``crc`` and
``docker`` without a real installation.
"""

from __future__ import annotations

from typing import Protocol

from crc_wrap.core.models import CommandResult


class ExternalTool(Protocol):
    """Contract for a single external executable.

    Any object exposing :attr:`name`, :meth:`is_available` and
    :meth:`run` satisfies this protocol structurally (no explicit
    inheritance required).
    """

    name: str
    """Executable name looked up on PATH (e.g. ``"crc"``)."""

    def is_available(self) -> bool:
        """Return ``True`` when the executable can be located."""
        ...  # pragma: no cover

    def run(self, *args: str, capture: bool = True) -> CommandResult:
        """Run the executable with *args* and block until it exits.

        Parameters
        ----------
        args:
            Arguments passed after the executable name.
        capture:
            When ``True`` stdout/stderr are captured into the returned
            :class:`CommandResult`; when ``False`` they stream straight
            to the terminal and the result carries empty strings.

        Raises
        ------
        ClusterToolNotFoundError
            When the executable disappears between lookup and launch.
        """
        ...  # pragma: no cover
