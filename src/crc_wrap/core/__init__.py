"""Core / service layer: pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem access, no direct ``subprocess`` use.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic given their
  injected collaborators.
"""

from crc_wrap.core.cluster_service import ClusterService
from crc_wrap.core.models import (
    ActionResult,
    CheckResult,
    CommandResult,
    Configuration,
    ConfigLoadResult,
    HostPlatform,
    PrerequisiteReport,
    Severity,
)
from crc_wrap.core.protocols import ExternalTool

__all__: list[str] = [
    "ActionResult",
    "CheckResult",
    "ClusterService",
    "CommandResult",
    "ConfigLoadResult",
    "Configuration",
    "ExternalTool",
    "HostPlatform",
    "PrerequisiteReport",
    "Severity",
]
