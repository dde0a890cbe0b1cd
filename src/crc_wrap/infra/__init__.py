"""Infrastructure layer: external system integration.

This layer wraps all interaction with the operating system: child
processes (``crc``, ``docker``), PATH lookups, and the configuration
file.  Every raw ``OSError`` must be caught here and re-raised as a
:class:`~crc_wrap.exceptions.CrcWrapError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from crc_wrap.infra.config_loader import load, load_configuration
from crc_wrap.infra.probe import (
    BinaryStatus,
    check_binary,
    check_daemon_running,
    detect_binary,
    detect_platform,
    require_binary,
)
from crc_wrap.infra.subprocess_tool import SubprocessTool

__all__: list[str] = [
    "BinaryStatus",
    "SubprocessTool",
    "check_binary",
    "check_daemon_running",
    "detect_binary",
    "detect_platform",
    "load",
    "load_configuration",
    "require_binary",
]
