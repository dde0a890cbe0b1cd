"""crc-wrap: OpenShift Local (CRC) management CLI.

Thin orchestration layer over the ``crc`` binary with a strict layered
architecture.
"""

from crc_wrap.version import __version__

__all__: list[str] = ["__version__"]
