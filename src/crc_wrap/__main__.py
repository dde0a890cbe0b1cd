"""Allow ``python -m crc_wrap`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m crc_wrap`` behaves identically to the ``crc-wrap``
console script.
"""

from __future__ import annotations

from crc_wrap.cli.app import cli

if __name__ == "__main__":
    cli()
