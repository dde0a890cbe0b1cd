"""CLI application entry point and command routing for crc-wrap.

This module is the **sole error boundary** for the entire application.
It catches :class:`~crc_wrap.exceptions.CrcWrapError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here: all work is delegated to the action
  handlers, which in turn use the core/service and infrastructure layers.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from crc_wrap.cli import exit_codes
from crc_wrap.cli.console import console, escape_markup
from crc_wrap.exceptions import CrcWrapError, UnknownActionError
from crc_wrap.version import __version__

PROG = "crc-wrap"

ACTIONS: tuple[str, ...] = (
    "check",
    "install",
    "setup",
    "start",
    "stop",
    "status",
    "interactive",
    "all",
    "help",
)

USAGE = f"""\
Usage: {PROG} [options] [action] [version]

Actions:
  check       - Check system prerequisites
  install     - Show CRC install instructions (optionally name a version)
  setup       - Setup CRC environment
  start       - Start OpenShift cluster
  stop        - Stop OpenShift cluster
  status      - Show cluster status
  interactive - Show interactive menu (default)
  all         - Perform check, install, setup, start
  help        - Display this help message

Options:
  -y, --yes          Answer yes to confirmations and skip optional prompts
  -c, --config PATH  Resource configuration file (default: crc-config.json)
  -V, --version      Show the crc-wrap version

Examples:
  {PROG}                     # Run in interactive mode
  {PROG} check               # Check prerequisites
  {PROG} install 2.40.0      # Instructions for a specific CRC version
  {PROG} start               # Start OpenShift cluster
  {PROG} --yes all           # Unattended check, install, setup, start
"""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The action is validated by :func:`main` rather than argparse
    ``choices`` so that an unknown action goes through the regular
    error boundary with a usage hint.
    """
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="OpenShift Local (CRC) management CLI.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Answer yes to confirmations and skip optional prompts.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Path to the JSON resource configuration file.",
    )
    parser.add_argument(
        "action",
        nargs="?",
        default="interactive",
        help=f"One of: {', '.join(ACTIONS)}.",
    )
    parser.add_argument(
        "version",
        nargs="?",
        default=None,
        help="CRC version for the 'install' action.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _print_banner() -> None:
    console.print("=" * 56)
    console.print("  OpenShift Local (CRC) Deployment")
    console.print("=" * 56)
    console.print()


def main(argv: list[str] | None = None) -> int:
    """Run the crc-wrap CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.  Fatal conditions are raised, not returned.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    action: str = args.action.lower()

    if action == "help":
        sys.stdout.write(USAGE)
        return exit_codes.SUCCESS

    if action not in ACTIONS:
        raise UnknownActionError(
            f"Unknown action: {args.action}.",
            hint=f"Use '{PROG} help' for usage information.",
        )

    from crc_wrap.cli import context, handlers, menu

    ctx = context.build_context(config_path=args.config, assume_yes=args.yes)
    _print_banner()

    if action == "interactive":
        menu.run_menu(ctx)
    elif action == "install":
        handlers.run_check(ctx)
        handlers.run_install(ctx, args.version)
    else:
        handler: handlers.Handler = getattr(handlers, f"run_{action}")
        handler(ctx)

    # A declined or partially completed action is still a normal exit.
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CrcWrapError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
