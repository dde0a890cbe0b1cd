"""Interactive numbered menu.

Renders a fixed nine-entry menu, reads one line, runs the matching
handler, pauses for Enter and redraws.  The loop ends only when the user
picks *Exit* or a fatal :class:`~crc_wrap.exceptions.CrcWrapError`
propagates out of a handler.  Unrecognised input is reported and the
menu is shown again.
"""

from __future__ import annotations

from dataclasses import dataclass

from crc_wrap.cli import console as out
from crc_wrap.cli import handlers
from crc_wrap.cli.console import console
from crc_wrap.cli.context import HandlerContext
from crc_wrap.core.models import ActionResult

_RULE = "=" * 56


@dataclass(frozen=True, slots=True)
class MenuEntry:
    key: str
    label: str
    action: str
    """Name resolved by :func:`_run_entry`; ``"exit"`` ends the loop."""


MENU: tuple[MenuEntry, ...] = (
    MenuEntry("1", "Check prerequisites", "check"),
    MenuEntry("2", "Get download & installation instructions", "install"),
    MenuEntry("3", "Setup environment", "setup"),
    MenuEntry("4", "Start OpenShift cluster", "start"),
    MenuEntry("5", "Show cluster status", "status"),
    MenuEntry("6", "Open web console", "console"),
    MenuEntry("7", "Show cluster info", "info"),
    MenuEntry("8", "Stop OpenShift cluster", "stop"),
    MenuEntry("9", "Exit", "exit"),
)


def parse_choice(raw: str) -> MenuEntry | None:
    """Map user input to a :class:`MenuEntry`, or ``None`` if invalid."""
    key = raw.strip()
    return next((entry for entry in MENU if entry.key == key), None)


def _render_menu() -> None:
    console.clear()
    console.print(_RULE)
    console.print("  OpenShift Local (CRC) Management")
    console.print(_RULE)
    console.print()
    for entry in MENU:
        console.print(f"  {entry.key}) {entry.label}")
    console.print()
    console.print(_RULE)


def _run_entry(ctx: HandlerContext, entry: MenuEntry) -> ActionResult:
    # Resolved at call time so tests can patch individual handlers.
    handler = getattr(handlers, f"run_{entry.action}")
    return handler(ctx)


def run_menu(ctx: HandlerContext) -> ActionResult:
    """Loop until the user selects *Exit*."""
    while True:
        _render_menu()
        entry = parse_choice(ctx.prompter.text(f"Please select an option [1-{len(MENU)}]:"))
        if entry is None:
            out.warning("Invalid option. Please try again.")
            ctx.prompter.pause()
            continue
        if entry.action == "exit":
            out.info("Exiting...")
            return ActionResult.SUCCESS

        _run_entry(ctx, entry)
        ctx.prompter.pause()
