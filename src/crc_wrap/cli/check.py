"""``crc-wrap check``: prerequisite diagnostics.

Gathers host information and renders a Rich table summarising whether
the environment can run OpenShift Local.

This module lives in the CLI layer: it may import from ``infra``
and ``core``, and it renders via Rich.  Missing *required* host
utilities, a missing docker CLI and an unsupported OS are fatal; a
stopped Docker daemon and a missing ``crc`` are reported as warnings.
"""

from __future__ import annotations

import sys

from crc_wrap.cli import console as out
from crc_wrap.cli.console import console, escape_markup
from crc_wrap.cli.context import HandlerContext
from crc_wrap.core.models import (
    ActionResult,
    CheckResult,
    HostPlatform,
    PrerequisiteReport,
    Severity,
)
from crc_wrap.infra.probe import (
    check_binary,
    check_daemon_running,
    detect_platform,
    require_binary,
)
from crc_wrap.utils.constants import CRC_DOWNLOAD_URL, DOCKER_BINARY, REQUIRED_UTILITIES


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _os_check(host: HostPlatform) -> CheckResult:
    value = host.display_name
    if host.distribution:
        value = f"{value} ({host.distribution})"
    return CheckResult(label="OS", ok=True, detail=value)


def _binary_check(name: str, severity: Severity = Severity.REQUIRED) -> CheckResult:
    found = check_binary(name)
    return CheckResult(
        label=name,
        ok=found,
        detail="installed" if found else "not found",
        severity=severity,
    )


def _docker_daemon_check(ctx: HandlerContext) -> CheckResult:
    running = check_daemon_running(ctx.docker)
    return CheckResult(
        label="docker daemon",
        ok=running,
        detail="running" if running else "not running",
        severity=Severity.OPTIONAL,
    )


def _crc_check(ctx: HandlerContext) -> CheckResult:
    cluster = ctx.cluster
    if not cluster.is_installed():
        return CheckResult(
            label="crc",
            ok=False,
            detail="not installed",
            severity=Severity.OPTIONAL,
        )
    return CheckResult(
        label="crc",
        ok=True,
        detail=cluster.version() or "installed (version unknown)",
        severity=Severity.OPTIONAL,
    )


def collect_report(ctx: HandlerContext, host: HostPlatform) -> PrerequisiteReport:
    """Run every probe for *host* and return the ordered report."""
    checks: list[CheckResult] = [_os_check(host)]
    if host.package_manager:
        checks.append(_binary_check(host.package_manager))
    checks.extend(_binary_check(name) for name in REQUIRED_UTILITIES)
    checks.append(_binary_check(DOCKER_BINARY))
    checks.append(_docker_daemon_check(ctx))
    checks.append(_crc_check(ctx))
    return PrerequisiteReport(checks=tuple(checks))


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _status_markup(check: CheckResult) -> str:
    if check.ok:
        return "[green]OK[/green]"
    if check.severity is Severity.REQUIRED:
        return "[red]FAIL[/red]"
    return "[yellow]WARN[/yellow]"


def _status_plain(check: CheckResult) -> str:
    if check.ok:
        return "OK"
    return "FAIL" if check.severity is Severity.REQUIRED else "WARN"


def _print_plain_report(report: PrerequisiteReport) -> None:
    """Render the report without Rich."""
    print("\ncrc-wrap check", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<16} {'Value':<38} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for check in report.checks:
        print(
            f"{check.label:<16} {check.detail:<38} {_status_plain(check):<8}",
            file=sys.stderr,
        )
    print(file=sys.stderr)


def render_report(report: PrerequisiteReport) -> None:
    """Print *report* as a Rich table, or plain text without Rich."""
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_report(report)
        return

    table = Table(
        title="crc-wrap check",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=14)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)

    for check in report.checks:
        table.add_row(check.label, escape_markup(check.detail), _status_markup(check))

    console.print()
    console.print(table)
    console.print()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_check(ctx: HandlerContext) -> ActionResult:
    """Execute all prerequisite checks and render a summary table.

    Returns
    -------
    ActionResult
        ``SUCCESS`` when everything is present, ``RECOVERABLE`` when
        ``crc`` is missing.

    Raises
    ------
    UnsupportedPlatformError
        When the host is neither Linux nor macOS.
    MissingDependencyError
        When a required host utility or the docker CLI is missing
        (raised after the report has been rendered).
    """
    out.info("Checking prerequisites...")
    host = detect_platform()
    out.info(f"Running on {host.display_name}")
    if host.distribution:
        out.info(f"Distribution: {host.distribution}")

    report = collect_report(ctx, host)
    render_report(report)

    for missing in report.missing_required:
        require_binary(missing.label)

    by_label = {check.label: check for check in report.checks}
    if not by_label["docker daemon"].ok:
        out.warning("Docker is not running")

    crc_row = by_label["crc"]
    if not crc_row.ok:
        out.warning("OpenShift Local (CRC) is not installed on your system.")
        out.info(f"Please download it from: {CRC_DOWNLOAD_URL}")
        out.info(
            "You'll need to create a Red Hat account and use the CRC pull "
            "secret provided there."
        )
        return ActionResult.RECOVERABLE

    out.success(f"OpenShift Local (CRC) is installed: {crc_row.detail}")
    out.success("Prerequisites check completed")
    return ActionResult.SUCCESS
