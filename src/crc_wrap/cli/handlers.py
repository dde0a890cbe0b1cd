"""Action handlers: one check→invoke→report pipeline per action.

Each handler receives a :class:`~crc_wrap.cli.context.HandlerContext`
and returns an :class:`~crc_wrap.core.models.ActionResult`.  Fatal
conditions (``crc`` missing where required, a failed lifecycle call)
are raised as :class:`~crc_wrap.exceptions.CrcWrapError` subclasses and
left for the CLI error boundary.

Handlers share no mutable state; the :class:`Configuration` used by
``setup`` and ``start`` is created inside the handler and passed by
value to the cluster service.
"""

from __future__ import annotations

from collections.abc import Callable

from crc_wrap.cli import console as out
from crc_wrap.cli.check import run_check
from crc_wrap.cli.context import HandlerContext
from crc_wrap.core.models import ActionResult, Configuration
from crc_wrap.exceptions import ClusterCommandError, ClusterToolNotFoundError
from crc_wrap.infra.config_loader import load_configuration
from crc_wrap.utils.constants import CRC_DOWNLOAD_URL

Handler = Callable[[HandlerContext], ActionResult]


# ---------------------------------------------------------------------------
# Shared gates
# ---------------------------------------------------------------------------

def _pull_secret_gate(ctx: HandlerContext, *, purpose: str) -> bool:
    """Return ``True`` when it is fine to proceed.

    A present pull secret passes silently.  A missing one is reported
    and the user must explicitly agree to continue without it.
    """
    path = ctx.pull_secret_path
    if path.is_file():
        return True

    out.warning(f"Pull secret not found at {path}")
    out.info(f"Please download your pull secret from: {CRC_DOWNLOAD_URL}")
    out.info(f"and save it to {path} before {purpose}.")

    if not ctx.confirm_gate("Do you want to continue without the pull secret?"):
        out.info("Operation cancelled. Please set up your pull secret and try again.")
        return False
    return True


# ---------------------------------------------------------------------------
# install
# ---------------------------------------------------------------------------

_EXTENDED_INSTRUCTIONS: tuple[str, ...] = (
    f"1. Go to {CRC_DOWNLOAD_URL}",
    "2. Download the appropriate version for your OS",
    "3. Extract the archive:",
    "   tar -xf crc-*-amd64.tar.xz",
    "4. Move the binary to your PATH:",
    "   sudo cp ./crc-*-amd64/crc /usr/local/bin/",
    "   sudo chmod +x /usr/local/bin/crc",
    "5. Download your pull secret from the same page",
    "6. Create the directory for the pull secret:",
    "   mkdir -p {secret_dir}",
    "7. Save your pull secret:",
    "   cp path/to/pull-secret.txt {secret_path}",
)


def run_install(ctx: HandlerContext, version: str | None = None) -> ActionResult:
    """Print installation or upgrade guidance.  Never fatal."""
    cluster = ctx.cluster
    if cluster.is_installed():
        out.info("OpenShift Local (CRC) is already installed.")
        out.info(f"Installed version: {cluster.version() or 'unknown'}")
        if version:
            out.info(f"Requested version: {version}")
        out.info("If you want to reinstall or upgrade, please:")
        out.info(f"1. Download the latest version from: {CRC_DOWNLOAD_URL}")
        out.info("2. Get your pull secret from the same location")
        return ActionResult.SUCCESS

    out.info("OpenShift Local (CRC) is not installed.")
    if version:
        out.info(f"Requested version: {version} (pick it from the download page)")
    out.info(f"Please download it from: {CRC_DOWNLOAD_URL}")
    out.info("You'll need to:")
    out.info("1. Create a Red Hat account if you don't have one")
    out.info("2. Download the appropriate version for your OS")
    out.info("3. Download your pull secret")
    out.info("4. Extract the archive and move the 'crc' binary to your PATH")
    out.info(f"5. Save your pull secret to {ctx.pull_secret_path}")

    if ctx.interactive and ctx.prompter.confirm(
        "Would you like instructions for manual installation?",
        default=False,
    ):
        out.console.print()
        out.info("Manual Installation Instructions:")
        for line in _EXTENDED_INSTRUCTIONS:
            out.echo_raw(
                line.format(
                    secret_dir=ctx.pull_secret_path.parent,
                    secret_path=ctx.pull_secret_path,
                )
            )
        out.console.print()

    return ActionResult.SUCCESS


# ---------------------------------------------------------------------------
# setup
# ---------------------------------------------------------------------------

def run_setup(ctx: HandlerContext) -> ActionResult:
    """Run ``crc setup`` and persist resource settings from the config file."""
    cluster = ctx.cluster
    cluster.require_installed()

    if not _pull_secret_gate(ctx, purpose="continuing"):
        return ActionResult.RECOVERABLE

    out.info("Setting up CRC environment...")

    loaded = load_configuration(ctx.config_path)
    for note in loaded.warnings:
        out.warning(note)
    configuration = loaded.configuration
    if loaded.source is None:
        out.info(f"Using default configuration: {configuration.describe()}")
    elif not loaded.warnings:
        out.info(f"Loaded configuration from {loaded.source}")

    out.info(f"Setting up CRC with {configuration.describe()}")
    cluster.setup()
    cluster.apply_configuration(configuration)
    cluster.disable_telemetry()

    out.success("CRC environment setup completed")
    return ActionResult.SUCCESS


# ---------------------------------------------------------------------------
# start
# ---------------------------------------------------------------------------

def prompt_custom_configuration(ctx: HandlerContext) -> Configuration | None:
    """Ask whether to customise resources; ``None`` means keep defaults.

    Blank answers to the individual prompts fall back to each field's
    default independently.
    """
    if not ctx.interactive:
        return None
    if ctx.prompter.confirm(
        "Would you like to start with default configuration?",
        default=True,
    ):
        return None

    defaults = Configuration.defaults()
    return Configuration(
        memory=ctx.prompter.ask_int("Enter memory in MB", default=defaults.memory),
        cpus=ctx.prompter.ask_int("Enter number of CPUs", default=defaults.cpus),
        disk_size=ctx.prompter.ask_int(
            "Enter disk size in GB", default=defaults.disk_size
        ),
    )


def run_start(ctx: HandlerContext) -> ActionResult:
    """Start the cluster and print login credentials.

    Only a failed start is fatal; credentials that cannot be fetched
    afterwards leave a running cluster and a ``RECOVERABLE`` result.
    """
    cluster = ctx.cluster
    cluster.require_installed()

    out.info("Starting OpenShift cluster...")
    if not _pull_secret_gate(ctx, purpose="starting the cluster"):
        return ActionResult.RECOVERABLE
    if not ctx.pull_secret_path.is_file():
        out.info("You will be prompted to enter the path to your pull secret during startup.")

    custom = prompt_custom_configuration(ctx)
    if custom is not None:
        out.info(f"Applying custom configuration: {custom.describe()}")
        cluster.apply_configuration(custom)

    cluster.start()
    out.success("OpenShift cluster started successfully")

    out.info("Getting login credentials...")
    try:
        credentials = cluster.credentials()
    except ClusterCommandError as exc:
        out.warning(str(exc))
        out.info("Retrieve them later with: crc console --credentials")
        return ActionResult.RECOVERABLE
    out.echo_raw(credentials)
    out.info("You can access the OpenShift console by running: crc console")
    return ActionResult.SUCCESS


# ---------------------------------------------------------------------------
# stop / status
# ---------------------------------------------------------------------------

def run_stop(ctx: HandlerContext) -> ActionResult:
    cluster = ctx.cluster
    cluster.require_installed()

    out.info("Stopping OpenShift cluster...")
    if not ctx.confirm_gate("Are you sure you want to stop the OpenShift cluster?"):
        out.info("Operation cancelled")
        return ActionResult.SUCCESS

    cluster.stop()
    out.success("OpenShift cluster stopped successfully")
    return ActionResult.SUCCESS


def run_status(ctx: HandlerContext) -> ActionResult:
    cluster = ctx.cluster
    cluster.require_installed()

    out.info("Checking OpenShift cluster status...")
    result = cluster.status()
    out.echo_raw(result.stdout)
    if not result.ok:
        if result.stderr:
            out.echo_raw(result.stderr)
        out.warning(f"crc status exited with code {result.returncode}")
        return ActionResult.RECOVERABLE
    return ActionResult.SUCCESS


# ---------------------------------------------------------------------------
# console / info (menu only)
# ---------------------------------------------------------------------------

def run_console(ctx: HandlerContext) -> ActionResult:
    """Open the web console; a missing ``crc`` is recoverable here."""
    cluster = ctx.cluster
    try:
        cluster.require_installed()
    except ClusterToolNotFoundError as exc:
        out.error(str(exc))
        return ActionResult.RECOVERABLE

    out.info("Opening web console...")
    cluster.open_console()
    return ActionResult.SUCCESS


def run_info(ctx: HandlerContext) -> ActionResult:
    """Print cluster credentials; a missing ``crc`` is recoverable here."""
    cluster = ctx.cluster
    try:
        cluster.require_installed()
    except ClusterToolNotFoundError as exc:
        out.error(str(exc))
        return ActionResult.RECOVERABLE

    out.info("Cluster information:")
    out.echo_raw(cluster.credentials())
    return ActionResult.SUCCESS


# ---------------------------------------------------------------------------
# all
# ---------------------------------------------------------------------------

def run_all(ctx: HandlerContext) -> ActionResult:
    """Run check, install, setup and start in order.

    A ``RECOVERABLE`` step does not stop the sequence; the combined
    result is ``SUCCESS`` only when every step succeeded.
    """
    steps: tuple[Handler, ...] = (run_check, run_install, run_setup, run_start)
    results = [step(ctx) for step in steps]
    if all(result is ActionResult.SUCCESS for result in results):
        return ActionResult.SUCCESS
    return ActionResult.RECOVERABLE
