"""Per-invocation collaborators handed to every action handler."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from crc_wrap.cli.prompts import Prompter, QuestionaryPrompter
from crc_wrap.core.cluster_service import ClusterService
from crc_wrap.core.protocols import ExternalTool
from crc_wrap.infra.subprocess_tool import SubprocessTool
from crc_wrap.utils.constants import (
    CRC_BINARY,
    DEFAULT_CONFIG_FILE,
    DOCKER_BINARY,
    default_pull_secret_path,
)


@dataclass(frozen=True)
class HandlerContext:
    """Everything a handler may touch.

    ``assume_yes`` marks an unattended run: confirmation gates pass
    without asking and optional prompts (custom resources, extended
    install instructions) are skipped.
    """

    crc: ExternalTool
    docker: ExternalTool
    prompter: Prompter
    config_path: Path = DEFAULT_CONFIG_FILE
    pull_secret_path: Path = field(default_factory=default_pull_secret_path)
    assume_yes: bool = False

    @property
    def cluster(self) -> ClusterService:
        return ClusterService(self.crc)

    @property
    def interactive(self) -> bool:
        return not self.assume_yes

    def confirm_gate(self, message: str) -> bool:
        """Ask *message* unless running with ``--yes``."""
        if self.assume_yes:
            return True
        return self.prompter.confirm(message, default=False)


def build_context(
    *,
    config_path: Path | None = None,
    assume_yes: bool = False,
) -> HandlerContext:
    """Wire the real ``crc``/``docker`` tools and the questionary prompter."""
    return HandlerContext(
        crc=SubprocessTool(CRC_BINARY),
        docker=SubprocessTool(DOCKER_BINARY),
        prompter=QuestionaryPrompter(),
        config_path=config_path or DEFAULT_CONFIG_FILE,
        assume_yes=assume_yes,
    )
