"""Fixed names, paths, and URLs shared across layers."""

from __future__ import annotations

from pathlib import Path

CRC_BINARY: str = "crc"
DOCKER_BINARY: str = "docker"

REQUIRED_UTILITIES: tuple[str, ...] = ("curl", "tar")
"""Host utilities whose absence aborts the prerequisite check."""

CRC_DOWNLOAD_URL: str = "https://console.redhat.com/openshift/create/local"

DEFAULT_CONFIG_FILE: Path = Path("crc-config.json")
"""Resolved against the current working directory."""


def default_pull_secret_path() -> Path:
    """Return ``~/.crc/pull-secret.json`` for the current user."""
    return Path.home() / ".crc" / "pull-secret.json"
