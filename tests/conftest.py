"""Shared pytest fixtures and configuration for the crc-wrap test suite.

Guidelines
----------
* No real ``crc`` or ``docker`` invocation in any test.
* External tools are replaced by :class:`FakeTool` at the protocol
  boundary; prompts by :class:`FakePrompter`.
* Tests must not depend on OS state (HOME, PATH, cwd).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

import pytest

from crc_wrap.cli.context import HandlerContext
from crc_wrap.cli.prompts import resolve_int
from crc_wrap.core.models import CommandResult


class FakeTool:
    """Scriptable :class:`~crc_wrap.core.protocols.ExternalTool` double."""

    def __init__(self, name: str, *, available: bool = True) -> None:
        self.name = name
        self.available = available
        self.calls: list[tuple[str, ...]] = []
        self._responses: dict[tuple[str, ...], CommandResult] = {}

    def respond(
        self,
        *args: str,
        returncode: int = 0,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        self._responses[args] = CommandResult(
            args=(self.name, *args),
            returncode=returncode,
            stdout=stdout,
            stderr=stderr,
        )

    def is_available(self) -> bool:
        return self.available

    def run(self, *args: str, capture: bool = True) -> CommandResult:
        self.calls.append(args)
        return self._responses.get(
            args,
            CommandResult(args=(self.name, *args), returncode=0),
        )


class FakePrompter:
    """Scripted :class:`~crc_wrap.cli.prompts.Prompter` double.

    Answers are consumed in order; running out of answers fails the
    test loudly instead of blocking.
    """

    def __init__(
        self,
        *,
        confirms: Iterable[bool] = (),
        ints: Iterable[str] = (),
        texts: Iterable[str] = (),
    ) -> None:
        self._confirms = list(confirms)
        self._ints = list(ints)
        self._texts = list(texts)
        self.asked: list[str] = []
        self.pauses = 0

    def confirm(self, message: str, *, default: bool = False) -> bool:
        self.asked.append(message)
        assert self._confirms, f"unexpected confirm: {message}"
        return self._confirms.pop(0)

    def ask_int(self, message: str, *, default: int) -> int:
        self.asked.append(message)
        assert self._ints, f"unexpected int prompt: {message}"
        return resolve_int(self._ints.pop(0), default)

    def text(self, message: str) -> str:
        self.asked.append(message)
        assert self._texts, f"unexpected text prompt: {message}"
        return self._texts.pop(0)

    def pause(self) -> None:
        self.pauses += 1


@pytest.fixture
def pull_secret(tmp_path: Path) -> Path:
    """An existing pull-secret file under a temporary home."""
    path = tmp_path / "home" / ".crc" / "pull-secret.json"
    path.parent.mkdir(parents=True)
    path.write_text('{"auths": {}}', encoding="utf-8")
    return path


@pytest.fixture
def make_ctx(tmp_path: Path, pull_secret: Path) -> Callable[..., HandlerContext]:
    """Factory for a :class:`HandlerContext` wired to fakes.

    Defaults: ``crc`` and ``docker`` available, pull secret present,
    no config file, no scripted answers.
    """

    def _make(**overrides: Any) -> HandlerContext:
        values: dict[str, Any] = {
            "crc": FakeTool("crc"),
            "docker": FakeTool("docker"),
            "prompter": FakePrompter(),
            "config_path": tmp_path / "crc-config.json",
            "pull_secret_path": pull_secret,
            "assume_yes": False,
        }
        values.update(overrides)
        return HandlerContext(**values)

    return _make


@pytest.fixture
def missing_secret(tmp_path: Path) -> Path:
    return tmp_path / "nowhere" / ".crc" / "pull-secret.json"
