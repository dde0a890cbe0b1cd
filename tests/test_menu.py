"""Tests for the interactive menu loop (cli/menu.py).

Handlers are replaced with recorders where the test is about routing;
real handlers with a missing ``crc`` are used where the test is about
recoverable vs fatal failures.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest
from conftest import FakePrompter, FakeTool

from crc_wrap.cli import handlers
from crc_wrap.cli.context import HandlerContext
from crc_wrap.cli.menu import MENU, parse_choice, run_menu
from crc_wrap.core.models import ActionResult
from crc_wrap.exceptions import ClusterToolNotFoundError

CtxFactory = Callable[..., HandlerContext]


class TestParseChoice:
    def test_nine_entries(self) -> None:
        assert [entry.key for entry in MENU] == [str(n) for n in range(1, 10)]
        assert [entry.action for entry in MENU] == [
            "check", "install", "setup", "start", "status",
            "console", "info", "stop", "exit",
        ]

    def test_valid_with_whitespace(self) -> None:
        entry = parse_choice(" 5 ")
        assert entry is not None
        assert entry.action == "status"

    @pytest.mark.parametrize("raw", ["", "0", "10", "five", "1.0"])
    def test_invalid(self, raw: str) -> None:
        assert parse_choice(raw) is None


class TestRunMenu:
    def test_routes_then_exits(
        self,
        make_ctx: CtxFactory,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        seen: list[str] = []
        monkeypatch.setattr(
            handlers, "run_status", lambda ctx: seen.append("status") or ActionResult.SUCCESS,
        )
        monkeypatch.setattr(
            handlers, "run_check", lambda ctx: seen.append("check") or ActionResult.SUCCESS,
        )
        prompter = FakePrompter(texts=["5", "1", "9"])

        assert run_menu(make_ctx(prompter=prompter)) is ActionResult.SUCCESS
        assert seen == ["status", "check"]
        assert prompter.pauses == 2

    def test_invalid_input_reprompts(
        self,
        make_ctx: CtxFactory,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        crc = FakeTool("crc")
        prompter = FakePrompter(texts=["x", "42", "9"])

        assert run_menu(make_ctx(crc=crc, prompter=prompter)) is ActionResult.SUCCESS
        assert crc.calls == []
        assert capsys.readouterr().err.count("Invalid option") == 2

    def test_console_without_crc_returns_to_menu(self, make_ctx: CtxFactory) -> None:
        crc = FakeTool("crc", available=False)
        prompter = FakePrompter(texts=["6", "7", "9"])

        assert run_menu(make_ctx(crc=crc, prompter=prompter)) is ActionResult.SUCCESS
        assert prompter.pauses == 2

    def test_fatal_error_leaves_loop(self, make_ctx: CtxFactory) -> None:
        crc = FakeTool("crc", available=False)
        prompter = FakePrompter(texts=["3"])

        with pytest.raises(ClusterToolNotFoundError):
            run_menu(make_ctx(crc=crc, prompter=prompter))
