"""Tests for prompt parsing and the questionary prompter (cli/prompts.py).

questionary is mocked: no terminal interaction.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from crc_wrap.cli.prompts import QuestionaryPrompter, _validate_int_input, resolve_int
from crc_wrap.exceptions import PromptCancelledError


class TestResolveInt:
    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_blank_uses_default(self, raw: str | None) -> None:
        assert resolve_int(raw, 16384) == 16384

    def test_value(self) -> None:
        assert resolve_int(" 8 ", 6) == 8

    @pytest.mark.parametrize("raw", ["abc", "0", "-4", "2.5"])
    def test_invalid(self, raw: str) -> None:
        with pytest.raises(ValueError):
            resolve_int(raw, 6)

    def test_validator_messages(self) -> None:
        assert _validate_int_input("") is True
        assert _validate_int_input("12") is True
        assert isinstance(_validate_int_input("twelve"), str)


def _fake_questionary(answer: object) -> MagicMock:
    module = MagicMock()
    module.confirm.return_value.ask.return_value = answer
    module.text.return_value.ask.return_value = answer
    return module


class TestQuestionaryPrompter:
    def test_confirm(self) -> None:
        module = _fake_questionary(True)
        with patch("crc_wrap.cli.prompts._import_questionary", return_value=module):
            assert QuestionaryPrompter().confirm("Stop?") is True
        module.confirm.assert_called_once_with("Stop?", default=False)

    def test_ask_int_blank(self) -> None:
        module = _fake_questionary("")
        with patch("crc_wrap.cli.prompts._import_questionary", return_value=module):
            assert QuestionaryPrompter().ask_int("Enter memory in MB", default=16384) == 16384
        assert module.text.call_args.args[0] == "Enter memory in MB (default: 16384):"

    @pytest.mark.parametrize("method", ["confirm", "text"])
    def test_cancel_raises(self, method: str) -> None:
        module = _fake_questionary(None)
        with patch("crc_wrap.cli.prompts._import_questionary", return_value=module):
            with pytest.raises(PromptCancelledError):
                getattr(QuestionaryPrompter(), method)("Question?")

    def test_ask_int_cancel_raises(self) -> None:
        module = _fake_questionary(None)
        with patch("crc_wrap.cli.prompts._import_questionary", return_value=module):
            with pytest.raises(PromptCancelledError):
                QuestionaryPrompter().ask_int("Enter number of CPUs", default=6)
