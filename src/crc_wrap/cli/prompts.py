"""Interactive prompts for the CLI layer.

This module is responsible for:

* Yes/no confirmations (pull-secret gate, destructive stop).
* Integer prompts where blank input means "use the default".
* Free-text input for the interactive menu and the Enter-to-continue
  pause.

``questionary`` is imported lazily so that non-interactive paths
(``help``, ``--version``, ``--yes`` runs) work without it.  Handlers
depend on the :class:`Prompter` protocol, never on questionary directly.
"""

from __future__ import annotations

from typing import Any, Protocol

from crc_wrap.exceptions import EnvironmentError, PromptCancelledError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive input."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


# ---------------------------------------------------------------------------
# Input parsing (pure: no I/O)
# ---------------------------------------------------------------------------

def resolve_int(raw: str | None, default: int) -> int:
    """Turn prompt input into a positive integer.

    Blank input (or ``None``) resolves to *default*.

    Raises
    ------
    ValueError
        If *raw* is not blank and not a positive integer.
    """
    if raw is None or not raw.strip():
        return default
    value = int(raw.strip())
    if value <= 0:
        raise ValueError(f"expected a positive integer, got {value}")
    return value


def _validate_int_input(text: str) -> bool | str:
    """questionary validator: ``True`` or an error message."""
    try:
        resolve_int(text, 1)
    except ValueError:
        return "Please enter a positive whole number, or leave blank for the default."
    return True


# ---------------------------------------------------------------------------
# Prompter contract + questionary implementation
# ---------------------------------------------------------------------------

class Prompter(Protocol):
    """What handlers need from the terminal."""

    def confirm(self, message: str, *, default: bool = False) -> bool:
        ...  # pragma: no cover

    def ask_int(self, message: str, *, default: int) -> int:
        ...  # pragma: no cover

    def text(self, message: str) -> str:
        ...  # pragma: no cover

    def pause(self) -> None:
        ...  # pragma: no cover


class QuestionaryPrompter:
    """Concrete :class:`Prompter` backed by questionary.

    Every questionary ``ask()`` returns ``None`` when the user presses
    Ctrl+C or Esc; that is surfaced as :class:`PromptCancelledError`.
    """

    def confirm(self, message: str, *, default: bool = False) -> bool:
        questionary = _import_questionary()
        answer: bool | None = questionary.confirm(message, default=default).ask()
        if answer is None:
            raise PromptCancelledError("Prompt cancelled.")
        return answer

    def ask_int(self, message: str, *, default: int) -> int:
        questionary = _import_questionary()
        raw: str | None = questionary.text(
            f"{message} (default: {default}):",
            validate=_validate_int_input,
        ).ask()
        if raw is None:
            raise PromptCancelledError("Prompt cancelled.")
        return resolve_int(raw, default)

    def text(self, message: str) -> str:
        questionary = _import_questionary()
        raw: str | None = questionary.text(message).ask()
        if raw is None:
            raise PromptCancelledError("Prompt cancelled.")
        return raw

    def pause(self) -> None:
        self.text("Press Enter to continue...")
