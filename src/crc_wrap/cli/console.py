"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``help``, ``--version``) remain
functional even when Rich is not installed.

Severity helpers (:func:`info`, :func:`success`, :func:`warning`,
:func:`error`) prefix each message with a color-coded marker.  Raw
output from ``crc`` is not routed through here; it goes to stdout
verbatim via :func:`echo_raw`.
"""

from __future__ import annotations

import sys
from typing import Any

from crc_wrap.exceptions import EnvironmentError

_LEVEL_STYLES: dict[str, str] = {
	"INFO": "bold blue",
	"SUCCESS": "bold green",
	"WARNING": "bold yellow",
	"ERROR": "bold red",
}


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr.

	Soft wrapping keeps long paths and URLs on one line.
	"""
	console_class = _load_rich_console_class()
	return console_class(stderr=True, soft_wrap=True)


def escape_markup(text: str) -> str:
	"""Return *text* safe to embed in a Rich markup string.

	Without Rich nothing parses markup, so *text* is returned unchanged.
	"""
	try:
		from rich.markup import escape
	except ModuleNotFoundError:
		return text
	return escape(text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)

	def log(self, level: str, message: str) -> None:
		"""Print *message* behind a ``LEVEL:`` marker.

		The message body is escaped so that brackets in paths or option
		ranges are never read as Rich markup.
		"""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(f"{level}: {message}", file=sys.stderr)
			return
		from rich.markup import escape

		style = _LEVEL_STYLES.get(level, "bold")
		rich_console.print(f"[{style}]{level}:[/{style}] {escape(message)}")

	def clear(self) -> None:
		"""Clear the terminal when Rich is available; no-op otherwise."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			return
		rich_console.clear()


console = _ConsoleProxy()


def info(message: str) -> None:
	console.log("INFO", message)


def success(message: str) -> None:
	console.log("SUCCESS", message)


def warning(message: str) -> None:
	console.log("WARNING", message)


def error(message: str) -> None:
	console.log("ERROR", message)


def echo_raw(text: str) -> None:
	"""Write external-tool output to stdout exactly as received."""
	sys.stdout.write(text)
	if text and not text.endswith("\n"):
		sys.stdout.write("\n")
	sys.stdout.flush()
