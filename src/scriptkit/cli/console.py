"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so
bootstrap paths (``--help``, ``--version``) keep working when Rich is
not installed.  Two proxies are exported: :data:`console` writes
diagnostics to stderr, :data:`output` writes command results to stdout.
"""

from __future__ import annotations

import sys
from typing import Any

from scriptkit.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True, color: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr (or stdout)."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr, no_color=not color)


def escape_markup(text: object) -> str:
	"""Escape Rich markup in *text* so user input renders literally.

	Without Rich nothing interprets markup, so the text is returned as is.
	"""
	try:
		from rich.markup import escape
	except ModuleNotFoundError:
		return str(text)
	return escape(str(text))


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool) -> None:
		self.stderr = stderr
		self.color = True

	def _stream(self) -> Any:
		return sys.stderr if self.stderr else sys.stdout

	def print(self, *objects: object, **options: Any) -> None:
		"""Render with Rich when available, else plain ``print``.

		*options* are forwarded to ``rich.console.Console.print`` and
		ignored by the fallback.
		"""
		try:
			rich_console = get_rich_console(stderr=self.stderr, color=self.color)
		except EnvironmentError:
			print(*objects, file=self._stream())
			return
		rich_console.print(*objects, **options)

	def print_json(self, text: str) -> None:
		"""Pretty-print a JSON document, highlighted when Rich is available."""
		try:
			rich_console = get_rich_console(stderr=self.stderr, color=self.color)
		except EnvironmentError:
			print(text, file=self._stream())
			return
		rich_console.print_json(text)


console = _ConsoleProxy(stderr=True)
output = _ConsoleProxy(stderr=False)
