"""CLI console helpers with optional Rich support.

Diagnostics always go to stderr; stdout is reserved for the single
result line.  Rich is imported lazily so ``--help`` and ``--version``
keep working even when it is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from latest_change.exceptions import EnvironmentError


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
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects, highlight=False)

	def print_error(self, message: str, hint: str | None = None) -> None:
		"""Render an ``Error:`` line and optional ``Hint:`` line.

		*message* and *hint* are printed verbatim, never parsed as markup.
		"""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(f"Error: {message}", file=sys.stderr)
			if hint:
				print(f"Hint: {hint}", file=sys.stderr)
			return

		from rich.markup import escape

		rich_console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)
		if hint:
			rich_console.print(f"[yellow]Hint:[/yellow] {escape(hint)}", highlight=False)


console = _ConsoleProxy()
