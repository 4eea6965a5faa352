"""CLI console helpers with optional Rich support.

Rich is imported lazily so that parsing, usage errors and ``--help``
keep working even when it is not installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

_HANDLER_NAME = "flagscan-console"


def rich_available() -> bool:
	"""Return ``True`` when ``rich.console`` can be imported."""
	try:
		from rich.console import Console  # noqa: F401
	except ModuleNotFoundError:
		return False
	return True


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	from rich.console import Console

	return Console(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		if not rich_available():
			print(*objects, file=sys.stderr)
			return
		get_rich_console().print(*objects)


console = _ConsoleProxy()


def escape(text: object) -> str:
	"""Return *text* with Rich markup brackets escaped.

	User-supplied tokens must pass through here before they are
	embedded in a markup string.  Without Rich the text is returned
	unchanged, since the plain fallback does not interpret markup.
	"""
	if not rich_available():
		return str(text)
	from rich.markup import escape as rich_escape

	return rich_escape(str(text))


def configure_logging(level: int = logging.DEBUG) -> None:
	"""Send ``flagscan`` log records to stderr.

	Uses :class:`rich.logging.RichHandler` when Rich is installed.
	Calling it again only updates the level.
	"""
	logger = logging.getLogger("flagscan")
	if any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
		logger.setLevel(level)
		return

	handler: logging.Handler
	if rich_available():
		from rich.logging import RichHandler

		handler = RichHandler(console=get_rich_console(), show_path=False)
		handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
	else:
		handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

	handler.set_name(_HANDLER_NAME)
	logger.addHandler(handler)
	logger.setLevel(level)
